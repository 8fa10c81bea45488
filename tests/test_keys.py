from concurrent.futures import ThreadPoolExecutor

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from asym_crypto import (
    KeyAuthError,
    KeyMismatchError,
    KeyNotFoundError,
    KeyPair,
    get_key_pair,
    get_private_key,
    get_public_key,
    key_algorithm,
    open_store,
)

from conftest import ALIAS, CERT_ALIAS, KEY_PASSWORD, STORE_PASSWORD


@pytest.fixture(scope="module")
def store(store_bytes):
    return open_store(store_bytes, STORE_PASSWORD)


def test_resolve_private_and_public_key(store, key_pair_1024):
    private_key = get_private_key(store, ALIAS, KEY_PASSWORD)
    public_key = get_public_key(store, ALIAS)
    assert isinstance(private_key, rsa.RSAPrivateKey)
    assert isinstance(public_key, rsa.RSAPublicKey)
    assert public_key.public_numbers() == key_pair_1024.public_key.public_numbers()


def test_get_key_pair(store):
    pair = get_key_pair(store, ALIAS, KEY_PASSWORD.encode())
    assert pair.algorithm == 'RSA'
    assert pair.key_size == 1024
    assert pair.modulus_byte_size == 128


@pytest.mark.parametrize("passphrase", [KEY_PASSWORD, "wrong", ""])
def test_missing_alias_is_never_an_auth_error(store, passphrase):
    with pytest.raises(KeyNotFoundError):
        get_private_key(store, "no-such-alias", passphrase)
    with pytest.raises(KeyNotFoundError):
        get_public_key(store, "no-such-alias")


@pytest.mark.parametrize("passphrase", ["wrong", STORE_PASSWORD, "", None])
def test_wrong_entry_passphrase(store, passphrase):
    with pytest.raises(KeyAuthError):
        get_private_key(store, ALIAS, passphrase)


def test_certificate_entry_has_no_private_key(store):
    with pytest.raises(KeyNotFoundError):
        get_private_key(store, CERT_ALIAS, KEY_PASSWORD)
    assert isinstance(get_public_key(store, CERT_ALIAS), rsa.RSAPublicKey)


def test_empty_alias(store):
    with pytest.raises(ValueError):
        get_private_key(store, "", KEY_PASSWORD)


def test_key_pair_rejects_mismatched_halves(key_pair_512, key_pair_1024):
    with pytest.raises(KeyMismatchError):
        KeyPair(public_key=key_pair_512.public_key, private_key=key_pair_1024.private_key)

    ec_key = ec.generate_private_key(ec.SECP256R1())
    with pytest.raises(KeyMismatchError):
        KeyPair(public_key=ec_key.public_key(), private_key=key_pair_1024.private_key)
    assert key_algorithm(ec_key) == 'EC'


@pytest.mark.parametrize("fixture", ["store_bytes", "jks_bytes"])
def test_concurrent_lookups_share_one_store(request, fixture, key_pair_1024):
    shared = open_store(request.getfixturevalue(fixture), STORE_PASSWORD)
    expected = key_pair_1024.private_key.private_numbers()

    def resolve(i):
        if i % 3 == 0:
            with pytest.raises(KeyAuthError):
                get_private_key(shared, ALIAS, "wrong")
            return None
        return get_key_pair(shared, ALIAS, KEY_PASSWORD).private_key.private_numbers()

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(resolve, range(24)))

    assert [r for r in results if r is not None] == [expected] * 16
    assert sorted(shared.aliases()) == sorted([ALIAS, CERT_ALIAS])
