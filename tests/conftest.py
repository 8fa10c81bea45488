import hashlib

import jks
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from asym_crypto import KeyPair, build_store, generate_key_pair, self_signed_certificate

STORE_PASSWORD = "samples"
ALIAS = "asymmetric-sample-rsa"
KEY_PASSWORD = "asymmetric-sample-rsa"
CERT_ALIAS = "trusted-sample-cert"

# keep PBKDF2 cheap in tests
ITERATIONS = 1000


@pytest.fixture(scope="session")
def key_pair_1024() -> KeyPair:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=1024)
    return KeyPair(public_key=private_key.public_key(), private_key=private_key)


@pytest.fixture(scope="session")
def key_pair_512() -> KeyPair:
    return generate_key_pair(512)


@pytest.fixture(scope="session")
def key_pair_2048() -> KeyPair:
    return generate_key_pair(2048)


@pytest.fixture(scope="session")
def store_bytes(key_pair_1024: KeyPair, key_pair_512: KeyPair) -> bytes:
    certificate = self_signed_certificate(key_pair_1024.private_key, ALIAS)
    trusted = self_signed_certificate(key_pair_512.private_key, CERT_ALIAS)
    return build_store(
        [
            (ALIAS, key_pair_1024.private_key, certificate, KEY_PASSWORD),
            (CERT_ALIAS, None, trusted, None),
        ],
        STORE_PASSWORD,
        iterations=ITERATIONS,
    )


def _java_store(key_pair: KeyPair, trusted_pair: KeyPair) -> bytes:
    certificate = self_signed_certificate(key_pair.private_key, ALIAS)
    trusted = self_signed_certificate(trusted_pair.private_key, CERT_ALIAS)
    pkcs8 = key_pair.private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    key_entry = jks.PrivateKeyEntry.new(ALIAS, [certificate.public_bytes(serialization.Encoding.DER)], pkcs8)
    key_entry.encrypt(KEY_PASSWORD)
    cert_entry = jks.TrustedCertEntry.new(CERT_ALIAS, trusted.public_bytes(serialization.Encoding.DER))
    return jks.KeyStore.new('jks', [key_entry, cert_entry]).saves(STORE_PASSWORD)


@pytest.fixture(scope="session")
def jks_bytes(key_pair_1024: KeyPair, key_pair_512: KeyPair) -> bytes:
    return _java_store(key_pair_1024, key_pair_512)


@pytest.fixture(scope="session")
def jceks_bytes(jks_bytes: bytes) -> bytes:
    # pyjks only writes JKS; re-stamp the magic and the trailing SHA-1 seal.
    body = b"\xce\xce\xce\xce" + jks_bytes[4:-20]
    seal = hashlib.sha1(STORE_PASSWORD.encode("utf-16be") + b"Mighty Aphrodite" + body).digest()
    return body + seal
