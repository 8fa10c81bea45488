"""Resolve key material out of an opened CredentialStore.

Alias presence is always checked before any unlocking is attempted, so a
missing alias (KeyNotFoundError) is never reported as a bad passphrase
(KeyAuthError).
"""

from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa, x448, x25519

from .errors import KeyMismatchError, KeyNotFoundError
from .keystore import CredentialStore, Passphrase

_ALGORITHMS = (
    ((rsa.RSAPublicKey, rsa.RSAPrivateKey), 'RSA'),
    ((ec.EllipticCurvePublicKey, ec.EllipticCurvePrivateKey), 'EC'),
    ((dsa.DSAPublicKey, dsa.DSAPrivateKey), 'DSA'),
    ((ed25519.Ed25519PublicKey, ed25519.Ed25519PrivateKey), 'Ed25519'),
    ((ed448.Ed448PublicKey, ed448.Ed448PrivateKey), 'Ed448'),
    ((x25519.X25519PublicKey, x25519.X25519PrivateKey), 'X25519'),
    ((x448.X448PublicKey, x448.X448PrivateKey), 'X448'),
)


def key_algorithm(key) -> str:
    for types, name in _ALGORITHMS:
        if isinstance(key, types):
            return name
    raise KeyMismatchError(f"Unrecognised key type: {type(key).__name__}")


def _spki(public_key) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@dataclass(frozen=True)
class KeyPair:
    public_key: object
    private_key: object

    def __post_init__(self):
        public_algorithm = key_algorithm(self.public_key)
        private_algorithm = key_algorithm(self.private_key)
        if public_algorithm != private_algorithm:
            raise KeyMismatchError(
                f"Key pair halves use different algorithms: {public_algorithm} / {private_algorithm}"
            )
        if _spki(self.public_key) != _spki(self.private_key.public_key()):
            raise KeyMismatchError("Public key does not belong to the private key")

    @property
    def algorithm(self) -> str:
        return key_algorithm(self.public_key)

    @property
    def key_size(self) -> int:
        return self.public_key.key_size

    @property
    def modulus_byte_size(self) -> int:
        return (self.public_key.key_size + 7) // 8


def _require_entry(store: CredentialStore, alias: str, kind: str):
    if not alias:
        raise ValueError("alias must be a non-empty string")
    if not store.contains_alias(alias):
        raise KeyNotFoundError(f"{kind} {alias} not found in keystore")
    return store.entry(alias)


def get_private_key(store: CredentialStore, alias: str, passphrase: Passphrase):
    entry = _require_entry(store, alias, 'Private key')
    if not entry.is_key_entry:
        raise KeyNotFoundError(f"Private key {alias} not found in keystore (certificate entry)")
    return entry.unlock(passphrase)


def get_public_key(store: CredentialStore, alias: str):
    entry = _require_entry(store, alias, 'Public key')
    return entry.certificate.public_key()


def get_key_pair(store: CredentialStore, alias: str, passphrase: Passphrase) -> KeyPair:
    private_key = get_private_key(store, alias, passphrase)
    return KeyPair(public_key=get_public_key(store, alias), private_key=private_key)
