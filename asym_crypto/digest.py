"""Standard message digests, backed by cryptography's hash primitives."""

from enum import Enum

from cryptography.hazmat.primitives import hashes, serialization

from .errors import UnsupportedConfigurationError


class DigestAlgorithm(Enum):
    SHA256 = 'sha256'
    SHA384 = 'sha384'
    SHA512 = 'sha512'
    SHA3_256 = 'sha3-256'

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        return _HASHES[self]()


_HASHES = {
    DigestAlgorithm.SHA256: hashes.SHA256,
    DigestAlgorithm.SHA384: hashes.SHA384,
    DigestAlgorithm.SHA512: hashes.SHA512,
    DigestAlgorithm.SHA3_256: hashes.SHA3_256,
}


def get_digest(name) -> DigestAlgorithm:
    if isinstance(name, DigestAlgorithm):
        return name
    try:
        return DigestAlgorithm(str(name).lower())
    except ValueError as e:
        raise UnsupportedConfigurationError(f"Unsupported digest algorithm '{name}'") from e


def digest(data: bytes, algorithm=DigestAlgorithm.SHA256) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes")
    h = hashes.Hash(get_digest(algorithm).hash_algorithm())
    h.update(bytes(data))
    return h.finalize()


def fingerprint(public_key, algorithm=DigestAlgorithm.SHA256) -> str:
    """Hex digest of the key's DER SubjectPublicKeyInfo, colon separated."""
    der = public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return digest(der, algorithm).hex(':')
