"""RSA encrypt/decrypt under a fixed algorithm/mode/padding triple.

The default, RSA_NONE_NOPADDING, is textbook RSA: no semantic padding, so
ciphertexts are deterministic and malleable. It is kept as the reference
configuration on purpose. Pass RSA_ECB_OAEP_SHA256 for anything real.

Encrypting under one configuration and decrypting under another is a caller
error, not something this module tries to detect.
"""

from dataclasses import dataclass
from typing import Dict

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .errors import KeyMismatchError, TransformError, UnsupportedConfigurationError


@dataclass(frozen=True)
class TransformConfig:
    algorithm: str
    mode: str
    padding: str

    @property
    def transformation(self) -> str:
        return f"{self.algorithm}/{self.mode}/{self.padding}"

    def __str__(self) -> str:
        return self.transformation


RSA_NONE_NOPADDING = TransformConfig('RSA', 'NONE', 'NoPadding')
RSA_ECB_PKCS1PADDING = TransformConfig('RSA', 'ECB', 'PKCS1Padding')
RSA_ECB_OAEP_SHA256 = TransformConfig('RSA', 'ECB', 'OAEPWithSHA-256AndMGF1Padding')

DEFAULT_CONFIG = RSA_NONE_NOPADDING

CONFIGS: Dict[str, TransformConfig] = {
    c.transformation: c for c in (RSA_NONE_NOPADDING, RSA_ECB_PKCS1PADDING, RSA_ECB_OAEP_SHA256)
}

_OAEP_HASH_LEN = 32


def get_config(transformation) -> TransformConfig:
    if isinstance(transformation, TransformConfig):
        transformation = transformation.transformation
    try:
        return CONFIGS[transformation]
    except KeyError as e:
        raise UnsupportedConfigurationError(f"Unsupported transformation '{transformation}'") from e


def _padding_for(config: TransformConfig):
    if config == RSA_ECB_PKCS1PADDING:
        return padding.PKCS1v15()
    if config == RSA_ECB_OAEP_SHA256:
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        )
    raise UnsupportedConfigurationError(f"No padding implementation for '{config}'")


def modulus_byte_size(key) -> int:
    return (key.key_size + 7) // 8


def max_plaintext_size(key, config: TransformConfig = DEFAULT_CONFIG) -> int:
    config = get_config(config)
    k = modulus_byte_size(key)
    if config == RSA_NONE_NOPADDING:
        return k - 1
    if config == RSA_ECB_PKCS1PADDING:
        return k - 11
    return k - 2 * _OAEP_HASH_LEN - 2


class AsymmetricTransform:
    """Stateless encrypt/decrypt bound to one TransformConfig."""

    def __init__(self, config: TransformConfig = DEFAULT_CONFIG):
        self.config = get_config(config)

    def __repr__(self) -> str:
        return f"AsymmetricTransform({self.config.transformation!r})"

    def encrypt(self, public_key, plaintext: bytes) -> bytes:
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise KeyMismatchError(
                f"{self.config} expects an RSA public key, got {type(public_key).__name__}"
            )
        if not isinstance(plaintext, (bytes, bytearray)):
            raise TypeError("plaintext must be bytes")
        limit = max_plaintext_size(public_key, self.config)
        if len(plaintext) > limit:
            raise TransformError(
                f"Plaintext of {len(plaintext)} bytes exceeds the {limit}-byte limit of "
                f"{self.config} with a {public_key.key_size}-bit key"
            )

        if self.config == RSA_NONE_NOPADDING:
            numbers = public_key.public_numbers()
            m = int.from_bytes(plaintext, 'big')
            c = pow(m, numbers.e, numbers.n)
            return c.to_bytes(modulus_byte_size(public_key), 'big')

        try:
            return public_key.encrypt(bytes(plaintext), _padding_for(self.config))
        except ValueError as e:
            raise TransformError(f"Encryption failed: {e}") from e

    def decrypt(self, private_key, ciphertext: bytes) -> bytes:
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise KeyMismatchError(
                f"{self.config} expects an RSA private key, got {type(private_key).__name__}"
            )
        if not isinstance(ciphertext, (bytes, bytearray)):
            raise TypeError("ciphertext must be bytes")
        k = modulus_byte_size(private_key)
        if len(ciphertext) != k:
            raise TransformError(
                f"Ciphertext must be {k} bytes for a {private_key.key_size}-bit key, got {len(ciphertext)}"
            )

        if self.config == RSA_NONE_NOPADDING:
            numbers = private_key.private_numbers()
            n = numbers.public_numbers.n
            c = int.from_bytes(ciphertext, 'big')
            if c >= n:
                raise TransformError("Ciphertext is out of range for the key modulus")
            m = pow(c, numbers.d, n)
            # Leading zero bytes of the plaintext are not recoverable here.
            return m.to_bytes((m.bit_length() + 7) // 8, 'big')

        try:
            return private_key.decrypt(bytes(ciphertext), _padding_for(self.config))
        except ValueError as e:
            raise TransformError("Decryption failed: padding check rejected the ciphertext") from e


def encrypt(public_key, plaintext: bytes, *, config: TransformConfig = DEFAULT_CONFIG) -> bytes:
    return AsymmetricTransform(config).encrypt(public_key, plaintext)


def decrypt(private_key, ciphertext: bytes, *, config: TransformConfig = DEFAULT_CONFIG) -> bytes:
    return AsymmetricTransform(config).decrypt(private_key, ciphertext)
