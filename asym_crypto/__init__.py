"""
RSA key lifecycle utilities.

High-level API:
- open_store(source, passphrase) / load_store(path, passphrase) -> CredentialStore
- get_private_key(store, alias, passphrase) / get_public_key(store, alias) / get_key_pair(...)
- encrypt(public_key, data, config=RSA_NONE_NOPADDING) -> bytes
- decrypt(private_key, data, config=RSA_NONE_NOPADDING) -> bytes
- generate_key_pair(key_size) -> KeyPair
- build_store(entries, passphrase) -> bytes

The default transformation, RSA/NONE/NoPadding, has no semantic padding and
is insecure by construction; use RSA_ECB_OAEP_SHA256 in production.

Exceptions are raised on errors instead of printing.
"""

from .errors import (
    AsymCryptoError,
    StoreError,
    StoreFormatError,
    StoreAuthError,
    KeyResolutionError,
    KeyNotFoundError,
    KeyAuthError,
    UnsupportedConfigurationError,
    KeyMismatchError,
    TransformError,
)
from .keystore import (
    CredentialStore,
    KeyEntry,
    open_store,
    load_store,
    build_store,
    self_signed_certificate,
)
from .keys import KeyPair, get_private_key, get_public_key, get_key_pair, key_algorithm
from .transform import (
    TransformConfig,
    AsymmetricTransform,
    RSA_NONE_NOPADDING,
    RSA_ECB_PKCS1PADDING,
    RSA_ECB_OAEP_SHA256,
    DEFAULT_CONFIG,
    get_config,
    encrypt,
    decrypt,
    modulus_byte_size,
    max_plaintext_size,
)
from .keygen import generate_key_pair, DEFAULT_KEY_SIZE, MIN_KEY_SIZE
from .digest import DigestAlgorithm, digest, fingerprint

__all__ = [
    "AsymCryptoError",
    "StoreError",
    "StoreFormatError",
    "StoreAuthError",
    "KeyResolutionError",
    "KeyNotFoundError",
    "KeyAuthError",
    "UnsupportedConfigurationError",
    "KeyMismatchError",
    "TransformError",
    "CredentialStore",
    "KeyEntry",
    "open_store",
    "load_store",
    "build_store",
    "self_signed_certificate",
    "KeyPair",
    "get_private_key",
    "get_public_key",
    "get_key_pair",
    "key_algorithm",
    "TransformConfig",
    "AsymmetricTransform",
    "RSA_NONE_NOPADDING",
    "RSA_ECB_PKCS1PADDING",
    "RSA_ECB_OAEP_SHA256",
    "DEFAULT_CONFIG",
    "get_config",
    "encrypt",
    "decrypt",
    "modulus_byte_size",
    "max_plaintext_size",
    "generate_key_pair",
    "DEFAULT_KEY_SIZE",
    "MIN_KEY_SIZE",
    "DigestAlgorithm",
    "digest",
    "fingerprint",
]
