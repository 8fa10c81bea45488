"""Exception hierarchy for the asym_crypto package.

Store layer: StoreFormatError, StoreAuthError (an unreadable source raises the
builtin OSError). Key resolution: KeyNotFoundError, KeyAuthError. Transform
and generation: UnsupportedConfigurationError, KeyMismatchError, TransformError.
"""


class AsymCryptoError(Exception):
    """Base class for every error raised by asym_crypto."""


class StoreError(AsymCryptoError):
    pass


class StoreFormatError(StoreError):
    """The container is malformed or of an unsupported format."""


class StoreAuthError(StoreError):
    """The store passphrase is wrong or the integrity check failed."""


class KeyResolutionError(AsymCryptoError):
    pass


class KeyNotFoundError(KeyResolutionError):
    """The alias is absent from the store, or holds no private key."""


class KeyAuthError(KeyResolutionError):
    """The alias exists but the entry passphrase does not unlock it."""


class UnsupportedConfigurationError(AsymCryptoError):
    pass


class KeyMismatchError(AsymCryptoError):
    pass


class TransformError(AsymCryptoError):
    pass
