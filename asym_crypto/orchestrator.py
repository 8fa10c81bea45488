"""Compose the core: resolve keys, run one round trip, optionally generate a pair.

Reporting goes through an injected logger-like object; the core modules never
log on their own.
"""

import base64
import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from .digest import fingerprint
from .keygen import generate_key_pair
from .keys import KeyPair, get_key_pair
from .keystore import CredentialStore, Passphrase
from .transform import DEFAULT_CONFIG, AsymmetricTransform, TransformConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundTripResult:
    secret: bytes
    ciphertext: bytes
    plaintext: bytes
    fingerprint: str
    transformation: str
    generated: Optional[KeyPair] = None

    @property
    def matches(self) -> bool:
        return self.secret == self.plaintext


def generate_secret_token() -> str:
    """Random 64-bit value as 16 hex characters."""
    return secrets.token_hex(8)


def run_round_trip(
    store: CredentialStore,
    alias: str,
    entry_passphrase: Passphrase,
    *,
    secret=None,
    config: TransformConfig = DEFAULT_CONFIG,
    generate_bits: Optional[int] = None,
) -> RoundTripResult:
    if secret is None:
        secret = generate_secret_token()
    if isinstance(secret, str):
        secret = secret.encode('utf-8')

    key_pair = get_key_pair(store, alias, entry_passphrase)
    transform = AsymmetricTransform(config)
    ciphertext = transform.encrypt(key_pair.public_key, secret)
    plaintext = transform.decrypt(key_pair.private_key, ciphertext)

    generated = generate_key_pair(generate_bits) if generate_bits is not None else None

    return RoundTripResult(
        secret=bytes(secret),
        ciphertext=ciphertext,
        plaintext=plaintext,
        fingerprint=fingerprint(key_pair.public_key),
        transformation=transform.config.transformation,
        generated=generated,
    )


def report_round_trip(result: RoundTripResult, reporter=None) -> None:
    reporter = reporter or log
    reporter.info("transformation: %s", result.transformation)
    reporter.info("key fingerprint (SHA-256): %s", result.fingerprint)
    reporter.info("initialText: %s", result.secret.decode('utf-8', errors='replace'))
    reporter.info("cipherText as Base64: %s", base64.b64encode(result.ciphertext).decode('ascii'))
    reporter.info("plaintext: %s", result.plaintext.decode('utf-8', errors='replace'))
    if not result.matches:
        reporter.warning("decrypted plaintext differs from the initial text")
    if result.generated is not None:
        reporter.info("generated %d-bit %s key pair", result.generated.key_size, result.generated.algorithm)
