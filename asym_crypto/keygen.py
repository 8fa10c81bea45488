"""Fresh RSA key pairs, independent of any keystore.

Sizes under 1024 bits (e.g. 512) are accepted so test fixtures stay fast.
They are trivially factorable and must never be a production default.
"""

import math

from Crypto.Util.number import getPrime
from cryptography.hazmat.primitives.asymmetric import rsa

from .errors import UnsupportedConfigurationError
from .keys import KeyPair

DEFAULT_KEY_SIZE = 2048
MIN_KEY_SIZE = 256
PUBLIC_EXPONENT = 65537

# Smallest size cryptography's own generator accepts.
_BACKEND_MIN_KEY_SIZE = 1024


def _generate_small_private_key(key_size: int, public_exponent: int) -> rsa.RSAPrivateKey:
    p_bits = key_size // 2
    q_bits = key_size - p_bits
    while True:
        p = getPrime(p_bits)
        q = getPrime(q_bits)
        if p == q or (p * q).bit_length() != key_size:
            continue
        if math.gcd(public_exponent, (p - 1) * (q - 1)) != 1:
            continue
        break

    if p < q:
        p, q = q, p
    d = pow(public_exponent, -1, math.lcm(p - 1, q - 1))
    numbers = rsa.RSAPrivateNumbers(
        p=p,
        q=q,
        d=d,
        dmp1=rsa.rsa_crt_dmp1(d, p),
        dmq1=rsa.rsa_crt_dmq1(d, q),
        iqmp=rsa.rsa_crt_iqmp(p, q),
        public_numbers=rsa.RSAPublicNumbers(public_exponent, p * q),
    )
    try:
        return numbers.private_key()
    except ValueError as e:
        raise UnsupportedConfigurationError(f"Backend refused a {key_size}-bit RSA key") from e


def generate_key_pair(key_size: int = DEFAULT_KEY_SIZE, public_exponent: int = PUBLIC_EXPONENT) -> KeyPair:
    """Generate an RSA key pair whose modulus is exactly key_size bits."""
    if not isinstance(key_size, int) or isinstance(key_size, bool) or key_size <= 0:
        raise ValueError("key_size must be a positive integer")
    if public_exponent not in (3, 65537):
        raise UnsupportedConfigurationError("public_exponent must be 3 or 65537")
    if key_size < MIN_KEY_SIZE:
        raise UnsupportedConfigurationError(
            f"Cannot generate RSA keys below {MIN_KEY_SIZE} bits (requested {key_size})"
        )

    if key_size < _BACKEND_MIN_KEY_SIZE:
        private_key = _generate_small_private_key(key_size, public_exponent)
    else:
        try:
            private_key = rsa.generate_private_key(public_exponent=public_exponent, key_size=key_size)
        except ValueError as e:
            raise UnsupportedConfigurationError(f"Cannot generate a {key_size}-bit RSA key: {e}") from e

    return KeyPair(public_key=private_key.public_key(), private_key=private_key)
