import argparse
import getpass
import logging
import os

from asym_crypto import (
    AsymCryptoError,
    DEFAULT_KEY_SIZE,
    build_store,
    generate_key_pair,
    get_config,
    load_store,
    self_signed_certificate,
)
from asym_crypto.transform import CONFIGS
from asym_crypto.diagnostics import parse_target, probe
from asym_crypto.orchestrator import report_round_trip, run_round_trip

# Set up logging configuration
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

log = logging.getLogger('asym')

DEFAULT_KEYSTORE_PATH = '~/.asym/samples.ks'
DEFAULT_ALIAS = 'asymmetric-sample-rsa'

KEYSTORE_ENV = 'ASYM_KEYSTORE'
STORE_PASSWORD_ENV = 'ASYM_STORE_PASSWORD'
KEY_PASSWORD_ENV = 'ASYM_KEY_PASSWORD'


def _resolve_password(value, env_name, prompt):
    if value:
        return value
    if os.environ.get(env_name):
        return os.environ[env_name]
    return getpass.getpass(prompt)


def _init_store(path, alias, store_password, key_password, bits):
    path = os.path.expanduser(path)
    if os.path.exists(path):
        raise FileExistsError(f"Keystore '{path}' already exists")
    key_pair = generate_key_pair(bits)
    certificate = self_signed_certificate(key_pair.private_key, alias)
    data = build_store([(alias, key_pair.private_key, certificate, key_password)], store_password)

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, 'wb') as f:
        f.write(data)
    return path


def build_parser():
    parser = argparse.ArgumentParser(description="RSA keystore round-trip tool")

    parser.add_argument('-s', '--keystore', default=os.environ.get(KEYSTORE_ENV, DEFAULT_KEYSTORE_PATH),
                        help=f'Keystore file, Default:{DEFAULT_KEYSTORE_PATH} (env {KEYSTORE_ENV})')
    parser.add_argument('-a', '--alias', default=DEFAULT_ALIAS, help=f'Key alias, Default:{DEFAULT_ALIAS}')
    parser.add_argument('--store-password', help=f'Keystore password (env {STORE_PASSWORD_ENV})')
    parser.add_argument('--key-password', help=f'Key entry password (env {KEY_PASSWORD_ENV})')

    parser.add_argument('-t', '--text', help='Secret text to round-trip, Default: random 64-bit token')
    parser.add_argument('--transformation', default='RSA/NONE/NoPadding', choices=sorted(CONFIGS),
                        help='Algorithm/mode/padding, Default: RSA/NONE/NoPadding (no semantic padding)')

    parser.add_argument('--genrsakey', type=int, metavar='BITS', help='Also generate an RSA key pair of BITS')
    parser.add_argument('--init-store', action='store_true', help='Create a keystore with a fresh key under the alias')
    parser.add_argument('--bits', type=int, default=DEFAULT_KEY_SIZE, help=f'Key size for --init-store, Default:{DEFAULT_KEY_SIZE}')

    parser.add_argument('--probe', metavar='HOST:PORT', help='Check TCP reachability of HOST:PORT')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Parameter validation
    if args.genrsakey is not None and args.genrsakey <= 0:
        parser.error("--genrsakey requires a positive number of bits.")
    if args.bits <= 0:
        parser.error("--bits must be positive.")
    target = None
    if args.probe:
        try:
            target = parse_target(args.probe)
        except ValueError as e:
            parser.error(f"--probe: {e}")

    store_password = _resolve_password(args.store_password, STORE_PASSWORD_ENV, "Keystore password: ")
    key_password = _resolve_password(args.key_password, KEY_PASSWORD_ENV, "Key password: ")

    try:
        if args.init_store:
            path = _init_store(args.keystore, args.alias, store_password, key_password, args.bits)
            log.info("Keystore with alias '%s' saved to '%s'", args.alias, path)
            return 0

        log.debug("Loading keystore '%s'", args.keystore)
        store = load_store(args.keystore, store_password)
        result = run_round_trip(
            store,
            args.alias,
            key_password,
            secret=args.text,
            config=get_config(args.transformation),
            generate_bits=args.genrsakey,
        )
        report_round_trip(result, log)
    except (AsymCryptoError, OSError) as e:
        log.error("%s: %s", type(e).__name__, e)
        log.debug("details", exc_info=True)
        return 1

    if target is not None:
        outcome = probe(*target)
        if outcome.reachable:
            log.info("We can reach %s:%d", outcome.host, outcome.port)
        else:
            log.warning("Cannot reach %s:%d: %s", outcome.host, outcome.port, outcome.error)

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
