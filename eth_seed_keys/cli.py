"""
Console entry point: eth-seed-keys [--seed 0x...]

Without --seed the seed is read from an interactive prompt.
"""

import argparse
import logging
import sys

from colorama import Fore, Style, just_fix_windows_console

from eth_seed_keys.core import DerivedKeys, derive_keys
from eth_seed_keys.errors import SeedKeysError
from eth_seed_keys.known_secrets import EXAMPLE_SECRET_WARNING
from eth_seed_keys.seed import SeedMode, seed_hex_body

PUBLIC_KEY_UNAVAILABLE_TEXT = "Could not determine (eth_keys backend incompatible)"

_MODE_MESSAGES = {
    SeedMode.HASHED: "Processing 64-byte seed with SHA-256...",
    SeedMode.DIRECT: "Using 32-byte seed directly...",
}


def _color(color: str, text: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eth-seed-keys",
        description="Generate Ethereum keys from a hex seed",
    )
    parser.add_argument("--seed", help="hex seed starting with 0x (prompted if omitted)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _ask(question, stdin):
    if stdin is None:
        return input(_color(Fore.CYAN, question))
    print(_color(Fore.CYAN, question), end="", flush=True)
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _error(message: str) -> int:
    print(f"\n{_color(Fore.RED, 'ERROR:')} {message}", file=sys.stderr)
    return 1


def print_keys(result: DerivedKeys) -> None:
    if result.public_key_available:
        public_key = _color(Fore.YELLOW, result.public_key)
    else:
        public_key = _color(Style.DIM, PUBLIC_KEY_UNAVAILABLE_TEXT)

    print(_color(Fore.GREEN, "\n===== DERIVED KEYS ====="))
    print(_color(Fore.CYAN, "Private Key:"), _color(Fore.YELLOW, result.private_key))
    print(_color(Fore.CYAN, "Public Key: "), public_key)
    print(_color(Fore.CYAN, "Address:    "), _color(Fore.YELLOW, result.address))

    if result.is_example_secret:
        print(_color(Fore.RED, f"\n{EXAMPLE_SECRET_WARNING}"))


def main(argv=None, stdin=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    just_fix_windows_console()

    # 📥 Seed
    raw_seed = args.seed
    if not raw_seed:
        print(_color(Fore.CYAN, "=== Ethereum Key Generator ==="))
        print(_color(Style.DIM, "Generate Ethereum keys from a hex seed\n"))
        try:
            raw_seed = _ask("Enter your seed (starting with 0x): ", stdin)
        except (EOFError, KeyboardInterrupt):
            return _error("No seed entered")

    # 🔐 Derivation
    try:
        hex_length = len(seed_hex_body(raw_seed))
        print(_color(Style.DIM, f"Detected seed length: {hex_length} characters ({hex_length / 2:g} bytes)"))
        result = derive_keys(raw_seed)
    except SeedKeysError as e:
        return _error(str(e))

    # 📤 Output
    print(_color(Fore.YELLOW, _MODE_MESSAGES[result.seed.mode]))
    print_keys(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
