"""
Ethereum keys from a hex seed.

Validates a ``0x`` hex seed, reduces it to a 32-byte secret and derives the
secp256k1 key pair and checksummed address.
"""

from eth_seed_keys.core import DerivedKeys, derive_keys
from eth_seed_keys.errors import (
    InvalidFormatError,
    InvalidKeyError,
    SeedKeysError,
    TooShortError,
)
from eth_seed_keys.keypair import KeyPair, checksum_address, derive_keypair, public_key_to_address
from eth_seed_keys.known_secrets import EXAMPLE_SECRETS, is_example_secret
from eth_seed_keys.seed import NormalizedSeed, SeedMode, normalize_seed, seed_hex_body

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "derive_keys",
    "DerivedKeys",
    # Seed normalization
    "normalize_seed",
    "seed_hex_body",
    "NormalizedSeed",
    "SeedMode",
    # Key derivation
    "derive_keypair",
    "KeyPair",
    "checksum_address",
    "public_key_to_address",
    # Example secrets
    "EXAMPLE_SECRETS",
    "is_example_secret",
    # Errors
    "SeedKeysError",
    "InvalidFormatError",
    "TooShortError",
    "InvalidKeyError",
]
