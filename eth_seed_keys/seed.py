"""
Seed normalization: raw hex seed text -> 32-byte secret.

The mode is inferred from the seed length alone:

- 64..127 hex characters: the first 64 characters are the secret (DIRECT)
- 128+ hex characters: SHA-256 of the decoded seed is the secret (HASHED)

The threshold counts characters, not bytes, so a 127-character seed is still
DIRECT.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from cryptography.hazmat.primitives import hashes

from eth_seed_keys.errors import InvalidFormatError, TooShortError

logger = logging.getLogger(__name__)

SEED_PREFIX: Final[str] = "0x"
SECRET_SIZE: Final[int] = 32
MIN_SEED_HEX_CHARS: Final[int] = 2 * SECRET_SIZE
HASH_THRESHOLD_HEX_CHARS: Final[int] = 128

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


class SeedMode(str, Enum):
    """How the secret was obtained from the seed."""

    DIRECT = "direct"
    HASHED = "hashed"


@dataclass(frozen=True)
class NormalizedSeed:
    secret: bytes
    hex_length: int
    mode: SeedMode

    @property
    def byte_length(self) -> float:
        return self.hex_length / 2

    def __repr__(self) -> str:
        # keep the secret out of tracebacks and logs
        return f"NormalizedSeed(hex_length={self.hex_length}, mode={self.mode.value})"


def _sha256(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


def _decode_hex(body: str) -> bytes:
    """Decode hex, dropping a trailing unpaired nibble."""
    return bytes.fromhex(body[: len(body) - len(body) % 2])


def seed_hex_body(raw_seed: str) -> str:
    """
    Hex digits of ``raw_seed`` after the ``0x`` prefix.

    Raises:
        InvalidFormatError: missing ``0x`` prefix or non-hex characters
    """
    if not raw_seed or not raw_seed.startswith(SEED_PREFIX):
        raise InvalidFormatError("Seed must start with 0x")

    body = raw_seed[len(SEED_PREFIX):]
    if not _HEX_RE.fullmatch(body):
        raise InvalidFormatError("Seed must be valid hexadecimal")
    return body


def normalize_seed(raw_seed: str) -> NormalizedSeed:
    """
    Validate a raw seed and reduce it to exactly one 32-byte secret.

    Raises:
        InvalidFormatError: missing ``0x`` prefix or non-hex characters
        TooShortError: fewer than 64 hex characters after the prefix
    """
    body = seed_hex_body(raw_seed)
    hex_length = len(body)
    logger.debug("Detected seed length: %d characters (%s bytes)", hex_length, hex_length / 2)

    if hex_length < MIN_SEED_HEX_CHARS:
        raise TooShortError(
            "Seed too short! Must be at least 32 bytes (64 hex chars) after 0x prefix"
        )

    if hex_length >= HASH_THRESHOLD_HEX_CHARS:
        if hex_length % 2:
            logger.debug("Odd-length seed, trailing nibble ignored")
        logger.info("Processing long seed with SHA-256")
        return NormalizedSeed(
            secret=_sha256(_decode_hex(body)),
            hex_length=hex_length,
            mode=SeedMode.HASHED,
        )

    logger.info("Using 32-byte seed directly")
    return NormalizedSeed(
        secret=bytes.fromhex(body[:MIN_SEED_HEX_CHARS]),
        hex_length=hex_length,
        mode=SeedMode.DIRECT,
    )
