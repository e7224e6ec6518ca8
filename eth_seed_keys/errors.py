"""Errors raised while turning a seed into keys.

Every failure is a pure function of the input seed, so none of them is
retryable.
"""


class SeedKeysError(ValueError):
    """Base class for seed and key derivation failures."""


class InvalidFormatError(SeedKeysError):
    """Seed is missing the 0x prefix or contains non-hex characters."""


class TooShortError(SeedKeysError):
    """Seed has fewer than 64 hex characters after the prefix."""


class InvalidKeyError(SeedKeysError):
    """Normalized secret is not a valid secp256k1 scalar."""
