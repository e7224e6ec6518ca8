"""
Publicly disclosed example seeds.

Keys derived from these are known to everyone and must never hold real funds.
"""

from typing import Final, FrozenSet

from eth_seed_keys.seed import SEED_PREFIX

EXAMPLE_SECRETS: Final[FrozenSet[str]] = frozenset(
    {
        # 32-byte example, used directly
        "0x3a1076bf45ab87712ad64ccb3b10217737f7faacbf2872e88fdd9a537d8fe266",
        # 64-byte example, hashed with SHA-256
        "0x3a1076bf45ab87712ad64ccb3b10217737f7faacbf2872e88fdd9a537d8fe266"
        "4c1a8a2c16c6c31400bcbab9bbe6b313986a61a43e9d2232d95d6aa335d319e8",
    }
)

EXAMPLE_SECRET_WARNING: Final[str] = "WARNING: You used an example key. Never use this for real assets!"


def is_example_secret(raw_seed: str) -> bool:
    """True if ``raw_seed`` is one of EXAMPLE_SECRETS (hex digit case ignored)."""
    if not isinstance(raw_seed, str) or not raw_seed.startswith(SEED_PREFIX):
        return False
    return SEED_PREFIX + raw_seed[len(SEED_PREFIX):].lower() in EXAMPLE_SECRETS
