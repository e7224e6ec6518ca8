"""
Seed -> keys pipeline.

normalize_seed -> derive_keypair -> is_example_secret. Any error stops the
pipeline; nothing partial is returned.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from eth_seed_keys.keypair import derive_keypair
from eth_seed_keys.known_secrets import is_example_secret
from eth_seed_keys.seed import NormalizedSeed, normalize_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedKeys:
    private_key: str
    public_key: Optional[str]
    address: str
    is_example_secret: bool
    seed: NormalizedSeed

    @property
    def public_key_available(self) -> bool:
        return self.public_key is not None

    def __repr__(self) -> str:
        return f"DerivedKeys(address={self.address}, is_example_secret={self.is_example_secret})"


def derive_keys(raw_seed: str) -> DerivedKeys:
    """
    Derive private key, public key and checksummed address from a hex seed.

    Raises:
        InvalidFormatError, TooShortError, InvalidKeyError
    """
    seed = normalize_seed(raw_seed)
    keypair = derive_keypair(seed.secret)
    example = is_example_secret(raw_seed)
    if example:
        logger.info("Seed is a publicly known example secret")

    return DerivedKeys(
        private_key=keypair.private_key,
        public_key=keypair.public_key,
        address=keypair.address,
        is_example_secret=example,
        seed=seed,
    )
