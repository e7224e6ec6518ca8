"""
secp256k1 key pair and Ethereum address from a 32-byte secret.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from eth_keys import keys
from eth_keys.constants import SECPK1_N
from eth_keys.exceptions import ValidationError
from eth_utils import keccak, to_checksum_address

from eth_seed_keys.errors import InvalidKeyError
from eth_seed_keys.seed import SECRET_SIZE

logger = logging.getLogger(__name__)

UNCOMPRESSED_PREFIX = b"\x04"
PUBLIC_KEY_XY_SIZE = 64
ADDRESS_SIZE = 20


@dataclass(frozen=True)
class KeyPair:
    private_key: str
    public_key: Optional[str]
    address: str

    @property
    def public_key_available(self) -> bool:
        return self.public_key is not None

    def __repr__(self) -> str:
        return f"KeyPair(address={self.address})"


def checksum_address(address: str) -> str:
    """EIP-55 mixed-case form of a 20-byte hex address."""
    return to_checksum_address(address)


def public_key_to_address(public_key_xy: bytes) -> str:
    """Keccak-256 of X||Y, last 20 bytes, checksum cased."""
    if len(public_key_xy) != PUBLIC_KEY_XY_SIZE:
        raise ValueError(f"public key must be {PUBLIC_KEY_XY_SIZE} bytes, got {len(public_key_xy)}")
    return checksum_address(keccak(public_key_xy)[-ADDRESS_SIZE:])


def _serialize_public_key(public_key: keys.PublicKey) -> Optional[bytes]:
    """X||Y coordinates, or None when the backend gives another shape."""
    raw = public_key.to_bytes()
    if len(raw) != PUBLIC_KEY_XY_SIZE:
        return None
    return raw


def _validate_scalar(secret: bytes) -> None:
    if len(secret) != SECRET_SIZE:
        raise InvalidKeyError("secret not a valid curve scalar")
    if not 0 < int.from_bytes(secret, "big") < SECPK1_N:
        raise InvalidKeyError("secret not a valid curve scalar")


def derive_keypair(secret: bytes) -> KeyPair:
    """
    Build the key pair and address for ``secret``.

    An unavailable public key is not fatal: ``public_key`` is None and the
    address is taken from the key object directly.

    Raises:
        InvalidKeyError: secret is zero, >= curve order, or not 32 bytes
    """
    _validate_scalar(secret)
    try:
        private_key = keys.PrivateKey(secret)
    except ValidationError as e:
        raise InvalidKeyError("secret not a valid curve scalar") from e

    public_key = private_key.public_key
    raw = _serialize_public_key(public_key)

    if raw is None:
        logger.warning("Public key unavailable from eth_keys backend")
        return KeyPair(
            private_key=private_key.to_hex(),
            public_key=None,
            address=public_key.to_checksum_address(),
        )

    return KeyPair(
        private_key=private_key.to_hex(),
        public_key="0x" + (UNCOMPRESSED_PREFIX + raw).hex(),
        address=public_key_to_address(raw),
    )
