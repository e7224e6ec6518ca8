"""Unit tests for the example secret check."""

import pytest

from eth_seed_keys.known_secrets import EXAMPLE_SECRETS, is_example_secret
from tests.unit.vectors import EXAMPLE_SEED_32, EXAMPLE_SEED_64, SEED_11


def test_exactly_two_example_secrets():
    assert EXAMPLE_SECRETS == {EXAMPLE_SEED_32, EXAMPLE_SEED_64}


@pytest.mark.parametrize("raw_seed", [EXAMPLE_SEED_32, EXAMPLE_SEED_64])
def test_example_secret_flagged(raw_seed):
    assert is_example_secret(raw_seed) is True


@pytest.mark.parametrize("raw_seed", [EXAMPLE_SEED_32, EXAMPLE_SEED_64])
def test_example_secret_hex_case_ignored(raw_seed):
    assert is_example_secret("0x" + raw_seed[2:].upper()) is True


@pytest.mark.parametrize(
    "raw_seed",
    [
        SEED_11,
        "",
        EXAMPLE_SEED_32[2:],
        "0X" + EXAMPLE_SEED_32[2:],
        "0X" + EXAMPLE_SEED_64[2:].upper(),
        EXAMPLE_SEED_32 + "0",
        EXAMPLE_SEED_64[:-1],
        EXAMPLE_SEED_32 + " ",
        "not a seed",
    ],
)
def test_other_seeds_not_flagged(raw_seed):
    assert is_example_secret(raw_seed) is False


@pytest.mark.parametrize("raw_seed", [None, 123, b"0x3a10"])
def test_never_raises(raw_seed):
    assert is_example_secret(raw_seed) is False
