import pytest

from tests.unit.vectors import SEED_11


@pytest.fixture
def seed_11():
    return SEED_11


@pytest.fixture
def secret_11():
    return bytes.fromhex("11" * 32)
