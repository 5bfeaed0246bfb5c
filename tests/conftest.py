import pytest

from dlogproof.consts import DEFAULT_GROUP


@pytest.fixture
def group():
    return DEFAULT_GROUP


@pytest.fixture
def keypair(group):
    x = group.order().random()
    return x, x * group.generator()
