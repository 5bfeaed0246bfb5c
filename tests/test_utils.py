import pytest

from petlib.bn import Bn

from dlogproof.consts import SCALAR_BYTES, POINT_BYTES
from dlogproof.exceptions import DecodingError, RandomSourceError
from dlogproof.utils import (
    get_random_scalar,
    point_from_bytes,
    point_to_bytes,
    scalar_from_bytes,
    scalar_to_bytes,
)


def test_random_scalars_in_range(group):
    order = group.order()
    values = [get_random_scalar(group) for _ in range(10)]
    assert all(0 <= v < order for v in values)
    assert len(set(int(v) for v in values)) == len(values)


def test_random_source_failure(monkeypatch, group):
    def fail(self):
        raise Exception("RAND failure")

    monkeypatch.setattr(Bn, "random", fail)
    with pytest.raises(RandomSourceError):
        get_random_scalar(group)


def test_scalar_bytes(group):
    s = group.order() - 1
    data = scalar_to_bytes(s)
    assert len(data) == SCALAR_BYTES
    assert scalar_from_bytes(data) == s


def test_scalar_to_bytes_rejects_unreduced(group):
    with pytest.raises(ValueError):
        scalar_to_bytes(group.order())
    with pytest.raises(ValueError):
        scalar_to_bytes(Bn(-1))


def test_scalar_from_bytes_rejects_order(group):
    with pytest.raises(DecodingError):
        scalar_from_bytes(group.order().binary())


def test_point_bytes(group):
    pt = 1234 * group.generator()
    data = point_to_bytes(pt)
    assert len(data) == POINT_BYTES
    assert point_from_bytes(data) == pt


def test_point_at_infinity(group):
    inf = group.infinite()
    assert point_from_bytes(point_to_bytes(inf)) == inf


def test_point_from_bytes_rejects_garbage():
    with pytest.raises(DecodingError):
        point_from_bytes(b"\x02" + b"\xff" * 32)
    with pytest.raises(DecodingError):
        point_from_bytes(b"\x02" * 10)


def test_scalar_length_matches_order(group):
    assert SCALAR_BYTES == 32
    assert len(group.order().binary()) == SCALAR_BYTES


def test_bad_group_not_reported_as_random_failure():
    with pytest.raises(AttributeError):
        get_random_scalar(group=object())
