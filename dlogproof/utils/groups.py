"""
Scalar sampling and canonical byte codecs for group elements and scalars.
"""

from petlib.bn import Bn
from petlib.ec import EcPt

from dlogproof.consts import DEFAULT_GROUP, INFINITY_BYTES, POINT_BYTES, SCALAR_BYTES
from dlogproof.exceptions import DecodingError, RandomSourceError


def get_random_scalar(group=None):
    """
    Draw a uniformly random scalar modulo the group order.

    >>> x = get_random_scalar()
    >>> 0 <= x < DEFAULT_GROUP.order()
    True

    Raises:
        RandomSourceError: if the OpenSSL random generator fails.
    """
    if group is None:
        group = DEFAULT_GROUP
    order = group.order()
    try:
        return order.random()
    except Exception as e:
        # petlib reports OpenSSL failures as bare Exceptions.
        raise RandomSourceError("Failed to sample a random scalar") from e


def ensure_bn(x):
    """
    Ensure that value is big number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    """
    if isinstance(x, Bn):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return Bn(x)
    raise TypeError("Expected an integer or Bn. Got: {}".format(type(x).__name__))


def scalar_to_bytes(s, group=None):
    """
    Fixed-length big-endian encoding of a scalar.

    >>> scalar_to_bytes(Bn(1)).hex()[-4:]
    '0001'
    >>> len(scalar_to_bytes(Bn(0)))
    32
    """
    if group is None:
        group = DEFAULT_GROUP
    if s < 0 or s >= group.order():
        raise ValueError("Scalar is not reduced modulo the group order")
    return s.binary().rjust(SCALAR_BYTES, b"\x00")


def scalar_from_bytes(data, group=None):
    """
    Parse a fixed-length big-endian scalar, rejecting values not below the order.

    >>> scalar_from_bytes(bytes(31) + b"\\x07")
    7
    """
    if group is None:
        group = DEFAULT_GROUP
    if len(data) != SCALAR_BYTES:
        raise DecodingError(
            "Scalar must be {} bytes, got {}".format(SCALAR_BYTES, len(data))
        )
    s = Bn.from_binary(data)
    if s >= group.order():
        raise DecodingError("Scalar is not below the group order")
    return s


def point_to_bytes(pt):
    """
    Compressed encoding of a group element.

    >>> len(point_to_bytes(DEFAULT_GROUP.generator()))
    33
    """
    return pt.export()


def point_from_bytes(data, group=None):
    """
    Parse a compressed group element, rejecting bytes that are not a point on the curve.

    >>> g = DEFAULT_GROUP.generator()
    >>> point_from_bytes(point_to_bytes(g)) == g
    True
    """
    if group is None:
        group = DEFAULT_GROUP
    if len(data) != POINT_BYTES and data != INFINITY_BYTES:
        raise DecodingError(
            "Point must be {} bytes, got {}".format(POINT_BYTES, len(data))
        )
    try:
        return EcPt.from_binary(data, group)
    except Exception as e:
        raise DecodingError("Bytes do not encode a point on the curve") from e
