r"""
Fiat-Shamir transcript hashing.

The challenge binds a session identifier, a party identifier and an ordered list of group
elements:

.. math:: c = H(sid \| pid \| P_0 \| ... \| P_n) \bmod q

where :math:`pid` is encoded as an unsigned 64-bit little-endian integer and each :math:`P_i`
in compressed form.

>>> from dlogproof.consts import DEFAULT_GROUP
>>> g = DEFAULT_GROUP.generator()
>>> hash_points("sid", 1, [g]) == hash_points("sid", 1, [g])
True
>>> hash_points("sid", 1, [g]) == hash_points("sid", 2, [g])
False
"""

import struct

from petlib.bn import Bn
from petlib.ec import EcPt

from dlogproof.consts import DEFAULT_GROUP, HASH_FUNCTION, PID_FORMAT, PID_MAX
from dlogproof.exceptions import HashToScalarError
from dlogproof.utils import point_to_bytes


def encode_pid(pid):
    """
    Encode a party identifier for hashing.

    >>> encode_pid(1).hex()
    '0100000000000000'
    """
    if isinstance(pid, bool) or not isinstance(pid, int):
        raise TypeError("Party id must be an integer. Got: {}".format(pid))
    if not 0 <= pid < PID_MAX:
        raise ValueError("Party id out of the unsigned 64-bit range: {}".format(pid))
    return struct.pack(PID_FORMAT, pid)


def hash_points(sid, pid, points, group=None):
    """
    Map a session id, a party id and group elements to a scalar.

    The digest is read as a big-endian integer and reduced modulo the group order, so every
    digest yields a scalar.

    Args:
        sid (str): Session identifier.
        pid (int): Party identifier in :math:`[0, 2^{64})`.
        points: Ordered group elements. Order is significant.
        group: Group the scalar lives in. Defaults to secp256k1.

    Returns:
        Bn: Challenge in :math:`[0, q)`.

    Raises:
        HashToScalarError: if a point is not an element of the group.
    """
    if group is None:
        group = DEFAULT_GROUP
    if not isinstance(sid, str):
        raise TypeError("Session id must be a string. Got: {}".format(type(sid).__name__))

    prehash = HASH_FUNCTION(sid.encode("utf-8"))
    prehash.update(encode_pid(pid))
    for pt in points:
        if not isinstance(pt, EcPt) or pt.group != group:
            raise HashToScalarError("Cannot hash a value outside the group: {!r}".format(pt))
        prehash.update(point_to_bytes(pt))

    return Bn.from_binary(prehash.digest()) % group.order()
