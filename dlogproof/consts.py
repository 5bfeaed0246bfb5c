"""
Fixed protocol parameters.

Proofs are only meaningful between parties that agree on every value in this module.
"""

from hashlib import sha256

from petlib.ec import EcGroup


# OpenSSL NID of secp256k1.
SECP256K1_NID = 714

DEFAULT_GROUP = EcGroup(SECP256K1_NID)

HASH_FUNCTION = sha256

# Party identifiers enter the transcript as unsigned 64-bit little-endian integers.
PID_FORMAT = "<Q"
PID_MAX = 2 ** 64

# Compressed point: one parity byte followed by the x coordinate.
POINT_BYTES = 33

# Encoding of the point at infinity as exported by OpenSSL.
INFINITY_BYTES = b"\x00"

SCALAR_BYTES = (DEFAULT_GROUP.order().num_bits() + 7) // 8
