from dlogproof.utils.groups import (
    ensure_bn,
    get_random_scalar,
    point_from_bytes,
    point_to_bytes,
    scalar_from_bytes,
    scalar_to_bytes,
)
