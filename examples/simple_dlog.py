"""
Proof of knowledge of a discrete logarithm:
PK{ x: y = x * g }

The proof is bound to a session id and a party id, which the verifier supplies again.
"""

from dlogproof import DLogProof, get_random_scalar
from dlogproof.consts import DEFAULT_GROUP

g = DEFAULT_GROUP.generator()

sid = "sid"
pid = 1

# The caller owns the key pair.
x = get_random_scalar()
y = x * g

proof = DLogProof.prove(sid, pid, x, y)
assert proof.verify(sid, pid, y)

# Another public point, or another party, is rejected.
y_other = get_random_scalar() * g
assert not proof.verify(sid, pid, y_other)
assert not proof.verify(sid, pid + 1, y)
