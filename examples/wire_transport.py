"""
Sending a proof over the wire as a record of two hex strings.
"""

from dlogproof import DLogProof, prove, verify, get_random_scalar
from dlogproof.consts import DEFAULT_GROUP

g = DEFAULT_GROUP.generator()
x = get_random_scalar()
y = x * g

# Prover side.
proof = prove("session-42", 7, x, y)
message = proof.to_json()

# Verifier side.
received = DLogProof.from_json(message)
assert received == proof
assert verify(received, "session-42", 7, y)
