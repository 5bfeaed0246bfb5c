__version__ = "0.1.0"
__title__ = "dlogproof"
__author__ = "dlogproof contributors"
__email__ = "dlogproof@users.noreply.github.com"
__url__ = "https://github.com/dlogproof/dlogproof"
__license__ = "MIT"
__description__ = "Non-interactive Schnorr proofs of knowledge of a discrete logarithm over secp256k1."
__copyright__ = "2026, dlogproof contributors"


import logging

from dlogproof.transcript import hash_points
from dlogproof.proof import DLogProof, SimulationTranscript
from dlogproof.proof import prove, verify, encode, decode
from dlogproof.utils import get_random_scalar

logging.getLogger(__name__).addHandler(logging.NullHandler())
