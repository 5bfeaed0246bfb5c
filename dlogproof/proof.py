r"""
Non-interactive proof of knowledge of a discrete logarithm.

Proves :math:`PK\{ x: Y = x G \}` over secp256k1 with a Schnorr sigma protocol, made
non-interactive with the Fiat-Shamir heuristic. The challenge is bound to a session id and a
party id so that a proof does not transfer to another session or party.

The prover draws :math:`r`, commits to :math:`T = r G`, derives
:math:`c = H(sid, pid, G, Y, T)` and responds with :math:`s = r + c x`. The verifier accepts iff
:math:`s G = T + c Y`.

>>> x = get_random_scalar()
>>> y = x * DEFAULT_GROUP.generator()
>>> proof = DLogProof.prove("sid", 1, x, y)
>>> proof.verify("sid", 1, y)
True
>>> proof.verify("sid", 2, y)
False
>>> DLogProof.decode(proof.encode()) == proof
True

"""

import json
import logging
import binascii
import warnings

import attr
from petlib.ec import EcPt

from dlogproof.consts import DEFAULT_GROUP
from dlogproof.exceptions import DecodingError
from dlogproof.transcript import hash_points
from dlogproof.utils import (
    ensure_bn,
    get_random_scalar,
    point_from_bytes,
    point_to_bytes,
    scalar_from_bytes,
    scalar_to_bytes,
)


logger = logging.getLogger(__name__)


@attr.s
class SimulationTranscript:
    """
    Simulated proof transcript.
    """

    commitment = attr.ib()
    challenge = attr.ib()
    response = attr.ib()


def _check_group_element(instance, attribute, value):
    if value.group != DEFAULT_GROUP:
        raise ValueError("{} is not an element of the proof group".format(attribute.name))


def _check_scalar_range(instance, attribute, value):
    if value < 0 or value >= DEFAULT_GROUP.order():
        raise ValueError("{} is not reduced modulo the group order".format(attribute.name))


def _unhexlify(record, field):
    try:
        value = record[field]
    except (KeyError, TypeError) as e:
        raise DecodingError("Missing field '{}'".format(field)) from e
    if not isinstance(value, str):
        raise DecodingError("Field '{}' must be a hex string".format(field))
    # Hex is canonical lowercase, so every encoding maps to a single string.
    if value != value.lower():
        raise DecodingError("Field '{}' is not lowercase hex".format(field))
    try:
        return binascii.unhexlify(value)
    except ValueError as e:
        raise DecodingError("Field '{}' is not valid hex".format(field)) from e


@attr.s(frozen=True)
class DLogProof:
    r"""
    Non-interactive proof of knowledge of a discrete logarithm.

    Holds no secret material. The session id and party id are not part of the proof; the
    verifier supplies them again.

    Args:
        t (EcPt): Commitment :math:`T = r G`.
        s (Bn): Response :math:`s = r + c x \bmod q`.
    """

    t = attr.ib(validator=[attr.validators.instance_of(EcPt), _check_group_element])
    s = attr.ib(converter=ensure_bn, validator=_check_scalar_range)

    @classmethod
    def prove(cls, sid, pid, x, y):
        """
        Construct a proof of knowledge of ``x`` such that ``y = x * g``.

        The relation between ``x`` and ``y`` is not checked. A proof for a mismatching pair is
        produced but does not verify.

        Args:
            sid (str): Session identifier.
            pid (int): Party identifier.
            x: Secret exponent, as ``Bn`` or ``int``.
            y (EcPt): Public point.

        Raises:
            RandomSourceError: if the random generator fails.
            HashToScalarError: if ``y`` is not an element of the group.
        """
        group = DEFAULT_GROUP
        order = group.order()
        g = group.generator()

        x = ensure_bn(x)
        if x < 0 or x >= order:
            warnings.warn("Secret outside of [0, order), reducing it", RuntimeWarning)
            x = x % order

        r = get_random_scalar(group)
        t = r * g
        c = hash_points(sid, pid, [g, y, t], group=group)
        s = r.mod_add(c.mod_mul(x, order), order)
        return cls(t=t, s=s)

    def challenge(self, sid, pid, y):
        """
        Recompute the Fiat-Shamir challenge bound to this proof's commitment.
        """
        g = DEFAULT_GROUP.generator()
        return hash_points(sid, pid, [g, y, self.t], group=DEFAULT_GROUP)

    def verify(self, sid, pid, y):
        """
        Verify the proof against a public point.

        Args:
            sid (str): Session identifier used when proving.
            pid (int): Party identifier used when proving.
            y (EcPt): Public point.

        Returns:
            bool: True if the proof is accepted, False otherwise.
        """
        c = self.challenge(sid, pid, y)
        g = DEFAULT_GROUP.generator()
        if self.s * g == self.t + c * y:
            return True

        logger.debug("Rejected DLOG proof for sid=%r pid=%d", sid, pid)
        return False

    @staticmethod
    def simulate(y, challenge=None):
        """
        Simulate a transcript for ``y`` without knowing its discrete logarithm.

        The response and, unless given, the challenge are drawn at random and the commitment is
        solved for. The transcript satisfies the verification identity but is not bound to a
        Fiat-Shamir hash.

        Args:
            y (EcPt): Public point.
            challenge: Optional challenge to use in the simulation.

        Returns:
            :py:class:`SimulationTranscript`
        """
        group = DEFAULT_GROUP
        g = group.generator()
        if challenge is None:
            challenge = get_random_scalar(group)
        else:
            challenge = ensure_bn(challenge) % group.order()

        response = get_random_scalar(group)
        commitment = response * g + (-challenge) * y
        return SimulationTranscript(
            commitment=commitment, challenge=challenge, response=response
        )

    @staticmethod
    def verify_simulation_consistency(transcript, y):
        """
        Check that a simulated transcript satisfies the verification identity.
        """
        g = DEFAULT_GROUP.generator()
        return transcript.response * g == transcript.commitment + transcript.challenge * y

    def encode(self):
        """
        Wire record with the compressed commitment and the fixed-length response as hex.

        Returns:
            dict: ``{"t": ..., "s": ...}``
        """
        return {
            "t": point_to_bytes(self.t).hex(),
            "s": scalar_to_bytes(self.s).hex(),
        }

    @classmethod
    def decode(cls, record):
        """
        Parse a wire record produced by :py:meth:`encode`.

        Raises:
            DecodingError: if a field is missing, is not lowercase hex of the right length, or
                does not encode a point on the curve or a scalar below the group order.
        """
        t = point_from_bytes(_unhexlify(record, "t"))
        s = scalar_from_bytes(_unhexlify(record, "s"))
        return cls(t=t, s=s)

    def to_json(self):
        return json.dumps(self.encode(), sort_keys=True)

    @classmethod
    def from_json(cls, data):
        try:
            record = json.loads(data)
        except (TypeError, ValueError) as e:
            raise DecodingError("Proof is not valid JSON") from e
        if not isinstance(record, dict):
            raise DecodingError("Proof must be a JSON object")
        return cls.decode(record)


def prove(sid, pid, x, y):
    """Construct a :py:class:`DLogProof`. See :py:meth:`DLogProof.prove`."""
    return DLogProof.prove(sid, pid, x, y)


def verify(proof, sid, pid, y):
    """Verify a :py:class:`DLogProof`. See :py:meth:`DLogProof.verify`."""
    return proof.verify(sid, pid, y)


def encode(proof):
    return proof.encode()


def decode(record):
    return DLogProof.decode(record)
