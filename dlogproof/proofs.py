"""
Non-interactive Schnorr proof of knowledge of a discrete logarithm.

Proves knowledge of  x  such that  Y = x·G  without revealing x.  The
interactive Schnorr identification protocol is made non-interactive via
Fiat-Shamir in the Random Oracle Model; the challenge binds the session
and party identifiers of a :class:`~dlogproof.context.ProofContext`
together with  G,  Y  and the commitment, so a proof cannot be replayed
under another session, party, key or generator.

Both operations are pure: the prover's only effect is drawing one nonce
from the injected randomness source.

References
----------
- Schnorr (1989). "Efficient Identification and Signatures for Smart
  Cards."  CRYPTO 1989.
- Fiat, Shamir (1986). "How to Prove Yourself: Practical Solutions to
  Identification and Signature Problems."  CRYPTO 1986.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .context import ProofContext
from .curve import SECP256K1, Scalar
from .errors import InvalidPublicInput, MalformedProof
from .group import Group
from .hash import HashFunction, derive_challenge, sha512_digest
from .nonce import (
    DEFAULT_NONCE_ATTEMPTS,
    RandomnessSource,
    sample_nonzero_scalar,
    system_randomness,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DLogProof:
    """
    Non-interactive proof of knowledge of  x  such that  Y = x·G.

    Transcript: (T, s)  where  T = k·G,  s = k + c·x,
    c = H(tag, sid, pid, G, Y, T).
    Verification:  s·G  ==  T + c·Y.
    """

    commitment: Any
    response: Scalar

    @staticmethod
    def prove(
        context: ProofContext,
        secret: Scalar,
        public_key: Any,
        generator: Optional[Any] = None,
        *,
        group: Group = SECP256K1,
        hash_fn: HashFunction = sha512_digest,
        randomness: RandomnessSource = system_randomness,
        nonce_attempts: int = DEFAULT_NONCE_ATTEMPTS,
    ) -> DLogProof:
        """
        Produce a proof for  (secret, public_key = secret·generator).

        Parameters
        ----------
        context : ProofContext
            Session and party the proof is bound to.
        secret : Scalar
            The witness *x*.  Consistency with *public_key* is the
            caller's precondition and is not checked.
        public_key : group element
            The statement *Y*.
        generator : group element, optional
            Base *G*; defaults to the group generator.
        group : Group
            Group the elements live in (secp256k1 by default).
        hash_fn, randomness
            Injected hash and randomness collaborators.

        Raises
        ------
        RandomnessUnavailable
            If no nonce could be drawn.  No proof is produced.
        ValueError
            If *secret* is a scalar of a different group, or *hash_fn*
            is narrower than the scalar field.
        """
        G = group.generator() if generator is None else generator
        if isinstance(secret, Scalar):
            if secret.order != group.order:
                raise ValueError("secret is not a scalar of this group")
            x = secret
        else:
            x = group.scalar(secret)
        k = sample_nonzero_scalar(group, randomness, nonce_attempts)
        T = k * G
        c = derive_challenge(context, G, public_key, T, group=group, hash_fn=hash_fn)
        s = k + c * x
        logger.debug("produced dlog proof on %s", group.name)
        return DLogProof(commitment=T, response=s)

    def verify(
        self,
        context: ProofContext,
        public_key: Any,
        generator: Optional[Any] = None,
        *,
        group: Group = SECP256K1,
        hash_fn: HashFunction = sha512_digest,
    ) -> bool:
        """
        Verify this proof against statement  Y = public_key.

        Check:  s·G  ==  T + c·Y.

        Malformed proofs and degenerate public inputs are rejected, never
        raised: the caller only learns pass or fail.
        """
        G = group.generator() if generator is None else generator
        try:
            _check_proof(self, group)
            _check_public_input(public_key, G, group)
        except (MalformedProof, InvalidPublicInput) as exc:
            logger.debug("dlog proof rejected: %s", exc)
            return False

        try:
            c = derive_challenge(
                context, G, public_key, self.commitment, group=group, hash_fn=hash_fn,
            )
        except ValueError as exc:
            logger.warning("dlog proof rejected: %s", exc)
            return False
        lhs = self.response * G
        rhs = self.commitment + (c * public_key)
        ok = lhs == rhs
        if not ok:
            logger.debug("dlog proof rejected: verification equation failed")
        return ok

    # wire form ---------------------------------------------------------------
    def to_bytes(self) -> bytes:
        """``enc(commitment) ‖ enc(response)``, both fixed width."""
        return self.commitment.to_bytes() + self.response.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes, group: Group = SECP256K1) -> DLogProof:
        """Decode the wire form; raises ``MalformedProof`` on any defect."""
        size = group.element_size
        if len(data) != size + group.scalar_size:
            raise MalformedProof(
                f"proof must be {size + group.scalar_size} bytes, got {len(data)}"
            )
        try:
            T = group.element_from_bytes(data[:size])
            s = group.scalar_from_bytes(data[size:])
        except ValueError as exc:
            raise MalformedProof(str(exc)) from exc
        proof = cls(commitment=T, response=s)
        _check_proof(proof, group)
        return proof


def verify_encoded(
    context: ProofContext,
    data: bytes,
    public_key: Any,
    generator: Optional[Any] = None,
    *,
    group: Group = SECP256K1,
    hash_fn: HashFunction = sha512_digest,
) -> bool:
    """Decode a proof received off the wire and verify it."""
    try:
        proof = DLogProof.from_bytes(data, group)
    except MalformedProof as exc:
        logger.debug("dlog proof rejected: %s", exc)
        return False
    return proof.verify(context, public_key, generator, group=group, hash_fn=hash_fn)


# ── validation ──────────────────────────────────────────────────────────
def _check_proof(proof: DLogProof, group: Group) -> None:
    T, s = proof.commitment, proof.response
    if not group.is_element(T):
        raise MalformedProof("commitment is not a group element")
    if T.is_identity():
        raise MalformedProof("commitment is the identity")
    if not isinstance(s, Scalar) or s.order != group.order:
        raise MalformedProof("response is not a scalar of this group")


def _check_public_input(public_key: Any, generator: Any, group: Group) -> None:
    for name, element in (("public key", public_key), ("generator", generator)):
        if not group.is_element(element):
            raise InvalidPublicInput(f"{name} is not a group element")
        if element.is_identity():
            raise InvalidPublicInput(f"{name} is the identity")
