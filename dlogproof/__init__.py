"""
dlogproof: non-interactive Schnorr proofs of knowledge of a discrete log.

A prover holding  x  with  Y = x·G  produces a proof  (T, s)  that any
verifier holding  Y  and  G  can check without learning  x.  The
interactive Schnorr identification protocol is made non-interactive via
the Fiat-Shamir transform; the challenge binds a session identifier and
a party identifier so proofs cannot be replayed across sessions or
claimed by another party.

Security: soundness under the discrete-log assumption in the Random
Oracle Model.

Quick start
-----------
::

    from dlogproof import DLogProof, ProofContext, G, sample_nonzero_scalar, SECP256K1

    x = sample_nonzero_scalar(SECP256K1)
    Y = x * G
    ctx = ProofContext(session_id=b"session-42", party_id=1)

    proof = DLogProof.prove(ctx, x, Y, G)
    assert proof.verify(ctx, Y, G)

    wire = proof.to_bytes()          # 65 bytes on secp256k1
"""

__version__ = "0.1.0"

# ── core types ──────────────────────────────────────────────────────────
from .curve import Scalar, Point, G, ORDER, SECP256K1, Secp256k1Group
from .modp import ModPElement, ModPGroup
from .group import Group
from .context import ProofContext

# ── proof ───────────────────────────────────────────────────────────────
from .proofs import DLogProof, verify_encoded

# ── collaborators ───────────────────────────────────────────────────────
from .hash import (
    DOMAIN_TAG,
    build_transcript,
    derive_challenge,
    hash_function,
    sha512_digest,
)
from .nonce import sample_nonzero_scalar, system_randomness

# ── configuration & errors ──────────────────────────────────────────────
from .config import ProofConfig, load_config
from .errors import (
    DLogProofError,
    RandomnessUnavailable,
    MalformedProof,
    InvalidPublicInput,
    ConfigError,
)

__all__ = [
    # version
    "__version__",
    # core
    "Scalar", "Point", "G", "ORDER", "SECP256K1", "Secp256k1Group",
    "ModPElement", "ModPGroup", "Group", "ProofContext",
    # proof
    "DLogProof", "verify_encoded",
    # collaborators
    "DOMAIN_TAG", "build_transcript", "derive_challenge",
    "hash_function", "sha512_digest",
    "sample_nonzero_scalar", "system_randomness",
    # configuration & errors
    "ProofConfig", "load_config",
    "DLogProofError", "RandomnessUnavailable", "MalformedProof",
    "InvalidPublicInput", "ConfigError",
]
