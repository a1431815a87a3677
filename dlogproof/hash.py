"""
Fiat-Shamir transcript and challenge derivation.

The challenge is a hash of a transcript that starts with a constant
protocol tag, so outputs cannot collide with any other protocol that
hashes the same points.  Every variable-length field is length-prefixed
and every group element uses its fixed-width canonical encoding, so the
byte string parses back into its fields in exactly one way:

    lp(TAG) ‖ lp(sid) ‖ pid ‖ enc(G) ‖ enc(Y) ‖ enc(T)

    lp(b)   = uint32_be(len b) ‖ b
    pid     = 0x00 ‖ uint64_be(id)     integer party id
            = 0x01 ‖ lp(id)            byte-string party id

The digest is read big-endian and reduced modulo the group order.  The
default SHA-512 digest is twice the width of a 256-bit scalar field, so
the reduction bias is below  2^-256.
"""

from __future__ import annotations

import hashlib
from typing import Any, Callable

from .context import PartyId, ProofContext
from .curve import Scalar
from .group import Group

HashFunction = Callable[[bytes], bytes]

# ── domain tag ──────────────────────────────────────────────────────────
DOMAIN_TAG = b"Schnorr DLOG proof v1"

_PID_INT = b"\x00"
_PID_BYTES = b"\x01"

_HASHES = {
    "sha512": hashlib.sha512,
    "sha384": hashlib.sha384,
    "sha256": hashlib.sha256,
    "sha3_512": hashlib.sha3_512,
    "blake2b": hashlib.blake2b,
}


def sha512_digest(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


def hash_function(name: str) -> HashFunction:
    """Look up a named hash; raises ``ValueError`` for unknown names."""
    try:
        ctor = _HASHES[name]
    except KeyError:
        raise ValueError(f"unsupported hash {name!r}") from None
    if name == "sha512":
        return sha512_digest

    def digest(data: bytes) -> bytes:
        return ctor(data).digest()

    digest.__name__ = f"{name}_digest"
    return digest


# ── encoding helpers ────────────────────────────────────────────────────
def _length_prefixed(data: bytes) -> bytes:
    if len(data) >= 2**32:
        raise ValueError("transcript field too long")
    return len(data).to_bytes(4, "big") + data


def encode_party_id(party_id: PartyId) -> bytes:
    """Type-tagged, unambiguous encoding of a party identifier."""
    if isinstance(party_id, int):
        return _PID_INT + party_id.to_bytes(8, "big")
    return _PID_BYTES + _length_prefixed(party_id)


def build_transcript(
    context: ProofContext,
    generator: Any,
    public_key: Any,
    commitment: Any,
) -> bytes:
    """Canonical byte transcript hashed into the challenge."""
    return b"".join((
        _length_prefixed(DOMAIN_TAG),
        _length_prefixed(context.session_id),
        encode_party_id(context.party_id),
        generator.to_bytes(),
        public_key.to_bytes(),
        commitment.to_bytes(),
    ))


def derive_challenge(
    context: ProofContext,
    generator: Any,
    public_key: Any,
    commitment: Any,
    *,
    group: Group,
    hash_fn: HashFunction = sha512_digest,
) -> Scalar:
    r"""
    Schnorr challenge  c = H(transcript) mod q.

    Used identically by prover and verifier.  Raises ``ValueError`` when
    *hash_fn* produces a digest narrower than the scalar field.
    """
    digest = hash_fn(build_transcript(context, generator, public_key, commitment))
    if len(digest) * 8 < group.order.bit_length():
        raise ValueError("hash digest is narrower than the scalar field")
    return Scalar.from_bytes_reduce(digest, group.order)
