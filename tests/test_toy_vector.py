"""Hand-checkable proof on the order-11 subgroup of Z_23^*."""

import pytest

from dlogproof import DLogProof, ModPElement, ProofContext, build_transcript, verify_encoded

# x = 3, G = 4, Y = 4^3 = 18, k = 5, T = 4^5 = 12
EXPECTED_TRANSCRIPT = (
    b"\x00\x00\x00\x15" + b"Schnorr DLOG proof v1"
    + b"\x00\x00\x00\x03" + b"sid"
    + b"\x00" + b"\x00\x00\x00\x00\x00\x00\x00\x01"
    + b"\x04"
    + b"\x12"
    + b"\x0c"
)


def hash_stub(transcript: bytes) -> bytes:
    """Challenge 7 for the honest transcript, 2 for anything else."""
    return b"\x07" if transcript == EXPECTED_TRANSCRIPT else b"\x02"


@pytest.fixture
def vector(toy_group):
    ctx = ProofContext(session_id=b"sid", party_id=1)
    x = toy_group.scalar(3)
    G = toy_group.generator()
    Y = toy_group.element(18)
    return ctx, x, Y, G


def _prove(toy_group, randomness, ctx, x, Y, G):
    return DLogProof.prove(
        ctx, x, Y, G,
        group=toy_group, hash_fn=hash_stub, randomness=randomness,
    )


class TestToyVector:
    def test_transcript_layout(self, toy_group, vector):
        ctx, _, Y, G = vector
        T = toy_group.element(12)
        assert build_transcript(ctx, G, Y, T) == EXPECTED_TRANSCRIPT

    def test_public_key(self, vector):
        _, x, Y, G = vector
        assert x * G == Y

    def test_prove_produces_literal_pair(self, toy_group, vector, fixed_randomness):
        proof = _prove(toy_group, fixed_randomness(b"\x05"), *vector)
        # s = 5 + 7·3 = 26 ≡ 4 (mod 11)
        assert proof.commitment.value == 12
        assert proof.response.value == 4
        assert proof.to_bytes() == b"\x0c\x04"

    def test_literal_pair_verifies(self, toy_group, vector):
        ctx, _, Y, G = vector
        # 4^4 = 3  and  12 · 18^7 = 12 · 6 = 3  (mod 23)
        proof = DLogProof(commitment=toy_group.element(12), response=toy_group.scalar(4))
        assert proof.verify(ctx, Y, G, group=toy_group, hash_fn=hash_stub)
        assert verify_encoded(ctx, b"\x0c\x04", Y, G, group=toy_group, hash_fn=hash_stub)

    @pytest.mark.parametrize(
        "ctx",
        [
            ProofContext(session_id=b"sie", party_id=1),
            ProofContext(session_id=b"sid", party_id=2),
            ProofContext(session_id=b"sid", party_id=b"\x01"),
        ],
    )
    def test_mutated_context_rejected(self, toy_group, vector, ctx):
        _, _, Y, G = vector
        proof = DLogProof(commitment=toy_group.element(12), response=toy_group.scalar(4))
        assert not proof.verify(ctx, Y, G, group=toy_group, hash_fn=hash_stub)

    def test_mutated_public_key_rejected(self, toy_group, vector):
        ctx, _, _, G = vector
        proof = DLogProof(commitment=toy_group.element(12), response=toy_group.scalar(4))
        # 12 · 16^2 = 13 ≠ 3
        assert not proof.verify(ctx, toy_group.element(16), G, group=toy_group, hash_fn=hash_stub)

    def test_mutated_generator_rejected(self, toy_group, vector):
        ctx, _, Y, _ = vector
        proof = DLogProof(commitment=toy_group.element(12), response=toy_group.scalar(4))
        # 2^4 = 16 ≠ 12 · 18^2 = 1
        assert not proof.verify(ctx, Y, toy_group.element(2), group=toy_group, hash_fn=hash_stub)

    def test_identity_commitment_rejected(self, toy_group, vector):
        ctx, _, Y, G = vector
        assert not verify_encoded(ctx, b"\x01\x04", Y, G, group=toy_group, hash_fn=hash_stub)

    def test_response_equal_to_order_rejected(self, toy_group, vector):
        ctx, _, Y, G = vector
        assert not verify_encoded(ctx, b"\x0c\x0b", Y, G, group=toy_group, hash_fn=hash_stub)

    def test_non_member_commitment_rejected(self, toy_group, vector):
        ctx, _, Y, G = vector
        # 5 is a quadratic non-residue mod 23, outside the order-11 subgroup
        assert not verify_encoded(ctx, b"\x05\x04", Y, G, group=toy_group, hash_fn=hash_stub)


class TestNonceFreshness:
    def test_distinct_nonces_give_distinct_proofs(self, toy_group, vector, fixed_randomness):
        ctx, x, Y, G = vector
        first = DLogProof.prove(
            ctx, x, Y, G, group=toy_group, hash_fn=hash_stub,
            randomness=fixed_randomness(b"\x05"),
        )
        second = DLogProof.prove(
            ctx, x, Y, G, group=toy_group, hash_fn=hash_stub,
            randomness=fixed_randomness(b"\x03"),
        )
        # k = 3: T = 4^3 = 18, c = 2, s = 3 + 2·3 = 9
        assert second.commitment.value == 18
        assert second.response.value == 9
        assert first.commitment != second.commitment
        assert first.response != second.response

    def test_rejected_candidates_are_redrawn(self, toy_group, vector, fixed_randomness):
        ctx, x, Y, G = vector
        # 0x00 and 0x0b (= q) are not usable nonces; 0xf5 masks to 5
        proof = DLogProof.prove(
            ctx, x, Y, G, group=toy_group, hash_fn=hash_stub,
            randomness=fixed_randomness(b"\x00", b"\x0b", b"\xf5"),
        )
        assert proof.to_bytes() == b"\x0c\x04"


class TestNonMemberInputs:
    """Zero and the order-2 element -1 ≡ 22 lie outside the order-11 subgroup."""

    @pytest.fixture
    def proof(self, toy_group):
        return DLogProof(commitment=toy_group.element(12), response=toy_group.scalar(4))

    def test_is_element_checks_membership(self, toy_group):
        assert toy_group.is_element(toy_group.element(12))
        assert not toy_group.is_element(ModPElement(0, 23, 11))
        assert not toy_group.is_element(ModPElement(22, 23, 11))

    def test_zero_generator_and_key_rejected(self, toy_group, vector, proof):
        ctx = vector[0]
        zero = ModPElement(0, 23, 11)
        assert not proof.verify(ctx, zero, zero, group=toy_group, hash_fn=hash_stub)

    @pytest.mark.parametrize("value", [0, 22])
    def test_non_member_public_key_rejected(self, toy_group, vector, proof, value):
        ctx, _, _, G = vector
        Y = ModPElement(value, 23, 11)
        assert not proof.verify(ctx, Y, G, group=toy_group, hash_fn=hash_stub)

    @pytest.mark.parametrize("value", [0, 22])
    def test_non_member_generator_rejected(self, toy_group, vector, proof, value):
        ctx, _, Y, _ = vector
        G = ModPElement(value, 23, 11)
        assert not proof.verify(ctx, Y, G, group=toy_group, hash_fn=hash_stub)

    @pytest.mark.parametrize("value", [0, 22])
    def test_non_member_commitment_rejected(self, toy_group, vector, value):
        ctx, _, Y, G = vector
        forged = DLogProof(commitment=ModPElement(value, 23, 11), response=toy_group.scalar(4))
        assert not forged.verify(ctx, Y, G, group=toy_group, hash_fn=hash_stub)
