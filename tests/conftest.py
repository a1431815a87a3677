"""Pytest configuration and shared fixtures."""

import pytest

from dlogproof import G, ModPGroup, ProofContext, SECP256K1, Scalar


@pytest.fixture
def fixed_randomness():
    """Factory for randomness sources that replay the given draws in order."""

    def factory(*draws: bytes):
        pending = list(draws)

        def source(n: int) -> bytes:
            return pending.pop(0)

        return source

    return factory


@pytest.fixture
def toy_group() -> ModPGroup:
    """Order-11 subgroup of Z_23^* generated by 4.  Test use only."""
    return ModPGroup(p=23, q=11, g=4, name="toy-23")


@pytest.fixture
def context() -> ProofContext:
    return ProofContext(session_id=b"test_sid", party_id=12345)


@pytest.fixture
def keypair():
    x = Scalar(0x3C1D5E7F00112233445566778899AABBCCDDEEFF0123456789ABCDEF01234567)
    return x, x * G


@pytest.fixture
def secp256k1():
    return SECP256K1
