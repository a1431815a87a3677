"""Exception hierarchy for dlogproof."""

from __future__ import annotations


class DLogProofError(Exception):
    """Base class for all dlogproof errors."""


class RandomnessUnavailable(DLogProofError):
    """The secure randomness source failed while drawing a nonce."""


class MalformedProof(DLogProofError, ValueError):
    """A proof that cannot be decoded or holds non-canonical values."""


class InvalidPublicInput(DLogProofError, ValueError):
    """A public key or generator that is the identity or foreign to the group."""


class ConfigError(DLogProofError):
    """Configuration loading or validation error."""
