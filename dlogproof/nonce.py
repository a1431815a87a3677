"""
Nonce sampling for the prover.

Randomness is an injected dependency: any callable that takes a byte
count and returns that many bytes.  Production code uses
``secrets.token_bytes``; tests pass deterministic stand-ins.

A nonce is drawn by rejection sampling.  Each candidate is masked to the
bit length of the group order and kept only if it lies in  [1, q-1],
which gives the uniform distribution over non-zero scalars.
"""

from __future__ import annotations

import logging
import secrets
from typing import Callable

from .curve import Scalar
from .errors import RandomnessUnavailable
from .group import Group

logger = logging.getLogger(__name__)

RandomnessSource = Callable[[int], bytes]

DEFAULT_NONCE_ATTEMPTS = 64


def system_randomness(n: int) -> bytes:
    """Operating-system CSPRNG."""
    return secrets.token_bytes(n)


def sample_nonzero_scalar(
    group: Group,
    randomness: RandomnessSource = system_randomness,
    max_attempts: int = DEFAULT_NONCE_ATTEMPTS,
) -> Scalar:
    """
    Draw a uniform scalar in  [1, q-1].

    Raises ``RandomnessUnavailable`` if the source errors, returns the
    wrong number of bytes, or yields no acceptable candidate within
    *max_attempts* draws.
    """
    order = group.order
    size = group.scalar_size
    mask = (1 << order.bit_length()) - 1
    for _ in range(max_attempts):
        try:
            raw = randomness(size)
        except OSError as exc:
            logger.error("randomness source failed: %s", exc)
            raise RandomnessUnavailable("randomness source failed") from exc
        if not isinstance(raw, (bytes, bytearray)) or len(raw) != size:
            raise RandomnessUnavailable(
                f"randomness source did not return {size} bytes"
            )
        candidate = int.from_bytes(raw, "big") & mask
        if 0 < candidate < order:
            return group.scalar(candidate)
    logger.error("no usable nonce after %d draws", max_attempts)
    raise RandomnessUnavailable(f"no usable nonce after {max_attempts} draws")
