"""
Group-primitives interface consumed by the proof.

Any prime-order group can back a DLOG proof as long as it provides the
members below.  Elements returned by a group must support ``a + b``,
``scalar * a``, ``a == b``, ``a.is_identity()`` and ``a.to_bytes()``
(fixed width ``element_size``).  Two implementations ship with the
package: :class:`~dlogproof.curve.Secp256k1Group` and
:class:`~dlogproof.modp.ModPGroup`.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .curve import Scalar


@runtime_checkable
class Group(Protocol):
    """Structural type for a prime-order group of order ``order``."""

    name: str
    order: int
    scalar_size: int
    element_size: int

    def generator(self) -> Any: ...

    def identity(self) -> Any: ...

    def scalar(self, value: int) -> Scalar: ...

    def scalar_from_bytes(self, data: bytes) -> Scalar: ...

    def element_from_bytes(self, data: bytes) -> Any: ...

    def is_element(self, element: object) -> bool: ...
