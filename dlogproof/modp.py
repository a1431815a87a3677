"""
Prime-order subgroups of  Z_p^*  (classic Schnorr groups).

The group law is multiplication modulo *p*, but elements expose the same
additive interface as secp256k1 points (``+``, ``Scalar * element``,
``is_identity()``) so the proof code is written once for both.

Small parameters such as ``ModPGroup(p=23, q=11, g=4)`` are handy for
hand-checkable test vectors.  They offer no security whatsoever.
"""

from __future__ import annotations

import hmac
from typing import Optional

from .curve import Scalar, byte_length


class ModPElement:
    """Element of the order-*q* subgroup of  Z_p^*."""

    __slots__ = ("_v", "_p", "_q")

    def __init__(self, value: int, p: int, q: int) -> None:
        self._v = value % p
        self._p = p
        self._q = q

    @property
    def value(self) -> int:
        return self._v

    def is_identity(self) -> bool:
        return self._v == 1

    def to_bytes(self) -> bytes:
        return self._v.to_bytes(byte_length(self._p), "big")

    def _same_group(self, o: ModPElement) -> bool:
        return o._p == self._p and o._q == self._q

    def __add__(self, o: ModPElement) -> ModPElement:
        if not isinstance(o, ModPElement):
            return NotImplemented
        if not self._same_group(o):
            raise ValueError("elements belong to different groups")
        return ModPElement(self._v * o._v, self._p, self._q)

    def __neg__(self) -> ModPElement:
        return ModPElement(pow(self._v, -1, self._p), self._p, self._q)

    def __sub__(self, o: ModPElement) -> ModPElement:
        return self + (-o)

    def __rmul__(self, s) -> ModPElement:
        if isinstance(s, Scalar):
            if s.order != self._q:
                raise ValueError("scalar is not in this group's scalar field")
            return ModPElement(pow(self._v, s.value, self._p), self._p, self._q)
        if isinstance(s, int):
            return ModPElement(pow(self._v, s % self._q, self._p), self._p, self._q)
        return NotImplemented

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, ModPElement) or not self._same_group(o):
            return False
        return hmac.compare_digest(self.to_bytes(), o.to_bytes())

    def __hash__(self) -> int:
        return hash((self._v, self._p))

    def __repr__(self) -> str:
        return f"ModPElement({self._v} mod {self._p})"


class ModPGroup:
    """
    Subgroup of order *q* in  Z_p^*  generated by *g*.

    Requires  q | p - 1,  g ≠ 1  and  g^q ≡ 1 (mod p).  Primality of *p*
    and *q* is the caller's responsibility.
    """

    def __init__(self, p: int, q: int, g: int, name: Optional[str] = None) -> None:
        if p < 3 or q < 2 or (p - 1) % q != 0:
            raise ValueError("q must divide p - 1")
        if not 1 < g < p or pow(g, q, p) != 1:
            raise ValueError("g does not generate a subgroup of order q")
        self.p = p
        self.order = q
        self.name = name or f"modp-{p.bit_length()}"
        self.scalar_size = byte_length(q)
        self.element_size = byte_length(p)
        self._g = ModPElement(g, p, q)

    def generator(self) -> ModPElement:
        return self._g

    def identity(self) -> ModPElement:
        return ModPElement(1, self.p, self.order)

    def element(self, value: int) -> ModPElement:
        """Wrap an integer, checking subgroup membership."""
        if not 0 < value < self.p or pow(value, self.order, self.p) != 1:
            raise ValueError("value is not in the order-q subgroup")
        return ModPElement(value, self.p, self.order)

    def scalar(self, value: int) -> Scalar:
        return Scalar(value, self.order)

    def scalar_from_bytes(self, data: bytes) -> Scalar:
        return Scalar.from_bytes(data, self.order)

    def element_from_bytes(self, data: bytes) -> ModPElement:
        if len(data) != self.element_size:
            raise ValueError(f"need {self.element_size} bytes, got {len(data)}")
        return self.element(int.from_bytes(data, "big"))

    def is_element(self, element: object) -> bool:
        return (
            isinstance(element, ModPElement)
            and element._p == self.p
            and element._q == self.order
            and 0 < element.value < self.p
            and pow(element.value, self.order, self.p) == 1
        )

    def __repr__(self) -> str:
        return f"ModPGroup(p={self.p}, q={self.order}, g={self._g.value})"
