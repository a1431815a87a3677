"""
Scalars and secp256k1 group elements via libsecp256k1.

Scalar multiplication and point addition are delegated to the C library
``coincurve``, which wraps Bitcoin Core's libsecp256k1 (constant-time
scalar multiplication).  Scalar arithmetic in  Z_q  is pure Python.

``Scalar`` carries its modulus so the same type serves every group the
package supports; mixing scalars of two different orders is an error.

Install
-------
    pip install coincurve>=18.0.0

References
----------
- SEC 1 v2 §2.3.3    elliptic-curve point to octet-string conversion
- SEC 2 v2 §2.4.1    secp256k1 domain parameters
"""

from __future__ import annotations

import hmac
from typing import Optional

from coincurve import PrivateKey as _SK, PublicKey as _PK

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
FIELD_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SCALAR_BYTES = 32
COMPRESSED_BYTES = 33


def byte_length(modulus: int) -> int:
    """Fixed encoding width for values in  [0, modulus)."""
    return max(1, (modulus.bit_length() + 7) // 8)


# ── Scalar  (Z_q arithmetic) ────────────────────────────────────────────
class Scalar:
    """Element of the scalar field  Z_q.  Defaults to the secp256k1 order."""

    __slots__ = ("_v", "_q")

    def __init__(self, value: int, order: int = ORDER) -> None:
        self._q = order
        self._v = value % order

    # constructors -----------------------------------------------------------
    @classmethod
    def zero(cls, order: int = ORDER) -> Scalar:
        return cls(0, order)

    @classmethod
    def one(cls, order: int = ORDER) -> Scalar:
        return cls(1, order)

    @classmethod
    def from_bytes(cls, data: bytes, order: int = ORDER) -> Scalar:
        """Strict canonical decoding: exact width, value below *order*."""
        size = byte_length(order)
        if len(data) != size:
            raise ValueError(f"need {size} bytes, got {len(data)}")
        v = int.from_bytes(data, "big")
        if v >= order:
            raise ValueError("scalar out of range")
        return cls(v, order)

    @classmethod
    def from_bytes_reduce(cls, data: bytes, order: int = ORDER) -> Scalar:
        """Hash-output safe: reduce arbitrary length modulo *order*."""
        return cls(int.from_bytes(data, "big"), order)

    # serialisation ----------------------------------------------------------
    def to_bytes(self) -> bytes:
        return self._v.to_bytes(byte_length(self._q), "big")

    @property
    def value(self) -> int:
        return self._v

    @property
    def order(self) -> int:
        return self._q

    def is_zero(self) -> bool:
        return self._v == 0

    # arithmetic -------------------------------------------------------------
    def _check(self, o: Scalar) -> None:
        if o._q != self._q:
            raise ValueError("scalars belong to different fields")

    def __add__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        self._check(o)
        return Scalar(self._v + o._v, self._q)

    def __sub__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        self._check(o)
        return Scalar(self._v - o._v, self._q)

    def __mul__(self, o):
        if isinstance(o, Scalar):
            self._check(o)
            return Scalar(self._v * o._v, self._q)
        # group elements implement __rmul__
        return NotImplemented

    def __rmul__(self, o):
        if isinstance(o, int):
            return Scalar(o * self._v, self._q)
        return NotImplemented

    def __neg__(self) -> Scalar:
        return Scalar(-self._v, self._q)

    # comparison / hashing ---------------------------------------------------
    def __eq__(self, o: object) -> bool:
        if isinstance(o, Scalar):
            if o._q != self._q:
                return False
            return hmac.compare_digest(self.to_bytes(), o.to_bytes())
        if isinstance(o, int):
            return self._v == o % self._q
        return False

    def __hash__(self) -> int:
        return hash((self._v, self._q))

    def __bool__(self) -> bool:
        return self._v != 0

    def __repr__(self) -> str:
        h = hex(self._v)
        return f"Scalar(0x{h[2:10]}…)" if len(h) > 14 else f"Scalar({h})"


# ── Point  (secp256k1 group element via libsecp256k1) ───────────────────
class Point:
    """
    Point on secp256k1.

    The identity (point at infinity) is represented by a flag rather than
    a ``coincurve.PublicKey``; this matches the algebraic convention
    *P + O = P* and avoids library quirks around serialising the identity.
    """

    __slots__ = ("_pk", "_inf")

    def __init__(self, *, pk: Optional[_PK] = None, infinity: bool = False):
        self._pk: Optional[_PK] = pk
        self._inf: bool = infinity

    # constructors -----------------------------------------------------------
    @classmethod
    def generator(cls) -> Point:
        """Standard base point *G*."""
        return cls(pk=_SK(b"\x00" * 31 + b"\x01").public_key)

    @classmethod
    def identity(cls) -> Point:
        """Point at infinity — additive identity."""
        return cls(infinity=True)

    @classmethod
    def from_scalar(cls, s: Scalar) -> Point:
        """Compute *s · G*."""
        if s.is_zero():
            return cls.identity()
        return cls(pk=_SK(s.to_bytes()).public_key)

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """
        Deserialise SEC 1 compressed (33 B) or uncompressed (65 B).

        33 zero bytes decode to the identity.  Anything that is not a
        point on the curve raises ``ValueError``.
        """
        if len(data) not in (COMPRESSED_BYTES, 65):
            raise ValueError(f"bad point encoding length {len(data)}")
        if data == b"\x00" * COMPRESSED_BYTES:
            return cls.identity()
        try:
            return cls(pk=_PK(data))
        except Exception as exc:
            raise ValueError("not a point on secp256k1") from exc

    # serialisation ----------------------------------------------------------
    def to_bytes_compressed(self) -> bytes:
        if self._inf:
            return b"\x00" * COMPRESSED_BYTES
        return self._pk.format(compressed=True)  # type: ignore[union-attr]

    def to_bytes(self) -> bytes:
        return self.to_bytes_compressed()

    @property
    def x(self) -> int:
        if self._inf:
            return 0
        raw = self._pk.format(compressed=False)  # type: ignore[union-attr]
        return int.from_bytes(raw[1:33], "big")

    @property
    def y(self) -> int:
        if self._inf:
            return 0
        raw = self._pk.format(compressed=False)  # type: ignore[union-attr]
        return int.from_bytes(raw[33:65], "big")

    def is_identity(self) -> bool:
        return self._inf

    # group operations -------------------------------------------------------
    def _smul(self, s: Scalar) -> Point:
        """Scalar multiplication  s · self  (C speed)."""
        if s.order != ORDER:
            raise ValueError("scalar is not in the secp256k1 scalar field")
        if self._inf or s.is_zero():
            return Point.identity()
        copy = _PK(self._pk.format())  # type: ignore[union-attr]
        return Point(pk=copy.multiply(s.to_bytes()))

    def __neg__(self) -> Point:
        if self._inf:
            return self
        raw = bytearray(self._pk.format(compressed=True))  # type: ignore
        raw[0] ^= 0x01            # 0x02 ↔ 0x03 flip parity
        return Point(pk=_PK(bytes(raw)))

    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        if self._inf:
            return o
        if o._inf:
            return self
        # check for P + (-P) = O
        if self._pk.format() == (-o)._pk.format():  # type: ignore
            return Point.identity()
        return Point(pk=_PK.combine_keys(
            [self._pk, o._pk]))  # type: ignore[list-item]

    def __sub__(self, o: Point) -> Point:
        return self + (-o)

    def __rmul__(self, s) -> Point:
        if isinstance(s, Scalar):
            return self._smul(s)
        if isinstance(s, int):
            return self._smul(Scalar(s))
        return NotImplemented

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        if self._inf and o._inf:
            return True
        if self._inf or o._inf:
            return False
        return hmac.compare_digest(self.to_bytes(), o.to_bytes())

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point(0x{self.x:064x})"[:42] + "…)"


# ── group descriptor ────────────────────────────────────────────────────
class Secp256k1Group:
    """secp256k1 as a prime-order group for the DLOG proof."""

    name = "secp256k1"
    order = ORDER
    scalar_size = SCALAR_BYTES
    element_size = COMPRESSED_BYTES

    def generator(self) -> Point:
        return G

    def identity(self) -> Point:
        return Point.identity()

    def scalar(self, value: int) -> Scalar:
        return Scalar(value, ORDER)

    def scalar_from_bytes(self, data: bytes) -> Scalar:
        return Scalar.from_bytes(data, ORDER)

    def element_from_bytes(self, data: bytes) -> Point:
        if len(data) != COMPRESSED_BYTES:
            raise ValueError(f"need {COMPRESSED_BYTES} bytes, got {len(data)}")
        return Point.from_bytes(data)

    def is_element(self, element: object) -> bool:
        if not isinstance(element, Point):
            return False
        return element._inf or element._pk is not None

    def __repr__(self) -> str:
        return "Secp256k1Group()"


# ── module-level generator ──────────────────────────────────────────────
G = Point.generator()
SECP256K1 = Secp256k1Group()
