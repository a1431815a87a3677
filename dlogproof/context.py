"""Domain-separation context bound into every proof challenge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

PARTY_ID_MAX = 2**64

PartyId = Union[int, bytes]


@dataclass(frozen=True)
class ProofContext:
    """
    Session and party a proof is bound to.

    ``session_id`` is an application-chosen byte string (``str`` is
    UTF-8 encoded).  ``party_id`` identifies the claimed prover, either
    as an unsigned 64-bit integer or as raw bytes.
    """

    session_id: bytes
    party_id: PartyId = 0

    def __post_init__(self) -> None:
        if isinstance(self.session_id, str):
            object.__setattr__(self, "session_id", self.session_id.encode("utf-8"))
        elif isinstance(self.session_id, bytearray):
            object.__setattr__(self, "session_id", bytes(self.session_id))
        elif not isinstance(self.session_id, bytes):
            raise ValueError("session_id must be bytes or str")

        pid = self.party_id
        if isinstance(pid, bool):
            raise ValueError("party_id must be an int or bytes")
        if isinstance(pid, int):
            if not 0 <= pid < PARTY_ID_MAX:
                raise ValueError("integer party_id must fit in 64 bits")
        elif isinstance(pid, bytearray):
            object.__setattr__(self, "party_id", bytes(pid))
        elif not isinstance(pid, bytes):
            raise ValueError("party_id must be an int or bytes")
