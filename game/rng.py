"""Deterministic per-phase random source.

Each (session, day, phase) triple maps to its own stream: the three counters
are packed as 4-byte big-endian integers, hashed with SHA-256, and the digest
seeds a ``random.Random``. Replaying a triple replays every draw made from it,
in the same order.
"""

import hashlib
import random
import struct
from typing import Optional, Sequence

from game.rules import MAX_SEATS, ROLE_TEMPLATE, Phase, Role


def derive_seed(session_id: int, day: int, phase_code: int) -> bytes:
    """Return the 32-byte seed for one (session, day, phase) triple."""
    preimage = struct.pack(">III", session_id, day, phase_code)
    return hashlib.sha256(preimage).digest()


class PhaseRng:
    """
    Seeded stream shared by every draw within one resolve.

    The generator is a Mersenne Twister (``random.Random``) seeded with the
    digest as an integer; it is not counter-based. Determinism comes from the
    seed alone.
    """

    def __init__(self, seed: bytes):
        self.seed = seed
        self._random = random.Random(int.from_bytes(seed, "big"))

    @classmethod
    def for_phase(cls, session_id: int, day: int, phase: Phase | int) -> "PhaseRng":
        code = phase.code if isinstance(phase, Phase) else phase
        return cls(derive_seed(session_id, day, code))

    def draw_uniform(self, n: int) -> int:
        """Integer in [0, n)."""
        return self._random.randrange(n)

    def draw_inclusive(self, hi: int) -> int:
        """Integer in [0, hi]."""
        return self._random.randint(0, hi)

    def pick(self, items: Sequence[int]) -> Optional[int]:
        """Uniformly pick one item; an empty list yields None without drawing."""
        if not items:
            return None
        return items[self.draw_uniform(len(items))]

    def pick_excluding(self, items: Sequence[int], exclude: int) -> Optional[int]:
        return self.pick([v for v in items if v != exclude])


def shuffle_roles(session_id: int) -> list[Role]:
    """Fisher-Yates shuffle of the role template, seeded from (session, 0, 0)."""
    rng = PhaseRng.for_phase(session_id, 0, 0)
    roles = list(ROLE_TEMPLATE)
    for i in range(MAX_SEATS - 1, 0, -1):
        j = rng.draw_inclusive(i)
        roles[i], roles[j] = roles[j], roles[i]
    return roles
