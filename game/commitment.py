"""Commit-reveal hashing for hidden night actions.

commitment = SHA-256(target as u32 big-endian || nonce as u64 big-endian)

Clients build the commitment off-path and submit only the digest; at reveal
time the engine recomputes it from the plaintext pair.
"""

import hashlib
import hmac
import secrets
import struct
from typing import Optional

from game.rules import MAX_NONCE, PASS_TARGET

COMMITMENT_SIZE = 32


def compute_commitment(target: int, nonce: int) -> bytes:
    """Return the 32-byte commitment. Raises ValueError if target or nonce is out of range."""
    if not 0 <= target <= PASS_TARGET:
        raise ValueError(f"target out of u32 range: {target}")
    if not 0 <= nonce <= MAX_NONCE:
        raise ValueError(f"nonce out of u64 range: {nonce}")
    return hashlib.sha256(struct.pack(">IQ", target, nonce)).digest()


def verify_commitment(commitment: Optional[bytes], target: int, nonce: int) -> bool:
    """True iff (target, nonce) opens commitment."""
    if commitment is None:
        return False
    try:
        expected = compute_commitment(target, nonce)
    except ValueError:
        return False
    return hmac.compare_digest(expected, commitment)


def make_commitment(target: int, nonce: Optional[int] = None) -> tuple[bytes, int]:
    """Client-side helper: commit to target with a fresh random 64-bit nonce unless one is given."""
    if nonce is None:
        nonce = secrets.randbits(64)
    return compute_commitment(target, nonce), nonce
