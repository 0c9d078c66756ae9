"""Step normalization.

Provers report effort in their own units: CVC4 counts resource units, Z3
counts internal rlimit ticks, everything else is taken as-is. The
rescaling below puts them on a roughly comparable scale. The +1 keeps a
prover that ran with 0 reported steps distinguishable from one that never
ran (which has no accumulator at all).
"""

from __future__ import annotations

# (prefix, offset, divisor)
_STEP_SCALES: tuple[tuple[str, int, int], ...] = (
    ("CVC4", 15_000, 35),
    ("Z3", 450_000, 800),
)


def normalize_steps(prover: str, raw: int) -> int:
    """Rescale a raw step count reported by `prover`. Always >= 1."""
    if raw < 0:
        raise ValueError(f"step count must be non-negative, got {raw}")
    for prefix, offset, divisor in _STEP_SCALES:
        if prover.startswith(prefix):
            return max(raw - offset, 0) // divisor + 1
    return raw + 1
