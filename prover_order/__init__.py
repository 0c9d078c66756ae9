"""
prover_order — prover trial order from verification report timings.

Reads the per-unit JSON reports written by a formal proof tool, collects
how long each prover spent succeeding and failing on each source file, and
ranks the provers so the cheapest useful one is tried first.

Pipeline:
  Discovery → Loader (ProofTree) → Aggregator → Ranking → Renderer
"""

from prover_order.config import __version__
from prover_order.models import FileData, ProofTree, ProverData, TimingStats
from prover_order.ranking import analyze

__all__ = [
    "FileData",
    "ProofTree",
    "ProverData",
    "TimingStats",
    "analyze",
    "__version__",
]
