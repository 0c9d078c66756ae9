"""
Timing Aggregator — one pass over a ProofTree into per-file, per-prover stats.

For every attempt the (file key, prover) accumulator is looked up, created
empty on first use, and updated: valid attempts add to success time and
raise the success / step maxima, anything else adds to failed time. Every
proof item also offers its source file spelling to the name resolver for
its file key.

Sums and maxima commute, so the stats do not depend on traversal order.
The display name does (see names.py).
"""

from __future__ import annotations

import logging

from prover_order.models import FileTimings, Outcome, ProofTree, TimingStats
from prover_order.names import representative_name
from prover_order.steps import normalize_steps

logger = logging.getLogger(__name__)


def aggregate_timings(tree: ProofTree) -> dict[str, FileTimings]:
    """Accumulate timing stats for every (file key, prover) seen in `tree`.

    Returns:
        file key → FileTimings (representative name + prover → TimingStats).
        Built from scratch on each call.
    """
    files: dict[str, FileTimings] = {}
    spellings: dict[str, list[str]] = {}
    attempt_count = 0

    for entity in tree.entities():
        for item in tree.proof_items(entity.index):
            timings = files.setdefault(item.file_key, FileTimings())
            spellings.setdefault(item.file_key, []).append(item.file)

            for attempt in tree.attempts(item.index):
                stats = timings.provers.setdefault(attempt.prover, TimingStats())
                attempt_count += 1
                if attempt.outcome is Outcome.VALID:
                    stats.success += attempt.time
                    stats.max_success = max(stats.max_success, attempt.time)
                    stats.max_steps = max(
                        stats.max_steps,
                        normalize_steps(attempt.prover, attempt.steps),
                    )
                else:
                    stats.failed += attempt.time

    # Spellings are folded in the order the items were visited.
    for key, timings in files.items():
        timings.name = representative_name(spellings[key])

    logger.debug(
        "Aggregated %d attempts into %d files", attempt_count, len(files)
    )
    return files
