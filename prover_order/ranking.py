"""
Ranking Engine — turns aggregated timings into a per-file prover order.

Steps:
  1. Drop the Trivial pseudo-prover (and any caller-excluded provers);
     drop files left with nothing to rank.
  2. Sort each file's provers: least failed time first, then most success
     time first when failed times tie.
  3. Sort files by display name.

This is a heuristic. It only sees provers that were actually run: if an
earlier prover already discharged a check, the later ones never got a
chance on it and their stats say nothing about it.
"""

from __future__ import annotations

import functools
import logging
from typing import Iterable

from prover_order.aggregator import aggregate_timings
from prover_order.config import TRIVIAL_PROVER
from prover_order.models import FileData, FileTimings, ProofTree, ProverData

logger = logging.getLogger(__name__)


def rank_better(a: ProverData, b: ProverData) -> int:
    """Comparator: negative if `a` should be tried before `b`."""
    if a.stats.failed != b.stats.failed:
        return -1 if a.stats.failed < b.stats.failed else 1
    if a.stats.success != b.stats.success:
        return -1 if a.stats.success > b.stats.success else 1
    return 0


def file_name_order(a: FileData, b: FileData) -> int:
    """Comparator: files in ascending name order."""
    if a.name == b.name:
        return 0
    return -1 if a.name < b.name else 1


def rank_provers(
    timings: dict[str, FileTimings],
    exclude: Iterable[str] = (),
) -> list[FileData]:
    """Filter and sort aggregator output into the final recommendation."""
    excluded = {TRIVIAL_PROVER, *exclude}
    files: list[FileData] = []

    for key, file_timings in timings.items():
        provers = [
            ProverData(prover=prover, stats=stats)
            for prover, stats in file_timings.provers.items()
            if prover not in excluded
        ]
        if not provers:
            logger.debug("Skipping %s: no rankable provers", key)
            continue
        provers.sort(key=functools.cmp_to_key(rank_better))
        files.append(FileData(name=file_timings.name, provers=tuple(provers)))

    files.sort(key=functools.cmp_to_key(file_name_order))
    return files


def analyze(tree: ProofTree, exclude: Iterable[str] = ()) -> list[FileData]:
    """Aggregate `tree` and rank the result."""
    return rank_provers(aggregate_timings(tree), exclude=exclude)
