"""
Pipeline — discover report files, load them, and rank provers.

The CLI is a thin wrapper around run_analysis(); renderers consume the
AnalysisRun it returns.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from prover_order.config import DEFAULT_REPORT_EXTENSION, RunMetadata, build_metadata
from prover_order.discovery import find_report_files
from prover_order.loader import load_reports
from prover_order.models import FileData
from prover_order.ranking import analyze

logger = logging.getLogger(__name__)


@dataclass
class AnalysisRun:
    """Outcome of one analysis run.

    Mutable because the report list and ranking are filled in as the
    pipeline progresses.
    """
    metadata: RunMetadata
    report_paths: list[Path] = field(default_factory=list)
    files: list[FileData] = field(default_factory=list)
    excluded: tuple[str, ...] = ()
    duration_seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.metadata.version,
            "generated_at": self.metadata.generated_at,
            "reports": [str(p) for p in self.report_paths],
            "excluded": list(self.excluded),
            "duration_seconds": self.duration_seconds,
            "files": [f.to_dict() for f in self.files],
        }


def run_analysis(
    paths: Iterable[Path],
    extension: str = DEFAULT_REPORT_EXTENSION,
    exclude: Iterable[str] = (),
) -> AnalysisRun:
    """Discover, load and rank every report under `paths`.

    Raises:
        FileNotFoundError: If a path does not exist.
        ReportFormatError: If a report is malformed.
    """
    run = AnalysisRun(metadata=build_metadata(), excluded=tuple(exclude))
    start_time = time.time()

    run.report_paths = find_report_files(paths, extension)
    logger.info("Found %d report files", len(run.report_paths))

    tree = load_reports(run.report_paths)
    logger.info("Loaded %d nodes", len(tree))

    run.files = analyze(tree, exclude=run.excluded)
    run.duration_seconds = time.time() - start_time
    logger.info(
        "Ranked provers for %d files in %.2fs",
        len(run.files), run.duration_seconds,
    )
    return run
