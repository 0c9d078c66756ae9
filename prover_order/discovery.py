"""Locate verification report files under a set of paths."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from prover_order.config import DEFAULT_REPORT_EXTENSION

logger = logging.getLogger(__name__)


def find_report_files(
    paths: Iterable[Path],
    extension: str = DEFAULT_REPORT_EXTENSION,
) -> list[Path]:
    """Collect report files from files and (recursively) directories.

    Args:
        paths: Files or directories. Files are kept only if their suffix
            matches `extension`; directories are searched recursively.
        extension: Report suffix, with or without the leading dot.
            Compared case-insensitively.

    Returns:
        Sorted, de-duplicated list of matching files.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    suffix = extension.lower()
    if suffix and not suffix.startswith("."):
        suffix = "." + suffix

    found: set[Path] = set()
    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f"Path not found: {path}")
        if path.is_dir():
            for candidate in path.rglob("*"):
                if candidate.is_file() and candidate.suffix.lower() == suffix:
                    found.add(candidate)
        elif path.suffix.lower() == suffix:
            found.add(path)
        else:
            logger.debug("Ignoring %s: not a %s file", path, suffix)

    return sorted(found)
