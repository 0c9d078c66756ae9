"""
Shared configuration for prover_order.

Defines report discovery defaults, the pseudo-prover that is never ranked,
logging settings, environment variable names, and run metadata.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone

__version__ = "0.1.0"

# Verification reports are written one per compilation unit, e.g. pkg.spark.
DEFAULT_REPORT_EXTENSION = ".spark"

# Marks checks discharged without calling a real prover.
TRIVIAL_PROVER = "Trivial"

OUTPUT_FORMATS = ("text", "csv", "json", "markdown")
DEFAULT_OUTPUT_FORMAT = "text"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Environment overrides (a .env file in the working directory is honoured).
ENV_LOG_LEVEL = "PROVER_ORDER_LOG_LEVEL"
ENV_EXCLUDE = "PROVER_ORDER_EXCLUDE"


@dataclass(frozen=True)
class RunMetadata:
    """Stamps each analysis run with version and timestamp."""
    version: str
    generated_at: str


def build_metadata(version: str = __version__) -> RunMetadata:
    return RunMetadata(
        version=version,
        generated_at=datetime.now(timezone.utc).isoformat(),
    )


def env_log_level(default: str = "INFO") -> str:
    """Log level from PROVER_ORDER_LOG_LEVEL; unknown names fall back to `default`."""
    level = os.environ.get(ENV_LOG_LEVEL, default).strip().upper()
    # getLevelName() maps a registered name to its number, anything else to a str.
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


def env_excluded_provers() -> tuple[str, ...]:
    """Extra provers to leave out of the ranking, from PROVER_ORDER_EXCLUDE."""
    raw = os.environ.get(ENV_EXCLUDE, "")
    return tuple(name.strip() for name in raw.split(",") if name.strip())
