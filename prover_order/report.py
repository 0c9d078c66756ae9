"""
Report Renderer — formats a ranked analysis for people and tools.

Formats:
  text     : one block per file with a suggested --prover= switch
  csv      : one row per (file, prover), rank included
  json     : the full AnalysisRun, metadata included
  markdown : a table per file

Renderers return strings; write_report() puts one on disk.
"""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path

from prover_order.models import FileData
from prover_order.pipeline import AnalysisRun

CSV_HEADER = ["file", "rank", "prover", "success", "failed", "max_success", "max_steps"]


def render_text(files: list[FileData]) -> str:
    lines: list[str] = []
    for file_data in files:
        lines.append(file_data.name)
        width = max(len(p.prover) for p in file_data.provers)
        for rank, prover_data in enumerate(file_data.provers, 1):
            stats = prover_data.stats
            lines.append(
                f"  {rank}. {prover_data.prover:{width}s}  "
                f"success {_format_seconds(stats.success)}  "
                f"failed {_format_seconds(stats.failed)}  "
                f"max {_format_seconds(stats.max_success)}  "
                f"steps {stats.max_steps}"
            )
        lines.append(f"  suggested: {prover_switch(file_data)}")
        lines.append("")
    return "\n".join(lines)


def render_csv(files: list[FileData]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for file_data in files:
        for rank, prover_data in enumerate(file_data.provers, 1):
            stats = prover_data.stats
            writer.writerow([
                file_data.name,
                str(rank),
                prover_data.prover,
                f"{stats.success:.2f}",
                f"{stats.failed:.2f}",
                f"{stats.max_success:.2f}",
                str(stats.max_steps),
            ])
    return buffer.getvalue()


def render_json(run: AnalysisRun) -> str:
    return json.dumps(run.to_dict(), indent=2, ensure_ascii=False) + "\n"


def render_markdown(run: AnalysisRun) -> str:
    """Render an AnalysisRun as a markdown document."""
    lines: list[str] = []

    lines.append("# Prover Order Report")
    lines.append("")
    lines.append(f"Generated: {run.metadata.generated_at}")
    lines.append(f"Reports analyzed: {len(run.report_paths)}")
    lines.append(f"Files ranked: {len(run.files)}")
    lines.append("")

    for file_data in run.files:
        lines.append(f"## {file_data.name}")
        lines.append("")
        lines.append("| Rank | Prover | Success | Failed | Max success | Max steps |")
        lines.append("|------|--------|---------|--------|-------------|-----------|")
        for rank, prover_data in enumerate(file_data.provers, 1):
            stats = prover_data.stats
            lines.append(
                f"| {rank} | {prover_data.prover} "
                f"| {_format_seconds(stats.success)} "
                f"| {_format_seconds(stats.failed)} "
                f"| {_format_seconds(stats.max_success)} "
                f"| {stats.max_steps} |"
            )
        lines.append("")
        lines.append(f"Suggested: `{prover_switch(file_data)}`")
        lines.append("")

    return "\n".join(lines)


def render(run: AnalysisRun, fmt: str) -> str:
    if fmt == "text":
        return render_text(run.files)
    if fmt == "csv":
        return render_csv(run.files)
    if fmt == "json":
        return render_json(run)
    if fmt == "markdown":
        return render_markdown(run)
    raise ValueError(f"Unknown output format: {fmt}")


def write_report(content: str, path: Path) -> Path:
    """Write rendered output to `path`. Returns the file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def prover_switch(file_data: FileData) -> str:
    """Command-line switch listing the file's provers in ranked order."""
    return "--prover=" + ",".join(p.prover.lower() for p in file_data.provers)


def _format_seconds(seconds: float) -> str:
    return f"{seconds:.2f}s"
