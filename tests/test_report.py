from __future__ import annotations

import csv
import io
import json
from pathlib import Path

import pytest

from prover_order.config import RunMetadata
from prover_order.models import FileData, ProverData, TimingStats
from prover_order.pipeline import AnalysisRun
from prover_order.report import (
    CSV_HEADER,
    prover_switch,
    render,
    render_csv,
    render_json,
    render_markdown,
    render_text,
    write_report,
)


def _run() -> AnalysisRun:
    files = [
        FileData(
            name="pkg.ads",
            provers=(
                ProverData("CVC4", TimingStats(success=2.0, failed=0.0, max_success=2.0, max_steps=1)),
                ProverData("Z3", TimingStats(success=0.0, failed=5.0)),
            ),
        ),
        FileData(
            name="util.adb",
            provers=(ProverData("altergo", TimingStats(success=0.125, max_success=0.125, max_steps=4)),),
        ),
    ]
    return AnalysisRun(
        metadata=RunMetadata(version="0.1.0", generated_at="2026-01-01T00:00:00+00:00"),
        report_paths=[Path("obj/pkg.spark"), Path("obj/util.spark")],
        files=files,
    )


def test_prover_switch() -> None:
    assert prover_switch(_run().files[0]) == "--prover=cvc4,z3"


def test_render_text() -> None:
    text = render_text(_run().files)
    lines = text.splitlines()

    assert lines[0] == "pkg.ads"
    assert lines[1] == "  1. CVC4  success 2.00s  failed 0.00s  max 2.00s  steps 1"
    assert lines[2] == "  2. Z3    success 0.00s  failed 5.00s  max 0.00s  steps 0"
    assert lines[3] == "  suggested: --prover=cvc4,z3"
    assert "util.adb" in lines
    assert "  suggested: --prover=altergo" in lines


def test_render_csv() -> None:
    rows = list(csv.reader(io.StringIO(render_csv(_run().files))))

    assert rows[0] == CSV_HEADER
    assert rows[1] == ["pkg.ads", "1", "CVC4", "2.00", "0.00", "2.00", "1"]
    assert rows[2] == ["pkg.ads", "2", "Z3", "0.00", "5.00", "0.00", "0"]
    assert rows[3][:3] == ["util.adb", "1", "altergo"]
    assert len(rows) == 4


def test_render_json() -> None:
    payload = json.loads(render_json(_run()))

    assert payload["version"] == "0.1.0"
    assert payload["reports"] == ["obj/pkg.spark", "obj/util.spark"]
    assert payload["files"][0] == {
        "file": "pkg.ads",
        "provers": [
            {"prover": "CVC4", "success": 2.0, "failed": 0.0, "max_success": 2.0, "max_steps": 1},
            {"prover": "Z3", "success": 0.0, "failed": 5.0, "max_success": 0.0, "max_steps": 0},
        ],
    }


def test_render_markdown() -> None:
    text = render_markdown(_run())

    assert text.startswith("# Prover Order Report")
    assert "## pkg.ads" in text
    assert "| 1 | CVC4 | 2.00s | 0.00s | 2.00s | 1 |" in text
    assert "Suggested: `--prover=cvc4,z3`" in text


def test_render_dispatch_and_unknown_format() -> None:
    run = _run()
    assert render(run, "csv") == render_csv(run.files)
    with pytest.raises(ValueError):
        render(run, "html")


def test_empty_run_renders() -> None:
    run = AnalysisRun(metadata=RunMetadata(version="0.1.0", generated_at="now"))
    assert render_text(run.files) == ""
    assert render_csv(run.files).splitlines() == [",".join(CSV_HEADER)]


def test_write_report(tmp_path: Path) -> None:
    path = write_report("hello\n", tmp_path / "out" / "report.txt")
    assert path.read_text(encoding="utf-8") == "hello\n"
