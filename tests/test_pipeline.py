from __future__ import annotations

from pathlib import Path

import pytest

from conftest import attempt, proof_entry
from prover_order.loader import ReportFormatError
from prover_order.pipeline import run_analysis


def test_run_analysis_end_to_end(write_spark, tmp_path: Path) -> None:
    write_spark("obj/pkg.spark", [
        proof_entry("pkg-child.adb", "Pkg.Child", {
            "CVC4": attempt("Valid", 2.0, 100),
            "Z3": attempt("Timeout", 5.0, 0),
        }),
        proof_entry("pkg.ads", "Pkg", {"Trivial": attempt("Valid", 0.0, 0)}),
    ])
    write_spark("obj/only_trivial.spark", [
        proof_entry("only_trivial.ads", "Only", {"Trivial": attempt("Valid", 0.0, 0)}),
    ])

    run = run_analysis([tmp_path / "obj"])

    assert [p.name for p in run.report_paths] == ["only_trivial.spark", "pkg.spark"]
    assert [f.name for f in run.files] == ["pkg.ads"]
    assert [p.prover for p in run.files[0].provers] == ["CVC4", "Z3"]
    assert run.duration_seconds >= 0.0
    assert run.to_dict()["files"][0]["file"] == "pkg.ads"


def test_run_analysis_exclusions(write_spark, tmp_path: Path) -> None:
    write_spark("a.spark", [
        proof_entry("a.ads", "A", {
            "Z3": attempt("Valid", 1.0, 1),
            "altergo": attempt("Valid", 1.0, 1),
        }),
    ])

    run = run_analysis([tmp_path], exclude=["altergo"])

    assert [p.prover for p in run.files[0].provers] == ["Z3"]
    assert run.to_dict()["excluded"] == ["altergo"]


def test_run_analysis_propagates_format_errors(tmp_path: Path) -> None:
    (tmp_path / "bad.spark").write_text("{", encoding="utf-8")

    with pytest.raises(ReportFormatError):
        run_analysis([tmp_path])
