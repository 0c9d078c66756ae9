from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


def attempt(result: str, time: float, steps: int) -> dict[str, Any]:
    return {"result": result, "time": time, "steps": steps}


def proof_entry(
    file: str,
    entity: str,
    attempts: dict[str, dict[str, Any]],
    rule: str = "VC_RANGE_CHECK",
    line: int = 1,
) -> dict[str, Any]:
    return {
        "file": file,
        "line": line,
        "col": 1,
        "rule": rule,
        "severity": "info",
        "entity": {"name": entity, "sloc": [{"file": file, "line": line}]},
        "check_tree": [{"proof_attempts": attempts, "transformations": {}}],
    }


@pytest.fixture
def write_spark(tmp_path: Path) -> Callable[..., Path]:
    """Write a .spark report holding `proofs` and return its path."""

    def _write(name: str, proofs: list[dict[str, Any]], **extra: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"spark": [], "flow": [], "proof": proofs, **extra}
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
