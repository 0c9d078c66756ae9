"""
Report Loader — parses verification report files into a ProofTree.

A report is a JSON object written per compilation unit (pkg.spark). Only
its "proof" array is read; flow-analysis sections are ignored. Each proof
entry looks like:

  {"file": "pkg.adb", "line": 12, "col": 7, "rule": "VC_RANGE_CHECK",
   "entity": {"name": "Pkg.Proc", ...},
   "check_tree": [
     {"proof_attempts": {"CVC4": {"result": "Valid", "time": 0.1, "steps": 10}},
      "transformations": {"split_goal": [<goal>, ...]}}
   ]}

Mapping onto the tree:
  - one Entity per distinct entity name in a report (first-seen order);
  - one Proof Item per goal in check_tree, nested transformation goals
    included, depth first;
  - one Attempt per proof_attempts entry, in document order.

The report file's stem becomes each proof item's unit, so every file
spelling of the unit aggregates together.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from prover_order.models import Outcome, ProofTree

logger = logging.getLogger(__name__)


class ReportFormatError(ValueError):
    """Raised when a report file is not valid JSON or has the wrong shape."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def load_report(path: Path, tree: ProofTree | None = None) -> ProofTree:
    """Parse one report file, appending its nodes to `tree`.

    Args:
        path: The report file.
        tree: Tree to extend. A new one is returned if None. The tree is
            left untouched when the file fails to parse.

    Returns:
        The tree holding the report's entities.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ReportFormatError: If the file is malformed.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Report not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ReportFormatError(path, f"not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ReportFormatError(path, f"invalid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ReportFormatError(path, "report must be a JSON object")

    proofs = payload.get("proof", [])
    if not isinstance(proofs, list):
        raise ReportFormatError(path, "'proof' must be a list")

    unit = path.stem
    report = ProofTree()
    entities: dict[str, int] = {}
    item_count = 0

    for position, raw in enumerate(proofs):
        if not isinstance(raw, dict):
            raise ReportFormatError(path, f"proof[{position}] must be an object")

        entity_name = _entity_name(path, position, raw)
        entity = entities.get(entity_name)
        if entity is None:
            entity = report.add_entity(entity_name)
            entities[entity_name] = entity

        file = raw.get("file")
        if not isinstance(file, str) or not file:
            raise ReportFormatError(
                path, f"proof[{position}] has no source 'file'"
            )

        rule = str(raw.get("rule", ""))
        line = _int_field(path, position, raw, "line")
        column = _int_field(path, position, raw, "col")

        check_tree = raw.get("check_tree", [])
        if not isinstance(check_tree, list):
            raise ReportFormatError(
                path, f"proof[{position}].check_tree must be a list"
            )

        for goal in _walk_goals(path, position, check_tree):
            item = report.add_proof_item(
                entity,
                file=file,
                unit=unit,
                rule=rule,
                line=line,
                column=column,
            )
            item_count += 1
            _add_attempts(path, position, report, item, goal)

    logger.debug(
        "Loaded %s: %d entities, %d proof items",
        path, len(entities), item_count,
    )
    # Nothing reaches the caller's tree unless the whole file parsed.
    if tree is None:
        return report
    tree.merge(report)
    return tree


def load_reports(paths: Iterable[Path]) -> ProofTree:
    """Load several report files into a single tree."""
    tree = ProofTree()
    for path in paths:
        load_report(path, tree)
    return tree


def _entity_name(path: Path, position: int, raw: dict[str, Any]) -> str:
    entity = raw.get("entity", {})
    if isinstance(entity, dict):
        name = entity.get("name", "")
    elif isinstance(entity, str):
        name = entity
    else:
        raise ReportFormatError(path, f"proof[{position}].entity has wrong type")
    return str(name)


def _int_field(path: Path, position: int, raw: dict[str, Any], key: str) -> int:
    value = raw.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ReportFormatError(path, f"proof[{position}].{key} must be an integer")
    return value


def _walk_goals(
    path: Path, position: int, goals: list[Any]
) -> Iterable[dict[str, Any]]:
    """Yield every goal node, transformation subgoals included, depth first."""
    stack = list(reversed(goals))
    while stack:
        goal = stack.pop()
        if not isinstance(goal, dict):
            raise ReportFormatError(
                path, f"proof[{position}]: check_tree goal must be an object"
            )
        yield goal

        transformations = goal.get("transformations", {})
        if not isinstance(transformations, dict):
            raise ReportFormatError(
                path, f"proof[{position}]: transformations must be an object"
            )
        subgoals: list[Any] = []
        for children in transformations.values():
            if not isinstance(children, list):
                raise ReportFormatError(
                    path, f"proof[{position}]: transformation goals must be a list"
                )
            subgoals.extend(children)
        stack.extend(reversed(subgoals))


def _add_attempts(
    path: Path,
    position: int,
    tree: ProofTree,
    item: int,
    goal: dict[str, Any],
) -> None:
    attempts = goal.get("proof_attempts", {})
    if not isinstance(attempts, dict):
        raise ReportFormatError(
            path, f"proof[{position}]: proof_attempts must be an object"
        )

    for prover, record in attempts.items():
        if not isinstance(record, dict):
            raise ReportFormatError(
                path, f"proof[{position}]: attempt for {prover} must be an object"
            )
        result = record.get("result", "")
        time = record.get("time", 0.0)
        steps = record.get("steps", 0)

        if not isinstance(result, str):
            raise ReportFormatError(
                path, f"proof[{position}]: {prover} result must be a string"
            )
        if isinstance(time, bool) or not isinstance(time, (int, float)) or time < 0:
            raise ReportFormatError(
                path, f"proof[{position}]: {prover} time must be a non-negative number"
            )
        if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
            raise ReportFormatError(
                path, f"proof[{position}]: {prover} steps must be a non-negative integer"
            )

        tree.add_attempt(
            item,
            prover=prover,
            outcome=Outcome.parse(result),
            time=float(time),
            steps=steps,
        )
