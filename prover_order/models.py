"""
Data models for prover_order.

Two groups of types live here:

  1. The proof tree: an arena of nodes addressed by integer index.
     Entity → Proof Item → Proof Attempt, built by the report loader and
     traversed read-only by the aggregator.
  2. The analysis results: per-(file, prover) timing statistics and the
     ranked FileData / ProverData records handed to the renderers.

Result models support JSON output via to_dict(). No model contains
ranking logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Union


class TreeInvariantError(RuntimeError):
    """Raised when a proof tree operation would break parent/child ownership.

    These are loader bugs, not bad input: an attempt added under an entity,
    an index that does not exist, a node read as the wrong kind. Callers
    should let it propagate.
    """


class NodeKind(Enum):
    ENTITY = "entity"
    PROOF_ITEM = "proof_item"
    ATTEMPT = "attempt"


class Outcome(Enum):
    """Prover verdict for one attempt. Only VALID counts as a success."""

    VALID = "valid"
    INVALID = "invalid"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"
    STEP_LIMIT = "steplimitexceeded"
    OUT_OF_MEMORY = "outofmemory"
    FAILURE = "failure"
    HIGH_FAILURE = "highfailure"
    OTHER = "other"

    @classmethod
    def parse(cls, text: str) -> Outcome:
        """Map a report result string onto an Outcome, case-insensitively."""
        token = text.strip().lower().replace("_", "").replace(" ", "")
        for member in cls:
            if member.value == token:
                return member
        return cls.OTHER


# ---------------------------------------------------------------------------
# Proof tree nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EntityNode:
    """A provable program unit (subprogram, package, ...)."""
    index: int
    name: str
    parent: int | None = None
    children: list[int] = field(default_factory=list, compare=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ENTITY


@dataclass(frozen=True)
class ProofItemNode:
    """One verification condition under an entity.

    `file` is the source file spelling the check was reported against;
    `unit` is the compilation unit the report was produced for. Spec, body
    and separate files of one unit share the same `unit`.
    """
    index: int
    parent: int
    file: str
    unit: str = ""
    rule: str = ""
    line: int = 0
    column: int = 0
    children: list[int] = field(default_factory=list, compare=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.PROOF_ITEM

    @property
    def file_key(self) -> str:
        return self.unit or self.file


@dataclass(frozen=True)
class AttemptNode:
    """One prover invocation against a proof item (a leaf)."""
    index: int
    parent: int
    prover: str
    outcome: Outcome
    time: float
    steps: int

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ATTEMPT

    @property
    def children(self) -> list[int]:
        return []


ProofNode = Union[EntityNode, ProofItemNode, AttemptNode]


class ProofTree:
    """Arena holding every node of one or more verification reports.

    Nodes are only ever appended; an index handed out by an add_* method
    stays valid for the life of the tree. Entities are roots; proof items
    hang off entities, attempts off proof items.
    """

    def __init__(self) -> None:
        self._nodes: list[ProofNode] = []
        self._roots: list[int] = []

    def __len__(self) -> int:
        return len(self._nodes)

    # -- building ---------------------------------------------------------

    def add_entity(self, name: str) -> int:
        index = len(self._nodes)
        self._nodes.append(EntityNode(index=index, name=name))
        self._roots.append(index)
        return index

    def add_proof_item(
        self,
        entity: int,
        file: str,
        unit: str = "",
        rule: str = "",
        line: int = 0,
        column: int = 0,
    ) -> int:
        parent = self.entity(entity)
        index = len(self._nodes)
        self._nodes.append(ProofItemNode(
            index=index,
            parent=entity,
            file=file,
            unit=unit,
            rule=rule,
            line=line,
            column=column,
        ))
        parent.children.append(index)
        return index

    def add_attempt(
        self,
        proof_item: int,
        prover: str,
        outcome: Outcome,
        time: float,
        steps: int,
    ) -> int:
        parent = self.proof_item(proof_item)
        index = len(self._nodes)
        self._nodes.append(AttemptNode(
            index=index,
            parent=proof_item,
            prover=prover,
            outcome=outcome,
            time=time,
            steps=steps,
        ))
        parent.children.append(index)
        return index

    def merge(self, other: ProofTree) -> None:
        """Append every node of `other`, re-indexed, below the existing ones."""
        for entity in list(other.entities()):
            new_entity = self.add_entity(entity.name)
            for item in other.proof_items(entity.index):
                new_item = self.add_proof_item(
                    new_entity,
                    file=item.file,
                    unit=item.unit,
                    rule=item.rule,
                    line=item.line,
                    column=item.column,
                )
                for attempt in other.attempts(item.index):
                    self.add_attempt(
                        new_item,
                        prover=attempt.prover,
                        outcome=attempt.outcome,
                        time=attempt.time,
                        steps=attempt.steps,
                    )

    # -- typed access -----------------------------------------------------

    def node(self, index: int) -> ProofNode:
        if not 0 <= index < len(self._nodes):
            raise TreeInvariantError(f"no node at index {index}")
        return self._nodes[index]

    def entity(self, index: int) -> EntityNode:
        node = self.node(index)
        if not isinstance(node, EntityNode):
            raise TreeInvariantError(
                f"node {index} is a {node.kind.value}, expected an entity"
            )
        return node

    def proof_item(self, index: int) -> ProofItemNode:
        node = self.node(index)
        if not isinstance(node, ProofItemNode):
            raise TreeInvariantError(
                f"node {index} is a {node.kind.value}, expected a proof item"
            )
        return node

    def attempt(self, index: int) -> AttemptNode:
        node = self.node(index)
        if not isinstance(node, AttemptNode):
            raise TreeInvariantError(
                f"node {index} is a {node.kind.value}, expected an attempt"
            )
        return node

    # -- traversal --------------------------------------------------------

    def entities(self) -> Iterator[EntityNode]:
        for index in self._roots:
            yield self.entity(index)

    def proof_items(self, entity: int) -> Iterator[ProofItemNode]:
        for index in self.entity(entity).children:
            yield self.proof_item(index)

    def attempts(self, proof_item: int) -> Iterator[AttemptNode]:
        for index in self.proof_item(proof_item).children:
            yield self.attempt(index)


# ---------------------------------------------------------------------------
# Analysis results
# ---------------------------------------------------------------------------

@dataclass
class TimingStats:
    """Accumulated timings for one prover on one source file.

    Mutable because the aggregator updates it in place, one attempt at a
    time. Times are in seconds; max_steps is normalized (see steps.py).
    """
    success: float = 0.0
    failed: float = 0.0
    max_success: float = 0.0
    max_steps: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "failed": self.failed,
            "max_success": self.max_success,
            "max_steps": self.max_steps,
        }


@dataclass
class FileTimings:
    """Aggregator output for one file key: display name + per-prover stats."""
    name: str = ""
    provers: dict[str, TimingStats] = field(default_factory=dict)


@dataclass(frozen=True)
class ProverData:
    prover: str
    stats: TimingStats

    def to_dict(self) -> dict[str, Any]:
        return {"prover": self.prover, **self.stats.to_dict()}


@dataclass(frozen=True)
class FileData:
    """One source file and its provers, best first."""
    name: str
    provers: tuple[ProverData, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.name,
            "provers": [p.to_dict() for p in self.provers],
        }
