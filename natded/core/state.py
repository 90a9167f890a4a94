"""
Proof data structures: RuleId, ProofStep, ProofState.

Nothing in here knows how a rule works. A ProofState is an immutable
snapshot; every transition in natded.proof builds a new one and leaves
the old one untouched, so a caller may keep any number of snapshots around
(for undo, say) without copying.

Invariants:
    - step ids are 1-based positions at creation time and are never reused
    - every dependency of a step is an earlier step id
    - steps are only ever appended or truncated
    - current_depth is the depth of the open assumption scope (0 = none)
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
import re


class RuleId(Enum):
    """Every way a step can be justified. PREMISE is not a selectable rule."""
    PREMISE = "premise"
    ASSUME = "assume"
    MP = "mp"
    MT = "mt"
    AND_INTRO = "and_intro"
    AND_ELIM_LEFT = "and_elim_left"
    AND_ELIM_RIGHT = "and_elim_right"
    OR_INTRO_LEFT = "or_intro_left"
    OR_INTRO_RIGHT = "or_intro_right"
    DOUBLE_NEG = "double_neg"
    IMPL_INTRO = "impl_intro"


@dataclass(frozen=True)
class ProofStep:
    """One justified line of a proof."""
    id: int
    formula: str
    rule_id: RuleId
    dependencies: tuple = ()
    justification: str = ""
    depth: int = 0

    def __post_init__(self):
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        if self.id < 1:
            raise ValueError(f"step id must be positive, got {self.id}")
        if self.depth < 0:
            raise ValueError(f"step depth must be non-negative, got {self.depth}")
        for dep in self.dependencies:
            if dep >= self.id:
                raise ValueError(f"step {self.id} cannot depend on later step {dep}")

    @property
    def name(self):
        return f"{self.id}. {self.formula}"

    def __repr__(self):
        return f"ProofStep({self.id}: {self.formula!r} [{self.justification}] d={self.depth})"


@dataclass(frozen=True)
class ProofState:
    """Snapshot of a proof in progress."""
    goal: str
    premises: tuple = ()
    steps: tuple = ()
    current_depth: int = 0
    is_complete: bool = False

    def __post_init__(self):
        object.__setattr__(self, "premises", tuple(self.premises))
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def last_step(self) -> Optional[ProofStep]:
        return self.steps[-1] if self.steps else None

    @property
    def next_id(self) -> int:
        return len(self.steps) + 1

    def step_by_id(self, step_id: int) -> Optional[ProofStep]:
        return next((s for s in self.steps if s.id == step_id), None)

    def steps_at_depth(self, depth: int) -> list:
        return [s for s in self.steps if s.depth == depth]

    def dependents_of(self, step_id: int) -> list:
        """Steps that cite `step_id` as a dependency."""
        return [s for s in self.steps if step_id in s.dependencies]

    def with_step(self, step: ProofStep, current_depth: int) -> "ProofState":
        if step.id != self.next_id:
            raise ValueError(f"expected step id {self.next_id}, got {step.id}")
        for dep in step.dependencies:
            if self.step_by_id(dep) is None:
                raise ValueError(f"step {step.id} depends on missing step {dep}")
        return replace(self, steps=self.steps + (step,),
                       current_depth=current_depth, is_complete=False)

    def to_dict(self):
        def serialize(step):
            return {"id": step.id, "formula": step.formula,
                    "rule_id": step.rule_id.value,
                    "dependencies": list(step.dependencies),
                    "justification": step.justification,
                    "depth": step.depth}

        return {
            "goal": self.goal,
            "premises": list(self.premises),
            "steps": [serialize(s) for s in self.steps],
            "current_depth": self.current_depth,
            "is_complete": self.is_complete,
        }

    @classmethod
    def from_dict(cls, d):
        def deserialize(data):
            return ProofStep(
                id=data["id"], formula=data["formula"],
                rule_id=RuleId(data["rule_id"]),
                dependencies=tuple(data.get("dependencies", ())),
                justification=data.get("justification", ""),
                depth=data.get("depth", 0),
            )

        return cls(
            goal=d["goal"],
            premises=tuple(d.get("premises", ())),
            steps=tuple(deserialize(s) for s in d.get("steps", ())),
            current_depth=d.get("current_depth", 0),
            is_complete=d.get("is_complete", False),
        )


_WHITESPACE = re.compile(r"\s+")
_PARENS = re.compile(r"[()]")


def normalize_formula(text: str) -> str:
    """
    Loose textual key for "is this the same formula": drop whitespace and
    every parenthesis, then lower-case.

    Known limitation: dropping parentheses conflates formulas that group
    differently, e.g. "(p ^ q) | r" and "p ^ (q | r)" normalize equal.
    Proof checking currently accepts whatever this accepts.
    """
    return _PARENS.sub("", _WHITESPACE.sub("", text)).lower()
