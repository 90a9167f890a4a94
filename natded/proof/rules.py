"""
The Natural Deduction rule catalog.

Static data: the engine reads it, nothing writes it. Each Rule is keyed by
a RuleId; the handlers that give the rules meaning live in
natural_deduction.py.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.state import RuleId


CATEGORIES = ("assumption", "basic", "introduction", "elimination")


@dataclass(frozen=True)
class Rule:
    id: RuleId
    name: str
    description: str
    category: str
    required_steps: int

    def __repr__(self):
        return f"Rule({self.id.value})"


@dataclass(frozen=True)
class ApplicableRule:
    """A Rule judged against one particular ProofState."""
    rule: Rule
    applicable: bool
    reason: Optional[str] = None

    @property
    def id(self):
        return self.rule.id

    @property
    def name(self):
        return self.rule.name

    @property
    def description(self):
        return self.rule.description

    @property
    def category(self):
        return self.rule.category

    @property
    def required_steps(self):
        return self.rule.required_steps


RULES = (
    Rule(RuleId.ASSUME, "Assume",
         "Start an assumption (subproof)",
         "assumption", 0),
    Rule(RuleId.MP, "Modus Ponens",
         "From P and P→Q, derive Q",
         "basic", 2),
    Rule(RuleId.MT, "Modus Tollens",
         "From P→Q and ¬Q, derive ¬P",
         "basic", 2),
    Rule(RuleId.AND_INTRO, "∧ Introduction",
         "From P and Q, derive P∧Q",
         "introduction", 2),
    Rule(RuleId.AND_ELIM_LEFT, "∧ Elimination (Left)",
         "From P∧Q, derive P",
         "elimination", 1),
    Rule(RuleId.AND_ELIM_RIGHT, "∧ Elimination (Right)",
         "From P∧Q, derive Q",
         "elimination", 1),
    Rule(RuleId.OR_INTRO_LEFT, "∨ Introduction (Left)",
         "From P, derive P∨Q",
         "introduction", 1),
    Rule(RuleId.OR_INTRO_RIGHT, "∨ Introduction (Right)",
         "From Q, derive P∨Q",
         "introduction", 1),
    Rule(RuleId.DOUBLE_NEG, "Double Negation",
         "From ¬¬P, derive P",
         "basic", 1),
    Rule(RuleId.IMPL_INTRO, "→ Introduction",
         "Close assumption: if you assumed P and derived Q, conclude P→Q",
         "introduction", 1),
)

RULES_BY_ID = {rule.id: rule for rule in RULES}

# Rules that read the user's text input in addition to selected steps.
NEEDS_USER_INPUT = frozenset({RuleId.ASSUME, RuleId.OR_INTRO_LEFT, RuleId.OR_INTRO_RIGHT})


def get_rule(rule_id) -> Rule:
    """Look up a catalog rule by RuleId or its string value ("mp")."""
    if not isinstance(rule_id, RuleId):
        rule_id = RuleId(rule_id)
    if rule_id not in RULES_BY_ID:
        raise KeyError(f"{rule_id.value} is not a selectable rule")
    return RULES_BY_ID[rule_id]


def list_rules() -> list:
    return list(RULES)
