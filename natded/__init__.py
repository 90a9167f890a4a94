"""
natded: a propositional logic engine with a Natural Deduction prover.

Formulas are parsed into immutable trees that can be rendered as LaTeX,
re-serialized, evaluated and tabulated. Proofs are immutable snapshots of
justified steps with nested assumption scopes; applying a rule or
deleting a step returns a new snapshot.

Usage:
    python -m natded --formula "p | q ^ r"
    python -m natded --kb modus-ponens --goal q --apply "mp 1 2"
"""

from .core.errors import FormulaError, UnexpectedCharacter, FormulaSyntaxError, NestingTooDeep, ResourceLimitExceeded
from .core.tokens import Token, TokenKind, tokenize
from .core.formula import (
    Formula, Var, Top, Bottom, Not, And, Or, Implies, Iff,
    extract_variables, to_markup, to_canonical_text, to_display_text, evaluate,
)
from .core.parser import parse, parse_formula, parse_formula_to_markup
from .core.state import RuleId, ProofStep, ProofState, normalize_formula
from .truth_table import TruthTableRow, generate_truth_table, formula_variables, classify
from .proof.rules import Rule, ApplicableRule, RULES, get_rule, list_rules
from .proof.natural_deduction import (
    start_proof, check_applicability, applicable_rules,
    apply_rule, extend_proof, validate_proof,
    deletion_blocker, delete_step,
)
from .knowledge_bases import (
    KnowledgeBase, SuggestedGoal, KNOWLEDGE_BASES,
    list_knowledge_bases, list_suggested_goals,
)
from .examples import Example, EXAMPLES

__all__ = [
    "FormulaError", "UnexpectedCharacter", "FormulaSyntaxError", "NestingTooDeep", "ResourceLimitExceeded",
    "Token", "TokenKind", "tokenize",
    "Formula", "Var", "Top", "Bottom", "Not", "And", "Or", "Implies", "Iff",
    "extract_variables", "to_markup", "to_canonical_text", "to_display_text", "evaluate",
    "parse", "parse_formula", "parse_formula_to_markup",
    "RuleId", "ProofStep", "ProofState", "normalize_formula",
    "TruthTableRow", "generate_truth_table", "formula_variables", "classify",
    "Rule", "ApplicableRule", "RULES", "get_rule", "list_rules",
    "start_proof", "check_applicability", "applicable_rules",
    "apply_rule", "extend_proof", "validate_proof",
    "deletion_blocker", "delete_step",
    "KnowledgeBase", "SuggestedGoal", "KNOWLEDGE_BASES",
    "list_knowledge_bases", "list_suggested_goals",
    "Example", "EXAMPLES",
]
