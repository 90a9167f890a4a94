"""
Labeled example formulas: one per connective, a few precedence
demonstrations, and some classic laws.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Example:
    label: str
    formula: str
    description: str


EXAMPLES = (
    Example("Simple Variable", "p", "A single proposition"),
    Example("Negation", "~p", "NOT operator (¬)"),
    Example("AND", "p ^ q", "Conjunction (∧)"),
    Example("OR", "p | q", "Disjunction (∨)"),
    Example("Implication", "p -> q", "If-then (→)"),
    Example("Biconditional", "p <-> q", "If and only if (↔)"),
    Example("Operator Precedence", "p | q ^ r",
            "Shows AND > OR (same as p | (q ^ r))"),
    Example("Complex Precedence", "~p ^ q | r",
            "Shows NOT > AND > OR precedence"),
    Example("Override Precedence", "(p | q) ^ r",
            "Parentheses override precedence"),
    Example("Tautology", "p | ~p", "Always true (law of excluded middle)"),
    Example("Contradiction", "p ^ ~p", "Always false"),
    Example("De Morgan's Law", "~(p ^ q) <-> (~p | ~q)",
            "NOT (AND) = (NOT) OR (NOT)"),
    Example("Transitive Property", "(p -> q) ^ (q -> r) -> (p -> r)",
            "If p→q and q→r, then p→r"),
    Example("Modus Ponens", "(p -> q) ^ p -> q", "If p→q and p, then q"),
)
