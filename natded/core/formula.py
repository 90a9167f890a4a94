"""
Formula trees and the services that walk them.

A Formula is exactly one of eight frozen node types:

    Var(name)            p, q, rain
    Top()                T    (the constant true)
    Bottom()             F    (the constant false)
    Not(operand)         ~a
    And(left, right)     a ^ b
    Or(left, right)      a | b
    Implies(left, right) a -> b
    Iff(left, right)     a <-> b

Nodes compare structurally, so parse("p | q ^ r") == parse("p | (q ^ r)").
Every walker below dispatches over this closed set and raises TypeError on
anything else. The per-kind tables are checked at import time, so adding a
connective without teaching every table about it fails immediately.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class Top:
    pass


@dataclass(frozen=True)
class Bottom:
    pass


@dataclass(frozen=True)
class Not:
    operand: "Formula"


@dataclass(frozen=True)
class And:
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Or:
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Implies:
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Iff:
    left: "Formula"
    right: "Formula"


Formula = Union[Var, Top, Bottom, Not, And, Or, Implies, Iff]

BINARY_TYPES = (And, Or, Implies, Iff)
FORMULA_TYPES = (Var, Top, Bottom, Not) + BINARY_TYPES


# ── Per-kind tables ──────────────────────────────────────────────────────────

# Typesetting (LaTeX) macros. One fixed spelling per node kind.
MARKUP_MACROS = {
    Top:     "\\top",
    Bottom:  "\\bot",
    Not:     "\\neg",
    And:     "\\land",
    Or:      "\\lor",
    Implies: "\\to",
    Iff:     "\\leftrightarrow",
}

# Surface syntax accepted by the lexer.
TEXT_SYMBOLS = {
    Top:     "T",
    Bottom:  "F",
    Not:     "~",
    And:     "^",
    Or:      "|",
    Implies: "->",
    Iff:     "<->",
}

# Binding strength, loosest first. Var/Top/Bottom are atoms.
PRECEDENCE = {
    Iff:     1,
    Implies: 2,
    Or:      3,
    And:     4,
    Not:     5,
    Var:     6,
    Top:     6,
    Bottom:  6,
}

BINARY_OPERATIONS = {
    And:     lambda a, b: a and b,
    Or:      lambda a, b: a or b,
    Implies: lambda a, b: (not a) or b,
    Iff:     lambda a, b: a == b,
}


def _check_covers(table: dict, kinds: tuple, table_name: str):
    missing = [k.__name__ for k in kinds if k not in table]
    if missing:
        raise TypeError(f"{table_name} has no entry for: {', '.join(missing)}")


_check_covers(MARKUP_MACROS, FORMULA_TYPES[1:], "MARKUP_MACROS")
_check_covers(TEXT_SYMBOLS, FORMULA_TYPES[1:], "TEXT_SYMBOLS")
_check_covers(PRECEDENCE, FORMULA_TYPES, "PRECEDENCE")
_check_covers(BINARY_OPERATIONS, BINARY_TYPES, "BINARY_OPERATIONS")


def _unknown(formula):
    return TypeError(f"Not a formula node: {formula!r}")


# ── Services ─────────────────────────────────────────────────────────────────

def extract_variables(formula: Formula) -> list:
    """All variable names in the formula, sorted, without repeats."""
    names = set()

    def walk(f):
        if isinstance(f, Var):
            names.add(f.name)
        elif isinstance(f, (Top, Bottom)):
            pass
        elif isinstance(f, Not):
            walk(f.operand)
        elif isinstance(f, BINARY_TYPES):
            walk(f.left)
            walk(f.right)
        else:
            raise _unknown(f)

    walk(formula)
    return sorted(names)


def to_markup(formula: Formula) -> str:
    """
    Render as LaTeX math. Mirrors the tree exactly: no parentheses are
    added, grouping is left to the typesetting engine.
    """
    if isinstance(formula, Var):
        return formula.name
    if isinstance(formula, (Top, Bottom)):
        return MARKUP_MACROS[type(formula)]
    if isinstance(formula, Not):
        return f"{MARKUP_MACROS[Not]} {to_markup(formula.operand)}"
    if isinstance(formula, BINARY_TYPES):
        macro = MARKUP_MACROS[type(formula)]
        return f"{to_markup(formula.left)} {macro} {to_markup(formula.right)}"
    raise _unknown(formula)


def to_canonical_text(formula: Formula) -> str:
    """
    Fully parenthesized surface syntax: every ~ and every binary
    connective gets its own pair of parentheses. Parsing the result gives
    back an equal tree.
    """
    if isinstance(formula, Var):
        return formula.name
    if isinstance(formula, (Top, Bottom)):
        return TEXT_SYMBOLS[type(formula)]
    if isinstance(formula, Not):
        return f"(~{to_canonical_text(formula.operand)})"
    if isinstance(formula, BINARY_TYPES):
        symbol = TEXT_SYMBOLS[type(formula)]
        return f"({to_canonical_text(formula.left)} {symbol} {to_canonical_text(formula.right)})"
    raise _unknown(formula)


def to_display_text(formula: Formula) -> str:
    """
    Surface syntax with only the parentheses precedence requires.

    This is the form the proof rules write into new steps, e.g. the left
    conjunct of "(p | q) ^ r" is shown as "p | q", and the right conjunct of
    "r ^ ((p ^ q) -> s)" as "p ^ q -> s".
    """
    if isinstance(formula, Var):
        return formula.name
    if isinstance(formula, (Top, Bottom)):
        return TEXT_SYMBOLS[type(formula)]
    if isinstance(formula, Not):
        inner = to_display_text(formula.operand)
        if PRECEDENCE[type(formula.operand)] < PRECEDENCE[Not]:
            inner = f"({inner})"
        return f"~{inner}"
    if isinstance(formula, BINARY_TYPES):
        left = to_display_text(formula.left)
        right = to_display_text(formula.right)
        kind = type(formula)
        own = PRECEDENCE[kind]
        left_prec = PRECEDENCE[type(formula.left)]
        right_prec = PRECEDENCE[type(formula.right)]
        if kind is Implies:
            # right-associative
            wrap_left, wrap_right = left_prec <= own, right_prec < own
        else:
            wrap_left, wrap_right = left_prec < own, right_prec <= own
        if wrap_left:
            left = f"({left})"
        if wrap_right:
            right = f"({right})"
        return f"{left} {TEXT_SYMBOLS[kind]} {right}"
    raise _unknown(formula)


def evaluate(formula: Formula, assignment: dict) -> bool:
    """
    Truth value under `assignment` (name -> bool).

    Variables missing from the assignment count as False, so evaluation
    never fails on a partial assignment.
    """
    if isinstance(formula, Var):
        return bool(assignment.get(formula.name, False))
    if isinstance(formula, Top):
        return True
    if isinstance(formula, Bottom):
        return False
    if isinstance(formula, Not):
        return not evaluate(formula.operand, assignment)
    if isinstance(formula, BINARY_TYPES):
        op = BINARY_OPERATIONS[type(formula)]
        return op(evaluate(formula.left, assignment), evaluate(formula.right, assignment))
    raise _unknown(formula)
