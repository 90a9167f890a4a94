"""
Truth tables.

Rows are enumerated in binary counting order over the sorted variables,
the first variable being the most significant bit:

    p q | p -> q
    F F |   T
    F T |   T
    T F |   F
    T T |   T

The table has 2**n rows, so the variable count is capped.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .core.errors import ResourceLimitExceeded
from .core.formula import extract_variables, evaluate
from .core.parser import parse_formula


MAX_TRUTH_TABLE_VARIABLES = 16


@dataclass(frozen=True)
class TruthTableRow:
    """One row. `assignment` is read-only: name -> bool."""
    assignment: Mapping
    result: bool


def formula_variables(text: str) -> list:
    """Sorted variable names of a formula given as text."""
    return extract_variables(parse_formula(text))


def generate_truth_table(text: str, max_variables: int = MAX_TRUTH_TABLE_VARIABLES) -> list:
    """
    Every assignment of the formula's variables and the formula's value
    under it. A formula without variables gives a single row.

    Raises FormulaError if the text does not parse and
    ResourceLimitExceeded above `max_variables` variables.
    """
    formula = parse_formula(text)
    variables = extract_variables(formula)
    n = len(variables)
    if n > max_variables:
        raise ResourceLimitExceeded(n, max_variables)

    rows = []
    for i in range(2 ** n):
        assignment = {
            name: bool((i >> (n - 1 - j)) & 1)
            for j, name in enumerate(variables)
        }
        rows.append(TruthTableRow(MappingProxyType(assignment), evaluate(formula, assignment)))
    return rows


def classify(rows: list) -> str:
    """'tautology', 'contradiction' or 'contingent'."""
    results = {row.result for row in rows}
    if results == {True}:
        return "tautology"
    if results == {False}:
        return "contradiction"
    return "contingent"
