"""
Property-based and unit tests for truth tables.

Core claims:
    - a formula with n variables has 2**n rows
    - rows count in binary with the first sorted variable most significant
    - p | ~p is a tautology, p ^ ~p a contradiction
    - each row's result agrees with evaluate, and rows cannot be edited
    - the variable limit raises ResourceLimitExceeded instead of hanging
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from natded.core.errors import FormulaError, ResourceLimitExceeded
from natded.core.formula import evaluate
from natded.core.parser import parse_formula
from natded.truth_table import (
    generate_truth_table, formula_variables, classify, MAX_TRUTH_TABLE_VARIABLES,
)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestGenerate:
    def test_tautology(self):
        rows = generate_truth_table("p | ~p")
        assert len(rows) == 2
        assert all(row.result for row in rows)
        assert classify(rows) == "tautology"

    def test_contradiction(self):
        rows = generate_truth_table("p ^ ~p")
        assert len(rows) == 2
        assert not any(row.result for row in rows)
        assert classify(rows) == "contradiction"

    def test_contingent(self):
        assert classify(generate_truth_table("p -> q")) == "contingent"

    def test_row_order(self):
        rows = generate_truth_table("q -> p")
        assert [(r.assignment["p"], r.assignment["q"]) for r in rows] == [
            (False, False), (False, True), (True, False), (True, True),
        ]
        assert [r.result for r in rows] == [True, False, True, True]

    def test_assignment_keys_are_sorted_variables(self):
        rows = generate_truth_table("z ^ a ^ m")
        assert list(rows[0].assignment) == ["a", "m", "z"]
        assert len(rows) == 8

    def test_no_variables_gives_one_row(self):
        rows = generate_truth_table("T -> F")
        assert len(rows) == 1
        assert rows[0].assignment == {}
        assert rows[0].result is False

    def test_assignment_is_read_only(self):
        row = generate_truth_table("p -> q")[0]
        with pytest.raises(TypeError):
            row.assignment["p"] = True
        assert row.assignment == {"p": False, "q": False}
        assert row.result is True

    def test_de_morgan_is_tautology(self):
        assert classify(generate_truth_table("~(p ^ q) <-> (~p | ~q)")) == "tautology"

    def test_bad_formula_raises(self):
        with pytest.raises(FormulaError):
            generate_truth_table("p ->")


class TestLimit:
    def test_default_limit(self):
        names = " ^ ".join(f"v{i}" for i in range(MAX_TRUTH_TABLE_VARIABLES + 1))
        with pytest.raises(ResourceLimitExceeded) as info:
            generate_truth_table(names)
        assert info.value.variable_count == MAX_TRUTH_TABLE_VARIABLES + 1

    def test_custom_limit(self):
        with pytest.raises(ResourceLimitExceeded):
            generate_truth_table("p ^ q ^ r", max_variables=2)
        assert len(generate_truth_table("p ^ q", max_variables=2)) == 4


class TestFormulaVariables:
    def test_sorted(self):
        assert formula_variables("q | p ^ q") == ["p", "q"]


# ── Property-based tests ─────────────────────────────────────────────────────

@st.composite
def clause_texts(draw):
    names = draw(st.lists(st.sampled_from("pqrst"), min_size=1, max_size=5))
    ops = [draw(st.sampled_from(["^", "|", "->", "<->"])) for _ in names[1:]]
    parts = [("~" if draw(st.booleans()) else "") + names[0]]
    for op, name in zip(ops, names[1:]):
        parts.append(op)
        parts.append(("~" if draw(st.booleans()) else "") + name)
    return " ".join(parts)


class TestTruthTableProperties:

    @given(clause_texts())
    def test_row_count(self, text):
        n = len(formula_variables(text))
        assert len(generate_truth_table(text)) == 2 ** n

    @given(clause_texts())
    def test_rows_agree_with_evaluate(self, text):
        formula = parse_formula(text)
        for row in generate_truth_table(text):
            assert row.result == evaluate(formula, row.assignment)

    @given(clause_texts())
    def test_assignments_are_distinct(self, text):
        rows = generate_truth_table(text)
        seen = {tuple(sorted(r.assignment.items())) for r in rows}
        assert len(seen) == len(rows)
