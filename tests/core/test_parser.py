"""
Tests for the parser.

Core claims:
    - AND binds tighter than OR, OR tighter than ->, -> tighter than <->
    - ^, | and <-> are left-associative; -> is right-associative
    - ~ is a prefix operator that chains: ~~p is ~(~p)
    - Trailing tokens and missing ')' raise FormulaSyntaxError
    - to_canonical_text is inverted by parse (round trip)
    - Nesting past MAX_NESTING_DEPTH raises NestingTooDeep, not RecursionError
    - parse_formula_to_markup reports errors as data, never raises
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from natded.core.errors import FormulaSyntaxError, NestingTooDeep, UnexpectedCharacter
from natded.core.formula import (
    Var, Top, Bottom, Not, And, Or, Implies, Iff,
    to_canonical_text, to_display_text,
)
from natded.core.parser import parse, parse_formula, parse_formula_to_markup, MAX_NESTING_DEPTH
from natded.core.tokens import TokenKind, tokenize


p, q, r = Var("p"), Var("q"), Var("r")


# ── Generators ────────────────────────────────────────────────────────────────

names = st.from_regex(r"[a-z_][a-z0-9_]{0,3}", fullmatch=True)

atoms = st.one_of(names.map(Var), st.just(Top()), st.just(Bottom()))


@st.composite
def binary(draw, children):
    kind = draw(st.sampled_from([And, Or, Implies, Iff]))
    return kind(draw(children), draw(children))


formulas = st.recursive(
    atoms,
    lambda children: st.one_of(children.map(Not), binary(children)),
    max_leaves=12,
)


# ── Unit tests ────────────────────────────────────────────────────────────────

class TestPrecedence:
    def test_and_binds_tighter_than_or(self):
        assert parse_formula("p | q ^ r") == parse_formula("p | (q ^ r)")
        assert parse_formula("p | q ^ r") == Or(p, And(q, r))

    def test_or_binds_tighter_than_implies(self):
        assert parse_formula("p | q -> r") == Implies(Or(p, q), r)

    def test_implies_binds_tighter_than_iff(self):
        assert parse_formula("p -> q <-> r") == Iff(Implies(p, q), r)

    def test_not_binds_tightest(self):
        assert parse_formula("~p ^ q | r") == Or(And(Not(p), q), r)

    def test_parentheses_override(self):
        assert parse_formula("(p | q) ^ r") == And(Or(p, q), r)


class TestAssociativity:
    def test_implies_is_right_associative(self):
        assert parse_formula("p -> q -> r") == parse_formula("p -> (q -> r)")
        assert parse_formula("p -> q -> r") == Implies(p, Implies(q, r))

    def test_and_is_left_associative(self):
        assert parse_formula("p ^ q ^ r") == And(And(p, q), r)

    def test_or_is_left_associative(self):
        assert parse_formula("p | q | r") == Or(Or(p, q), r)

    def test_iff_is_left_associative(self):
        assert parse_formula("p <-> q <-> r") == Iff(Iff(p, q), r)

    def test_double_negation_chain(self):
        assert parse_formula("~~p") == Not(Not(Var("p")))

    def test_mixed_negation_spellings(self):
        assert parse_formula("¬!~p") == Not(Not(Not(p)))


class TestAtoms:
    def test_constants(self):
        assert parse_formula("T ^ F") == And(Top(), Bottom())

    def test_unicode_formula(self):
        assert parse_formula("¬(p ∧ q) ↔ (¬p ∨ ¬q)") == \
               parse_formula("~(p ^ q) <-> (~p | ~q)")

    def test_parse_takes_tokens(self):
        assert parse(tokenize("p")) == p

    def test_nested_parentheses(self):
        assert parse_formula("((p))") == p


class TestSyntaxErrors:
    def test_trailing_tokens(self):
        with pytest.raises(FormulaSyntaxError) as info:
            parse_formula("p q")
        assert info.value.token.text == "q"
        assert "q" in str(info.value)

    def test_missing_close_paren(self):
        with pytest.raises(FormulaSyntaxError) as info:
            parse_formula("(p ^ q")
        assert info.value.token.kind is TokenKind.EOF
        assert ")" in info.value.expected

    def test_dangling_operator(self):
        with pytest.raises(FormulaSyntaxError):
            parse_formula("p ^")

    def test_empty_input(self):
        with pytest.raises(FormulaSyntaxError):
            parse_formula("")

    def test_stray_close_paren(self):
        with pytest.raises(FormulaSyntaxError):
            parse_formula("p)")

    def test_lexer_error_passes_through(self):
        with pytest.raises(UnexpectedCharacter):
            parse_formula("p & q")


class TestParseFormulaToMarkup:
    def test_success(self):
        assert parse_formula_to_markup("p -> q") == {"markup": "p \\to q"}

    def test_unrecognized_character_is_reported_not_raised(self):
        result = parse_formula_to_markup("p &")
        assert result["markup"] == ""
        assert "&" in result["error"]

    def test_syntax_error_is_reported_not_raised(self):
        result = parse_formula_to_markup("(p")
        assert result["markup"] == ""
        assert "error" in result

    def test_deep_parentheses_are_reported_not_raised(self):
        result = parse_formula_to_markup("(" * 400 + "p" + ")" * 400)
        assert result["markup"] == ""
        assert "nested too deeply" in result["error"]

    def test_deep_negation_is_reported_not_raised(self):
        result = parse_formula_to_markup("~" * 3000 + "p")
        assert result["markup"] == ""
        assert "nested too deeply" in result["error"]

    def test_long_chain_is_reported_not_raised(self):
        result = parse_formula_to_markup("p ^ " * 3000 + "q")
        assert result["markup"] == ""
        assert "nested too deeply" in result["error"]


class TestNestingLimit:
    def test_at_limit_parses(self):
        depth = MAX_NESTING_DEPTH
        assert parse_formula("(" * depth + "p" + ")" * depth) == p
        assert parse_formula("~" * depth + "p") is not None

    def test_past_limit_raises(self):
        depth = MAX_NESTING_DEPTH + 1
        with pytest.raises(NestingTooDeep):
            parse_formula("(" * depth + "p" + ")" * depth)
        with pytest.raises(NestingTooDeep):
            parse_formula("~" * depth + "p")
        with pytest.raises(NestingTooDeep):
            parse_formula(" -> ".join(["p"] * (depth + 1)))

    def test_limit_counts_open_levels_only(self):
        # many sibling groups, each shallow
        text = " ^ ".join(["(p | q)"] * 500)
        assert len(tokenize(text)) > MAX_NESTING_DEPTH
        assert isinstance(parse_formula(text), And)


# ── Property-based tests ─────────────────────────────────────────────────────

class TestRoundTrip:

    @given(formulas)
    def test_canonical_text_round_trip(self, formula):
        assert parse_formula(to_canonical_text(formula)) == formula

    @given(formulas)
    def test_display_text_round_trip(self, formula):
        assert parse_formula(to_display_text(formula)) == formula

    @given(formulas)
    def test_reparse_is_stable(self, formula):
        """parse(canonical(parse(text))) == parse(text) for text we generate."""
        text = to_display_text(formula)
        once = parse_formula(text)
        assert parse_formula(to_canonical_text(once)) == once
