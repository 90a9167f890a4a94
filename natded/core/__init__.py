from .errors import FormulaError, UnexpectedCharacter, FormulaSyntaxError, NestingTooDeep, ResourceLimitExceeded
from .tokens import Token, TokenKind, tokenize
from .formula import (
    Formula, Var, Top, Bottom, Not, And, Or, Implies, Iff,
    extract_variables, to_markup, to_canonical_text, to_display_text, evaluate,
)
from .parser import Parser, parse, parse_formula, parse_formula_to_markup
from .state import RuleId, ProofStep, ProofState, normalize_formula

__all__ = [
    "FormulaError", "UnexpectedCharacter", "FormulaSyntaxError", "NestingTooDeep", "ResourceLimitExceeded",
    "Token", "TokenKind", "tokenize",
    "Formula", "Var", "Top", "Bottom", "Not", "And", "Or", "Implies", "Iff",
    "extract_variables", "to_markup", "to_canonical_text", "to_display_text", "evaluate",
    "Parser", "parse", "parse_formula", "parse_formula_to_markup",
    "RuleId", "ProofStep", "ProofState", "normalize_formula",
]
