"""
Recursive-descent parser: tokens -> Formula.

Grammar, loosest binding first:

    iff      := implies ( IFF implies )*         left-associative
    implies  := or ( IMPLIES implies )?          right-associative
    or       := and ( OR and )*                  left-associative
    and      := not ( AND not )*                 left-associative
    not      := NOT not | atom
    atom     := VAR | TRUE | FALSE | LPAREN iff RPAREN

So "p | q ^ r" is p | (q ^ r), "p -> q -> r" is p -> (q -> r),
and "~~p" is ~(~p).
"""

from .errors import FormulaError, FormulaSyntaxError, NestingTooDeep
from .formula import Var, Top, Bottom, Not, And, Or, Implies, Iff, Formula, to_markup
from .tokens import Token, TokenKind, tokenize


# Each level costs several stack frames; this keeps parsing well under
# the default recursion limit.
MAX_NESTING_DEPTH = 100


class Parser:
    """One-shot parser over a token list that ends in EOF."""

    def __init__(self, tokens: list):
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            tokens = list(tokens) + [Token(TokenKind.EOF, "")]
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def enter(self):
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise NestingTooDeep(self.peek(), MAX_NESTING_DEPTH)

    def leave(self):
        self.depth -= 1

    def match(self, kind: TokenKind) -> bool:
        if self.peek().kind is kind:
            self.advance()
            return True
        return False

    def parse(self) -> Formula:
        result = self.parse_iff()
        if self.peek().kind is not TokenKind.EOF:
            raise FormulaSyntaxError(self.peek(), "end of formula")
        return result

    def parse_iff(self) -> Formula:
        left = self.parse_implies()
        while self.match(TokenKind.IFF):
            left = Iff(left, self.parse_implies())
        return left

    def parse_implies(self) -> Formula:
        left = self.parse_or()
        if self.match(TokenKind.IMPLIES):
            self.enter()
            right = self.parse_implies()
            self.leave()
            return Implies(left, right)
        return left

    def parse_or(self) -> Formula:
        left = self.parse_and()
        while self.match(TokenKind.OR):
            left = Or(left, self.parse_and())
        return left

    def parse_and(self) -> Formula:
        left = self.parse_not()
        while self.match(TokenKind.AND):
            left = And(left, self.parse_not())
        return left

    def parse_not(self) -> Formula:
        if self.match(TokenKind.NOT):
            self.enter()
            operand = self.parse_not()
            self.leave()
            return Not(operand)
        return self.parse_atom()

    def parse_atom(self) -> Formula:
        token = self.peek()

        if token.kind is TokenKind.VAR:
            self.advance()
            return Var(token.text)
        if token.kind is TokenKind.TRUE:
            self.advance()
            return Top()
        if token.kind is TokenKind.FALSE:
            self.advance()
            return Bottom()
        if token.kind is TokenKind.LPAREN:
            self.advance()
            self.enter()
            expr = self.parse_iff()
            if not self.match(TokenKind.RPAREN):
                raise FormulaSyntaxError(self.peek(), "closing parenthesis ')'")
            self.leave()
            return expr

        raise FormulaSyntaxError(token, "a variable, constant or '('")


def parse(tokens: list) -> Formula:
    """Parse a token list (as produced by tokenize) into a Formula."""
    return Parser(tokens).parse()


def parse_formula(text: str) -> Formula:
    """tokenize + parse in one call."""
    return parse(tokenize(text))


def parse_formula_to_markup(text: str) -> dict:
    """
    Parse and render as LaTeX, reporting failure as data.

    Returns {"markup": ...} on success and {"markup": "", "error": message}
    when the text does not lex or parse. Never raises for bad input.
    """
    try:
        return {"markup": to_markup(parse_formula(text))}
    except FormulaError as e:
        return {"markup": "", "error": str(e)}
    except RecursionError:
        # long left-associative chains parse iteratively but render recursively
        return {"markup": "", "error": "Formula is nested too deeply"}
