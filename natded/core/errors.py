"""
Error conditions for formula text.

Every failure that comes from *what the user typed* is a FormulaError, so
a caller that wants to turn bad input into a message only has one thing
to catch. Rule application never raises; it returns None instead.
"""


class FormulaError(ValueError):
    """Base class for problems with formula text."""


class UnexpectedCharacter(FormulaError):
    """The lexer met a character that starts no token."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character: {char!r} at position {position}")


class FormulaSyntaxError(FormulaError):
    """
    The token stream is not a formula.

    Raised for trailing tokens after a complete expression, a missing
    closing parenthesis, or a token that cannot start an atom.
    """

    def __init__(self, token, expected: str = ""):
        self.token = token
        self.expected = expected
        shown = token.text or token.kind.value
        message = f"Unexpected token: {shown!r} at position {token.position}"
        if expected:
            message += f" (expected {expected})"
        super().__init__(message)


class ResourceLimitExceeded(FormulaError):
    """A truth table would have too many rows to enumerate."""

    def __init__(self, variable_count: int, limit: int):
        self.variable_count = variable_count
        self.limit = limit
        super().__init__(
            f"Formula has {variable_count} variables; truth tables are limited "
            f"to {limit} ({2 ** limit} rows)"
        )


class NestingTooDeep(FormulaError):
    """Parentheses, negations or implications nest past the parser's limit."""

    def __init__(self, token, limit: int):
        self.token = token
        self.limit = limit
        super().__init__(
            f"Formula is nested too deeply (more than {limit} levels) "
            f"at position {token.position}"
        )
