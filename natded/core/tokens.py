"""
Lexer: formula text -> list of Tokens.

Surface syntax, by token kind:

    IFF       <->  ↔
    IMPLIES   ->   →
    OR        |    ||   \\/   ∨
    AND       ^    &&   /\\   ∧
    NOT       ~    !    ¬
    TRUE      T    ⊤
    FALSE     F    ⊥
    VAR       [A-Za-z_][A-Za-z0-9_]*   (other than the bare letters T and F)

Whitespace separates tokens and is otherwise ignored. Longer operators win
over shorter ones, so "<->" is never read as "<" followed by "->".
"""

from dataclasses import dataclass
from enum import Enum

from .errors import UnexpectedCharacter


class TokenKind(Enum):
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    AND = "AND"
    OR = "OR"
    IMPLIES = "IMPLIES"
    IFF = "IFF"
    NOT = "NOT"
    VAR = "VAR"
    TRUE = "TRUE"
    FALSE = "FALSE"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int = 0

    def __repr__(self):
        return f"Token({self.kind.value}, {self.text!r})"


THREE_CHAR_OPERATORS = {
    "<->": TokenKind.IFF,
}

TWO_CHAR_OPERATORS = {
    "->": TokenKind.IMPLIES,
    "/\\": TokenKind.AND,
    "&&": TokenKind.AND,
    "\\/": TokenKind.OR,
    "||": TokenKind.OR,
}

ONE_CHAR_TOKENS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "^": TokenKind.AND,
    "∧": TokenKind.AND,
    "|": TokenKind.OR,
    "∨": TokenKind.OR,
    "~": TokenKind.NOT,
    "¬": TokenKind.NOT,
    "!": TokenKind.NOT,
    "→": TokenKind.IMPLIES,
    "↔": TokenKind.IFF,
    "⊤": TokenKind.TRUE,
    "⊥": TokenKind.FALSE,
}

# Single reserved letters. "Foo" and "Tx" are still variables.
CONSTANT_LETTERS = {
    "T": TokenKind.TRUE,
    "F": TokenKind.FALSE,
}


def _is_identifier_start(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_identifier_char(ch: str) -> bool:
    return _is_identifier_start(ch) or ("0" <= ch <= "9")


def tokenize(text: str) -> list:
    """
    Split formula text into tokens, ending with exactly one EOF token.

    Raises UnexpectedCharacter naming the first character that starts no
    token, and its 0-based position in `text`.
    """
    tokens = []
    pos = 0
    n = len(text)

    while pos < n:
        ch = text[pos]

        if ch.isspace():
            pos += 1
            continue

        three = text[pos:pos + 3]
        if three in THREE_CHAR_OPERATORS:
            tokens.append(Token(THREE_CHAR_OPERATORS[three], three, pos))
            pos += 3
            continue

        two = text[pos:pos + 2]
        if two in TWO_CHAR_OPERATORS:
            tokens.append(Token(TWO_CHAR_OPERATORS[two], two, pos))
            pos += 2
            continue

        if ch in ONE_CHAR_TOKENS:
            tokens.append(Token(ONE_CHAR_TOKENS[ch], ch, pos))
            pos += 1
            continue

        if _is_identifier_start(ch):
            end = pos + 1
            while end < n and _is_identifier_char(text[end]):
                end += 1
            word = text[pos:end]
            kind = CONSTANT_LETTERS.get(word, TokenKind.VAR)
            tokens.append(Token(kind, word, pos))
            pos = end
            continue

        raise UnexpectedCharacter(ch, pos)

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens
