"""
Token definitions for the Lox lexer.

This module defines every token kind the scanner can produce:
- Single-character punctuation
- One-or-two character operators
- Literals (identifiers, strings, numbers)
- Reserved words
- The end-of-input sentinel
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class TokenKind(Enum):
    """
    Closed enumeration of all lexical categories in Lox.

    Organized by category, in the same order the scanner dispatches on them.
    """

    # ========================================================================
    # Single-character punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    STAR = auto()                   # *

    # ========================================================================
    # One or two character operators
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    SLASH = auto()                  # / (// starts a comment)

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # counter, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 12.5

    # ========================================================================
    # Reserved words
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special
    # ========================================================================
    END_OF_INPUT = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    ``lexeme`` is the exact source slice the token was scanned from (empty for
    the end-of-input sentinel). ``literal`` holds the decoded value: a float
    for NUMBER, the unquoted text for STRING, None for everything else.
    ``line`` is the 1-based line of the token's first character.
    """
    kind: TokenKind
    lexeme: str
    literal: Any
    line: int

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.kind.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.literal!r}, line={self.line})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.kind in KEYWORD_KINDS

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a decoded literal value."""
        return self.kind in (TokenKind.STRING, TokenKind.NUMBER)


# Lookup tables used by the scanner

KEYWORDS: Dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "fun": TokenKind.FUN,
    "for": TokenKind.FOR,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}

KEYWORD_KINDS = frozenset(KEYWORDS.values())

SINGLE_CHAR_TOKENS: Dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# Lead character -> (kind without '=', kind with '=')
ONE_OR_TWO_CHAR_TOKENS: Dict[str, Tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}
