"""
Token definitions for the loxscan lexer.

This module defines every token kind the scanner can produce:
- Single-character punctuation and operators
- One or two character comparison operators
- Literals (identifiers, strings, numbers)
- Reserved keywords
- The end-of-input marker

Author: loxscan maintainers
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union


# Decoded payload of a token: absent, string text, or a number.
LiteralValue = Optional[Union[str, int, float]]


class TokenType(Enum):
    """
    Enumeration of all token kinds.

    Organized by category, mirroring the order the scanner recognizes them.
    """

    # ========================================================================
    # Single-character tokens
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
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # counter, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42

    # ========================================================================
    # Keywords
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
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Lines and columns are 0-based; offset counts characters, not bytes.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token kind, the exact lexeme consumed from the source,
    the decoded literal value (if any), and where the lexeme began.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: LiteralValue           # Decoded value for STRING and NUMBER
    location: SourceLocation

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.type.name}({self.lexeme!r} -> {self.literal!r}) @ {self.line}"
        return f"{self.type.name}({self.lexeme!r}) @ {self.line}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.location!r})")

    @property
    def line(self) -> int:
        """Line on which the lexeme began."""
        return self.location.line

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in {TokenType.STRING, TokenType.NUMBER}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    def to_dict(self) -> Dict[str, Any]:
        """Render the token as a JSON-friendly mapping."""
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "literal": self.literal,
            "line": self.location.line,
            "column": self.location.column,
        }


# Lookup tables shared read-only by every lexer instance.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

# Characters that always form a token on their own.
# Note: '}' is resolved by the lexer since its kind depends on LexerOptions
PUNCTUATION: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    ";": TokenType.SEMICOLON,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATOR_TYPES = frozenset({
    TokenType.MINUS, TokenType.PLUS, TokenType.SLASH, TokenType.STAR,
    TokenType.BANG, TokenType.BANG_EQUAL,
    TokenType.EQUAL, TokenType.EQUAL_EQUAL,
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
})

# Largest value a NUMBER literal may decode to (unsigned 64-bit).
MAX_INTEGER_LITERAL = 2 ** 64 - 1
