"""
loxscan Lexer Package

Implements the lexical scanner for a small C-like scripting language.

Key Features:
- Maximal-munch scanning of one and two character operators
- String literals (may span lines) and unsigned integer literals
- Case-sensitive keyword recognition from a shared read-only table
- Fatal diagnostics with source locations and error codes
"""

from .tokens import Token, TokenType, SourceLocation, LiteralValue, KEYWORDS
from .lexer import Lexer, LexerOptions, tokenize_string
from .errors import (
    LexerError, UnrecognizedCharacterError, UnterminatedStringError,
    MalformedNumberError
)

__all__ = [
    "Lexer",
    "LexerOptions",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "LiteralValue",
    "KEYWORDS",
    "LexerError",
    "UnrecognizedCharacterError",
    "UnterminatedStringError",
    "MalformedNumberError",
]
