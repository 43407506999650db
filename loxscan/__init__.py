"""
loxscan

Lexical scanner for a small C-like scripting language. Turns source text
into an ordered list of classified tokens for a downstream parser.

Layout:
    loxscan/
    ├── lexer/           # Tokens, diagnostics and the scanner
    └── cli.py           # One-line stdin driver
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, LexerOptions, Token, TokenType, LexerError, tokenize_string

__all__ = [
    "Lexer",
    "LexerOptions",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]
