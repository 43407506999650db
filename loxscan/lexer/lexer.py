"""
loxscan Lexer - turns one line of source text into tokens

Single pass, character at a time, maximal munch. The keyword and
punctuation tables live in tokens.py and are shared by every instance.

The three LexerOptions switches exist because the historical scanner had
quirks ('}' scanned as LEFT_BRACE, a lone '!' scanned as EQUAL, and no
fractional number support). Defaults keep those quirks so token streams
stay byte-for-byte compatible with existing consumers.
"""

from dataclasses import dataclass
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, LiteralValue, KEYWORDS, PUNCTUATION,
    MAX_INTEGER_LITERAL
)
from .errors import (
    LexerError, create_invalid_character_error,
    create_unterminated_string_error, create_invalid_number_error,
    create_number_overflow_error
)


NULL_CHAR = '\0'


@dataclass(frozen=True)
class LexerOptions:
    """
    Dialect switches for the lexer.

    All default to the historical behaviour.
    """
    distinct_right_brace: bool = False   # '}' -> RIGHT_BRACE instead of LEFT_BRACE
    distinct_bang: bool = False          # lone '!' -> BANG instead of EQUAL
    fractional_numbers: bool = False     # '1.5' -> float instead of an error

    @classmethod
    def fixed(cls) -> "LexerOptions":
        """Options with every historical quirk corrected."""
        return cls(distinct_right_brace=True, distinct_bang=True, fractional_numbers=True)


DEFAULT_OPTIONS = LexerOptions()


class Lexer:
    """
    Lexical scanner.

    Converts source text into a list of tokens terminated by a single EOF
    token. Scanning is all-or-nothing: the first malformed construct raises
    a LexerError and no tokens are returned.
    """

    def __init__(self, source: str, filename: str = "<stdin>",
                 options: Optional[LexerOptions] = None):
        """
        Initialize the lexer with source text.

        Args:
            source: Source text to scan
            filename: Name reported in diagnostics
            options: Dialect switches, defaults to LexerOptions()
        """
        self.source = source
        self.filename = filename
        self.options = options or DEFAULT_OPTIONS
        self.tokens: List[Token] = []

        # Cursor
        self.start = 0
        self.current = 0
        self.line = 0
        self.line_start = 0

        # Where the lexeme being scanned began
        self._start_line = 0
        self._start_column = 0

        # Set once a scan has produced the complete stream
        self._done = False

    def scan_tokens(self) -> List[Token]:
        """
        Scan the whole source.

        A completed lexer returns its existing token list without
        rescanning. After a failed scan, calling again starts over.

        Returns:
            List of tokens ending with exactly one EOF token

        Raises:
            LexerError: On the first unrecognized character, unterminated
                string, or undecodable number
        """
        if self._done:
            return self.tokens

        self.start = 0
        self.current = 0
        self.line = 0
        self.line_start = 0
        self.tokens = []

        try:
            while not self._is_at_end():
                self.start = self.current
                self._start_line = self.line
                self._start_column = self.current - self.line_start
                self._scan_token()
        except LexerError:
            self.tokens = []
            raise

        self.start = self.current
        self._start_line = self.line
        self._start_column = self.current - self.line_start
        self._add_token(TokenType.EOF)
        self._done = True

        return self.tokens

    # Conventional name used by most callers
    tokenize = scan_tokens

    def _scan_token(self):
        """Recognize one lexeme starting at self.start."""
        char = self._advance()

        if char in PUNCTUATION:
            self._add_token(PUNCTUATION[char])
        elif char == '}':
            # Historically '}' shared LEFT_BRACE with '{'
            if self.options.distinct_right_brace:
                self._add_token(TokenType.RIGHT_BRACE)
            else:
                self._add_token(TokenType.LEFT_BRACE)
        elif char == '!':
            if self._match('='):
                self._add_token(TokenType.BANG_EQUAL)
            elif self.options.distinct_bang:
                self._add_token(TokenType.BANG)
            else:
                self._add_token(TokenType.EQUAL)
        elif char == '=':
            self._add_token(TokenType.EQUAL_EQUAL if self._match('=') else TokenType.EQUAL)
        elif char == '>':
            self._add_token(TokenType.GREATER_EQUAL if self._match('=') else TokenType.GREATER)
        elif char == '<':
            self._add_token(TokenType.LESS_EQUAL if self._match('=') else TokenType.LESS)
        elif char in (' ', '\r', '\t'):
            pass
        elif char == '\n':
            self._newline()
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            raise create_invalid_character_error(char, self._start_location())

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            char = self._advance()
            if char == '\n':
                self._newline()

        if self._is_at_end():
            raise create_unterminated_string_error(self._start_location())

        self._advance()  # closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        """Scan a number literal; the first digit is already consumed."""
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, self._decode_number(self._lexeme()))

    def _decode_number(self, lexeme: str) -> LiteralValue:
        if '.' in lexeme and self.options.fractional_numbers:
            return float(lexeme)

        try:
            value = int(lexeme)
        except ValueError:
            raise create_invalid_number_error(
                lexeme,
                self._start_location(),
                f"Cannot parse '{lexeme}' as an unsigned integer"
            ) from None

        if value > MAX_INTEGER_LITERAL:
            raise create_number_overflow_error(lexeme, self._start_location())

        return value

    def _identifier(self):
        """Scan an identifier or keyword; the first character is already consumed."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        self._add_token(KEYWORDS.get(self._lexeme(), TokenType.IDENTIFIER))

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Return the character at the cursor and move past it."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return NULL_CHAR
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return NULL_CHAR
        return self.source[self.current + 1]

    def _newline(self):
        """Record that the character just consumed was a line break."""
        self.line += 1
        self.line_start = self.current

    def _lexeme(self) -> str:
        return self.source[self.start:self.current]

    def _start_location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._start_line, self._start_column, self.start)

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None):
        self.tokens.append(Token(token_type, self._lexeme(), literal, self._start_location()))


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def _is_alphanumeric(char: str) -> bool:
    return _is_digit(char) or _is_alpha(char)


def tokenize_string(source: str, filename: str = "<string>",
                    options: Optional[LexerOptions] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting
        options: Dialect switches

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename, options).scan_tokens()
