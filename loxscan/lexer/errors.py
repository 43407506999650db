"""
Error handling for the loxscan lexer.

Every lexer error is fatal: the first one aborts the scan and no partial
token stream is produced. Errors carry a Diagnostic with the source
location and, where possible, a hint at what was meant.

Author: loxscan maintainers
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Structured description of a lexer error."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedCharacterError(LexerError):
    """A token started with a character no rule accepts."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(f"Unrecognized character: {char!r}", location, **kwargs)
        self.char = char


class UnterminatedStringError(LexerError):
    """Input ended before a string literal's closing quote."""


class MalformedNumberError(LexerError):
    """A number lexeme could not be decoded."""

    def __init__(self, lexeme: str, location: SourceLocation, **kwargs):
        super().__init__(f"Invalid numeric literal: '{lexeme}'", location, **kwargs)
        self.lexeme = lexeme


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
    "L004": "Number literal overflow",
}

# Characters people reach for from other C-like languages
_CHARACTER_HINTS = {
    '&': ["and"],
    '|': ["or"],
    "'": ['"'],
}

# Characters with no counterpart here, explained instead
_CHARACTER_NOTES = {
    '#': ("Comments are not supported.", "Remove the comment text starting at '#'"),
}


def suggest_character_alternatives(char: str) -> List[str]:
    """Suggest the spelling this language uses for a foreign character."""
    return list(_CHARACTER_HINTS.get(char, []))


# Helper functions for creating common errors
def create_invalid_character_error(char: str, location: SourceLocation) -> UnrecognizedCharacterError:
    """Create an error for a character that cannot start a token."""
    suggestions = suggest_character_alternatives(char)

    if char in _CHARACTER_NOTES:
        help_text, note = _CHARACTER_NOTES[char]
        suggestions = [note]
    elif suggestions:
        help_text = f"Did you mean: {', '.join(repr(s) for s in suggestions)}?"
    elif not char.isascii():
        help_text = f"Only ASCII source text is supported (found U+{ord(char):04X})."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid here."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return UnrecognizedCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_unterminated_string_error(location: SourceLocation) -> UnterminatedStringError:
    """Create an error for an unterminated string literal."""
    return UnterminatedStringError(
        "Unterminated string literal",
        location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote']
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> MalformedNumberError:
    """Create an error for a numeric literal that cannot be decoded."""
    return MalformedNumberError(
        lexeme,
        location,
        code="L003",
        help_text=reason
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation) -> MalformedNumberError:
    """Create an error for an integer literal too large for 64 bits."""
    return MalformedNumberError(
        lexeme,
        location,
        code="L004",
        help_text="Integer literals must fit in an unsigned 64-bit value."
    )
