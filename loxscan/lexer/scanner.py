"""
Lox scanner - turns source text into a list of tokens.

Single left-to-right pass with at most two characters of lookahead. Lexical
errors go to a reporter callable and never stop the scan, so the caller always
gets a complete token list ending in END_OF_INPUT.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .tokens import (
    Token, TokenKind, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    ErrorCollector, LexerError, Reporter, UNEXPECTED_CHARACTER, UNTERMINATED_STRING
)

logger = logging.getLogger(__name__)

# Returned by the peek helpers past the end of input
NO_CHAR = "\0"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Holds the cursor state for one scan. ``scan()`` builds a fresh instance
    per call; calling ``scan_tokens()`` again rescans from the beginning and
    returns a new list.
    """

    def __init__(self, source: str, reporter: Optional[Reporter] = None,
                 filename: str = "<string>"):
        """
        Args:
            source: Source code string
            reporter: Callable receiving ``(line, message)`` per lexical error.
                Without one, each error is logged at WARNING.
            filename: Name of the source, used in log messages
        """
        self.source = source
        self.reporter = reporter if reporter is not None else self._log_error
        self.filename = filename
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.error_count = 0

    def scan_tokens(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            List of tokens, always terminated by one END_OF_INPUT token
        """
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.error_count = 0

        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenKind.END_OF_INPUT, "", None, self.line))
        logger.debug("Scanned %s: %d tokens, %d errors",
                     self.filename, len(self.tokens), self.error_count)
        return self.tokens

    def _scan_token(self) -> None:
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in ONE_OR_TWO_CHAR_TOKENS:
            # Maximal munch: '<=' is never '<' followed by '='
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline itself is left
                # for the next iteration so the line counter sees it.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenKind.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            self._error(self.line, UNEXPECTED_CHARACTER)

    def _string(self) -> None:
        """Scan a string literal; the opening quote is already consumed."""
        start_line = self.line
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error(start_line, UNTERMINATED_STRING)
            return

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenKind.STRING, value, line=start_line)

    def _number(self) -> None:
        """Scan a number literal; the first digit is already consumed."""
        while _is_digit(self._peek()):
            self._advance()

        # The '.' is only part of the number when a digit follows it
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenKind.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self) -> None:
        """Scan an identifier or reserved word."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _error(self, line: int, message: str) -> None:
        self.error_count += 1
        logger.debug("%s:%d: %s", self.filename, line, message)
        self.reporter(line, message)

    def _log_error(self, line: int, message: str) -> None:
        logger.warning("%s:%d: %s", self.filename, line, message)

    def _add_token(self, kind: TokenKind, literal: Any = None,
                   line: Optional[int] = None) -> None:
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(kind, lexeme, literal,
                                 self.line if line is None else line))

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        """Character at the cursor without consuming it."""
        if self._is_at_end():
            return NO_CHAR
        return self.source[self.current]

    def _peek_next(self) -> str:
        """Character one past the cursor without consuming anything."""
        if self.current + 1 >= len(self.source):
            return NO_CHAR
        return self.source[self.current + 1]

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)


@dataclass
class ScanResult:
    """Tokens plus every error reported while producing them."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Check if the scan reported any errors."""
        return len(self.errors) > 0


def scan(source: str, reporter: Optional[Reporter] = None) -> List[Token]:
    """
    Scan ``source`` into tokens.

    Never raises for lexical errors; each one is passed to ``reporter`` as
    ``(line, message)``. Without a reporter, each error is logged at WARNING
    through this module's logger.
    """
    return Scanner(source, reporter).scan_tokens()


def scan_source(source: str, filename: str = "<string>") -> ScanResult:
    """Scan ``source`` and collect its errors into a ``ScanResult``."""
    collector = ErrorCollector(filename)
    tokens = Scanner(source, collector, filename).scan_tokens()
    return ScanResult(tokens, collector.errors)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: The first lexical error, if any were reported
    """
    result = scan_source(source, filename)
    if result.has_errors():
        raise result.errors[0]
    return result.tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: The first lexical error, if any were reported
        OSError: If the file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    return tokenize_string(source, str(filepath))
