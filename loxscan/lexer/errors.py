"""
Error handling for the Lox lexer.

Lexical errors are reported, never raised, while a scan is in progress. The
scanner hands each one to a reporter callable taking ``(line, message)``;
``ErrorCollector`` is the reporter shipped with the package and turns every
report into a ``LexerError`` carrying a ``Diagnostic``.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

# Any callable receiving (line, message) can act as the error sink.
Reporter = Callable[[int, str], None]

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."

# Error codes for categorization
ERROR_CODES = {
    UNEXPECTED_CHARACTER: "L001",
    UNTERMINATED_STRING: "L002",
}

HELP_TEXT = {
    "L001": "Only ASCII letters, digits, '_', quotes, whitespace and Lox operators are valid.",
    "L002": "String literals must be closed with a matching '\"' before the end of input.",
}


@dataclass
class Diagnostic:
    """A single lexer diagnostic with its originating line."""
    message: str
    line: int
    filename: str = "<string>"
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"[line {self.line}] {self.severity.capitalize()}: {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result

    @property
    def location(self) -> str:
        return f"{self.filename}:{self.line}"


class LexerError(Exception):
    """
    A lexical error.

    Collected rather than raised during a scan; ``tokenize_string`` and
    ``tokenize_file`` raise the first one for callers that want to stop on
    the first error.
    """

    def __init__(
        self,
        message: str,
        line: int,
        filename: str = "<string>",
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        if code is None:
            code = ERROR_CODES.get(message)
        if help_text is None and code is not None:
            help_text = HELP_TEXT.get(code)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            filename=filename,
            code=code,
            help_text=help_text,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorCollector:
    """
    Reporter that records every lexical error it is handed.

    Create one per scan (or per driver session). It replaces a shared
    "had error" flag: callers ask the collector instead.
    """

    def __init__(self, filename: str = "<string>"):
        self.filename = filename
        self.errors: List[LexerError] = []

    def __call__(self, line: int, message: str) -> None:
        error = LexerError(message, line, filename=self.filename)
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Check if any error has been reported."""
        return len(self.errors) > 0

    def clear(self) -> None:
        """Forget all collected errors, e.g. between REPL lines."""
        self.errors.clear()
