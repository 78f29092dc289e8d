"""
loxscan

Lexical analysis front end for the Lox language.

Architecture:
    loxscan/
    ├── lexer/           # Tokens, scanner and lexical diagnostics
    └── cli.py           # Token dump command line tool

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Scanner,
    ScanResult,
    Token,
    TokenKind,
    ErrorCollector,
    LexerError,
    scan,
    scan_source,
)

__all__ = [
    "Scanner",
    "ScanResult",
    "Token",
    "TokenKind",
    "ErrorCollector",
    "LexerError",
    "scan",
    "scan_source",

    # Version info
    "__version__",
    "__license__",
]
