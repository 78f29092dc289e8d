"""
Lox Lexer Package

Implements a hand-written lexical analyzer (scanner) for the Lox language.

Key Features:
- Single pass with at most two characters of lookahead
- Maximal-munch operators (!=, ==, <=, >=)
- Number and string literal decoding
- Reserved word recognition
- Non-fatal error reporting through a caller-supplied reporter
"""

from .tokens import Token, TokenKind, KEYWORDS
from .scanner import (
    Scanner, ScanResult, scan, scan_source, tokenize_string, tokenize_file
)
from .errors import Diagnostic, ErrorCollector, LexerError, Reporter

__all__ = [
    "Scanner",
    "ScanResult",
    "scan",
    "scan_source",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "Diagnostic",
    "ErrorCollector",
    "LexerError",
    "Reporter",
]
