"""
Monkey Lexer Package

Implements the lexical analyzer (tokenizer) for the Monkey language: a
pull-based scanner that hands out one token per call, ending in an EOF
token that repeats forever.

Key Features:
- Single-character lookahead for `==` and `!=`
- Exact source text on every token
- Illegal characters reported inline as ILLEGAL tokens, never raised
- Diagnostics with source locations for tooling

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, lookup_identifier
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, collect_diagnostics

__all__ = [
    "Lexer", 
    "Token", 
    "TokenType", 
    "SourceLocation",
    "KEYWORDS",
    "lookup_identifier",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "collect_diagnostics",
]
