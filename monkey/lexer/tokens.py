"""
Token definitions for the Monkey lexer.

This module defines every token type the scanner can produce:
- Sentinels (illegal character, end of input)
- Identifiers and integer literals
- Single- and two-character operators
- Punctuation and delimiters
- Keywords

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.
    
    Organized by category for clarity and maintainability.
    """
    
    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    EOF = auto()                    # End of input
    
    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # add, foobar, x, _tmp
    INTEGER = auto()                # 5, 838383
    
    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    
    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    
    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.
    
    Only used for diagnostics; tokens themselves carry no position.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input
    
    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its type plus the exact source text it was scanned from.
    
    The EOF token has an empty literal.
    """
    type: TokenType
    literal: str
    
    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"
    
    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"
    
    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {TokenType.INTEGER, TokenType.TRUE, TokenType.FALSE}
    
    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in _KEYWORD_TYPES
    
    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in _OPERATOR_TYPES
    
    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER
    
    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF
    
    @property
    def is_illegal(self) -> bool:
        return self.type == TokenType.ILLEGAL


# Lookup tables for token recognition, built once at import time and
# exposed read-only.

KEYWORDS = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})

SINGLE_CHAR_TOKENS = MappingProxyType({
    # Operators
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    
    # Punctuation
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
})

# Two-character operators; the first character must also be a key in
# SINGLE_CHAR_TOKENS so the scanner can fall back to it.
TWO_CHAR_TOKENS = MappingProxyType({
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
})

_KEYWORD_TYPES = frozenset(KEYWORDS.values())

_OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN, TokenType.PLUS, TokenType.MINUS, TokenType.BANG,
    TokenType.ASTERISK, TokenType.SLASH, TokenType.LESS_THAN,
    TokenType.GREATER_THAN, TokenType.EQUAL, TokenType.NOT_EQUAL,
})


def lookup_identifier(lexeme: str) -> TokenType:
    """Classify an identifier-shaped lexeme as a keyword or IDENTIFIER."""
    return KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
