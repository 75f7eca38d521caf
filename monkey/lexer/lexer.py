"""
Monkey Lexer - turns source text into tokens, one at a time.

The scanner keeps two cursors into the input: `position` points at the
character currently being examined (`ch`) and `read_position` at the one
after it, which gives a single character of lookahead for `==` and `!=`.

xwest
"""

import logging
from typing import Iterator, List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    lookup_identifier
)
from .errors import create_illegal_character_error

logger = logging.getLogger(__name__)

# Value of `ch` once the cursor has run off the end of the input.
# An empty string can never come out of the source, so a NUL character in
# the input is still lexed as ILLEGAL.
EOF_CHAR = ""

WHITESPACE = frozenset(" \t\n\r")


class Lexer:
    """
    Monkey lexical analyzer.
    
    Pull-based: every call to next_token() scans and returns exactly one
    token. Once the input is exhausted every further call returns an EOF
    token. Errors are never raised; unrecognized characters come back as
    ILLEGAL tokens.
    """
    
    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.
        
        Args:
            source: Source code string; may be empty
            filename: Name of source file for diagnostics
        """
        self.source = source
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR
        
        self._read_char()
    
    def next_token(self) -> Token:
        """Scan the next token and advance past it."""
        self._skip_whitespace()
        
        ch = self.ch
        
        if ch == EOF_CHAR:
            # Terminal state, the cursor stays put
            return Token(TokenType.EOF, "")
        
        if ch in SINGLE_CHAR_TOKENS:
            pair = ch + self._peek_char()
            if pair in TWO_CHAR_TOKENS:
                self._read_char()
                token = Token(TWO_CHAR_TOKENS[pair], pair)
            else:
                token = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif _is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_identifier(literal), literal)
        elif _is_digit(ch):
            return Token(TokenType.INTEGER, self._read_number())
        else:
            logger.debug("illegal character %r at offset %d in %s", ch, self.position, self.filename)
            token = Token(TokenType.ILLEGAL, ch)
        
        self._read_char()
        return token
    
    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return
    
    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the input.
        
        Returns:
            List of tokens from the current position, ending with EOF
        """
        return list(self)
    
    def location(self, offset: Optional[int] = None) -> SourceLocation:
        """
        Compute the line and column of an offset into the source.
        
        Args:
            offset: Character offset; defaults to the current position
        """
        if offset is None:
            offset = self.position
        offset = max(0, min(offset, len(self.source)))
        
        line = self.source.count("\n", 0, offset) + 1
        line_start = self.source.rfind("\n", 0, offset) + 1
        return SourceLocation(self.filename, line, offset - line_start + 1, offset)
    
    def _read_char(self):
        """Move both cursors one character forward."""
        if self.read_position >= len(self.source):
            self.ch = EOF_CHAR
        else:
            self.ch = self.source[self.read_position]
        
        self.position = self.read_position
        self.read_position += 1
    
    def _peek_char(self) -> str:
        """Look at the character after `ch` without consuming it."""
        if self.read_position >= len(self.source):
            return EOF_CHAR
        return self.source[self.read_position]
    
    def _read_identifier(self) -> str:
        start = self.position
        while _is_letter(self.ch):
            self._read_char()
        return self.source[start:self.position]
    
    def _read_number(self) -> str:
        start = self.position
        while _is_digit(self.ch):
            self._read_char()
        return self.source[start:self.position]
    
    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()


def _is_letter(ch: str) -> bool:
    # ASCII only; digits are not allowed anywhere in an identifier
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def tokenize_string(source: str, filename: str = "<string>", strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.
    
    Args:
        source: Source code string
        filename: Filename for diagnostics
        strict: Raise on the first ILLEGAL token instead of returning it
        
    Returns:
        List of tokens ending with EOF
        
    Raises:
        LexerError: If strict and the source contains an illegal character
    """
    lexer = Lexer(source, filename)
    tokens: List[Token] = []
    
    for token in lexer:
        if strict and token.type == TokenType.ILLEGAL:
            location = lexer.location(lexer.position - len(token.literal))
            raise create_illegal_character_error(token.literal, location)
        tokens.append(token)
    
    logger.debug("tokenized %s into %d tokens", filename, len(tokens))
    return tokens


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.
    
    Args:
        filepath: Path to source file
        strict: Raise on the first ILLEGAL token instead of returning it
        
    Returns:
        List of tokens ending with EOF
        
    Raises:
        LexerError: If strict and the file contains an illegal character
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()
        
    return tokenize_string(source, filepath, strict=strict)
