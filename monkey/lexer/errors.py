"""
Error handling for the Monkey lexer.

The scanner itself never raises: an unrecognized character comes back as an
ILLEGAL token. This module turns those tokens into diagnostics with source
locations and help text, and provides the LexerError raised by the strict
convenience functions.

Author: xwest
"""

import logging
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS

logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    """A lexer diagnostic: an error or a hint."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    
    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
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
    Exception raised when a caller asks for strict lexing and the input
    contains an illegal character.
    
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
    
    def __str__(self) -> str:
        return str(self.diagnostic)


class Suggestions:
    """
    Suggestion helpers used when building diagnostics.
    """
    
    # Characters from other C-like languages mapped to the closest operator
    # Monkey actually has.
    OPERATOR_ALTERNATIVES = {
        '%': ['/'],
        '&': ['=='],
        '|': ['!='],
        '[': ['('],
        ']': [')'],
        ':': [';', '='],
        '.': [','],
        '~': ['!', '-'],
        '^': ['*'],
    }
    
    @staticmethod
    def suggest_keyword_corrections(word: str) -> List[str]:
        """Suggest keywords within edit distance 2 of a non-keyword identifier."""
        if word in KEYWORDS or len(word) < 3:
            return []
        
        suggestions = []
        for keyword in KEYWORDS.keys():
            if Suggestions._edit_distance(word, keyword) <= 2:  # Allow up to 2 character differences
                suggestions.append(keyword)
        
        return sorted(suggestions, key=lambda k: (Suggestions._edit_distance(word, k), k))[:3]
    
    @staticmethod
    def suggest_operator_alternatives(char: str) -> List[str]:
        """Suggest valid operators for a character Monkey does not accept."""
        alternatives = Suggestions.OPERATOR_ALTERNATIVES.get(char, [])
        return [
            op for op in alternatives
            if op in SINGLE_CHAR_TOKENS or op in TWO_CHAR_TOKENS
        ]
    
    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return Suggestions._edit_distance(s2, s1)
        
        if len(s2) == 0:
            return len(s1)
        
        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row
        
        return previous_row[-1]


# Error codes for categorization
ERROR_CODES = {
    "L001": "Illegal character",
    "L101": "Identifier resembles a keyword",
}


def create_illegal_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an illegal character."""
    suggestions = Suggestions.suggest_operator_alternatives(char)
    
    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isalpha() or char.isdigit():
        help_text = "Identifiers may only contain ASCII letters and underscores."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Monkey source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
    
    return LexerError(
        message=f"Illegal character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_keyword_hint(word: str, location: SourceLocation) -> Optional[Diagnostic]:
    """Create a hint when an identifier is one edit away from a keyword."""
    suggestions = Suggestions.suggest_keyword_corrections(word)
    if not suggestions:
        return None
    
    return Diagnostic(
        message=f"Identifier {word!r} looks like a misspelled keyword",
        location=location,
        severity="hint",
        code="L101",
        suggestions=suggestions
    )


def collect_diagnostics(lexer, hints: bool = False) -> List[Diagnostic]:
    """
    Scan a lexer to exhaustion and report its problems.
    
    Args:
        lexer: A freshly constructed Lexer
        hints: Also report identifiers that look like misspelled keywords
        
    Returns:
        One error diagnostic per ILLEGAL token, plus hints if requested,
        in source order
    """
    diagnostics: List[Diagnostic] = []
    
    for token in lexer:
        if token.type not in (TokenType.ILLEGAL, TokenType.IDENTIFIER):
            continue
        location = lexer.location(lexer.position - len(token.literal))
        
        if token.type == TokenType.ILLEGAL:
            diagnostics.append(create_illegal_character_error(token.literal, location).diagnostic)
        elif hints:
            hint = create_keyword_hint(token.literal, location)
            if hint is not None:
                diagnostics.append(hint)
    
    logger.debug("collected %d diagnostics for %s", len(diagnostics), lexer.filename)
    return diagnostics
