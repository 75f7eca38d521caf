"""
Monkey Language Package

Front end for Monkey, a small interpreted language with C-like syntax
(`let`, `fn`, `if`/`else`, `return`, integer and boolean literals).

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    └── repl.py          # Interactive token REPL

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType

__all__ = [
    # Core classes  
    "Lexer",
    "Token",
    "TokenType",
    
    # Version info
    "__version__",
    "__author__",
    "__license__",
]
