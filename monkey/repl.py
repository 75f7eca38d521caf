"""
Interactive token REPL for Monkey.

Reads source a line at a time and prints the tokens the lexer produces,
one per line. Useful for checking how a snippet gets split up before a
parser ever sees it.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Lexer, TokenType
from .lexer.errors import Diagnostic, create_illegal_character_error

logger = logging.getLogger(__name__)

PROMPT = ">> "


def print_tokens(lexer: Lexer, out: TextIO) -> List[Diagnostic]:
    """
    Write every token up to (not including) EOF.
    
    Returns:
        One error diagnostic per ILLEGAL token, in source order
    """
    diagnostics: List[Diagnostic] = []
    for token in lexer:
        if token.type == TokenType.EOF:
            break
        if token.type == TokenType.ILLEGAL:
            location = lexer.location(lexer.position - len(token.literal))
            diagnostics.append(create_illegal_character_error(token.literal, location).diagnostic)
        out.write(f"{token}\n")
    return diagnostics


def start(stdin: TextIO, stdout: TextIO, prompt: str = PROMPT):
    """Run the read-lex-print loop until stdin is exhausted."""
    line_number = 0
    while True:
        stdout.write(prompt)
        stdout.flush()
        
        line = stdin.readline()
        if not line:
            break
        line_number += 1
        
        diagnostics = print_tokens(Lexer(line, f"<stdin:{line_number}>"), stdout)
        if diagnostics:
            logger.info("line %d: %d illegal character(s)", line_number, len(diagnostics))


def run_file(path: str, stdout: TextIO, stderr: Optional[TextIO] = None, strict: bool = False) -> int:
    """
    Print the tokens of a whole file.
    
    In strict mode the diagnostics for illegal characters go to `stderr`
    (default: sys.stderr).
    
    Returns:
        Exit status: 1 if strict and the file has illegal characters, else 0
    """
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    
    diagnostics = print_tokens(Lexer(source, path), stdout)
    
    if not strict:
        return 0
    
    if stderr is None:
        stderr = sys.stderr
    for diagnostic in diagnostics:
        stderr.write(str(diagnostic))
    return 1 if diagnostics else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the monkey-repl console script."""
    
    parser = argparse.ArgumentParser(
        prog="monkey-repl",
        description="Monkey token REPL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey-repl                          # Interactive session
    monkey-repl --file program.mk        # Print the tokens of a file
    monkey-repl --file program.mk --strict
        """
    )
    
    parser.add_argument('--file', metavar='PATH',
                      help='Tokenize a file instead of reading stdin')
    parser.add_argument('--strict', action='store_true',
                      help='Report illegal characters and exit non-zero (with --file)')
    parser.add_argument('--prompt', default=PROMPT,
                      help='Prompt shown in interactive mode')
    parser.add_argument('--log-level', default='WARNING',
                      choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                      help='Logging verbosity')
    parser.add_argument('--version', action='version',
                      version=f"%(prog)s {__version__}")
    
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    
    if args.file:
        try:
            return run_file(args.file, sys.stdout, sys.stderr, strict=args.strict)
        except OSError as e:
            logger.error("cannot read %s: %s", args.file, e)
            return 2
    
    try:
        start(sys.stdin, sys.stdout, prompt=args.prompt)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
