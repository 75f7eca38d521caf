"""
Lexer throughput benchmark.

Run with: pytest tests/performance --benchmark-only
"""

import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from monkey.lexer import Lexer, TokenType


PROGRAM = """
let fibonacci = fn(x) {
    if (x < 2) {
        return x;
    } else {
        return fibonacci(x - 1) + fibonacci(x - 2);
    }
};
let result = fibonacci(15) * 2 / 3;
if (result != 10 == false) { return !true; }
"""


@pytest.fixture
def large_source():
    return PROGRAM * 200


def test_tokenize_throughput(benchmark, large_source):
    tokens = benchmark(lambda: Lexer(large_source).tokenize())
    assert tokens[-1].type == TokenType.EOF
    assert sum(1 for t in tokens if t.type == TokenType.ILLEGAL) == 0
