"""
Tests for the Monkey token model and keyword table.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.lexer.tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    lookup_identifier
)


class TestToken(unittest.TestCase):
    
    def test_value_equality(self):
        self.assertEqual(Token(TokenType.LET, "let"), Token(TokenType.LET, "let"))
        self.assertNotEqual(Token(TokenType.LET, "let"), Token(TokenType.IDENTIFIER, "let"))
        self.assertNotEqual(Token(TokenType.INTEGER, "1"), Token(TokenType.INTEGER, "10"))
    
    def test_immutable(self):
        token = Token(TokenType.PLUS, "+")
        with self.assertRaises(AttributeError):
            token.literal = "-"
    
    def test_hashable(self):
        self.assertEqual(len({Token(TokenType.EOF, ""), Token(TokenType.EOF, "")}), 1)
    
    def test_str_and_repr(self):
        token = Token(TokenType.NOT_EQUAL, "!=")
        self.assertEqual(str(token), "NOT_EQUAL('!=')")
        self.assertEqual(repr(token), "Token(NOT_EQUAL, '!=')")
        self.assertEqual(str(Token(TokenType.EOF, "")), "EOF('')")
    
    def test_category_properties(self):
        self.assertTrue(Token(TokenType.RETURN, "return").is_keyword)
        self.assertTrue(Token(TokenType.TRUE, "true").is_literal)
        self.assertTrue(Token(TokenType.INTEGER, "5").is_literal)
        self.assertTrue(Token(TokenType.EQUAL, "==").is_operator)
        self.assertFalse(Token(TokenType.SEMICOLON, ";").is_operator)
        self.assertTrue(Token(TokenType.IDENTIFIER, "x").is_identifier)
        self.assertTrue(Token(TokenType.EOF, "").is_eof)
        self.assertTrue(Token(TokenType.ILLEGAL, "@").is_illegal)
        self.assertFalse(Token(TokenType.IDENTIFIER, "let").is_keyword)


class TestLookupTables(unittest.TestCase):
    
    def test_seven_keywords(self):
        self.assertEqual(
            set(KEYWORDS),
            {"fn", "let", "true", "false", "if", "else", "return"}
        )
    
    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["while"] = TokenType.IDENTIFIER
        with self.assertRaises(TypeError):
            SINGLE_CHAR_TOKENS["%"] = TokenType.SLASH
    
    def test_two_char_operators_have_single_char_fallback(self):
        for op in TWO_CHAR_TOKENS:
            self.assertEqual(len(op), 2)
            self.assertIn(op[0], SINGLE_CHAR_TOKENS)
    
    def test_lookup_identifier(self):
        self.assertEqual(lookup_identifier("fn"), TokenType.FUNCTION)
        self.assertEqual(lookup_identifier("return"), TokenType.RETURN)
        self.assertEqual(lookup_identifier("Return"), TokenType.IDENTIFIER)
        self.assertEqual(lookup_identifier("f"), TokenType.IDENTIFIER)
        self.assertEqual(lookup_identifier(""), TokenType.IDENTIFIER)


if __name__ == '__main__':
    unittest.main()
