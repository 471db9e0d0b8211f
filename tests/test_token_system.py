import unittest

from core.token_system import (
    Token, TokenType, OperatorSymbol, OPERATOR_TOKENS,
    LEFT_PAREN, RIGHT_PAREN, format_tokens
)


class TestToken(unittest.TestCase):
    def test_number_token(self):
        token = Token.number(2)
        self.assertEqual(token.type, TokenType.NUMBER)
        self.assertEqual(token.value, 2.0)
        self.assertIsInstance(token.value, float)

    def test_operator_tokens_cover_four_symbols(self):
        self.assertEqual(set(OPERATOR_TOKENS), {"+", "-", "*", "/"})
        self.assertIs(OPERATOR_TOKENS["*"].symbol, OperatorSymbol.MUL)

    def test_tokens_are_immutable(self):
        token = Token.number(1.5)
        with self.assertRaises(AttributeError):
            token.value = 3.0
        with self.assertRaises(AttributeError):
            LEFT_PAREN.type = TokenType.RIGHT_PAREN

    def test_value_equality(self):
        self.assertEqual(Token.number(3), Token.number(3.0))
        self.assertNotEqual(Token.number(3), Token.number(4))
        self.assertNotEqual(LEFT_PAREN, RIGHT_PAREN)
        self.assertEqual(len({Token.number(1), Token.number(1.0)}), 1)

    def test_format_tokens(self):
        tokens = [Token.number(2), Token.number(3), OPERATOR_TOKENS["+"], LEFT_PAREN]
        self.assertEqual(format_tokens(tokens), "2.0 3.0 + (")


if __name__ == '__main__':
    unittest.main()
