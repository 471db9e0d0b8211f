import unittest

from core.errors import InvalidFormatError
from core.lexer import tokenize
from core.shunting_yard import to_postfix, precedence
from core.token_system import OperatorSymbol, format_tokens


def postfix_of(text, strict=True):
    return format_tokens(to_postfix(tokenize(text), strict=strict))


class TestPrecedence(unittest.TestCase):
    def test_table(self):
        self.assertEqual(precedence("+"), 1)
        self.assertEqual(precedence("-"), 1)
        self.assertEqual(precedence("*"), 2)
        self.assertEqual(precedence(OperatorSymbol.DIV), 2)
        self.assertEqual(precedence("%"), 0)


class TestToPostfix(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(postfix_of("2 + 3 * 4"), "2.0 3.0 4.0 * +")
        self.assertEqual(postfix_of("2 * 3 + 4"), "2.0 3.0 * 4.0 +")

    def test_left_associative(self):
        self.assertEqual(postfix_of("8 - 3 - 2"), "8.0 3.0 - 2.0 -")
        self.assertEqual(postfix_of("8 / 4 * 2"), "8.0 4.0 / 2.0 *")

    def test_parentheses(self):
        self.assertEqual(postfix_of("(2 + 3) * 4"), "2.0 3.0 + 4.0 *")
        self.assertEqual(postfix_of("2 * ((3 + 4) - 1)"), "2.0 3.0 4.0 + 1.0 - *")

    def test_input_is_not_mutated(self):
        tokens = tokenize("1 + 2 * 3")
        snapshot = list(tokens)
        to_postfix(tokens)
        self.assertEqual(tokens, snapshot)

    def test_strict_rejects_unmatched_parentheses(self):
        for text in ("(2 + 3", "2 + 3)", ")(", "((1)"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidFormatError):
                    to_postfix(tokenize(text), strict=True)

    def test_lenient_ignores_excess_right_paren(self):
        self.assertEqual(postfix_of("2 + 3)", strict=False), "2.0 3.0 +")

    def test_lenient_keeps_leftover_left_paren(self):
        self.assertEqual(postfix_of("(2 + 3", strict=False), "2.0 3.0 + (")

    def test_default_is_strict(self):
        with self.assertRaises(InvalidFormatError):
            to_postfix(tokenize("2 + 3)"))


if __name__ == '__main__':
    unittest.main()
