"""核心模块 - Token系统、词法分析、调度场算法和RPN评估器"""
from .token_system import (
    TokenType, OperatorSymbol, Token, OPERATOR_TOKENS,
    LEFT_PAREN, RIGHT_PAREN, format_tokens
)
from .errors import (
    CalculatorError, InvalidCharacterError, InvalidFormatError,
    DivisionByZeroError, InvalidOperatorError, InvalidTokenError
)
from .lexer import tokenize
from .shunting_yard import to_postfix, precedence
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .calculator import evaluate_expression

__all__ = [
    'TokenType', 'OperatorSymbol', 'Token', 'OPERATOR_TOKENS',
    'LEFT_PAREN', 'RIGHT_PAREN', 'format_tokens',
    'CalculatorError', 'InvalidCharacterError', 'InvalidFormatError',
    'DivisionByZeroError', 'InvalidOperatorError', 'InvalidTokenError',
    'tokenize', 'to_postfix', 'precedence',
    'RPNEvaluator', 'Operators', 'evaluate_expression'
]
