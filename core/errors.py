"""core/errors.py - 表达式求值的错误类型"""


class CalculatorError(Exception):
    """所有求值错误的基类；str() 即面向用户的固定提示"""
    message = "Invalid expression"

    def __init__(self, detail=None):
        super().__init__(self.message)
        self.detail = detail  # 仅用于调试日志

    def __str__(self):
        return self.message


class InvalidCharacterError(CalculatorError):
    message = "Invalid character in expression"


class InvalidFormatError(CalculatorError):
    message = "Invalid expression format"


class DivisionByZeroError(CalculatorError):
    message = "Division by zero"


class InvalidOperatorError(CalculatorError):
    message = "Invalid operator"


class InvalidTokenError(CalculatorError):
    message = "Invalid token in expression"
