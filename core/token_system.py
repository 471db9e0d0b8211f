"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    OPERATOR = "operator"  # 四则运算符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class OperatorSymbol(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class Token:
    """不可变Token；按 (type, value, symbol) 比较"""
    __slots__ = ("type", "name", "value", "symbol")

    def __init__(self, token_type, name, value=None, symbol=None):
        object.__setattr__(self, "type", token_type)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "symbol", symbol)

    def __setattr__(self, key, value):
        raise AttributeError(f"Token is immutable, cannot set '{key}'")

    def __delattr__(self, key):
        raise AttributeError(f"Token is immutable, cannot delete '{key}'")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.symbol) == (other.type, other.value, other.symbol)

    def __hash__(self):
        return hash((self.type, self.value, self.symbol))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r})"
        if self.type == TokenType.OPERATOR:
            return f"Token(OPERATOR, {self.name!r})"
        return f"Token({self.type.name})"

    @classmethod
    def number(cls, value):
        value = float(value)
        return cls(TokenType.NUMBER, repr(value), value=value)


# 预先构建的固定Token
OPERATOR_TOKENS = {
    symbol.value: Token(TokenType.OPERATOR, symbol.value, symbol=symbol)
    for symbol in OperatorSymbol
}
LEFT_PAREN = Token(TokenType.LEFT_PAREN, "(")
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ")")


def format_tokens(tokens):
    """把Token序列渲染成空格分隔的字符串，如 '2.0 3.0 +'"""
    return " ".join(token.name for token in tokens)
