"""词法分析 - 把输入文本切分为Token序列"""
import logging

import numpy as np

from core.errors import InvalidCharacterError, InvalidFormatError
from core.token_system import Token, OPERATOR_TOKENS, LEFT_PAREN, RIGHT_PAREN

logger = logging.getLogger(__name__)

DIGIT_CHARS = frozenset("0123456789.")


def _parse_number(buffer):
    """把数字缓冲区解析为有限浮点数；'1.2.3'、'.' 之类的写法视为格式错误"""
    try:
        value = float(buffer)
    except ValueError:
        raise InvalidFormatError(detail=f"malformed number literal {buffer!r}") from None
    # 位数过多会溢出成 inf
    if not np.isfinite(value):
        raise InvalidFormatError(detail=f"number literal out of range {buffer!r}")
    return Token.number(value)


def tokenize(text):
    """
    逐字符扫描表达式
    Args:
        text: 输入表达式，如 "2 + 3 * (4 - 1)"
    Returns:
        Token列表
    Raises:
        InvalidCharacterError: 出现无法识别的字符
        InvalidFormatError: 数字紧跟 '(' 或数字字面量非法
    """
    tokens = []
    buffer = []

    for position, char in enumerate(text):
        if char in OPERATOR_TOKENS:
            if buffer:
                tokens.append(_parse_number("".join(buffer)))
                buffer.clear()
            tokens.append(OPERATOR_TOKENS[char])
        elif char == "(":
            # 不支持隐式乘法，如 "2(3)"
            if buffer:
                raise InvalidFormatError(detail=f"number directly before '(' at {position}")
            tokens.append(LEFT_PAREN)
        elif char == ")":
            if buffer:
                tokens.append(_parse_number("".join(buffer)))
                buffer.clear()
            tokens.append(RIGHT_PAREN)
        elif char in DIGIT_CHARS:
            buffer.append(char)
        elif char == " ":
            continue
        else:
            raise InvalidCharacterError(detail=f"{char!r} at {position}")

    if buffer:
        tokens.append(_parse_number("".join(buffer)))

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens
