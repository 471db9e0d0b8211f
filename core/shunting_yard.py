"""中缀转后缀（调度场算法）"""
import logging

from config.config import PRECEDENCE_CONFIG, CALCULATOR_CONFIG
from core.errors import InvalidFormatError, InvalidTokenError
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


def precedence(symbol):
    """运算符优先级：+ - 为1，* / 为2，其余为0"""
    key = getattr(symbol, "value", symbol)
    return PRECEDENCE_CONFIG.get(key, 0)


def to_postfix(tokens, strict=None):
    """
    把中缀Token序列重排为后缀（RPN）序列
    Args:
        tokens: tokenize() 的输出
        strict: 是否严格检查括号配对；None 时使用 CALCULATOR_CONFIG 的设置
    Returns:
        新的后缀Token列表
    Raises:
        InvalidFormatError: strict 模式下括号不配对
    """
    if strict is None:
        strict = CALCULATOR_CONFIG["strict_parentheses"]

    output = []
    operators = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            # >= 保证同级运算符左结合
            while (operators and operators[-1].type == TokenType.OPERATOR
                   and precedence(operators[-1].symbol) >= precedence(token.symbol)):
                output.append(operators.pop())
            operators.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            operators.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            matched = False
            while operators:
                top = operators.pop()
                if top.type == TokenType.LEFT_PAREN:
                    matched = True
                    break
                output.append(top)
            if not matched:
                if strict:
                    raise InvalidFormatError(detail="unmatched ')'")
                logger.debug("Ignoring unmatched ')' (lenient mode)")

        else:
            raise InvalidTokenError(detail=f"unknown token {token!r}")

    while operators:
        top = operators.pop()
        if top.type == TokenType.LEFT_PAREN:
            if strict:
                raise InvalidFormatError(detail="unmatched '('")
            logger.debug("Leaving unmatched '(' in output (lenient mode)")
        output.append(top)

    logger.debug(f"Postfix: {format_tokens(output)}")
    return output
