"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import InvalidFormatError, InvalidOperatorError, InvalidTokenError
from core.token_system import TokenType, OperatorSymbol, format_tokens
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    OPERATOR_METHODS = {
        OperatorSymbol.ADD: Operators.add,
        OperatorSymbol.SUB: Operators.sub,
        OperatorSymbol.MUL: Operators.mul,
        OperatorSymbol.DIV: Operators.div,
    }

    @staticmethod
    def evaluate(token_sequence):
        """
        用操作数栈从左到右评估后缀Token序列
        Args:
            token_sequence: to_postfix() 的输出
        Returns:
            float 结果
        Raises:
            InvalidFormatError: 操作数不足，或结束时栈中不是恰好一个值
            DivisionByZeroError: 除数为0
            InvalidOperatorError: 无法识别的运算符
            InvalidTokenError: 括号出现在后缀序列中
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    raise InvalidFormatError(
                        detail=f"insufficient operands for {token.name!r}: stack size {len(stack)}")
                # 后入栈的是右操作数
                operand2 = stack.pop()
                operand1 = stack.pop()

                op_method = RPNEvaluator.OPERATOR_METHODS.get(token.symbol)
                if op_method is None:
                    raise InvalidOperatorError(detail=f"unknown operator {token.name!r}")
                stack.append(op_method(operand1, operand2))

            else:
                raise InvalidTokenError(detail=f"{token!r} in postfix sequence")

        if len(stack) != 1:
            raise InvalidFormatError(detail=f"stack has {len(stack)} elements after evaluation, expected 1")

        logger.debug(f"Evaluated {format_tokens(token_sequence)!r} -> {stack[0]!r}")
        return stack[0]
