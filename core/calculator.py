"""表达式求值流水线：词法分析 -> 中缀转后缀 -> 后缀求值"""
from core.lexer import tokenize
from core.shunting_yard import to_postfix
from core.rpn_evaluator import RPNEvaluator


def evaluate_expression(text, strict=None):
    """求值一条中缀表达式；任一阶段的 CalculatorError 原样抛出"""
    tokens = tokenize(text)
    postfix = to_postfix(tokens, strict=strict)
    return RPNEvaluator.evaluate(postfix)
