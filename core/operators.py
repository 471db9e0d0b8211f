"""core/operators.py"""
import logging

import numpy as np

from core.errors import DivisionByZeroError

logger = logging.getLogger(__name__)


class Operators:
    """四则运算的静态方法集合，统一按 IEEE 双精度（np.float64）计算"""

    @staticmethod
    def _as_float64(operand1, operand2):
        return np.float64(operand1), np.float64(operand2)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 + operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符：operand1 - operand2"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 - operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符（溢出得到 inf，不告警）"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 * operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除数恰为0时报错，不做平滑"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        if operand2 == 0.0:
            raise DivisionByZeroError(detail=f"{float(operand1)!r} / 0")
        with np.errstate(over='ignore', under='ignore', invalid='ignore'):
            return float(operand1 / operand2)
