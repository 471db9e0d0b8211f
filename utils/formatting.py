"""utils/formatting.py"""
import numpy as np


def format_result(value):
    """
    渲染求值结果：定点小数、最短可回读位数、无指数
    4.0 -> '4'，1e20 -> '100000000000000000000'，nan -> 'NaN'
    """
    value = np.float64(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim='-')
