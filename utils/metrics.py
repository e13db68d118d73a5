"""utils/metrics.py"""
import numpy as np


def absolute_error(value, reference):
    return float(abs(value - reference))


def relative_error(value, reference):
    """相对误差，参考值为0时退化为绝对误差"""
    if abs(reference) < 1e-12:
        return absolute_error(value, reference)
    return float(abs(value - reference) / abs(reference))


def observed_order(subdivisions, errors):
    """
    观测收敛阶：对 log(error) ~ -p * log(n) 做最小二乘拟合

    Args:
        subdivisions: 细分数序列
        errors: 对应的绝对误差
    Returns:
        p（误差为0或有效点不足2个时返回nan）
    """
    n = np.asarray(subdivisions, dtype=float)
    err = np.asarray(errors, dtype=float)

    valid = np.isfinite(err) & (err > 0) & (n > 0)
    if valid.sum() < 2:
        return float('nan')

    slope, _ = np.polyfit(np.log(n[valid]), np.log(err[valid]), 1)
    return float(-slope)
