"""数值积分规则 - 梯形、Simpson、中点"""
import logging

import numpy as np

logger = logging.getLogger(__name__)


def _sample(f, points):
    """按x递增顺序逐点求值；任一点出错立即中断本规则"""
    return np.array([f(float(x)) for x in points], dtype=np.float64)


def _closed_grid(a, b, n):
    """a + i*h, i = 0..n，末点强制为b"""
    h = (b - a) / n
    grid = a + np.arange(n + 1, dtype=np.float64) * h
    grid[0], grid[-1] = a, b
    return grid, h


def trapezoidal_rule(f, a, b, n):
    """
    梯形公式: h * [ (f(a) + f(b))/2 + Σ_{i=1}^{n-1} f(a + i*h) ]

    Args:
        f: 被积函数，f(float) -> float
        a, b: 积分下限和上限 (a <= b)
        n: 细分数 (>= 1)
    """
    grid, h = _closed_grid(a, b, n)
    weights = np.ones(n + 1)
    weights[0] = weights[-1] = 0.5
    return float(h * np.dot(weights, _sample(f, grid)))


def simpsons_rule(f, a, b, n):
    """
    Simpson公式（需要偶数个细分），奇数n在本次调用中自动加1

    权重: 1, 4, 2, 4, ..., 2, 4, 1；结果乘以 h/3
    """
    if n % 2 != 0:
        logger.debug(f"Simpson's rule: odd subdivisions {n} rounded up to {n + 1}")
        n += 1
    grid, h = _closed_grid(a, b, n)
    index = np.arange(n + 1)
    weights = np.where(index % 2 == 0, 2.0, 4.0)
    weights[0] = weights[-1] = 1.0
    return float((h / 3) * np.dot(weights, _sample(f, grid)))


def midpoint_rule(f, a, b, n):
    """中点公式: h * Σ_{i=0}^{n-1} f(a + (i + 0.5)*h)"""
    h = (b - a) / n
    midpoints = a + (np.arange(n, dtype=np.float64) + 0.5) * h
    return float(h * np.sum(_sample(f, midpoints)))


# 规则注册表（compute_all 按此顺序执行）
RULES = {
    "trapezoidal": trapezoidal_rule,
    "simpson": simpsons_rule,
    "midpoint": midpoint_rule,
}

RULE_LABELS = {
    "trapezoidal": "Trapezoidal Rule",
    "simpson": "Simpson's Rule",
    "midpoint": "Midpoint Rule",
}
