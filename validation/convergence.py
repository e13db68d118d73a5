"""收敛性分析 - 不同细分数下的误差和观测收敛阶"""
import logging

import numpy as np
import pandas as pd

from config.config import CONVERGENCE_CONFIG
from core import EvalError
from quadrature.rules import RULES
from utils.metrics import absolute_error, observed_order

logger = logging.getLogger(__name__)


def convergence_study(integrator, exact, subdivisions=None):
    """
    对每个细分数、每个规则计算绝对误差

    Parameters:
    - integrator: NumericalIntegrator（调用结束后恢复原细分数）
    - exact: 精确积分值
    - subdivisions: 细分数序列，默认取 CONVERGENCE_CONFIG

    Returns:
    - errors: 以细分数为索引、规则为列的误差DataFrame
    - orders: {method: 观测收敛阶}
    """
    if subdivisions is None:
        subdivisions = CONVERGENCE_CONFIG['subdivisions']

    original_n = integrator.subdivisions
    rows = []
    try:
        for n in subdivisions:
            integrator.set_subdivisions(n)
            row = {'subdivisions': integrator.subdivisions}
            for method in RULES:
                try:
                    row[method] = absolute_error(integrator.compute(method), exact)
                except EvalError as e:
                    logger.warning(f"{method} failed at n={n}: {e}")
                    row[method] = np.nan
            rows.append(row)
    finally:
        integrator.subdivisions = original_n

    errors = pd.DataFrame(rows).set_index('subdivisions')
    orders = {
        method: observed_order(errors.index.values, errors[method].values)
        for method in RULES
    }
    logger.info("Observed orders: " + ", ".join(f"{m}={p:.2f}" for m, p in orders.items()))
    return errors, orders
