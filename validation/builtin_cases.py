"""内置测试用例 - 已知精确值的积分"""
import logging
import math

import pandas as pd

from quadrature.integrator import NumericalIntegrator
from quadrature.rules import RULES
from utils.metrics import absolute_error

logger = logging.getLogger(__name__)

BUILTIN_CASES = [
    {"name": "parabola", "expression": "x^2", "lower": 0.0, "upper": 1.0,
     "subdivisions": 1000, "exact": 1.0 / 3.0},
    {"name": "sine_half_period", "expression": "sin(x)", "lower": 0.0, "upper": math.pi,
     "subdivisions": 1000, "exact": 2.0},
    {"name": "exponential", "expression": "exp(x)", "lower": 0.0, "upper": 1.0,
     "subdivisions": 1000, "exact": math.e - 1.0},
    {"name": "multi_digit_linear", "expression": "100 + 25*x", "lower": 0.0, "upper": 10.0,
     "subdivisions": 100, "exact": 2250.0},
]

# 示例问题
EXAMPLE_CASES = [
    {"name": "quarter_circle", "expression": "sqrt(1-x^2)", "lower": 0.0, "upper": 1.0,
     "subdivisions": 1000, "exact": math.pi / 4.0},
    {"name": "linear", "expression": "3*x + 2", "lower": 0.0, "upper": 4.0,
     "subdivisions": 1000, "exact": 32.0},
]


def run_case(case):
    """单个用例 -> 一行结果（各规则的值和绝对误差）"""
    integrator = NumericalIntegrator(
        case['expression'], case['lower'], case['upper'], case['subdivisions']
    )
    outcomes = integrator.compute_all()

    row = {
        'name': case['name'],
        'expression': case['expression'],
        'lower': case['lower'],
        'upper': case['upper'],
        'subdivisions': case['subdivisions'],
        'exact': case['exact'],
    }
    for method, outcome in outcomes.items():
        row[method] = outcome.value if outcome.ok else float('nan')
        row[f'{method}_abs_error'] = (
            absolute_error(outcome.value, case['exact']) if outcome.ok else float('nan')
        )
    return row


def run_builtin_cases(cases=None):
    if cases is None:
        cases = BUILTIN_CASES + EXAMPLE_CASES

    logger.info(f"=== Running {len(cases)} integration cases ===")
    rows = [run_case(case) for case in cases]
    frame = pd.DataFrame(rows).set_index('name')

    error_cols = [f'{method}_abs_error' for method in RULES]
    frame['max_abs_error'] = frame[error_cols].max(axis=1)
    return frame
