"""
Shared pytest fixtures.
"""

import pytest

from core import InfixConverter, RPNEvaluator
from quadrature import NumericalIntegrator


@pytest.fixture
def evaluate():
    """evaluate("x^2", 3.0) -> 9.0"""

    def _evaluate(expression: str, x: float = 0.0) -> float:
        return RPNEvaluator.evaluate(InfixConverter.convert(expression), x)

    return _evaluate


@pytest.fixture
def make_integrator():
    def _make(expression: str, lower: float = 0.0, upper: float = 1.0, n: int = 1000) -> NumericalIntegrator:
        return NumericalIntegrator(expression, lower, upper, n)

    return _make


class RecordingFunction:
    """记录每次被调用时的 x，用于检查采样顺序和次数"""

    def __init__(self, func=lambda x: x):
        self.func = func
        self.calls = []

    def __call__(self, x):
        self.calls.append(x)
        return self.func(x)


@pytest.fixture
def recorder():
    return RecordingFunction
