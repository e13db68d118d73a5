"""数值积分器 - 在区间上反复调用RPN求值器"""
import logging
from typing import Dict, List, NamedTuple, Optional

from config.config import INTEGRATION_CONFIG, SAMPLING_CONFIG
from core import EvalError
from quadrature.expression import FunctionExpression
from quadrature.rules import RULES

logger = logging.getLogger(__name__)


class Advisory(NamedTuple):
    """非致命提示（边界被交换、细分数被修正）"""
    code: str
    message: str


class RuleOutcome(NamedTuple):
    """单个规则/单次采样的结果：value 与 error 二选一"""
    value: Optional[float] = None
    error: Optional[EvalError] = None

    @property
    def ok(self):
        return self.error is None


class NumericalIntegrator:

    def __init__(self, expression=None, lower=None, upper=None, subdivisions=None):
        self.expression = FunctionExpression(
            expression if expression is not None else INTEGRATION_CONFIG['default_expression']
        )
        self.lower_bound = INTEGRATION_CONFIG['lower_bound']
        self.upper_bound = INTEGRATION_CONFIG['upper_bound']
        self.subdivisions = INTEGRATION_CONFIG['subdivisions']
        self.notices: List[Advisory] = []

        if lower is not None or upper is not None:
            self.set_bounds(
                self.lower_bound if lower is None else lower,
                self.upper_bound if upper is None else upper,
            )
        if subdivisions is not None:
            self.set_subdivisions(subdivisions)

    def _advise(self, code, message):
        advisory = Advisory(code, message)
        self.notices.append(advisory)
        logger.warning(message)
        return advisory

    # ================== 配置 ==================

    def set_expression(self, expr):
        """解析失败时抛出 ExpressionSyntaxError，当前表达式不变"""
        self.expression.set_expression(expr)

    def set_bounds(self, lower, upper):
        lower, upper = float(lower), float(upper)
        advisory = None
        if lower > upper:
            lower, upper = upper, lower
            advisory = self._advise("bounds_swapped", "Note: Bounds were swapped (lower > upper)")
        self.lower_bound = lower
        self.upper_bound = upper
        return advisory

    def set_subdivisions(self, n):
        n = int(n)
        advisory = None
        minimum = INTEGRATION_CONFIG['min_subdivisions']
        if n < minimum:
            advisory = self._advise(
                "subdivisions_clamped",
                f"Warning: Subdivisions must be at least {minimum}. Using {minimum}."
            )
            n = minimum
        self.subdivisions = n
        return advisory

    # ================== 计算 ==================

    def f(self, x):
        return self.expression.evaluate(x)

    def compute(self, method):
        """执行单个积分规则；求值错误直接向上抛出"""
        try:
            rule = RULES[method]
        except KeyError:
            raise ValueError(f"Unknown integration method: {method}") from None
        return rule(self.f, self.lower_bound, self.upper_bound, self.subdivisions)

    def trapezoidal_rule(self):
        return self.compute("trapezoidal")

    def simpsons_rule(self):
        return self.compute("simpson")

    def midpoint_rule(self):
        return self.compute("midpoint")

    def compute_all(self) -> Dict[str, RuleOutcome]:
        """
        每个规则独立执行，一个规则的错误不影响其他规则

        Returns:
            {method: RuleOutcome}
        """
        logger.info(
            f"Integrating f(x) = {self.expression.infix} over "
            f"[{self.lower_bound}, {self.upper_bound}] with n={self.subdivisions}"
        )
        outcomes = {}
        for method in RULES:
            try:
                outcomes[method] = RuleOutcome(value=self.compute(method))
            except EvalError as e:
                logger.error(f"{method} rule failed: {e}")
                outcomes[method] = RuleOutcome(error=e)
        return outcomes

    def evaluate_at(self, x) -> RuleOutcome:
        try:
            return RuleOutcome(value=self.f(x))
        except EvalError as e:
            logger.debug(f"f({x}) failed: {e}")
            return RuleOutcome(error=e)

    def sample_points(self, points=None) -> Dict[float, RuleOutcome]:
        """在若干测试点上求值 f(x)"""
        if points is None:
            points = SAMPLING_CONFIG['test_points']
        return {float(x): self.evaluate_at(x) for x in points}

    def settings(self):
        return {
            'expression': self.expression.infix,
            'postfix': self.expression.postfix,
            'lower_bound': self.lower_bound,
            'upper_bound': self.upper_bound,
            'subdivisions': self.subdivisions,
        }
