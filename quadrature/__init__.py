"""积分模块 - 表达式持有、积分规则和积分器"""
from .expression import FunctionExpression
from .integrator import NumericalIntegrator, RuleOutcome, Advisory
from .rules import RULES, trapezoidal_rule, simpsons_rule, midpoint_rule
from .report import outcomes_to_frame, samples_to_frame

__all__ = [
    'FunctionExpression', 'NumericalIntegrator', 'RuleOutcome', 'Advisory',
    'RULES', 'trapezoidal_rule', 'simpsons_rule', 'midpoint_rule',
    'outcomes_to_frame', 'samples_to_frame'
]
