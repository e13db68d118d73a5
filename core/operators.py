"""core/operators.py"""
import logging
from types import MappingProxyType
from typing import Callable, NamedTuple, Optional

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.errors import DivisionByZeroError, DomainError

EPSILON = EVALUATOR_CONFIG['division_epsilon']  # 除数绝对值低于此值视为除零

logger = logging.getLogger(__name__)


class UnaryFunction(NamedTuple):
    func: Callable[[float], float]
    rejects: Optional[Callable[[float], bool]] = None  # 参数在定义域外时返回True；None 表示不受限
    requirement: Optional[str] = None


class Operators:
    """所有操作符的静态方法集合"""

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法：近零除数直接报错，而不是返回inf"""
        if abs(operand2) < EPSILON:
            raise DivisionByZeroError(operand1, operand2)
        return operand1 / operand2

    @staticmethod
    def pow(operand1, operand2):
        """幂运算：负底数配分数指数得到nan，溢出得到inf（与C的pow一致）"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return float(np.power(float(operand1), float(operand2)))

    # 一元函数====================

    @staticmethod
    def sin(operand):
        return float(np.sin(operand))

    @staticmethod
    def cos(operand):
        return float(np.cos(operand))

    @staticmethod
    def tan(operand):
        return float(np.tan(operand))

    @staticmethod
    def log(operand):
        """以10为底的对数"""
        return float(np.log10(operand))

    @staticmethod
    def ln(operand):
        return float(np.log(operand))

    @staticmethod
    def sqrt(operand):
        return float(np.sqrt(operand))

    @staticmethod
    def abs(operand):
        return float(np.abs(operand))

    @staticmethod
    def exp(operand):
        with np.errstate(over='ignore'):
            return float(np.exp(operand))


# nan 不满足任何比较，不会被拒绝，原样传给函数得到nan
def _non_positive(value):
    return value <= 0


def _negative(value):
    return value < 0


BINARY_OPERATIONS = MappingProxyType({
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
})

# 函数注册表：名称 -> (实现, 越界谓词, 定义域说明)，每个函数都只消耗一个操作数
FUNCTION_REGISTRY = MappingProxyType({
    'sin': UnaryFunction(Operators.sin),
    'cos': UnaryFunction(Operators.cos),
    'tan': UnaryFunction(Operators.tan),
    'log': UnaryFunction(Operators.log, _non_positive, "log requires positive argument"),
    'ln': UnaryFunction(Operators.ln, _non_positive, "ln requires positive argument"),
    'sqrt': UnaryFunction(Operators.sqrt, _negative, "sqrt requires non-negative argument"),
    'abs': UnaryFunction(Operators.abs),
    'exp': UnaryFunction(Operators.exp),
})


def apply_function(name, argument):
    """先做定义域检查，再调用函数"""
    entry = FUNCTION_REGISTRY[name]
    if entry.rejects is not None and entry.rejects(argument):
        logger.debug(f"Domain check failed: {name}({argument})")
        raise DomainError(name, argument, entry.requirement)
    return entry.func(argument)
