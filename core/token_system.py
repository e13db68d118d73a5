"""core/token_system.py"""
import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class TokenType(Enum):
    NUMBER = "number"        # 数字字面量
    VARIABLE = "variable"    # 自变量 x
    CONSTANT = "constant"    # pi / e，转换时已替换为数值
    OPERATOR = "operator"    # 二元操作符
    FUNCTION = "function"    # 一元函数
    # 以下两种只出现在转换器的操作符栈上，不会进入后缀流
    LEFT_PAREN = "left_paren"
    FUNC_MARKER = "func_marker"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    value: Optional[float] = None
    precedence: int = 0
    associativity: Optional[Associativity] = None
    arity: int = 0

    def __str__(self):
        if self.type == TokenType.CONSTANT:
            return repr(self.value)
        return self.name


# 操作符表: symbol -> (precedence, associativity)
# '^' 右结合且优先级最高；括号和函数标记属于结构性符号，优先级为0
OPERATOR_TABLE = MappingProxyType({
    '^': (4, Associativity.RIGHT),
    '*': (3, Associativity.LEFT),
    '/': (3, Associativity.LEFT),
    '+': (2, Associativity.LEFT),
    '-': (2, Associativity.LEFT),
})

# 命名常数，在转换阶段直接替换为字面量
CONSTANTS = MappingProxyType({
    'pi': math.pi,
    'e': math.e,
})

VARIABLE_NAME = 'x'

# Token定义字典（可复用的固定Token）
TOKEN_DEFINITIONS = MappingProxyType({
    **{
        symbol: Token(TokenType.OPERATOR, symbol, precedence=prec, associativity=assoc, arity=2)
        for symbol, (prec, assoc) in OPERATOR_TABLE.items()
    },
    VARIABLE_NAME: Token(TokenType.VARIABLE, VARIABLE_NAME),
    **{name: Token(TokenType.CONSTANT, name, value=value) for name, value in CONSTANTS.items()},
    '(': Token(TokenType.LEFT_PAREN, '('),
})


def number_token(text, value):
    return Token(TokenType.NUMBER, text, value=float(value))


def function_token(name):
    return Token(TokenType.FUNCTION, name, arity=1)


def function_marker(name):
    """函数名被压栈时使用的结构性标记，遇到匹配的 ')' 时转为函数Token"""
    return Token(TokenType.FUNC_MARKER, name)


def format_postfix(stream):
    """把后缀流渲染成以空格分隔的文本，例如 'x 2 ^'"""
    return ' '.join(str(token) for token in stream)
