"""core/errors.py - 表达式解析与求值的异常体系"""
from enum import Enum


class ExpressionError(Exception):
    """所有表达式相关异常的基类"""


# ================== 解析期错误 ==================

class ExpressionSyntaxError(ExpressionError):
    """中缀转后缀阶段的语法错误"""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position  # 出错字符在原表达式中的下标


class ParenthesisIssue(Enum):
    EXTRA_CLOSING = "extra_closing"      # 多余的 ')'
    MISSING_CLOSING = "missing_closing"  # 缺少 ')'
    MISSING_OPENING = "missing_opening"  # 缺少 '('


class UnbalancedParenthesisError(ExpressionSyntaxError):

    _MESSAGES = {
        ParenthesisIssue.EXTRA_CLOSING: "Unbalanced parentheses: extra closing ')'",
        ParenthesisIssue.MISSING_CLOSING: "Unbalanced parentheses: missing closing ')'",
        ParenthesisIssue.MISSING_OPENING: "Unbalanced parentheses: missing opening '('",
    }

    def __init__(self, issue, position=None):
        super().__init__(self._MESSAGES[issue], position)
        self.issue = issue


class InvalidCharacterError(ExpressionSyntaxError):

    def __init__(self, char, position):
        super().__init__(f"Invalid character {char!r} at position {position}", position)
        self.char = char


class MalformedNumberError(ExpressionSyntaxError):

    def __init__(self, text, position):
        super().__init__(f"Malformed number {text!r} at position {position}", position)
        self.text = text


class MissingArgumentListError(ExpressionSyntaxError):
    """函数名后面没有紧跟括号参数，例如 'sin x'"""

    def __init__(self, function):
        super().__init__(f"Function '{function}' must be followed by a parenthesised argument")
        self.function = function


# ================== 求值期错误 ==================

class EvalError(ExpressionError):
    """后缀表达式求值阶段的错误"""


class MissingOperandError(EvalError):

    def __init__(self, symbol, required, available):
        super().__init__(
            f"Invalid expression: '{symbol}' requires {required} operand(s), "
            f"{available} available"
        )
        self.symbol = symbol
        self.required = required
        self.available = available


class UnknownTokenError(EvalError):

    def __init__(self, name):
        super().__init__(f"Unknown token: '{name}'")
        self.name = name


class DomainError(EvalError):

    def __init__(self, function, argument, requirement=None):
        detail = f" ({requirement})" if requirement else ""
        super().__init__(f"Domain error: {function}({argument!r}){detail}")
        self.function = function
        self.argument = argument
        self.requirement = requirement


class DivisionByZeroError(EvalError):

    def __init__(self, dividend, divisor):
        super().__init__(f"Division by zero: {dividend!r} / {divisor!r}")
        self.dividend = dividend
        self.divisor = divisor


class EmptyResultError(EvalError):

    def __init__(self):
        super().__init__("Invalid expression: no result computed")
