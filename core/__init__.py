"""核心模块 - Token系统、中缀转换器、RPN评估器和操作符"""
from .token_system import (
    TokenType, Associativity, Token, TOKEN_DEFINITIONS, OPERATOR_TABLE,
    CONSTANTS, VARIABLE_NAME, format_postfix
)
from .operators import Operators, FUNCTION_REGISTRY, BINARY_OPERATIONS, EPSILON
from .converter import InfixConverter
from .rpn_evaluator import RPNEvaluator
from .errors import (
    ExpressionError, ExpressionSyntaxError, UnbalancedParenthesisError, ParenthesisIssue,
    InvalidCharacterError, MalformedNumberError, MissingArgumentListError,
    EvalError, MissingOperandError, UnknownTokenError, DomainError,
    DivisionByZeroError, EmptyResultError
)

__all__ = [
    'TokenType', 'Associativity', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_TABLE',
    'CONSTANTS', 'VARIABLE_NAME', 'format_postfix',
    'Operators', 'FUNCTION_REGISTRY', 'BINARY_OPERATIONS', 'EPSILON',
    'InfixConverter', 'RPNEvaluator',
    'ExpressionError', 'ExpressionSyntaxError', 'UnbalancedParenthesisError', 'ParenthesisIssue',
    'InvalidCharacterError', 'MalformedNumberError', 'MissingArgumentListError',
    'EvalError', 'MissingOperandError', 'UnknownTokenError', 'DomainError',
    'DivisionByZeroError', 'EmptyResultError'
]
