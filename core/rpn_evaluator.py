"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import EmptyResultError, MissingOperandError, UnknownTokenError
from core.operators import BINARY_OPERATIONS, FUNCTION_REGISTRY, apply_function
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式在给定x处的值"""

    @staticmethod
    def evaluate(token_sequence, x):
        """
        单次扫描、单个数值栈

        Args:
            token_sequence: 后缀Token流（InfixConverter.convert 的输出）
            x: 自变量取值
        Returns:
            float 结果
        Raises:
            EvalError: 操作数不足、未知Token、定义域错误、除零、空结果
        """
        stack = []

        for token in token_sequence:
            if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
                stack.append(token.value)

            elif token.type == TokenType.VARIABLE:
                stack.append(float(x))

            # ================== 一元函数 ==================
            elif token.type == TokenType.FUNCTION:
                if not stack:
                    raise MissingOperandError(token.name, 1, 0)
                if token.name not in FUNCTION_REGISTRY:
                    raise UnknownTokenError(token.name)
                operand = stack.pop()
                stack.append(apply_function(token.name, operand))

            # ================== 二元操作符 ==================
            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    raise MissingOperandError(token.name, 2, len(stack))
                operation = BINARY_OPERATIONS.get(token.name)
                if operation is None:
                    raise UnknownTokenError(token.name)
                # 右操作数后入栈，先弹出
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(operation(operand1, operand2))

            else:
                raise UnknownTokenError(token.name)

        if not stack:
            raise EmptyResultError()
        if len(stack) > 1:
            # 多余的栈元素不视为错误，返回栈顶
            logger.debug(f"Stack has {len(stack)} elements after evaluation, returning top")
        return stack[-1]
