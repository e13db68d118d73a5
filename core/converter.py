"""中缀 -> 后缀(RPN) 转换器，基于调度场算法"""
import logging

from core.errors import (
    InvalidCharacterError, MalformedNumberError, MissingArgumentListError,
    ParenthesisIssue, UnbalancedParenthesisError,
)
from core.token_system import (
    CONSTANTS, TOKEN_DEFINITIONS, VARIABLE_NAME, Associativity, TokenType,
    format_postfix, function_marker, function_token, number_token,
)

logger = logging.getLogger(__name__)


class InfixConverter:
    """把中缀表达式文本转换为后缀Token流"""

    @staticmethod
    def convert(expression):
        """
        单次从左到右扫描，使用显式操作符栈（不递归，深层括号不会爆栈）

        Args:
            expression: 中缀表达式，例如 "sin(x)^2 + 2*x"
        Returns:
            tuple[Token, ...] 后缀Token流
        Raises:
            ExpressionSyntaxError: 括号不平衡、非法字符、非法数字等
        """
        output = []
        op_stack = []  # LEFT_PAREN / FUNC_MARKER / OPERATOR 混合栈
        paren_count = 0
        length = len(expression)
        i = 0

        while i < length:
            c = expression[i]

            if c.isspace():
                i += 1
                continue

            # ================== 数字 ==================
            if c.isdigit() or (c == '.' and i + 1 < length and expression[i + 1].isdigit()):
                start = i
                while i < length and (expression[i].isdigit() or expression[i] == '.'):
                    i += 1
                text = expression[start:i]
                try:
                    output.append(number_token(text, float(text)))
                except ValueError:
                    raise MalformedNumberError(text, start) from None
                continue

            # ================== 变量 ==================
            # 单个 x/X 字符先于字母串识别："xx" -> x x，"xpi" -> x pi
            if c.lower() == VARIABLE_NAME:
                output.append(TOKEN_DEFINITIONS[VARIABLE_NAME])
                i += 1
                continue

            # ================== 常数 / 函数名 ==================
            if c.isalpha():
                start = i
                while i < length and expression[i].isalpha():
                    i += 1
                word = expression[start:i].lower()

                if word in CONSTANTS:
                    output.append(TOKEN_DEFINITIONS[word])
                else:
                    # 函数名延后输出，等到匹配的 ')' 再弹出
                    op_stack.append(function_marker(word))
                continue

            if c == '(':
                op_stack.append(TOKEN_DEFINITIONS['('])
                paren_count += 1

            elif c == ')':
                paren_count -= 1
                if paren_count < 0:
                    raise UnbalancedParenthesisError(ParenthesisIssue.EXTRA_CLOSING, i)

                while op_stack and op_stack[-1].type != TokenType.LEFT_PAREN:
                    top = op_stack.pop()
                    if top.type == TokenType.FUNC_MARKER:
                        # 函数名和 '(' 之间夹着别的东西，如 "(sin x)"
                        raise MissingArgumentListError(top.name)
                    output.append(top)

                if not op_stack:
                    raise UnbalancedParenthesisError(ParenthesisIssue.MISSING_OPENING, i)
                op_stack.pop()  # 移除 '('

                if op_stack and op_stack[-1].type == TokenType.FUNC_MARKER:
                    output.append(function_token(op_stack.pop().name))

            elif c in TOKEN_DEFINITIONS and TOKEN_DEFINITIONS[c].type == TokenType.OPERATOR:
                incoming = TOKEN_DEFINITIONS[c]
                while op_stack and op_stack[-1].type == TokenType.OPERATOR:
                    top = op_stack[-1]
                    if top.precedence > incoming.precedence or (
                            top.precedence == incoming.precedence
                            and incoming.associativity == Associativity.LEFT):
                        output.append(op_stack.pop())
                    else:
                        break
                op_stack.append(incoming)

            else:
                raise InvalidCharacterError(c, i)

            i += 1

        if paren_count != 0:
            raise UnbalancedParenthesisError(ParenthesisIssue.MISSING_CLOSING, length)

        # 弹出剩余操作符
        while op_stack:
            top = op_stack.pop()
            if top.type == TokenType.LEFT_PAREN:
                raise UnbalancedParenthesisError(ParenthesisIssue.MISSING_CLOSING, length)
            if top.type == TokenType.FUNC_MARKER:
                raise MissingArgumentListError(top.name)
            output.append(top)

        stream = tuple(output)
        logger.debug(f"Converted '{expression}' -> '{format_postfix(stream)}'")
        return stream
