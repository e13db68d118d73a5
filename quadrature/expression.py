import logging
from typing import Optional, Tuple

from core import InfixConverter, RPNEvaluator, Token, format_postfix

logger = logging.getLogger(__name__)


class FunctionExpression:
    """持有 f(x) 的中缀文本和对应的后缀Token流"""

    def __init__(self, infix: Optional[str] = None):
        self._infix = ""
        self._postfix: Tuple[Token, ...] = ()
        self.converter = InfixConverter
        self.rpn_evaluator = RPNEvaluator
        if infix is not None:
            self.set_expression(infix)

    @property
    def infix(self) -> str:
        return self._infix

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._postfix

    @property
    def postfix(self) -> str:
        return format_postfix(self._postfix)

    def set_expression(self, infix: str):
        """
        解析并整体替换后缀流；解析失败时抛出 ExpressionSyntaxError，旧表达式保持不变
        """
        stream = self.converter.convert(infix)
        self._infix = infix
        self._postfix = stream
        logger.debug(f"Expression set: f(x) = {infix}  [postfix: {self.postfix}]")

    def evaluate(self, x: float) -> float:
        return self.rpn_evaluator.evaluate(self._postfix, x)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)
