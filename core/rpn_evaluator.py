"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import StackUnderflowError, InvalidExpressionError
from core.token_system import TokenType
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix):
        """
        评估后缀Token序列
        Args:
            postfix: to_postfix() 的输出
        Returns:
            float结果
        Raises:
            EvaluationError的子类（解析、栈下溢、除零、未知操作符、无效表达式）
        """
        stack = []

        for token in postfix:
            if token.type == TokenType.NUMBER:
                stack.append(Operators.parse_number(token.value))
                continue

            # 先出栈再分派：残留的 '(' 会在这里报未知操作符
            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token.value}")
                raise StackUnderflowError(f"Insufficient operands for {token.value}", token)
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(Operators.apply(token.value, operand1, operand2))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpressionError("Invalid expression")

        return float(stack[0])
