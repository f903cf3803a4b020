"""中缀转后缀 - 调度场算法"""
import logging

from core.errors import StackUnderflowError, InvalidExpressionError
from core.token_system import TokenType, get_precedence

logger = logging.getLogger(__name__)


def to_postfix(tokens, strict=False):
    """
    将中缀Token序列转换为后缀（RPN）序列

    Args:
        tokens: tokenize() 的输出
        strict: 为True时，结束时残留的 '(' 视为语法错误；
                默认与旧行为一致，直接输出到结果中
    Returns:
        后缀Token列表
    """
    output = []
    operator_stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.LPAREN:
            operator_stack.append(token)

        elif token.type == TokenType.RPAREN:
            while operator_stack and operator_stack[-1].type != TokenType.LPAREN:
                output.append(operator_stack.pop())
            if not operator_stack:
                raise StackUnderflowError("Unmatched ')' in expression", token)
            operator_stack.pop()  # 丢弃 '('

        else:
            # 左结合：优先级相同也出栈
            precedence = get_precedence(token)
            while (operator_stack
                   and operator_stack[-1].type != TokenType.LPAREN
                   and get_precedence(operator_stack[-1]) >= precedence):
                output.append(operator_stack.pop())
            operator_stack.append(token)

    while operator_stack:
        token = operator_stack.pop()
        if strict and token.type == TokenType.LPAREN:
            raise InvalidExpressionError("Unmatched '(' in expression", token)
        output.append(token)

    logger.debug(f"Postfix: {' '.join(t.value for t in output)}")
    return output
