"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
import logging

from core.errors import ParseError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"      # 数字（保留原始拼写）
    OPERATOR = "operator"  # + - × ÷
    LPAREN = "lparen"      # (
    RPAREN = "rparen"      # )


@dataclass(frozen=True)
class Token:
    """不可变Token：类型 + 原始文本"""
    type: TokenType
    value: str

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR


# 操作符和括号的Token定义
ADD = '+'
SUB = '-'
MUL = '×'
DIV = '÷'

TOKEN_DEFINITIONS = {
    ADD: Token(TokenType.OPERATOR, ADD),
    SUB: Token(TokenType.OPERATOR, SUB),
    MUL: Token(TokenType.OPERATOR, MUL),
    DIV: Token(TokenType.OPERATOR, DIV),
    '(': Token(TokenType.LPAREN, '('),
    ')': Token(TokenType.RPAREN, ')'),
}

OPERATORS = (ADD, SUB, MUL, DIV)

# 优先级表：括号不参与比较
PRECEDENCE = {
    ADD: 1,
    SUB: 1,
    MUL: 2,
    DIV: 2,
}


def get_precedence(token):
    """非操作符一律返回0"""
    return PRECEDENCE.get(token.value, 0) if token.is_operator else 0


def number_token(text):
    return Token(TokenType.NUMBER, text)


def tokenize(expression, strict=False):
    """
    将表达式字符串扫描为Token序列

    Args:
        expression: 原始表达式，例如 "(2+3)×4"
        strict: 为True时遇到字母表之外的字符抛出ParseError（空白仍然跳过）；
                默认静默丢弃
    Returns:
        Token列表
    """
    tokens = []
    current_number = []

    for position, ch in enumerate(expression):
        if ch.isdigit() or ch == '.':
            current_number.append(ch)
        elif ch in TOKEN_DEFINITIONS:
            if current_number:
                tokens.append(number_token(''.join(current_number)))
                current_number = []
            tokens.append(TOKEN_DEFINITIONS[ch])
        elif strict and not ch.isspace():
            raise ParseError(f"Unexpected character {ch!r} at position {position}")

    if current_number:
        tokens.append(number_token(''.join(current_number)))

    logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
    return tokens
