"""核心模块 - Token系统、中缀转后缀、RPN评估器和操作符"""
from .errors import (
    EvaluationError, ParseError, StackUnderflowError, DivisionByZeroError,
    InvalidExpressionError, UnknownOperatorError
)
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPERATORS, PRECEDENCE,
    get_precedence, tokenize
)
from .postfix import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .expression import evaluate

__all__ = [
    'EvaluationError', 'ParseError', 'StackUnderflowError', 'DivisionByZeroError',
    'InvalidExpressionError', 'UnknownOperatorError',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATORS', 'PRECEDENCE',
    'get_precedence', 'tokenize', 'to_postfix', 'RPNEvaluator', 'Operators',
    'evaluate'
]
