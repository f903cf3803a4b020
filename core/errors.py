"""core/errors.py - 表达式求值的错误分类"""


class EvaluationError(ValueError):
    """求值失败的基类，kind 用于诊断和测试"""
    kind = "evaluation"

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class ParseError(EvaluationError):
    """数字Token无法解析为小数（例如 1..2）"""
    kind = "parse"


class StackUnderflowError(EvaluationError):
    """操作数不足两个，或 ')' 找不到匹配的 '('"""
    kind = "stack_underflow"


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    kind = "division_by_zero"


class InvalidExpressionError(EvaluationError):
    """求值结束后栈中不是恰好一个值"""
    kind = "invalid_expression"


class UnknownOperatorError(EvaluationError):
    kind = "unknown_operator"
