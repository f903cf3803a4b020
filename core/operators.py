"""core/operators.py"""
import numpy as np
import logging

from core.errors import ParseError, DivisionByZeroError, UnknownOperatorError
from core.token_system import ADD, SUB, MUL, DIV

logger = logging.getLogger(__name__)


class Operators:
    """四则运算操作符的静态方法集合"""

    @staticmethod
    def parse_number(text):
        """把数字Token的文本解析为float64，失败抛出ParseError"""
        # float() 接受非ASCII数字（如 '٣'），这里只认ASCII
        if not text.isascii():
            raise ParseError(f"Invalid number: {text!r}")
        try:
            return np.float64(float(text))
        except ValueError as e:
            raise ParseError(f"Invalid number: {text!r}") from e

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除数恰好为0时报错"""
        if operand2 == 0:
            raise DivisionByZeroError("Division by zero")
        return operand1 / operand2

    @staticmethod
    def apply(symbol, operand1, operand2):
        op_method = OPERATOR_METHODS.get(symbol)
        if op_method is None:
            raise UnknownOperatorError(f"Unknown operator: {symbol}")
        # 溢出得到inf，不告警
        with np.errstate(over='ignore', invalid='ignore'):
            return op_method(operand1, operand2)


OPERATOR_METHODS = {
    ADD: Operators.add,
    SUB: Operators.sub,
    MUL: Operators.mul,
    DIV: Operators.div,
}
