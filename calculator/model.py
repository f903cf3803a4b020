"""计算器模型 - 调用核心求值器并生成显示字符串"""
import logging
from dataclasses import dataclass
from typing import Optional

from core import evaluate, EvaluationError
from utils.formatting import format_result, format_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """一次求值的结果：value 与 error 二者只有一个"""
    expression: str
    value: Optional[float] = None
    error: Optional[EvaluationError] = None
    display: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None


class CalculatorModel:

    def __init__(self, precision=None, strict_characters=None, strict_parentheses=None):
        self.precision = precision
        self.strict_characters = strict_characters
        self.strict_parentheses = strict_parentheses
        self._last_result = None

    def evaluate_expression(self, expression: str) -> EvaluationResult:
        """
        Args:
            expression: 完整的表达式字符串
        Returns:
            EvaluationResult；空白输入只清空显示，不调用求值器
        """
        if expression is None or not expression.strip():
            return self.clear()

        try:
            value = evaluate(
                expression,
                strict_characters=self.strict_characters,
                strict_parentheses=self.strict_parentheses,
            )
        except EvaluationError as e:
            logger.warning(f"Evaluation failed ({e.kind}) for {expression!r}: {e}")
            result = EvaluationResult(expression, error=e, display=format_error(e))
        else:
            result = EvaluationResult(expression, value=value,
                                      display=format_result(value, self.precision))

        self._last_result = result
        return result

    @property
    def display_value(self) -> str:
        return self._last_result.display if self._last_result is not None else ""

    def has_error(self) -> bool:
        return self._last_result is not None and not self._last_result.ok

    def clear(self) -> EvaluationResult:
        self._last_result = EvaluationResult("")
        return self._last_result
