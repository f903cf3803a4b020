"""输入缓冲区 - 逐键累积表达式，按等号时整串交给模型"""
import logging

from config.config import INPUT_CONFIG

logger = logging.getLogger(__name__)


class ExpressionBuffer:

    def __init__(self, operator_aliases=None):
        if operator_aliases is None:
            operator_aliases = INPUT_CONFIG["operator_aliases"]
        self.operator_aliases = dict(operator_aliases)
        self._chars = []

    @property
    def text(self):
        return ''.join(self._chars)

    def __len__(self):
        return len(self._chars)

    def normalize(self, text):
        """把键盘字符（* /）替换为运算符号（× ÷）"""
        return ''.join(self.operator_aliases.get(ch, ch) for ch in text)

    def append(self, text):
        self._chars.extend(self.normalize(text))
        return self.text

    def backspace(self):
        if self._chars:
            self._chars.pop()
        return self.text

    def clear(self):
        self._chars = []
        return self.text

    def submit(self, model):
        """
        等号键：缓冲区非空时求值并清空

        Returns:
            EvaluationResult，缓冲区为空时返回None
        """
        if not self._chars:
            return None
        expression = self.text
        self._chars = []
        logger.debug(f"Submitting expression {expression!r}")
        return model.evaluate_expression(expression)
