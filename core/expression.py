"""顶层入口：字符串 -> Token -> 后缀 -> 数值"""
from config.config import EVALUATOR_CONFIG
from core.token_system import tokenize
from core.postfix import to_postfix
from core.rpn_evaluator import RPNEvaluator


def evaluate(expression, strict_characters=None, strict_parentheses=None):
    """
    Args:
        expression: 完整的表达式字符串
        strict_characters: None 时读取 EVALUATOR_CONFIG
        strict_parentheses: None 时读取 EVALUATOR_CONFIG
    Returns:
        float结果，失败时抛出EvaluationError的子类
    """
    if strict_characters is None:
        strict_characters = EVALUATOR_CONFIG["strict_characters"]
    if strict_parentheses is None:
        strict_parentheses = EVALUATOR_CONFIG["strict_parentheses"]

    tokens = tokenize(expression, strict=strict_characters)
    postfix = to_postfix(tokens, strict=strict_parentheses)
    return RPNEvaluator.evaluate(postfix)
