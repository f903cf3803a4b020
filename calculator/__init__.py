"""计算器模块 - 模型、输入缓冲区和批量求值"""
from .model import CalculatorModel, EvaluationResult
from .session import ExpressionBuffer
from .batch import load_expressions, evaluate_many, summarize

__all__ = [
    'CalculatorModel', 'EvaluationResult', 'ExpressionBuffer',
    'load_expressions', 'evaluate_many', 'summarize'
]
