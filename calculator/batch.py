"""批量求值 - 从文件读取表达式，结果汇总为DataFrame"""
import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from calculator.model import CalculatorModel

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'value', 'display', 'error']


def load_expressions(file_path, column=None):
    """
    加载表达式列表

    Parameters:
    - file_path: .csv 文件按列读取；其他文件每个非空行一个表达式
    - column: CSV中的表达式列名，默认取 BATCH_CONFIG

    Returns:
    - 表达式字符串列表
    """
    column = column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
        expressions = df[column].tolist()
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = [line.rstrip('\n') for line in f if line.strip()]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_many(expressions: Iterable[str],
                  model: Optional[CalculatorModel] = None) -> pd.DataFrame:
    """逐个求值，失败的行 value 为NaN，error 为错误类型"""
    model = model or CalculatorModel()
    rows = []
    for expression in expressions:
        result = model.evaluate_expression(expression)
        rows.append({
            'expression': expression,
            'value': result.value if result.value is not None else np.nan,
            'display': result.display,
            'error': result.error_kind,
        })
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def summarize(results: pd.DataFrame) -> dict:
    failed = results['error'].notna()
    return {
        'total': int(len(results)),
        'ok': int((~failed).sum()),
        'failed': int(failed.sum()),
        'errors': {str(k): int(v) for k, v in results.loc[failed, 'error'].value_counts().items()},
    }
