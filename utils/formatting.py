"""utils/formatting.py"""
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
import numpy as np

from config.config import DISPLAY_CONFIG

_TRAILING_ZEROS = re.compile(r"\.?0*$")


def format_result(value, precision=None):
    """格式化到固定小数位，再去掉末尾的0和小数点：14.0 -> '14'，2.5 -> '2.5'"""
    if precision is None:
        precision = DISPLAY_CONFIG["precision"]
    value = float(value)

    # 非有限值没有小数部分可截
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    # 在最短十进制表示上四舍五入：0.0078125 -> 0.007813
    with localcontext() as ctx:
        ctx.prec = 400 + precision  # 足够容纳最大的double的整数部分
        rounded = Decimal(repr(value)).quantize(Decimal(1).scaleb(-precision),
                                                rounding=ROUND_HALF_UP)
    text = f"{rounded:f}"
    if "." not in text:
        return text
    return _TRAILING_ZEROS.sub("", text, count=1)


def format_error(error):
    """除零显示为数学错误，其余一律显示为语法错误"""
    if isinstance(error, ZeroDivisionError):
        return f"{DISPLAY_CONFIG['math_error_prefix']}{error}"
    return DISPLAY_CONFIG["syntax_error_message"]
