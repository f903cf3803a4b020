"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "strict_characters": False,  # True: 遇到字母表之外的字符直接报错
    "strict_parentheses": False,  # True: 未闭合的 '(' 视为语法错误
}

# 显示参数
DISPLAY_CONFIG = {
    "precision": 6,  # 先格式化到6位小数，再去掉末尾的0
    "math_error_prefix": "Math Error: ",
    "syntax_error_message": "Syntax Error",
}

# 键盘输入
INPUT_CONFIG = {
    "operator_aliases": {
        "*": "×",
        "/": "÷",
    },
}

# 批量求值
BATCH_CONFIG = {
    "expression_column": "expression",
    "default_output_path": "results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precision = DISPLAY_CONFIG["precision"]
    assert isinstance(precision, int) and precision >= 0, "precision必须是非负整数"
    for alias, symbol in INPUT_CONFIG["operator_aliases"].items():
        assert symbol in ("+", "-", "×", "÷"), f"别名 {alias!r} 必须映射到四则运算符"
    assert BATCH_CONFIG["expression_column"], "expression_column不能为空"
    print("Configuration validated successfully!")
