"""配置文件"""

# 交互界面参数
CLI_CONFIG = {
    "banner": "Welcome to the Calculator CLI with BODMAS support!",
    "prompt": "Enter an expression (e.g., 2 + 2) or type 'quit' to exit:",
    "farewell": "Goodbye!",
    "quit_command": "quit",  # 忽略大小写与首尾空白
    "result_prefix": "Result: ",
    "error_prefix": "Error: ",
}

# 计算器参数
CALCULATOR_CONFIG = {
    "strict_parentheses": True,  # False 时恢复旧的宽松括号匹配
    "default_log_level": "WARNING",
}

# 运算符优先级（数值越大结合越紧）
PRECEDENCE_CONFIG = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert set(PRECEDENCE_CONFIG) == {"+", "-", "*", "/"}, "只支持四则运算符"
    assert PRECEDENCE_CONFIG["*"] == PRECEDENCE_CONFIG["/"], "乘除同级"
    assert PRECEDENCE_CONFIG["+"] == PRECEDENCE_CONFIG["-"], "加减同级"
    assert PRECEDENCE_CONFIG["*"] > PRECEDENCE_CONFIG["+"], "乘除优先于加减"
    assert min(PRECEDENCE_CONFIG.values()) > 0, "优先级0保留给未知符号"
    assert CLI_CONFIG["quit_command"] == CLI_CONFIG["quit_command"].strip().lower(), \
        "退出命令需为小写且无空白"
    return True
