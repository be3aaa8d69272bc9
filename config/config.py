"""配置文件"""
# 求值参数
CALCULATOR_CONFIG = {
    # 同级二元运算符的结合方向
    # right: 8-3-2 = 8-(3-2) = 7, 2^3^2 = 512
    # left:  8-3-2 = (8-3)-2 = 3, 2^3^2 = 64
    "associativity": "right",
}

ASSOCIATIVITY_CHOICES = ("right", "left")

# 命令行交互参数
CLI_CONFIG = {
    "banner": "Command Line Interface Calculator",
    "exit_hint": "Enter `exit` to close the program",
    "exit_command": "exit",
    "prompt": "> ",
    "verbose_keyword": "verbose",
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_associativity(associativity):
    from core.errors import ConfigError
    if associativity not in ASSOCIATIVITY_CHOICES:
        raise ConfigError(
            f"Unknown associativity '{associativity}', expected one of {ASSOCIATIVITY_CHOICES}"
        )
    return associativity


def validate_config():
    """验证配置的合理性"""
    from core.errors import ConfigError
    validate_associativity(CALCULATOR_CONFIG["associativity"])
    if not CLI_CONFIG["exit_command"].strip():
        raise ConfigError("exit_command must not be blank")
    if CLI_CONFIG["exit_command"] != CLI_CONFIG["exit_command"].strip().lower():
        raise ConfigError("exit_command must be stripped and lowercase")
    if LOGGING_CONFIG["level"] not in LOG_LEVEL_CHOICES:
        raise ConfigError(f"Unknown log level '{LOGGING_CONFIG['level']}'")
    return True
