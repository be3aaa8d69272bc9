"""计算器异常体系

每个阶段只抛出自己的异常；调用方（REPL）捕获 CalculatorError 即可处理全部错误。
"""


class CalculatorError(Exception):
    """所有计算器错误的基类"""


class ConfigError(CalculatorError):
    """配置非法（例如未知的结合方向）"""


class InvalidOperatorError(CalculatorError, ValueError):
    """对非运算符查询优先级"""


# 词法阶段========================================

class LexError(CalculatorError):
    """词法错误，附带出错位置和片段"""

    def __init__(self, message, position=None, text=None):
        super().__init__(message)
        self.position = position
        self.text = text


class InvalidNumberError(LexError):
    """数字字面量无法解析为浮点数，例如 1.2.3"""


class UnknownOperatorError(LexError):
    """不认识的字母运算符名"""


class UnknownCharacterError(LexError):
    """不认识的单个字符"""


# 求值阶段========================================

class EvalError(CalculatorError):
    """后缀表达式求值错误"""


class StackUnderflowError(EvalError):
    """运算符缺少操作数"""


class InvalidOperandError(EvalError):
    """值栈中出现了非 Number 的 Token"""


class UnsupportedOperatorError(EvalError):
    """运算符没有对应的求值实现"""


class FactorialDomainError(EvalError, ValueError):
    """阶乘的参数为负数或非整数"""


class InvalidResultError(EvalError):
    """求值结束后栈中不是恰好一个数字"""
