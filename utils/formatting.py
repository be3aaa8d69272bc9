"""utils/formatting.py"""
import numpy as np


def format_tokens(tokens):
    """[Number(3.0), Plus, Number(4.0)]"""
    return '[' + ', '.join(repr(token) for token in tokens) + ']'


def format_result(value):
    """最短的定点表示，整数不带小数点（1e23 -> 100000000000000000000000）；inf / -inf / NaN / -0 单独处理"""
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0 and np.signbit(value):
        return "-0"
    return np.format_float_positional(value, trim='-')


def format_trace(trace):
    """详细模式的多行输出，标签右对齐"""
    lines = [
        ("User input", trace.text.rstrip('\r\n')),
        ("Tokens", format_tokens(trace.tokens)),
        ("Postfix notation", format_tokens(trace.postfix)),
        ("Result", format_result(trace.result)),
    ]
    width = max(len(label) for label, _ in lines)
    return '\n'.join(f"{label.rjust(width)}: {text}" for label, text in lines)
