"""工具模块"""
from .formatting import format_tokens, format_result, format_trace

__all__ = ['format_tokens', 'format_result', 'format_trace']
