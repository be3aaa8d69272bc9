"""核心模块 - Token系统、分词器、中缀转后缀和RPN评估器"""
from .errors import (
    CalculatorError, ConfigError, InvalidOperatorError,
    LexError, InvalidNumberError, UnknownOperatorError, UnknownCharacterError,
    EvalError, StackUnderflowError, InvalidOperandError, UnsupportedOperatorError,
    FactorialDomainError, InvalidResultError
)
from .token_system import (
    TokenKind, Token, UNARY_OPERATORS, PRECEDENCE_ORDER, PRECEDENCE_INDEX,
    SYMBOL_TOKENS, NAMED_OPERATORS
)
from .tokenizer import tokenize
from .converter import convert
from .operators import Operators, factorial
from .rpn_evaluator import RPNEvaluator, evaluate
from .calculator import EvaluationTrace, calculate, calculate_verbose

__all__ = [
    'CalculatorError', 'ConfigError', 'InvalidOperatorError',
    'LexError', 'InvalidNumberError', 'UnknownOperatorError', 'UnknownCharacterError',
    'EvalError', 'StackUnderflowError', 'InvalidOperandError', 'UnsupportedOperatorError',
    'FactorialDomainError', 'InvalidResultError',
    'TokenKind', 'Token', 'UNARY_OPERATORS', 'PRECEDENCE_ORDER', 'PRECEDENCE_INDEX',
    'SYMBOL_TOKENS', 'NAMED_OPERATORS',
    'tokenize', 'convert', 'Operators', 'factorial', 'RPNEvaluator', 'evaluate',
    'EvaluationTrace', 'calculate', 'calculate_verbose'
]
