"""core/token_system.py"""
from enum import Enum
import logging

import numpy as np

from core.errors import InvalidOperatorError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    # 二元操作符
    PLUS = "Plus"
    MINUS = "Minus"
    MULTIPLICATION = "Multiplication"
    DIVISION = "Division"
    MODULO = "Modulo"
    POWER = "Power"
    PERMUTATION = "Permutation"
    COMBINATION = "Combination"

    # 一元操作符
    NEGATION = "Negation"
    FACTORIAL = "Factorial"
    COS = "Cos"
    SIN = "Sin"
    TAN = "Tan"
    ARC_SIN = "ArcSin"
    ARC_COS = "ArcCos"
    ARC_TAN = "ArcTan"
    LOGARITHM = "Logarithm"  # 以10为底
    NATURAL_LOGARITHM = "NaturalLogarithm"
    SQUARE_ROOT = "SquareRoot"

    # 操作数与结构标记
    NUMBER = "Number"
    OPENING_PARENTHESES = "OpeningParentheses"
    CLOSING_PARENTHESES = "ClosingParentheses"


NON_OPERATORS = frozenset({
    TokenKind.NUMBER,
    TokenKind.OPENING_PARENTHESES,
    TokenKind.CLOSING_PARENTHESES,
})

UNARY_OPERATORS = frozenset({
    TokenKind.NEGATION,
    TokenKind.FACTORIAL,
    TokenKind.COS,
    TokenKind.SIN,
    TokenKind.TAN,
    TokenKind.ARC_COS,
    TokenKind.ARC_SIN,
    TokenKind.ARC_TAN,
    TokenKind.LOGARITHM,
    TokenKind.NATURAL_LOGARITHM,
    TokenKind.SQUARE_ROOT,
})

# 优先级从高到低
PRECEDENCE_ORDER = (
    TokenKind.NEGATION,
    TokenKind.FACTORIAL,
    TokenKind.COS,
    TokenKind.SIN,
    TokenKind.TAN,
    TokenKind.ARC_COS,
    TokenKind.ARC_SIN,
    TokenKind.ARC_TAN,
    TokenKind.NATURAL_LOGARITHM,
    TokenKind.LOGARITHM,
    TokenKind.PERMUTATION,
    TokenKind.COMBINATION,
    TokenKind.SQUARE_ROOT,
    TokenKind.POWER,
    TokenKind.DIVISION,
    TokenKind.MULTIPLICATION,
    TokenKind.MODULO,
    TokenKind.PLUS,
    TokenKind.MINUS,
)

PRECEDENCE_INDEX = {kind: idx for idx, kind in enumerate(PRECEDENCE_ORDER)}

# 操作符 -> Operators 中的方法名
OPERATOR_NAMES = {
    TokenKind.PLUS: 'add',
    TokenKind.MINUS: 'sub',
    TokenKind.MULTIPLICATION: 'mul',
    TokenKind.DIVISION: 'div',
    TokenKind.MODULO: 'mod',
    TokenKind.POWER: 'pow',
    TokenKind.PERMUTATION: 'perm',
    TokenKind.COMBINATION: 'comb',
    TokenKind.NEGATION: 'neg',
    TokenKind.FACTORIAL: 'fact',
    TokenKind.COS: 'cos',
    TokenKind.SIN: 'sin',
    TokenKind.TAN: 'tan',
    TokenKind.ARC_SIN: 'asin',
    TokenKind.ARC_COS: 'acos',
    TokenKind.ARC_TAN: 'atan',
    TokenKind.LOGARITHM: 'log',
    TokenKind.NATURAL_LOGARITHM: 'ln',
    TokenKind.SQUARE_ROOT: 'sqrt',
}


class Token:
    """不可变的词法单元；只有 NUMBER 携带 float64 数值"""

    __slots__ = ('kind', 'value')

    def __init__(self, kind, value=None):
        if kind is TokenKind.NUMBER:
            if value is None:
                raise ValueError("Number token requires a value")
            value = np.float64(value)
        elif value is not None:
            raise ValueError(f"{kind.value} token does not carry a value")
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'value', value)

    @classmethod
    def number(cls, value):
        return cls(TokenKind.NUMBER, value)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __delattr__(self, key):
        raise AttributeError("Token is immutable")

    def __reduce__(self):
        # copy / pickle 经由构造函数重建
        return (Token, (self.kind, self.value))

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind is other.kind and bool(self.value == other.value)

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.kind is TokenKind.NUMBER:
            return f"Number({float(self.value)!r})"
        return self.kind.value

    @property
    def name(self):
        """操作符对应的求值方法名；非操作符返回小写的类别名"""
        return OPERATOR_NAMES.get(self.kind, self.kind.value.lower())

    def is_operator(self):
        return self.kind not in NON_OPERATORS

    def is_unary_operator(self):
        return self.kind in UNARY_OPERATORS

    def is_binary_operator(self):
        return self.is_operator() and not self.is_unary_operator()

    def is_number(self):
        return self.kind is TokenKind.NUMBER

    def has_higher_precedence_than(self, other):
        """
        按 PRECEDENCE_ORDER 比较优先级。
        同一个操作符返回 False，这使得转换器中同级运算符从右向左结合。
        Raises:
            InvalidOperatorError: 任一方不是操作符
        """
        for token in (self, other):
            if token.kind not in PRECEDENCE_INDEX:
                logger.debug(f"Precedence queried for non-operator: {token!r}")
                raise InvalidOperatorError(f"Invalid operator: {token!r}")
        return PRECEDENCE_INDEX[self.kind] < PRECEDENCE_INDEX[other.kind]


# 单字符符号
SYMBOL_TOKENS = {
    '+': Token(TokenKind.PLUS),
    '-': Token(TokenKind.MINUS),
    '*': Token(TokenKind.MULTIPLICATION),
    '/': Token(TokenKind.DIVISION),
    '%': Token(TokenKind.MODULO),
    '^': Token(TokenKind.POWER),
    '!': Token(TokenKind.FACTORIAL),
    '~': Token(TokenKind.NEGATION),
    '(': Token(TokenKind.OPENING_PARENTHESES),
    ')': Token(TokenKind.CLOSING_PARENTHESES),
}

# 字母运算符（小写后精确匹配）
NAMED_OPERATORS = {
    'cos': Token(TokenKind.COS),
    'sin': Token(TokenKind.SIN),
    'tan': Token(TokenKind.TAN),
    'asin': Token(TokenKind.ARC_SIN),
    'acos': Token(TokenKind.ARC_COS),
    'atan': Token(TokenKind.ARC_TAN),
    'ln': Token(TokenKind.NATURAL_LOGARITHM),
    'log': Token(TokenKind.LOGARITHM),
    'p': Token(TokenKind.PERMUTATION),
    'c': Token(TokenKind.COMBINATION),
    'sqrt': Token(TokenKind.SQUARE_ROOT),
    'mod': Token(TokenKind.MODULO),
}
