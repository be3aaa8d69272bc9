"""文本 -> 数值的完整流水线"""
import logging
from typing import List, NamedTuple

from core.converter import convert
from core.rpn_evaluator import evaluate
from core.token_system import Token
from core.tokenizer import tokenize

logger = logging.getLogger(__name__)


class EvaluationTrace(NamedTuple):
    """一次求值的中间结果，供详细模式输出"""
    text: str
    tokens: List[Token]
    postfix: List[Token]
    result: float


def calculate_verbose(text, associativity=None):
    tokens = tokenize(text)
    postfix = convert(tokens, associativity)
    result = evaluate(postfix)
    logger.debug(f"{text.strip()!r} -> {result}")
    return EvaluationTrace(text, tokens, postfix, result)


def calculate(text, associativity=None):
    return calculate_verbose(text, associativity).result
