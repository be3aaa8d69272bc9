"""输入文本 -> Token序列"""
import logging

from core.errors import InvalidNumberError, UnknownCharacterError, UnknownOperatorError
from core.token_system import Token, SYMBOL_TOKENS, NAMED_OPERATORS

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(' \n\r')
NUMBER_CHARS = frozenset('0123456789.')


def _scan(text, start, accept):
    """从 start 开始贪婪读取满足 accept 的字符，返回结束位置（不越过末尾）"""
    end = start + 1
    while end < len(text) and accept(text[end]):
        end += 1
    return end


def tokenize(text):
    """
    逐字符扫描输入，生成中缀顺序的Token列表
    Args:
        text: 一行用户输入
    Returns:
        Token列表
    Raises:
        InvalidNumberError / UnknownOperatorError / UnknownCharacterError
    """
    tokens = []
    i = 0

    while i < len(text):
        char = text[i]

        if char in SYMBOL_TOKENS:
            tokens.append(SYMBOL_TOKENS[char])
            i += 1
        elif char in WHITESPACE:
            i += 1
        elif char in NUMBER_CHARS:
            end = _scan(text, i, lambda c: c in NUMBER_CHARS)
            literal = text[i:end]
            try:
                value = float(literal)
            except ValueError:
                logger.debug(f"Invalid number '{literal}' at position {i}")
                raise InvalidNumberError(f"Invalid number: {literal}", i, literal) from None
            tokens.append(Token.number(value))
            i = end
        elif char.isalpha():
            end = _scan(text, i, str.isalpha)
            word = text[i:end].lower()
            if word not in NAMED_OPERATORS:
                logger.debug(f"Unknown operator '{word}' at position {i}")
                raise UnknownOperatorError(f"Unknown operator: {word}", i, word)
            tokens.append(NAMED_OPERATORS[word])
            i = end
        else:
            logger.debug(f"Unknown character {char!r} at position {i}")
            raise UnknownCharacterError(f"Unknown character: {char}", i, char)

    logger.debug(f"Tokenized {len(text)} chars into {len(tokens)} tokens")
    return tokens
