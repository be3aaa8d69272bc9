"""中缀Token序列 -> 后缀（RPN）Token序列"""
import logging

from config.config import CALCULATOR_CONFIG, validate_associativity
from core.token_system import Token, TokenKind

logger = logging.getLogger(__name__)

MULTIPLICATION = Token(TokenKind.MULTIPLICATION)
NEGATION = Token(TokenKind.NEGATION)


def _ends_operand(token):
    """前一个Token是否结束了一个操作数（数字或右括号），用于隐式乘法"""
    return token is not None and (
        token.is_number() or token.kind is TokenKind.CLOSING_PARENTHESES
    )


# 左结合时视为同级的二元运算符
LEFT_ASSOCIATIVE_TIERS = (
    frozenset({TokenKind.PLUS, TokenKind.MINUS}),
    frozenset({TokenKind.MULTIPLICATION, TokenKind.DIVISION, TokenKind.MODULO}),
)


def _same_tier(top, token):
    if top.kind is token.kind:
        return True
    return any(top.kind in tier and token.kind in tier for tier in LEFT_ASSOCIATIVE_TIERS)


def _should_pop(top, token, associativity):
    if top.has_higher_precedence_than(token):
        return True
    # 左结合时同级的二元运算符也要先出栈
    return (associativity == "left"
            and token.is_binary_operator()
            and top.is_binary_operator()
            and _same_tier(top, token))


def convert(tokens, associativity=None):
    """
    调度场算法，附带隐式乘法插入和负号消歧
    Args:
        tokens: tokenize() 的输出
        associativity: 'right' 或 'left'，默认取 CALCULATOR_CONFIG
    Returns:
        后缀顺序的Token列表；本阶段不检查操作数个数
    """
    if associativity is None:
        associativity = CALCULATOR_CONFIG["associativity"]
    validate_associativity(associativity)

    stack = []
    output = []
    previous = None

    for token in tokens:
        if token.is_number():
            output.append(token)

        elif token.kind is TokenKind.OPENING_PARENTHESES:
            if _ends_operand(previous):
                logger.debug("Implicit multiplication before '('")
                stack.append(MULTIPLICATION)
            stack.append(token)

        elif token.kind is TokenKind.CLOSING_PARENTHESES:
            while stack and stack[-1].kind is not TokenKind.OPENING_PARENTHESES:
                output.append(stack.pop())
            # 没有匹配的左括号时栈已为空，直接忽略
            if stack:
                stack.pop()

        else:
            operator = token
            if operator.kind is TokenKind.MINUS and (
                    previous is None
                    or previous.is_operator()
                    or previous.kind is TokenKind.OPENING_PARENTHESES):
                operator = NEGATION

            if (operator.is_unary_operator()
                    and operator.kind not in (TokenKind.NEGATION, TokenKind.FACTORIAL)
                    and _ends_operand(previous)):
                logger.debug(f"Implicit multiplication before {operator!r}")
                stack.append(MULTIPLICATION)

            while (stack
                   and stack[-1].kind is not TokenKind.OPENING_PARENTHESES
                   and _should_pop(stack[-1], operator, associativity)):
                output.append(stack.pop())

            # 阶乘在输入中就是后缀形式
            if operator.kind is TokenKind.FACTORIAL:
                output.append(operator)
            else:
                stack.append(operator)

        previous = token

    while stack:
        output.append(stack.pop())

    logger.debug(f"Postfix: {output}")
    return output
