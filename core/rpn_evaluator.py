"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from core.errors import (
    InvalidOperandError, InvalidResultError, StackUnderflowError, UnsupportedOperatorError
)
from core.operators import Operators
from core.token_system import Token, TokenKind

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀Token序列的值"""

    @staticmethod
    def _pop_number(stack, operator):
        if not stack:
            logger.debug(f"Insufficient operands for {operator!r}")
            raise StackUnderflowError(f"Insufficient operands for {operator!r}")
        operand = stack.pop()
        if not operand.is_number():
            logger.debug(f"Invalid operand {operand!r} for {operator!r}")
            raise InvalidOperandError(f"Invalid operand: {operand!r}")
        return operand.value

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: convert() 输出的后缀Token序列
        Returns:
            float64 结果
        Raises:
            EvalError 的各个子类
        """
        stack = []

        for token in token_sequence:
            if token.is_number():
                stack.append(token)
                continue

            if not token.is_operator():
                # 不匹配的左括号会留在后缀序列里
                logger.debug(f"Skipping {token!r} in postfix sequence")
                continue

            # ================== 一元操作符处理 ==================
            if token.is_unary_operator():
                operands = [RPNEvaluator._pop_number(stack, token)]
                kind_label = "unary"

            # ================== 二元操作符处理 ==================
            else:
                operand2 = RPNEvaluator._pop_number(stack, token)
                operand1 = RPNEvaluator._pop_number(stack, token)
                operands = [operand1, operand2]
                kind_label = "binary"

            op_method = getattr(Operators, token.name, None)
            if op_method is None:
                logger.debug(f"Unknown {kind_label} operator: {token!r}")
                raise UnsupportedOperatorError(f"Not a {kind_label} operator: {token!r}")

            with np.errstate(all='ignore'):
                result = np.float64(op_method(*operands))
            stack.append(Token.number(result))

        # 返回结果处理
        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.debug(f"Stack content: {stack}")
            raise InvalidResultError(f"Invalid result: {len(stack)} values left on the stack")

        result = stack[0]
        if result.kind is not TokenKind.NUMBER:
            raise InvalidResultError(f"Invalid result: {result!r}")
        return result.value


def evaluate(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)
