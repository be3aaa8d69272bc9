"""core/operators.py"""
import logging

import numpy as np

from core.errors import FactorialDomainError

logger = logging.getLogger(__name__)


def factorial(n):
    """
    n! ，0! = 1! = 1
    溢出到 inf 后直接返回 inf
    Raises:
        FactorialDomainError: n 为负数或非整数（含 inf / nan）
    """
    n = np.float64(n)
    with np.errstate(all='ignore'):
        if n < 0:
            logger.debug(f"Factorial of negative number: {n}")
            raise FactorialDomainError(f"Cannot find factorial of negative number: {n}")
        if n - np.floor(n) != 0:
            logger.debug(f"Factorial of non-integer: {n}")
            raise FactorialDomainError(f"Cannot find factorial of decimal number: {n}")

        result = np.float64(1.0)
        k = np.float64(2.0)
        while k <= n:
            result *= k
            if np.isinf(result):
                break
            k += 1
    return result


class Operators:
    """所有可求值操作符的静态方法集合；缺少的方法即不支持的操作符"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        return operand * np.float64(-1.0)

    @staticmethod
    def fact(operand):
        return factorial(operand)

    @staticmethod
    def sin(operand):
        return np.sin(operand)

    @staticmethod
    def cos(operand):
        return np.cos(operand)

    @staticmethod
    def tan(operand):
        return np.tan(operand)

    @staticmethod
    def asin(operand):
        """超出 [-1, 1] 返回 nan"""
        return np.arcsin(operand)

    @staticmethod
    def sqrt(operand):
        """负数返回 nan"""
        return np.sqrt(operand)

    @staticmethod
    def log(operand):
        """以10为底；log(0) = -inf，负数返回 nan"""
        return np.log10(operand)

    @staticmethod
    def ln(operand):
        return np.log(operand)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除零按 IEEE 754 得到 ±inf 或 nan"""
        return np.divide(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        return np.power(operand1, operand2)

    @staticmethod
    def perm(operand1, operand2):
        """排列数 nPr = n! / (n-r)!"""
        return factorial(operand1) / factorial(operand1 - operand2)

    @staticmethod
    def comb(operand1, operand2):
        """组合数 nCr = n! / ((n-r)! r!)"""
        return factorial(operand1) / (factorial(operand1 - operand2) * factorial(operand2))

