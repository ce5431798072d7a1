"""
Long-Division Engine — деление модулей столбиком

Частное и остаток по основанию RADIX:
- Разряды делимого обходятся от старшего к младшему
- Текущий остаток сдвигается на один limb и получает следующий разряд
- Цифра частного — наибольшее d в [0, RADIX) с d * |divisor| <= остаток,
  найденное бинарным поиском (scalar_multiply как оракул сравнения)
- Остаток уменьшается на d * |divisor|

Сложность O(len(dividend) * len(divisor) * log2(RADIX)). Деление не на
критическом по производительности пути.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой делитель → DivisionByZero (никогда не возвращается fallback)
2. dividend == quotient * divisor + remainder, remainder < divisor
3. Результаты в канонической форме
"""

import logging

from src.bignum.math.limbs import (
    RADIX,
    compare_magnitudes,
    is_zero,
    scalar_multiply,
    subtract_magnitudes,
    trim,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление или взятие остатка с нулевым делителем.

    Фатально: вычисление не имеет смысла, восстановление невозможно.
    Распространяется к вызывающему коду без перехвата.
    """

    pass


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _largest_digit(divisor: list[int], remainder: list[int]) -> int:
    """Наибольшее d в [0, RADIX) такое что d * divisor <= remainder."""
    left, right = 0, RADIX
    while left + 1 < right:
        middle = (left + right) // 2
        if compare_magnitudes(scalar_multiply(divisor, middle), remainder) <= 0:
            left = middle
        else:
            right = middle
    return left


def divmod_magnitudes(
    dividend: list[int],
    divisor: list[int],
) -> tuple[list[int], list[int]]:
    """
    Деление модулей с остатком.

    Args:
        dividend: Модуль делимого
        divisor: Модуль делителя

    Returns:
        (quotient, remainder) — новые канонические модули

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> divmod_magnitudes([10], [3])
        ([3], [1])
    """
    if is_zero(divisor):
        raise DivisionByZero("division by zero")

    logger.debug("long division: %d / %d limbs", len(dividend), len(divisor))

    quotient: list[int] = []
    remainder = [0]
    for digit in reversed(dividend):
        if is_zero(remainder):
            remainder = [digit]
        else:
            remainder.insert(0, digit)

        d = 0
        if compare_magnitudes(remainder, divisor) >= 0:
            d = _largest_digit(divisor, remainder)
            remainder = subtract_magnitudes(remainder, scalar_multiply(divisor, d))
        quotient.append(d)

    quotient.reverse()
    return trim(quotient), remainder
