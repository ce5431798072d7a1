"""
Decimal Text — граница разбора и форматирования

Грамматика токена: необязательный ведущий '-', затем одна или более
десятичных цифр '0'-'9'. Без '+', разделителей и пробелов внутри токена.

- Ведущие нули схлопываются ("00010" → 10)
- "-0" разбирается как неотрицательный ноль
- Вывод без ведущих нулей, ровно один '-' для отрицательных, ноль без знака
- Разбор и форматирование взаимно обратны без потери точности
"""

import re
from typing import Final

from src.bignum.math.limbs import DIGIT_SIZE, is_zero, trim

# Полный токен целого
DECIMAL_TOKEN_PATTERN: Final[str] = r"^-?[0-9]+$"

_DECIMAL_TOKEN: Final[re.Pattern[str]] = re.compile(DECIMAL_TOKEN_PATTERN)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Некорректное текстовое представление целого.

    Разбор атомарен: при ошибке значение-получатель не изменяется.
    """

    pass


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_decimal(text: str) -> tuple[bool, list[int]]:
    """
    Разбор десятичного токена в (знак, модуль).

    Args:
        text: Токен вида -?[0-9]+

    Returns:
        (negative, limbs) в канонической форме

    Raises:
        InvalidFormat: Пустая строка, одиночный '-', '+', пробелы,
            нецифровые символы или не str

    Examples:
        >>> parse_decimal("-1234")
        (True, [234, 1])
        >>> parse_decimal("00010")
        (False, [10])
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"expected str, got {type(text).__name__}")
    if _DECIMAL_TOKEN.fullmatch(text) is None:
        raise InvalidFormat(f"invalid decimal integer: {text!r}")

    negative = text.startswith("-")
    digits = text[1:] if negative else text

    limbs: list[int] = []
    for end in range(len(digits), 0, -DIGIT_SIZE):
        start = max(0, end - DIGIT_SIZE)
        limbs.append(int(digits[start:end]))

    trim(limbs)
    if is_zero(limbs):
        negative = False
    return negative, limbs


def split_tokens(text: str) -> list[str]:
    """Разбиение строки на токены по пробельным символам."""
    return text.split()


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_decimal(negative: bool, limbs: list[int]) -> str:
    """
    Форматирование (знак, модуль) в десятичную строку.

    Старший limb без дополнения, остальные дополняются нулями до DIGIT_SIZE.

    Examples:
        >>> format_decimal(True, [5, 0, 12])
        '-12000005'
    """
    head = str(limbs[-1])
    tail = "".join(str(digit).zfill(DIGIT_SIZE) for digit in reversed(limbs[:-1]))
    sign = "-" if negative and not is_zero(limbs) else ""
    return sign + head + tail
