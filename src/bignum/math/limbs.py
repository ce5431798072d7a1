"""
Limb Array — примитивы над массивом limb-разрядов

Хранилище целого произвольной точности: список неотрицательных разрядов
по основанию RADIX, младший разряд первым, плюс отдельный флаг знака.

Модуль содержит только функции над модулями (magnitudes), знак обрабатывается
на уровне BigInteger:
- Нормализация (удаление старших нулевых limb)
- Перенос (carry) для позиций >= RADIX
- Сравнение модулей
- Сложение/вычитание модулей с carry/borrow
- Умножение на скаляр и десятичный сдвиг

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список limb никогда не пуст; ноль — ровно [0]
2. Нет старших нулевых limb (кроме канонического нуля)
3. Каждый limb лежит в [0, RADIX)
4. Функции, возвращающие новый список, не разделяют его с аргументами
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Внутреннее основание limb. Три десятичные цифры на limb
RADIX: Final[int] = 1000

# Количество десятичных цифр в одном limb
DIGIT_SIZE: Final[int] = 3

# Внешнее (пользовательское) основание
DECIMAL_BASE: Final[int] = 10


# =============================================================================
# НОРМАЛИЗАЦИЯ И ПЕРЕНОС
# =============================================================================


def trim(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limb (in place).

    Args:
        limbs: Модуль, младший limb первым

    Returns:
        Тот же список в канонической форме ([0] для нуля)
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero(limbs: list[int]) -> bool:
    """True если канонический модуль равен нулю."""
    return len(limbs) == 1 and limbs[0] == 0


def propagate_carry(limbs: list[int]) -> list[int]:
    """
    Распространение переноса (in place).

    Каждая позиция может превышать RADIX (после свёртки или умножения на
    скаляр); избыток переносится в следующий разряд, список растёт
    при необходимости.

    Args:
        limbs: Неотрицательные значения позиций

    Returns:
        Тот же список, все позиции в [0, RADIX)
    """
    carry = 0
    for i in range(len(limbs)):
        total = limbs[i] + carry
        carry, limbs[i] = divmod(total, RADIX)
    while carry:
        carry, digit = divmod(carry, RADIX)
        limbs.append(digit)
    return limbs


# =============================================================================
# КОНВЕРСИЯ NATIVE INT
# =============================================================================


def from_native(value: int) -> tuple[bool, list[int]]:
    """
    Разложение native int на (знак, модуль).

    Знак извлекается отдельно, модуль последовательно делится на RADIX,
    limb заполняются от младшего к старшему.

    Examples:
        >>> from_native(-1234567)
        (True, [567, 234, 1])
        >>> from_native(0)
        (False, [0])
    """
    negative = value < 0
    magnitude = -value if negative else value
    if magnitude == 0:
        return False, [0]

    limbs: list[int] = []
    while magnitude:
        magnitude, digit = divmod(magnitude, RADIX)
        limbs.append(digit)
    return negative, limbs


def to_native(negative: bool, limbs: list[int]) -> int:
    """Обратная конверсия (знак, модуль) → native int."""
    value = 0
    for digit in reversed(limbs):
        value = value * RADIX + digit
    return -value if negative else value


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(a: list[int], b: list[int]) -> int:
    """
    Лексикографическое сравнение модулей.

    Сначала по количеству limb, при равенстве — от старшего limb к младшему
    до первого различия.

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ МОДУЛЕЙ
# =============================================================================


def add_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Сумма модулей с переносом.

    Результат длиннее большего операнда не более чем на один limb.
    """
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = 0
    for i in range(len(a)):
        total = a[i] + carry
        if i < len(b):
            total += b[i]
        if total >= RADIX:
            total -= RADIX
            carry = 1
        else:
            carry = 0
        result.append(total)

    if carry:
        result.append(carry)
    return result


def subtract_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Разность модулей |a| - |b| с заёмом.

    Требует |a| >= |b| (проверяется вызывающим кодом через
    compare_magnitudes).

    Raises:
        ValueError: Если |a| < |b| (заём вышел за старший разряд)
    """
    result: list[int] = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    if borrow or len(b) > len(a):
        raise ValueError("subtrahend magnitude exceeds minuend magnitude")
    return trim(result)


# =============================================================================
# УМНОЖЕНИЕ НА СКАЛЯР И СДВИГИ
# =============================================================================


def scalar_multiply(limbs: list[int], factor: int) -> list[int]:
    """
    Умножение модуля на неотрицательный native int без преобразования Фурье.

    Используется делением (бинарный поиск цифры частного) и десятичным
    сдвигом.

    Raises:
        ValueError: Если factor < 0
    """
    if factor < 0:
        raise ValueError(f"factor must be non-negative, got {factor}")
    if factor == 0 or is_zero(limbs):
        return [0]

    result = [digit * factor for digit in limbs]
    return trim(propagate_carry(result))


def shift_limbs(limbs: list[int], count: int) -> list[int]:
    """Умножение на RADIX**count: count нулевых limb в младшие разряды."""
    if count < 0:
        raise ValueError(f"shift count must be non-negative, got {count}")
    if is_zero(limbs):
        return [0]
    return [0] * count + list(limbs)


def multiply_by_power_of_ten(limbs: list[int], exponent: int) -> list[int]:
    """
    Умножение модуля на 10**exponent.

    Целая часть exponent / DIGIT_SIZE — сдвиг на целые limb,
    остаток — одно умножение на скаляр 10**(exponent % DIGIT_SIZE).

    Examples:
        >>> multiply_by_power_of_ten([7], 4)
        [0, 70]

    Raises:
        ValueError: Если exponent < 0
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    whole, rest = divmod(exponent, DIGIT_SIZE)
    result = shift_limbs(limbs, whole)
    if rest:
        result = scalar_multiply(result, DECIMAL_BASE**rest)
    return result
