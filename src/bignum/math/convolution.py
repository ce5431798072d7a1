"""
Convolution Multiplier — умножение модулей через БПФ

Произведение модулей вычисляется как циклическая свёртка последовательностей
limb:
- Дополнение нулями до степени двойки >= len(a) + len(b) (без заворачивания)
- Прямое преобразование (bit-reversal перестановка + butterfly стадии)
- Поточечное умножение в частотной области
- Обратное преобразование (отрицательный угол, масштабирование 1/N)
- Округление вещественных частей и перенос (propagate_carry)

ТОЧНОСТЬ:
Python float — IEEE-754 binary64 (53 бита мантиссы). Наибольший член свёртки
не превышает (RADIX - 1)**2 * N/2; для N = 2**18 это ≈ 1.3e11, ожидаемая
ошибка округления ≈ член * log2(N) * 2**-52 ≈ 1e-3, что далеко от 0.5.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина преобразования > MultiplierConfig.max_transform_length →
   точное умножение столбиком (schoolbook_multiply)
2. Наибольшее отклонение от целого > rounding_tolerance → пересчёт
   столбиком с WARNING в лог
3. Twiddle-множители берутся из таблицы корней, вычисленных напрямую
   (ошибка не накапливается от повторного умножения)
"""

import cmath
import logging
import math
from dataclasses import dataclass
from typing import Final

from src.bignum.math.limbs import is_zero, propagate_carry, trim

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Максимальная длина преобразования, при которой binary64 гарантированно
# удерживает ошибку округления ниже 0.5 для RADIX = 1000
MAX_TRANSFORM_LENGTH_DEFAULT: Final[int] = 1 << 18

# Допустимое отклонение округляемого коэффициента от ближайшего целого
ROUNDING_TOLERANCE_DEFAULT: Final[float] = 0.25


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MultiplierConfig:
    """Конфигурация умножителя.

    Границы, за которыми свёртка через float больше не используется.
    """

    # Максимальная длина преобразования (степень двойки)
    max_transform_length: int = MAX_TRANSFORM_LENGTH_DEFAULT

    # Порог отклонения от целого, после которого результат пересчитывается
    rounding_tolerance: float = ROUNDING_TOLERANCE_DEFAULT

    def __post_init__(self) -> None:
        length = self.max_transform_length
        if length < 2 or length & (length - 1):
            raise ValueError(
                f"max_transform_length must be a power of two >= 2, got {length}"
            )
        if not 0.0 < self.rounding_tolerance < 0.5:
            raise ValueError(
                f"rounding_tolerance must be in (0, 0.5), got {self.rounding_tolerance}"
            )


_DEFAULT_CONFIG = MultiplierConfig()


def get_default_config() -> MultiplierConfig:
    """Текущая конфигурация, используемая BigInteger."""
    return _DEFAULT_CONFIG


def set_default_config(config: MultiplierConfig | None = None) -> MultiplierConfig:
    """
    Установка конфигурации по умолчанию.

    Args:
        config: Новая конфигурация (None → значения по умолчанию)

    Returns:
        Предыдущая конфигурация (для восстановления)
    """
    global _DEFAULT_CONFIG
    previous = _DEFAULT_CONFIG
    _DEFAULT_CONFIG = config or MultiplierConfig()
    return previous


# =============================================================================
# ПРЕОБРАЗОВАНИЕ ФУРЬЕ
# =============================================================================


def next_power_of_two(n: int) -> int:
    """Наименьшая степень двойки >= n (минимум 1)."""
    m = 1
    while m < n:
        m *= 2
    return m


def fft(values: list[complex], invert: bool = False) -> None:
    """
    Итеративное БПФ radix-2 (in place).

    Args:
        values: Последовательность длины степени двойки
        invert: Обратное преобразование (с масштабированием 1/N)
    """
    n = len(values)

    # Bit-reversal перестановка
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            values[i], values[j] = values[j], values[i]

    sign = -1.0 if invert else 1.0
    roots = [cmath.exp(complex(0.0, sign * 2.0 * math.pi * k / n)) for k in range(n // 2)]

    length = 2
    while length <= n:
        half = length // 2
        stride = n // length
        for start in range(0, n, length):
            for k in range(half):
                u = values[start + k]
                v = values[start + k + half] * roots[k * stride]
                values[start + k] = u + v
                values[start + k + half] = u - v
        length *= 2

    if invert:
        for i in range(n):
            values[i] /= n


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def schoolbook_multiply(a: list[int], b: list[int]) -> list[int]:
    """Точное умножение столбиком, O(len(a) * len(b))."""
    if is_zero(a) or is_zero(b):
        return [0]

    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            result[i + j] += x * y
    return trim(propagate_carry(result))


def _convolve(a: list[int], b: list[int], n: int) -> tuple[list[int], float]:
    """Свёртка через БПФ; возвращает округлённые коэффициенты и макс. ошибку."""
    fa = [complex(x) for x in a] + [0j] * (n - len(a))
    fb = [complex(x) for x in b] + [0j] * (n - len(b))

    fft(fa)
    fft(fb)
    for i in range(n):
        fa[i] *= fb[i]
    fft(fa, invert=True)

    coefficients: list[int] = []
    max_error = 0.0
    for value in fa:
        rounded = round(value.real)
        max_error = max(max_error, abs(value.real - rounded))
        coefficients.append(rounded)
    return coefficients, max_error


def multiply_magnitudes(
    a: list[int],
    b: list[int],
    config: MultiplierConfig | None = None,
) -> list[int]:
    """
    Произведение модулей.

    Args:
        a: Модуль первого множителя
        b: Модуль второго множителя
        config: Конфигурация (default: get_default_config())

    Returns:
        Новый канонический модуль произведения
    """
    cfg = config or _DEFAULT_CONFIG
    if is_zero(a) or is_zero(b):
        return [0]

    n = next_power_of_two(len(a) + len(b))
    if n > cfg.max_transform_length:
        logger.debug(
            "transform length %d exceeds %d, falling back to schoolbook (%d x %d limbs)",
            n,
            cfg.max_transform_length,
            len(a),
            len(b),
        )
        return schoolbook_multiply(a, b)

    coefficients, max_error = _convolve(a, b, n)
    if max_error > cfg.rounding_tolerance:
        logger.warning(
            "convolution rounding error %.3f exceeds tolerance %.3f "
            "(%d x %d limbs), recomputing with schoolbook",
            max_error,
            cfg.rounding_tolerance,
            len(a),
            len(b),
        )
        return schoolbook_multiply(a, b)

    return trim(propagate_carry(coefficients))
