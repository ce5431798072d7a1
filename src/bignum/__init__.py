"""
bignum — целые произвольной точности и точные рациональные дроби.

Пакет не зависит от внешних систем: только арифметика, сравнение,
десятичный текст и JSON-контракты значений.
"""

from src.bignum.domain import (
    BigInteger,
    BigIntegerPayload,
    Ordering,
    Rational,
    RationalPayload,
    bi,
    gcd,
)
from src.bignum.math import DivisionByZero, InvalidFormat, MultiplierConfig

__all__ = [
    "BigInteger",
    "BigIntegerPayload",
    "DivisionByZero",
    "InvalidFormat",
    "MultiplierConfig",
    "Ordering",
    "Rational",
    "RationalPayload",
    "bi",
    "gcd",
]
