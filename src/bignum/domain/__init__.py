"""
Domain модели bignum

Value-типы BigInteger и Rational, результат сравнения Ordering
и Pydantic модели для JSON-представления.
"""

from src.bignum.domain.ordering import Ordering
from src.bignum.domain.big_integer import BigInteger, bi, gcd
from src.bignum.domain.rational import FLOAT_CONVERSION_PRECISION, Rational
from src.bignum.domain.payloads import BigIntegerPayload, RationalPayload

__all__ = [
    # Ordering
    "Ordering",
    # BigInteger
    "BigInteger",
    "bi",
    "gcd",
    # Rational
    "FLOAT_CONVERSION_PRECISION",
    "Rational",
    # Payloads
    "BigIntegerPayload",
    "RationalPayload",
]
