"""
Payloads — JSON-представление значений

Immutable Pydantic модели для обмена значениями BigInteger и Rational.
Соответствуют схемам big_integer.json и rational.json.

Числа передаются строками (JSON number ограничен точностью float).
"""

from pydantic import BaseModel, Field, field_validator

from src.bignum.domain.big_integer import BigInteger
from src.bignum.domain.rational import Rational
from src.bignum.math.decimal_text import DECIMAL_TOKEN_PATTERN


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigIntegerPayload(BaseModel):
    """JSON-форма BigInteger: {"value": "<десятичное целое>"}"""

    value: str = Field(..., pattern=DECIMAL_TOKEN_PATTERN, description="Десятичная запись")

    model_config = {"frozen": True}

    @classmethod
    def from_value(cls, value: BigInteger) -> "BigIntegerPayload":
        return cls(value=value.to_string())

    def to_value(self) -> BigInteger:
        """Разбор в BigInteger (ведущие нули и '-0' нормализуются)."""
        return BigInteger.parse(self.value)


# =============================================================================
# RATIONAL
# =============================================================================


class RationalPayload(BaseModel):
    """
    JSON-форма Rational.

    Знаменатель строго положительный. Несократимость не требуется на входе:
    to_value() сокращает дробь.
    """

    numerator: str = Field(..., pattern=DECIMAL_TOKEN_PATTERN, description="Числитель")
    denominator: str = Field(
        "1", pattern=DECIMAL_TOKEN_PATTERN, description="Знаменатель (> 0)"
    )

    model_config = {"frozen": True}

    @field_validator("denominator")
    @classmethod
    def validate_denominator_positive(cls, v: str) -> str:
        """Проверка, что знаменатель > 0"""
        if BigInteger.parse(v).sign <= 0:
            raise ValueError(f"denominator must be positive, got {v}")
        return v

    @classmethod
    def from_value(cls, value: Rational) -> "RationalPayload":
        return cls(
            numerator=value.numerator.to_string(),
            denominator=value.denominator.to_string(),
        )

    def to_value(self) -> Rational:
        return Rational(BigInteger.parse(self.numerator), BigInteger.parse(self.denominator))
