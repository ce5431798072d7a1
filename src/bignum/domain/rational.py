"""
Rational — точная рациональная дробь

Пара (numerator, denominator) из BigInteger, сокращается после каждой
изменяющей операции:
- Сложение/вычитание — перекрёстным умножением
- Умножение — почленно
- Деление — перекрёстным делением (умножение на перевёрнутую дробь)
- Сравнение — numerator_a * denominator_b <=> numerator_b * denominator_a

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Ноль хранится как 0/1
4. Нулевой знаменатель или деление на нулевую дробь → DivisionByZero
"""

from typing import Any, Final

from src.bignum.domain.big_integer import BigInteger, gcd
from src.bignum.domain.ordering import Ordering
from src.bignum.math.division import DivisionByZero

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Количество знаков после запятой при конверсии в float
FLOAT_CONVERSION_PRECISION: Final[int] = 20


class Rational:
    """
    Несократимая дробь с положительным знаменателем.

    Examples:
        >>> Rational(6, -4)
        Rational(-3, 2)
        >>> str(Rational(1, 3) + Rational(1, 6))
        '1/2'
        >>> Rational(7, 5).as_decimal(3)
        '1.400'
    """

    __slots__ = ("_numerator", "_denominator")

    # Изменяемый тип
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        numerator: "int | BigInteger | Rational" = 0,
        denominator: "int | BigInteger" = 1,
    ):
        if isinstance(numerator, Rational):
            self._numerator = numerator._numerator.copy()
            self._denominator = numerator._denominator.copy()
            self /= Rational(denominator)
            return

        self._numerator = _to_big_integer(numerator, "numerator")
        self._denominator = _to_big_integer(denominator, "denominator")
        if not self._denominator:
            raise DivisionByZero("rational denominator is zero")
        self._reduce()

    def _reduce(self) -> None:
        """Знаменатель положительный, дробь несократима."""
        if self._denominator.is_negative:
            self._numerator.negate()
            self._denominator.negate()

        divisor = gcd(self._numerator, self._denominator)
        if divisor != 1:
            self._numerator //= divisor
            self._denominator //= divisor

    def _assign(self, numerator: BigInteger, denominator: BigInteger) -> "Rational":
        self._numerator = numerator
        self._denominator = denominator
        self._reduce()
        return self

    def copy(self) -> "Rational":
        return Rational(self)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def numerator(self) -> BigInteger:
        """Копия числителя."""
        return self._numerator.copy()

    @property
    def denominator(self) -> BigInteger:
        """Копия знаменателя (всегда > 0)."""
        return self._denominator.copy()

    def __bool__(self) -> bool:
        return bool(self._numerator)

    def __float__(self) -> float:
        return float(self.as_decimal(FLOAT_CONVERSION_PRECISION))

    # =========================================================================
    # ТЕКСТ
    # =========================================================================

    def to_string(self) -> str:
        """'n' при знаменателе 1, иначе 'n/d'."""
        if self._denominator == 1:
            return self._numerator.to_string()
        return f"{self._numerator}/{self._denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def as_decimal(self, precision: int = 0) -> str:
        """
        Десятичная запись с усечением до precision знаков.

        Целая часть — усекающее частное. Дробная — модуль остатка,
        умноженный на 10**precision и делённый на знаменатель, дополненный
        нулями слева до precision цифр. Для отрицательной дроби с нулевой
        целой частью выводится "-0".

        Args:
            precision: Количество знаков после точки

        Returns:
            "<целая часть>" при precision == 0, иначе "<целая>.<дробная>"

        Raises:
            ValueError: Если precision < 0

        Examples:
            >>> Rational(-3, 5).as_decimal(2)
            '-0.60'
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")

        quotient, remainder = self._numerator.div_mod(self._denominator)
        integer = quotient.to_string()
        if precision == 0:
            return integer

        remainder.apply_abs()
        remainder.multiply_by_power_of_ten(precision)
        remainder //= self._denominator
        fraction = remainder.to_string()

        if integer == "0" and self._numerator.is_negative and remainder:
            integer = "-0"
        return f"{integer}.{fraction.zfill(precision)}"

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "Rational | BigInteger | int") -> Ordering:
        """
        Трёхстороннее сравнение перекрёстным умножением.

        Raises:
            TypeError: Если other не Rational, BigInteger или int
        """
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare Rational with {type(other).__name__}")
        left = self._numerator * rhs._denominator
        right = rhs._numerator * self._denominator
        return left.compare(right)

    def __eq__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._numerator == rhs._numerator and self._denominator == rhs._denominator

    def __lt__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    # =========================================================================
    # ЗНАК
    # =========================================================================

    def __neg__(self) -> "Rational":
        result = self.copy()
        result._numerator.negate()
        return result

    def __pos__(self) -> "Rational":
        return self.copy()

    def __abs__(self) -> "Rational":
        result = self.copy()
        result._numerator.apply_abs()
        return result

    # =========================================================================
    # АРИФМЕТИКА (in place)
    # =========================================================================

    def __iadd__(self, other: "Rational | BigInteger | int") -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        numerator = self._numerator * rhs._denominator + rhs._numerator * self._denominator
        return self._assign(numerator, self._denominator * rhs._denominator)

    def __isub__(self, other: "Rational | BigInteger | int") -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        numerator = self._numerator * rhs._denominator - rhs._numerator * self._denominator
        return self._assign(numerator, self._denominator * rhs._denominator)

    def __imul__(self, other: "Rational | BigInteger | int") -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(
            self._numerator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __itruediv__(self, other: "Rational | BigInteger | int") -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not rhs._numerator:
            raise DivisionByZero("division by zero rational")
        return self._assign(
            self._numerator * rhs._denominator,
            self._denominator * rhs._numerator,
        )

    # =========================================================================
    # АРИФМЕТИКА (копия)
    # =========================================================================

    def __add__(self, other: "Rational | BigInteger | int") -> "Rational":
        return self.copy().__iadd__(other)

    def __radd__(self, other: "BigInteger | int") -> "Rational":
        return self.copy().__iadd__(other)

    def __sub__(self, other: "Rational | BigInteger | int") -> "Rational":
        return self.copy().__isub__(other)

    def __rsub__(self, other: "BigInteger | int") -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__isub__(self)

    def __mul__(self, other: "Rational | BigInteger | int") -> "Rational":
        return self.copy().__imul__(other)

    def __rmul__(self, other: "BigInteger | int") -> "Rational":
        return self.copy().__imul__(other)

    def __truediv__(self, other: "Rational | BigInteger | int") -> "Rational":
        return self.copy().__itruediv__(other)

    def __rtruediv__(self, other: "BigInteger | int") -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__itruediv__(self)


# =============================================================================
# HELPERS
# =============================================================================


def _to_big_integer(value: Any, name: str) -> BigInteger:
    if isinstance(value, BigInteger):
        return value.copy()
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    raise TypeError(f"{name} must be int or BigInteger, got {type(value).__name__}")


def _coerce(value: Any) -> Rational | None:
    """Rational как есть, BigInteger/int → Rational, остальное → None."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, BigInteger) or (isinstance(value, int) and not isinstance(value, bool)):
        return Rational(value)
    return None
