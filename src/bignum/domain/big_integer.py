"""
BigInteger — целое произвольной точности

Изменяемый value-тип: (модуль в limb, флаг знака).

Каждый алгоритм имеет одну каноническую мутирующую операцию
(__iadd__, __imul__, __ifloordiv__ ...). Операции, возвращающие значение,
сначала копируют получатель (copy()) и применяют мутирующую форму к копии.
Значения никогда не разделяют списки limb.

Деление усекающее (к нулю), как у целых фиксированной ширины:
- знак частного = XOR знаков операндов
- знак остатка = знак делимого (ноль всегда неотрицательный)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Модуль в канонической форме после каждой операции
2. Ноль никогда не отрицательный
3. Нулевой делитель → DivisionByZero
4. Ошибка разбора не изменяет получатель
"""

from typing import Any

from src.bignum.domain.ordering import Ordering
from src.bignum.math.convolution import multiply_magnitudes
from src.bignum.math.decimal_text import format_decimal, parse_decimal, split_tokens
from src.bignum.math.division import divmod_magnitudes
from src.bignum.math.limbs import (
    add_magnitudes,
    compare_magnitudes,
    from_native,
    is_zero,
    multiply_by_power_of_ten,
    scalar_multiply,
    subtract_magnitudes,
    to_native,
    trim,
)


class BigInteger:
    """
    Знаковое целое без ограничения величины.

    Конструктор принимает int, десятичную строку или другой BigInteger
    (глубокая копия). Без аргумента — ноль.

    Examples:
        >>> BigInteger("-00123") + 23
        BigInteger('-100')
        >>> divmod(BigInteger(-7), 2)
        (BigInteger('-3'), BigInteger('-1'))
    """

    __slots__ = ("_negative", "_limbs")

    # Изменяемый тип
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: "int | str | BigInteger" = 0):
        if isinstance(value, BigInteger):
            self._negative = value._negative
            self._limbs = list(value._limbs)
        elif isinstance(value, bool):
            raise TypeError("bool is not accepted as BigInteger value")
        elif isinstance(value, int):
            self._negative, self._limbs = from_native(value)
        elif isinstance(value, str):
            self._negative, self._limbs = parse_decimal(value)
        else:
            raise TypeError(f"cannot build BigInteger from {type(value).__name__}")

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _from_parts(cls, negative: bool, limbs: list[int]) -> "BigInteger":
        result = cls.__new__(cls)
        result._negative = negative
        result._limbs = limbs
        result._normalize()
        return result

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """Конструирование из native int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls._from_parts(*from_native(value))

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """
        Разбор десятичного токена.

        Raises:
            InvalidFormat: Если токен не соответствует -?[0-9]+
        """
        return cls._from_parts(*parse_decimal(text))

    @classmethod
    def parse_many(cls, text: str) -> list["BigInteger"]:
        """Разбор последовательности токенов, разделённых пробелами."""
        return [cls.parse(token) for token in split_tokens(text)]

    def copy(self) -> "BigInteger":
        """Независимая копия (без общего списка limb)."""
        return BigInteger._from_parts(self._negative, list(self._limbs))

    def assign(self, text: str) -> None:
        """
        Перечитывание значения из текста (in place).

        Разбор выполняется полностью до записи: при InvalidFormat
        получатель остаётся без изменений.
        """
        negative, limbs = parse_decimal(text)
        self._negative = negative
        self._limbs = limbs

    def _assign_from(self, other: "BigInteger") -> "BigInteger":
        self._negative = other._negative
        self._limbs = list(other._limbs)
        return self

    def _normalize(self) -> None:
        trim(self._limbs)
        if is_zero(self._limbs):
            self._negative = False

    # =========================================================================
    # СВОЙСТВА И КОНВЕРСИИ
    # =========================================================================

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def sign(self) -> int:
        """-1, 0 или +1."""
        if is_zero(self._limbs):
            return 0
        return -1 if self._negative else 1

    @property
    def limbs(self) -> list[int]:
        """Копия модуля, младший limb первым."""
        return list(self._limbs)

    def __bool__(self) -> bool:
        return not is_zero(self._limbs)

    def __int__(self) -> int:
        return to_native(self._negative, self._limbs)

    def to_string(self) -> str:
        return format_decimal(self._negative, self._limbs)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "BigInteger | int") -> Ordering:
        """
        Трёхстороннее сравнение.

        Отрицательные меньше неотрицательных; при одинаковом знаке решает
        сравнение модулей, для отрицательных направление обращается.

        Raises:
            TypeError: Если other не BigInteger и не int
        """
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare BigInteger with {type(other).__name__}")

        if self._negative != rhs._negative:
            return Ordering.LESS if self._negative else Ordering.GREATER

        ordering = Ordering.of(compare_magnitudes(self._limbs, rhs._limbs))
        return ordering.reversed() if self._negative else ordering

    def __eq__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._negative == rhs._negative and self._limbs == rhs._limbs

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

    def negate(self) -> None:
        """Смена знака (in place); ноль остаётся неотрицательным."""
        if not is_zero(self._limbs):
            self._negative = not self._negative

    def apply_abs(self) -> None:
        """Модуль (in place)."""
        self._negative = False

    def __neg__(self) -> "BigInteger":
        result = self.copy()
        result.negate()
        return result

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __abs__(self) -> "BigInteger":
        result = self.copy()
        result.apply_abs()
        return result

    # =========================================================================
    # СЛОЖЕНИЕ / ВЫЧИТАНИЕ
    # =========================================================================

    def _combine(self, limbs: list[int], negative: bool) -> "BigInteger":
        """
        Прибавление значения (negative, limbs) к получателю.

        Одинаковые знаки — сложение модулей. Разные знаки — вычитание меньшего
        модуля из большего, знак результата — знак большего операнда.
        """
        if self._negative == negative:
            self._limbs = add_magnitudes(self._limbs, limbs)
        elif compare_magnitudes(self._limbs, limbs) >= 0:
            self._limbs = subtract_magnitudes(self._limbs, limbs)
        else:
            self._limbs = subtract_magnitudes(limbs, self._limbs)
            self._negative = negative
        self._normalize()
        return self

    def __iadd__(self, other: "BigInteger | int") -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._combine(rhs._limbs, rhs._negative)

    def __isub__(self, other: "BigInteger | int") -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._combine(rhs._limbs, not rhs._negative)

    def increment(self) -> None:
        """Прибавление единицы (in place)."""
        self._combine([1], False)

    def decrement(self) -> None:
        """Вычитание единицы (in place)."""
        self._combine([1], True)

    def __add__(self, other: "BigInteger | int") -> "BigInteger":
        return self.copy().__iadd__(other)

    def __radd__(self, other: int) -> "BigInteger":
        return self.copy().__iadd__(other)

    def __sub__(self, other: "BigInteger | int") -> "BigInteger":
        return self.copy().__isub__(other)

    def __rsub__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__isub__(self)

    # =========================================================================
    # УМНОЖЕНИЕ
    # =========================================================================

    def __imul__(self, other: "BigInteger | int") -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        negative = self._negative != rhs._negative
        self._limbs = multiply_magnitudes(self._limbs, rhs._limbs)
        self._negative = negative
        self._normalize()
        return self

    def __mul__(self, other: "BigInteger | int") -> "BigInteger":
        return self.copy().__imul__(other)

    def __rmul__(self, other: int) -> "BigInteger":
        return self.copy().__imul__(other)

    def scalar_multiply(self, factor: int) -> None:
        """
        Умножение на native int без свёртки (in place).

        Args:
            factor: Множитель (любого знака)
        """
        self._limbs = scalar_multiply(self._limbs, abs(factor))
        self._negative = self._negative != (factor < 0)
        self._normalize()

    def multiply_by_power_of_ten(self, exponent: int) -> None:
        """
        Умножение на 10**exponent (in place).

        Raises:
            ValueError: Если exponent < 0
        """
        self._limbs = multiply_by_power_of_ten(self._limbs, exponent)
        self._normalize()

    # =========================================================================
    # ДЕЛЕНИЕ
    # =========================================================================

    def div_mod(self, other: "BigInteger | int") -> tuple["BigInteger", "BigInteger"]:
        """
        Усекающее деление с остатком.

        Returns:
            (quotient, remainder): self == quotient * other + remainder,
            |remainder| < |other|, знак остатка = знак self

        Raises:
            DivisionByZero: Если other == 0
            TypeError: Если other не BigInteger и не int

        Examples:
            >>> BigInteger(10).div_mod(3)
            (BigInteger('3'), BigInteger('1'))
        """
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot divide BigInteger by {type(other).__name__}")

        quotient, remainder = divmod_magnitudes(self._limbs, rhs._limbs)
        return (
            BigInteger._from_parts(self._negative != rhs._negative, quotient),
            BigInteger._from_parts(self._negative, remainder),
        )

    def __ifloordiv__(self, other: "BigInteger | int") -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self._assign_from(self.div_mod(other)[0])

    def __imod__(self, other: "BigInteger | int") -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self._assign_from(self.div_mod(other)[1])

    def __floordiv__(self, other: "BigInteger | int") -> "BigInteger":
        return self.copy().__ifloordiv__(other)

    def __rfloordiv__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__ifloordiv__(self)

    def __mod__(self, other: "BigInteger | int") -> "BigInteger":
        return self.copy().__imod__(other)

    def __rmod__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__imod__(self)

    def __divmod__(self, other: "BigInteger | int") -> tuple["BigInteger", "BigInteger"]:
        if _coerce(other) is None:
            return NotImplemented
        return self.div_mod(other)

    def __rdivmod__(self, other: int) -> tuple["BigInteger", "BigInteger"]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.div_mod(self)


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: Any) -> BigInteger | None:
    """BigInteger как есть, int → BigInteger, остальное → None."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return None


def bi(value: int) -> BigInteger:
    """
    Именованный конструктор литерала.

    Examples:
        >>> bi(42) * bi(-2)
        BigInteger('-84')
    """
    return BigInteger.from_int(value)


def gcd(a: "BigInteger | int", b: "BigInteger | int") -> BigInteger:
    """
    Наибольший общий делитель по алгоритму Евклида.

    Работает с модулями; gcd(0, 0) == 0.

    Examples:
        >>> gcd(-12, 18)
        BigInteger('6')
    """
    x = abs(BigInteger(a))
    y = abs(BigInteger(b))
    while y:
        x %= y
        x, y = y, x
    return x
