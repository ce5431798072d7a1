"""
Тесты для модуля Limb Array

Проверяет:
1. Нормализацию и перенос
2. Конверсию native int
3. Сравнение модулей
4. Сложение/вычитание модулей с carry/borrow
5. Умножение на скаляр и десятичный сдвиг
"""

import pytest

from src.bignum.math.limbs import (
    DIGIT_SIZE,
    RADIX,
    add_magnitudes,
    compare_magnitudes,
    from_native,
    is_zero,
    multiply_by_power_of_ten,
    propagate_carry,
    scalar_multiply,
    shift_limbs,
    subtract_magnitudes,
    to_native,
    trim,
)


def _magnitude(value: int) -> list[int]:
    return from_native(value)[1]


def _native(limbs: list[int]) -> int:
    return to_native(False, limbs)


# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================


class TestConstants:
    """Тесты параметров представления"""

    def test_radix_matches_digit_size(self) -> None:
        """RADIX == 10**DIGIT_SIZE"""
        assert RADIX == 10**DIGIT_SIZE

    def test_radix_product_fits_accumulator(self) -> None:
        """Произведение двух limb с переносом далеко от 2**63"""
        assert (RADIX - 1) ** 2 + RADIX < 2**63


# =============================================================================
# НОРМАЛИЗАЦИЯ И ПЕРЕНОС
# =============================================================================


class TestTrim:
    """Тесты для trim"""

    def test_strips_leading_zero_limbs(self) -> None:
        """Старшие нулевые limb удаляются"""
        assert trim([1, 0, 0]) == [1]

    def test_zero_stays_single_limb(self) -> None:
        """Ноль остаётся [0]"""
        assert trim([0, 0, 0]) == [0]

    def test_empty_becomes_zero(self) -> None:
        """Пустой список → [0]"""
        assert trim([]) == [0]

    def test_inner_zeros_kept(self) -> None:
        """Внутренние нули не трогаются"""
        assert trim([0, 0, 7]) == [0, 0, 7]

    def test_in_place(self) -> None:
        """trim возвращает тот же список"""
        limbs = [5, 0]
        assert trim(limbs) is limbs


class TestIsZero:
    """Тесты для is_zero"""

    def test_zero(self) -> None:
        assert is_zero([0])

    def test_non_zero(self) -> None:
        assert not is_zero([1])
        assert not is_zero([0, 1])


class TestPropagateCarry:
    """Тесты для propagate_carry"""

    def test_carry_ripples_and_grows(self) -> None:
        """Перенос проходит через 999 и добавляет новый limb"""
        assert propagate_carry([1500, 999]) == [500, 0, 1]

    def test_large_position_grows_several_limbs(self) -> None:
        """Позиция много больше RADIX раскладывается на несколько limb"""
        assert propagate_carry([1_234_567_890]) == [890, 567, 234, 1]

    def test_already_normal(self) -> None:
        """Нормальные limb не меняются"""
        assert propagate_carry([1, 2, 3]) == [1, 2, 3]


# =============================================================================
# КОНВЕРСИЯ NATIVE INT
# =============================================================================


class TestNativeConversion:
    """Тесты для from_native / to_native"""

    def test_positive(self) -> None:
        assert from_native(1234567) == (False, [567, 234, 1])

    def test_negative(self) -> None:
        assert from_native(-1000) == (True, [0, 1])

    def test_zero_is_non_negative(self) -> None:
        assert from_native(0) == (False, [0])

    @pytest.mark.parametrize(
        "value",
        [0, 1, -1, 999, 1000, -1001, 2**63 - 1, -(2**63), 10**40 + 7],
    )
    def test_round_trip(self, value: int) -> None:
        """to_native(from_native(x)) == x"""
        assert to_native(*from_native(value)) == value


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


class TestCompareMagnitudes:
    """Тесты для compare_magnitudes"""

    def test_more_limbs_is_larger(self) -> None:
        assert compare_magnitudes([0, 1], [999]) == 1
        assert compare_magnitudes([999], [0, 1]) == -1

    def test_equal(self) -> None:
        assert compare_magnitudes([1, 2, 3], [1, 2, 3]) == 0

    def test_most_significant_difference_decides(self) -> None:
        """Решает первый различающийся limb от старшего"""
        assert compare_magnitudes([999, 1, 5], [0, 2, 5]) == -1
        assert compare_magnitudes([0, 2, 5], [999, 1, 5]) == 1


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


class TestAddMagnitudes:
    """Тесты для add_magnitudes"""

    def test_carry_out_grows_by_one(self) -> None:
        """Перенос из старшего разряда добавляет ровно один limb"""
        assert add_magnitudes([999, 999], [1]) == [0, 0, 1]

    def test_commutative(self) -> None:
        a, b = _magnitude(123456789), _magnitude(987)
        assert add_magnitudes(a, b) == add_magnitudes(b, a)

    def test_does_not_alias_arguments(self) -> None:
        a = [1]
        result = add_magnitudes(a, [0])
        result[0] = 42
        assert a == [1]

    @pytest.mark.parametrize(
        "x,y",
        [(0, 0), (1, 999), (999_999, 1), (10**30, 10**30 - 1), (123, 10**20)],
    )
    def test_matches_int(self, x: int, y: int) -> None:
        assert _native(add_magnitudes(_magnitude(x), _magnitude(y))) == x + y


class TestSubtractMagnitudes:
    """Тесты для subtract_magnitudes"""

    def test_borrow_ripples(self) -> None:
        """Заём проходит через нулевые limb"""
        assert subtract_magnitudes([0, 0, 1], [1]) == [999, 999]

    def test_equal_gives_zero(self) -> None:
        assert subtract_magnitudes([5, 7], [5, 7]) == [0]

    def test_smaller_minuend_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            subtract_magnitudes([1], [2])
        with pytest.raises(ValueError, match="exceeds"):
            subtract_magnitudes([999], [0, 1])

    @pytest.mark.parametrize(
        "x,y",
        [(1, 1), (1000, 1), (10**30, 10**30 - 1), (10**20 + 5, 6), (987654321, 123456789)],
    )
    def test_matches_int(self, x: int, y: int) -> None:
        assert _native(subtract_magnitudes(_magnitude(x), _magnitude(y))) == x - y


# =============================================================================
# УМНОЖЕНИЕ НА СКАЛЯР И СДВИГИ
# =============================================================================


class TestScalarMultiply:
    """Тесты для scalar_multiply"""

    def test_carry(self) -> None:
        assert scalar_multiply([999], 1000) == [0, 999]

    def test_zero_factor(self) -> None:
        assert scalar_multiply([1, 2, 3], 0) == [0]

    def test_zero_operand(self) -> None:
        assert scalar_multiply([0], 999) == [0]

    def test_negative_factor_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            scalar_multiply([1], -1)

    @pytest.mark.parametrize("factor", [1, 2, 999, 1000, 123456])
    def test_matches_int(self, factor: int) -> None:
        value = 98765432109876543210
        assert _native(scalar_multiply(_magnitude(value), factor)) == value * factor


class TestShiftLimbs:
    """Тесты для shift_limbs"""

    def test_shift(self) -> None:
        assert shift_limbs([5], 2) == [0, 0, 5]

    def test_zero_not_shifted(self) -> None:
        """Ноль остаётся каноническим"""
        assert shift_limbs([0], 3) == [0]

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError):
            shift_limbs([1], -1)


class TestMultiplyByPowerOfTen:
    """Тесты для multiply_by_power_of_ten"""

    @pytest.mark.parametrize("exponent", range(0, 8))
    def test_matches_int(self, exponent: int) -> None:
        assert _native(multiply_by_power_of_ten(_magnitude(123), exponent)) == 123 * 10**exponent

    def test_zero_stays_zero(self) -> None:
        assert multiply_by_power_of_ten([0], 10) == [0]

    def test_negative_exponent_raises(self) -> None:
        with pytest.raises(ValueError, match="exponent"):
            multiply_by_power_of_ten([1], -1)
