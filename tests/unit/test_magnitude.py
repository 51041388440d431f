"""
Тесты для модуля Magnitude

Проверяет:
1. Каноникализацию (удаление ведущих нулей)
2. Сравнение модулей
3. Сложение с переносом и вычитание с заёмом
4. Умножение в столбик
5. Деление в столбик и защиту от деления на ноль
"""

import pytest

from bignum.core.math.magnitude import (
    BASE,
    DivisionByZero,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    is_zero_magnitude,
    magnitude_from_int,
    mul_magnitudes,
    strip_leading_zeros,
    sub_magnitudes,
)


def to_digits(value: int) -> list[int]:
    """Цифры неотрицательного int от младшей к старшей."""
    return [int(ch) for ch in reversed(str(value))]


def from_digits(digits: list[int]) -> int:
    return int("".join(str(d) for d in reversed(digits)))


# =============================================================================
# КАНОНИКАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


class TestStripLeadingZeros:
    """Тесты для strip_leading_zeros"""

    def test_removes_most_significant_zeros(self) -> None:
        """Старшие нули удаляются, младшие остаются"""
        assert strip_leading_zeros([0, 3, 0, 0]) == [0, 3]

    def test_zero_keeps_single_digit(self) -> None:
        """Ноль сохраняется как [0]"""
        assert strip_leading_zeros([0, 0, 0]) == [0]

    def test_empty_becomes_zero(self) -> None:
        """Пустая последовательность превращается в [0]"""
        assert strip_leading_zeros([]) == [0]

    def test_mutates_in_place(self) -> None:
        """Список изменяется на месте"""
        digits = [1, 0]
        result = strip_leading_zeros(digits)
        assert result is digits
        assert digits == [1]

    def test_base_is_decimal(self) -> None:
        assert BASE == 10


class TestCompareMagnitudes:
    """Тесты для compare_magnitudes"""

    def test_longer_is_greater(self) -> None:
        """Более длинный канонический модуль больше"""
        assert compare_magnitudes([0, 0, 1], [9, 9]) == 1
        assert compare_magnitudes([9, 9], [0, 0, 1]) == -1

    def test_equal_length_most_significant_first(self) -> None:
        """При равной длине решает старшая отличающаяся цифра"""
        assert compare_magnitudes([9, 1], [0, 2]) == -1
        assert compare_magnitudes([0, 2], [9, 1]) == 1

    def test_equal(self) -> None:
        assert compare_magnitudes([3, 2, 1], [3, 2, 1]) == 0
        assert compare_magnitudes([0], [0]) == 0

    def test_is_zero_magnitude(self) -> None:
        assert is_zero_magnitude([0])
        assert not is_zero_magnitude([1])
        assert not is_zero_magnitude([0, 1])


class TestMagnitudeFromInt:
    """Тесты для magnitude_from_int"""

    def test_digits_least_significant_first(self) -> None:
        assert magnitude_from_int(1203) == [3, 0, 2, 1]

    def test_zero(self) -> None:
        """Ноль раскладывается в [0]"""
        assert magnitude_from_int(0) == [0]

    def test_beyond_str_limit(self) -> None:
        """Разложение не ограничено лимитом строковой конверсии CPython"""
        digits = magnitude_from_int(10**5000 - 1)
        assert len(digits) == 5000
        assert set(digits) == {9}

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="expects value >= 0"):
            magnitude_from_int(-1)

    @pytest.mark.parametrize("value", [1, 9, 10, 123456789, 2**64, 3**70])
    def test_matches_str(self, value: int) -> None:
        assert magnitude_from_int(value) == to_digits(value)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


class TestAddMagnitudes:
    """Тесты для add_magnitudes"""

    def test_carry_extends_length(self) -> None:
        """Перенос удлиняет результат на одну цифру"""
        assert add_magnitudes([9, 9, 9], [1]) == [0, 0, 0, 1]

    def test_operand_order_irrelevant(self) -> None:
        assert add_magnitudes([1], [9, 9]) == add_magnitudes([9, 9], [1])

    def test_zero_identity(self) -> None:
        assert add_magnitudes([5, 4], [0]) == [5, 4]
        assert add_magnitudes([0], [0]) == [0]

    @pytest.mark.parametrize(
        "a, b",
        [(0, 0), (1, 99), (123456789, 987654321), (10**30, 10**30 - 1)],
    )
    def test_matches_int(self, a: int, b: int) -> None:
        """Результат совпадает со встроенным int"""
        assert from_digits(add_magnitudes(to_digits(a), to_digits(b))) == a + b


class TestSubMagnitudes:
    """Тесты для sub_magnitudes"""

    def test_borrow_chain(self) -> None:
        """Заём распространяется через нули"""
        assert sub_magnitudes([0, 0, 0, 1], [1]) == [9, 9, 9]

    def test_equal_operands_give_canonical_zero(self) -> None:
        """a - a = [0] без ведущих нулей"""
        assert sub_magnitudes([5, 4, 3], [5, 4, 3]) == [0]

    def test_leading_zeros_stripped(self) -> None:
        assert sub_magnitudes([0, 0, 1], [9, 9]) == [1]

    def test_smaller_minuend_raises(self) -> None:
        """Уменьшаемое меньше вычитаемого: ошибка"""
        with pytest.raises(ValueError, match="minuend >= subtrahend"):
            sub_magnitudes([1], [2])

    @pytest.mark.parametrize(
        "a, b",
        [(1, 0), (100, 1), (987654321, 123456789), (10**25, 1)],
    )
    def test_matches_int(self, a: int, b: int) -> None:
        assert from_digits(sub_magnitudes(to_digits(a), to_digits(b))) == a - b


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestMulMagnitudes:
    """Тесты для mul_magnitudes"""

    def test_zero_operand(self) -> None:
        """Нулевой операнд даёт канонический ноль"""
        assert mul_magnitudes([0], [9, 9, 9]) == [0]
        assert mul_magnitudes([9, 9, 9], [0]) == [0]

    def test_accumulator_cells_exceed_one_digit(self) -> None:
        """Ячейки аккумулятора могут превышать одну цифру до переноса"""
        # 999 * 999: в ячейке 2 накапливается 3 * 81 = 243
        assert from_digits(mul_magnitudes([9, 9, 9], [9, 9, 9])) == 998001

    def test_no_leading_zero(self) -> None:
        """Результат каноничен (длина может быть меньше len(a) + len(b))"""
        assert mul_magnitudes([2], [3]) == [6]

    @pytest.mark.parametrize(
        "a, b",
        [(1, 1), (12, 12), (123456789, 987654321), (2**64, 3**40)],
    )
    def test_matches_int(self, a: int, b: int) -> None:
        assert from_digits(mul_magnitudes(to_digits(a), to_digits(b))) == a * b


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


class TestDivmodMagnitudes:
    """Тесты для divmod_magnitudes"""

    def test_thousand_by_seven(self) -> None:
        """1000 / 7 = 142, остаток 6"""
        quotient, remainder = divmod_magnitudes([0, 0, 0, 1], [7])
        assert quotient == [2, 4, 1]
        assert remainder == [6]

    def test_dividend_smaller_than_divisor(self) -> None:
        """|dividend| < |divisor| → частное 0, остаток = делимое"""
        quotient, remainder = divmod_magnitudes([5], [0, 1])
        assert quotient == [0]
        assert remainder == [5]

    def test_equal_operands(self) -> None:
        assert divmod_magnitudes([3, 2, 1], [3, 2, 1]) == ([1], [0])

    def test_zero_dividend(self) -> None:
        assert divmod_magnitudes([0], [7]) == ([0], [0])

    def test_quotient_with_inner_zeros(self) -> None:
        """Нули внутри частного сохраняются"""
        quotient, remainder = divmod_magnitudes(to_digits(10001), [1])
        assert from_digits(quotient) == 10001
        assert remainder == [0]

    def test_remainder_only(self) -> None:
        """with_quotient=False не записывает цифры частного"""
        quotient, remainder = divmod_magnitudes([0, 0, 0, 1], [7], with_quotient=False)
        assert quotient == [0]
        assert remainder == [6]

    def test_division_by_zero_raises(self) -> None:
        """Деление на ноль вызывает DivisionByZero"""
        with pytest.raises(DivisionByZero, match="division by zero"):
            divmod_magnitudes([1], [0])

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divmod_magnitudes([1], [0], with_quotient=False)

    @pytest.mark.parametrize(
        "a, b",
        [
            (1, 1),
            (99, 9),
            (100, 10),
            (123456789, 12345),
            (10**40 + 7, 10**20 - 3),
            (2**100, 3**30),
            (999999999999, 999999999999),
        ],
    )
    def test_matches_int(self, a: int, b: int) -> None:
        """Частное и остаток совпадают со встроенным divmod"""
        quotient, remainder = divmod_magnitudes(to_digits(a), to_digits(b))
        assert (from_digits(quotient), from_digits(remainder)) == divmod(a, b)
