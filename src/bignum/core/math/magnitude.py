"""
Magnitude — примитивы над последовательностями десятичных цифр

Модуль работает только с модулями чисел (magnitude) без знака.
Цифры хранятся от младшей к старшей: digits[0] содержит единицы.

Примитивы:
- Каноникализация (удаление ведущих нулей)
- Сравнение модулей
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow), уменьшаемое >= вычитаемого
- Умножение в столбик (schoolbook) с одним проходом переноса
- Деление в столбик (long division) с поиском цифры частного от 9 вниз

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции каноничен: нет ведущих нулей, ноль = [0]
2. Все цифры результата лежат в [0, BASE - 1]
3. Деление на ноль никогда не выполняется (DivisionByZero)
"""

import logging
from typing import Final, Sequence

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание внутреннего представления (не видно пользователю)
BASE: Final[int] = 10


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление или взятие остатка по модулю, равному нулю.

    Наследуется от ZeroDivisionError, поэтому совместимо с обработчиками,
    написанными для встроенного int.
    """

    pass


# =============================================================================
# КАНОНИКАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def strip_leading_zeros(digits: list[int]) -> list[int]:
    """
    Удаление ведущих (старших) нулей in place.

    Пустая последовательность превращается в [0].

    Args:
        digits: Цифры от младшей к старшей (изменяется на месте)

    Returns:
        Тот же список в каноническом виде

    Examples:
        >>> strip_leading_zeros([3, 2, 0, 0])
        [3, 2]
        >>> strip_leading_zeros([0, 0])
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def magnitude_from_int(value: int) -> list[int]:
    """
    Цифры модуля native int от младшей к старшей.

    Разложение арифметическое (divmod по BASE), без str(int): длина
    значения не ограничена лимитом строковой конверсии CPython.

    Raises:
        ValueError: Если value отрицательно

    Examples:
        >>> magnitude_from_int(1203)
        [3, 0, 2, 1]
        >>> magnitude_from_int(0)
        [0]
    """
    if value < 0:
        raise ValueError(f"magnitude_from_int expects value >= 0, got {value}")
    digits: list[int] = []
    while value:
        value, digit = divmod(value, BASE)
        digits.append(digit)
    return strip_leading_zeros(digits)


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Проверка, что канонический модуль равен нулю."""
    return len(digits) == 1 and digits[0] == 0


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух канонических модулей.

    Более длинный модуль больше (ведущих нулей нет). При равной длине
    цифры сравниваются от старшей к младшей.

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def _column(digits: Sequence[int], i: int) -> int:
    # За пределами длины столбец считается нулевым
    if i < len(digits):
        return digits[i]
    return 0


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей в столбик с переносом.

    Результат может быть на одну цифру длиннее более длинного операнда.

    Examples:
        >>> add_magnitudes([9, 9], [1])
        [0, 0, 1]
    """
    result: list[int] = []
    carry = 0

    for i in range(max(len(a), len(b))):
        column_sum = _column(a, i) + _column(b, i) + carry
        result.append(column_sum % BASE)
        carry = column_sum // BASE

    if carry != 0:
        result.append(carry)

    return strip_leading_zeros(result)


def sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Вычитание модулей в столбик с заёмом: |a| - |b|.

    Args:
        a: Уменьшаемое (обязано быть >= b по модулю)
        b: Вычитаемое

    Returns:
        Канонический модуль разности

    Raises:
        ValueError: Если |a| < |b|
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("sub_magnitudes requires minuend >= subtrahend")

    result: list[int] = []
    borrow = 0

    for i in range(len(a)):
        column_diff = a[i] - _column(b, i) - borrow
        if column_diff < 0:
            column_diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(column_diff)

    return strip_leading_zeros(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение модулей в столбик (schoolbook).

    Частичные произведения a[i] * b[j] накапливаются в ячейке i + j без
    промежуточного переноса: ячейка может временно превышать одну цифру.
    Затем один проход переноса приводит аккумулятор к основанию BASE.

    Examples:
        >>> mul_magnitudes([2, 1], [2, 1])
        [4, 4, 1]
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return [0]

    accumulator = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            accumulator[i + j] += x * y

    result: list[int] = []
    carry = 0
    for cell in accumulator:
        value = cell + carry
        result.append(value % BASE)
        carry = value // BASE

    while carry != 0:
        result.append(carry % BASE)
        carry //= BASE

    return strip_leading_zeros(result)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _shift_in(partial: list[int], digit: int) -> list[int]:
    # partial * BASE + digit
    if is_zero_magnitude(partial):
        return [digit]
    return [digit] + partial


def divmod_magnitudes(
    dividend: Sequence[int],
    divisor: Sequence[int],
    with_quotient: bool = True,
) -> tuple[list[int], list[int]]:
    """
    Деление модулей в столбик (long division).

    Алгоритм:
    1. Старшие цифры делимого набираются в частичный остаток без записи
       цифр частного, пока остаток меньше делителя
    2. Для каждой следующей цифры: остаток = остаток * BASE + цифра,
       ищется наибольшее q в [0, 9] с q * divisor <= остаток (перебор от 9),
       из остатка вычитается q * divisor, q записывается в частное
    3. Цифры частного получаются от старшей к младшей и разворачиваются

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)
        with_quotient: False для расчёта только остатка (частное = [0])

    Returns:
        (quotient, remainder): канонические модули

    Raises:
        DivisionByZero: Если делитель равен нулю

    Examples:
        >>> divmod_magnitudes([0, 0, 0, 1], [7])
        ([2, 4, 1], [6])
    """
    if is_zero_magnitude(divisor):
        logger.debug("Rejected division of %d-digit magnitude by zero", len(dividend))
        raise DivisionByZero("division by zero")

    if compare_magnitudes(dividend, divisor) < 0:
        return [0], strip_leading_zeros(list(dividend))

    partial = [0]
    i = len(dividend) - 1

    # Старшее окно: соответствующие цифры частного равны нулю
    while compare_magnitudes(_shift_in(partial, dividend[i]), divisor) < 0:
        partial = _shift_in(partial, dividend[i])
        i -= 1

    quotient_msd_first: list[int] = []
    for i in range(i, -1, -1):
        partial = _shift_in(partial, dividend[i])

        q = BASE - 1
        product = mul_magnitudes([q], divisor)
        while compare_magnitudes(product, partial) > 0:
            q -= 1
            product = mul_magnitudes([q], divisor)

        partial = sub_magnitudes(partial, product)
        if with_quotient:
            quotient_msd_first.append(q)

    if not with_quotient:
        return [0], partial

    quotient_msd_first.reverse()
    return strip_leading_zeros(quotient_msd_first), partial
