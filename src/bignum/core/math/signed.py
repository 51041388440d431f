"""
Signed Dispatch — знаковая арифметика над парами (знак, модуль)

Каждая знаковая операция сводится к примитивам из magnitude:

    sign(a) sign(b) | a + b
    ----------------+------------------------
       +       +    | add(|a|, |b|)
       -       -    | -add(|a|, |b|)
       -       +    | b - |a|
       +       -    | a - |b|

Вычитание симметрично; для операндов одного знака сравнение модулей
определяет порядок, чтобы sub_magnitudes всегда получал больший модуль.

Все функции чистые: возвращают новый SignedMagnitude и не изменяют
аргументы.
"""

from typing import Iterable, NamedTuple

from bignum.core.math.magnitude import (
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    is_zero_magnitude,
    mul_magnitudes,
    sub_magnitudes,
)


class SignedMagnitude(NamedTuple):
    """Знак и канонический модуль (цифры от младшей к старшей)."""

    non_negative: bool
    digits: tuple[int, ...]


ZERO = SignedMagnitude(True, (0,))


def signed(non_negative: bool, digits: Iterable[int]) -> SignedMagnitude:
    """Сборка SignedMagnitude с запретом отрицательного нуля."""
    digits = tuple(digits)
    if is_zero_magnitude(digits):
        return ZERO
    return SignedMagnitude(non_negative, digits)


def negate(x: SignedMagnitude) -> SignedMagnitude:
    """Смена знака; ноль остаётся неотрицательным."""
    return signed(not x.non_negative, x.digits)


def absolute(x: SignedMagnitude) -> SignedMagnitude:
    """Модуль значения со знаком плюс."""
    return SignedMagnitude(True, x.digits)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def signed_add(a: SignedMagnitude, b: SignedMagnitude) -> SignedMagnitude:
    """Знаковое сложение a + b."""
    if a.non_negative and b.non_negative:
        return signed(True, add_magnitudes(a.digits, b.digits))

    if not a.non_negative and not b.non_negative:
        return signed(False, add_magnitudes(a.digits, b.digits))

    if not a.non_negative:
        # (-|a|) + b = b - |a|
        return signed_sub(b, absolute(a))

    # a + (-|b|) = a - |b|
    return signed_sub(a, absolute(b))


def signed_sub(a: SignedMagnitude, b: SignedMagnitude) -> SignedMagnitude:
    """Знаковое вычитание a - b."""
    if a.non_negative and not b.non_negative:
        # a - (-|b|) = a + |b|
        return signed(True, add_magnitudes(a.digits, b.digits))

    if not a.non_negative and b.non_negative:
        # (-|a|) - b = -(|a| + b)
        return signed(False, add_magnitudes(a.digits, b.digits))

    if not a.non_negative and not b.non_negative:
        # (-|a|) - (-|b|) = |b| - |a|
        return signed_sub(absolute(b), absolute(a))

    if compare_magnitudes(a.digits, b.digits) < 0:
        # |b| > |a|: a - b = -(b - a)
        return signed(False, sub_magnitudes(b.digits, a.digits))

    return signed(True, sub_magnitudes(a.digits, b.digits))


# =============================================================================
# УМНОЖЕНИЕ / ДЕЛЕНИЕ
# =============================================================================


def signed_mul(a: SignedMagnitude, b: SignedMagnitude) -> SignedMagnitude:
    """Знаковое умножение: результат неотрицателен, если знаки совпадают."""
    return signed(
        a.non_negative == b.non_negative,
        mul_magnitudes(a.digits, b.digits),
    )


def signed_divmod(
    a: SignedMagnitude,
    b: SignedMagnitude,
    with_quotient: bool = True,
) -> tuple[SignedMagnitude, SignedMagnitude]:
    """
    Знаковое деление с усечением к нулю (truncating division).

    Частное неотрицательно при совпадении знаков; знак остатка следует
    знаку делимого, поэтому остаток может быть отрицательным:

        divmod(-7, 2) → (-3, -1)
        divmod(7, -2) → (-3, 1)

    Raises:
        DivisionByZero: Если b равен нулю
    """
    quotient, remainder = divmod_magnitudes(a.digits, b.digits, with_quotient)
    return (
        signed(a.non_negative == b.non_negative, quotient),
        signed(a.non_negative, remainder),
    )


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def signed_compare(a: SignedMagnitude, b: SignedMagnitude) -> int:
    """
    Полный порядок: знак доминирует, затем модуль.

    Для отрицательных чисел больший модуль означает меньшее значение.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if a.non_negative != b.non_negative:
        return 1 if a.non_negative else -1

    magnitude_order = compare_magnitudes(a.digits, b.digits)
    if a.non_negative:
        return magnitude_order
    return -magnitude_order
