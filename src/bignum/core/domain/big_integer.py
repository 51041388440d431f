"""
BigInteger — знаковое целое произвольной точности

Значение хранится как флаг неотрицательности и список десятичных цифр
от младшей к старшей. Каждый экземпляр единолично владеет своим списком.

Арифметика:
- Составные операторы (+=, -=, *=, /=, %=): единственная изменяющая
  реализация каждой операции
- Бинарные операторы копируют левый операнд и применяют составной
- Деление усекающее (как в C): знак остатка следует знаку делимого

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Цифры всегда каноничны: нет ведущих нулей, ноль = [0]
2. Ноль всегда неотрицателен
3. Неудачная операция на месте не изменяет значение
"""

from typing import Optional, Union

from bignum.core.domain.payload import BigIntegerPayload
from bignum.core.math.decimal_text import (
    DEFAULT_DECIMAL_TEXT_CONFIG,
    I64_MAX,
    I64_MIN,
    DecimalTextConfig,
    format_decimal,
    parse_decimal,
)
from bignum.core.math.magnitude import BASE, is_zero_magnitude, magnitude_from_int
from bignum.core.math.signed import (
    SignedMagnitude,
    negate,
    signed_add,
    signed_compare,
    signed_divmod,
    signed_mul,
    signed_sub,
)

Operand = Union["BigInteger", int]


class BigInteger:
    """
    Целое произвольной точности со знаком.

    Examples:
        >>> a = BigInteger.from_i64(9223372036854775807)
        >>> str(a + 1)
        '9223372036854775808'
        >>> str(BigInteger("1000") / BigInteger("7"))
        '142'
    """

    __slots__ = ("_non_negative", "_digits")

    # Экземпляры изменяемы (составные операторы), поэтому нехешируемы
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: "Union[BigInteger, int, str]" = 0):
        """
        Args:
            value: BigInteger (копирование), int любого размера или
                десятичная запись

        Raises:
            TypeError: Для bool и прочих типов
            InvalidFormat: Для некорректной десятичной записи
        """
        if isinstance(value, BigInteger):
            self._non_negative = value._non_negative
            self._digits = list(value._digits)
        elif isinstance(value, bool):
            raise TypeError("bool is not accepted as an integer value")
        elif isinstance(value, int):
            # Сначала модуль, затем знак: ноль всегда неотрицателен
            self._digits = magnitude_from_int(abs(value))
            self._non_negative = value >= 0
        elif isinstance(value, str):
            self._non_negative, self._digits = parse_decimal(value)
        else:
            raise TypeError(
                f"cannot build BigInteger from {type(value).__name__}"
            )

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_i64(cls, value: int) -> "BigInteger":
        """
        Построение из native signed 64-bit integer.

        Значение сначала превращается в каноническую десятичную запись,
        затем разбирается как строка: I64_MIN нигде не инвертируется.

        Raises:
            TypeError: Если value не int (или bool)
            ValueError: Если value вне [I64_MIN, I64_MAX]
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_i64 expects int, got {type(value).__name__}")
        if value < I64_MIN or value > I64_MAX:
            raise ValueError(
                f"value must be within [{I64_MIN}, {I64_MAX}], got {value}"
            )
        return cls.from_decimal_string(str(value))

    @classmethod
    def from_decimal_string(
        cls,
        text: str,
        config: DecimalTextConfig = DEFAULT_DECIMAL_TEXT_CONFIG,
    ) -> "BigInteger":
        """
        Построение из десятичной записи -?[0-9]+.

        Raises:
            InvalidFormat: Если text не соответствует грамматике
        """
        non_negative, digits = parse_decimal(text, config)
        return cls._from_parts(non_negative, digits)

    @classmethod
    def from_payload(cls, payload: BigIntegerPayload) -> "BigInteger":
        return cls.from_decimal_string(payload.to_decimal_string())

    @classmethod
    def _from_parts(cls, non_negative: bool, digits: list[int]) -> "BigInteger":
        instance = cls.__new__(cls)
        instance._non_negative = non_negative
        instance._digits = digits
        return instance

    @classmethod
    def _from_signed(cls, value: SignedMagnitude) -> "BigInteger":
        return cls._from_parts(value.non_negative, list(value.digits))

    def _as_signed(self) -> SignedMagnitude:
        return SignedMagnitude(self._non_negative, tuple(self._digits))

    def _assign(self, value: SignedMagnitude) -> None:
        self._non_negative = value.non_negative
        self._digits = list(value.digits)

    @staticmethod
    def _coerce(other: object) -> Optional["BigInteger"]:
        # None означает "тип не поддерживается" → NotImplemented
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInteger(other)
        return None

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def is_non_negative(self) -> bool:
        return self._non_negative

    @property
    def is_negative(self) -> bool:
        return not self._non_negative

    @property
    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры модуля от младшей к старшей (только чтение)."""
        return tuple(self._digits)

    @property
    def digit_count(self) -> int:
        return len(self._digits)

    # =========================================================================
    # КОПИРОВАНИЕ
    # =========================================================================

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    # =========================================================================
    # СОСТАВНЫЕ ОПЕРАТОРЫ (изменяют self)
    # =========================================================================

    def __iadd__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._assign(signed_add(self._as_signed(), rhs._as_signed()))
        return self

    def __isub__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._assign(signed_sub(self._as_signed(), rhs._as_signed()))
        return self

    def __imul__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._assign(signed_mul(self._as_signed(), rhs._as_signed()))
        return self

    def __itruediv__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        quotient, _ = signed_divmod(self._as_signed(), rhs._as_signed())
        self._assign(quotient)
        return self

    def __imod__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        _, remainder = signed_divmod(
            self._as_signed(), rhs._as_signed(), with_quotient=False
        )
        self._assign(remainder)
        return self

    # =========================================================================
    # БИНАРНЫЕ ОПЕРАТОРЫ (копия + составной оператор)
    # =========================================================================

    def __add__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result += rhs
        return result

    def __sub__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result -= rhs
        return result

    def __mul__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result *= rhs
        return result

    def __truediv__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result /= rhs
        return result

    def __mod__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result %= rhs
        return result

    def __divmod__(self, other: Operand) -> tuple["BigInteger", "BigInteger"]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        quotient, remainder = signed_divmod(self._as_signed(), rhs._as_signed())
        return self._from_signed(quotient), self._from_signed(remainder)

    # Отражённые формы для левого операнда native int
    def __radd__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __rsub__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __rmul__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __rtruediv__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __rmod__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs % self

    def __rdivmod__(self, other: int) -> tuple["BigInteger", "BigInteger"]:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return divmod(lhs, self)

    # =========================================================================
    # УНАРНЫЕ ОПЕРАТОРЫ
    # =========================================================================

    def __neg__(self) -> "BigInteger":
        return self._from_signed(negate(self._as_signed()))

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __abs__(self) -> "BigInteger":
        return self._from_parts(True, list(self._digits))

    def __bool__(self) -> bool:
        return not self.is_zero

    # =========================================================================
    # ИНКРЕМЕНТ / ДЕКРЕМЕНТ
    # =========================================================================

    def increment(self) -> "BigInteger":
        """Префиксный инкремент (++x): изменяет self и возвращает его."""
        self += 1
        return self

    def decrement(self) -> "BigInteger":
        """Префиксный декремент (--x)."""
        self -= 1
        return self

    def post_increment(self) -> "BigInteger":
        """Постфиксный инкремент (x++): возвращает копию прежнего значения."""
        previous = self.copy()
        self += 1
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный декремент (x--)."""
        previous = self.copy()
        self -= 1
        return previous

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: Operand) -> int:
        """
        Сравнение с учётом знака.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other

        Raises:
            TypeError: Если other не BigInteger и не int
        """
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare BigInteger with {type(other).__name__}")
        return signed_compare(self._as_signed(), rhs._as_signed())

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._non_negative == rhs._non_negative and self._digits == rhs._digits

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return signed_compare(self._as_signed(), rhs._as_signed()) < 0

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return signed_compare(self._as_signed(), rhs._as_signed()) <= 0

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return signed_compare(self._as_signed(), rhs._as_signed()) > 0

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return signed_compare(self._as_signed(), rhs._as_signed()) >= 0

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def to_decimal_string(self) -> str:
        return format_decimal(self._non_negative, self._digits)

    def to_payload(self) -> BigIntegerPayload:
        return BigIntegerPayload(
            negative=not self._non_negative,
            digits=format_decimal(True, self._digits),
        )

    def __int__(self) -> int:
        # Без int(str): у CPython есть лимит длины строки при конверсии
        value = 0
        for digit in reversed(self._digits):
            value = value * BASE + digit
        return value if self._non_negative else -value

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigInteger({self.to_decimal_string()!r})"
