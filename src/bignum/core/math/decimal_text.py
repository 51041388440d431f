"""
Decimal Text — разбор и форматирование десятичной записи

Грамматика: -?[0-9]+ (только ASCII-цифры, старшая цифра первой).

- Разбор текста в пару (non_negative, digits) с каноникализацией
- Форматирование пары обратно в текст
- Ограничение длины входа через DecimalTextConfig

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Некорректный текст никогда не разбирается молча (InvalidFormat)
2. Отрицательного нуля не существует: "-0" → 0
3. format_decimal(*parse_decimal(text)) == text для канонического text
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional, Sequence

from bignum.core.math.magnitude import is_zero_magnitude, strip_leading_zeros

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MINUS_SIGN: Final[str] = "-"

ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# Границы native signed 64-bit integer
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1

# Максимальная длина фрагмента текста в сообщении об ошибке
_PREVIEW_MAX_CHARS: Final[int] = 40


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Текст не соответствует грамматике -?[0-9]+ или превышает лимит цифр.
    """

    pass


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class DecimalTextConfig:
    """Конфигурация разбора десятичного текста.

    max_digits ограничивает число цифр во входе (без учёта знака).
    None означает отсутствие ограничения.
    """

    max_digits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits <= 0:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_DECIMAL_TEXT_CONFIG: Final[DecimalTextConfig] = DecimalTextConfig()


# =============================================================================
# РАЗБОР
# =============================================================================


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_MAX_CHARS:
        return repr(text)
    return repr(text[: _PREVIEW_MAX_CHARS - 3] + "...")


def _reject(message: str) -> InvalidFormat:
    logger.debug("Rejected decimal text: %s", message)
    return InvalidFormat(message)


def parse_decimal(
    text: str,
    config: DecimalTextConfig = DEFAULT_DECIMAL_TEXT_CONFIG,
) -> tuple[bool, list[int]]:
    """
    Разбор десятичной записи в знак и цифры.

    Символы читаются от младшей цифры к старшей, ведущий "-" задаёт знак,
    затем результат каноникализуется.

    Args:
        text: Десятичная запись (например, "-9223372036854775808")
        config: Ограничения разбора

    Returns:
        (non_negative, digits): цифры от младшей к старшей

    Raises:
        InvalidFormat: Если text не str, пуст, содержит не-ASCII-цифры
            или превышает config.max_digits

    Examples:
        >>> parse_decimal("-120")
        (False, [0, 2, 1])
        >>> parse_decimal("-000")
        (True, [0])
    """
    if not isinstance(text, str):
        raise _reject(f"expected str, got {type(text).__name__}")

    non_negative = True
    body = text
    if body.startswith(MINUS_SIGN):
        non_negative = False
        body = body[len(MINUS_SIGN) :]

    if not body:
        raise _reject(f"no digits in {_preview(text)}")

    if config.max_digits is not None and len(body) > config.max_digits:
        raise _reject(
            f"{len(body)} digits exceed the limit of {config.max_digits}"
        )

    digits: list[int] = []
    for ch in reversed(body):
        if ch not in ASCII_DIGITS:
            raise _reject(f"invalid character {ch!r} in {_preview(text)}")
        digits.append(ord(ch) - ord("0"))

    strip_leading_zeros(digits)
    if is_zero_magnitude(digits):
        non_negative = True

    return non_negative, digits


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_decimal(non_negative: bool, digits: Sequence[int]) -> str:
    """
    Форматирование знака и цифр в десятичную запись.

    Examples:
        >>> format_decimal(False, [0, 2, 1])
        '-120'
    """
    body = "".join(chr(ord("0") + d) for d in reversed(digits))
    if non_negative:
        return body
    return MINUS_SIGN + body
