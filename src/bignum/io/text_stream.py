"""
Потоковый ввод/вывод BigInteger.

Аналог операторов << и >> для текстовых потоков: вывод пишет десятичную
запись без перевода строки, ввод читает одну лексему, разделённую
пробельными символами.
"""

from typing import Iterator, Optional, TextIO

from bignum.core.domain.big_integer import BigInteger
from bignum.core.math.decimal_text import (
    DEFAULT_DECIMAL_TEXT_CONFIG,
    DecimalTextConfig,
)


def write_big_integer(stream: TextIO, value: BigInteger) -> TextIO:
    """
    Запись десятичной записи value в поток.

    Returns:
        Тот же поток (для цепочек вызовов)
    """
    stream.write(value.to_decimal_string())
    return stream


def _read_token(stream: TextIO) -> Optional[str]:
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    if not ch:
        return None

    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    return "".join(chars)


def read_big_integer(
    stream: TextIO,
    config: DecimalTextConfig = DEFAULT_DECIMAL_TEXT_CONFIG,
) -> Optional[BigInteger]:
    """
    Чтение одной лексемы из потока и её разбор.

    Ведущие пробельные символы пропускаются; лексема заканчивается на
    пробельном символе (он поглощается) или в конце потока.

    Args:
        stream: Текстовый поток
        config: Ограничения разбора

    Returns:
        BigInteger или None, если поток исчерпан до начала лексемы

    Raises:
        InvalidFormat: Если лексема не является десятичной записью
    """
    token = _read_token(stream)
    if token is None:
        return None
    return BigInteger.from_decimal_string(token, config)


def iter_big_integers(
    stream: TextIO,
    config: DecimalTextConfig = DEFAULT_DECIMAL_TEXT_CONFIG,
) -> Iterator[BigInteger]:
    """Все значения потока по порядку до его конца."""
    while True:
        value = read_big_integer(stream, config)
        if value is None:
            return
        yield value
