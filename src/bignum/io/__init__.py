"""Потоковый ввод/вывод BigInteger (аналог операторов << и >>)."""

from .text_stream import iter_big_integers, read_big_integer, write_big_integer

__all__ = [
    "read_big_integer",
    "write_big_integer",
    "iter_big_integers",
]
