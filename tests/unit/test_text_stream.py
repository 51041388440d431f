"""Тесты для потокового ввода/вывода BigInteger."""

import io

import pytest

from bignum import BigInteger, DecimalTextConfig, InvalidFormat
from bignum.io import iter_big_integers, read_big_integer, write_big_integer


class TestWriteBigInteger:
    """Тесты вывода (аналог <<)"""

    def test_writes_decimal_text(self) -> None:
        stream = io.StringIO()
        write_big_integer(stream, BigInteger("-9223372036854775808"))
        assert stream.getvalue() == "-9223372036854775808"

    def test_chaining(self) -> None:
        stream = io.StringIO()
        result = write_big_integer(stream, BigInteger("1"))
        assert result is stream
        result.write(" ")
        write_big_integer(result, BigInteger("-0"))
        assert stream.getvalue() == "1 0"


class TestReadBigInteger:
    """Тесты ввода (аналог >>)"""

    def test_reads_tokens_in_order(self) -> None:
        stream = io.StringIO("  12\n-34\t0  ")
        assert read_big_integer(stream) == 12
        assert read_big_integer(stream) == -34
        assert read_big_integer(stream) == 0
        assert read_big_integer(stream) is None

    def test_empty_stream(self) -> None:
        assert read_big_integer(io.StringIO("")) is None
        assert read_big_integer(io.StringIO(" \n ")) is None

    def test_malformed_token(self) -> None:
        """Некорректная лексема вызывает InvalidFormat"""
        stream = io.StringIO("12x 5")
        with pytest.raises(InvalidFormat):
            read_big_integer(stream)
        # Следующая лексема остаётся доступной
        assert read_big_integer(stream) == 5

    def test_config_applied(self) -> None:
        stream = io.StringIO("123456")
        with pytest.raises(InvalidFormat, match="exceed the limit"):
            read_big_integer(stream, DecimalTextConfig(max_digits=5))

    def test_write_then_read(self) -> None:
        """Запись и чтение взаимно обратны"""
        values = [BigInteger(v) for v in ("0", "-1", "10" * 20)]
        stream = io.StringIO()
        for value in values:
            write_big_integer(stream, value).write("\n")
        stream.seek(0)
        assert list(iter_big_integers(stream)) == values
