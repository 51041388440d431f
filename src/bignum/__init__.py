"""
bignum: знаковые целые произвольной точности в десятичном представлении.
"""

from bignum.core.domain import BigInteger, BigIntegerPayload
from bignum.core.math import DecimalTextConfig, DivisionByZero, InvalidFormat

__version__ = "0.1.0"

__all__ = [
    "BigInteger",
    "BigIntegerPayload",
    "DecimalTextConfig",
    "DivisionByZero",
    "InvalidFormat",
]
