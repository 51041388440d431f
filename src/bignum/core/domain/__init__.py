"""
Domain models and value objects.

Contains the BigInteger value type and its serializable payload.
"""

from bignum.core.domain.big_integer import BigInteger
from bignum.core.domain.payload import BigIntegerPayload

__all__ = [
    "BigInteger",
    "BigIntegerPayload",
]
