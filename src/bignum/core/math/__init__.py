"""
Core math modules для bignum

Примитивы над десятичными цифрами и знаковая диспетчеризация.
"""

# Magnitude primitives
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

# Decimal text
from bignum.core.math.decimal_text import (
    DEFAULT_DECIMAL_TEXT_CONFIG,
    I64_MAX,
    I64_MIN,
    MINUS_SIGN,
    DecimalTextConfig,
    InvalidFormat,
    format_decimal,
    parse_decimal,
)

# Signed dispatch
from bignum.core.math.signed import (
    ZERO,
    SignedMagnitude,
    absolute,
    negate,
    signed,
    signed_add,
    signed_compare,
    signed_divmod,
    signed_mul,
    signed_sub,
)

__all__ = [
    # Magnitude — Constants
    "BASE",
    # Magnitude — Exceptions
    "DivisionByZero",
    # Magnitude — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "divmod_magnitudes",
    "is_zero_magnitude",
    "magnitude_from_int",
    "mul_magnitudes",
    "strip_leading_zeros",
    "sub_magnitudes",
    # Decimal text — Constants
    "DEFAULT_DECIMAL_TEXT_CONFIG",
    "I64_MAX",
    "I64_MIN",
    "MINUS_SIGN",
    # Decimal text — Types
    "DecimalTextConfig",
    # Decimal text — Exceptions
    "InvalidFormat",
    # Decimal text — Functions
    "format_decimal",
    "parse_decimal",
    # Signed — Types
    "SignedMagnitude",
    "ZERO",
    # Signed — Functions
    "absolute",
    "negate",
    "signed",
    "signed_add",
    "signed_compare",
    "signed_divmod",
    "signed_mul",
    "signed_sub",
]
