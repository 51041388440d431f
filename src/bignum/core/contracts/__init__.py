"""
Contract Validation Module

Модуль для валидации JSON контрактов BigInteger.
"""

from .validators import (
    BIG_INTEGER_SCHEMA,
    DEFAULT_SCHEMA_DIR,
    BigIntegerValidator,
    ContractValidator,
    SchemaLoader,
    default_loader,
    validate_big_integer,
)

__all__ = [
    # Constants
    "BIG_INTEGER_SCHEMA",
    "DEFAULT_SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    # Functions
    "default_loader",
    "validate_big_integer",
]
