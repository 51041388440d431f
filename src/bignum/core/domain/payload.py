"""
BigIntegerPayload — структурированная форма BigInteger

Immutable Pydantic модель для сериализации в JSON и обратно.
Полная совместимость с JSON Schema (contracts/schema/big_integer.json).

Цифры хранятся строкой от старшей к младшей, как в обычной записи,
знак вынесен в отдельное поле.
"""

from pydantic import BaseModel, Field, field_validator, model_validator


class BigIntegerPayload(BaseModel):
    """
    Сериализуемое представление BigInteger.

    Immutable модель (frozen=True). Принимает только канонические значения:
    без ведущих нулей и без отрицательного нуля.
    """

    negative: bool = Field(False, description="True для отрицательного значения")
    digits: str = Field(
        ...,
        min_length=1,
        pattern=r"^[0-9]+$",
        description="Десятичные цифры модуля, старшая первой",
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_canonical_digits(cls, v: str) -> str:
        """Запрет ведущих нулей (кроме самого нуля)."""
        if len(v) > 1 and v[0] == "0":
            raise ValueError(f"digits {v!r} has leading zeros")
        return v

    @model_validator(mode="after")
    def validate_no_negative_zero(self) -> "BigIntegerPayload":
        if self.negative and self.digits == "0":
            raise ValueError("negative zero is not representable")
        return self

    def to_decimal_string(self) -> str:
        return ("-" if self.negative else "") + self.digits
