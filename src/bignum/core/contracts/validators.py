"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления BigInteger согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- big_integer.json (BigIntegerPayload)

Контракт дублирует ограничения pydantic-модели (канонические цифры, нет
отрицательного нуля) для потребителей, которые получают только JSON.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from bignum.core.domain.payload import BigIntegerPayload

logger = logging.getLogger(__name__)

# Каталог схем, поставляемый как package data
DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"

BIG_INTEGER_SCHEMA = "big_integer"

PayloadLike = Union[Dict[str, Any], BigIntegerPayload]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем контрактов bignum.

    Каждая схема проходит meta-валидацию по Draft 2020-12 и кэшируется
    после первой загрузки.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(
                f"Schema directory not found: {self._schema_dir} "
                "(is bignum installed with its package data?)"
            )
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы контракта.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_integer')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не JSON или не валидная JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        try:
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Schema {schema_name}.json is not valid JSON: {e}") from e

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: SchemaLoader | None = None


def default_loader() -> SchemaLoader:
    """Общий загрузчик для схем из пакета (создаётся при первом обращении)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def _as_data(data: PayloadLike) -> Dict[str, Any]:
    if isinstance(data, BigIntegerPayload):
        return data.model_dump()
    return data


def _error_location(error: ValidationError) -> str:
    # Пустой путь означает ошибку на уровне всего объекта
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


class ContractValidator:
    """Проверка JSON-данных против одной схемы контракта."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: PayloadLike) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантная ошибка (best_match),
                если данные не соответствуют схеме
        """
        error = best_match(self.validator.iter_errors(_as_data(data)))
        if error is None:
            return
        logger.debug(
            "Rejected %s payload at %s: %s",
            self.schema_name,
            _error_location(error),
            error.message,
        )
        raise error

    def is_valid(self, data: PayloadLike) -> bool:
        return self.validator.is_valid(_as_data(data))

    def iter_errors(self, data: PayloadLike) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(_as_data(data))

    def error_messages(self, data: PayloadLike) -> list[str]:
        """
        Все ошибки в виде 'поле: сообщение', отсортированные по полю.

        Examples:
            >>> BigIntegerValidator().error_messages({"negative": True, "digits": "01"})
            ["digits: '01' does not match '^(0|[1-9][0-9]*)$'"]
        """
        errors = sorted(self.iter_errors(data), key=_error_location)
        return [f"{_error_location(e)}: {e.message}" for e in errors]


class BigIntegerValidator(ContractValidator):
    """Валидатор для big_integer контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(BIG_INTEGER_SCHEMA, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: PayloadLike) -> None:
    """
    Валидация JSON-представления BigInteger.

    Args:
        data: dict (например, из json.loads) или BigIntegerPayload

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntegerValidator().validate(data)
