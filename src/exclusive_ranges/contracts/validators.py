"""
JSON Schema Contract Validators

Модуль для валидации сериализованных (wire) форм интервалов согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (contracts/schema/):
- lower_exclusive_range.json
- lower_exclusive_upper_exclusive_range.json
- lower_exclusive_upper_inclusive_range.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from exclusive_ranges.domain.ranges import (
    LowerExclusiveRange,
    LowerExclusiveUpperExclusiveRange,
    LowerExclusiveUpperInclusiveRange,
)

logger = logging.getLogger(__name__)

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом (package data).
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'lower_exclusive_range')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            logger.debug("Schema %s served from cache", schema_name)
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.warning("Payload rejected by %s: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class LowerExclusiveRangeValidator(ContractValidator):
    """Валидатор для (start..)"""

    def __init__(self):
        super().__init__("lower_exclusive_range")


class LowerExclusiveUpperExclusiveRangeValidator(ContractValidator):
    """Валидатор для (start..end)"""

    def __init__(self):
        super().__init__("lower_exclusive_upper_exclusive_range")


class LowerExclusiveUpperInclusiveRangeValidator(ContractValidator):
    """Валидатор для (start..=end)"""

    def __init__(self):
        super().__init__("lower_exclusive_upper_inclusive_range")


_VALIDATORS_BY_MODEL = {
    LowerExclusiveRange: LowerExclusiveRangeValidator,
    LowerExclusiveUpperExclusiveRange: LowerExclusiveUpperExclusiveRangeValidator,
    LowerExclusiveUpperInclusiveRange: LowerExclusiveUpperInclusiveRangeValidator,
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_lower_exclusive_range(data: Dict[str, Any]) -> None:
    """
    Валидация wire-формы LowerExclusiveRange.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LowerExclusiveRangeValidator().validate(data)


def validate_lower_exclusive_upper_exclusive_range(data: Dict[str, Any]) -> None:
    """
    Валидация wire-формы LowerExclusiveUpperExclusiveRange.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LowerExclusiveUpperExclusiveRangeValidator().validate(data)


def validate_lower_exclusive_upper_inclusive_range(data: Dict[str, Any]) -> None:
    """
    Валидация wire-формы LowerExclusiveUpperInclusiveRange.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LowerExclusiveUpperInclusiveRangeValidator().validate(data)


def validate_range_model(range_model: BaseModel) -> None:
    """
    Сериализация интервала и проверка результата по его контракту.

    Args:
        range_model: Экземпляр одного из трёх типов интервалов

    Raises:
        TypeError: Если тип модели не является интервалом
        ValidationError: Если сериализованная форма не соответствует схеме
    """
    model_type = range_model.__pydantic_generic_metadata__["origin"] or type(range_model)
    validator_cls = _VALIDATORS_BY_MODEL.get(model_type)
    if validator_cls is None:
        raise TypeError(f"No contract for model type {type(range_model).__name__}")
    validator_cls().validate(range_model.model_dump(mode="json"))
