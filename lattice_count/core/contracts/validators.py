"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (lattice_count/core/contracts/schema/):
- int_vec.json — сериализованный IntVec ({"values": [...]})
- seq_lt.json  — конфигурация SeqLT ({"kind": "lt", "dim": d, "bound": B})
- seq_le.json  — конфигурация SeqLE ({"kind": "le", "bounds": [...]})
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from lattice_count.core.domain.int_vec import IntVec
from lattice_count.core.iter.base import BoundedSequence
from lattice_count.core.iter.seq_le import SeqLE
from lattice_count.core.iter.seq_lt import SeqLT

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'seq_le')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
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
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class IntVecValidator(ContractValidator):
    """Валидатор для int_vec контракта."""

    def __init__(self):
        super().__init__("int_vec")


class SeqLTConfigValidator(ContractValidator):
    """Валидатор для конфигурации SeqLT."""

    def __init__(self):
        super().__init__("seq_lt")


class SeqLEConfigValidator(ContractValidator):
    """Валидатор для конфигурации SeqLE."""

    def __init__(self):
        super().__init__("seq_le")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_int_vec(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного IntVec.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IntVecValidator().validate(data)


def validate_seq_config(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации перечислителя по полю kind ("lt" / "le").

    Raises:
        ValidationError: Если kind неизвестен или данные не соответствуют схеме
    """
    kind = data.get("kind") if isinstance(data, dict) else None
    if kind == "lt":
        SeqLTConfigValidator().validate(data)
    elif kind == "le":
        SeqLEConfigValidator().validate(data)
    else:
        raise ValidationError(f"Unknown sequence kind: {kind!r} (expected 'lt' or 'le')")


def int_vec_from_contract(data: Dict[str, Any]) -> IntVec:
    """
    Построение IntVec из валидированного JSON.

    Raises:
        ValidationError: Если данные не соответствуют схеме int_vec
    """
    validate_int_vec(data)
    return IntVec(int(c) for c in data["values"])


def sequence_from_contract(data: Dict[str, Any]) -> BoundedSequence:
    """
    Построение SeqLT или SeqLE из валидированной JSON конфигурации.

    Examples:
        >>> sequence_from_contract({"kind": "lt", "dim": 3, "bound": 4}).size()
        64
        >>> sequence_from_contract({"kind": "le", "bounds": [0, 1, 2, 3, 0]}).size()
        24

    Raises:
        ValidationError: Если конфигурация не соответствует схеме
    """
    validate_seq_config(data)
    if data["kind"] == "lt":
        return SeqLT(int(data["dim"]), int(data["bound"]))
    return SeqLE(IntVec(int(b) for b in data["bounds"]))
