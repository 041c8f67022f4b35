"""
Decay Contracts — JSON Schema проверка записей входа и вывода

Схемы лежат рядом с модулем (schema/*.json) и устанавливаются как
package data:
- decay_input.json  — параметры распада (initialAmount, decayRate, elapsedTime)
- decay_result.json — запись вывода {"decayedAmount": value}

Draft 2020-12 не различает конечные и NaN/Inf числа, поэтому валидатор
расширен ключевым словом "nonFinite":
    "allow"  — NaN/Inf допустимы (literal-режим пропагирует их в вывод)
    "reject" — только конечные числа
Без ключевого слова число проверяется только по "type".
"""

import json
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import Draft202012Validator, SchemaError, ValidationError, validators

from src.core.domain.decay_state import DecayInput, DecayResult

SCHEMA_DIR = Path(__file__).parent / "schema"

NON_FINITE_ALLOW = "allow"
NON_FINITE_REJECT = "reject"


def _non_finite_keyword(validator, mode, instance, schema):
    if not validator.is_type(instance, "number"):
        return
    if mode == NON_FINITE_REJECT and not math.isfinite(instance):
        yield ValidationError(f"{instance!r} is not a finite number")


DecayContractValidator = validators.extend(
    Draft202012Validator, {"nonFinite": _non_finite_keyword}
)


# =============================================================================
# CONTRACT REGISTRY
# =============================================================================


class ContractRegistry:
    """
    Реестр контрактов: схема загружается и проверяется при первом обращении.

    Отсутствующий каталог схем обнаруживается при создании реестра,
    а не при импорте модуля.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self.schema_dir = schema_dir
        self._validators: Dict[str, Any] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Чтение и meta-валидация schema_name.json.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            DecayContractValidator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
        return schema

    def validator(self, schema_name: str):
        if schema_name not in self._validators:
            self._validators[schema_name] = DecayContractValidator(
                self.load_schema(schema_name)
            )
        return self._validators[schema_name]

    def validate(self, schema_name: str, record: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: первая (по релевантности) ошибка записи
        """
        self.validator(schema_name).validate(record)

    def errors(self, schema_name: str, record: Dict[str, Any]) -> List[str]:
        """Все сообщения об ошибках записи, в порядке путей."""
        found = self.validator(schema_name).iter_errors(record)
        return [e.message for e in sorted(found, key=lambda e: list(e.path))]


@lru_cache(maxsize=None)
def default_registry() -> ContractRegistry:
    return ContractRegistry()


# =============================================================================
# RECORD-LEVEL CHECKS
# =============================================================================


def validate_decay_input(record: Dict[str, Any]) -> None:
    """
    Проверка записи decay_input (camelCase ключи).

    Raises:
        ValidationError: Если запись не соответствует схеме
    """
    default_registry().validate("decay_input", record)


def validate_decay_result(record: Dict[str, Any]) -> None:
    """
    Проверка записи decay_result.

    Raises:
        ValidationError: Если запись не соответствует схеме
    """
    default_registry().validate("decay_result", record)


def check_decay_input(decay_input: DecayInput) -> Dict[str, Any]:
    """Запись модели по внешним ключам, проверенная по decay_input.json."""
    record = decay_input.model_dump(by_alias=True)
    validate_decay_input(record)
    return record


def check_decay_result(result: DecayResult) -> Dict[str, Any]:
    """Запись результата {"decayedAmount": ...}, проверенная по decay_result.json."""
    record = result.to_record()
    validate_decay_result(record)
    return record
