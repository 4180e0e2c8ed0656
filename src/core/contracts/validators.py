"""
Conversion Contracts — JSON Schema граница конвертации

Документы conversion_request / conversion_outcome проверяются против
JSON Schema (draft 2020-12) и только затем превращаются в Pydantic модели.

Поток данных:
    dict → validate(conversion_request) → ConversionRequest
         → execute() → ConversionOutcome → to_contract()
         → validate(conversion_outcome) → dict

Схемы лежат в пакете (src/core/contracts/schema/) и ставятся вместе с ним.
Валидаторы кэшируются: один Draft202012Validator на схему.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.conversion import ConversionOutcome, ConversionRequest
from src.core.math.radix import DEFAULT_CONFIG, RadixConfig

SCHEMA_DIR = Path(__file__).parent / "schema"

CONVERSION_REQUEST_SCHEMA = "conversion_request"
CONVERSION_OUTCOME_SCHEMA = "conversion_outcome"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем по имени схемы.

    Args:
        schema_dir: Каталог со схемами (default: схемы пакета)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = Path(schema_dir)
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_DEFAULT_LOADER: Optional[SchemaLoader] = None


def _default_loader() -> SchemaLoader:
    global _DEFAULT_LOADER
    if _DEFAULT_LOADER is None:
        _DEFAULT_LOADER = SchemaLoader()
    return _DEFAULT_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор документа против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Лучшая (наиболее релевантная) ошибка схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ConversionRequestValidator(ContractValidator):
    """Валидатор conversion_request."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(CONVERSION_REQUEST_SCHEMA, loader)


class ConversionOutcomeValidator(ContractValidator):
    """Валидатор conversion_outcome."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(CONVERSION_OUTCOME_SCHEMA, loader)


_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(schema_name: str) -> ContractValidator:
    """Кэшированный валидатор схемы пакета (создаётся один раз)."""
    validator = _VALIDATORS.get(schema_name)
    if validator is None:
        if schema_name == CONVERSION_REQUEST_SCHEMA:
            validator = ConversionRequestValidator()
        elif schema_name == CONVERSION_OUTCOME_SCHEMA:
            validator = ConversionOutcomeValidator()
        else:
            validator = ContractValidator(schema_name)
        _VALIDATORS[schema_name] = validator
    return validator


# =============================================================================
# VALIDATE / PARSE
# =============================================================================


def validate_conversion_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Документ не соответствует conversion_request.json
    """
    get_validator(CONVERSION_REQUEST_SCHEMA).validate(data)


def validate_conversion_outcome(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Документ не соответствует conversion_outcome.json
    """
    get_validator(CONVERSION_OUTCOME_SCHEMA).validate(data)


def parse_conversion_request(data: Dict[str, Any]) -> ConversionRequest:
    """
    Документ conversion_request → ConversionRequest.

    Схема проверяется до построения модели, поэтому ошибки формы
    приходят как jsonschema.ValidationError, а не pydantic.

    Raises:
        ValidationError: Документ не соответствует схеме
    """
    validate_conversion_request(data)
    return ConversionRequest.model_validate(data)


def parse_conversion_outcome(data: Dict[str, Any]) -> ConversionOutcome:
    """
    Документ conversion_outcome → ConversionOutcome.

    Raises:
        ValidationError: Документ не соответствует схеме
    """
    validate_conversion_outcome(data)
    return ConversionOutcome.model_validate(data)


def execute_conversion_contract(
    data: Dict[str, Any],
    config: RadixConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """
    Полный цикл: документ запроса → документ исхода.

    Ошибки конвертации (база, цифра, переполнение) не выбрасываются,
    а возвращаются в документе исхода со статусом ERROR.

    Args:
        data: Документ conversion_request
        config: Ширина аккумулятора

    Returns:
        Документ conversion_outcome (проверенный схемой)

    Raises:
        ValidationError: Документ запроса не соответствует схеме
    """
    request = parse_conversion_request(data)
    outcome = request.execute(config).to_contract()
    validate_conversion_outcome(outcome)
    return outcome
