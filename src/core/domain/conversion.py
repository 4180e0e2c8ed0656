"""
Conversion — Модели запроса и исхода конвертации

Immutable Pydantic модели для передачи конвертации через границы системы.
Полная совместимость с JSON Schema (contracts/schema/conversion_request.json,
contracts/schema/conversion_outcome.json).

ConversionRequest проверяет только структуру (беззнаковые целые).
Семантика баз и цифр остаётся за convert(), чтобы ошибки приходили
из единой таксономии (InvalidInputBase/InvalidOutputBase/InvalidDigit).
"""

from enum import Enum
from typing import Annotated, Any, Dict, Final, List, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.math.radix import (
    DEFAULT_CONFIG,
    BaseConversionError,
    ConversionResult,
    InvalidDigit,
    InvalidInputBase,
    InvalidOutputBase,
    RadixConfig,
    ValueOverflow,
    try_convert,
)

# Версия контрактов conversion_request / conversion_outcome
CONTRACT_SCHEMA_VERSION: Final[str] = "1"

Digit = Annotated[int, Field(ge=0)]


# =============================================================================
# ENUMS
# =============================================================================


class OutcomeStatus(str, Enum):
    """Статус исхода конвертации"""

    OK = "OK"
    ERROR = "ERROR"


class ErrorKind(str, Enum):
    """Вид ошибки конвертации (совпадает с BaseConversionError.kind)"""

    INVALID_INPUT_BASE = "invalid_input_base"
    INVALID_OUTPUT_BASE = "invalid_output_base"
    INVALID_DIGIT = "invalid_digit"
    VALUE_OVERFLOW = "value_overflow"


_BASE_CARRYING_KINDS: Final = frozenset(
    {ErrorKind.INVALID_INPUT_BASE, ErrorKind.INVALID_OUTPUT_BASE, ErrorKind.INVALID_DIGIT}
)


# =============================================================================
# CONVERSION REQUEST
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос на конвертацию.

    Immutable модель (frozen=True). Базы 0 и 1 структурно допустимы
    и отклоняются только при execute().
    """

    digits: List[Digit] = Field(
        default_factory=list,
        description="Цифры в from_base, старший разряд первым (пустой → 0)",
    )
    from_base: int = Field(..., ge=0, description="База входа")
    to_base: int = Field(..., ge=0, description="База выхода")

    model_config = {"frozen": True}

    def execute(self, config: RadixConfig = DEFAULT_CONFIG) -> "ConversionOutcome":
        """
        Выполнение конвертации.

        Args:
            config: Ширина аккумулятора (default: неограниченный)

        Returns:
            ConversionOutcome со статусом OK или ERROR
        """
        result = try_convert(self.digits, self.from_base, self.to_base, config)
        return ConversionOutcome.from_result(result)

    def to_contract(self) -> Dict[str, Any]:
        """Документ, соответствующий conversion_request.json."""
        return {"schema_version": CONTRACT_SCHEMA_VERSION, **self.model_dump(mode="json")}


# =============================================================================
# CONVERSION OUTCOME
# =============================================================================


class ConversionOutcome(BaseModel):
    """
    Исход конвертации.

    Immutable модель (frozen=True). Инварианты:
    - OK: непустой digits, без полей ошибки
    - ERROR: задан error_kind, digits отсутствует
    - base обязателен для INVALID_INPUT_BASE/INVALID_OUTPUT_BASE/INVALID_DIGIT
      (отклонённая база либо база цифры), иначе отсутствует
    - invalid_digit и position только при INVALID_DIGIT (и обязательны для него)
    - max_value_bits только при VALUE_OVERFLOW (и обязателен для него)

    Поля ошибки строго целочисленные: ошибка с не целой базой или цифрой
    не представима в контракте.
    """

    status: OutcomeStatus = Field(..., description="Статус (OK/ERROR)")
    digits: Optional[List[Digit]] = Field(
        None, description="Цифры в to_base (канонические, только при OK)"
    )
    error_kind: Optional[ErrorKind] = Field(None, description="Вид ошибки (только при ERROR)")
    base: Optional[int] = Field(
        None, strict=True, description="Отклонённая база или база отклонённой цифры"
    )
    invalid_digit: Optional[int] = Field(
        None, strict=True, description="Отклонённая цифра (только при INVALID_DIGIT)"
    )
    position: Optional[int] = Field(
        None, strict=True, ge=0, description="Индекс отклонённой цифры во входе"
    )
    max_value_bits: Optional[int] = Field(
        None, gt=0, description="Ширина аккумулятора (только при VALUE_OVERFLOW)"
    )
    message: Optional[str] = Field(None, description="Диагностическое сообщение")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_status_consistency(self) -> "ConversionOutcome":
        """Согласованность статуса и полей."""
        if self.status == OutcomeStatus.OK:
            if not self.digits:
                raise ValueError("OK outcome requires non-empty digits")
            if self.error_kind is not None:
                raise ValueError("OK outcome cannot carry error_kind")
        else:
            if self.error_kind is None:
                raise ValueError("ERROR outcome requires error_kind")
            if self.digits is not None:
                raise ValueError("ERROR outcome cannot carry digits")

        carries_base = self.error_kind in _BASE_CARRYING_KINDS
        if carries_base != (self.base is not None):
            raise ValueError("base is required for and only for base/digit errors")

        is_digit_error = self.error_kind == ErrorKind.INVALID_DIGIT
        if is_digit_error != (self.invalid_digit is not None):
            raise ValueError("invalid_digit is required for and only for invalid_digit errors")
        if is_digit_error != (self.position is not None):
            raise ValueError("position is required for and only for invalid_digit errors")

        is_overflow = self.error_kind == ErrorKind.VALUE_OVERFLOW
        if is_overflow != (self.max_value_bits is not None):
            raise ValueError("max_value_bits is required for and only for value_overflow errors")
        return self

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionOutcome":
        """
        Построение исхода из ConversionResult.

        Raises:
            ValidationError: Ошибка несёт не целую базу или цифру
        """
        if result.error is None:
            return cls(status=OutcomeStatus.OK, digits=list(result.digits))

        error = result.error
        return cls(
            status=OutcomeStatus.ERROR,
            error_kind=ErrorKind(error.kind),
            base=getattr(error, "base", None),
            invalid_digit=error.digit if isinstance(error, InvalidDigit) else None,
            position=error.position if isinstance(error, InvalidDigit) else None,
            max_value_bits=(
                error.max_value_bits if isinstance(error, ValueOverflow) else None
            ),
            message=str(error),
        )

    def to_error(self) -> Optional[BaseConversionError]:
        """Восстановление исключения из исхода (None при OK)."""
        if self.error_kind is None:
            return None
        if self.error_kind == ErrorKind.INVALID_INPUT_BASE:
            return InvalidInputBase(self.base)
        if self.error_kind == ErrorKind.INVALID_OUTPUT_BASE:
            return InvalidOutputBase(self.base)
        if self.error_kind == ErrorKind.INVALID_DIGIT:
            return InvalidDigit(self.invalid_digit, base=self.base, position=self.position)
        return ValueOverflow(self.max_value_bits)

    def unwrap(self) -> List[int]:
        """
        Цифры результата.

        Raises:
            BaseConversionError: Если исход — ERROR
        """
        error = self.to_error()
        if error is not None:
            raise error
        return list(self.digits)

    def to_contract(self) -> Dict[str, Any]:
        """Документ, соответствующий conversion_outcome.json."""
        return {"schema_version": CONTRACT_SCHEMA_VERSION, **self.model_dump(mode="json")}
