"""
Radix — Конвертация цифр между системами счисления

Модуль переводит число, заданное последовательностью беззнаковых цифр
(старший разряд первым) в одной системе счисления, в последовательность
цифр в другой системе счисления.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок проверок фиксирован: from_base → to_base → цифры (первая невалидная)
2. Выход всегда канонический: без ведущих нулей, значение 0 → [0]
3. Пустая последовательность на входе означает 0
4. Аккумулятор никогда не переполняется молча (ValueOverflow при заданной ширине)
5. Все операции детерминированы и не имеют побочных эффектов

ФОРМУЛЫ:
    decode (Horner):  value = value * from_base + digit
    encode:           value, remainder = divmod(value, to_base)
    value = Σ digit[i] × base^(n-1-i)
"""

from dataclasses import dataclass
from typing import Final, Optional, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимальная допустимая база (0 бессмысленна, 1 — вырожденная unary)
MIN_BASE: Final[int] = 2

# Ширина аккумулятора для ограниченных режимов
U32_MAX_BITS: Final[int] = 32
U64_MAX_BITS: Final[int] = 64


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BaseConversionError(ValueError):
    """
    Базовая ошибка конвертации.

    Ошибки сравниваются как tagged-значения: по типу и ключевым атрибутам,
    диагностические поля (base, position) в сравнении не участвуют.
    """

    kind: str = "base_conversion_error"

    def _key(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class InvalidInputBase(BaseConversionError):
    """from_base < 2 или не целое число."""

    kind = "invalid_input_base"

    def __init__(self, base: Optional[int] = None):
        self.base = base
        super().__init__(f"Invalid input base: {base} (must be an integer >= {MIN_BASE})")


class InvalidOutputBase(BaseConversionError):
    """to_base < 2 или не целое число."""

    kind = "invalid_output_base"

    def __init__(self, base: Optional[int] = None):
        self.base = base
        super().__init__(f"Invalid output base: {base} (must be an integer >= {MIN_BASE})")


class InvalidDigit(BaseConversionError):
    """
    Цифра не принадлежит from_base (не целое, digit >= from_base или digit < 0).

    Несёт значение цифры для диагностики; position — индекс во входе.
    """

    kind = "invalid_digit"

    def __init__(
        self,
        digit: int,
        base: Optional[int] = None,
        position: Optional[int] = None,
    ):
        self.digit = digit
        self.base = base
        self.position = position
        super().__init__(
            f"Invalid digit {digit} at position {position} for base {base}"
        )

    def _key(self) -> tuple:
        return (self.digit,)


class ValueOverflow(BaseConversionError):
    """Декодированное значение не помещается в max_value_bits."""

    kind = "value_overflow"

    def __init__(self, max_value_bits: int):
        self.max_value_bits = max_value_bits
        super().__init__(
            f"Value exceeds {max_value_bits}-bit accumulator "
            f"(max {(1 << max_value_bits) - 1})"
        )

    def _key(self) -> tuple:
        return (self.max_value_bits,)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RadixConfig:
    """Конфигурация аккумулятора.

    max_value_bits=None — неограниченный Python int (по умолчанию).
    Иначе значение должно быть <= 2**max_value_bits - 1, либо ValueOverflow.
    """

    max_value_bits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_value_bits is not None and self.max_value_bits <= 0:
            raise ValueError(
                f"max_value_bits must be positive, got {self.max_value_bits}"
            )

    @property
    def max_value(self) -> Optional[int]:
        if self.max_value_bits is None:
            return None
        return (1 << self.max_value_bits) - 1


DEFAULT_CONFIG: Final[RadixConfig] = RadixConfig()
U32_CONFIG: Final[RadixConfig] = RadixConfig(max_value_bits=U32_MAX_BITS)
U64_CONFIG: Final[RadixConfig] = RadixConfig(max_value_bits=U64_MAX_BITS)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат конвертации без exception (ok/error)."""

    ok: bool
    digits: Optional[tuple[int, ...]]
    error: Optional[BaseConversionError]

    def __post_init__(self) -> None:
        if self.ok != (self.error is None):
            raise ValueError(f"ok={self.ok} is inconsistent with error={self.error!r}")
        if self.ok != (self.digits is not None):
            raise ValueError(f"ok={self.ok} is inconsistent with digits={self.digits!r}")

    def unwrap(self) -> list[int]:
        """
        Цифры результата.

        Raises:
            BaseConversionError: Ошибка, сохранённая в результате
        """
        if self.error is not None:
            raise self.error
        return list(self.digits)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_unsigned_int(value: object) -> bool:
    """
    Проверка, является ли значение беззнаковым целым.

    bool отвергается: True/False не являются цифрами или базами,
    float отвергается даже при целом значении (2.0).
    """
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_valid_base(base: object) -> bool:
    return is_unsigned_int(base) and base >= MIN_BASE


def validate_bases(from_base: int, to_base: int) -> None:
    """
    Проверка обеих баз в фиксированном порядке.

    Raises:
        InvalidInputBase: from_base < 2 или не целое
        InvalidOutputBase: to_base < 2 или не целое (только если from_base валидна)
    """
    if not _is_valid_base(from_base):
        raise InvalidInputBase(from_base)
    if not _is_valid_base(to_base):
        raise InvalidOutputBase(to_base)


def validate_digits(digits: Sequence[int], base: int) -> None:
    """
    Проверка цифр: целое и 0 <= digit < base.

    Raises:
        InvalidDigit: Для первой невалидной цифры в порядке последовательности
    """
    for position, digit in enumerate(digits):
        if not is_unsigned_int(digit) or digit >= base:
            raise InvalidDigit(digit, base=base, position=position)


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def digits_to_int(
    digits: Sequence[int],
    base: int,
    config: RadixConfig = DEFAULT_CONFIG,
) -> int:
    """
    Декодирование последовательности цифр в значение (Horner).

    Все цифры валидируются до свёртки, поэтому InvalidDigit всегда
    имеет приоритет над ValueOverflow.

    Args:
        digits: Цифры, старший разряд первым (пустая → 0)
        base: База входа
        config: Ширина аккумулятора

    Returns:
        Неотрицательное значение

    Raises:
        InvalidInputBase: base < 2 или не целое
        InvalidDigit: Не целая цифра или цифра вне [0, base)
        ValueOverflow: Значение превышает config.max_value

    Examples:
        >>> digits_to_int([4, 2], 10)
        42
        >>> digits_to_int([], 2)
        0
    """
    if not _is_valid_base(base):
        raise InvalidInputBase(base)
    validate_digits(digits, base)

    limit = config.max_value
    value = 0
    for digit in digits:
        value = value * base + digit
        # Horner монотонен: достаточно проверять промежуточные значения
        if limit is not None and value > limit:
            raise ValueOverflow(config.max_value_bits)
    return value


def int_to_digits(value: int, base: int) -> list[int]:
    """
    Кодирование значения в цифры базы (старший разряд первым).

    Raises:
        InvalidOutputBase: base < 2 или не целое
        ValueError: value не является неотрицательным целым

    Examples:
        >>> int_to_digits(42, 2)
        [1, 0, 1, 0, 1, 0]
        >>> int_to_digits(0, 16)
        [0]
    """
    if not _is_valid_base(base):
        raise InvalidOutputBase(base)
    if not is_unsigned_int(value):
        raise ValueError(f"value must be a non-negative integer, got {value!r}")
    if value == 0:
        return [0]

    digits: list[int] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(remainder)
    digits.reverse()
    return digits


# =============================================================================
# CONVERT
# =============================================================================


def convert(
    number: Sequence[int],
    from_base: int,
    to_base: int,
    config: RadixConfig = DEFAULT_CONFIG,
) -> list[int]:
    """
    Конвертация последовательности цифр из from_base в to_base.

    Args:
        number: Цифры в from_base, старший разряд первым.
            Допускаются ведущие нули, пустая последовательность → 0
        from_base: База входа (>= 2)
        to_base: База выхода (>= 2)
        config: Ширина аккумулятора (default: неограниченный)

    Returns:
        Новый список цифр в to_base в канонической форме

    Raises:
        InvalidInputBase: from_base < 2 или не целое
        InvalidOutputBase: to_base < 2 или не целое
        InvalidDigit: Первая не целая цифра или цифра вне [0, from_base)
        ValueOverflow: Значение не помещается в config.max_value_bits

    Examples:
        >>> convert([4, 2], 10, 2)
        [1, 0, 1, 0, 1, 0]
        >>> convert([], 2, 10)
        [0]
        >>> convert([1, 1, 1, 1, 1], 2, 10)
        [3, 1]
    """
    validate_bases(from_base, to_base)
    value = digits_to_int(number, from_base, config)
    return int_to_digits(value, to_base)


def try_convert(
    number: Sequence[int],
    from_base: int,
    to_base: int,
    config: RadixConfig = DEFAULT_CONFIG,
) -> ConversionResult:
    """
    То же, что convert, но ошибка возвращается в ConversionResult.

    Examples:
        >>> try_convert([1, 5], 2, 10).error
        InvalidDigit('Invalid digit 5 at position 1 for base 2')
    """
    try:
        digits = convert(number, from_base, to_base, config)
    except BaseConversionError as exc:
        return ConversionResult(ok=False, digits=None, error=exc)
    return ConversionResult(ok=True, digits=tuple(digits), error=None)


# =============================================================================
# КАНОНИЧЕСКАЯ ФОРМА
# =============================================================================


def canonicalize(digits: Sequence[int]) -> list[int]:
    """
    Удаление ведущих нулей; пустая или нулевая последовательность → [0].

    Examples:
        >>> canonicalize([0, 0, 4, 2])
        [4, 2]
        >>> canonicalize([])
        [0]
    """
    digits = list(digits)
    for index, digit in enumerate(digits):
        if digit != 0:
            return digits[index:]
    return [0]


def is_canonical(digits: Sequence[int]) -> bool:
    """True если последовательность уже в канонической форме."""
    return canonicalize(digits) == list(digits)
