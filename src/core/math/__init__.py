"""
Core math modules для radix-convert

Целочисленные алгоритмы конвертации между системами счисления.
"""

from src.core.math.radix import (
    # Constants
    DEFAULT_CONFIG,
    MIN_BASE,
    U32_CONFIG,
    U32_MAX_BITS,
    U64_CONFIG,
    U64_MAX_BITS,
    # Exceptions
    BaseConversionError,
    InvalidDigit,
    InvalidInputBase,
    InvalidOutputBase,
    ValueOverflow,
    # Types
    ConversionResult,
    RadixConfig,
    # Functions
    canonicalize,
    convert,
    digits_to_int,
    int_to_digits,
    is_canonical,
    is_unsigned_int,
    try_convert,
    validate_bases,
    validate_digits,
)

__all__ = [
    # Radix — Constants
    "DEFAULT_CONFIG",
    "MIN_BASE",
    "U32_CONFIG",
    "U32_MAX_BITS",
    "U64_CONFIG",
    "U64_MAX_BITS",
    # Radix — Exceptions
    "BaseConversionError",
    "InvalidDigit",
    "InvalidInputBase",
    "InvalidOutputBase",
    "ValueOverflow",
    # Radix — Types
    "ConversionResult",
    "RadixConfig",
    # Radix — Functions
    "canonicalize",
    "convert",
    "digits_to_int",
    "int_to_digits",
    "is_canonical",
    "is_unsigned_int",
    "try_convert",
    "validate_bases",
    "validate_digits",
]
