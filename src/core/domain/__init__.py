"""
Domain models and value objects.

Contains the conversion request/outcome models exchanged across boundaries.
"""

from src.core.domain.conversion import (
    CONTRACT_SCHEMA_VERSION,
    ConversionOutcome,
    ConversionRequest,
    ErrorKind,
    OutcomeStatus,
)

__all__ = [
    "CONTRACT_SCHEMA_VERSION",
    "ConversionRequest",
    "ConversionOutcome",
    "ErrorKind",
    "OutcomeStatus",
]
