"""
Contract Validation Module

JSON Schema контракты conversion_request / conversion_outcome.
"""

from .validators import (
    CONVERSION_OUTCOME_SCHEMA,
    CONVERSION_REQUEST_SCHEMA,
    SCHEMA_DIR,
    ContractValidator,
    ConversionOutcomeValidator,
    ConversionRequestValidator,
    SchemaLoader,
    execute_conversion_contract,
    get_validator,
    parse_conversion_outcome,
    parse_conversion_request,
    validate_conversion_outcome,
    validate_conversion_request,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "CONVERSION_REQUEST_SCHEMA",
    "CONVERSION_OUTCOME_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRequestValidator",
    "ConversionOutcomeValidator",
    # Functions
    "get_validator",
    "validate_conversion_request",
    "validate_conversion_outcome",
    "parse_conversion_request",
    "parse_conversion_outcome",
    "execute_conversion_contract",
]
