"""
Contract Validation Module

Модуль для валидации JSON контрактов interchange-представления.
"""

from .validators import (
    RATIONAL_NUMBER_SCHEMA,
    ContractValidator,
    RationalNumberValidator,
    SchemaLoader,
    validate_rational_number,
)

__all__ = [
    # Constants
    "RATIONAL_NUMBER_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RationalNumberValidator",
    # Functions
    "validate_rational_number",
]
