"""
Contract Validation Module

Модуль для валидации JSON контрактов biguint (сырые векторы цифр).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    UIntDigitsValidator,
    validate_uint_digits,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UIntDigitsValidator",
    # Functions
    "validate_uint_digits",
]
