"""
Domain models and value objects.

Contains the normalized Representation and the error taxonomy.
Rounding configuration lives in decimalish.core.domain.rounding.
"""

from decimalish.core.domain.errors import DecimalError, DivisionByZero, ErrorCode
from decimalish.core.domain.representation import (
    ONE,
    ZERO,
    Representation,
    normalize_representation,
)

__all__ = [
    # Errors
    "ErrorCode",
    "DecimalError",
    "DivisionByZero",
    # Representation
    "Representation",
    "ZERO",
    "ONE",
    "normalize_representation",
]
