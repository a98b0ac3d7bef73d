"""
Contract Validation Module

Проверка разложения decimal по JSON Schema.
"""

from .validators import REPRESENTATION_SCHEMA, validate_representation

__all__ = [
    "REPRESENTATION_SCHEMA",
    "validate_representation",
]
