"""
decimalish — десятичные числа произвольной точности

Значения — канонические десятичные строки; каждая функция принимает
любые числовые значения и явные правила округления.

    >>> import decimalish
    >>> decimalish.add("0.1", "0.2")
    '0.3'
    >>> decimalish.round("2.5")
    '2'

abs, pow, round, min, max и int доступны как decimalish.<имя>, но не
экспортируются через `from decimalish import *`.
"""

from decimalish.api import (
    Numeric,
    abs,
    add,
    ceil,
    clamp,
    cmp,
    construct,
    decimal,
    deconstruct,
    div,
    div_int,
    div_rem,
    eq,
    exponent,
    floor,
    gt,
    gte,
    int,
    int_frac,
    is_decimal,
    is_integer,
    is_numeric,
    lt,
    lte,
    max,
    min,
    mod,
    move_point,
    mul,
    neg,
    places,
    pow,
    precision,
    rem,
    round,
    round_rem,
    scale,
    sign,
    sqrt,
    sub,
    to_exponential,
    to_fixed,
    to_number,
    to_string,
    trunc,
)
from decimalish.core.domain.errors import DecimalError, DivisionByZero, ErrorCode
from decimalish.core.domain.rounding import RoundingMode, RoundingRules

__version__ = "0.1.0"

__all__ = [
    # Types
    "Numeric",
    "RoundingMode",
    "RoundingRules",
    # Errors
    "ErrorCode",
    "DecimalError",
    "DivisionByZero",
    # Construction
    "decimal",
    "is_decimal",
    "is_numeric",
    "is_integer",
    "deconstruct",
    "construct",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "div_rem",
    "div_int",
    "rem",
    "mod",
    "sqrt",
    # Comparison
    "cmp",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "clamp",
    # Magnitude
    "neg",
    "sign",
    "places",
    "precision",
    "scale",
    "exponent",
    "move_point",
    # Rounding
    "round_rem",
    "floor",
    "ceil",
    "trunc",
    "int_frac",
    # Formatting
    "to_number",
    "to_string",
    "to_fixed",
    "to_exponential",
]
