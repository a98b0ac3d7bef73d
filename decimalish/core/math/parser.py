"""
Parser — приведение числовых значений к Representation

Принимаемые значения:
- str: десятичный текст ("1.23", "-.5", "1e-7", "+00012.3400E+2")
- bool: True → 1, False → 0
- int (и подклассы, например IntEnum): целые произвольной длины через
  operator.index и decimal.Decimal, без лимита длины str(int)
- float: только конечные, через repr() (кратчайшая точная запись)
- прочие объекты: сначала str(value); если текст не по грамматике,
  то __index__ (int) или __float__ (float)

Грамматика (ASCII, маркер экспоненты без учёта регистра):
    [+-]? (digits | (?=.digit)) (. digits?)? (e [+-]? digits)?

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в Representation (NOT_NUM)
2. parse_numeric никогда не бросает исключений (None для нечисел)
"""

import math
import operator
import re
from decimal import Decimal
from typing import Any, Optional

from decimalish.core.domain.errors import DecimalError, ErrorCode
from decimalish.core.domain.representation import (
    Representation,
    normalize_representation,
)

_DECIMAL_RE = re.compile(
    r"([-+])?([0-9]+|(?=\.[0-9]))(?:\.([0-9]+)?)?(?:[eE]([-+]?[0-9]+))?",
    re.ASCII,
)


# =============================================================================
# КОНВЕРСИЯ В ТЕКСТ
# =============================================================================


def _parse_text(text: str) -> Optional[Representation]:
    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        return None

    sign, integer, fractional, exponent = match.groups()
    digits = integer + (fractional or "")
    scale = int(exponent or 0) + len(integer) - 1

    return normalize_representation(-1 if sign == "-" else 1, digits, scale)


def _parse_int(value: Any) -> Optional[Representation]:
    # str(int) ограничен sys.get_int_max_str_digits, Decimal(int) нет
    return _parse_text(str(Decimal(operator.index(value))))


def _parse_float(value: float) -> Optional[Representation]:
    if not math.isfinite(value):
        return None
    return _parse_text(repr(value))


def parse_numeric(value: Any) -> Optional[Representation]:
    """
    Разбор любого числового значения без исключений.

    Args:
        value: Проверяемое значение

    Returns:
        Representation или None, если значение не является конечным числом
    """
    if isinstance(value, str):
        return _parse_text(value)
    if isinstance(value, bool):
        return _parse_text("1" if value else "0")
    if isinstance(value, int):
        return _parse_int(value)
    if isinstance(value, float):
        return _parse_float(value)
    if value is None:
        return None

    try:
        parsed = _parse_text(str(value))
        if parsed is not None:
            return parsed
        if hasattr(value, "__index__"):
            return _parse_int(value)
        if hasattr(value, "__float__"):
            return _parse_float(float(value))
    except (TypeError, ValueError, OverflowError):
        return None

    return None


def to_representation(value: Any) -> Representation:
    """
    Разбор числового значения с ошибкой для нечисел.

    Raises:
        DecimalError(NOT_NUM): Если значение не является конечным числом

    Examples:
        >>> to_representation("-1.23e4")
        Representation(sign=-1, digits='123', scale=4)
    """
    if isinstance(value, Representation):
        return value

    parsed = parse_numeric(value)
    if parsed is None:
        raise DecimalError(ErrorCode.NOT_NUM, value)
    return parsed


# =============================================================================
# ЦЕЛЫЕ ЗНАЧЕНИЯ
# =============================================================================


def representation_is_integer(rep: Representation) -> bool:
    """Целое ли значение (нет цифр после десятичной точки)"""
    return rep.scale + 1 >= rep.precision


def representation_to_int(rep: Representation) -> int:
    """Точное преобразование целого Representation в int"""
    if rep.is_zero:
        return 0
    sign = 0 if rep.sign > 0 else 1
    exponent = rep.scale - rep.precision + 1
    return int(Decimal((sign, tuple(map(int, rep.digits)), exponent)))


def expect_int(name: str, value: Any) -> int:
    """
    Валидация, что значение целое, и преобразование в int.

    Args:
        value: Проверяемое числовое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение как int

    Raises:
        DecimalError(NOT_INT): Если значение не числовое или не целое
    """
    parsed = parse_numeric(value)
    if parsed is None or not representation_is_integer(parsed):
        raise DecimalError(ErrorCode.NOT_INT, f"{name}: {value}")
    return representation_to_int(parsed)
