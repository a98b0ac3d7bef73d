"""
Rounding — режимы и правила округления

Модуль описывает конфигурацию округления, которую пользователь передаёт
явно в каждый вызов (глобального состояния нет):
- RoundingMode: закрытое перечисление из 11 режимов
- RoundingRules: immutable pydantic модель {places | precision, mode}
- ResolvedRules: правила после применения значений по умолчанию операции
- RoundingDefaults: неизменяемые значения по умолчанию для каждой операции

ВАЛИДАЦИЯ:
1. places и precision взаимоисключающие → NOT_BOTH
2. places и precision должны быть целыми → NOT_INT
3. mode должен быть одним из RoundingMode → NOT_MODE
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Optional, Union

from pydantic import BaseModel, ValidationInfo, field_validator, model_validator

from decimalish.core.domain.errors import DecimalError, ErrorCode
from decimalish.core.math.parser import expect_int


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления"""

    UP = "up"  # от нуля
    DOWN = "down"  # к нулю (усечение)
    CEIL = "ceil"  # к +Infinity
    FLOOR = "floor"  # к -Infinity
    EUCLIDEAN = "euclidean"  # остаток деления всегда неотрицательный; для round() = floor
    HALF_UP = "half up"
    HALF_DOWN = "half down"
    HALF_CEIL = "half ceil"
    HALF_FLOOR = "half floor"
    HALF_EVEN = "half even"
    EXACT = "exact"  # INEXACT, если округление потеряло бы цифры

    @classmethod
    def parse(cls, value: Any) -> "RoundingMode":
        """
        Разбор режима по значению ("half even") или имени ("HALF_EVEN").

        Raises:
            DecimalError(NOT_MODE): Если режим неизвестен
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                member = cls.__members__.get(value.upper())
                if member is not None:
                    return member
        raise DecimalError(ErrorCode.NOT_MODE, value)


# =============================================================================
# ROUNDING RULES MODEL
# =============================================================================


class RoundingRules(BaseModel):
    """
    Правила округления, переданные пользователем.

    Immutable модель (frozen=True). Принимает любые числовые значения для
    places/precision ("2", 2.0, True...) и приводит их к int.

    Examples:
        >>> RoundingRules(places="2", mode="half up")
        RoundingRules(places=2, precision=None, mode=<RoundingMode.HALF_UP: 'half up'>)
    """

    places: Optional[int] = None
    precision: Optional[int] = None
    mode: Optional[RoundingMode] = None

    model_config = {"frozen": True}  # Immutable

    @field_validator("places", "precision", mode="before")
    @classmethod
    def validate_whole(cls, v: Any, info: ValidationInfo) -> Optional[int]:
        """places/precision должны быть целыми числами"""
        if v is None:
            return None
        return expect_int(info.field_name, v)

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> Optional[RoundingMode]:
        if v is None:
            return None
        return RoundingMode.parse(v)

    @model_validator(mode="after")
    def validate_exclusive(self) -> "RoundingRules":
        """Можно задать только одно из places и precision"""
        if self.places is not None and self.precision is not None:
            raise DecimalError(
                ErrorCode.NOT_BOTH,
                f"places: {self.places}, precision: {self.precision}",
            )
        return self


RulesLike = Union[RoundingRules, Mapping[str, Any], None]


# =============================================================================
# DEFAULTS (CONFIG)
# =============================================================================


@dataclass(frozen=True)
class RoundingDefaults:
    """Значения по умолчанию одной операции.

    precision=None означает округление до places=0 (целого).
    """

    mode: RoundingMode
    precision: Optional[int] = None


# Число значащих цифр деления по умолчанию (IEEE 754 decimal128)
DEFAULT_DIVISION_PRECISION: Final[int] = 34

# Дополнительные цифры в итерациях Ньютона для sqrt
SQRT_GUARD_DIGITS: Final[int] = 4

DIV_DEFAULTS: Final[RoundingDefaults] = RoundingDefaults(
    RoundingMode.HALF_EVEN, DEFAULT_DIVISION_PRECISION
)
DIV_REM_DEFAULTS: Final[RoundingDefaults] = RoundingDefaults(RoundingMode.DOWN)
MOD_DEFAULTS: Final[RoundingDefaults] = RoundingDefaults(RoundingMode.FLOOR)
ROUND_DEFAULTS: Final[RoundingDefaults] = RoundingDefaults(RoundingMode.HALF_EVEN)
SQRT_DEFAULTS: Final[RoundingDefaults] = RoundingDefaults(
    RoundingMode.HALF_EVEN, DEFAULT_DIVISION_PRECISION
)


# =============================================================================
# RESOLVED RULES
# =============================================================================


@dataclass(frozen=True)
class ResolvedRules:
    """Правила после применения RoundingDefaults.

    Ровно одно из places/precision задано, либо оба None (= places 0).
    """

    mode: RoundingMode
    places: Optional[int] = None
    precision: Optional[int] = None


def resolve_rules(rules: RulesLike, defaults: RoundingDefaults) -> ResolvedRules:
    """
    Валидация пользовательских правил и применение значений по умолчанию.

    Args:
        rules: None, mapping ({"places": 2, "mode": "up"}) или RoundingRules
        defaults: Значения по умолчанию операции

    Returns:
        ResolvedRules

    Raises:
        DecimalError: NOT_BOTH, NOT_INT, NOT_MODE
    """
    if rules is None:
        model = RoundingRules()
    elif isinstance(rules, RoundingRules):
        model = rules
    elif isinstance(rules, Mapping):
        model = RoundingRules.model_validate(dict(rules))
    else:
        raise TypeError(f"rules must be a mapping or RoundingRules, got {type(rules).__name__}")

    mode = model.mode if model.mode is not None else defaults.mode

    if model.places is not None:
        return ResolvedRules(mode=mode, places=model.places)

    precision = model.precision if model.precision is not None else defaults.precision
    return ResolvedRules(mode=mode, precision=precision)
