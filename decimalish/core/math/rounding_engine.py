"""
Rounding Engine — применение правил округления

Функции:
- rounding_precision: целевое число значащих цифр для значения данного scale
- reduce_mode: сведение 11 режимов к пяти {UP, DOWN, HALF_UP, HALF_DOWN, EXACT},
  применимым к абсолютной величине
- round_rem: округление с остатком (rounded + remainder == value)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль всегда округляется в ноль (даже в режиме exact)
2. exact → INEXACT, если отбрасываемые цифры ненулевые
3. rounded + remainder == value
"""

import logging

from decimalish.core.domain.errors import DecimalError, ErrorCode
from decimalish.core.domain.representation import (
    ZERO,
    Representation,
    normalize_representation,
)
from decimalish.core.domain.rounding import ResolvedRules, RoundingMode
from decimalish.core.math.arithmetic import add, subtract
from decimalish.core.math.printer import format_representation

logger = logging.getLogger(__name__)


# =============================================================================
# РАЗРЕШЕНИЕ ТОЧНОСТИ И РЕЖИМА
# =============================================================================


def rounding_precision(rules: ResolvedRules, scale: int) -> int:
    """
    Целевое число значащих цифр.

    precision задан → precision; иначе places + scale + 1 (places по умолчанию 0).
    Результат может быть нулевым или отрицательным: округление выше старшей цифры.
    """
    if rules.precision is not None:
        return rules.precision
    return (rules.places or 0) + scale + 1


def reduce_mode(
    mode: RoundingMode,
    sign: int,
    dividend_sign: int,
    last_digit: int,
) -> RoundingMode:
    """
    Сведение режима к одному из {UP, DOWN, HALF_UP, HALF_DOWN, EXACT}.

    Args:
        mode: Запрошенный режим
        sign: Знак округляемого значения (частного)
        dividend_sign: Знак делимого; для round() совпадает с sign,
            поэтому EUCLIDEAN становится синонимом FLOOR
        last_digit: Последняя сохраняемая цифра (чётность для HALF_EVEN)

    Returns:
        Режим для абсолютной величины
    """
    if mode is RoundingMode.CEIL:
        return RoundingMode.DOWN if sign < 0 else RoundingMode.UP
    if mode is RoundingMode.FLOOR:
        return RoundingMode.UP if sign < 0 else RoundingMode.DOWN
    if mode is RoundingMode.EUCLIDEAN:
        return RoundingMode.UP if dividend_sign < 0 else RoundingMode.DOWN
    if mode is RoundingMode.HALF_CEIL:
        return RoundingMode.HALF_DOWN if sign < 0 else RoundingMode.HALF_UP
    if mode is RoundingMode.HALF_FLOOR:
        return RoundingMode.HALF_UP if sign < 0 else RoundingMode.HALF_DOWN
    if mode is RoundingMode.HALF_EVEN:
        return RoundingMode.HALF_UP if last_digit % 2 else RoundingMode.HALF_DOWN
    return mode


def _digit_at(digits: str, index: int) -> int:
    """Цифра по индексу; вне строки (в том числе отрицательный индекс) — 0"""
    if 0 <= index < len(digits):
        return int(digits[index])
    return 0


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_rem(
    value: Representation,
    rules: ResolvedRules,
) -> tuple[Representation, Representation]:
    """
    Округление значения с остатком.

    Args:
        value: Округляемое значение
        rules: Разрешённые правила

    Returns:
        (rounded, remainder), где rounded + remainder == value

    Raises:
        DecimalError(INEXACT): Режим exact и отбрасываются ненулевые цифры

    Examples:
        99 с places=-1 (half even) → (100, -1)
    """
    if value.is_zero:
        return ZERO, ZERO

    sign, digits, scale = value.sign, value.digits, value.scale
    precision = rounding_precision(rules, scale)

    cut = max(precision, 0)
    rounded = normalize_representation(sign, digits[:cut], scale)
    remainder = normalize_representation(sign, digits[cut:], scale - cut)

    if precision >= value.precision:
        return rounded, remainder

    mode = reduce_mode(rules.mode, sign, sign, _digit_at(digits, precision - 1))

    if mode is RoundingMode.EXACT:
        raise DecimalError(ErrorCode.INEXACT, f"round {format_representation(value)}")

    rounding_digit = _digit_at(digits, precision)
    if mode is RoundingMode.HALF_UP:
        round_up = rounding_digit >= 5
    elif mode is RoundingMode.HALF_DOWN:
        round_up = rounding_digit > 5 or (
            rounding_digit == 5 and value.precision > precision + 1
        )
    else:
        round_up = mode is RoundingMode.UP

    if round_up:
        unit = Representation(sign, "1", scale - precision + 1)
        logger.debug("round up at 10^%d (mode=%s)", unit.scale, rules.mode.value)
        rounded = add(rounded, unit)
        remainder = subtract(remainder, unit)

    return rounded, remainder
