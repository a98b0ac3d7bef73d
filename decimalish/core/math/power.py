"""
Power & Root — целая степень и квадратный корень

- power: бинарное возведение в степень только через точное умножение
  (округления нет)
- square_root: метод Ньютона x' = 0.5 × (x + value / x) с начальным
  приближением из float sqrt, точной коррекцией усечения и финальным
  однократным округлением

Начальное приближение:
    Цифры корня не зависят от scale значения, если сохранить чётность
    экспоненты: к цифрам дописывается "0", когда экспонента целой части
    нечётна. Scale корня = scale // 2.
"""

import logging
import math

from decimalish.core.domain.errors import DecimalError, ErrorCode
from decimalish.core.domain.representation import (
    ONE,
    ZERO,
    Representation,
    normalize_representation,
)
from decimalish.core.domain.rounding import (
    SQRT_GUARD_DIGITS,
    ResolvedRules,
    RoundingMode,
)
from decimalish.core.math.arithmetic import absolute, add, multiply, subtract
from decimalish.core.math.comparator import compare
from decimalish.core.math.division import div_rem
from decimalish.core.math.parser import to_representation
from decimalish.core.math.printer import format_representation
from decimalish.core.math.rounding_engine import round_rem, rounding_precision

logger = logging.getLogger(__name__)

HALF = Representation(1, "5", -1)


def power(base: Representation, exponent: int) -> Representation:
    """
    Возведение в неотрицательную целую степень.

    Args:
        base: Основание
        exponent: Показатель (>= 0, проверяется вызывающим кодом)

    Returns:
        base ** exponent (точно)

    Examples:
        1.5 ** 3 → 3.375
    """
    result = ONE
    square = base

    while exponent:
        if exponent & 1:
            result = multiply(result, square)
        exponent >>= 1
        if exponent:
            square = multiply(square, square)

    return result


def _seed(value: Representation, iteration_precision: int) -> Representation:
    """Начальное приближение корня через float"""
    # Экспонента целого числа из digits: scale + 1 - precision
    padding = "" if (value.precision + value.scale) & 1 else "0"
    estimate = math.sqrt(float(value.digits + padding))

    if math.isfinite(estimate):
        digits = to_representation(estimate).digits
    else:
        digits = "5"

    return normalize_representation(
        1, digits[: max(iteration_precision, 1)], value.scale // 2
    )


def _square_compare(root: Representation, value: Representation) -> int:
    return compare(multiply(root, root), value)


def square_root(value: Representation, rules: ResolvedRules) -> Representation:
    """
    Квадратный корень с заданными правилами округления.

    Ньютон сходится до шага не больше единицы последнего разряда
    (target + 1 цифра), затем усечение уточняется точным возведением в
    квадрат, а неточный остаток помечается цифрой ниже усечения.
    Финальное округление поэтому совпадает с округлением точного корня
    при любом режиме.

    Args:
        value: Подкоренное значение
        rules: Разрешённые правила (по умолчанию 34 цифры, half even)

    Returns:
        Округлённый корень

    Raises:
        DecimalError(SQRT_NEG): value < 0
    """
    if value.sign < 0:
        raise DecimalError(ErrorCode.SQRT_NEG, format_representation(value))
    if value.is_zero:
        return ZERO

    # Первая цифра корня всегда в разряде scale // 2
    root_scale = value.scale // 2

    # places отсчитываются от scale результата, а не подкоренного значения
    iteration_precision = max(rounding_precision(rules, root_scale), 1)
    truncated_digits = iteration_precision + 1
    unit = Representation(1, "1", root_scale - truncated_digits + 1)
    division_rules = ResolvedRules(
        mode=RoundingMode.HALF_EVEN,
        precision=truncated_digits + SQRT_GUARD_DIGITS,
    )

    result = _seed(value, iteration_precision)
    iterations = 0

    while True:
        quotient, _ = div_rem(value, result, division_rules)
        previous, result = result, multiply(HALF, add(result, quotient))
        iterations += 1

        if compare(absolute(subtract(result, previous)), unit) <= 0:
            break

    logger.debug(
        "sqrt converged after %d iterations (precision=%d)",
        iterations,
        iteration_precision,
    )

    root, _ = round_rem(
        result, ResolvedRules(mode=RoundingMode.DOWN, places=-unit.scale)
    )
    while _square_compare(root, value) > 0:
        root = subtract(root, unit)
    while _square_compare(add(root, unit), value) <= 0:
        root = add(root, unit)

    if _square_compare(root, value) != 0:
        root = add(root, Representation(1, "1", unit.scale - 1))

    rounded, _ = round_rem(root, rules)
    return rounded
