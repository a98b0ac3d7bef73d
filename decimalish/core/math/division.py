"""
Division Engine — деление в столбик с частным и остатком

ИНВАРИАНТЫ (для любого режима округления):
1. dividend == divisor × quotient + remainder
2. |remainder| < |divisor| (при неотрицательной целевой точности частного)

Алгоритм:
    Остаток — изменяемый буфер цифр, инициализированный цифрами делимого
    (дополненный нулями до длины делителя). Для каждой позиции частного
    считается, сколько раз (0-9) делитель вычитается из остатка на текущем
    выравнивании; счётчик становится очередной цифрой частного.
    Остановка: достигнута целевая точность, либо остаток нулевой и все
    цифры делимого использованы.

    Если остаток ненулевой, Rounding Engine решает, округлять ли частное
    вверх: половинные режимы сравнивают 2×|remainder| с |divisor|×10^u,
    где u — вес последней цифры частного. Округление вверх добавляет
    единицу к младшей цифре частного и вычитает sign_a×|divisor|×10^u
    из остатка.
"""

import logging

from decimalish.core.domain.errors import DecimalError, DivisionByZero, ErrorCode
from decimalish.core.domain.representation import (
    ZERO,
    Representation,
    normalize_representation,
)
from decimalish.core.domain.rounding import ResolvedRules, RoundingMode
from decimalish.core.math.arithmetic import absolute, add, multiply, subtract
from decimalish.core.math.comparator import compare
from decimalish.core.math.printer import format_representation
from decimalish.core.math.rounding_engine import reduce_mode, rounding_precision

logger = logging.getLogger(__name__)

TWO = Representation(1, "2", 0)


def _divisor_fits(remainder: list[int], divisor: list[int], place: int, msd: int) -> bool:
    """Можно ли вычесть делитель из остатка на позиции place"""
    # Ненулевая цифра левее окна: остаток заведомо больше делителя
    if msd < place:
        return True
    for i, digit in enumerate(divisor):
        difference = remainder[place + i] - digit
        if difference:
            return difference > 0
    return True


def _subtract_at(remainder: list[int], divisor: list[int], place: int) -> None:
    """Вычитание делителя из остатка на позиции place (с заёмом)"""
    borrow = 0
    for i in range(len(divisor) - 1, -1, -1):
        difference = remainder[place + i] - divisor[i] - borrow
        borrow = 1 if difference < 0 else 0
        remainder[place + i] = difference + 10 * borrow
    if borrow:
        remainder[place - 1] -= 1


def div_rem(
    dividend: Representation,
    divisor: Representation,
    rules: ResolvedRules,
) -> tuple[Representation, Representation]:
    """
    Деление с частным и остатком.

    Args:
        dividend: Делимое
        divisor: Делитель
        rules: Разрешённые правила округления частного

    Returns:
        (quotient, remainder)

    Raises:
        DivisionByZero: divisor == 0
        DecimalError(INEXACT): режим exact и деление неточное

    Examples:
        10 / 3, euclidean  → (3, 1)
        -10 / 3, euclidean → (-4, 2)
    """
    if divisor.is_zero:
        raise DivisionByZero(
            f"{format_representation(dividend)}/{format_representation(divisor)}"
        )

    # Ноль делится без остатка при любых правилах
    if dividend.is_zero:
        return ZERO, ZERO

    sign = dividend.sign * divisor.sign
    scale = dividend.scale - divisor.scale
    target = rounding_precision(rules, scale)

    precision_a = dividend.precision
    precision_b = divisor.precision
    divisor_digits = [int(d) for d in divisor.digits]
    remainder = [int(d) for d in dividend.digits]
    remainder += [0] * (max(precision_a, precision_b) - precision_a)

    quotient: list[int] = []
    msd = 0
    place = 0
    digit = 0

    while place < target and (
        place <= precision_a - precision_b or msd < place + precision_b - 1
    ):
        if len(remainder) < place + precision_b:
            remainder.append(0)
            while msd < len(remainder) and remainder[msd] == 0:
                msd += 1

        digit = 0
        while _divisor_fits(remainder, divisor_digits, place, msd):
            _subtract_at(remainder, divisor_digits, place)
            digit += 1
            while msd < len(remainder) and remainder[msd] == 0:
                msd += 1

        # При заданной precision ведущий ноль частного не считается значащей цифрой
        if place == 0 and digit == 0 and rules.precision is not None:
            target += 1

        quotient.append(digit)
        place += 1

    quotient_rep = normalize_representation(sign, "".join(map(str, quotient)), scale)
    remainder_rep = normalize_representation(
        dividend.sign, "".join(map(str, remainder)), dividend.scale
    )

    if remainder_rep.is_zero:
        return quotient_rep, remainder_rep

    mode = reduce_mode(rules.mode, sign, dividend.sign, digit)
    if mode is RoundingMode.EXACT:
        raise DecimalError(
            ErrorCode.INEXACT,
            f"{format_representation(dividend)}/{format_representation(divisor)}",
        )

    # Вес последней цифры частного (target может быть <= 0, тогда цифр нет)
    unit_scale = scale - target + 1
    step = Representation(1, divisor.digits, divisor.scale + unit_scale)

    if mode is RoundingMode.HALF_UP or mode is RoundingMode.HALF_DOWN:
        midpoint = compare(multiply(TWO, absolute(remainder_rep)), step)
        round_up = midpoint >= 0 if mode is RoundingMode.HALF_UP else midpoint > 0
    else:
        round_up = mode is RoundingMode.UP

    logger.debug(
        "division rounding: mode=%s reduced=%s round_up=%s",
        rules.mode.value,
        mode.value,
        round_up,
    )

    if round_up:
        quotient_rep = add(quotient_rep, Representation(sign, "1", unit_scale))
        remainder_rep = subtract(
            remainder_rep, Representation(dividend.sign, step.digits, step.scale)
        )

    return quotient_rep, remainder_rep
