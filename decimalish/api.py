"""
Façade API — публичные функции decimalish

Все функции чистые и синхронные: принимают любые числовые значения
(str, int, float, bool или объект с __index__/__float__) и возвращают
каноническую десятичную строку (decimal), bool или int.

Функции, совпадающие по имени со встроенными (abs, pow, round, min, max, int),
доступны как атрибуты пакета, но не входят в __all__. Внутри модуля
встроенные функции вызываются через builtins.

Примеры:
    >>> add("0.1", "0.2")
    '0.3'
    >>> div(1, 3, {"precision": 5})
    '0.33333'
    >>> div_rem(-10, 3, {"mode": "euclidean"})
    ('-4', '2')
"""

import builtins
import math
from typing import Any

import jsonschema

from decimalish.core.contracts.validators import validate_representation
from decimalish.core.domain.errors import DecimalError, ErrorCode
from decimalish.core.domain.representation import Representation, normalize_representation
from decimalish.core.domain.rounding import (
    DIV_DEFAULTS,
    DIV_REM_DEFAULTS,
    MOD_DEFAULTS,
    ROUND_DEFAULTS,
    SQRT_DEFAULTS,
    ResolvedRules,
    RoundingDefaults,
    RoundingMode,
    RulesLike,
    resolve_rules,
)
from decimalish.core.math import arithmetic, comparator, division
from decimalish.core.math import power as power_engine
from decimalish.core.math import rounding_engine
from decimalish.core.math.parser import (
    expect_int,
    parse_numeric,
    representation_is_integer,
    to_representation,
)
from decimalish.core.math.printer import (
    format_exponent,
    format_representation,
    print_digits,
)

# Числовое значение: str, int, float, bool или объект с __index__/__float__
Numeric = Any


# =============================================================================
# КОНСТРУИРОВАНИЕ И ПРОВЕРКИ
# =============================================================================


def decimal(value: Numeric) -> str:
    """
    Каноническая десятичная запись значения.

    Raises:
        DecimalError(NOT_NUM): Значение не является конечным числом

    Examples:
        >>> decimal("-00012.3400e+2")
        '-1234'
        >>> decimal(1e-7)
        '0.0000001'
    """
    return format_representation(to_representation(value))


def is_decimal(value: Any) -> bool:
    """True только для строк, уже находящихся в канонической записи"""
    if not isinstance(value, str):
        return False
    parsed = parse_numeric(value)
    return parsed is not None and format_representation(parsed) == value


def is_numeric(value: Any) -> bool:
    """Можно ли привести значение к decimal (никогда не бросает исключений)"""
    return parse_numeric(value) is not None


def is_integer(value: Any) -> bool:
    """Числовое ли значение без дробной части"""
    parsed = parse_numeric(value)
    return parsed is not None and representation_is_integer(parsed)


def deconstruct(value: Numeric) -> tuple[int, str, int, int]:
    """
    Нормализованное представление значения для авторов расширений.

    Returns:
        (sign, digits, scale, precision)

    Examples:
        >>> deconstruct(-1.23e4)
        (-1, '123', 4, 3)
    """
    return to_representation(value).as_tuple()


def construct(sign: int, digits: str, scale: int) -> str:
    """
    Сборка decimal из (возможно ненормализованной) тройки.

    Входные данные проверяются по JSON Schema контракту representation.json.

    Args:
        sign: -1, 0 или 1 (0 всегда даёт "0")
        digits: Строка цифр, допускаются ведущие и хвостовые нули
        scale: Степень десяти первой цифры digits

    Returns:
        Каноническая запись

    Raises:
        DecimalError(NOT_NUM): Тройка не соответствует контракту

    Examples:
        >>> construct(-1, "0012300", 0)
        '-0.0123'
    """
    data = {"sign": sign, "digits": digits, "scale": scale}
    try:
        validate_representation(data)
    except jsonschema.ValidationError as e:
        raise DecimalError(ErrorCode.NOT_NUM, e.message) from e

    return format_representation(
        normalize_representation(builtins.int(sign), digits, builtins.int(scale))
    )


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Numeric, b: Numeric) -> str:
    """Точная сумма a + b"""
    return format_representation(
        arithmetic.add(to_representation(a), to_representation(b))
    )


def sub(a: Numeric, b: Numeric) -> str:
    """Точная разность a - b"""
    return format_representation(
        arithmetic.subtract(to_representation(a), to_representation(b))
    )


def mul(a: Numeric, b: Numeric) -> str:
    """Точное произведение a × b"""
    return format_representation(
        arithmetic.multiply(to_representation(a), to_representation(b))
    )


def _div_rem(
    dividend: Numeric,
    divisor: Numeric,
    rules: RulesLike,
    defaults: RoundingDefaults,
) -> tuple[Representation, Representation]:
    return division.div_rem(
        to_representation(dividend),
        to_representation(divisor),
        resolve_rules(rules, defaults),
    )


def div(dividend: Numeric, divisor: Numeric, rules: RulesLike = None) -> str:
    """
    Деление с округлением.

    По умолчанию результат округляется до 34 значащих цифр (half even).

    Args:
        dividend: Делимое
        divisor: Делитель
        rules: Правила округления ({"places" | "precision", "mode"})

    Raises:
        DivisionByZero: divisor == 0
        DecimalError(INEXACT): mode "exact" и деление неточное

    Examples:
        >>> div(1, 3)
        '0.3333333333333333333333333333333333'
        >>> div(1, 8, {"places": 2})
        '0.12'
    """
    quotient, _ = _div_rem(dividend, divisor, rules, DIV_DEFAULTS)
    return format_representation(quotient)


def div_rem(
    dividend: Numeric,
    divisor: Numeric,
    rules: RulesLike = None,
) -> tuple[str, str]:
    """
    Частное и остаток (по умолчанию целое частное, усечение к нулю).

    Для любых правил: dividend == divisor × quotient + remainder.

    Examples:
        >>> div_rem(10, -3)
        ('-3', '1')
        >>> div_rem(1, 3, {"precision": 1})
        ('0.3', '0.1')
    """
    quotient, remainder = _div_rem(dividend, divisor, rules, DIV_REM_DEFAULTS)
    return format_representation(quotient), format_representation(remainder)


def div_int(dividend: Numeric, divisor: Numeric, rules: RulesLike = None) -> str:
    """Целое частное (усечение к нулю по умолчанию)"""
    quotient, _ = _div_rem(dividend, divisor, rules, DIV_REM_DEFAULTS)
    return format_representation(quotient)


def rem(dividend: Numeric, divisor: Numeric, rules: RulesLike = None) -> str:
    """
    Остаток усечённого деления; знак совпадает со знаком делимого.

    Аналог оператора % для целых в C/JavaScript (не Python).
    """
    _, remainder = _div_rem(dividend, divisor, rules, DIV_REM_DEFAULTS)
    return format_representation(remainder)


def mod(a: Numeric, b: Numeric, rules: RulesLike = None) -> str:
    """
    Остаток деления с округлением к -Infinity; знак совпадает со знаком b.

    Аналог оператора % Python.

    Examples:
        >>> mod(-10, 3)
        '2'
        >>> mod(10, -3)
        '-2'
    """
    _, remainder = _div_rem(a, b, rules, MOD_DEFAULTS)
    return format_representation(remainder)


def pow(base: Numeric, exponent: Numeric) -> str:
    """
    Возведение в неотрицательную целую степень (точно).

    Raises:
        DecimalError(NOT_INT): exponent не целый
        DecimalError(NOT_POS): exponent < 0
    """
    power = expect_int("exponent", exponent)
    if power < 0:
        raise DecimalError(ErrorCode.NOT_POS, f"exponent: {exponent}")
    return format_representation(power_engine.power(to_representation(base), power))


def sqrt(value: Numeric, rules: RulesLike = None) -> str:
    """
    Квадратный корень (по умолчанию 34 значащие цифры, half even).

    Raises:
        DecimalError(SQRT_NEG): value < 0

    Examples:
        >>> sqrt("2", {"precision": 10})
        '1.414213562'
    """
    return format_representation(
        power_engine.square_root(
            to_representation(value), resolve_rules(rules, SQRT_DEFAULTS)
        )
    )


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def cmp(a: Numeric, b: Numeric) -> int:
    """
    Сравнение: 1 если a > b, -1 если a < b, 0 если равны.

    Examples:
        >>> cmp("1.0", 1)
        0
    """
    return comparator.compare(to_representation(a), to_representation(b))


def eq(a: Numeric, b: Numeric) -> bool:
    return cmp(a, b) == 0


def gt(a: Numeric, b: Numeric) -> bool:
    return cmp(a, b) == 1


def gte(a: Numeric, b: Numeric) -> bool:
    return cmp(a, b) != -1


def lt(a: Numeric, b: Numeric) -> bool:
    return cmp(a, b) == -1


def lte(a: Numeric, b: Numeric) -> bool:
    return cmp(a, b) != 1


def _extremum(name: str, values: tuple, direction: int) -> str:
    if not values:
        raise DecimalError(ErrorCode.NOT_NUM, f"{name}()")

    result = to_representation(values[0])
    for value in values[1:]:
        candidate = to_representation(value)
        if comparator.compare(candidate, result) == direction:
            result = candidate
    return format_representation(result)


def max(*values: Numeric) -> str:
    """Наибольшее из значений"""
    return _extremum("max", values, 1)


def min(*values: Numeric) -> str:
    """Наименьшее из значений"""
    return _extremum("min", values, -1)


def clamp(value: Numeric, low: Numeric, high: Numeric) -> str:
    """value, ограниченное диапазоном [low, high]"""
    return min(high, max(low, value))


# =============================================================================
# ВЕЛИЧИНА
# =============================================================================


def abs(value: Numeric) -> str:
    return format_representation(arithmetic.absolute(to_representation(value)))


def neg(value: Numeric) -> str:
    return format_representation(arithmetic.negate(to_representation(value)))


def sign(value: Numeric) -> int:
    """Знак: -1, 0 или 1"""
    return to_representation(value).sign


def places(value: Numeric) -> int:
    """
    Число цифр после десятичной точки.

    Examples:
        >>> places("123.456")
        3
        >>> places("1.2e5")
        0
    """
    rep = to_representation(value)
    return builtins.max(rep.precision - rep.scale - 1, 0)


def precision(value: Numeric) -> int:
    """Число значащих цифр"""
    return to_representation(value).precision


def scale(value: Numeric) -> int:
    """Степень десяти старшей значащей цифры (экспонента в научной записи)"""
    return to_representation(value).scale


exponent = scale


def move_point(value: Numeric, places: Numeric) -> str:
    """
    Сдвиг десятичной точки вправо (places > 0) или влево (places < 0).

    Эквивалент умножения на 10^places, но без арифметики.

    Raises:
        DecimalError(NOT_INT): places не целый

    Examples:
        >>> move_point("1.5", 3)
        '1500'
    """
    rep = to_representation(value)
    return format_representation(
        normalize_representation(
            rep.sign, rep.digits, rep.scale + expect_int("places", places)
        )
    )


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_rem(value: Numeric, rules: RulesLike = None) -> tuple[str, str]:
    """
    Округление с остатком: rounded + remainder == value.

    По умолчанию округляет до целого (places=0) в режиме half even.

    Examples:
        >>> round_rem("12.345", {"places": 1})
        ('12.3', '0.045')
    """
    rounded, remainder = rounding_engine.round_rem(
        to_representation(value), resolve_rules(rules, ROUND_DEFAULTS)
    )
    return format_representation(rounded), format_representation(remainder)


def round(value: Numeric, rules: RulesLike = None) -> str:
    """
    Округление по правилам (по умолчанию до целого, half even).

    Raises:
        DecimalError(INEXACT): mode "exact" и отбрасываются ненулевые цифры
        DecimalError(NOT_BOTH | NOT_INT | NOT_MODE): некорректные правила

    Examples:
        >>> round(2.5)
        '2'
        >>> round("1.005", {"places": 2, "mode": "half up"})
        '1.01'
        >>> round(99, {"places": -2})
        '100'
    """
    rounded, _ = round_rem(value, rules)
    return rounded


def floor(value: Numeric) -> str:
    """Округление к -Infinity до целого"""
    return round(value, {"mode": RoundingMode.FLOOR})


def ceil(value: Numeric) -> str:
    """Округление к +Infinity до целого"""
    return round(value, {"mode": RoundingMode.CEIL})


def trunc(value: Numeric) -> str:
    """Целая часть (усечение к нулю)"""
    return round(value, {"mode": RoundingMode.DOWN})


int = trunc


def int_frac(value: Numeric) -> tuple[str, str]:
    """
    Целая и дробная части; обе имеют знак value.

    Examples:
        >>> int_frac("-100.001")
        ('-100', '-0.001')
    """
    return round_rem(value, {"mode": RoundingMode.DOWN})


# =============================================================================
# ФОРМАТИРОВАНИЕ И КОНВЕРСИЯ
# =============================================================================


def to_number(value: Numeric, exact: bool = True) -> float:
    """
    Конверсия в float.

    Args:
        value: Числовое значение
        exact: Запретить потерю точности (по умолчанию True)

    Raises:
        DecimalError(INEXACT): exact=True и float не воспроизводит значение;
            при любом exact, если значение вне диапазона float (inf не
            возвращается)

    Examples:
        >>> to_number("0.1")
        0.1
        >>> to_number("12345678901234567890", exact=False)
        1.2345678901234567e+19
    """
    canonical = decimal(value)
    number = float(canonical)

    if not math.isfinite(number):
        raise DecimalError(ErrorCode.INEXACT, f"to_number({canonical})")

    if exact:
        restored = parse_numeric(number)
        if format_representation(restored) != canonical:
            raise DecimalError(ErrorCode.INEXACT, f"to_number({canonical})")

    return number


def to_string(value: Numeric) -> str:
    """Каноническая запись (синоним decimal)"""
    return decimal(value)


def _format(value: Numeric, rules: RulesLike, exponential: bool) -> str:
    rep = to_representation(value)

    if rules is None:
        print_precision = rep.precision
    else:
        resolved = resolve_rules(rules, ROUND_DEFAULTS)
        # В научной записи places отсчитываются от единственной цифры до точки
        if exponential and resolved.places is not None:
            resolved = ResolvedRules(mode=resolved.mode, precision=resolved.places + 1)
        rep, _ = rounding_engine.round_rem(rep, resolved)
        print_precision = rounding_engine.rounding_precision(resolved, rep.scale)

    if exponential:
        return print_digits(rep.sign, rep.digits, print_precision, 1) + format_exponent(
            rep.scale
        )
    return print_digits(rep.sign, rep.digits, print_precision, rep.scale + 1)


def to_fixed(value: Numeric, rules: RulesLike = None) -> str:
    """
    Запись без экспоненты с округлением и дополнением нулями.

    Examples:
        >>> to_fixed("1.5", {"places": 3})
        '1.500'
        >>> to_fixed("123456", {"precision": 2})
        '120000'
    """
    return _format(value, rules, exponential=False)


def to_exponential(value: Numeric, rules: RulesLike = None) -> str:
    """
    Научная запись: одна цифра до точки и экспонента.

    places задаёт число цифр после точки мантиссы.

    Examples:
        >>> to_exponential("123.456")
        '1.23456e+2'
        >>> to_exponential("0.00123456", {"places": 2})
        '1.23e-3'
        >>> to_exponential("0")
        '0e+0'
    """
    return _format(value, rules, exponential=True)
