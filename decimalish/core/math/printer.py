"""
Printer — Representation → канонический текст

Две раскладки:
- fixed: десятичная точка на позиции scale + 1 от старшей цифры
- exponential: ровно одна цифра до точки, затем "e+<scale>" / "e<scale>"

Каноническая запись (format_representation) — fixed без дополнительных
нулей; для неё decimal(text) == text.
"""

from decimalish.core.domain.representation import Representation


def print_digits(sign: int, digits: str, print_precision: int, decimal_point: int) -> str:
    """
    Печать цифр с заданной позицией десятичной точки.

    Args:
        sign: Знак (-1 печатает "-")
        digits: Значащие цифры
        print_precision: Минимальное число печатаемых цифр (дополняется нулями справа)
        decimal_point: Позиция точки от старшей цифры

    Returns:
        Текст числа

    Examples:
        >>> print_digits(1, "123", 3, 1)
        '1.23'
        >>> print_digits(-1, "5", 1, -2)
        '-0.005'
        >>> print_digits(1, "12", 2, 4)
        '1200'
        >>> print_digits(1, "12", 5, 3)
        '120.00'
    """
    result = "-" if sign < 0 else ""

    if len(digits) < print_precision:
        digits += "0" * (print_precision - len(digits))

    if decimal_point < 1:
        return result + "0." + "0" * -decimal_point + digits
    if decimal_point < len(digits):
        return result + digits[:decimal_point] + "." + digits[decimal_point:]
    return result + digits + "0" * (decimal_point - len(digits))


def format_representation(rep: Representation) -> str:
    """
    Каноническая десятичная запись Representation.

    Examples:
        >>> format_representation(Representation(-1, "123", 4))
        '-12300'
        >>> format_representation(Representation(0, "", 0))
        '0'
    """
    if rep.is_zero:
        return "0"
    return print_digits(rep.sign, rep.digits, rep.precision, rep.scale + 1)


def format_exponent(scale: int) -> str:
    """Суффикс экспоненты: e+N для неотрицательных, e-N для отрицательных"""
    return f"e{scale}" if scale < 0 else f"e+{scale}"
