"""
Arithmetic Core — точные сложение, вычитание и умножение

Все операции работают над нормализованными Representation и возвращают
нормализованные Representation. Округления нет: результат всегда точный.

АЛГОРИТМЫ:
- add: выравнивание по младшему разряду, поразрядное сложение с переносом
  (одинаковые знаки) или вычитание меньшего модуля из большего с заёмом
- multiply: школьное умножение O(precision_a × precision_b),
  scale = scale_a + scale_b + 1
"""

from decimalish.core.domain.representation import (
    ZERO,
    Representation,
    normalize_representation,
)
from decimalish.core.math.comparator import compare_abs


def _aligned_digits(rep: Representation, high: int, low: int) -> list[int]:
    """Цифры rep для степеней десяти от high до low включительно"""
    leading = high - rep.scale
    trailing = (rep.scale - rep.precision + 1) - low
    return [0] * leading + [int(d) for d in rep.digits] + [0] * trailing


def negate(rep: Representation) -> Representation:
    """Смена знака (ноль остаётся нулём)"""
    return Representation(-rep.sign, rep.digits, rep.scale)


def absolute(rep: Representation) -> Representation:
    """Абсолютная величина"""
    if rep.sign >= 0:
        return rep
    return Representation(1, rep.digits, rep.scale)


def add(a: Representation, b: Representation) -> Representation:
    """
    Точная сумма a + b.

    Examples:
        >>> add(Representation(1, "99999", 2), Representation(1, "1", -2))
        Representation(sign=1, digits='1', scale=3)
    """
    # Аддитивная единица: дальше оба операнда ненулевые
    if a.is_zero:
        return b
    if b.is_zero:
        return a

    high = max(a.scale, b.scale)
    low = min(a.scale - a.precision + 1, b.scale - b.precision + 1)
    digits_a = _aligned_digits(a, high, low)
    digits_b = _aligned_digits(b, high, low)
    result = [0] * len(digits_a)

    if a.sign == b.sign:
        sign = a.sign
        carry = 0
        for i in range(len(result) - 1, -1, -1):
            total = digits_a[i] + digits_b[i] + carry
            result[i] = total % 10
            carry = total // 10
        if carry:
            result.insert(0, carry)
            high += 1
    else:
        direction = compare_abs(a, b)
        if direction == 0:
            return ZERO
        if direction < 0:
            digits_a, digits_b = digits_b, digits_a
        sign = a.sign * direction
        borrow = 0
        for i in range(len(result) - 1, -1, -1):
            difference = digits_a[i] - digits_b[i] - borrow
            borrow = 1 if difference < 0 else 0
            result[i] = difference + 10 * borrow

    return normalize_representation(sign, "".join(map(str, result)), high)


def subtract(a: Representation, b: Representation) -> Representation:
    """Точная разность a - b = a + (-b)"""
    return add(a, negate(b))


def multiply(a: Representation, b: Representation) -> Representation:
    """
    Точное произведение a × b (школьный алгоритм).

    Examples:
        >>> multiply(Representation(1, "15", 0), Representation(-1, "2", 0))
        Representation(sign=-1, digits='3', scale=0)
    """
    if a.is_zero or b.is_zero:
        return ZERO

    digits_a = [int(d) for d in a.digits]
    digits_b = [int(d) for d in b.digits]
    result = [0] * (len(digits_a) + len(digits_b))

    for i in range(len(digits_a) - 1, -1, -1):
        carry = 0
        for j in range(len(digits_b) - 1, -1, -1):
            total = result[i + j + 1] + digits_a[i] * digits_b[j] + carry
            result[i + j + 1] = total % 10
            carry = total // 10
        result[i] = carry

    return normalize_representation(
        a.sign * b.sign,
        "".join(map(str, result)),
        a.scale + b.scale + 1,
    )
