"""
Comparator — упорядочивание Representation с учётом знака и величины
"""

from decimalish.core.domain.representation import Representation


def compare_abs(a: Representation, b: Representation) -> int:
    """
    Сравнение абсолютных величин двух ненулевых нормализованных значений.

    Алгоритм:
        1. Разный scale → больше тот, у кого scale больше
        2. Посимвольное сравнение digits до длины более короткого
        3. Совпадение префикса → больше то, где больше цифр

    Returns:
        -1, 0 или 1
    """
    if a.scale != b.scale:
        return 1 if a.scale > b.scale else -1

    for digit_a, digit_b in zip(a.digits, b.digits):
        if digit_a != digit_b:
            return 1 if digit_a > digit_b else -1

    if a.precision == b.precision:
        return 0
    return 1 if a.precision > b.precision else -1


def compare(a: Representation, b: Representation) -> int:
    """
    Сравнение двух значений.

    Returns:
        1 если a > b, -1 если a < b, 0 если равны

    Examples:
        >>> compare(Representation(-1, "5", 0), Representation(0, "", 0))
        -1
    """
    if a == b:
        return 0
    if a.sign == 0:
        return -b.sign
    if b.sign == 0 or a.sign != b.sign:
        return a.sign
    return compare_abs(a, b) * a.sign
