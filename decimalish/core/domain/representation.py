"""
Representation — нормализованное внутреннее представление decimal

Значение хранится как тройка (sign, digits, scale):
- sign: -1, 0 или 1
- digits: значащие цифры без ведущих и хвостовых нулей
- scale: степень десяти первой цифры (значение = d.ddd × 10^scale)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign == 0 ⇔ digits == "" ⇔ scale == 0 ⇔ precision == 0
2. NaN, Infinity и отрицательный ноль непредставимы
3. normalize_representation — единственный источник легальных значений

Примеры:
    "-1.23e4"  → Representation(-1, "123", 4)
    "0.00120"  → Representation(1, "12", -3)
    "0"        → Representation(0, "", 0)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Representation:
    """
    Нормализованная тройка (sign, digits, scale).

    Immutable (frozen=True); равенство и хэш структурные, поэтому два
    равных числа всегда дают равные представления.
    """

    sign: int
    digits: str
    scale: int

    @property
    def precision(self) -> int:
        """Количество значащих цифр"""
        return len(self.digits)

    @property
    def is_zero(self) -> bool:
        return self.sign == 0

    def as_tuple(self) -> tuple[int, str, int, int]:
        """Кортеж (sign, digits, scale, precision) для внешних расширений"""
        return (self.sign, self.digits, self.scale, self.precision)


ZERO: Representation = Representation(0, "", 0)
ONE: Representation = Representation(1, "1", 0)


def normalize_representation(sign: int, digits: str, scale: int) -> Representation:
    """
    Канонизация тройки (sign, digits, scale).

    Ведущие нули удаляются с уменьшением scale, хвостовые нули удаляются
    без изменения scale. Если все цифры нулевые, возвращается ZERO.
    Идемпотентна: нормализация уже нормализованного значения ничего не меняет.

    Args:
        sign: Знак (-1, 0, 1); sign == 0 всегда даёт ZERO
        digits: Строка десятичных цифр (может содержать лишние нули)
        scale: Степень десяти первой цифры digits

    Returns:
        Нормализованное Representation

    Examples:
        >>> normalize_representation(-1, "0012300", 2)
        Representation(sign=-1, digits='123', scale=0)
        >>> normalize_representation(1, "000", 5)
        Representation(sign=0, digits='', scale=0)
    """
    stripped = digits.lstrip("0")
    if not stripped or sign == 0:
        return ZERO

    scale -= len(digits) - len(stripped)
    stripped = stripped.rstrip("0")

    return Representation(-1 if sign < 0 else 1, stripped, scale)
