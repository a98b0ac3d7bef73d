"""
Errors — таксономия ошибок decimalish

Все ошибки детерминированы и синхронны: каждая несёт стабильный
машиночитаемый код (ErrorCode) и локальна для вызова, который её породил.
Частичных результатов нет, повторять вызов бессмысленно.

Иерархия:
    ArithmeticError
    └── DecimalError (code, detail)
        └── DivisionByZero (также ZeroDivisionError)

DecimalError не наследует ValueError, поэтому pydantic не оборачивает
ошибки валидаторов RoundingRules в ValidationError.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Машиночитаемый код ошибки"""

    NOT_NUM = "NOT_NUM"  # значение не является конечным числом
    NOT_INT = "NOT_INT"  # ожидалось целое (exponent, places, precision, сдвиг точки)
    NOT_POS = "NOT_POS"  # ожидалось неотрицательное (показатель pow)
    NOT_MODE = "NOT_MODE"  # неизвестный режим округления
    NOT_BOTH = "NOT_BOTH"  # одновременно заданы places и precision
    INEXACT = "INEXACT"  # режим exact или строгая конверсия теряют информацию
    DIV_ZERO = "DIV_ZERO"  # деление на ноль
    SQRT_NEG = "SQRT_NEG"  # квадратный корень из отрицательного


class DecimalError(ArithmeticError):
    """
    Базовая ошибка decimalish.

    Attributes:
        code: ErrorCode
        detail: Текстовое описание аргументов, вызвавших ошибку
    """

    def __init__(self, code: ErrorCode, detail: object = ""):
        self.code = ErrorCode(code)
        self.detail = str(detail)
        super().__init__(f"{self.code.value}: {self.detail}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value!r}, detail={self.detail!r})"


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Деление (или остаток) на ноль"""

    def __init__(self, detail: object = ""):
        super().__init__(ErrorCode.DIV_ZERO, detail)
