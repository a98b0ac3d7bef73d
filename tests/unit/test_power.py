"""
Юнит-тесты для Power & Root

Проверяет:
1. Точное бинарное возведение в степень
2. Валидацию показателя (NOT_INT, NOT_POS)
3. Квадратный корень методом Ньютона с финальным округлением
"""

import decimal as stdlib_decimal
import logging
import random

import pytest

import decimalish
from decimalish import DecimalError, ErrorCode, RoundingMode
from decimalish.core.domain.representation import ONE, Representation
from decimalish.core.domain.rounding import ResolvedRules
from decimalish.core.math.parser import to_representation
from decimalish.core.math.power import power, square_root


class TestPow:
    """Тесты pow()"""

    def test_small_powers(self) -> None:
        assert decimalish.pow("1.5", 3) == "3.375"
        assert decimalish.pow(-2, 3) == "-8"
        assert decimalish.pow(-2, 2) == "4"
        assert decimalish.pow("0.1", 5) == "0.00001"

    def test_zero_exponent(self) -> None:
        assert decimalish.pow(2, 0) == "1"
        assert decimalish.pow(0, 0) == "1"

    def test_wide_square(self) -> None:
        assert (
            decimalish.pow("12345678901234567890", 2)
            == "152415787532388367501905199875019052100"
        )

    def test_numeric_exponent(self) -> None:
        assert decimalish.pow(2, "10") == "1024"
        assert decimalish.pow(2, 3.0) == "8"

    def test_negative_exponent(self) -> None:
        with pytest.raises(DecimalError, match="NOT_POS: exponent: -1") as exc_info:
            decimalish.pow(2, -1)
        assert exc_info.value.code is ErrorCode.NOT_POS

    def test_fractional_exponent(self) -> None:
        with pytest.raises(DecimalError, match=r"NOT_INT: exponent: 0\.5"):
            decimalish.pow(2, 0.5)

    def test_engine(self) -> None:
        assert power(to_representation(10), 3) == Representation(1, "1", 3)
        assert power(to_representation("-7.25"), 0) == ONE


class TestSqrt:
    """Тесты sqrt()"""

    def test_precision_10(self) -> None:
        assert decimalish.sqrt("2", {"precision": 10}) == "1.414213562"

    def test_default_34_digits(self) -> None:
        assert decimalish.sqrt(2) == "1.414213562373095048801688724209698"

    def test_perfect_squares(self) -> None:
        assert decimalish.sqrt(4) == "2"
        assert decimalish.sqrt("0.25") == "0.5"
        assert decimalish.sqrt(100) == "10"
        assert decimalish.sqrt("1e-10") == "0.00001"

    def test_exponent_parity(self) -> None:
        """Нечётная экспонента: корень из 10 и 0.1"""
        assert decimalish.sqrt(10, {"precision": 5}) == "3.1623"
        assert decimalish.sqrt("0.1", {"precision": 5}) == "0.31623"

    def test_places(self) -> None:
        """places отсчитываются от результата"""
        assert decimalish.sqrt(2, {"places": 3}) == "1.414"
        assert decimalish.sqrt(1000000, {"places": 0}) == "1000"

    def test_mode(self) -> None:
        assert decimalish.sqrt(2, {"precision": 3, "mode": "up"}) == "1.42"

    def test_zero(self) -> None:
        assert decimalish.sqrt(0) == "0"

    def test_negative(self) -> None:
        with pytest.raises(DecimalError, match="SQRT_NEG: -1") as exc_info:
            decimalish.sqrt(-1)
        assert exc_info.value.code is ErrorCode.SQRT_NEG

    def test_huge_value_float_seed_overflow(self) -> None:
        """Начальное приближение не помещается в float"""
        value = "9" * 400
        root = decimalish.sqrt(value, {"precision": 5})
        assert root == "1" + "0" * 200

    def test_convergence_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        rules = ResolvedRules(mode=RoundingMode.HALF_EVEN, precision=20)
        with caplog.at_level(logging.DEBUG, logger="decimalish"):
            square_root(to_representation(3), rules)
        assert any("sqrt converged" in r.getMessage() for r in caplog.records)


class TestSqrtCorrectRounding:
    """Корень округляется как точное значение, а не как приближение Ньютона"""

    @pytest.mark.parametrize(
        "value, precision, expected",
        [
            ("210.2398844", 2, "14"),
            ("6072342.5", 1, "2000"),
        ],
    )
    def test_near_midpoint(self, value: str, precision: int, expected: str) -> None:
        """Истинный корень рядом с серединой между кандидатами"""
        assert decimalish.sqrt(value, {"precision": precision}) == expected

    def test_last_of_36_digits(self) -> None:
        root = decimalish.sqrt("1169876.30178", {"precision": 36})
        assert decimalish.precision(root) == 36
        assert root.endswith("980119")

    def test_directed_modes(self) -> None:
        assert decimalish.sqrt(2, {"precision": 3, "mode": "down"}) == "1.41"
        assert decimalish.sqrt(2, {"precision": 3, "mode": "ceil"}) == "1.42"
        assert decimalish.sqrt(4, {"precision": 3, "mode": "up"}) == "2"
        assert decimalish.sqrt("0.99999999", {"precision": 4, "mode": "floor"}) == "0.9999"

    def test_exact_mode(self) -> None:
        assert decimalish.sqrt("1.44", {"mode": "exact"}) == "1.2"
        with pytest.raises(DecimalError) as exc_info:
            decimalish.sqrt(2, {"precision": 5, "mode": "exact"})
        assert exc_info.value.code is ErrorCode.INEXACT

    def test_matches_stdlib_half_even(self) -> None:
        """Случайные значения против decimal.Decimal.sqrt (half even)"""
        rng = random.Random(20240611)
        for _ in range(300):
            digits = str(rng.randint(1, 10 ** rng.randint(1, 15)))
            value = f"{digits}e{rng.randint(-30, 30)}"
            precision = rng.randint(1, 40)

            context = stdlib_decimal.Context(
                prec=precision, rounding=stdlib_decimal.ROUND_HALF_EVEN
            )
            expected = decimalish.decimal(str(context.sqrt(stdlib_decimal.Decimal(value))))

            assert decimalish.sqrt(value, {"precision": precision}) == expected, (
                value,
                precision,
            )
