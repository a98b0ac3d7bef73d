"""
Юнит-тесты для Rounding Engine и façade-функций округления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль всегда округляется в ноль (даже в режиме exact)
2. exact → INEXACT при отбрасывании ненулевых цифр
3. rounded + remainder == value
"""

import pytest

import decimalish
from decimalish import DecimalError, RoundingMode
from decimalish.core.domain.representation import ZERO
from decimalish.core.domain.rounding import ResolvedRules
from decimalish.core.math.parser import to_representation
from decimalish.core.math.rounding_engine import reduce_mode, round_rem, rounding_precision


class TestModesTable:
    """Таблица режимов: значения ±2.5, ±2.1, ±2.9 до целого"""

    @pytest.mark.parametrize(
        "mode, expected",
        [
            ("up", ["3", "-3", "3", "-3", "3", "-3"]),
            ("down", ["2", "-2", "2", "-2", "2", "-2"]),
            ("ceil", ["3", "-2", "3", "-2", "3", "-2"]),
            ("floor", ["2", "-3", "2", "-3", "2", "-3"]),
            ("euclidean", ["2", "-3", "2", "-3", "2", "-3"]),
            ("half up", ["3", "-3", "2", "-2", "3", "-3"]),
            ("half down", ["2", "-2", "2", "-2", "3", "-3"]),
            ("half ceil", ["3", "-2", "2", "-2", "3", "-3"]),
            ("half floor", ["2", "-3", "2", "-2", "3", "-3"]),
            ("half even", ["2", "-2", "2", "-2", "3", "-3"]),
        ],
    )
    def test_mode(self, mode: str, expected: list[str]) -> None:
        values = ["2.5", "-2.5", "2.1", "-2.1", "2.9", "-2.9"]
        assert [decimalish.round(v, {"mode": mode}) for v in values] == expected


class TestRound:
    """Тесты round()"""

    def test_half_even_default(self) -> None:
        assert decimalish.round(2.5) == "2"
        assert decimalish.round(1.5) == "2"
        assert decimalish.round(0.5) == "0"
        assert decimalish.round(-0.5) == "0"
        assert decimalish.round(0.5001) == "1"
        assert decimalish.round(-0.5001) == "-1"
        assert decimalish.round(9999.9) == "10000"

    @pytest.mark.parametrize(
        "places, expected",
        [(5, "12.34567"), (3, "12.346"), (1, "12.3"), (0, "12"), (-1, "10"), (-3, "0")],
    )
    def test_places(self, places: int, expected: str) -> None:
        assert decimalish.round(12.34567, {"places": places}) == expected

    @pytest.mark.parametrize(
        "precision, expected",
        [(7, "12.34567"), (5, "12.346"), (3, "12.3"), (2, "12"), (1, "10"), (0, "0")],
    )
    def test_precision(self, precision: int, expected: str) -> None:
        assert decimalish.round(12.34567, {"precision": precision}) == expected

    def test_carry_past_leading_digit(self) -> None:
        """99 → 100: перенос добавляет разряд"""
        assert decimalish.round(99, {"places": -1}) == "100"
        assert decimalish.round(99, {"places": -2}) == "100"
        assert decimalish.round(99, {"places": -3}) == "0"

    def test_numeric_rules_values(self) -> None:
        """places/precision принимают любые целые числовые значения"""
        assert decimalish.round(12.34567, {"places": "1"}) == "12.3"
        assert decimalish.round(12.34567, {"precision": 3.0}) == "12.3"

    def test_half_up_on_text(self) -> None:
        assert decimalish.round("1.005", {"places": 2, "mode": "half up"}) == "1.01"

    def test_exact(self) -> None:
        """exact допускает только точные значения"""
        assert decimalish.round("1.00", {"mode": "exact"}) == "1"
        assert decimalish.round(0, {"mode": "exact"}) == "0"
        with pytest.raises(DecimalError, match=r"INEXACT: round 0\.5"):
            decimalish.round(0.5, {"mode": "exact"})

    def test_up_mode_small_values(self) -> None:
        assert decimalish.round(0.499, {"mode": "up"}) == "1"
        assert decimalish.round(-0.499, {"mode": "up"}) == "-1"
        assert decimalish.round(0, {"mode": "up"}) == "0"


class TestRoundRem:
    """Тесты round_rem / int_frac"""

    def test_round_rem(self) -> None:
        assert decimalish.round_rem("12.345", {"places": 1}) == ("12.3", "0.045")
        assert decimalish.round_rem(99, {"places": -1}) == ("100", "-1")

    def test_sum_restores_value(self) -> None:
        for text in ("12.345", "-0.5", "99.99", "-123456.789"):
            for mode in ("up", "half even", "floor"):
                rounded, remainder = decimalish.round_rem(text, {"mode": mode, "places": 1})
                assert decimalish.add(rounded, remainder) == decimalish.decimal(text)

    def test_int_frac(self) -> None:
        assert decimalish.int_frac("-100.001") == ("-100", "-0.001")
        assert decimalish.int_frac("5") == ("5", "0")


class TestIntegerRounding:
    """Тесты floor/ceil/trunc/int"""

    def test_floor_ceil(self) -> None:
        assert decimalish.floor("-1.5") == "-2"
        assert decimalish.floor("1.5") == "1"
        assert decimalish.ceil("-1.5") == "-1"
        assert decimalish.ceil("1.5") == "2"

    def test_trunc(self) -> None:
        assert decimalish.trunc("-1.9") == "-1"
        assert decimalish.int("1.9") == "1"


class TestRulesErrors:
    """Тесты ошибок правил округления"""

    def test_not_both(self) -> None:
        with pytest.raises(DecimalError, match="NOT_BOTH: places: 1, precision: 1"):
            decimalish.round("123", {"places": 1, "precision": 1})

    def test_not_int(self) -> None:
        with pytest.raises(DecimalError, match=r"NOT_INT: places: 0\.5"):
            decimalish.round("123", {"places": 0.5})
        with pytest.raises(DecimalError, match=r"NOT_INT: precision: 0\.5"):
            decimalish.round("123", {"precision": 0.5})

    def test_not_mode(self) -> None:
        with pytest.raises(DecimalError, match="NOT_MODE: sideways"):
            decimalish.round("123", {"mode": "sideways"})

    def test_not_num(self) -> None:
        with pytest.raises(DecimalError, match="NOT_NUM: abc"):
            decimalish.round("abc")

    def test_rules_type(self) -> None:
        with pytest.raises(TypeError):
            decimalish.round("123", 2)


class TestEngine:
    """Тесты низкоуровневых функций"""

    def test_rounding_precision(self) -> None:
        assert rounding_precision(ResolvedRules(RoundingMode.DOWN, precision=4), 10) == 4
        assert rounding_precision(ResolvedRules(RoundingMode.DOWN, places=2), 1) == 4
        assert rounding_precision(ResolvedRules(RoundingMode.DOWN), -3) == -2

    @pytest.mark.parametrize(
        "mode, sign, dividend_sign, last_digit, expected",
        [
            (RoundingMode.CEIL, -1, -1, 0, RoundingMode.DOWN),
            (RoundingMode.FLOOR, -1, -1, 0, RoundingMode.UP),
            (RoundingMode.EUCLIDEAN, -1, 1, 0, RoundingMode.DOWN),
            (RoundingMode.EUCLIDEAN, 1, -1, 0, RoundingMode.UP),
            (RoundingMode.HALF_CEIL, 1, 1, 0, RoundingMode.HALF_UP),
            (RoundingMode.HALF_FLOOR, 1, 1, 0, RoundingMode.HALF_DOWN),
            (RoundingMode.HALF_EVEN, 1, 1, 3, RoundingMode.HALF_UP),
            (RoundingMode.HALF_EVEN, 1, 1, 4, RoundingMode.HALF_DOWN),
            (RoundingMode.EXACT, 1, 1, 4, RoundingMode.EXACT),
        ],
    )
    def test_reduce_mode(
        self,
        mode: RoundingMode,
        sign: int,
        dividend_sign: int,
        last_digit: int,
        expected: RoundingMode,
    ) -> None:
        assert reduce_mode(mode, sign, dividend_sign, last_digit) is expected

    def test_zero_under_exact(self) -> None:
        rules = ResolvedRules(RoundingMode.EXACT, precision=1)
        assert round_rem(ZERO, rules) == (ZERO, ZERO)

    def test_no_digits_discarded(self) -> None:
        rules = ResolvedRules(RoundingMode.EXACT, places=5)
        value = to_representation("1.234")
        assert round_rem(value, rules) == (value, ZERO)
