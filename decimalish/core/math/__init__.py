"""
Core math modules для decimalish

Разбор, печать, сравнение, точная арифметика, деление в столбик,
округление, степень и корень над Representation.

Подмодули импортируются напрямую (без реэкспорта): decimalish.core.domain.rounding
импортирует parser, а rounding_engine импортирует rounding.
"""
