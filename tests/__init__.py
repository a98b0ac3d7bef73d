"""
Test suite for decimalish

Contains:
- tests/unit/          : Unit tests for individual modules and the public façade
"""
