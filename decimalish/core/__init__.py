"""
Core decimal representation, arithmetic engines, and contracts.

This module contains the building blocks behind the public façade
(decimalish.api); it has no state and performs no I/O.
"""
