"""
Core math modules

Точное сравнение чисел разных представлений.
"""

from src.core.math.number_helper import (
    Comparison,
    NumericKind,
    compare_numbers,
    is_infinite,
    is_nan,
    is_numeric,
    is_unordered,
    numeric_kind,
    promote,
    to_fraction,
)

__all__ = [
    # Types
    "Comparison",
    "NumericKind",
    # Classification
    "is_numeric",
    "numeric_kind",
    "promote",
    # Special values
    "is_infinite",
    "is_nan",
    "is_unordered",
    # Conversion
    "to_fraction",
    # Comparison
    "compare_numbers",
]
