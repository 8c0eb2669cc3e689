"""
Traversal ordering strategies.

Order: замкнутый набор comparator'ов для сортировки результатов traversal.
"""

from src.traversal.comparator import OrderComparator, sort_values
from src.traversal.config import OrderSettings
from src.traversal.order import Order, natural_compare
from src.traversal.random_source import SHARED_RANDOM, LockedRandom, RandomSource

__all__ = [
    # Order
    "Order",
    "natural_compare",
    # Comparator
    "OrderComparator",
    "sort_values",
    # Config
    "OrderSettings",
    # Random source
    "RandomSource",
    "LockedRandom",
    "SHARED_RANDOM",
]
