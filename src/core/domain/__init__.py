"""
Domain value objects.

Pair-like значения и проекции key/value.
"""

from src.core.domain.entry import (
    Column,
    Entry,
    entry_key,
    entry_value,
    is_pair_like,
)

__all__ = [
    "Entry",
    "Column",
    "entry_key",
    "entry_value",
    "is_pair_like",
]
