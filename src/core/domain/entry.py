"""
Entry — Pair-like значения и проекции key/value

Pair-like значение:
- Entry(key, value)
- любой 2-tuple (то, что отдаёт dict.items())
- любой объект с атрибутами key и value

Column.KEYS / Column.VALUES: проекция pair-like значения на ключ или
значение. Композиция Column с Order.INCR / Order.DECR заменяет устаревшие
варианты KEY_INCR, VALUE_INCR, KEY_DECR, VALUE_DECR.
"""

from enum import Enum
from typing import Any, NamedTuple

from src.core.contracts.violations import OrderContractViolation, describe_operand


class Entry(NamedTuple):
    """Пара ключ/значение"""

    key: Any
    value: Any


def is_pair_like(obj: Any) -> bool:
    """
    Проверка capability: есть ли у значения key и value.

    Examples:
        >>> is_pair_like(Entry(1, "a")), is_pair_like((1, "a"))
        (True, True)
        >>> is_pair_like((1, 2, 3)), is_pair_like("ab")
        (False, False)
    """
    if isinstance(obj, tuple):
        return len(obj) == 2
    return hasattr(obj, "key") and hasattr(obj, "value")


def entry_key(obj: Any) -> Any:
    """
    Ключ pair-like значения.

    Raises:
        OrderContractViolation: Если значение не pair-like
    """
    if isinstance(obj, tuple) and len(obj) == 2:
        return obj[0]
    if is_pair_like(obj):
        return obj.key
    raise OrderContractViolation(
        f"Expected a key/value pair, got {describe_operand(obj)}", first=obj
    )


def entry_value(obj: Any) -> Any:
    """
    Значение pair-like значения.

    Raises:
        OrderContractViolation: Если значение не pair-like
    """
    if isinstance(obj, tuple) and len(obj) == 2:
        return obj[1]
    if is_pair_like(obj):
        return obj.value
    raise OrderContractViolation(
        f"Expected a key/value pair, got {describe_operand(obj)}", first=obj
    )


class Column(str, Enum):
    """Проекция pair-like значения"""

    KEYS = "keys"
    VALUES = "values"

    def apply(self, obj: Any) -> Any:
        """
        Извлечение ключа или значения.

        Raises:
            OrderContractViolation: Если значение не pair-like
        """
        match self:
            case Column.KEYS:
                return entry_key(obj)
            case Column.VALUES:
                return entry_value(obj)
        raise AssertionError(f"Unhandled column: {self!r}")

    def __call__(self, obj: Any) -> Any:
        return self.apply(obj)
