"""
Order — стратегии сортировки traverser'ов

Замкнутый набор именованных comparator'ов. Каждый вариант:
- сравнивает два значения и возвращает Comparison
- знает свою инверсию (reversed)

Варианты:
- INCR / DECR: natural order; числа сравниваются по математическому значению
- KEY_INCR / VALUE_INCR / KEY_DECR / VALUE_DECR: устаревшие; сравнение
  ключей / значений pair-like операндов, только natural order
- SHUFFLE: случайный порядок (LESS или GREATER, никогда EQUAL)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Набор вариантов замкнут
2. v.reversed().reversed() is v для всех вариантов
3. SHUFFLE.reversed() is SHUFFLE
4. DECR: сравнение с переставленными операндами, а не отрицание INCR
5. Несравнимые операнды → OrderContractViolation, без coercion
"""

import logging
import warnings
from decimal import InvalidOperation
from enum import Enum
from typing import Any

from src.core.contracts.violations import (
    OrderContractViolation,
    UnknownOrderError,
    describe_operand,
)
from src.core.domain.entry import Column, entry_key, entry_value
from src.core.math.number_helper import Comparison, compare_numbers, is_numeric
from src.traversal.random_source import SHARED_RANDOM, RandomSource

logger = logging.getLogger(__name__)


# =============================================================================
# NATURAL ORDER
# =============================================================================


def natural_compare(first: Any, second: Any, order: str | None = None) -> Comparison:
    """
    Natural ordering значений через их собственные < и >.

    Decimal NaN неупорядочен: сравнение возвращает EQUAL, как и compare_numbers.

    Raises:
        OrderContractViolation: Если значения несравнимы
    """
    try:
        if first < second:
            return Comparison.LESS
        if second < first:
            return Comparison.GREATER
    except InvalidOperation:
        return Comparison.EQUAL
    except TypeError as exc:
        logger.debug("Incomparable operands under %s: %r, %r", order, first, second)
        raise OrderContractViolation(
            f"Cannot compare {describe_operand(first)} with {describe_operand(second)}",
            first=first,
            second=second,
            order=order,
        ) from exc
    return Comparison.EQUAL


def _magnitude_or_natural(first: Any, second: Any, order: str) -> Comparison:
    if is_numeric(first) and is_numeric(second):
        return compare_numbers(first, second)
    return natural_compare(first, second, order)


# =============================================================================
# ORDER
# =============================================================================


class Order(str, Enum):
    """Стратегия сортировки"""

    INCR = "incr"
    DECR = "decr"
    KEY_INCR = "keyIncr"  # deprecated: Column.KEYS + INCR
    VALUE_INCR = "valueIncr"  # deprecated: Column.VALUES + INCR
    KEY_DECR = "keyDecr"  # deprecated: Column.KEYS + DECR
    VALUE_DECR = "valueDecr"  # deprecated: Column.VALUES + DECR
    SHUFFLE = "shuffle"

    @classmethod
    def from_name(cls, identifier: str, warn_on_deprecated: bool = True) -> "Order":
        """
        Lookup варианта по идентификатору ("keyIncr") или имени ("KEY_INCR").

        Args:
            identifier: Идентификатор или имя варианта
            warn_on_deprecated: Выдавать DeprecationWarning для устаревших

        Returns:
            Вариант Order

        Raises:
            UnknownOrderError: Если вариант не найден
        """
        try:
            order = cls(identifier)
        except ValueError:
            try:
                order = cls[identifier]
            except (KeyError, TypeError):
                logger.debug("Unknown order identifier: %r", identifier)
                raise UnknownOrderError(identifier) from None

        if warn_on_deprecated and order.is_deprecated:
            column, base = order.replacement
            warnings.warn(
                f"Order.{order.name} is deprecated, "
                f"order by Column.{column.name} with Order.{base.name} instead",
                DeprecationWarning,
                stacklevel=2,
            )

        logger.debug("Resolved order %r -> %s", identifier, order.name)
        return order

    @property
    def is_deprecated(self) -> bool:
        return self in (
            Order.KEY_INCR,
            Order.VALUE_INCR,
            Order.KEY_DECR,
            Order.VALUE_DECR,
        )

    @property
    def replacement(self) -> tuple[Column, "Order"] | None:
        """Композиция Column + Order, заменяющая устаревший вариант."""
        match self:
            case Order.KEY_INCR:
                return Column.KEYS, Order.INCR
            case Order.VALUE_INCR:
                return Column.VALUES, Order.INCR
            case Order.KEY_DECR:
                return Column.KEYS, Order.DECR
            case Order.VALUE_DECR:
                return Column.VALUES, Order.DECR
        return None

    def compare(
        self,
        first: Any,
        second: Any,
        random_source: RandomSource | None = None,
    ) -> Comparison:
        """
        Трёхстороннее сравнение двух значений.

        Args:
            first: Первое значение
            second: Второе значение
            random_source: Источник случайности для SHUFFLE
                (None → SHARED_RANDOM); остальные варианты его игнорируют

        Returns:
            Comparison.LESS / EQUAL / GREATER

        Raises:
            OrderContractViolation: Если операнды несравнимы или
                не pair-like для key/value вариантов
        """
        match self:
            case Order.INCR:
                return _magnitude_or_natural(first, second, self.value)
            case Order.DECR:
                return _magnitude_or_natural(second, first, self.value)
            case Order.KEY_INCR:
                return natural_compare(entry_key(first), entry_key(second), self.value)
            case Order.VALUE_INCR:
                return natural_compare(entry_value(first), entry_value(second), self.value)
            case Order.KEY_DECR:
                return natural_compare(entry_key(second), entry_key(first), self.value)
            case Order.VALUE_DECR:
                return natural_compare(entry_value(second), entry_value(first), self.value)
            case Order.SHUFFLE:
                source = SHARED_RANDOM if random_source is None else random_source
                return Comparison.LESS if source.next_bool() else Comparison.GREATER
        raise AssertionError(f"Unhandled order: {self!r}")

    def reversed(self) -> "Order":
        """Стратегия с противоположным ранжированием."""
        match self:
            case Order.INCR:
                return Order.DECR
            case Order.DECR:
                return Order.INCR
            case Order.KEY_INCR:
                return Order.KEY_DECR
            case Order.VALUE_INCR:
                return Order.VALUE_DECR
            case Order.KEY_DECR:
                return Order.KEY_INCR
            case Order.VALUE_DECR:
                return Order.VALUE_INCR
            case Order.SHUFFLE:
                return Order.SHUFFLE
        raise AssertionError(f"Unhandled order: {self!r}")

    def __call__(self, first: Any, second: Any) -> Comparison:
        return self.compare(first, second)
