"""
OrderComparator — контекст сравнения

Связывает Order с проекцией операндов (Column или любой callable)
и источником случайности. Даёт key для sorted().
"""

import logging
from dataclasses import dataclass, replace
from functools import cmp_to_key
from typing import Any, Callable, Iterable

from src.core.domain.entry import Column
from src.core.math.number_helper import Comparison
from src.traversal.config import OrderSettings
from src.traversal.order import Order
from src.traversal.random_source import LockedRandom, RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderComparator:
    """Order + проекция + источник случайности.

    Attributes:
        order: стратегия сортировки
        by: проекция операндов перед сравнением (None → сами значения)
        random_source: источник для SHUFFLE (None → SHARED_RANDOM)
    """

    order: Order
    by: Column | Callable[[Any], Any] | None = None
    random_source: RandomSource | None = None

    @classmethod
    def from_settings(
        cls,
        order: Order | str,
        settings: OrderSettings | None = None,
        by: Column | Callable[[Any], Any] | None = None,
    ) -> "OrderComparator":
        """Comparator по идентификатору стратегии и настройкам.

        Args:
            order: вариант Order или его идентификатор
            settings: настройки (опционально, используется default)
            by: проекция операндов

        Raises:
            UnknownOrderError: если идентификатор не найден
        """
        settings = settings or OrderSettings()

        if not isinstance(order, Order):
            order = Order.from_name(order, warn_on_deprecated=settings.warn_on_deprecated)

        random_source = None
        if settings.shuffle_seed is not None:
            random_source = LockedRandom(settings.shuffle_seed)

        logger.debug(
            "OrderComparator: order=%s by=%r seeded=%s",
            order.name,
            by,
            random_source is not None,
        )
        return cls(order=order, by=by, random_source=random_source)

    def compare(self, first: Any, second: Any) -> Comparison:
        if self.by is not None:
            first = self.by(first)
            second = self.by(second)
        return self.order.compare(first, second, self.random_source)

    def __call__(self, first: Any, second: Any) -> Comparison:
        return self.compare(first, second)

    def reversed(self) -> "OrderComparator":
        return replace(self, order=self.order.reversed())

    @property
    def key(self) -> Callable[[Any], Any]:
        """Key-функция для sorted() / list.sort()"""
        return cmp_to_key(self.compare)


def sort_values(
    values: Iterable[Any],
    order: Order,
    by: Column | Callable[[Any], Any] | None = None,
    random_source: RandomSource | None = None,
) -> list[Any]:
    """
    Сортировка значений стратегией order.

    Для SHUFFLE результат: случайная перестановка входа.

    Raises:
        OrderContractViolation: Если значения несравнимы
    """
    comparator = OrderComparator(order=order, by=by, random_source=random_source)
    return sorted(values, key=comparator.key)
