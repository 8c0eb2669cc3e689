"""
Random Source — источник случайности для Order.SHUFFLE

Единственный разделяемый ресурс стратегий сортировки. Контракт:
- безопасен для конкурентного использования из любого числа потоков
- НЕ воспроизводим между потоками и НЕ криптографически стойкий
- подменяется явно: аргументом compare(...) или полем OrderComparator
"""

import logging
import random
import threading
from typing import Final, Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Источник случайных булевых значений"""

    def next_bool(self) -> bool:
        ...


class LockedRandom:
    """
    random.Random под threading.Lock.

    Lock сериализует доступ к состоянию генератора, поэтому параллельные
    вызовы не портят последовательность.
    """

    def __init__(self, seed: int | None = None):
        """
        Args:
            seed: seed генератора (None → seed от ОС)
        """
        self._random = random.Random(seed)
        self._lock = threading.Lock()
        logger.debug("LockedRandom created (seeded=%s)", seed is not None)

    def next_bool(self) -> bool:
        with self._lock:
            return bool(self._random.getrandbits(1))

    def reseed(self, seed: int | None) -> None:
        """Сброс состояния генератора на новый seed."""
        with self._lock:
            self._random.seed(seed)
        logger.debug("LockedRandom reseeded (seeded=%s)", seed is not None)


# Разделяемый источник процесса; используется, когда источник не передан явно
SHARED_RANDOM: Final[LockedRandom] = LockedRandom()
