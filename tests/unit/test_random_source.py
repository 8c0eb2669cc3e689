"""
Тесты для Random Source

Покрытие:
- Воспроизводимость с seed
- reseed
- Конкурентный доступ из нескольких потоков
"""

import threading

from src.traversal import SHARED_RANDOM, LockedRandom, Order


class TestLockedRandom:
    """Тесты для LockedRandom"""

    def test_returns_bool(self) -> None:
        """next_bool возвращает bool"""
        source = LockedRandom(seed=1)
        assert all(isinstance(source.next_bool(), bool) for _ in range(20))

    def test_same_seed_same_sequence(self) -> None:
        """Одинаковый seed → одинаковая последовательность"""
        a = LockedRandom(seed=42)
        b = LockedRandom(seed=42)
        assert [a.next_bool() for _ in range(100)] == [b.next_bool() for _ in range(100)]

    def test_both_values_produced(self) -> None:
        """Генерируются оба значения"""
        source = LockedRandom(seed=3)
        assert {source.next_bool() for _ in range(200)} == {True, False}

    def test_reseed_restarts_sequence(self) -> None:
        """reseed возвращает генератор в начало последовательности"""
        source = LockedRandom(seed=9)
        first = [source.next_bool() for _ in range(30)]
        source.reseed(9)
        assert [source.next_bool() for _ in range(30)] == first

    def test_shared_instance(self) -> None:
        """SHARED_RANDOM: LockedRandom"""
        assert isinstance(SHARED_RANDOM, LockedRandom)


class TestConcurrency:
    """Тесты конкурентного доступа"""

    def test_concurrent_shuffle_compare(self) -> None:
        """Параллельные SHUFFLE сравнения на одном источнике"""
        source = LockedRandom(seed=2024)
        results: list[list] = []
        lock = threading.Lock()

        def worker() -> None:
            local = [Order.SHUFFLE.compare(1, 1, source) for _ in range(1000)]
            with lock:
                results.append(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Все потоки завершились без исключений
        assert len(results) == 8

        outcomes = [value for local in results for value in local]
        assert len(outcomes) == 8000
        assert set(outcomes) == {-1, 1}

    def test_concurrent_draws_match_serial_sequence(self) -> None:
        """Параллельные вызовы не теряют и не дублируют значения генератора"""
        seed = 77
        serial = LockedRandom(seed=seed)
        expected_true = sum(serial.next_bool() for _ in range(4000))

        shared = LockedRandom(seed=seed)
        counts: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            local = sum(shared.next_bool() for _ in range(1000))
            with lock:
                counts.append(local)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sum(counts) == expected_true
