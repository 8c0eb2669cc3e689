"""
Operand Contract Violations

Таксономия ошибок сравнения на границе Order / Column / number_helper:
- OrderContractViolation: операнды несравнимы в natural ordering,
  не являются числами там, где требуется число, или не являются pair-like
  для key/value вариантов
- UnknownOrderError: идентификатор Order не найден при lookup по имени

Ошибки не восстанавливаются внутри: они сразу пробрасываются вызывающему,
который владеет сортировкой и решает, прерывать ли её.
"""

from typing import Any

# =============================================================================
# EXCEPTIONS
# =============================================================================


class OrderContractViolation(TypeError):
    """
    Нарушение type contract операндов сравнения.

    Подкласс TypeError: код, который уже ловит TypeError от natural
    ordering, продолжает работать без изменений.

    Attributes:
        first: Первый операнд сравнения
        second: Второй операнд сравнения (None для одиночных проверок)
        order: Идентификатор стратегии, в которой произошло нарушение
    """

    def __init__(
        self,
        message: str,
        first: Any = None,
        second: Any = None,
        order: str | None = None,
    ):
        super().__init__(message)
        self.first = first
        self.second = second
        self.order = order


class UnknownOrderError(LookupError):
    """Идентификатор стратегии сортировки не найден."""

    def __init__(self, identifier: str):
        super().__init__(f"Unknown order identifier: {identifier!r}")
        self.identifier = identifier


# =============================================================================
# HELPERS
# =============================================================================


def describe_operand(value: Any) -> str:
    """
    Короткое описание операнда для сообщений об ошибках.

    Examples:
        >>> describe_operand(3)
        'int(3)'
        >>> describe_operand("a")
        "str('a')"
    """
    text = repr(value)
    if len(text) > 60:
        text = text[:57] + "..."
    return f"{type(value).__name__}({text})"
