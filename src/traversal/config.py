"""
OrderSettings — настройки стратегий сортировки

Immutable Pydantic модель. Используется OrderComparator.from_settings.
"""

from pydantic import BaseModel, Field


class OrderSettings(BaseModel):
    """
    Настройки comparator'а.

    - shuffle_seed: seed собственного источника случайности для SHUFFLE;
      None → разделяемый SHARED_RANDOM
    - warn_on_deprecated: DeprecationWarning при lookup устаревших вариантов
    """

    shuffle_seed: int | None = Field(
        None, ge=0, description="Seed источника случайности для SHUFFLE"
    )
    warn_on_deprecated: bool = Field(
        True, description="Предупреждать при выборе устаревших вариантов"
    )

    model_config = {"frozen": True}
