"""Конфигурация builder'ов: режим округления и журналирование диагностик."""

from dataclasses import dataclass
from enum import Enum

from src.core.math.numerical_safeguards import (
    Number,
    round_half_away_from_zero,
    round_half_even,
)


class RoundingMode(str, Enum):
    """Режим округления результата divide().

    - HALF_AWAY_FROM_ZERO: 2.5 → 3, -2.5 → -3 (default)
    - HALF_EVEN: 2.5 → 2, 3.5 → 4 (банковское)
    """
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_EVEN = "half_even"

    def apply(self, value: Number) -> int:
        """Округление value до int в данном режиме."""
        if self is RoundingMode.HALF_EVEN:
            return round_half_even(value)
        return round_half_away_from_zero(value)


@dataclass(frozen=True)
class BuilderConfig:
    """Конфигурация builder'а.

    - rounding: режим округления частного в divide()
    - record_diagnostics: сохранять ли диагностики в журнале экземпляра
      (в лог они пишутся всегда)
    """
    rounding: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO
    record_diagnostics: bool = True

    def __post_init__(self):
        if not isinstance(self.rounding, RoundingMode):
            raise ValueError(f"rounding must be a RoundingMode, got {self.rounding!r}")
