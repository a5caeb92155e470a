"""
IntBuilder — целочисленный аккумулятор

Наследует арифметику NumericBuilder, сужая операнды add/subtract/multiply
до int (value всегда остаётся int). Добавляет:
- mod: остаток с усечением к нулю (знак делимого)
- random_in_range: равномерное целое в [low, high] (stateless)
"""

import random
from typing import Any, ClassVar, Optional

from src.builders.config import BuilderConfig
from src.builders.numeric import NumericBuilder
from src.core.domain.diagnostic import DiagnosticCode
from src.core.domain.snapshot import BuilderKind
from src.core.math.numerical_safeguards import (
    is_integer_number,
    truncating_remainder,
    validate_integer,
)


class IntBuilder(NumericBuilder):
    """Целочисленный fluent-аккумулятор.

    Examples:
        >>> IntBuilder(10).add(2, 3, 2).subtract(1, 2).multiply(2).divide(4).mod(3).get()
        1
    """

    KIND: ClassVar[BuilderKind] = BuilderKind.INTEGER
    OPERAND_NAME: ClassVar[str] = "integer"

    def __init__(self, value: int = 0, *, config: Optional[BuilderConfig] = None):
        """
        Args:
            value: начальное значение (default: 0)
            config: конфигурация builder'а

        Raises:
            ValueError: Если value не int
        """
        super().__init__(validate_integer(value, "value"), config=config)

    def _is_operand(self, value: Any) -> bool:
        return is_integer_number(value)

    def mod(self, divisor: Any) -> "IntBuilder":
        """
        value = value rem divisor (усечение к нулю).

        Диагностики (value не меняется):
        - DIVISION_BY_ZERO: divisor == 0
        - INVALID_ARGUMENT: divisor не int
        """
        if not is_integer_number(divisor):
            return self._reject(
                "mod",
                DiagnosticCode.INVALID_ARGUMENT,
                f"divisor must be an integer, got {divisor!r}",
                divisor,
            )

        if divisor == 0:
            return self._reject(
                "mod", DiagnosticCode.DIVISION_BY_ZERO, "Cannot divide by zero!", divisor
            )

        self.value = truncating_remainder(self.value, int(divisor))
        return self

    @staticmethod
    def random_in_range(low: int, high: int, rng: Optional[random.Random] = None) -> int:
        """
        Равномерно распределённое целое в [low, high] включительно.

        Границы в обратном порядке нормализуются (low > high → swap).

        Args:
            low: нижняя граница
            high: верхняя граница
            rng: источник случайности (default: модуль random)

        Raises:
            ValueError: Если граница не int
        """
        low = validate_integer(low, "low")
        high = validate_integer(high, "high")

        if low > high:
            low, high = high, low

        return (rng or random).randint(low, high)
