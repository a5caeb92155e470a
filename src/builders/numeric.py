"""
NumericBuilder — базовый числовой аккумулятор

Chainable арифметика над одним значением:
- add / plus: последовательное сложение всех аргументов
- subtract / minus: последовательное вычитание всех аргументов
- multiply: умножение на множитель
- divide: деление с округлением до целого (RoundingMode из конфигурации)

Деление на ноль и нечисловые аргументы: no-op с диагностикой.
Целочисленное деление выполняется точно (Fraction), округление
не теряет точности на больших int.
"""

from typing import Any, ClassVar

from src.builders.base import BaseBuilder
from src.core.domain.diagnostic import DiagnosticCode
from src.core.domain.snapshot import BuilderKind
from src.core.math.numerical_safeguards import (
    exact_quotient,
    is_real_number,
    is_valid_float,
)


class NumericBuilder(BaseBuilder):
    """Числовой fluent-аккумулятор.

    Examples:
        >>> NumericBuilder(10).add(2, 3).subtract(1).multiply(2).divide(4).get()
        7
    """

    KIND: ClassVar[BuilderKind] = BuilderKind.NUMERIC

    # Описание допустимых операндов add/subtract/multiply (для диагностик)
    OPERAND_NAME: ClassVar[str] = "real number"

    def _is_operand(self, value: Any) -> bool:
        return is_real_number(value)

    def _invalid_operands(self, operation: str, args: tuple[Any, ...]) -> bool:
        """True (и диагностика) если хотя бы один аргумент не операнд."""
        invalid = [arg for arg in args if not self._is_operand(arg)]
        if invalid:
            self._reject(
                operation,
                DiagnosticCode.INVALID_ARGUMENT,
                f"expected {self.OPERAND_NAME} operands, got {invalid!r}",
                *args,
            )
            return True
        return False

    def add(self, *nums: Any) -> "NumericBuilder":
        """Прибавление всех аргументов к value по порядку."""
        if self._invalid_operands("add", nums):
            return self

        def compute():
            total = self.value
            for num in nums:
                total += num
            return total

        return self._commit("add", compute, *nums)

    def plus(self, *nums: Any) -> "NumericBuilder":
        return self.add(*nums)

    def subtract(self, *nums: Any) -> "NumericBuilder":
        """Вычитание всех аргументов из value по порядку."""
        if self._invalid_operands("subtract", nums):
            return self

        def compute():
            total = self.value
            for num in nums:
                total -= num
            return total

        return self._commit("subtract", compute, *nums)

    def minus(self, *nums: Any) -> "NumericBuilder":
        return self.subtract(*nums)

    def multiply(self, factor: Any) -> "NumericBuilder":
        """value = value * factor"""
        if self._invalid_operands("multiply", (factor,)):
            return self

        return self._commit("multiply", lambda: self.value * factor, factor)

    def divide(self, divisor: Any) -> "NumericBuilder":
        """
        Деление value на divisor с округлением до целого.

        Режим округления задаёт config.rounding (default: half-away-from-zero).

        Диагностики (value не меняется):
        - DIVISION_BY_ZERO: divisor == 0
        - INVALID_ARGUMENT: divisor не число или value не делится
        - NON_FINITE_RESULT: частное NaN/Inf
        """
        if not is_real_number(divisor):
            return self._reject(
                "divide",
                DiagnosticCode.INVALID_ARGUMENT,
                f"divisor must be a real number, got {divisor!r}",
                divisor,
            )

        if divisor == 0:
            return self._reject(
                "divide", DiagnosticCode.DIVISION_BY_ZERO, "Cannot divide by zero!", divisor
            )

        try:
            quotient = exact_quotient(self.value, divisor)
            finite = is_valid_float(quotient)
        except (TypeError, ArithmeticError) as e:
            return self._reject(
                "divide", DiagnosticCode.INVALID_ARGUMENT, f"cannot apply: {e}", divisor
            )

        if not finite:
            return self._reject(
                "divide",
                DiagnosticCode.NON_FINITE_RESULT,
                f"quotient {quotient!r} is not finite",
                divisor,
            )

        self.value = self.config.rounding.apply(quotient)
        return self
