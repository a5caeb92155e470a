"""
BaseBuilder — общая ячейка значения для всех builder'ов

Владеет значением, конфигурацией и журналом диагностик.
Политика ошибок "diagnostic-and-no-op":
- невалидная операция не меняет value
- формируется Diagnostic (журнал экземпляра + logger.warning)
- метод возвращает тот же экземпляр, цепочка продолжается
"""

import logging
import numbers
from decimal import Decimal
from typing import Any, Callable, ClassVar, Optional, TypeVar

from src.builders.config import BuilderConfig
from src.core.domain.diagnostic import Diagnostic, DiagnosticCode
from src.core.domain.snapshot import BuilderKind, BuilderSnapshot

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="BaseBuilder")


class BaseBuilder:
    """Ячейка значения с журналом отклонённых операций.

    Подклассы задают KIND и набор мутаторов.
    """

    KIND: ClassVar[BuilderKind]

    def __init__(self, value: Any, *, config: Optional[BuilderConfig] = None):
        """
        Args:
            value: начальное значение (хранится как есть)
            config: конфигурация builder'а (default: BuilderConfig())
        """
        self.value = value
        self.config = config or BuilderConfig()
        self._diagnostics: list[Diagnostic] = []

    def get(self) -> Any:
        """Текущее значение, без побочных эффектов."""
        return self.value

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Журнал отклонённых операций (в порядке возникновения)."""
        return tuple(self._diagnostics)

    def clear_diagnostics(self: B) -> B:
        self._diagnostics.clear()
        return self

    def snapshot(self) -> BuilderSnapshot:
        """Immutable снапшот: вариант, значение, диагностики."""
        return BuilderSnapshot(
            kind=self.KIND,
            value=_snapshot_value(self.value),
            diagnostics=list(self._diagnostics),
        )

    def _reject(
        self: B,
        operation: str,
        code: DiagnosticCode,
        message: str,
        *args: Any,
    ) -> B:
        """Оформление no-op: диагностика в лог и журнал, value не меняется."""
        diagnostic = Diagnostic(
            builder=type(self).__name__,
            operation=operation,
            code=code,
            message=message,
            arguments=[repr(arg) for arg in args],
        )
        logger.warning("%s", diagnostic)

        if self.config.record_diagnostics:
            self._diagnostics.append(diagnostic)

        return self

    def _commit(self: B, operation: str, compute: Callable[[], Any], *args: Any) -> B:
        """Атомарная запись результата compute() в value.

        TypeError/ArithmeticError при вычислении превращаются в
        INVALID_ARGUMENT, частичные результаты не сохраняются.
        """
        try:
            result = compute()
        except (TypeError, ArithmeticError) as e:
            return self._reject(
                operation, DiagnosticCode.INVALID_ARGUMENT, f"cannot apply: {e}", *args
            )

        self.value = result
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


def _snapshot_value(value: Any) -> Any:
    """Приведение значения к JSON-совместимому виду (int | float | str | None)."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, (numbers.Real, Decimal)):
        return float(value)
    return repr(value)
