"""Builder protocol — общий capability-интерфейс всех builder'ов.

Структурная типизация: наследование не требуется, соответствие
проверяется через isinstance().
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Builder(Protocol):
    """Fluent-аккумулятор: мутаторы возвращают тот же экземпляр."""

    def add(self, *args: Any) -> "Builder": ...

    def subtract(self, *args: Any) -> "Builder": ...

    def multiply(self, factor: Any) -> "Builder": ...

    def divide(self, divisor: Any) -> "Builder": ...

    def get(self) -> Any: ...
