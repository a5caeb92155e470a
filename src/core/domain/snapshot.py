"""
BuilderSnapshot — Снапшот состояния builder'а

Immutable Pydantic модель: тип builder'а, текущее значение и журнал диагностик.
Полная совместимость с JSON Schema (contracts/schema/builder_snapshot.json).
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from .diagnostic import Diagnostic


# =============================================================================
# ENUMS
# =============================================================================


class BuilderKind(str, Enum):
    """Вариант builder'а"""

    NUMERIC = "numeric"
    INTEGER = "integer"
    TEXT = "text"


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class BuilderSnapshot(BaseModel):
    """
    Снапшот builder'а на момент вызова snapshot().

    Immutable модель (frozen=True). Экземпляр builder'а продолжает
    изменяться, снапшот остаётся неизменным.
    """

    kind: BuilderKind = Field(..., description="Вариант builder'а")
    value: Optional[Union[int, float, str]] = Field(
        ..., description="Текущее значение (число или текст)"
    )
    diagnostics: list[Diagnostic] = Field(
        default_factory=list, description="Журнал отклонённых операций"
    )

    model_config = {"frozen": True}

    @property
    def has_diagnostics(self) -> bool:
        """True если хотя бы одна операция была отклонена"""
        return bool(self.diagnostics)
