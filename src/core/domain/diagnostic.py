"""
Diagnostic — Модель диагностики невалидной операции builder'а

Immutable Pydantic модель, фиксирующая отклонённую операцию цепочки.
Диагностика не прерывает цепочку: операция становится no-op,
а запись сохраняется в журнале экземпляра и дублируется в лог.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class DiagnosticCode(str, Enum):
    """
    Класс отклонённой операции.

    Все коды являются разновидностями одного условия "invalid argument".
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    EMPTY_PATTERN = "EMPTY_PATTERN"
    NON_FINITE_RESULT = "NON_FINITE_RESULT"


# =============================================================================
# DIAGNOSTIC MODEL
# =============================================================================


class Diagnostic(BaseModel):
    """
    Запись об отклонённой операции.

    Immutable модель (frozen=True). arguments хранит repr() аргументов,
    чтобы запись оставалась сериализуемой независимо от их типа.
    """

    builder: str = Field(..., min_length=1, description="Имя класса builder'а")
    operation: str = Field(..., min_length=1, description="Имя отклонённой операции")
    code: DiagnosticCode = Field(..., description="Класс отклонения")
    message: str = Field(..., min_length=1, description="Человекочитаемое сообщение")
    arguments: list[str] = Field(
        default_factory=list, description="repr() аргументов операции"
    )

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.builder}.{self.operation}: {self.message}"
