"""
Contract Validation Module

Модуль для валидации JSON контрактов снапшотов builder'ов.
"""

from .validators import (
    BuilderSnapshotValidator,
    ContractValidator,
    SchemaLoader,
    validate_builder_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BuilderSnapshotValidator",
    # Functions
    "validate_builder_snapshot",
]
