"""
Domain models and value objects.

Contains builder diagnostics and snapshot models.
"""

from src.core.domain.diagnostic import Diagnostic, DiagnosticCode
from src.core.domain.snapshot import BuilderKind, BuilderSnapshot

__all__ = [
    # Diagnostic model
    "Diagnostic",
    "DiagnosticCode",
    # Snapshot model
    "BuilderKind",
    "BuilderSnapshot",
]
