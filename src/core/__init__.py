"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks shared by all
builders (safe arithmetic, diagnostics, snapshot contracts).
"""
