"""Fluent builders — chainable аккумуляторы значений.

- NumericBuilder: числовая арифметика (add/subtract/multiply/divide)
- IntBuilder: целочисленная арифметика + mod + random_in_range
- StringBuilder: текстовая семантика тех же операций + remove/sub
"""

from .base import BaseBuilder
from .config import BuilderConfig, RoundingMode
from .integer import IntBuilder
from .numeric import NumericBuilder
from .protocol import Builder
from .text import StringBuilder

__all__ = [
    "Builder",
    "BaseBuilder",
    "BuilderConfig",
    "RoundingMode",
    "NumericBuilder",
    "IntBuilder",
    "StringBuilder",
]
