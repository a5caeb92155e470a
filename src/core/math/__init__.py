"""
Core math modules для fluent-builders

Математические примитивы builder-арифметики с гарантией детерминизма.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ROUND_HALF,
    Number,
    # Operand classification
    is_integer_number,
    is_real_number,
    is_valid_float,
    # Exact division & rounding
    exact_quotient,
    round_half_away_from_zero,
    round_half_even,
    truncating_remainder,
    # Utilities
    clamp,
    # Validation
    validate_integer,
)

__all__ = [
    # Numerical Safeguards — Constants & types
    "ROUND_HALF",
    "Number",
    # Numerical Safeguards — Operand classification
    "is_integer_number",
    "is_real_number",
    "is_valid_float",
    # Numerical Safeguards — Exact division & rounding
    "exact_quotient",
    "round_half_away_from_zero",
    "round_half_even",
    "truncating_remainder",
    # Numerical Safeguards — Utilities
    "clamp",
    # Numerical Safeguards — Validation
    "validate_integer",
]
