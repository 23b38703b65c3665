"""Hypothesis strategies for MoneyEngine property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules.

Usage:
    from tests.strategies import big_monies, monies, rounding_modes

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - currency_by_decimals, big_monies, amount_styles
"""

from .money import (
    amount_styles,
    big_monies,
    currency_by_decimals,
    lossy_rounding_modes,
    monies,
    rounding_modes,
    same_currency_pairs,
)

__all__ = [
    "amount_styles",
    "big_monies",
    "currency_by_decimals",
    "lossy_rounding_modes",
    "monies",
    "rounding_modes",
    "same_currency_pairs",
]
