"""
Income-tier surcharge.

A flat multiplier on the full base tax - no marginal relief near tier
boundaries. Just above ₹50L the surcharge can exceed the extra income.
"""
from __future__ import annotations

from typing import Sequence

from salarytax.engine.schemas import SurchargeTier


def select_surcharge_tier(taxable_income: float, tiers: Sequence[SurchargeTier]) -> SurchargeTier:
    """
    Return the single tier with lower_bound < taxable_income <= upper_bound.

    Tiers are ordered and exhaustive, so the first tier whose ceiling covers
    the income is the match. Zero or negative income lands in the first tier.
    """
    for tier in tiers:
        if tier.upper_bound is None or taxable_income <= tier.upper_bound:
            return tier
    # Unreachable with an exhaustive table; the last tier is unbounded
    return tiers[-1]


def calculate_surcharge(
    taxable_income: float,
    tax: float,
    tiers: Sequence[SurchargeTier],
) -> tuple[float, float]:
    """Return (rate, surcharge) where surcharge = tax × rate of the selected tier."""
    tier = select_surcharge_tier(taxable_income, tiers)
    return tier.rate, round(tax * tier.rate, 2)
