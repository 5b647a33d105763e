"""
Progressive slab tax over an ordered band table.
"""
from __future__ import annotations

from typing import Sequence

from salarytax.engine.schemas import SlabBand, SlabTaxLine, SlabTaxResult


def calculate_slab_tax(taxable_income: float, slabs: Sequence[SlabBand]) -> SlabTaxResult:
    """
    Allocate taxable_income across slabs in ascending order and sum marginal tax.

    Negative income is clamped to 0 here - callers pass the raw figure.
    One line is returned per band, so the itemisation always has the table's
    length; bands the income never reaches carry zeros.
    """
    remaining = max(0.0, taxable_income)
    total = 0.0
    lines: list[SlabTaxLine] = []

    for band in slabs:
        allocated = min(remaining, band.width) if remaining > 0 else 0.0
        band_tax = round(allocated * band.rate, 2)
        lines.append(
            SlabTaxLine(
                lower_bound=band.lower_bound,
                upper_bound=band.upper_bound,
                rate=band.rate,
                taxable_amount=allocated,
                tax=band_tax,
            )
        )
        total += band_tax
        remaining -= allocated

    return SlabTaxResult(total_tax=round(total, 2), lines=lines)
