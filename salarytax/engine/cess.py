"""Health & Education Cess."""
from __future__ import annotations

from salarytax.engine.rules import CESS_RATE


def calculate_cess(tax: float, surcharge: float) -> float:
    """4% of (tax + surcharge), both regimes."""
    return round((tax + surcharge) * CESS_RATE, 2)
