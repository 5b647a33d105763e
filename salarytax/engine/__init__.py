from salarytax.engine.schemas import Regime, RegimeComparison, TaxBreakdown, TaxInputs
from salarytax.engine.tax_engine import compare_regimes, compute

__all__ = [
    "Regime",
    "RegimeComparison",
    "TaxBreakdown",
    "TaxInputs",
    "compare_regimes",
    "compute",
]
