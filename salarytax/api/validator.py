"""
Business-rule validator for submitted tax inputs.

Runs AFTER Pydantic structural validation has passed. Collects all violations
in a single pass and raises ValueError with a JSON-encoded list of
{field, issue} dicts so the route can build the standard error envelope.

Rules enforced:
  1. basic_salary                <= gross_salary
  2. pf_contribution + gratuity  <= gross_salary

The engine never calls this - it computes on whatever numbers it is given.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from salarytax.engine.schemas import TaxInputs

logger = logging.getLogger(__name__)


def validate_business_rules(inputs: TaxInputs) -> None:
    """
    Validate inputs against the cross-field rules above.

    Args:
        inputs: Structurally-valid inputs (Pydantic already ran).

    Raises:
        ValueError: If any rule is violated. The message is a JSON string
            containing a list of {"field": str, "issue": str} dicts.
    """
    violations: list[dict[str, Any]] = []
    gross = inputs.gross_salary

    # ---- 1. Basic salary cannot exceed gross ------------------------------
    basic = inputs.basic_salary or 0.0
    if basic > gross:
        violations.append({
            "field": "inputs.basic_salary",
            "issue": (
                f"basic_salary (₹{basic:,.0f}) cannot exceed "
                f"gross_salary (₹{gross:,.0f})"
            ),
        })

    # ---- 2. PF + gratuity cannot exceed gross -----------------------------
    withheld = inputs.pf_contribution + inputs.gratuity
    if withheld > gross:
        violations.append({
            "field": "inputs.pf_contribution",
            "issue": (
                f"pf_contribution + gratuity (₹{withheld:,.0f}) cannot exceed "
                f"gross_salary (₹{gross:,.0f})"
            ),
        })

    if violations:
        # Count only - no salary values in logs
        logger.info("Business-rule validation failed: %d violation(s)", len(violations))
        raise ValueError(json.dumps(violations))
