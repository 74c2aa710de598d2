"""
Risk taxonomy for credit reports.

``RiskTier`` is the only dimension: a customer is either High Risk or
Low Risk.  The string values are the exact labels written to reports and
printed in the console table, so they must not change.

Usage example::

    from credit_risk.taxonomy.risk_taxonomy import RiskTier

    tier = RiskTier.HIGH_RISK
    assert tier == "High Risk"

This module has NO imports from any other ``credit_risk`` package.
"""

from enum import StrEnum


class RiskTier(StrEnum):
    """Binary risk classification derived from a credit score."""

    HIGH_RISK = "High Risk"
    """Score strictly below the high-risk threshold."""

    LOW_RISK = "Low Risk"
    """Score at or above the high-risk threshold."""
