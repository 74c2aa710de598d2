"""
Risk classifier: maps an integer credit score to a ``RiskTier``.

A score strictly below ``HIGH_RISK_THRESHOLD`` is High Risk; a score of
exactly 50 is Low Risk.  There are only two tiers.
"""

from __future__ import annotations

from credit_risk.taxonomy.risk_taxonomy import RiskTier

HIGH_RISK_THRESHOLD = 50


def is_high_risk(score: int) -> bool:
    """Return True if ``score`` falls below the high-risk threshold."""
    return score < HIGH_RISK_THRESHOLD


def risk_label(score: int) -> RiskTier:
    return RiskTier.HIGH_RISK if is_high_risk(score) else RiskTier.LOW_RISK
