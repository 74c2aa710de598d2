"""Tests for credit_risk.scoring.classifier."""

from __future__ import annotations

import pytest

from credit_risk.scoring.classifier import HIGH_RISK_THRESHOLD, is_high_risk, risk_label
from credit_risk.scoring.engine import compute_score
from credit_risk.taxonomy.risk_taxonomy import RiskTier


def test_threshold_constant():
    assert HIGH_RISK_THRESHOLD == 50


@pytest.mark.parametrize(
    ("score", "high"),
    [(0, True), (49, True), (50, False), (51, False), (100, False)],
)
def test_is_high_risk_boundary(score, high):
    assert is_high_risk(score) is high


@pytest.mark.parametrize(
    ("score", "label"),
    [(49, RiskTier.HIGH_RISK), (50, RiskTier.LOW_RISK), (51, RiskTier.LOW_RISK)],
)
def test_risk_label_boundary(score, label):
    assert risk_label(score) is label


def test_label_strings():
    assert risk_label(10) == "High Risk"
    assert risk_label(90) == "Low Risk"


def test_label_follows_predicate():
    for score in range(0, 101):
        expected = RiskTier.HIGH_RISK if is_high_risk(score) else RiskTier.LOW_RISK
        assert risk_label(score) is expected


class TestScoredCustomers:
    def test_score_below_threshold_is_high_risk(self, make_customer):
        score = compute_score(make_customer(50, 80, 0))
        assert score < 50
        assert is_high_risk(score)

    def test_score_of_exactly_50_is_low_risk(self, make_customer):
        score = compute_score(make_customer(88, 50, 0))
        assert score == 50
        assert not is_high_risk(score)

    def test_score_of_51_is_low_risk(self, make_customer):
        score = compute_score(make_customer(90, 50, 0))
        assert score == 51
        assert risk_label(score) is RiskTier.LOW_RISK
