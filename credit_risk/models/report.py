"""
Report output models.

``CustomerReport`` is the per-customer result of a scoring run: the name
copied from the input, the computed credit score, and the risk tier.

``BatchSummary`` holds the aggregate counts printed under the console table.

Both models are frozen.  A report is created once by the batch pipeline and
never mutated afterwards.

Serialization uses the report file's PascalCase keys::

    {"Name": "Alice", "CreditScore": 56, "RiskStatus": "Low Risk"}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from credit_risk.taxonomy.risk_taxonomy import RiskTier

REPORT_FIELDS: tuple[str, ...] = ("Name", "CreditScore", "RiskStatus")


class CustomerReport(BaseModel):
    """Credit score and risk tier for one customer.

    Attributes:
        name: Customer display name.
        credit_score: Integer score in [0, 100].
        risk_status: ``RiskTier.HIGH_RISK`` or ``RiskTier.LOW_RISK``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    credit_score: int = Field(alias="CreditScore", ge=0, le=100)
    risk_status: RiskTier = Field(alias="RiskStatus")

    def to_record(self) -> dict:
        """Return the flat, JSON-ready dict written to report files."""
        return self.model_dump(mode="json", by_alias=True)


class BatchSummary(BaseModel):
    """Aggregate counts over one batch of reports."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    high_risk_count: int = 0
    low_risk_count: int = 0

    @model_validator(mode="after")
    def validate_counts(self) -> "BatchSummary":
        if self.high_risk_count + self.low_risk_count != self.total:
            raise ValueError(
                f"high_risk_count ({self.high_risk_count}) + low_risk_count "
                f"({self.low_risk_count}) must equal total ({self.total})."
            )
        return self
