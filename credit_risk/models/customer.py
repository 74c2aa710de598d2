"""
Customer input model.

``Customer`` carries the three raw scoring signals for one person plus an
identifier and display name.  The signals are deliberately NOT range-checked:
callers may supply values outside the intended domains (negative
percentages, utilization above 100, negative history age) and the score
engine clamps them.  Rejecting them here would turn a data-quality issue
into a hard failure.

External JSON uses camelCase keys (``paymentHistory`` etc.); the snake_case
field names are accepted too.  Case-insensitive key matching happens in
``credit_risk.ingestion.customer_json`` before the model is built.

The model is frozen; it is read-only input to the score engine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MAX_LENGTH = 200


class Customer(BaseModel):
    """One customer record to be scored.

    Attributes:
        customer_id: Source-system identifier.  Informational only; it takes
            no part in scoring or reporting.
        name: Display name copied onto the report.
        payment_history: Percentage of on-time payments, intended 0–100.
        credit_utilization: Percentage of credit limit in use, intended 0–100.
        age_of_credit_history: Years of credit history, intended >= 0.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    customer_id: int = Field(alias="customerId")
    name: str
    payment_history: int = Field(alias="paymentHistory")
    credit_utilization: int = Field(alias="creditUtilization")
    age_of_credit_history: int = Field(alias="ageOfCreditHistory")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty.")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(
                f"name must be at most {NAME_MAX_LENGTH} characters, got {len(v)}."
            )
        return v
