"""
Shared pytest fixtures for the Credit Risk Scorer test suite.

Provides:
  - ``make_customer``: factory for ``Customer`` objects with sensible defaults.
  - ``sample_customers``: the three reference customers (Alice, Bob, Charlie).
  - ``write_customers_json``: writes a list of raw record dicts to a temp file.
  - ``tmp_config``: an ``AppConfig`` whose I/O paths all point into ``tmp_path``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from credit_risk.config import AppConfig, IOConfig
from credit_risk.models.customer import Customer


@pytest.fixture
def make_customer() -> Callable[..., Customer]:
    """Return a factory building a ``Customer`` with overridable fields."""

    def _make(
        payment_history: int = 80,
        credit_utilization: int = 30,
        age_of_credit_history: int = 5,
        name: str = "Test",
        customer_id: int = 1,
    ) -> Customer:
        return Customer(
            customer_id=customer_id,
            name=name,
            payment_history=payment_history,
            credit_utilization=credit_utilization,
            age_of_credit_history=age_of_credit_history,
        )

    return _make


@pytest.fixture
def sample_records() -> list[dict]:
    """Raw JSON-style records for Alice (56), Bob (34) and Charlie (73)."""
    return [
        {"customerId": 1, "name": "Alice", "paymentHistory": 90,
         "creditUtilization": 40, "ageOfCreditHistory": 5},
        {"customerId": 2, "name": "Bob", "paymentHistory": 70,
         "creditUtilization": 90, "ageOfCreditHistory": 15},
        {"customerId": 3, "name": "Charlie", "paymentHistory": 100,
         "creditUtilization": 0, "ageOfCreditHistory": 20},
    ]


@pytest.fixture
def sample_customers(sample_records) -> list[Customer]:
    return [Customer.model_validate(r) for r in sample_records]


@pytest.fixture
def write_customers_json(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that dumps ``records`` to ``tmp_path/<name>``."""

    def _write(records, name: str = "customers.json") -> Path:
        p = tmp_path / name
        p.write_text(json.dumps(records), encoding="utf-8")
        return p

    return _write


@pytest.fixture
def tmp_config(tmp_path: Path) -> AppConfig:
    """AppConfig reading/writing only inside ``tmp_path``."""
    return AppConfig(
        io=IOConfig(
            input_file=str(tmp_path / "customers.json"),
            output_file=str(tmp_path / "out" / "report.json"),
            search_dirs=[],
        )
    )
