"""Credit Risk Scorer — deterministic credit scoring and risk-tier reporting."""

__version__ = "0.1.0"
