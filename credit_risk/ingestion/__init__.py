"""
credit_risk.ingestion — reading customer records from their source.

Modules:
  customer_json — JSON array parser, input path resolution, boundary errors.
"""
