"""
credit_risk.reporting — Report formatting, export, and re-reading.

Modules:
  formatters — ASCII terminal table for Typer CLI commands.
  export     — JSON/CSV writers for report records.
  reader     — Load a previously written report JSON.
"""
