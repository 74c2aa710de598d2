"""
JSON import parser for customer records.

Format: a JSON array of objects, one per customer::

    [
      {
        "customerId": 1,
        "name": "Alice",
        "paymentHistory": 90,
        "creditUtilization": 40,
        "ageOfCreditHistory": 5
      }
    ]

Key matching is case-insensitive (``PaymentHistory``, ``paymenthistory`` and
``paymentHistory`` are the same key) and the snake_case field names are
accepted as well.  Unknown keys are ignored.  A top-level ``null`` is read
as an empty list.

Numeric signals are NOT range-checked here; the score engine clamps them.

Failure modes:
  SourceNotFoundError  → the input file cannot be located.
  SourceMalformedError → the file is not valid JSON, is not an array of
                         objects, or a record fails model validation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from credit_risk.models.customer import Customer

logger = logging.getLogger(__name__)

MAX_ERRORS_SHOWN = 10

# Lower-cased external key -> model field name.
_KEY_MAP: dict[str, str] = {}
for _field_name, _field in Customer.model_fields.items():
    _KEY_MAP[_field_name.lower()] = _field_name
    if _field.alias:
        _KEY_MAP[_field.alias.lower()] = _field_name


class SourceNotFoundError(FileNotFoundError):
    """The configured input location does not resolve to a readable file."""


class SourceMalformedError(ValueError):
    """The input data cannot be decoded into customer records."""


def resolve_input_path(file_name: str | Path, search_dirs: Iterable[str | Path] = ()) -> Path:
    """Locate the input file.

    The name is tried as given (relative to the working directory, or
    absolute) and then inside each of ``search_dirs`` in order.

    Args:
        file_name:   Input file name or path.
        search_dirs: Fallback directories to look in.

    Returns:
        Path of the first existing candidate.

    Raises:
        SourceNotFoundError: If no candidate exists.
    """
    path = Path(file_name)
    candidates = [path]
    if not path.is_absolute():
        candidates.extend(Path(d) / path for d in search_dirs)

    for candidate in candidates:
        if candidate.is_file():
            logger.debug("Resolved input file %s -> %s", file_name, candidate)
            return candidate

    tried = ", ".join(str(c) for c in candidates)
    raise SourceNotFoundError(f"Input file '{file_name}' not found (tried: {tried}).")


def load_customers(path: Path) -> list[Customer]:
    """Read and validate customer records from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Customers in file order.

    Raises:
        SourceNotFoundError:  If ``path`` does not exist.
        SourceMalformedError: If the file cannot be decoded into customers.
    """
    if not path.is_file():
        raise SourceNotFoundError(f"Input file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8-sig"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SourceMalformedError(f"{path.name} is not valid JSON: {exc}") from exc

    customers = parse_customer_records(raw, source=path.name)
    logger.info("Parsed %d customers from %s", len(customers), path.name)
    return customers


def parse_customer_records(raw: Any, source: str = "input") -> list[Customer]:
    """Validate already-decoded JSON into :class:`Customer` objects.

    All records are validated before any are returned.  If **any** record
    fails, a single :class:`SourceMalformedError` lists the first failures.

    Args:
        raw:    Decoded JSON value (expected: list of dicts, or ``None``).
        source: Label used in error messages.

    Returns:
        Customers in input order.

    Raises:
        SourceMalformedError: On a non-array document or invalid records.
    """
    if raw is None:
        logger.warning("%s contains null; treating as no customers", source)
        return []
    if not isinstance(raw, list):
        raise SourceMalformedError(
            f"{source} must contain a JSON array of customers, got {type(raw).__name__}."
        )

    customers: list[Customer] = []
    errors: list[tuple[int, str]] = []

    for i, record in enumerate(raw):
        try:
            customers.append(_record_to_customer(record))
        except (ValueError, ValidationError) as exc:
            errors.append((i, str(exc)))

    if errors:
        detail = "\n".join(f"  Record #{idx}: {msg}" for idx, msg in errors[:MAX_ERRORS_SHOWN])
        extra = len(errors) - MAX_ERRORS_SHOWN
        suffix = f"\n  … and {extra} more" if extra > 0 else ""
        raise SourceMalformedError(
            f"{len(errors)} record(s) failed validation in {source}:\n{detail}{suffix}"
        )

    return customers


# ── Private helpers ────────────────────────────────────────────────────────────

def _record_to_customer(record: Any) -> Customer:
    """Convert one decoded JSON object to a validated :class:`Customer`."""
    if not isinstance(record, dict):
        raise ValueError(f"Expected a JSON object, got {type(record).__name__}.")

    fields: dict[str, Any] = {}
    for key, value in record.items():
        field_name = _KEY_MAP.get(str(key).lower())
        if field_name is not None:
            fields[field_name] = value

    return Customer.model_validate(fields)
