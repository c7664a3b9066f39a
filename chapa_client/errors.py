"""Error types for the Chapa client package.

Purpose:
- Provide typed exceptions raised by `ChapaClient` and `AsyncChapaClient`
  before any network access takes place.
- Keep request-validation failures distinct from transport failures
  (``httpx.TransportError``) and decode failures (``pydantic.ValidationError``),
  both of which propagate unchanged.

Usage:
- Catch `ChapaError` for any failure raised by this package.
- Catch `ChapaValidationError` and inspect `errors` for the missing fields.
"""

from __future__ import annotations

from typing import Dict, Mapping


class ChapaError(Exception):
    """Base error for all Chapa client exceptions."""


class ChapaConfigurationError(ChapaError):
    """Raised when client settings are incomplete (e.g. no API key)."""


class ChapaValidationError(ChapaError):
    """Raised when a request is missing required fields.

    Args:
        errors: Mapping of wire field name to a human-readable reason.
    """

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors: Dict[str, str] = dict(errors)
        details = "; ".join(f"{field}: {reason}" for field, reason in sorted(self.errors.items()))
        super().__init__(f"invalid input {details}")
