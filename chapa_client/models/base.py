"""Pydantic base schemas for Chapa request and response models.

The gateway speaks snake_case JSON, so field names are used verbatim and no
alias generator is applied.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ..errors import ChapaValidationError


def is_blank(value: Any) -> bool:
    """Return True for values treated as "not provided": None, empty, or zero."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float, Decimal)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


class RequestSchema(BaseModel):
    """Shared base for outbound request payloads.

    - Rejects unknown fields so typos surface at construction time
    - Provides `validate_required()` for the gateway's field-presence rules
    - Serializes with `to_payload()` in JSON mode (Decimal → string)
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    #: wire field name -> message reported when the field is blank
    REQUIRED_FIELDS: ClassVar[Dict[str, str]] = {}

    def missing_fields(self) -> Dict[str, str]:
        return {
            field: reason
            for field, reason in self.REQUIRED_FIELDS.items()
            if is_blank(getattr(self, field))
        }

    def validate_required(self) -> None:
        """Raise `ChapaValidationError` when any required field is blank."""
        errors = self.missing_fields()
        if errors:
            raise ChapaValidationError(errors)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class ResponseSchema(BaseModel):
    """Shared base for gateway responses.

    Extra fields are kept (``extra="allow"``) since the gateway adds fields
    over time; numbers are accepted where the schema declares strings.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)


class GatewayEnvelope(ResponseSchema):
    """Common ``{message, status}`` envelope of every gateway response.

    ``message`` is a plain string on success and may be an object of
    per-field errors when the gateway rejects a request.
    """

    message: Optional[str | Dict[str, Any]] = None
    status: Optional[str] = None
