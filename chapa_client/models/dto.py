"""Chapa API DTO models

Overview
--------
Pydantic DTOs for the Chapa REST API. Field names follow the gateway's wire
schema verbatim so payloads round-trip byte-for-byte.

Design guidelines
-----------------
- Request DTOs are strict (``extra=forbid``) and carry the gateway's
  field-presence rules in ``REQUIRED_FIELDS``; call ``validate_required()``
  before sending.
- Response DTOs are permissive (``extra=allow``) and tolerate ``data: null``,
  which the gateway returns alongside ``status: "failed"``.

Endpoint mapping
----------------
- ``POST /transaction/initialize`` ← ``PaymentRequest`` → ``PaymentResponse``
- ``GET /transaction/verify/{tx_ref}`` → ``VerifyResponse``
- ``POST /transfers`` ← ``BankTransfer`` → ``BankTransferResponse``
- ``POST /bulk-transfers`` ← ``BulkTransferRequest`` → ``BulkTransferResponse``
- ``GET /transactions`` → ``TransactionsResponse``
- ``GET /banks`` → ``BanksResponse``
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..errors import ChapaValidationError
from .base import GatewayEnvelope, RequestSchema, ResponseSchema
from .enums import Currency, TransactionStatus


# -----------------------------
# Payments
# -----------------------------


class PaymentRequest(RequestSchema):
    """Payload for initializing a hosted checkout.

    Examples:
        >>> req = PaymentRequest(amount=Decimal("100"), currency="ETB", tx_ref="tx-1")
        >>> req.to_payload()["amount"]
        '100'
    """

    REQUIRED_FIELDS = {
        "tx_ref": "transaction reference is required",
        "currency": "currency is required",
        "amount": "amount is required",
    }

    amount: Decimal = Field(default=Decimal("0"), description="Amount to charge; sent as a JSON string.")
    currency: str = Field(default="", description="Currency code, e.g. ETB or USD.", examples=[Currency.ETB.value])
    email: str = Field(default="", description="Customer email address.")
    first_name: str = Field(default="", description="Customer first name.")
    last_name: str = Field(default="", description="Customer last name.")
    phone: str = Field(default="", description="Customer phone number.")
    callback_url: str = Field(default="", description="URL the gateway calls after payment completes.")
    tx_ref: str = Field(default="", description="Merchant's unique transaction reference.")
    customization: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Free-form checkout customization (title, description, logo).",
        examples=[{"title": "Order 42", "description": "Groceries"}],
    )


class CheckoutData(ResponseSchema):
    checkout_url: Optional[str] = None


class PaymentResponse(GatewayEnvelope):
    """Response of ``POST /transaction/initialize``."""

    data: Optional[CheckoutData] = None


class VerifyData(ResponseSchema):
    """Transaction echo returned by the verify endpoint.

    Only ``charge`` is guaranteed; the remaining fields are populated when the
    gateway includes them.
    """

    charge: Optional[float] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    tx_ref: Optional[str] = None
    reference: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: Optional[str] = None


class VerifyResponse(GatewayEnvelope):
    """Response of ``GET /transaction/verify/{tx_ref}``."""

    data: Optional[VerifyData] = None


# -----------------------------
# Transfers
# -----------------------------


class BankTransfer(RequestSchema):
    """Payload for a single payout to a bank account."""

    REQUIRED_FIELDS = {
        "account_name": "account name is required",
        "account_number": "account number is required",
        "amount": "amount is required",
        "currency": "currency is required",
        "reference": "reference is required",
        "bank_code": "bank code is required",
    }

    account_name: str = Field(default="", description="Recipient account name as registered at the bank.")
    account_number: str = Field(default="", description="Recipient account number.")
    amount: float = Field(default=0.0, description="Amount to transfer to the recipient.")
    currency: str = Field(default="", description="Transfer currency; the gateway expects ETB.")
    reference: str = Field(
        default="", description="Merchant's unique transfer reference, usable to query transfer status."
    )
    bank_code: str = Field(default="", description="Recipient bank code as listed by ``GET /banks``.")


class BankTransferResponse(GatewayEnvelope):
    """Response of ``POST /transfers``; ``data`` is an opaque string."""

    data: Optional[str] = None


class BulkData(RequestSchema):
    """One payout instruction inside a bulk transfer."""

    REQUIRED_FIELDS = {
        "account_name": "account name is required",
        "account_number": "account number is required",
        "amount": "amount is required",
        "reference": "reference is required",
        "bank_code": "bank code is required",
    }

    account_name: str = ""
    account_number: str = ""
    amount: int = 0
    reference: str = ""
    bank_code: str = ""


class BulkTransferRequest(RequestSchema):
    """Payload carrying multiple payout instructions in one request."""

    REQUIRED_FIELDS = {
        "title": "title of the bulk transfer is required",
        "currency": "currency is required",
        "bulk_data": "at least one account is required",
    }

    title: str = ""
    currency: str = ""
    bulk_data: List[BulkData] = Field(default_factory=list)

    def validate_required(self) -> None:
        """Check the envelope fields and every payout entry."""
        errors = self.missing_fields()
        for index, entry in enumerate(self.bulk_data):
            for field, reason in entry.missing_fields().items():
                errors[f"bulk_data[{index}].{field}"] = reason
        if errors:
            raise ChapaValidationError(errors)


class BulkTransferResponseData(ResponseSchema):
    id: Optional[int] = None
    created_at: Optional[str] = None


class BulkTransferResponse(GatewayEnvelope):
    """Response of ``POST /bulk-transfers``."""

    data: Optional[BulkTransferResponseData] = None


# -----------------------------
# Lookups
# -----------------------------


class Customer(ResponseSchema):
    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    mobile: Optional[str] = None


class Transaction(ResponseSchema):
    """Single entry of the merchant transaction listing."""

    status: TransactionStatus
    ref_id: Optional[str] = None
    type: Optional[str] = None
    created_at: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[Decimal] = None
    charge: Optional[str] = None
    trans_id: Optional[str] = None
    payment_method: Optional[str] = None
    customer: Optional[Customer] = None


class Pagination(ResponseSchema):
    per_page: Optional[int] = None
    current_page: Optional[int] = None
    first_page_url: Optional[str] = None
    next_page_url: Optional[str] = None
    prev_page_url: Optional[str] = None


class TransactionList(ResponseSchema):
    transactions: List[Transaction] = Field(default_factory=list)
    pagination: Optional[Pagination] = None


class TransactionsResponse(GatewayEnvelope):
    """Response of ``GET /transactions``."""

    data: Optional[TransactionList] = None


class Bank(ResponseSchema):
    """Static reference data for a bank or mobile-money provider.

    ``is_rtgs`` and ``is_mobilemoney`` are 0/1 integers on the wire.
    """

    id: int
    swift: Optional[str] = None
    name: str
    acct_length: Optional[int] = None
    country_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    is_rtgs: Optional[int] = None
    is_mobilemoney: Optional[int] = None
    currency: Optional[Currency | str] = None

    @property
    def supports_rtgs(self) -> bool:
        return bool(self.is_rtgs)

    @property
    def is_mobile_money(self) -> bool:
        return bool(self.is_mobilemoney)


class BanksResponse(GatewayEnvelope):
    """Response of ``GET /banks``."""

    data: Optional[List[Bank]] = Field(default_factory=list)
