"""Chapa payment gateway client.

Typed bindings for the Chapa REST API: hosted-checkout initialization,
payment verification, bank and bulk transfers, and the transaction and bank
listings.

Subpackages and modules
-----------------------

- ``chapa_client.client`` / ``chapa_client.client_async``: the sync and async
  clients, both satisfying the protocols in ``chapa_client.base``.
- ``chapa_client.models``: request/response DTOs mirroring the wire schema.
- ``chapa_client.config``: environment-driven settings (``CHAPA_*``).
- ``chapa_client.logging_config``: opt-in logging setup for applications.

Typical workflow
----------------

1. Build a client with ``ChapaClient.from_settings()`` or ``ChapaClient(api_key)``.
2. Call ``payment_request`` and redirect the customer to ``data.checkout_url``.
3. Call ``verify(tx_ref)`` once the callback arrives.
"""

from .base import AsyncPaymentAPI, PaymentAPI
from .client import ChapaClient
from .client_async import AsyncChapaClient
from .config import ChapaSettings, get_settings
from .errors import ChapaConfigurationError, ChapaError, ChapaValidationError
from .models import (
    Bank,
    BankTransfer,
    BankTransferResponse,
    BanksResponse,
    BulkData,
    BulkTransferRequest,
    BulkTransferResponse,
    Currency,
    PaymentRequest,
    PaymentResponse,
    Transaction,
    TransactionsResponse,
    TransactionStatus,
    VerifyResponse,
)

__all__ = [
    "ChapaClient",
    "AsyncChapaClient",
    "PaymentAPI",
    "AsyncPaymentAPI",
    "ChapaSettings",
    "get_settings",
    "ChapaError",
    "ChapaConfigurationError",
    "ChapaValidationError",
    "Bank",
    "BankTransfer",
    "BankTransferResponse",
    "BanksResponse",
    "BulkData",
    "BulkTransferRequest",
    "BulkTransferResponse",
    "Currency",
    "PaymentRequest",
    "PaymentResponse",
    "Transaction",
    "TransactionsResponse",
    "TransactionStatus",
    "VerifyResponse",
]
