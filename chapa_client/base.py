"""Client protocols and shared helpers for the Chapa client facade.

Defines the sync/async protocols that concrete clients satisfy, and a
`ClientCommonMixin` holding the pieces both flavours share: endpoint paths,
headers, pre-flight validation, and response decoding.

Usage:
- `ChapaClient` and `AsyncChapaClient` implement these protocols.
- The mixin never performs I/O; each client owns its httpx client.
"""

from __future__ import annotations

import logging
from typing import Dict, Protocol, Type, TypeVar, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .errors import ChapaValidationError
from .models.base import RequestSchema
from .models.dto import (
    BankTransfer,
    BankTransferResponse,
    BanksResponse,
    BulkTransferRequest,
    BulkTransferResponse,
    PaymentRequest,
    PaymentResponse,
    TransactionsResponse,
    VerifyResponse,
)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

INITIALIZE_PATH = "/transaction/initialize"
VERIFY_PATH = "/transaction/verify/{tx_ref}"
TRANSFERS_PATH = "/transfers"
BULK_TRANSFERS_PATH = "/bulk-transfers"
TRANSACTIONS_PATH = "/transactions"
BANKS_PATH = "/banks"


@runtime_checkable
class PaymentAPI(Protocol):
    """Protocol for synchronous Chapa clients."""

    def payment_request(self, request: PaymentRequest) -> PaymentResponse: ...

    def verify(self, tx_ref: str) -> VerifyResponse: ...

    def transfer_to_bank(self, request: BankTransfer) -> BankTransferResponse: ...

    def get_transactions(self) -> TransactionsResponse: ...

    def get_banks(self) -> BanksResponse: ...

    def bulk_transfer(self, request: BulkTransferRequest) -> BulkTransferResponse: ...


@runtime_checkable
class AsyncPaymentAPI(Protocol):
    """Protocol for asynchronous Chapa clients."""

    async def payment_request(self, request: PaymentRequest) -> PaymentResponse: ...

    async def verify(self, tx_ref: str) -> VerifyResponse: ...

    async def transfer_to_bank(self, request: BankTransfer) -> BankTransferResponse: ...

    async def get_transactions(self) -> TransactionsResponse: ...

    async def get_banks(self) -> BanksResponse: ...

    async def bulk_transfer(self, request: BulkTransferRequest) -> BulkTransferResponse: ...


class ClientCommonMixin:
    """Shared helpers for `ChapaClient` and `AsyncChapaClient`.

    Concrete clients set ``api_key``, ``base_url`` and ``_logger``.
    """

    api_key: str
    base_url: str
    _logger: logging.Logger

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _verify_path(self, tx_ref: str) -> str:
        # One escaped path segment; "#", "?" and "/" would otherwise reshape the URL.
        return VERIFY_PATH.format(tx_ref=quote(tx_ref, safe=""))

    def _headers(self) -> Dict[str, str]:
        """Build JSON headers carrying the Bearer token.

        Returns:
            A dictionary with `Content-Type` and `Authorization` headers.
        """
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def _check(self, request: RequestSchema) -> None:
        """Run field-presence validation, logging the rejected input.

        Raises:
            ChapaValidationError: If any required field is blank.
        """
        try:
            request.validate_required()
        except ChapaValidationError as e:
            self._logger.warning("warning %s input %r", e, request)
            raise

    def _decode(self, model: Type[ResponseT], response: httpx.Response) -> ResponseT:
        """Decode a response body into ``model``.

        The HTTP status is not inspected: the gateway reports failures in the
        JSON envelope, which decodes like any other response.

        Raises:
            pydantic.ValidationError: If the body is not JSON or does not match ``model``.
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            self._logger.error(
                "error while unmarshaling %s response (status=%s): %s",
                model.__name__,
                response.status_code,
                e,
            )
            raise
