"""Asynchronous Chapa REST API client.

Async twin of :class:`chapa_client.client.ChapaClient` backed by
``httpx.AsyncClient``. Validation, headers, and decoding are shared through
`ClientCommonMixin`, so both flavours behave identically apart from I/O.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .base import (
    BANKS_PATH,
    BULK_TRANSFERS_PATH,
    INITIALIZE_PATH,
    TRANSACTIONS_PATH,
    TRANSFERS_PATH,
    AsyncPaymentAPI,
    ClientCommonMixin,
    ResponseT,
)
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ChapaSettings, get_settings
from .errors import ChapaConfigurationError
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


class AsyncChapaClient(ClientCommonMixin, AsyncPaymentAPI):
    """Async client for the Chapa payment gateway.

    - Uses ``httpx.AsyncClient`` for HTTP operations.
    - Raises ``ChapaValidationError`` before any I/O on incomplete requests.
    - Propagates ``httpx.TransportError`` and ``pydantic.ValidationError`` unchanged.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Optional[ChapaSettings] = None, **kwargs: Any) -> "AsyncChapaClient":
        """Construct an async client from `ChapaSettings` (environment by default).

        Raises:
            ChapaConfigurationError: If no API key is configured.
        """
        settings = settings or get_settings()
        if not settings.api_key:
            raise ChapaConfigurationError("Missing required setting: CHAPA_API_KEY")
        return cls(settings.api_key, base_url=settings.base_url, timeout=settings.timeout, **kwargs)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncChapaClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _send(
        self, method: str, path: str, model: type[ResponseT], payload: Optional[dict] = None
    ) -> ResponseT:
        url = self._url(path)
        self._logger.debug("AsyncChapaClient: %s %s", method, url)
        try:
            r = await self._client.request(method, url, headers=self._headers(), json=payload)
        except httpx.TransportError as e:
            self._logger.error("error %s %s: %s", method, url, e)
            raise
        return self._decode(model, r)

    async def payment_request(self, request: PaymentRequest) -> PaymentResponse:
        """Initialize a hosted checkout.

        API
        ---
        - Method/Path: ``POST /transaction/initialize``
        - Required: ``tx_ref``, ``currency``, ``amount``
        """
        self._check(request)
        return await self._send("POST", INITIALIZE_PATH, PaymentResponse, request.to_payload())

    async def verify(self, tx_ref: str) -> VerifyResponse:
        """Verify a payment by its transaction reference.

        API
        ---
        - Method/Path: ``GET /transaction/verify/{tx_ref}``
        """
        return await self._send("GET", self._verify_path(tx_ref), VerifyResponse)

    async def transfer_to_bank(self, request: BankTransfer) -> BankTransferResponse:
        """Pay out to a single bank account.

        API
        ---
        - Method/Path: ``POST /transfers``
        - Required: every ``BankTransfer`` field
        """
        self._check(request)
        return await self._send("POST", TRANSFERS_PATH, BankTransferResponse, request.to_payload())

    async def get_transactions(self) -> TransactionsResponse:
        """List the merchant's transactions (``GET /transactions``)."""
        return await self._send("GET", TRANSACTIONS_PATH, TransactionsResponse)

    async def get_banks(self) -> BanksResponse:
        """List banks supported for transfers (``GET /banks``)."""
        return await self._send("GET", BANKS_PATH, BanksResponse)

    async def bulk_transfer(self, request: BulkTransferRequest) -> BulkTransferResponse:
        """Submit several payouts in one request.

        API
        ---
        - Method/Path: ``POST /bulk-transfers``
        - Required: ``title``, ``currency``, a non-empty ``bulk_data`` whose
          entries each carry their required fields
        """
        self._check(request)
        return await self._send("POST", BULK_TRANSFERS_PATH, BulkTransferResponse, request.to_payload())
