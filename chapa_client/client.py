"""Chapa REST API client

Overview
--------
Thin, synchronous HTTP client for the Chapa payment gateway. Each method maps
to one gateway endpoint: it validates the request where the gateway has
field-presence rules, sends JSON with the Bearer token, and decodes the body
into a typed DTO.

Errors
------
- ``ChapaValidationError``: required request fields are blank. Raised before
  any network access.
- ``httpx.TransportError`` (timeouts, connection failures): propagated unchanged.
- ``pydantic.ValidationError``: the body is not JSON or does not match the
  response schema. Propagated unchanged.

Usage
-----
>>> client = ChapaClient("CHASECK_TEST-...")
>>> resp = client.payment_request(PaymentRequest(amount=Decimal("100"), currency="ETB", tx_ref="tx-1"))
>>> resp.data.checkout_url
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
    ClientCommonMixin,
    PaymentAPI,
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


class ChapaClient(ClientCommonMixin, PaymentAPI):
    """Synchronous client for the Chapa payment gateway.

    Holds only the API key, the base URL, and a reusable ``httpx.Client``;
    calls share no mutable state and may be issued from several threads.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Create a Chapa client.

        Args:
            api_key: Chapa secret key, sent as ``Authorization: Bearer <api_key>``.
            base_url: API base URL including the version prefix.
            timeout: HTTP timeout in seconds for the internal client.
            client: Optional preconfigured ``httpx.Client`` to use. It is not
                closed by :meth:`close`.
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Optional[ChapaSettings] = None, **kwargs: Any) -> "ChapaClient":
        """Construct a client from `ChapaSettings` (environment by default).

        Raises:
            ChapaConfigurationError: If no API key is configured.
        """
        settings = settings or get_settings()
        if not settings.api_key:
            raise ChapaConfigurationError("Missing required setting: CHAPA_API_KEY")
        return cls(settings.api_key, base_url=settings.base_url, timeout=settings.timeout, **kwargs)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ChapaClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, method: str, path: str, model: type[ResponseT], payload: Optional[dict] = None) -> ResponseT:
        url = self._url(path)
        self._logger.debug("ChapaClient: %s %s", method, url)
        try:
            r = self._client.request(method, url, headers=self._headers(), json=payload)
        except httpx.TransportError as e:
            self._logger.error("error %s %s: %s", method, url, e)
            raise
        return self._decode(model, r)

    def payment_request(self, request: PaymentRequest) -> PaymentResponse:
        """Initialize a hosted checkout.

        API
        ---
        - Method/Path: ``POST /transaction/initialize``
        - Required: ``tx_ref``, ``currency``, ``amount``

        Returns:
            ``PaymentResponse`` whose ``data.checkout_url`` is the payment page.
        """
        self._check(request)
        return self._send("POST", INITIALIZE_PATH, PaymentResponse, request.to_payload())

    def verify(self, tx_ref: str) -> VerifyResponse:
        """Verify a payment by its transaction reference.

        API
        ---
        - Method/Path: ``GET /transaction/verify/{tx_ref}``
        """
        return self._send("GET", self._verify_path(tx_ref), VerifyResponse)

    def transfer_to_bank(self, request: BankTransfer) -> BankTransferResponse:
        """Pay out to a single bank account.

        API
        ---
        - Method/Path: ``POST /transfers``
        - Required: every ``BankTransfer`` field
        """
        self._check(request)
        return self._send("POST", TRANSFERS_PATH, BankTransferResponse, request.to_payload())

    def get_transactions(self) -> TransactionsResponse:
        """List the merchant's transactions (``GET /transactions``)."""
        return self._send("GET", TRANSACTIONS_PATH, TransactionsResponse)

    def get_banks(self) -> BanksResponse:
        """List banks supported for transfers (``GET /banks``)."""
        return self._send("GET", BANKS_PATH, BanksResponse)

    def bulk_transfer(self, request: BulkTransferRequest) -> BulkTransferResponse:
        """Submit several payouts in one request.

        API
        ---
        - Method/Path: ``POST /bulk-transfers``
        - Required: ``title``, ``currency``, a non-empty ``bulk_data`` whose
          entries each carry their required fields
        """
        self._check(request)
        return self._send("POST", BULK_TRANSFERS_PATH, BulkTransferResponse, request.to_payload())
