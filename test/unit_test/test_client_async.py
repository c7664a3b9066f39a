from __future__ import annotations

import json
from decimal import Decimal
from typing import List

import httpx
import pytest
from pydantic import ValidationError

from chapa_client.client_async import AsyncChapaClient
from chapa_client.errors import ChapaValidationError
from chapa_client.models import (
    BankTransfer,
    BulkData,
    BulkTransferRequest,
    PaymentRequest,
    TransactionStatus,
)

BASE_URL = "http://mock/v1"
API_KEY = "CHASECK_TEST-async"


def _mock_transport(seen: List[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        assert request.headers.get("Authorization") == f"Bearer {API_KEY}"
        path = request.url.path
        if request.method == "POST" and path == "/v1/transaction/initialize":
            return httpx.Response(
                200, json={"message": "Hosted Link", "status": "success", "data": {"checkout_url": "https://c/x"}}
            )
        if request.method == "GET" and path == "/v1/transaction/verify/tx-9":
            return httpx.Response(200, json={"message": "ok", "status": "success", "data": {"charge": 1.25}})
        if request.method == "POST" and path == "/v1/transfers":
            return httpx.Response(200, json={"message": "queued", "status": "success", "data": "queued"})
        if request.method == "POST" and path == "/v1/bulk-transfers":
            return httpx.Response(200, json={"message": "queued", "status": "success", "data": {"id": 7}})
        if request.method == "GET" and path == "/v1/transactions":
            return httpx.Response(
                200,
                json={
                    "message": "ok",
                    "status": "success",
                    "data": {"transactions": [{"status": "success", "amount": 5}], "pagination": None},
                },
            )
        if request.method == "GET" and path == "/v1/banks":
            return httpx.Response(200, json={"message": "ok", "data": [{"id": 1, "name": "CBE"}]})
        return httpx.Response(404, json={"message": "not found", "status": "failed", "data": None})

    return httpx.MockTransport(handler)


@pytest.fixture()
def seen() -> List[httpx.Request]:
    return []


@pytest.fixture()
def chapa(seen: List[httpx.Request]) -> AsyncChapaClient:
    http_client = httpx.AsyncClient(transport=_mock_transport(seen))
    return AsyncChapaClient(API_KEY, base_url=BASE_URL, client=http_client)


@pytest.mark.asyncio
async def test_async_client_runs_every_operation(chapa: AsyncChapaClient, seen: List[httpx.Request]) -> None:
    payment = await chapa.payment_request(PaymentRequest(amount=Decimal("20"), currency="ETB", tx_ref="tx-9"))
    assert payment.data is not None and payment.data.checkout_url == "https://c/x"
    assert json.loads(seen[-1].content)["amount"] == "20"

    verified = await chapa.verify("tx-9")
    assert verified.data is not None and verified.data.charge == 1.25

    transfer = await chapa.transfer_to_bank(
        BankTransfer(
            account_name="A", account_number="1", amount=10.0, currency="ETB", reference="r", bank_code="130"
        )
    )
    assert transfer.data == "queued"

    bulk = await chapa.bulk_transfer(
        BulkTransferRequest(
            title="t",
            currency="ETB",
            bulk_data=[BulkData(account_name="A", account_number="1", amount=1, reference="r", bank_code="130")],
        )
    )
    assert bulk.data is not None and bulk.data.id == 7

    txs = await chapa.get_transactions()
    assert txs.data is not None and txs.data.transactions[0].status is TransactionStatus.SUCCESS

    banks = await chapa.get_banks()
    assert [b.name for b in banks.data] == ["CBE"]

    assert len(seen) == 6


@pytest.mark.asyncio
async def test_async_verify_escapes_reference(chapa: AsyncChapaClient, seen: List[httpx.Request]) -> None:
    await chapa.verify("order#1")

    assert seen[-1].url.raw_path == b"/v1/transaction/verify/order%231"


@pytest.mark.asyncio
async def test_async_validation_fails_before_io(chapa: AsyncChapaClient, seen: List[httpx.Request]) -> None:
    with pytest.raises(ChapaValidationError) as ei:
        await chapa.bulk_transfer(BulkTransferRequest(currency="ETB"))
    assert "title" in ei.value.errors
    assert seen == []


@pytest.mark.asyncio
async def test_async_malformed_body_raises_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not json")

    chapa = AsyncChapaClient(API_KEY, base_url=BASE_URL, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    with pytest.raises(ValidationError):
        await chapa.get_transactions()


@pytest.mark.asyncio
async def test_async_transport_error_propagates() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    chapa = AsyncChapaClient(API_KEY, base_url=BASE_URL, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    with pytest.raises(httpx.ConnectTimeout):
        await chapa.verify("tx-9")


@pytest.mark.asyncio
async def test_async_context_manager_closes_owned_client() -> None:
    async with AsyncChapaClient(API_KEY) as chapa:
        assert chapa._client.is_closed is False
    assert chapa._client.is_closed is True
