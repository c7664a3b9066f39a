"""Chapa API models.

Re-exports request/response DTOs and enums consumed by `ChapaClient` and
`AsyncChapaClient`.
"""

from .enums import Currency, TransactionStatus
from .dto import (
    Bank,
    BankTransfer,
    BankTransferResponse,
    BanksResponse,
    BulkData,
    BulkTransferRequest,
    BulkTransferResponse,
    BulkTransferResponseData,
    CheckoutData,
    Customer,
    Pagination,
    PaymentRequest,
    PaymentResponse,
    Transaction,
    TransactionList,
    TransactionsResponse,
    VerifyData,
    VerifyResponse,
)

__all__ = [
    # Enums
    "Currency",
    "TransactionStatus",
    # Requests
    "PaymentRequest",
    "BankTransfer",
    "BulkData",
    "BulkTransferRequest",
    # Responses
    "PaymentResponse",
    "CheckoutData",
    "VerifyResponse",
    "VerifyData",
    "BankTransferResponse",
    "BulkTransferResponse",
    "BulkTransferResponseData",
    "TransactionsResponse",
    "TransactionList",
    "Transaction",
    "Customer",
    "Pagination",
    "BanksResponse",
    "Bank",
]
