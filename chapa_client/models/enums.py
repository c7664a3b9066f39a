"""Enumerations shared by Chapa request and response models."""

from __future__ import annotations

from enum import Enum


class TransactionStatus(str, Enum):
    """Lifecycle status reported for a transaction in listing results."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class Currency(str, Enum):
    """Currencies accepted by the gateway for payments and transfers."""

    ETB = "ETB"
    USD = "USD"
