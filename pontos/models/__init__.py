"""Pontos models."""

from pontos.models.client import Client
from pontos.models.promotion import Promotion
from pontos.models.transaction import Transaction, TransactionType

__all__ = [
    "Client",
    "Promotion",
    "Transaction",
    "TransactionType",
]
