"""
Data loading and validation package.

Two steps, kept separate:
- loader: reads the transactions JSON file into a DataFrame
- cleaner: validates the rows and turns them into Transaction records

Usage:
    from src.data import load_transactions

    transactions = load_transactions("data/transactions.json")
"""

from .exceptions import (
    TransactionDataError,
    TransactionLoadError,
    TransactionValidationError,
)
from .models import Transaction
from .cleaner import clean_transactions
from .loader import load_transactions, load_transactions_frame, transactions_to_frame

__all__ = [
    # Exceptions
    "TransactionDataError",
    "TransactionLoadError",
    "TransactionValidationError",
    # Model
    "Transaction",
    # Main functions
    "clean_transactions",
    "load_transactions",
    "load_transactions_frame",
    "transactions_to_frame",
]
