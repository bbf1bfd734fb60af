"""
Custom exceptions for transaction loading and validation.

These give users clear error messages instead of confusing technical errors.
"""


class TransactionDataError(Exception):
    """
    Base exception for transaction data errors.

    Catch this when you don't care whether loading or validation failed.
    """

    pass


class TransactionLoadError(TransactionDataError):
    """
    Raised when the transactions file can't be read.

    Example:
        raise TransactionLoadError("Transactions file not found: data/transactions.json")
    """

    pass


class TransactionValidationError(TransactionDataError):
    """
    Raised when a loaded record is malformed.

    Example:
        raise TransactionValidationError("Row 3: amount must not be negative")
    """

    pass
