"""
JSON transaction loader.

handling reading the transactions file (a JSON array of transaction objects)
into a DataFrame. Validation and conversion into Transaction records is
handled in cleaner.py, keeping this loader free of record rules.
"""

import pandas as pd
from pathlib import Path
from typing import IO, List, Union

from configs import get_logger
from .cleaner import clean_transactions
from .exceptions import TransactionLoadError
from .models import Transaction

# Get logger for this module
logger = get_logger(__name__)

Source = Union[str, Path, IO]


def load_transactions_frame(source: Source) -> pd.DataFrame:
    """
    loading the raw transactions JSON into a DataFrame.

    Args:
        source: Path to the JSON file (string or Path) or a file-like object
            (e.g. a Streamlit UploadedFile)

    Returns:
        DataFrame with one row per JSON object, columns named as in the file
        (mtn, amount, senderFullName, ...)

    Raises:
        TransactionLoadError: If the file is missing or isn't a JSON array of objects

    Example:
        >>> df = load_transactions_frame("data/transactions.json")
        >>> print(df.head())
    """
    if hasattr(source, "read"):
        # It's a file-like object (Streamlit UploadedFile)
        name = getattr(source, "name", "uploaded.json")
        logger.info(f"Loading transactions from uploaded file: {name}")
    else:
        name = str(source)
        logger.info(f"Loading transactions: {name}")
        if not Path(source).is_file():
            error_msg = f"Transactions file not found: {name}"
            logger.error(error_msg)
            raise TransactionLoadError(error_msg)

    try:
        # dtype=False keeps ints as ints; convert_dates=False keeps mtn etc. untouched
        df = pd.read_json(source, orient="records", dtype=False, convert_dates=False)

    except ValueError as e:
        error_msg = f"Could not parse transactions JSON in {name}: {e}"
        logger.error(error_msg)
        raise TransactionLoadError(error_msg) from e

    except Exception as e:
        error_msg = f"Unexpected error loading transactions from {name}: {str(e)}"
        logger.error(error_msg, exc_info=True)
        raise TransactionLoadError(error_msg) from e

    logger.info(f"Read {len(df)} rows from {name}")
    logger.debug(f"DataFrame shape: {df.shape}")
    return df


def load_transactions(source: Source) -> List[Transaction]:
    """
    loading and validating transactions in one go.

    Args:
        source: Path or file-like object, see load_transactions_frame()

    Returns:
        List of Transaction records in file order

    Raises:
        TransactionLoadError: If the file can't be read
        TransactionValidationError: If a record is malformed
    """
    df = load_transactions_frame(source)
    transactions = clean_transactions(df)

    logger.info(f"Loaded {len(transactions)} transactions")
    return transactions


def transactions_to_frame(transactions: List[Transaction]) -> pd.DataFrame:
    """
    turning Transaction records back into a DataFrame (for tables and charts).

    Columns use the snake_case field names of Transaction.
    """
    columns = [
        "mtn",
        "amount",
        "sender_full_name",
        "sender_age",
        "beneficiary_full_name",
        "beneficiary_age",
        "issue_id",
        "issue_solved",
        "issue_message",
    ]
    return pd.DataFrame(
        [[getattr(t, col) for col in columns] for t in transactions],
        columns=columns,
    )


# For testing this module independently
if __name__ == "__main__":
    from configs import setup_logging

    setup_logging()

    print("Transaction Loader Test")
    print("=" * 60)
    print("This module loads transactions from a JSON array file.")
    print("Usage:")
    print("  transactions = load_transactions('data/transactions.json')")
    print("=" * 60)
