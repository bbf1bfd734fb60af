"""
Validation and conversion of raw transaction rows.

taking the raw DataFrame (from loader.py) and:
1. Checking the required columns are present
2. Filling in optional columns that the file left out
3. Rejecting malformed records (missing/negative amounts, missing names,
   fractional ids or ages, issueSolved flags that aren't booleans)
4. Converting every row into an immutable Transaction record

Malformed data is rejected here, at the load boundary, so the analyzer
never has to deal with it.
"""

import pandas as pd
from typing import Any, List, Optional

from configs import get_logger
from .exceptions import TransactionValidationError
from .models import Transaction

# Get logger for this module
logger = get_logger(__name__)

# Columns every record must carry (names as they appear in the JSON file)
REQUIRED_COLUMNS = [
    "mtn",
    "amount",
    "senderFullName",
    "beneficiaryFullName",
]

OPTIONAL_COLUMNS = [
    "senderAge",
    "beneficiaryAge",
    "issueId",
    "issueSolved",
    "issueMessage",
]


def clean_transactions(df: pd.DataFrame) -> List[Transaction]:
    """
    validating raw transaction rows and converting them to Transaction records.

    Args:
        df: Raw DataFrame from the JSON loader, one row per transaction

    Returns:
        List of Transaction records, in the same order as the rows

    Raises:
        TransactionValidationError: If a required column is missing or a row is malformed

    Example:
        >>> raw_df = load_transactions_frame("data/transactions.json")
        >>> transactions = clean_transactions(raw_df)
        >>> print(len(transactions))
    """
    logger.info("Starting transaction validation")

    # An empty dataset is valid - the analyzer has defaults for it.
    # df.empty is also True for rows without any fields, so count rows instead
    if df is None or len(df.index) == 0:
        logger.warning("No transaction rows to clean")
        return []

    logger.debug(f"Input shape: {df.shape}")

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        error_msg = (
            f"Missing required transaction field(s): {', '.join(missing)}. "
            f"Found columns: {', '.join(str(col) for col in df.columns)}"
        )
        logger.error(error_msg)
        raise TransactionValidationError(error_msg)

    # Work on a copy
    df_clean = df.copy()

    for col in OPTIONAL_COLUMNS:
        if col not in df_clean.columns:
            logger.debug(f"Optional column '{col}' not present, filling with nulls")
            df_clean[col] = None

    _check_rows(df_clean)

    transactions = []
    for index, row in df_clean.iterrows():
        try:
            transactions.append(_to_transaction(row))
        except (TypeError, ValueError) as e:
            error_msg = f"Row {index}: {e}"
            logger.error(error_msg)
            raise TransactionValidationError(error_msg) from e

    with_issue = sum(1 for t in transactions if t.has_issue)
    logger.info(
        f"Validation complete: {len(transactions)} transactions, {with_issue} with compliance issues"
    )

    return transactions


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def _check_rows(df: pd.DataFrame) -> None:
    """
    rejecting rows the analyzer can't work with.

    Raises:
        TransactionValidationError: naming the first bad row and the reason
    """
    amounts = pd.to_numeric(df["amount"], errors="coerce")

    problems = [
        (df["mtn"].isnull(), "mtn is missing"),
        (_not_whole(df["mtn"]), "mtn must be a whole number"),
        (amounts.isnull(), "amount is missing or not a number"),
        (amounts < 0, "amount must not be negative"),
        (df["senderFullName"].isnull(), "senderFullName is missing"),
        (df["beneficiaryFullName"].isnull(), "beneficiaryFullName is missing"),
        (_not_whole(df["issueId"]), "issueId must be a whole number"),
        (_not_whole(df["senderAge"]), "senderAge must be a whole number"),
        (_not_whole(df["beneficiaryAge"]), "beneficiaryAge must be a whole number"),
        (_not_bool(df["issueSolved"]), "issueSolved must be true or false"),
    ]

    for mask, reason in problems:
        if mask.any():
            bad_rows = df.index[mask].tolist()
            error_msg = f"Row {bad_rows[0]}: {reason} ({len(bad_rows)} bad row(s) in total)"
            logger.error(error_msg)
            raise TransactionValidationError(error_msg)


def _not_whole(values: pd.Series) -> pd.Series:
    """flagging present values that aren't integers (1.7, "abc"). Nulls are left to other checks."""
    numbers = pd.to_numeric(values, errors="coerce")
    return values.notnull() & (numbers.isnull() | (numbers % 1 != 0))


def _not_bool(values: pd.Series) -> pd.Series:
    """flagging present values that aren't real booleans ("false" is a string, not False)."""
    return values.map(
        lambda v: not _is_missing(v) and not pd.api.types.is_bool(v)
    ).astype(bool)


def _to_transaction(row: pd.Series) -> Transaction:
    """converting one validated row into a Transaction."""
    issue_id = _optional_int(row["issueId"])
    issue_message = None if _is_missing(row["issueMessage"]) else str(row["issueMessage"])

    # No flag in the file: an issue without a resolution is open, no issue means nothing to solve
    if _is_missing(row["issueSolved"]):
        issue_solved = issue_id is None
    else:
        issue_solved = bool(row["issueSolved"])

    return Transaction(
        mtn=int(row["mtn"]),
        amount=float(row["amount"]),
        sender_full_name=str(row["senderFullName"]),
        beneficiary_full_name=str(row["beneficiaryFullName"]),
        sender_age=_optional_int(row["senderAge"]),
        beneficiary_age=_optional_int(row["beneficiaryAge"]),
        issue_id=issue_id,
        issue_solved=issue_solved,
        issue_message=issue_message,
    )


def _is_missing(value: Any) -> bool:
    """None and NaN both mean 'not in the file'."""
    return value is None or (not isinstance(value, str) and bool(pd.isna(value)))


def _optional_int(value: Any) -> Optional[int]:
    """nullable JSON integers come back from pandas as floats with NaN."""
    if _is_missing(value):
        return None
    return int(value)


# For testing this module independently
if __name__ == "__main__":
    from configs import setup_logging

    setup_logging()

    print("Transaction Cleaner")
    print("=" * 60)
    print("This validates raw rows and converts them into Transaction records.")
    print("\nUsage:")
    print("  transactions = clean_transactions(load_transactions_frame(path))")
    print("=" * 60)
