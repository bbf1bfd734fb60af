import pandas as pd
import pytest

from src.data.cleaner import clean_transactions
from src.data.exceptions import TransactionValidationError


def _row(**overrides):
    row = {
        "mtn": 1,
        "amount": 100.0,
        "senderFullName": "Tom Shelby",
        "senderAge": 22,
        "beneficiaryFullName": "Aunt Polly",
        "beneficiaryAge": 34,
        "issueId": None,
        "issueSolved": True,
        "issueMessage": None,
    }
    row.update(overrides)
    return row


def test_converts_rows_in_order():
    df = pd.DataFrame(
        [
            _row(mtn=10, amount=5),
            _row(mtn=11, issueId=7, issueSolved=False, issueMessage="fishy"),
        ]
    )

    transactions = clean_transactions(df)

    assert [t.mtn for t in transactions] == [10, 11]
    first, second = transactions
    assert first.amount == 5.0
    assert isinstance(first.amount, float)
    assert first.sender_full_name == "Tom Shelby"
    assert first.sender_age == 22
    assert first.issue_id is None
    assert first.issue_message is None
    assert first.has_issue is False
    assert second.issue_id == 7
    assert isinstance(second.issue_id, int)
    assert second.issue_solved is False
    assert second.issue_message == "fishy"


def test_empty_frame_is_an_empty_dataset():
    assert clean_transactions(pd.DataFrame()) == []


def test_missing_required_column():
    df = pd.DataFrame([_row()]).drop(columns=["amount"])
    with pytest.raises(TransactionValidationError, match="amount"):
        clean_transactions(df)


@pytest.mark.parametrize(
    "overrides, reason",
    [
        ({"amount": -1.0}, "negative"),
        ({"amount": None}, "amount is missing"),
        ({"senderFullName": None}, "senderFullName"),
        ({"mtn": None}, "mtn"),
        ({"mtn": 1.7}, "mtn must be a whole number"),
        ({"issueId": 4.5}, "issueId must be a whole number"),
        ({"senderAge": 22.5}, "senderAge must be a whole number"),
        ({"issueId": 4, "issueSolved": "false"}, "issueSolved must be true or false"),
        ({"issueId": 4, "issueSolved": 0}, "issueSolved must be true or false"),
    ],
)
def test_rejects_malformed_rows(overrides, reason):
    df = pd.DataFrame([_row(), _row(**overrides)])
    with pytest.raises(TransactionValidationError, match=reason) as excinfo:
        clean_transactions(df)
    assert "Row 1" in str(excinfo.value)


def test_optional_columns_may_be_absent():
    df = pd.DataFrame(
        [
            {"mtn": 1, "amount": 1.0, "senderFullName": "A", "beneficiaryFullName": "B"},
        ]
    )
    (transaction,) = clean_transactions(df)
    assert transaction.sender_age is None
    assert transaction.issue_id is None
    assert transaction.issue_solved is True


def test_missing_solved_flag_depends_on_issue():
    df = pd.DataFrame(
        [
            _row(issueId=None, issueSolved=None),
            _row(issueId=4, issueSolved=None, issueMessage="open"),
        ]
    )
    no_issue, open_issue = clean_transactions(df)
    assert no_issue.issue_solved is True
    assert open_issue.issue_solved is False


def test_non_numeric_mtn_is_a_validation_error():
    df = pd.DataFrame([_row(), _row(mtn="abc")])
    with pytest.raises(TransactionValidationError, match="Row 1"):
        clean_transactions(df)


def test_rows_without_any_fields_are_rejected():
    # two records, no columns at all: not the same thing as an empty dataset
    df = pd.DataFrame([{}, {}])
    with pytest.raises(TransactionValidationError, match="Missing required"):
        clean_transactions(df)


def test_whole_floats_are_accepted():
    # nullable JSON integers arrive as floats (4.0) once a null is in the column
    df = pd.DataFrame([_row(issueId=4.0, issueSolved=False), _row()])
    first, second = clean_transactions(df)
    assert first.issue_id == 4
    assert second.issue_id is None
