import io
import json

import pytest

from src.analysis.analyzer import TransactionAnalyzer
from src.data import (
    TransactionLoadError,
    TransactionValidationError,
    load_transactions,
    load_transactions_frame,
    transactions_to_frame,
)


def test_load_sample_file(sample_data_path):
    transactions = load_transactions(sample_data_path)
    analyzer = TransactionAnalyzer()

    assert len(transactions) == 13
    assert transactions[0].mtn == 663458
    assert transactions[0].issue_message == "Looks like money laundering"
    assert transactions[3].issue_id is None

    assert analyzer.max_amount(transactions) == 985.0
    assert analyzer.unsolved_issue_ids(transactions) == [1, 3, 15, 54, 99]
    assert analyzer.solved_issue_messages(transactions) == [
        "Never gonna give you up",
        "Never gonna let you down",
        "Never gonna run around and desert you",
    ]
    assert analyzer.count_unique_clients(transactions) == 13
    assert analyzer.count_unique_mtns(transactions) == 10
    assert analyzer.top_sender(transactions) == "Grace Burgess"
    assert analyzer.has_unsolved_issue_for("aunt polly", transactions) is False
    assert analyzer.has_unsolved_issue_for("Arthur Shelby", transactions) is True
    assert analyzer.total_amount_sent_by("tom Shelby", transactions) == pytest.approx(
        895.26
    )


def test_null_and_absent_fields(write_json):
    path = write_json(
        [
            {
                "mtn": 1,
                "amount": 10,
                "senderFullName": "A",
                "senderAge": 20,
                "beneficiaryFullName": "B",
                "beneficiaryAge": 30,
                "issueId": 3,
                "issueSolved": False,
                "issueMessage": "open",
            },
            {
                "mtn": 2,
                "amount": 2.5,
                "senderFullName": "B",
                "senderAge": 30,
                "beneficiaryFullName": "A",
                "beneficiaryAge": 20,
                "issueId": None,
                "issueSolved": True,
            },
        ]
    )

    first, second = load_transactions(path)

    assert first.amount == 10.0
    assert first.issue_id == 3
    assert first.issue_solved is False
    assert second.issue_id is None
    assert second.issue_message is None
    assert second.issue_solved is True


def test_empty_array(write_json):
    assert load_transactions(write_json([])) == []


def test_records_without_fields_are_rejected(write_json):
    with pytest.raises(TransactionValidationError):
        load_transactions(write_json([{}]))


def test_string_solved_flag_is_rejected(write_json):
    path = write_json(
        [
            {
                "mtn": 1,
                "amount": 5.0,
                "senderFullName": "A",
                "beneficiaryFullName": "B",
                "issueId": 4,
                "issueSolved": "false",
            }
        ]
    )
    with pytest.raises(TransactionValidationError, match="issueSolved"):
        load_transactions(path)


def test_missing_file(tmp_path):
    with pytest.raises(TransactionLoadError, match="not found"):
        load_transactions(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("this is not json", encoding="utf-8")
    with pytest.raises(TransactionLoadError):
        load_transactions_frame(path)


def test_malformed_record_is_rejected(write_json):
    path = write_json(
        [{"mtn": 1, "amount": -5, "senderFullName": "A", "beneficiaryFullName": "B"}]
    )
    with pytest.raises(TransactionValidationError):
        load_transactions(path)


def test_file_like_source():
    payload = [{"mtn": 9, "amount": 1.5, "senderFullName": "A", "beneficiaryFullName": "B"}]
    transactions = load_transactions(io.StringIO(json.dumps(payload)))
    assert [t.mtn for t in transactions] == [9]


def test_transactions_to_frame(example_transactions):
    frame = transactions_to_frame(example_transactions)
    assert list(frame["mtn"]) == [1, 2, 3]
    assert frame["amount"].sum() == 350.0
    assert "beneficiary_full_name" in frame.columns
