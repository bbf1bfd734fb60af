"""
Test configuration for pytest.

This prepends the repository root to `sys.path` so tests can import the
`src` and `configs` packages when running under pytest, and provides
small transaction datasets shared by the unit tests.
"""

import json
import sys
from pathlib import Path

import pytest


def _prepend_project_root_to_syspath() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_prepend_project_root_to_syspath()

from src.data.models import Transaction  # noqa: E402

SAMPLE_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "transactions.json"


@pytest.fixture
def example_transactions():
    """A -> B 100 (open issue #1), B -> A 50 (no issue), A -> C 200 (solved issue #2)."""
    return [
        Transaction(
            mtn=1,
            amount=100.0,
            sender_full_name="A",
            beneficiary_full_name="B",
            issue_id=1,
            issue_solved=False,
            issue_message="check",
        ),
        Transaction(
            mtn=2,
            amount=50.0,
            sender_full_name="B",
            beneficiary_full_name="A",
        ),
        Transaction(
            mtn=3,
            amount=200.0,
            sender_full_name="A",
            beneficiary_full_name="C",
            issue_id=2,
            issue_solved=True,
            issue_message="fixed",
        ),
    ]


@pytest.fixture
def sample_data_path() -> Path:
    """The sample file bundled with the repo."""
    return SAMPLE_DATA_PATH


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON payload to a temp file and return its path."""

    def _write(payload, name: str = "transactions.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
