"""
Transaction record used throughout the analyzer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Transaction:
    """
    One money transfer, with optional compliance-issue metadata.

    Records are created once by the cleaner and never modified afterwards.
    A transaction without an issue has issue_id=None and issue_solved=True.
    """

    mtn: int  # money-transaction-number, not unique
    amount: float
    sender_full_name: str
    beneficiary_full_name: str
    sender_age: Optional[int] = None
    beneficiary_age: Optional[int] = None
    issue_id: Optional[int] = None
    issue_solved: bool = True
    issue_message: Optional[str] = None

    @property
    def has_issue(self) -> bool:
        """True if a compliance issue was raised on this transaction."""
        return self.issue_id is not None or self.issue_message is not None

    def involves(self, client_full_name: str) -> bool:
        """Case-insensitive check for the client as sender or beneficiary."""
        name = client_full_name.lower()
        return (
            self.sender_full_name.lower() == name
            or self.beneficiary_full_name.lower() == name
        )
