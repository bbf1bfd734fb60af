"""
Transaction analyzer: read-only queries over a loaded transaction list.

Every query takes the full list of transactions and returns plain data
(numbers, lists, dicts). Nothing here prints, formats or mutates its input;
presentation lives in src/ui.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from configs import get_logger
from src.data.models import Transaction

logger = get_logger(__name__)

TOP_N = 3


@dataclass
class TransactionSummary:
    """
    Every query result in one place, for the report and the dashboard.

    Much easier to pass around than ten separate return values!
    """

    total_amount: float
    max_amount: float
    unique_clients: int
    transaction_count: int
    sender_name: Optional[str]  # client the sent total is about
    amount_sent_by_sender: float
    client_name: Optional[str]  # client the issue check is about
    client_has_unsolved_issue: bool
    by_beneficiary: Dict[str, List[Transaction]]
    unsolved_issue_ids: List[int]
    solved_issue_messages: List[str]
    top_transactions: List[Transaction]
    top_sender: Optional[str]
    sender_totals: Dict[str, float] = field(default_factory=dict)


class TransactionAnalyzer:
    """
    answering the fixed set of questions about a list of transactions.

    The analyzer keeps no state: each method is a pure function of its
    arguments, so one instance can be shared freely.
    Sender/beneficiary name lookups are case-insensitive and exact (no trimming).
    """

    # ========================================================================
    # TOTALS
    # ========================================================================

    def total_amount(self, transactions: Sequence[Transaction]) -> float:
        """Sum of all amounts (0.0 for no transactions)."""
        return math.fsum(t.amount for t in transactions)

    def total_amount_sent_by(
        self, sender_full_name: str, transactions: Sequence[Transaction]
    ) -> float:
        """
        Sum of the amounts sent by one client.

        Args:
            sender_full_name: Client name, compared case-insensitively
            transactions: All transactions

        Returns:
            The total, or 0.0 if the client never sent anything
        """
        name = sender_full_name.lower()
        return math.fsum(
            t.amount for t in transactions if t.sender_full_name.lower() == name
        )

    def max_amount(self, transactions: Sequence[Transaction]) -> float:
        """Highest single amount (0.0 for no transactions)."""
        return max((t.amount for t in transactions), default=0.0)

    # ========================================================================
    # CLIENTS
    # ========================================================================

    def count_unique_clients(self, transactions: Sequence[Transaction]) -> int:
        """
        Number of distinct clients that sent or received a transaction.

        Senders and beneficiaries are pooled, and names that differ only
        in case count as the same client.
        """
        clients = set()
        for t in transactions:
            clients.add(t.sender_full_name.lower())
            clients.add(t.beneficiary_full_name.lower())
        return len(clients)

    def count_transaction_numbers(self, transactions: Sequence[Transaction]) -> int:
        """Raw count of MTNs, duplicates included (one per transaction)."""
        return len(transactions)

    def count_unique_mtns(self, transactions: Sequence[Transaction]) -> int:
        """Number of distinct MTN values."""
        return len({t.mtn for t in transactions})

    def has_unsolved_issue_for(
        self, client_full_name: str, transactions: Sequence[Transaction]
    ) -> bool:
        """
        Whether a client (as sender or beneficiary) has at least one
        transaction with a compliance issue that hasn't been solved.

        Stops at the first match.
        """
        return any(
            not t.issue_solved for t in transactions if t.involves(client_full_name)
        )

    def group_by_beneficiary(
        self, transactions: Sequence[Transaction]
    ) -> Dict[str, List[Transaction]]:
        """
        Transactions indexed by beneficiary name.

        Keys are the names exactly as they appear (no case folding); each
        list keeps the input order.
        """
        grouped: Dict[str, List[Transaction]] = {}
        for t in transactions:
            grouped.setdefault(t.beneficiary_full_name, []).append(t)
        return grouped

    # ========================================================================
    # COMPLIANCE ISSUES
    # ========================================================================

    def unsolved_issue_ids(self, transactions: Sequence[Transaction]) -> List[int]:
        """Ids of all open compliance issues, in input order. Issues without an id are skipped."""
        return [
            t.issue_id
            for t in transactions
            if not t.issue_solved and t.issue_id is not None
        ]

    def solved_issue_messages(self, transactions: Sequence[Transaction]) -> List[str]:
        """Messages of all solved issues that have one, in input order."""
        return [
            t.issue_message
            for t in transactions
            if t.issue_solved and t.issue_message is not None
        ]

    # ========================================================================
    # RANKINGS
    # ========================================================================

    def top_by_amount(
        self, transactions: Sequence[Transaction], n: int = TOP_N
    ) -> List[Transaction]:
        """
        The n largest transactions by amount, largest first.

        Returns a new list; the input is never reordered. Equal amounts
        keep their input order (sorted() is stable, also in reverse).
        """
        if n <= 0:
            return []
        return sorted(transactions, key=lambda t: t.amount, reverse=True)[:n]

    def top3_by_amount(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        """The 3 (or fewer) largest transactions, largest first."""
        return self.top_by_amount(transactions, 3)

    def sender_totals(self, transactions: Sequence[Transaction]) -> Dict[str, float]:
        """Total sent per sender name, in order of each sender's first transaction."""
        totals: Dict[str, float] = {}
        for t in transactions:
            totals[t.sender_full_name] = totals.get(t.sender_full_name, 0.0) + t.amount
        return totals

    def beneficiary_totals(
        self, transactions: Sequence[Transaction]
    ) -> Dict[str, float]:
        """Total received per beneficiary name, in order of first appearance."""
        totals: Dict[str, float] = {}
        for t in transactions:
            name = t.beneficiary_full_name
            totals[name] = totals.get(name, 0.0) + t.amount
        return totals

    def top_sender(self, transactions: Sequence[Transaction]) -> Optional[str]:
        """
        Name of the sender with the highest total sent amount.

        Returns:
            The sender name, or None if there are no transactions.
            On a tie the sender who appeared first wins.
        """
        totals = self.sender_totals(transactions)
        if not totals:
            return None
        # max() keeps the first of equal keys
        return max(totals, key=totals.__getitem__)

    # ========================================================================
    # EVERYTHING AT ONCE
    # ========================================================================

    def summarize(
        self,
        transactions: Sequence[Transaction],
        sender_name: Optional[str] = None,
        client_name: Optional[str] = None,
        top_n: int = TOP_N,
    ) -> TransactionSummary:
        """
        running every query and bundling the results.

        Args:
            transactions: All transactions
            sender_name: Client whose sent total to report (optional)
            client_name: Client to check for unsolved issues (optional)
            top_n: How many of the largest transactions to include

        Returns:
            TransactionSummary with every result
        """
        logger.debug(f"Summarizing {len(transactions)} transactions")

        return TransactionSummary(
            total_amount=self.total_amount(transactions),
            max_amount=self.max_amount(transactions),
            unique_clients=self.count_unique_clients(transactions),
            transaction_count=self.count_transaction_numbers(transactions),
            sender_name=sender_name,
            amount_sent_by_sender=(
                self.total_amount_sent_by(sender_name, transactions)
                if sender_name
                else 0.0
            ),
            client_name=client_name,
            client_has_unsolved_issue=(
                self.has_unsolved_issue_for(client_name, transactions)
                if client_name
                else False
            ),
            by_beneficiary=self.group_by_beneficiary(transactions),
            unsolved_issue_ids=self.unsolved_issue_ids(transactions),
            solved_issue_messages=self.solved_issue_messages(transactions),
            top_transactions=self.top_by_amount(transactions, top_n),
            top_sender=self.top_sender(transactions),
            sender_totals=self.sender_totals(transactions),
        )
