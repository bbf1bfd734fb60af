"""
UI Components Module for the transaction dashboard

Reusable Streamlit UI components with consistent styling and behavior.
All components work with the TransactionSummary dataclass from the analyzer.
"""

import streamlit as st
import pandas as pd
from typing import Dict, List, Optional
from plotly import graph_objects as go

from configs import get_logger
from src.data import Transaction, transactions_to_frame

logger = get_logger(__name__)

# Shared column layout for transaction tables
TRANSACTION_COLUMN_CONFIG = {
    "mtn": st.column_config.NumberColumn("MTN", format="%d", width="small"),
    "amount": st.column_config.NumberColumn("Amount", format="%.2f"),
    "sender_full_name": st.column_config.Column("Sender"),
    "beneficiary_full_name": st.column_config.Column("Beneficiary"),
    "issue_id": st.column_config.NumberColumn("Issue", format="%d", width="small"),
    "issue_solved": st.column_config.CheckboxColumn("Solved", width="small"),
    "issue_message": st.column_config.Column("Issue message"),
}


def display_metrics(
    total_amount: float,
    max_amount: float,
    transaction_count: int,
    unique_clients: int,
) -> None:
    """
    Display transaction metrics in a standardized 2x2 grid.

    Args:
        total_amount: Sum of all amounts
        max_amount: Largest single amount
        transaction_count: Number of transactions
        unique_clients: Number of distinct senders/beneficiaries
    """
    # Top row
    col1, col2 = st.columns([1, 1])
    with col1:
        st.metric("Transacted", f"{total_amount:,.2f}", border=True)
    with col2:
        st.metric("Largest Transaction", f"{max_amount:,.2f}", border=True)

    # Bottom row
    col3, col4 = st.columns([1, 1])
    with col3:
        st.metric("Transactions", f"{transaction_count:,}", border=True)
    with col4:
        st.metric("Unique Clients", f"{unique_clients:,}", border=True)


def display_client_status(
    client_name: str,
    amount_sent: float,
    has_unsolved_issue: bool,
) -> None:
    """
    Display what we know about one client: amount sent and open issues.

    Args:
        client_name: Client that was looked up
        amount_sent: Total sent by the client
        has_unsolved_issue: Whether the client has an open compliance issue
    """
    st.metric(f"Sent by {client_name}", f"{amount_sent:,.2f}", border=True)

    if has_unsolved_issue:
        st.warning(
            f"{client_name} has at least one unsolved compliance issue.", icon="⚠️"
        )
    else:
        st.success(f"{client_name} does not have any unsolved compliance issues.")


def display_issues(unsolved_issue_ids: List[int], solved_messages: List[str]) -> None:
    """
    Display open issue ids next to the messages of solved issues.

    Args:
        unsolved_issue_ids: Ids of open compliance issues
        solved_messages: Messages of solved compliance issues
    """
    col1, col2 = st.columns([1, 2])
    with col1:
        st.markdown("**Open issues**")
        if unsolved_issue_ids:
            st.markdown("\n".join(f"- #{issue_id}" for issue_id in unsolved_issue_ids))
        else:
            st.markdown("None 🎉")
    with col2:
        st.markdown("**Solved issue messages**")
        if solved_messages:
            st.markdown("\n".join(f"- {message}" for message in solved_messages))
        else:
            st.markdown("None yet")


def display_transaction_table(
    transactions: List[Transaction],
    hide_issues: bool = False,
) -> None:
    """
    Display a list of transactions as a table.

    Args:
        transactions: Transactions to show, in the order given
        hide_issues: Leave out the compliance-issue columns
    """
    if not transactions:
        st.info("No transactions to display.")
        return

    frame = transactions_to_frame(transactions)
    display_columns = [col for col in TRANSACTION_COLUMN_CONFIG if col in frame.columns]
    if hide_issues:
        display_columns = [col for col in display_columns if not col.startswith("issue")]

    st.dataframe(
        frame[display_columns],
        column_config=TRANSACTION_COLUMN_CONFIG,
        hide_index=True,
    )


def display_by_beneficiary(by_beneficiary: Dict[str, List[Transaction]]) -> None:
    """
    Display one collapsible table per beneficiary.

    Args:
        by_beneficiary: Output of TransactionAnalyzer.group_by_beneficiary()
    """
    if not by_beneficiary:
        st.info("No beneficiaries to display.")
        return

    for beneficiary, transactions in by_beneficiary.items():
        total = sum(t.amount for t in transactions)
        with st.expander(
            f"{beneficiary} - {len(transactions)} transaction(s), {total:,.2f}",
            expanded=False,
        ):
            display_transaction_table(transactions, hide_issues=True)


def display_chart(
    figure: Optional[go.Figure],
    title: str,
) -> None:
    """
    Display a Plotly chart with consistent configuration.

    Args:
        figure: Plotly figure to display
        title: Chart title
    """
    if figure is None:
        st.info(f"No chart data available for {title}")
        return

    st.plotly_chart(figure, config={"fillFrame": True})


def display_all_transactions(raw_df: pd.DataFrame) -> None:
    """
    Display all transactions in a collapsible expander.

    Args:
        raw_df: DataFrame from transactions_to_frame()
    """
    with st.expander("All Transactions", expanded=False):
        if raw_df.empty:
            st.info("No transactions found.")
            return

        display_columns = [col for col in TRANSACTION_COLUMN_CONFIG if col in raw_df.columns]

        st.dataframe(
            raw_df[display_columns],
            column_config=TRANSACTION_COLUMN_CONFIG,
            hide_index=True,
        )


def display_error_state(error_message: str, error_type: str = "Error") -> None:
    """
    Display a standardized error state.

    Args:
        error_message: Error message to display
        error_type: Type of error (Error, Warning, Info)
    """
    logger.error(f"{error_type}: {error_message}")
    st.error(f"{error_type}: {error_message}", icon="🚨")


def display_empty_state(message: str) -> None:
    """
    Display a standardized empty state.

    Args:
        message: Message to display
    """
    st.info(message, icon="ℹ️")
