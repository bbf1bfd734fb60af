"""
UI module for the transaction analytics tools.

Provides reusable Streamlit components for the dashboard. The plain-text
report for the terminal lives in src.ui.report.
"""

from .components import (
    display_metrics,
    display_client_status,
    display_issues,
    display_transaction_table,
    display_by_beneficiary,
    display_chart,
    display_all_transactions,
    display_error_state,
    display_empty_state,
)

__all__ = [
    "display_metrics",
    "display_client_status",
    "display_issues",
    "display_transaction_table",
    "display_by_beneficiary",
    "display_chart",
    "display_all_transactions",
    "display_error_state",
    "display_empty_state",
]
