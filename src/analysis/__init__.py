"""Transaction analysis package."""

from .analyzer import TransactionAnalyzer, TransactionSummary
from .visualizations import create_beneficiary_chart, create_sender_chart

__all__ = [
    "TransactionAnalyzer",
    "TransactionSummary",
    "create_beneficiary_chart",
    "create_sender_chart",
]
