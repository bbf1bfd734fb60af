"""
Plain-text transaction report.

Formats a TransactionSummary for the terminal. All numbers come from the
analyzer; this module only decides how they look.

Usage:
    python -m src.ui.report data/transactions.json --client "Aunt Polly"
"""

from typing import List, Optional, Sequence

import click

from configs import ConfigError, Settings, get_logger, load_settings, setup_logging
from src.analysis.analyzer import TransactionAnalyzer, TransactionSummary
from src.data import Transaction, TransactionDataError, load_transactions

logger = get_logger(__name__)


def render_report(
    transactions: Sequence[Transaction], settings: Optional[Settings] = None
) -> str:
    """
    building the full text report for a list of transactions.

    Args:
        transactions: All transactions
        settings: Which clients to ask about and how many top transactions
            to list (built-in defaults if not provided)

    Returns:
        The report as one string, lines separated by newlines
    """
    if settings is None:
        settings = Settings()

    summary = TransactionAnalyzer().summarize(
        transactions,
        sender_name=settings.report.sender_name,
        client_name=settings.report.client_name,
        top_n=settings.report.top_n,
    )
    return "\n".join(format_summary(summary, settings.report.top_n))


def format_summary(summary: TransactionSummary, top_n: int) -> List[str]:
    """turning a summary into report lines."""
    lines = [
        f"Transaction Amount = {summary.total_amount}",
        f"Transaction Amount sent by {summary.sender_name} = {summary.amount_sent_by_sender}",
        f"Max Transaction Amount = {summary.max_amount}",
        f"No. of Unique Clients = {summary.unique_clients}",
    ]

    if summary.client_has_unsolved_issue:
        lines.append(
            f"Client {summary.client_name} has at least one unsolved compliance issue."
        )
    else:
        lines.append(
            f"Client {summary.client_name} does not have any unsolved compliance issues."
        )

    lines.append("")
    for beneficiary, transactions in summary.by_beneficiary.items():
        lines.append(f"Beneficiary: {beneficiary}")
        for t in transactions:
            lines.append(f"  MTN: {t.mtn}")
            lines.append(f"  Amount: {t.amount}")
        lines.append("")

    lines.append(f"Issue ids of open compliance issues: {summary.unsolved_issue_ids}")

    lines.append("List of solved issue messages:")
    for message in summary.solved_issue_messages:
        lines.append(f"- {message}")

    lines.append(f"Top {top_n} transactions by amount:")
    for t in summary.top_transactions:
        lines.append(f"Amount: {t.amount}")

    if summary.top_sender is not None:
        lines.append(f"Sender with the highest total amount: {summary.top_sender}")
    else:
        lines.append("No transactions found.")

    return lines


@click.command(help="Print the transaction report for a JSON file.")
@click.argument("path", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings YAML (defaults to configs/settings.yaml).",
)
@click.option("--sender", "sender_name", help="Client whose sent total to report.")
@click.option("--client", "client_name", help="Client to check for unsolved issues.")
@click.option("--top", "top_n", type=click.IntRange(min=1), help="How many top transactions to list.")
def main(
    path: Optional[str],
    config_path: Optional[str],
    sender_name: Optional[str],
    client_name: Optional[str],
    top_n: Optional[int],
) -> None:
    """Load the transactions and print the report."""
    setup_logging()
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    # Command-line flags override the settings file.
    # A path given on the command line is relative to the current directory.
    data_file = path or settings.data_file()
    if sender_name:
        settings.report.sender_name = sender_name
    if client_name:
        settings.report.client_name = client_name
    if top_n:
        settings.report.top_n = top_n

    try:
        transactions = load_transactions(data_file)
    except TransactionDataError as e:
        raise click.ClickException(str(e)) from e

    logger.info(f"Rendering report for {len(transactions)} transactions")
    click.echo(render_report(transactions, settings))


if __name__ == "__main__":
    main()
