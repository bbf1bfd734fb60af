"""
Transaction Lens - Transaction Analytics Dashboard

A Streamlit application for exploring a JSON file of money transfers.
"""

import streamlit as st
import hashlib
from pathlib import Path
from typing import List, Optional, Tuple

from configs import setup_logging, get_logger, load_settings
from src.data import Transaction, load_transactions, transactions_to_frame
from src.analysis import (
    TransactionAnalyzer,
    create_beneficiary_chart,
    create_sender_chart,
)
from src.ui import (
    display_metrics,
    display_client_status,
    display_issues,
    display_by_beneficiary,
    display_chart,
    display_all_transactions,
    display_error_state,
    display_empty_state,
)


# Setup logging
setup_logging()
logger = get_logger(__name__)
settings = load_settings()
analyzer = TransactionAnalyzer()

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

st.set_page_config(
    layout="wide", page_title="Transaction Lens: Transaction Analytics", page_icon="💸"
)

# ============================================================================
# SESSION STATE
# ============================================================================


def initialize_session_state():
    """Initialize all session state variables."""
    defaults = {
        "upload": None,
        "process_clicked": False,
        "sample_data_clicked": False,
        # Caching variables
        "transactions": None,
        "current_file_hash": None,
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


initialize_session_state()

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def get_file_hash(uploaded_file) -> str | None:
    """
    Generate a hash for the uploaded file to detect changes.

    Uses file name and size, so uploading a different file invalidates the cache.

    Args:
        uploaded_file: Streamlit UploadedFile object

    Returns:
        Hash string representing this specific file
    """
    if uploaded_file is None:
        return None

    hash_input = f"{uploaded_file.name}_{uploaded_file.size}".encode()
    return hashlib.md5(hash_input).hexdigest()


def load_uploaded_transactions(
    uploaded_file,
) -> Tuple[Optional[List[Transaction]], Optional[str]]:
    """
    Load and validate an uploaded JSON file with error handling.

    Caching is handled via session state so a new upload invalidates it.
    """
    try:
        with st.spinner("Reading and validating your transactions..."):
            transactions = load_transactions(uploaded_file)
        return transactions, None
    except Exception as e:
        logger.error(f"Error loading uploaded transactions: {e}")
        return None, str(e)


@st.cache_data(show_spinner="Loading sample data...")
def load_sample_transactions() -> Tuple[Optional[List[Transaction]], Optional[str]]:
    """Load the bundled sample transactions for the demo."""
    try:
        sample_path = Path(settings.data_file())
        if not sample_path.exists():
            return None, f"Sample data file not found: {sample_path}"

        return load_transactions(sample_path), None
    except Exception as e:
        logger.error(f"Error loading sample data: {e}")
        return None, str(e)


# ============================================================================
# FILE UPLOAD
# ============================================================================

st.title("💸 Transaction Lens")

with st.expander(
    "📁 Upload Transactions",
    expanded=not st.session_state.get("process_clicked", False),
):
    with st.form("json_upload_form"):
        upload = st.file_uploader(
            "Upload a JSON array of transactions", type=["json"]
        )
        process = st.form_submit_button("Process")
        sample_data = st.form_submit_button("Show Dashboard with sample data")

    if process:
        new_file_hash = get_file_hash(upload)

        # Check if this is a new file (invalidate cache if so)
        if new_file_hash != st.session_state.current_file_hash:
            logger.info("New file detected - invalidating cache")
            st.session_state.transactions = None
            st.session_state.current_file_hash = new_file_hash

        st.session_state.upload = upload
        st.session_state.process_clicked = True
        st.session_state.sample_data_clicked = False

    if sample_data:
        st.session_state.transactions = None
        st.session_state.current_file_hash = None
        st.session_state.sample_data_clicked = True
        st.session_state.process_clicked = False

# ============================================================================
# DATA LOADING
# ============================================================================

if st.session_state.get("process_clicked") and st.session_state.upload:
    if st.session_state.transactions is not None:
        logger.info("Using cached transactions from session state")
        transactions = st.session_state.transactions
    else:
        logger.info("Loading uploaded transactions (not cached)")
        transactions, error = load_uploaded_transactions(st.session_state.upload)

        if error:
            display_error_state(f"Failed to load transactions: {error}")
            st.stop()

        st.session_state.transactions = transactions

elif st.session_state.get("sample_data_clicked"):
    if st.session_state.transactions is not None:
        logger.info("Using cached sample data from session state")
        transactions = st.session_state.transactions
    else:
        transactions, error = load_sample_transactions()

        if error:
            display_error_state(f"Failed to load sample data: {error}")
            st.stop()

        st.session_state.transactions = transactions

else:
    st.info("Please upload a JSON file and click 'Process' to continue.")
    st.stop()

if not transactions:
    display_empty_state("The file contains no transactions.")
    st.stop()

# ============================================================================
# CLIENT SELECTION
# ============================================================================

client_names = sorted(
    {t.sender_full_name for t in transactions}
    | {t.beneficiary_full_name for t in transactions}
)
default_client = next(
    (
        name
        for name in client_names
        if name.lower() == settings.report.client_name.lower()
    ),
    client_names[0],
)

with st.sidebar:
    st.header("Client lookup")
    client_name = st.selectbox(
        "Client", client_names, index=client_names.index(default_client)
    )
    # st.slider needs min_value < max_value
    if len(transactions) > 1:
        top_n = st.slider(
            "Top transactions",
            min_value=1,
            max_value=len(transactions),
            value=min(settings.report.top_n, len(transactions)),
        )
    else:
        top_n = 1

summary = analyzer.summarize(
    transactions,
    sender_name=client_name,
    client_name=client_name,
    top_n=top_n,
)

# ============================================================================
# OVERVIEW
# ============================================================================

display_metrics(
    total_amount=summary.total_amount,
    max_amount=summary.max_amount,
    transaction_count=summary.transaction_count,
    unique_clients=summary.unique_clients,
)

if summary.top_sender is not None:
    st.markdown(f"🏆 **Top sender:** {summary.top_sender}")

st.markdown("\n")

# ============================================================================
# TABS
# ============================================================================

client_tab, issues_tab, beneficiaries_tab, rankings_tab = st.tabs(
    ["👤 Client", "🚩 Compliance Issues", "📥 By Beneficiary", "📊 Rankings"]
)

with client_tab:
    display_client_status(
        client_name=client_name,
        amount_sent=summary.amount_sent_by_sender,
        has_unsolved_issue=summary.client_has_unsolved_issue,
    )

with issues_tab:
    display_issues(summary.unsolved_issue_ids, summary.solved_issue_messages)

with beneficiaries_tab:
    display_chart(
        figure=create_beneficiary_chart(analyzer.beneficiary_totals(transactions)),
        title="Beneficiaries",
    )
    display_by_beneficiary(summary.by_beneficiary)

with rankings_tab:
    display_chart(
        figure=create_sender_chart(summary.sender_totals),
        title="Top Senders",
    )

    st.markdown(f"**Top {top_n} transactions by amount**")
    st.dataframe(
        transactions_to_frame(summary.top_transactions)[
            ["mtn", "amount", "sender_full_name", "beneficiary_full_name"]
        ],
        hide_index=True,
    )

display_all_transactions(transactions_to_frame(transactions))
