"""
Charts for the dashboard.

Both charts take the {client: amount} mappings the analyzer already
computes (sender_totals / beneficiary_totals), so no numbers are
recomputed here.
"""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, Optional

TEMPLATE = "xgridoff"
TOP_N = 10


def _largest(totals: Dict[str, float], limit: int) -> pd.DataFrame:
    """the `limit` biggest totals as a client/amount frame, biggest first (ties keep input order)."""
    frame = pd.DataFrame({"client": list(totals), "amount": list(totals.values())})
    return frame.sort_values("amount", ascending=False, kind="stable").head(limit)


def create_sender_chart(
    sender_totals: Dict[str, float], top_n: int = TOP_N
) -> Optional[go.Figure]:
    """
    Horizontal bar chart of the senders who sent the most.

    Args:
        sender_totals: Output of TransactionAnalyzer.sender_totals()
        top_n: How many senders to show

    Returns:
        Plotly figure, or None when there are no senders
    """
    if not sender_totals:
        return None

    # plotly draws the first row at the bottom, so flip to get the top sender on top
    chart_data = _largest(sender_totals, top_n).iloc[::-1]

    fig = px.bar(
        chart_data,
        x="amount",
        y="client",
        orientation="h",
        title=f"Top {min(top_n, len(sender_totals))} Senders",
        template=TEMPLATE,
        text_auto=",.2f",
    )
    fig.update_layout(xaxis_title="", yaxis_title="", showlegend=False, dragmode=False)
    fig.update_traces(hovertemplate="%{y}<br>Sent: %{x:,.2f}<extra></extra>")
    return fig


def create_beneficiary_chart(
    beneficiary_totals: Dict[str, float],
) -> Optional[go.Figure]:
    """
    Pie chart of how the money received is split between beneficiaries.

    Args:
        beneficiary_totals: Output of TransactionAnalyzer.beneficiary_totals()

    Returns:
        Plotly figure, or None when there are no beneficiaries
    """
    if not beneficiary_totals:
        return None

    fig = px.pie(
        names=list(beneficiary_totals),
        values=list(beneficiary_totals.values()),
        title="Amount received per beneficiary",
        template=TEMPLATE,
        color_discrete_sequence=px.colors.qualitative.Set3,
    )
    fig.update_traces(
        textinfo="percent+label",
        hovertemplate="%{label}<br>Received: %{value:,.2f} (%{percent})<extra></extra>",
    )
    return fig
