from typing import Dict, List

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .tiers import TIER_ORDER, Tier

TIER_COLORS = {"Poor": "#f87171", "Mid": "#facc15", "Excellent": "#4ade80"}


def averages_bar(summary: pd.DataFrame) -> go.Figure:
    if summary.empty:
        return go.Figure()
    numeric = summary[summary["kind"] == "numeric"]
    if numeric.empty:
        return go.Figure()
    fig = px.bar(numeric, x="column", y="average", title="Average marks per subject", text="average")
    fig.update_layout(xaxis_title="Subject", yaxis_title="Average")
    return fig


def tier_bar(groups: Dict[Tier, List[str]]) -> go.Figure:
    frame = pd.DataFrame(
        {
            "tier": [tier.value for tier in TIER_ORDER],
            "students": [len(groups.get(tier, [])) for tier in TIER_ORDER],
            "names": [", ".join(groups.get(tier, [])) for tier in TIER_ORDER],
        }
    )
    if frame["students"].sum() == 0:
        return go.Figure()
    fig = px.bar(
        frame,
        x="tier",
        y="students",
        color="tier",
        color_discrete_map=TIER_COLORS,
        hover_data=["names"],
        title="Performance categories (based on average marks)",
    )
    fig.update_layout(xaxis_title="Category", yaxis_title="Number of students", showlegend=False)
    return fig
