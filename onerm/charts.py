from __future__ import annotations

import numpy as np
import plotly.graph_objects as go

from .formulas import Formula
from .tables import estimate_table, rep_max_table
from .utils import FORMULAS

COLORS = {
    Formula.EPLEY.value: '#0d6efd',
    Formula.BRZYCKI.value: '#dc3545',
    Formula.LOMBARDI.value: '#198754',
    Formula.MAYHEW.value: '#fd7e14',
    Formula.WATHAN.value: '#6f42c1',
    Formula.DEFAULT.value: '#6c757d',
}

_LAYOUT = dict(
    template='plotly_white',
    autosize=True,
    margin=dict(l=50, r=50, t=50, b=50),
)


def empty_figure(message: str = "No data available") -> go.Figure:
    """Create empty Plotly figure with message"""
    fig = go.Figure()
    fig.update_layout(
        **_LAYOUT,
        annotations=[dict(
            text=message,
            showarrow=False,
            x=0.5, y=0.5,
            xref="paper", yref="paper",
            font=dict(color="#6c757d", size=16)
        )]
    )
    return fig


def estimate_comparison_figure(weight: float, reps: float) -> go.Figure:
    """Bar chart comparing each formula's 1RM estimate for one set."""
    d = estimate_table(weight, reps)
    d = d[np.isfinite(d["one_rm"])]
    if d.empty:
        return empty_figure("No finite estimates")

    fig = go.Figure(data=[go.Bar(
        x=d["formula"], y=d["one_rm"],
        marker_color=[COLORS[f] for f in d["formula"]],
        text=[f"{v:.1f}" for v in d["one_rm"]],
        textposition='outside',
        hovertemplate='%{x}<br>%{y:.1f}<extra></extra>'
    )])
    fig.update_layout(
        **_LAYOUT,
        title=dict(text=f"Estimated 1RM from {weight:g} x {reps:g}", font=dict(size=18, weight='bold')),
        xaxis_title="Formula",
        yaxis_title="Estimated 1RM",
        showlegend=False
    )
    return fig


def rep_max_figure(one_rm: float, max_reps: int = 12) -> go.Figure:
    """Line per formula: weight liftable for each rep count at a given 1RM."""
    d = rep_max_table(one_rm, max_reps)
    if d.empty:
        return empty_figure("No rep maxes")

    fig = go.Figure()
    for formula in FORMULAS:
        fig.add_trace(go.Scatter(
            x=d["reps"], y=d[formula.value],
            mode='lines+markers',
            name=formula.value,
            line=dict(color=COLORS[formula.value], width=2),
            hovertemplate='%{x} reps<br>%{y:.1f}<extra>' + formula.value + '</extra>'
        ))
    fig.update_layout(
        **_LAYOUT,
        title=dict(text=f"Rep maxes for a {one_rm:g} 1RM", font=dict(size=18, weight='bold')),
        xaxis_title="Reps",
        yaxis_title="Weight",
        hovermode='x unified'
    )
    return fig
