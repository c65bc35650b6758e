"""
Plotly chart builders for the Meta Tag Analyzer dashboard.
All functions return plotly Figure objects.
"""
from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from models import Analysis, TagStatus
from scoring.scorer import score_color

_BG = "#1A1D27"
_PAPER = "#0E1117"
_GRID = "#2A2D3A"
_TEXT = "#FAFAFA"

# (upper bound, band colour) matching score_label bands
_SCORE_BANDS = ((50, "#3A1A1A"), (75, "#3A2E1A"), (90, "#2A3A1A"), (100, "#1A3A1A"))


def _layout(title: str, height: int = 260, **kwargs) -> dict:
    return {
        "paper_bgcolor": _PAPER,
        "plot_bgcolor": _BG,
        "font": {"color": _TEXT, "family": "sans-serif"},
        "margin": {"l": 20, "r": 20, "t": 40, "b": 20},
        "height": height,
        "title": {"text": title, "x": 0.5, "xanchor": "center", "font": {"size": 14}},
        **kwargs,
    }


# ── Score gauge ────────────────────────────────────────────────────────────────

def score_gauge(score: int, coverage: Optional[int] = None) -> go.Figure:
    """
    Rule-engine score on a 0-100 dial. When `coverage` (the additive tag
    coverage score) is given, the difference is shown as a delta.
    """
    color = score_color(score)
    steps, low = [], 0
    for high, band in _SCORE_BANDS:
        steps.append({"range": [low, high], "color": band})
        low = high

    indicator = go.Indicator(
        mode="gauge+number" + ("+delta" if coverage is not None else ""),
        value=score,
        number={"font": {"size": 44, "color": color}, "suffix": "/100"},
        gauge={
            "axis": {"range": [0, 100], "tickcolor": _TEXT},
            "bar": {"color": color, "thickness": 0.3},
            "bgcolor": _BG,
            "bordercolor": _GRID,
            "steps": steps,
        },
    )
    if coverage is not None:
        indicator.update(delta={"reference": coverage, "position": "bottom"})

    fig = go.Figure(indicator)
    fig.update_layout(**_layout("SEO Score"))
    return fig


# ── Tag status per category (horizontal bar) ──────────────────────────────────

def tag_status_bar(analysis: Analysis) -> go.Figure:
    if not analysis.tag_summary:
        return _empty_chart("No tag summary")

    entries = analysis.tag_summary
    fig = go.Figure(go.Bar(
        y=[entry.name for entry in entries],
        x=[TagStatus.rank(entry.status) for entry in entries],
        orientation="h",
        marker_color=[TagStatus.COLORS[entry.status] for entry in entries],
        text=[TagStatus.LABELS[entry.status] for entry in entries],
        textposition="auto",
        hovertemplate="<b>%{y}</b>: %{text}<extra></extra>",
    ))
    fig.update_layout(**_layout(
        "Tag Status",
        height=max(260, len(entries) * 38 + 80),
        xaxis={"range": [0, max(TagStatus.RANKS.values())], "showticklabels": False,
               "gridcolor": _GRID},
        yaxis={"autorange": "reversed", "automargin": True},
        showlegend=False,
    ))
    return fig


# ── Categories by status (donut) ───────────────────────────────────────────────

def tag_status_donut(analysis: Analysis) -> go.Figure:
    """How many of the six categories landed in each status, best status first."""
    counts = {status: 0 for status in TagStatus.ALL}
    for entry in analysis.tag_summary:
        counts[entry.status] += 1

    shown = [status for status in TagStatus.ALL if counts[status]]
    if not shown:
        return _empty_chart("No tag summary")

    fig = go.Figure(go.Pie(
        labels=[TagStatus.LABELS[s] for s in shown],
        values=[counts[s] for s in shown],
        hole=0.55,
        sort=False,
        marker={"colors": [TagStatus.COLORS[s] for s in shown]},
        hovertemplate="<b>%{label}</b>: %{value} categories<extra></extra>",
    ))
    healthy = counts[TagStatus.OPTIMAL] + counts[TagStatus.PRESENT]
    fig.update_layout(**_layout(
        "Categories by Status",
        annotations=[{
            "text": f"<b>{healthy}/{len(analysis.tag_summary)}</b><br>healthy",
            "x": 0.5, "y": 0.5, "showarrow": False, "font": {"size": 16},
        }],
    ))
    return fig


def _empty_chart(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, x=0.5, y=0.5, showarrow=False, font={"size": 14})
    fig.update_layout(**_layout(""))
    return fig
