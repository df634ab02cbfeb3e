"""
Plotly chart builders for the SEO analysis dashboard.
All functions return plotly Figure objects.
"""
from __future__ import annotations

import plotly.graph_objects as go

from models import AnalysisResult, CategoryScore, MobileFriendlinessVerdict, Status
from scoring.scorer import score_color
from config import MOBILE_WEIGHTS

_BG = "#1A1D27"
_PAPER = "#0E1117"
_GRID = "#2A2D3A"
_TEXT = "#FAFAFA"

_SIGNAL_LABELS = {
    "viewport":          "Viewport",
    "responsive_design": "Responsive Design",
    "touch_elements":    "Touch Friendly",
    "font_readability":  "Font Readability",
    "media_queries":     "Media Queries",
}


def _base_layout(**kwargs) -> dict:
    return {
        "paper_bgcolor": _PAPER,
        "plot_bgcolor":  _BG,
        "font": {"color": _TEXT, "family": "sans-serif"},
        "margin": {"l": 20, "r": 20, "t": 40, "b": 20},
        **kwargs,
    }


def _title(text: str) -> dict:
    return {"text": text, "x": 0.5, "xanchor": "center", "font": {"size": 14, "color": _TEXT}}


# ── Overall score gauge ────────────────────────────────────────────────────────

def seo_score_gauge(score: float) -> go.Figure:
    color = score_color(score)
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        domain={"x": [0, 1], "y": [0, 1]},
        number={"font": {"size": 48, "color": color}},
        gauge={
            "axis": {"range": [0, 100], "tickcolor": _TEXT, "tickfont": {"color": _TEXT}},
            "bar": {"color": color, "thickness": 0.25},
            "bgcolor": _BG,
            "borderwidth": 2,
            "bordercolor": _GRID,
            "steps": [
                {"range": [0, 50],  "color": "#3A1A1A"},
                {"range": [50, 75], "color": "#3A2E1A"},
                {"range": [75, 90], "color": "#2A3A1A"},
                {"range": [90, 100],"color": "#1A3A1A"},
            ],
        },
    ))
    fig.update_layout(**_base_layout(height=260), title=_title("SEO Score"))
    return fig


# ── Category scores ────────────────────────────────────────────────────────────

def category_scores_bar(scores: list[CategoryScore]) -> go.Figure:
    if not scores:
        return _empty_chart("No category data")

    fig = go.Figure(go.Bar(
        y=[s.name for s in scores],
        x=[s.score for s in scores],
        orientation="h",
        marker_color=[Status.COLORS.get(s.status, "#888888") for s in scores],
        hovertemplate="<b>%{y}</b><br>Score: %{x}/100<extra></extra>",
    ))
    fig.update_layout(
        **_base_layout(height=max(260, len(scores) * 40 + 80)),
        title=_title("Category Scores"),
        xaxis={"range": [0, 100], "title": "Score", "gridcolor": _GRID, "color": _TEXT},
        yaxis={"gridcolor": _GRID, "color": _TEXT, "automargin": True, "autorange": "reversed"},
        showlegend=False,
    )
    return fig


# ── Mobile signals ─────────────────────────────────────────────────────────────

def mobile_signals_bar(verdict: MobileFriendlinessVerdict) -> go.Figure:
    signals = verdict.signals
    names = list(MOBILE_WEIGHTS.keys())
    earned = [MOBILE_WEIGHTS[n] if getattr(signals, n) else 0 for n in names]
    missing = [MOBILE_WEIGHTS[n] - e for n, e in zip(names, earned)]
    labels = [_SIGNAL_LABELS[n] for n in names]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=labels, x=earned, name="Earned", orientation="h",
        marker_color=Status.COLORS[Status.GOOD],
        hovertemplate="<b>%{y}</b><br>Earned: %{x}<extra></extra>",
    ))
    fig.add_trace(go.Bar(
        y=labels, x=missing, name="Missing", orientation="h",
        marker_color=Status.COLORS[Status.ERROR],
        hovertemplate="<b>%{y}</b><br>Missing: %{x}<extra></extra>",
    ))
    fig.update_layout(
        **_base_layout(height=280),
        title=_title(f"Mobile-Friendliness ({verdict.score}/100)"),
        barmode="stack",
        legend={"orientation": "h", "y": -0.15, "font": {"color": _TEXT}},
        xaxis={"title": "Points", "gridcolor": _GRID, "color": _TEXT},
        yaxis={"gridcolor": _GRID, "color": _TEXT, "automargin": True, "autorange": "reversed"},
    )
    return fig


# ── History ────────────────────────────────────────────────────────────────────

def history_scores_bar(results: list[AnalysisResult]) -> go.Figure:
    if not results:
        return _empty_chart("No analyses yet")

    fig = go.Figure(go.Bar(
        x=[r.url for r in results],
        y=[r.score for r in results],
        marker_color=[score_color(r.score) for r in results],
        hovertemplate="<b>%{x}</b><br>Score: %{y}<extra></extra>",
    ))
    fig.update_layout(
        **_base_layout(height=260),
        title=_title("Recent Analyses"),
        xaxis={"title": "URL", "gridcolor": _GRID, "color": _TEXT},
        yaxis={"range": [0, 100], "title": "Score", "gridcolor": _GRID, "color": _TEXT},
        showlegend=False,
    )
    return fig


# ── Helper ─────────────────────────────────────────────────────────────────────

def _empty_chart(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, x=0.5, y=0.5, showarrow=False, font={"color": _TEXT, "size": 14})
    fig.update_layout(**_base_layout(height=260))
    return fig
