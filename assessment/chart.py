from typing import Any, Dict, List, Optional

import plotly.graph_objects as go

from .scoring import ScoreRecord, max_scores
from .statements import CATEGORIES, DISPLAY_NAMES, STATEMENTS


def chart_data(scores: ScoreRecord, statements=STATEMENTS) -> List[Dict[str, Any]]:
    """Rows for the radar chart: {"subject", "score", "fullMark"} in category order."""
    full = max_scores(statements)
    return [
        {"subject": DISPLAY_NAMES[c], "score": scores[c], "fullMark": full[c]}
        for c in CATEGORIES
    ]


def _rgba(hex_color: str, alpha: float) -> str:
    h = hex_color.lstrip("#")
    r, g, b = (int(h[i:i+2], 16) for i in (0, 2, 4))
    return f"rgba({r},{g},{b},{alpha})"


def radar_figure(rows: List[Dict[str, Any]], chart_cfg: Optional[Dict[str, Any]] = None) -> go.Figure:
    """Filled Plotly radar of the chart rows, styled from the chart config section."""
    cfg = chart_cfg or {}
    color = cfg.get("color", "#F97316")
    # close the polygon by repeating the first point
    r = [row["score"] for row in rows] + [rows[0]["score"]]
    theta = [row["subject"] for row in rows] + [rows[0]["subject"]]
    top = max(row["fullMark"] for row in rows)

    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(
        r=r, theta=theta, fill="toself", name="Score",
        line=dict(color=color, width=2),
        fillcolor=_rgba(color, float(cfg.get("fill_opacity", 0.4))),
    ))
    fig.update_layout(
        title="Conflict Management Styles",
        polar=dict(
            gridshape="linear",
            radialaxis=dict(range=[0, top], nticks=int(cfg.get("tick_count", 4)), showline=False, angle=90),
            angularaxis=dict(direction="clockwise", rotation=90),
        ),
        showlegend=False,
        height=int(cfg.get("height", 420)),
        margin=dict(l=40, r=40, t=60, b=40),
    )
    return fig
