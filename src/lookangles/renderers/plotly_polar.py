"""Plotly interactive polar plot (sky view from the observer)."""

from collections.abc import Sequence

import plotly.graph_objects as go

from lookangles.models import PolarPoint
from lookangles.quality import quality_color

_BG = "#0d1b35"
_GRID_COLOR = "#334466"
_BELOW_COLOR = "#ea4335"
_TEXT_COLOR = "#c9d3e0"


def render_polar_chart(points: Sequence[PolarPoint]) -> go.Figure:
    """Render look angles as a zenith-centred Plotly polar chart.

    Radial coordinate is zenith distance ``90 * polar_radius`` (0 at centre,
    90 on the horizon); below-horizon satellites sit on the rim. Angular axis
    is compass azimuth, north up, clockwise.

    Args:
        points: Output of ``calculate_polar_coordinates``.

    Returns:
        Plotly Figure object.
    """
    visible = [p for p in points if p.is_visible]
    below = [p for p in points if not p.is_visible]

    def _hover(p: PolarPoint) -> str:
        return f"{p.name}<br>El {p.elevation:.1f}°<br>Az {p.azimuth:.1f}°"

    visible_trace = go.Scatterpolar(
        r=[90 * p.polar_radius for p in visible],
        theta=[p.azimuth for p in visible],
        mode="markers+text",
        text=[p.name for p in visible],
        textposition="top center",
        textfont=dict(color=_TEXT_COLOR, size=11),
        marker=dict(
            size=11,
            color=[quality_color(p.elevation) for p in visible],
            line=dict(width=0),
        ),
        hovertext=[_hover(p) for p in visible],
        hoverinfo="text",
        name="above horizon",
    )
    below_trace = go.Scatterpolar(
        r=[90 * p.polar_radius for p in below],
        theta=[p.azimuth for p in below],
        mode="markers",
        marker=dict(size=8, color=_BELOW_COLOR, symbol="x", opacity=0.7),
        hovertext=[_hover(p) for p in below],
        hoverinfo="text",
        name="below horizon",
    )

    fig = go.Figure(data=[below_trace, visible_trace])
    fig.update_layout(
        paper_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=30, r=30, t=30, b=30),
        polar=dict(
            bgcolor=_BG,
            radialaxis=dict(
                range=[0, 90],
                tickvals=[10, 30, 50, 70, 90],
                ticktext=["80°", "60°", "40°", "20°", "0°"],
                gridcolor=_GRID_COLOR,
                tickfont=dict(color=_TEXT_COLOR, size=9),
                angle=90,
            ),
            angularaxis=dict(
                rotation=90,
                direction="clockwise",
                tickvals=[0, 90, 180, 270],
                ticktext=["N", "E", "S", "W"],
                gridcolor=_GRID_COLOR,
                tickfont=dict(color=_TEXT_COLOR),
            ),
        ),
    )
    return fig
