"""Plotly geo map: observer, pointing lines, satellite slots and coverage circles."""

from collections.abc import Sequence

import numpy as np
import plotly.graph_objects as go

from lookangles.angles import (
    MEAN_EARTH_RADIUS_KM,
    calculate_coverage_radius,
    great_circle_distance,
)
from lookangles.models import GeoPoint, PolarPoint
from lookangles.quality import quality_color, quality_label

_ABOVE = dict(color="#1a73e8", width=2.5, dash="solid")
_BELOW = dict(color="#ea4335", width=1.5, dash="dash")
_EQUATOR_COLOR = "#888888"
_OBSERVER_COLOR = "#fbbc04"


def coverage_circle(
    lat: float, lon: float, radius_km: float, n_points: int = 73
) -> tuple[np.ndarray, np.ndarray]:
    """Latitudes/longitudes of a small circle of ``radius_km`` around a point.

    Uses the spherical destination-point formula; the ring is closed (first
    and last points coincide).
    """
    lat1 = np.radians(lat)
    lon1 = np.radians(lon)
    delta = radius_km / MEAN_EARTH_RADIUS_KM
    bearings = np.linspace(0.0, 2 * np.pi, n_points)

    lat2 = np.arcsin(
        np.sin(lat1) * np.cos(delta)
        + np.cos(lat1) * np.sin(delta) * np.cos(bearings)
    )
    lon2 = lon1 + np.arctan2(
        np.sin(bearings) * np.sin(delta) * np.cos(lat1),
        np.cos(delta) - np.sin(lat1) * np.sin(lat2),
    )
    lon_deg = (np.degrees(lon2) + 540.0) % 360.0 - 180.0
    return np.degrees(lat2), lon_deg


def _satellite_hover(observer: GeoPoint, p: PolarPoint) -> str:
    """Detail text: position, look angles, quality and ground distance to the sub-satellite point."""
    distance_km = great_circle_distance(
        observer.latitude, observer.longitude, 0.0, p.longitude
    )
    return (
        f"{p.name}<br>Lon {p.longitude:.1f}°"
        f"<br>El {p.elevation:.1f}° / Az {p.azimuth:.1f}°"
        f"<br>Quality: {quality_label(p.elevation)}"
        f"<br>Distance: {distance_km:,.0f} km"
    )


def render_pointing_map(
    observer: GeoPoint,
    points: Sequence[PolarPoint],
    label: str = "",
) -> go.Figure:
    """Render the observer and each satellite's pointing line on a world map.

    Lines run from the observer to the sub-satellite point on the equator,
    solid blue when the satellite is above the horizon and dashed red when
    below. Visible satellites also get a coverage circle around the observer
    (display heuristic, see ``calculate_coverage_radius``).

    Args:
        observer: Observer position.
        points: Output of ``calculate_polar_coordinates`` for that observer.
        label: Observer label for the hover text.

    Returns:
        Plotly Figure object.
    """
    traces: list[go.Scattergeo] = []

    equator_lon = np.arange(-180.0, 180.1, 5.0)
    traces.append(
        go.Scattergeo(
            lat=np.zeros_like(equator_lon),
            lon=equator_lon,
            mode="lines",
            line=dict(color=_EQUATOR_COLOR, width=1, dash="dot"),
            opacity=0.5,
            hoverinfo="skip",
            name="equator",
        )
    )

    for p in points:
        if p.is_visible:
            radius_km = calculate_coverage_radius(p.elevation)
            c_lat, c_lon = coverage_circle(
                observer.latitude, observer.longitude, radius_km
            )
            traces.append(
                go.Scattergeo(
                    lat=c_lat,
                    lon=c_lon,
                    mode="lines",
                    fill="toself",
                    line=dict(color=quality_color(p.elevation), width=1),
                    opacity=0.25,
                    hoverinfo="skip",
                    name=f"{p.name} coverage",
                )
            )

    for p in points:
        style = _ABOVE if p.is_visible else _BELOW
        traces.append(
            go.Scattergeo(
                lat=[observer.latitude, 0.0],
                lon=[observer.longitude, p.longitude],
                mode="lines",
                line=style,
                hoverinfo="text",
                hovertext=f"{p.name} ({p.elevation:.1f}°)",
                name=p.name,
            )
        )

    traces.append(
        go.Scattergeo(
            lat=[0.0 for _ in points],
            lon=[p.longitude for p in points],
            mode="markers+text",
            text=[p.name for p in points],
            textposition="bottom center",
            marker=dict(
                size=9,
                symbol="diamond",
                color=[_ABOVE["color"] if p.is_visible else _BELOW["color"] for p in points],
            ),
            hoverinfo="text",
            hovertext=[_satellite_hover(observer, p) for p in points],
            name="satellites",
        )
    )

    traces.append(
        go.Scattergeo(
            lat=[observer.latitude],
            lon=[observer.longitude],
            mode="markers",
            marker=dict(size=12, color=_OBSERVER_COLOR, symbol="circle"),
            hoverinfo="text",
            hovertext=label
            or f"Lat: {observer.latitude:.4f}, Lon: {observer.longitude:.4f}",
            name="observer",
        )
    )

    fig = go.Figure(data=traces)
    fig.update_layout(
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        geo=dict(
            projection_type="natural earth",
            showcountries=True,
            showland=True,
            landcolor="#e8ecef",
            countrycolor="#b0b8c0",
            lataxis=dict(showgrid=True, dtick=30),
            lonaxis=dict(showgrid=True, dtick=30),
        ),
    )
    return fig
