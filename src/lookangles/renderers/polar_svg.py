"""SVG polar view of satellite positions as seen from the observer.

Plot coordinates (matches PolarPoint):
  centre (100, 100) = zenith, radius 100 = horizon
  polar_x → right = East, polar_y → down = South (SVG y grows downward)
"""

from __future__ import annotations

import html
import math
from collections.abc import Sequence

from lookangles.models import PolarPoint
from lookangles.quality import quality_color

_CENTER = 100.0
_SCALE = 100.0
_RING_COLOR = "#9aa5b1"
_TEXT_COLOR = "#5f6b7a"
_BELOW_COLOR = "#ea4335"

# Satellites further below the horizon than this are left off the plot.
MIN_PLOTTED_ELEVATION_DEG = -10.0

_RINGS = (0.2, 0.4, 0.6, 0.8)
_CARDINALS = ((0, "E"), (90, "S"), (180, "W"), (270, "N"))  # SVG angle, label
_ELEVATION_LABELS = ((0.2, "80°"), (0.4, "60°"), (0.6, "40°"), (0.8, "20°"), (0.95, "0°"))


def _to_svg(px: float, py: float) -> tuple[float, float]:
    return _CENTER + px * _SCALE, _CENTER + py * _SCALE


def render_polar_svg(
    points: Sequence[PolarPoint], title: str = "Satellite Polar View"
) -> str:
    """Return a standalone ``<svg>`` element for the given polar points.

    Visible satellites are filled with their quality color; satellites below
    the horizon sit on the rim in red. Each dot carries a ``<title>`` tooltip
    and a ``data-name`` attribute.

    Args:
        points: Output of ``calculate_polar_coordinates``.
        title: Heading drawn above the plot.

    Returns:
        SVG markup string.
    """
    parts: list[str] = []

    # --- Grid ---
    for r in _RINGS:
        parts.append(
            f'<circle cx="{_CENTER:.0f}" cy="{_CENTER:.0f}" r="{r * _SCALE:.0f}"'
            f' fill="none" stroke="{_RING_COLOR}" stroke-width="0.6"'
            f' class="polar-plot-circle"/>'
        )
    parts.append(
        f'<circle cx="{_CENTER:.0f}" cy="{_CENTER:.0f}" r="{_SCALE:.0f}"'
        f' fill="none" stroke="{_RING_COLOR}" stroke-width="1" class="polar-plot-horizon"/>'
    )
    parts.append(
        f'<circle cx="{_CENTER:.0f}" cy="{_CENTER:.0f}" r="2" fill="{_TEXT_COLOR}"/>'
    )

    for angle, label in _CARDINALS:
        rad = math.radians(angle)
        x2 = _CENTER + _SCALE * math.cos(rad)
        y2 = _CENTER + _SCALE * math.sin(rad)
        lx = _CENTER + 110 * math.cos(rad)
        ly = _CENTER + 110 * math.sin(rad)
        parts.append(
            f'<line x1="{_CENTER:.0f}" y1="{_CENTER:.0f}" x2="{x2:.1f}" y2="{y2:.1f}"'
            f' stroke="{_RING_COLOR}" stroke-width="0.5" class="polar-plot-line"/>'
        )
        parts.append(
            f'<text x="{lx:.1f}" y="{ly:.1f}" fill="{_TEXT_COLOR}" font-size="9"'
            f' text-anchor="middle" dominant-baseline="middle"'
            f' class="polar-plot-label">{label}</text>'
        )

    for r, label in _ELEVATION_LABELS:
        parts.append(
            f'<text x="{_CENTER:.0f}" y="{_CENTER - r * _SCALE - 5:.1f}"'
            f' fill="{_TEXT_COLOR}" font-size="7" text-anchor="middle"'
            f' class="polar-plot-label">{label}</text>'
        )

    # --- Satellites ---
    for p in points:
        if not p.elevation >= MIN_PLOTTED_ELEVATION_DEG:
            continue  # also drops NaN
        cx, cy = _to_svg(p.polar_x, p.polar_y)
        fill = quality_color(p.elevation) if p.is_visible else _BELOW_COLOR
        css = "polar-plot-satellite" if p.is_visible else "polar-plot-satellite-below"
        name = html.escape(p.name)
        parts.append(
            f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="4" fill="{fill}"'
            f' class="{css}" data-name="{name}">'
            f"<title>{name}: {p.elevation:.1f}° elevation</title></circle>"
        )

    body = "\n  ".join(parts)
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="-20 -40 240 260"'
        ' id="polar-plot" font-family="sans-serif">\n'
        f'  <text x="{_CENTER:.0f}" y="-25" text-anchor="middle" font-weight="bold"'
        f' font-size="12" fill="{_TEXT_COLOR}">{html.escape(title)}</text>\n'
        f"  {body}\n"
        "</svg>"
    )
