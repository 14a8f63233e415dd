"""Matplotlib static PNG polar plot."""

import re
from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from lookangles.models import PolarPoint
from lookangles.quality import quality_color

_ROOT = Path(__file__).parent.parent.parent.parent
_BELOW_COLOR = "#ea4335"


def render_static_polar(
    points: Sequence[PolarPoint], title: str = "", chart_size: int = 6
) -> Figure:
    """Render polar points as a static matplotlib image.

    Args:
        points: Output of ``calculate_polar_coordinates``.
        title: Optional heading (usually the observer label).
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))

    theta = np.linspace(0, 2 * np.pi, 361)
    for r in (0.2, 0.4, 0.6, 0.8, 1.0):
        ax.plot(
            r * np.sin(theta),
            -r * np.cos(theta),
            color="#9aa5b1",
            linewidth=1.0 if r == 1.0 else 0.5,
            zorder=1,
        )
    ax.plot([-1, 1], [0, 0], color="#9aa5b1", linewidth=0.5, zorder=1)
    ax.plot([0, 0], [-1, 1], color="#9aa5b1", linewidth=0.5, zorder=1)
    for label, (x, y) in {"N": (0, -1.1), "E": (1.1, 0), "S": (0, 1.1), "W": (-1.1, 0)}.items():
        ax.text(x, y, label, ha="center", va="center", fontsize=11)

    for p in points:
        color = quality_color(p.elevation) if p.is_visible else _BELOW_COLOR
        marker = "o" if p.is_visible else "x"
        ax.scatter([p.polar_x], [p.polar_y], s=60, color=color, marker=marker, zorder=2)
        ax.annotate(
            f"{p.name}\n{p.elevation:.1f}°",
            (p.polar_x, p.polar_y),
            textcoords="offset points",
            xytext=(6, 6),
            fontsize=8,
        )

    ax.set_xlim(-1.25, 1.25)
    # Plot coordinates have y pointing down (north = -1), so invert the axis.
    ax.set_ylim(1.25, -1.25)
    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title)

    return fig


def save_static_polar(
    points: Sequence[PolarPoint], label: str, output_path: Path | None = None
) -> Path:
    """Save a polar plot as a PNG file.

    Args:
        points: Output of ``calculate_polar_coordinates``.
        label: Observer label, used as the title and in the default filename.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        filename = re.sub(r"[^\w.-]", "_", f"polar__{label}.png")
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_polar(points, title=label)
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
