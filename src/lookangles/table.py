"""Look-angle table (APA table) as a pandas DataFrame, with sorting and CSV export."""

import re
from collections.abc import Iterable
from datetime import date

import pandas as pd

from lookangles.angles import calculate_polar_coordinates
from lookangles.models import GeoPoint, Satellite
from lookangles.quality import quality_label

COLUMNS = ["satellite", "longitude", "elevation", "azimuth", "quality", "visible", "custom"]
_CSV_HEADERS = ["Satellite", "Longitude", "Elevation", "Azimuth", "Visible"]
SORT_DIRECTIONS = ("asc", "desc", "none")


class TableError(Exception):
    """Table operation on missing or unusable data."""


def build_table(observer: GeoPoint, satellites: Iterable[Satellite]) -> pd.DataFrame:
    """One row per satellite in input order, angles rounded to 0.1°.

    ``visible`` and ``quality`` come from the unrounded elevation, so a
    satellite at -0.04° shows as ``-0.0`` but is still below the horizon.
    """
    points = calculate_polar_coordinates(
        observer.latitude, observer.longitude, satellites
    )
    rows = [
        {
            "satellite": p.name,
            "longitude": round(p.longitude, 1),
            "elevation": round(p.elevation, 1),
            "azimuth": round(p.azimuth, 1),
            "quality": quality_label(p.elevation),
            "visible": p.is_visible,
            "custom": p.satellite.custom,
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def sort_table(df: pd.DataFrame, column: str | None, direction: str) -> pd.DataFrame:
    """Return ``df`` sorted by ``column``.

    ``satellite`` sorts alphabetically (case-insensitive), every other column
    by value. Direction ``none`` (or no column) leaves the order untouched.

    Raises:
        TableError: Unknown column or direction.
    """
    if direction not in SORT_DIRECTIONS:
        raise TableError(f"Unknown sort direction: {direction}")
    if column is None or direction == "none":
        return df
    if column not in df.columns:
        raise TableError(f"Unknown column: {column}")

    ascending = direction == "asc"
    if column == "satellite":
        return df.sort_values(
            column, ascending=ascending, key=lambda s: s.str.lower(), kind="stable"
        )
    return df.sort_values(column, ascending=ascending, kind="stable")


def export_csv(df: pd.DataFrame) -> str:
    """Render the table as CSV: Satellite, Longitude, Elevation, Azimuth, Visible (Yes/No).

    Raises:
        TableError: The table has no rows.
    """
    if df.empty:
        raise TableError("No data to export. Please select a location first.")
    out = pd.DataFrame(
        {
            "Satellite": df["satellite"],
            "Longitude": df["longitude"].map(lambda v: f"{v:.1f}"),
            "Elevation": df["elevation"].map(lambda v: f"{v:.1f}"),
            "Azimuth": df["azimuth"].map(lambda v: f"{v:.1f}"),
            "Visible": df["visible"].map(lambda v: "Yes" if v else "No"),
        },
        columns=_CSV_HEADERS,
    )
    return out.to_csv(index=False, lineterminator="\n")


def export_filename(label: str, today: date | None = None) -> str:
    """``APA_Data_<label>_<YYYY-MM-DD>.csv``, non-alphanumerics in the label replaced by ``_``."""
    today = today or date.today()
    safe = re.sub(r"[^A-Za-z0-9]", "_", label or "Custom Location")
    return f"APA_Data_{safe}_{today.isoformat()}.csv"
