"""Elevation → pointing-quality buckets, shared by the table and renderers."""

from lookangles.models import SignalQuality

EXCELLENT_MIN_DEG = 30.0
GOOD_MIN_DEG = 15.0
MARGINAL_MIN_DEG = 5.0
POOR_MIN_DEG = 0.0

_COLORS: dict[SignalQuality, str] = {
    SignalQuality.EXCELLENT: "#34a853",
    SignalQuality.GOOD: "#7cb342",
    SignalQuality.MARGINAL: "#fbbc04",
    SignalQuality.POOR: "#ff7043",
    SignalQuality.BELOW_HORIZON: "#ea4335",
}


def classify_elevation(elevation_deg: float) -> SignalQuality:
    """Bucket an elevation angle. Thresholds are inclusive lower bounds."""
    if elevation_deg < POOR_MIN_DEG:
        return SignalQuality.BELOW_HORIZON
    if elevation_deg >= EXCELLENT_MIN_DEG:
        return SignalQuality.EXCELLENT
    if elevation_deg >= GOOD_MIN_DEG:
        return SignalQuality.GOOD
    if elevation_deg >= MARGINAL_MIN_DEG:
        return SignalQuality.MARGINAL
    return SignalQuality.POOR


def quality_label(elevation_deg: float) -> str:
    return classify_elevation(elevation_deg).value


def quality_color(elevation_deg: float) -> str:
    """Hex color for the elevation's quality bucket."""
    return _COLORS[classify_elevation(elevation_deg)]
