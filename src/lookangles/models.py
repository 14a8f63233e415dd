"""Data model definitions: plain value records shared by the engine, catalog and renderers."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class GeoPoint:
    """Observer position on the Earth's surface."""

    latitude: float  # Decimal degrees, [-90, 90]
    longitude: float  # Decimal degrees, [-180, 180]


@dataclass(frozen=True)
class Satellite:
    """Geostationary orbital slot. Latitude is implicitly 0."""

    name: str  # Unique within a catalog ("WGS-9")
    longitude: float  # Sub-satellite longitude (degrees)
    custom: bool = False  # User-added; only custom satellites are removable/persisted


@dataclass(frozen=True)
class LookAngle:
    """Antenna pointing pair for one (observer, satellite)."""

    elevation_deg: float  # Above local horizon; negative = below horizon
    azimuth_deg: float  # Compass bearing, [0, 360) (0=N, 90=E, 180=S, 270=W)


@dataclass(frozen=True)
class PolarPoint:
    """A satellite augmented with look angles and polar-plot coordinates."""

    satellite: Satellite
    elevation: float  # Degrees, any sign
    azimuth: float  # Degrees, [0, 360)
    is_visible: bool  # elevation >= 0
    polar_x: float  # r·sin(az), plot units
    polar_y: float  # −r·cos(az), plot y axis points down
    polar_radius: float  # 0 at zenith, 1 at (and below) the horizon

    @property
    def name(self) -> str:
        return self.satellite.name

    @property
    def longitude(self) -> float:
        return self.satellite.longitude


@dataclass(frozen=True)
class Location:
    """Named observer site from the built-in list or the geocoder."""

    name: str
    latitude: float
    longitude: float
    country: str = ""
    aor: str = ""  # Command region ("INDOPACOM", "EUCOM", ...)

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class SignalQuality(Enum):
    """Pointing quality bucket derived from elevation."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    MARGINAL = "Marginal"
    POOR = "Poor"
    BELOW_HORIZON = "Below Horizon"
