"""Angle engine: look angles from a ground observer to geostationary satellites.

Pure functions over degrees. Spherical Earth, satellites at a fixed longitude
on the equator at geostationary altitude. Nothing here raises: NaN inputs
propagate as NaN outputs, below-horizon geometry yields negative elevation.
"""

import math
from collections.abc import Iterable

from lookangles.models import GeoPoint, LookAngle, PolarPoint, Satellite

EARTH_RADIUS_KM = 6378.137  # Equatorial radius, used as a sphere
GEO_ALTITUDE_KM = 35786.0
MEAN_EARTH_RADIUS_KM = 6371.0  # Haversine distances only

# Display constants, overridable per call.
POLE_LATITUDE_THRESHOLD_DEG = 89.99
COVERAGE_KM_PER_DEG = 20.0
COVERAGE_MIN_KM = 200.0
COVERAGE_MAX_KM = 1000.0


def _clamp_unit(value: float) -> float:
    """Clamp to [-1, 1] for acos/asin. NaN passes through unchanged."""
    if value > 1.0:
        return 1.0
    if value < -1.0:
        return -1.0
    return value


def normalize_longitude_difference(lon: float, sat_lon: float) -> float:
    """Return ``sat_lon - lon`` reduced into (-180, 180].

    Reduces modulo 360 first, so unnormalized inputs (e.g. 540) still give the
    short way round the globe.
    """
    diff = math.fmod(sat_lon - lon, 360.0)
    if diff > 180.0:
        diff -= 360.0
    elif diff <= -180.0:
        diff += 360.0
    return diff


def _geocentric_cosine(lat: float, lon: float, sat_lon: float) -> float:
    lat_rad = math.radians(lat)
    lon_diff_rad = math.radians(normalize_longitude_difference(lon, sat_lon))
    return math.cos(lat_rad) * math.cos(lon_diff_rad)


def _slant_range(cos_gamma: float, earth_radius_km: float, orbit_radius: float) -> float:
    # Law of cosines on the Earth-centre / observer / satellite triangle.
    return math.sqrt(
        earth_radius_km**2
        + orbit_radius**2
        - 2 * earth_radius_km * orbit_radius * cos_gamma
    )


def calculate_slant_range(
    lat: float,
    lon: float,
    sat_lon: float,
    earth_radius_km: float = EARTH_RADIUS_KM,
    altitude_km: float = GEO_ALTITUDE_KM,
) -> float:
    """Straight-line distance from observer to satellite in km."""
    cos_gamma = _clamp_unit(_geocentric_cosine(lat, lon, sat_lon))
    return _slant_range(cos_gamma, earth_radius_km, earth_radius_km + altitude_km)


def calculate_elevation(
    lat: float,
    lon: float,
    sat_lon: float,
    earth_radius_km: float = EARTH_RADIUS_KM,
    altitude_km: float = GEO_ALTITUDE_KM,
) -> float:
    """Elevation angle to a geostationary satellite.

    Exact spherical geometry: the geocentric angle γ between the observer and
    the sub-satellite point gives the slant range d, and
    ``sin(el) = ((R + h)·cos γ − R) / d``.

    Args:
        lat: Observer latitude (degrees).
        lon: Observer longitude (degrees).
        sat_lon: Satellite longitude (degrees).
        earth_radius_km: Sphere radius.
        altitude_km: Satellite altitude above the sphere.

    Returns:
        Elevation in degrees. Negative when the satellite is below the
        horizon; never clamped. About 90 directly under the satellite.
    """
    cos_gamma = _clamp_unit(_geocentric_cosine(lat, lon, sat_lon))
    orbit_radius = earth_radius_km + altitude_km
    slant = _slant_range(cos_gamma, earth_radius_km, orbit_radius)
    if slant == 0.0:
        # Only reachable with altitude_km=0 and the observer at the sub-point.
        return 90.0
    sin_el = (orbit_radius * cos_gamma - earth_radius_km) / slant
    return math.degrees(math.asin(_clamp_unit(sin_el)))


def calculate_azimuth(
    lat: float,
    lon: float,
    sat_lon: float,
    pole_threshold_deg: float = POLE_LATITUDE_THRESHOLD_DEG,
) -> float:
    """Compass azimuth to a geostationary satellite, in [0, 360).

    At the poles every direction is degenerate, so the bearing is fixed by
    definition: 180 (due south) from the north pole, 0 (due north) from the
    south pole.

    Args:
        lat: Observer latitude (degrees).
        lon: Observer longitude (degrees).
        sat_lon: Satellite longitude (degrees).
        pole_threshold_deg: |lat| above which the pole rule applies.

    Returns:
        Azimuth in degrees, 0=N, 90=E, 180=S, 270=W.
    """
    if abs(lat) > pole_threshold_deg:
        return 180.0 if lat > 0 else 0.0

    lat_rad = math.radians(lat)
    lon_diff_rad = math.radians(normalize_longitude_difference(lon, sat_lon))
    az_rad = math.atan2(
        math.sin(lon_diff_rad), -math.sin(lat_rad) * math.cos(lon_diff_rad)
    )
    az = math.degrees(az_rad)
    if az < 0:
        az += 360.0
    if az >= 360.0:
        # -1e-17 + 360 rounds up to 360
        az -= 360.0
    return az + 0.0  # -0.0 -> 0.0


def is_satellite_visible(elevation_deg: float) -> bool:
    """Visible when on or above the horizon."""
    return elevation_deg >= 0


def calculate_coverage_radius(
    elevation_deg: float,
    km_per_deg: float = COVERAGE_KM_PER_DEG,
    min_km: float = COVERAGE_MIN_KM,
    max_km: float = COVERAGE_MAX_KM,
) -> float:
    """Radius of the illustrative coverage circle drawn around the observer.

    This is a display heuristic only. It is not a beam footprint, not a
    service area and must not be used for link-budget work.

    Returns:
        0 below the horizon, otherwise ``elevation * 20`` clamped to
        [200, 1000] km.
    """
    if elevation_deg < 0:
        return 0.0
    return min(max(elevation_deg * km_per_deg, min_km), max_km)


def calculate_look_angle(observer: GeoPoint, satellite: Satellite) -> LookAngle:
    """Elevation/azimuth pair for one observer and satellite."""
    return LookAngle(
        elevation_deg=calculate_elevation(
            observer.latitude, observer.longitude, satellite.longitude
        ),
        azimuth_deg=calculate_azimuth(
            observer.latitude, observer.longitude, satellite.longitude
        ),
    )


def calculate_polar_coordinates(
    lat: float, lon: float, satellites: Iterable[Satellite]
) -> list[PolarPoint]:
    """Project each satellite onto a zenith-centred polar plot.

    Radius is ``(90 − max(el, 0)) / 90``: zenith at the centre, the horizon
    (and anything below it) on the rim. The plot y axis points down, hence
    ``y = −r·cos(az)`` puts north at the top.

    Returns:
        One PolarPoint per input satellite, in input order.
    """
    observer = GeoPoint(latitude=lat, longitude=lon)
    points: list[PolarPoint] = []
    for sat in satellites:
        angle = calculate_look_angle(observer, sat)
        el, az = angle.elevation_deg, angle.azimuth_deg
        radius = (90 - max(el, 0.0)) / 90
        az_rad = math.radians(az)
        points.append(
            PolarPoint(
                satellite=sat,
                elevation=el,
                azimuth=az,
                is_visible=is_satellite_visible(el),
                polar_x=radius * math.sin(az_rad),
                polar_y=-radius * math.cos(az_rad),
                polar_radius=radius,
            )
        )
    return points


def great_circle_distance(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Haversine surface distance in km on a mean-radius sphere."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    return MEAN_EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
