import math

import numpy as np
import pytest

from lookangles.angles import (
    EARTH_RADIUS_KM,
    GEO_ALTITUDE_KM,
    calculate_azimuth,
    calculate_coverage_radius,
    calculate_elevation,
    calculate_look_angle,
    calculate_polar_coordinates,
    calculate_slant_range,
    great_circle_distance,
    is_satellite_visible,
    normalize_longitude_difference,
)
from lookangles.models import GeoPoint, LookAngle, Satellite

INTELSAT_39 = Satellite(name="INTELSAT-39", longitude=105.0)


def _enu_look_angle(lat: float, lon: float, sat_lon: float) -> tuple[float, float]:
    """Independent reference: ECEF vectors on a sphere rotated into local ENU."""
    phi, lam, lam_s = np.radians([lat, lon, sat_lon])
    observer = EARTH_RADIUS_KM * np.array(
        [np.cos(phi) * np.cos(lam), np.cos(phi) * np.sin(lam), np.sin(phi)]
    )
    sat = (EARTH_RADIUS_KM + GEO_ALTITUDE_KM) * np.array(
        [np.cos(lam_s), np.sin(lam_s), 0.0]
    )
    d = sat - observer
    east = np.array([-np.sin(lam), np.cos(lam), 0.0]) @ d
    north = np.array(
        [-np.sin(phi) * np.cos(lam), -np.sin(phi) * np.sin(lam), np.cos(phi)]
    ) @ d
    up = np.array([np.cos(phi) * np.cos(lam), np.cos(phi) * np.sin(lam), np.sin(phi)]) @ d
    el = np.degrees(np.arctan2(up, np.hypot(east, north)))
    az = np.degrees(np.arctan2(east, north)) % 360.0
    return float(el), float(az)


@pytest.mark.parametrize(
    "lon,sat_lon,expected",
    [
        (179, -179, 2.0),
        (-179, 179, -2.0),
        (0, 180, 180.0),
        (0, -180, 180.0),
        (0, 540, 180.0),
        (0, -540, 180.0),
        (10, 10, 0.0),
        (-170, 170, -20.0),
        (0, 725, 5.0),
    ],
)
def test_normalize_longitude_difference(lon, sat_lon, expected):
    assert normalize_longitude_difference(lon, sat_lon) == pytest.approx(expected)


@pytest.mark.parametrize("lon", [-170.0, 0.0, 45.5, 180.0])
def test_elevation_directly_below_satellite_is_zenith(lon):
    assert calculate_elevation(0, lon, lon) == pytest.approx(90.0, abs=1e-4)


def test_elevation_antimeridian_uses_short_separation():
    east_side = calculate_elevation(0, 179, -179)
    west_side = calculate_elevation(0, -179, 179)
    assert east_side == pytest.approx(west_side, abs=1e-9)
    assert east_side == pytest.approx(calculate_elevation(0, 0, 2), abs=1e-9)
    assert 87.0 < east_side < 88.0


def test_elevation_opposite_side_of_earth_is_nadir():
    assert calculate_elevation(0, 0, 180) == pytest.approx(-90.0, abs=1e-4)


def test_elevation_is_negative_below_horizon_not_clamped():
    el = calculate_elevation(0, 0, 85)
    assert -5.0 < el < 0.0
    assert calculate_elevation(60, 0, 120) < -10.0


def test_busan_to_intelsat_39_reference_values(busan):
    el = calculate_elevation(busan.latitude, busan.longitude, INTELSAT_39.longitude)
    az = calculate_azimuth(busan.latitude, busan.longitude, INTELSAT_39.longitude)

    ref_el, ref_az = _enu_look_angle(busan.latitude, busan.longitude, INTELSAT_39.longitude)
    assert el == pytest.approx(ref_el, abs=1e-6)
    assert az == pytest.approx(ref_az, abs=1e-6)

    assert 30.0 <= el <= 50.0
    assert 180.0 < az < 270.0
    assert el == pytest.approx(41.79, abs=0.05)
    assert az == pytest.approx(217.79, abs=0.05)


@pytest.mark.parametrize(
    "lat,lon,sat_lon",
    [(51.5, -0.1, 28.2), (-33.9, 151.2, 156.0), (64.1, -21.9, -30.0), (1.3, 103.8, -175.0)],
)
def test_look_angles_match_enu_reference(lat, lon, sat_lon):
    ref_el, ref_az = _enu_look_angle(lat, lon, sat_lon)
    assert calculate_elevation(lat, lon, sat_lon) == pytest.approx(ref_el, abs=1e-6)
    assert calculate_azimuth(lat, lon, sat_lon) == pytest.approx(ref_az, abs=1e-6)


@pytest.mark.parametrize(
    "lat,lon,sat_lon,expected",
    [
        (0, 0, 10, 90.0),
        (0, 0, -10, 270.0),
        (40, 0, 0, 180.0),
        (-40, 0, 0, 0.0),
    ],
)
def test_azimuth_compass_convention(lat, lon, sat_lon, expected):
    assert calculate_azimuth(lat, lon, sat_lon) == pytest.approx(expected, abs=1e-9)


def test_azimuth_at_poles_is_fixed():
    assert calculate_azimuth(90, 0, 45) == 180
    assert calculate_azimuth(-90, 0, 45) == 0
    assert calculate_azimuth(89.995, 10, -120) == 180
    assert calculate_azimuth(-89.995, 10, -120) == 0


def test_azimuth_pole_threshold_is_configurable():
    assert calculate_azimuth(89.0, 0, 45, pole_threshold_deg=88.0) == 180
    assert calculate_azimuth(89.0, 0, 45) != 180


def test_azimuth_northern_observer_east_of_satellite_points_southwest():
    az = calculate_azimuth(35.0, 129.0, 105.0)
    assert 180.0 < az < 270.0


def test_visibility_is_horizon_inclusive():
    assert is_satellite_visible(0) is True
    assert is_satellite_visible(0.0) is True
    assert is_satellite_visible(-0.0001) is False
    assert is_satellite_visible(45) is True


@pytest.mark.parametrize(
    "elevation,expected",
    [(-5, 0), (-0.001, 0), (0, 200), (1, 200), (10, 200), (25, 500), (50, 1000), (60, 1000), (90, 1000)],
)
def test_coverage_radius(elevation, expected):
    assert calculate_coverage_radius(elevation) == pytest.approx(expected)


def test_coverage_radius_custom_constants():
    assert calculate_coverage_radius(10, km_per_deg=50, min_km=100, max_km=400) == 400
    assert calculate_coverage_radius(1, km_per_deg=50, min_km=100, max_km=400) == 100


def test_nan_propagates_without_raising():
    nan = float("nan")
    assert math.isnan(calculate_elevation(nan, 0, 0))
    assert math.isnan(calculate_elevation(0, 0, nan))
    assert math.isnan(calculate_azimuth(nan, 0, 0))
    assert math.isnan(calculate_azimuth(10, nan, 0))
    assert math.isnan(calculate_coverage_radius(nan))
    assert is_satellite_visible(nan) is False


def test_slant_range():
    assert calculate_slant_range(0, 0, 0) == pytest.approx(GEO_ALTITUDE_KM, rel=1e-9)
    # Range grows with distance from the sub-satellite point.
    assert calculate_slant_range(60, 0, 0) > calculate_slant_range(30, 0, 0) > GEO_ALTITUDE_KM


def test_calculate_look_angle(busan):
    angle = calculate_look_angle(busan, INTELSAT_39)
    assert isinstance(angle, LookAngle)
    assert angle.elevation_deg == calculate_elevation(35.1796, 129.0756, 105.0)
    assert angle.azimuth_deg == calculate_azimuth(35.1796, 129.0756, 105.0)


def test_polar_coordinates_preserve_order_and_length(busan, default_satellites):
    points = calculate_polar_coordinates(busan.latitude, busan.longitude, default_satellites)
    assert [p.name for p in points] == [s.name for s in default_satellites]
    for p in points:
        assert p.is_visible == (p.elevation >= 0)


def test_polar_coordinates_empty_input():
    assert calculate_polar_coordinates(10, 20, []) == []


def test_polar_coordinates_geometry():
    sats = [
        Satellite("ZENITH", 0.0),
        Satellite("EAST", 60.0),
        Satellite("HIDDEN", 150.0),
    ]
    zenith, east, hidden = calculate_polar_coordinates(0, 0, sats)

    assert zenith.polar_radius == pytest.approx(0.0, abs=1e-5)

    assert east.azimuth == pytest.approx(90.0)
    assert east.polar_x == pytest.approx(east.polar_radius)
    assert east.polar_y == pytest.approx(0.0, abs=1e-12)
    assert east.polar_radius == pytest.approx((90 - east.elevation) / 90)

    assert not hidden.is_visible
    assert hidden.polar_radius == 1.0
    assert math.hypot(hidden.polar_x, hidden.polar_y) == pytest.approx(1.0)


def test_polar_north_is_up():
    # Due-south satellites plot below the centre (y > 0), due-north above.
    (south_looking,) = calculate_polar_coordinates(40, 0, [Satellite("S", 0.0)])
    (north_looking,) = calculate_polar_coordinates(-40, 0, [Satellite("N", 0.0)])
    assert south_looking.polar_y > 0
    assert north_looking.polar_y < 0


def test_polar_point_exposes_satellite_fields():
    sat = Satellite("X", 12.5, custom=True)
    (p,) = calculate_polar_coordinates(0, 0, [sat])
    assert p.satellite is sat
    assert p.name == "X"
    assert p.longitude == 12.5


def test_great_circle_distance():
    assert great_circle_distance(0, 0, 0, 1) == pytest.approx(111.19, abs=0.01)
    assert great_circle_distance(10, 20, 10, 20) == 0.0
    assert great_circle_distance(0, 179, 0, -179) == pytest.approx(
        great_circle_distance(0, 0, 0, 2)
    )


def test_observer_point_helpers():
    point = GeoPoint(latitude=1.0, longitude=2.0)
    assert point.latitude == 1.0 and point.longitude == 2.0


def test_polar_points_carry_look_angles(busan, default_satellites):
    points = calculate_polar_coordinates(busan.latitude, busan.longitude, default_satellites)
    for p, sat in zip(points, default_satellites):
        angle = calculate_look_angle(busan, sat)
        assert (p.elevation, p.azimuth) == (angle.elevation_deg, angle.azimuth_deg)


@pytest.mark.parametrize("lat,lon,sat_lon", [(35.1796, 129.0756, 105.0), (0, 0, 85), (-60, 10, -40)])
def test_elevation_consistent_with_slant_range(lat, lon, sat_lon):
    # sin(el) * d == (R + h) cos(gamma) - R
    el = math.radians(calculate_elevation(lat, lon, sat_lon))
    slant = calculate_slant_range(lat, lon, sat_lon)
    cos_gamma = math.cos(math.radians(lat)) * math.cos(
        math.radians(normalize_longitude_difference(lon, sat_lon))
    )
    expected = (EARTH_RADIUS_KM + GEO_ALTITUDE_KM) * cos_gamma - EARTH_RADIUS_KM
    assert math.sin(el) * slant == pytest.approx(expected, rel=1e-9, abs=1e-6)
