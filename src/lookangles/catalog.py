"""Working set of geostationary satellites, built-ins plus user-added slots."""

import logging
import math
from collections.abc import Iterable

from lookangles.angles import calculate_polar_coordinates
from lookangles.events import SATELLITES_UPDATED, EventBus
from lookangles.models import GeoPoint, PolarPoint, Satellite

logger = logging.getLogger(__name__)

DEFAULT_SATELLITES: tuple[Satellite, ...] = (
    Satellite(name="ALT-1", longitude=-15.0),
    Satellite(name="ALT-2", longitude=0.0),
    Satellite(name="ALT-3", longitude=15.0),
    Satellite(name="WGS-9", longitude=60.0),
    Satellite(name="MUOS-4", longitude=100.0),
    Satellite(name="AEHF-6", longitude=135.0),
)


class CatalogError(ValueError):
    """Rejected catalog change (bad input, duplicate, or protected satellite)."""


class SatelliteCatalog:
    """Ordered satellite list with add/remove of custom entries.

    Every change is announced on ``bus`` as ``satellites_updated`` with the
    new list as payload.
    """

    def __init__(
        self,
        satellites: Iterable[Satellite] = DEFAULT_SATELLITES,
        bus: EventBus | None = None,
    ) -> None:
        self._satellites: list[Satellite] = list(satellites)
        self._bus = bus

    def __len__(self) -> int:
        return len(self._satellites)

    def all(self) -> list[Satellite]:
        return list(self._satellites)

    def custom(self) -> list[Satellite]:
        return [s for s in self._satellites if s.custom]

    def get(self, name: str) -> Satellite | None:
        return next((s for s in self._satellites if s.name == name), None)

    def _conflicts(self, name: str, longitude: float) -> bool:
        return any(s.name == name or s.longitude == longitude for s in self._satellites)

    def add(self, name: str, longitude: float | str) -> Satellite:
        """Add a custom satellite.

        Args:
            name: Display name; surrounding whitespace is stripped.
            longitude: Degrees in [-180, 180]; numeric strings are accepted.

        Returns:
            The new Satellite (``custom=True``).

        Raises:
            CatalogError: Empty name, invalid longitude, or a satellite with
                the same name or longitude already exists.
        """
        name = name.strip()
        if not name:
            raise CatalogError("Please enter a satellite name.")
        try:
            lon = float(longitude)
        except (TypeError, ValueError):
            raise CatalogError(
                "Please enter a valid longitude between -180 and 180."
            ) from None
        if math.isnan(lon) or lon < -180 or lon > 180:
            raise CatalogError("Please enter a valid longitude between -180 and 180.")
        if self._conflicts(name, lon):
            raise CatalogError("A satellite with this name or longitude already exists.")

        satellite = Satellite(name=name, longitude=lon, custom=True)
        self._satellites.append(satellite)
        logger.info("added satellite %s at %.2f", name, lon)
        self._notify()
        return satellite

    def remove(self, name: str) -> Satellite:
        """Remove a custom satellite by name.

        Raises:
            CatalogError: No custom satellite with that name (built-ins
                cannot be removed).
        """
        for i, sat in enumerate(self._satellites):
            if sat.name == name and sat.custom:
                del self._satellites[i]
                logger.info("removed satellite %s", name)
                self._notify()
                return sat
        raise CatalogError(f'Satellite "{name}" not found or cannot be deleted.')

    def merge_custom(self, satellites: Iterable[Satellite]) -> int:
        """Restore persisted custom satellites, skipping name/longitude clashes.

        Returns:
            Number of satellites actually added.
        """
        added = 0
        for sat in satellites:
            if self._conflicts(sat.name, sat.longitude):
                logger.debug("skipping persisted satellite %s: duplicate", sat.name)
                continue
            self._satellites.append(
                Satellite(name=sat.name, longitude=sat.longitude, custom=True)
            )
            added += 1
        if added:
            self._notify()
        return added

    def look_angles(self, observer: GeoPoint) -> list[PolarPoint]:
        """Look angles and polar coordinates for every satellite, catalog order."""
        return calculate_polar_coordinates(
            observer.latitude, observer.longitude, self._satellites
        )

    def _notify(self) -> None:
        if self._bus is not None:
            self._bus.publish(SATELLITES_UPDATED, self.all())
