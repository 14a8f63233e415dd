"""JSON file store for session state: last location, custom satellites, table sort."""

import json
import logging
from pathlib import Path
from typing import Any

from lookangles.models import GeoPoint, Satellite

logger = logging.getLogger(__name__)

LAST_LOCATION = "last_location"
CUSTOM_SATELLITES = "custom_satellites"
SORT_STATE = "sort_state"


class StorageError(Exception):
    """State file could not be written."""


class StateStore:
    """Key/value state persisted as one JSON object.

    Reads never fail: a missing, unreadable or malformed file (or entry)
    is logged and the caller's default is returned instead.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error reading state from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Ignoring state file %s: not a JSON object", self.path)
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            tmp.replace(self.path)
        except OSError as e:
            raise StorageError(f"Error saving state to {self.path}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        """Delete the state file."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Error clearing state at {self.path}: {e}") from e

    def save_last_location(self, point: GeoPoint, label: str = "") -> None:
        self.set(
            LAST_LOCATION,
            {"lat": point.latitude, "lon": point.longitude, "label": label},
        )

    def load_last_location(self) -> tuple[GeoPoint, str] | None:
        raw = self.get(LAST_LOCATION)
        if raw is None:
            return None
        try:
            point = GeoPoint(latitude=float(raw["lat"]), longitude=float(raw["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Failed to restore last location %r: %s", raw, e)
            return None
        return point, str(raw.get("label", ""))

    def save_custom_satellites(self, satellites: list[Satellite]) -> None:
        """Persist the custom subset; an empty list removes the entry."""
        custom = [{"name": s.name, "longitude": s.longitude} for s in satellites if s.custom]
        if custom:
            self.set(CUSTOM_SATELLITES, custom)
        else:
            self.remove(CUSTOM_SATELLITES)

    def load_custom_satellites(self) -> list[Satellite]:
        stored = self.get(CUSTOM_SATELLITES, [])
        if not isinstance(stored, list):
            logger.error("Ignoring custom satellites %r: not a list", stored)
            return []
        satellites: list[Satellite] = []
        for raw in stored:
            try:
                satellites.append(
                    Satellite(
                        name=str(raw["name"]),
                        longitude=float(raw["longitude"]),
                        custom=True,
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                logger.error("Failed to load custom satellite %r: %s", raw, e)
        return satellites

    def save_sort_state(self, column: str | None, direction: str) -> None:
        self.set(SORT_STATE, {"column": column, "direction": direction})

    def load_sort_state(self) -> tuple[str | None, str]:
        raw = self.get(SORT_STATE) or {}
        if not isinstance(raw, dict):
            return None, "none"
        return raw.get("column"), raw.get("direction", "none")
