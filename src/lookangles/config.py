"""Runtime settings read from the environment (populated from .env by the entry points)."""

import os
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_STATE_PATH = Path.home() / ".lookangles" / "state.json"


@dataclass(frozen=True)
class Settings:
    state_path: Path
    log_level: str = "INFO"
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    nominatim_user_agent: str = "LookAngles/1.0"
    geocode_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``LOOKANGLES_*`` / ``NOMINATIM_*`` variables, falling back to defaults."""
        return cls(
            state_path=Path(
                os.environ.get("LOOKANGLES_STATE_PATH", str(_DEFAULT_STATE_PATH))
            ).expanduser(),
            log_level=os.environ.get("LOOKANGLES_LOG_LEVEL", "INFO").upper(),
            nominatim_url=os.environ.get("NOMINATIM_URL", cls.nominatim_url),
            nominatim_user_agent=os.environ.get(
                "NOMINATIM_USER_AGENT", cls.nominatim_user_agent
            ),
            geocode_timeout=float(
                os.environ.get("GEOCODE_TIMEOUT", str(cls.geocode_timeout))
            ),
        )
