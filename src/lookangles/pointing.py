"""CLI entry point for a look-angle table and polar PNG.

Edit the site/satellite variables at the top, then run:
    uv run python src/lookangles/pointing.py
"""

from dotenv import load_dotenv

load_dotenv()

from lookangles.angles import calculate_polar_coordinates  # noqa: E402
from lookangles.catalog import DEFAULT_SATELLITES  # noqa: E402
from lookangles.config import Settings  # noqa: E402
from lookangles.logger import setup_logger  # noqa: E402
from lookangles.models import GeoPoint, Satellite  # noqa: E402
from lookangles.renderers.static import save_static_polar  # noqa: E402
from lookangles.table import build_table  # noqa: E402

where = "Busan"
observer = GeoPoint(latitude=35.1796, longitude=129.0756)
satellites = [*DEFAULT_SATELLITES, Satellite(name="INTELSAT-39", longitude=105.0)]

logger = setup_logger(level=Settings.from_env().log_level)

print(build_table(observer, satellites).to_string(index=False))
points = calculate_polar_coordinates(observer.latitude, observer.longitude, satellites)
path = save_static_polar(points, label=where)
logger.info("Saved: %s", path)
