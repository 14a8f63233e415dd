import matplotlib
import pytest

matplotlib.use("Agg")

from lookangles.catalog import DEFAULT_SATELLITES  # noqa: E402
from lookangles.models import GeoPoint, Satellite  # noqa: E402

BUSAN = GeoPoint(latitude=35.1796, longitude=129.0756)
INTELSAT_39 = Satellite(name="INTELSAT-39", longitude=105.0)


@pytest.fixture
def busan() -> GeoPoint:
    return BUSAN


@pytest.fixture
def default_satellites() -> list[Satellite]:
    return list(DEFAULT_SATELLITES)
