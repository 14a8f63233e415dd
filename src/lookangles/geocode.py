"""Place-name search via Nominatim (OpenStreetMap)."""

import logging

import httpx

from lookangles.config import Settings
from lookangles.models import Location

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Geocoder call failure."""


def search_location(
    query: str,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> Location:
    """Resolve a free-text place name to a Location (first Nominatim hit).

    Args:
        query: Address or place name in any language.
        settings: Endpoint, user agent and timeout. Read from the environment if None.
        client: Optional httpx client (tests inject a mock transport).

    Returns:
        Location with the geocoder's display name and, when reported, country.

    Raises:
        GeocodingError: Empty query, HTTP failure, or no result.
    """
    query = query.strip()
    if not query:
        raise GeocodingError("Empty search query")
    settings = settings or Settings.from_env()

    params = {"q": query, "format": "json", "limit": 1, "addressdetails": 1}
    headers = {"User-Agent": settings.nominatim_user_agent}
    try:
        if client is None:
            resp = httpx.get(
                settings.nominatim_url,
                params=params,
                headers=headers,
                timeout=settings.geocode_timeout,
            )
        else:
            resp = client.get(
                settings.nominatim_url,
                params=params,
                headers=headers,
                timeout=settings.geocode_timeout,
            )
        resp.raise_for_status()
        results = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("geocoder request for %r failed: %s", query, e)
        raise GeocodingError(f"Geocoder request failed: {e}") from e

    if not isinstance(results, list):
        raise GeocodingError(f"Unexpected geocoder response: {results!r}")
    if not results:
        raise GeocodingError(f"No results found: {query}")
    r = results[0]
    try:
        address = r.get("address") or {}
        location = Location(
            name=r["display_name"],
            latitude=float(r["lat"]),
            longitude=float(r["lon"]),
            country=address.get("country", "") if isinstance(address, dict) else "",
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.warning("malformed geocoder result for %r: %r", query, r)
        raise GeocodingError(f"Malformed geocoder result: {e!r}") from e
    logger.info("geocoded %r to %.4f, %.4f", query, location.latitude, location.longitude)
    return location
