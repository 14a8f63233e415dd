"""Built-in observer sites and the AOR/country filters over them."""

from collections.abc import Iterable

from lookangles.models import Location

DEFAULT_LOCATIONS: tuple[Location, ...] = (
    Location("NSA Bahrain", 26.2076027857257, 50.6111061537939, "Bahrain", "CENTCOM"),
    Location("Camp Arifjan", 28.88745959804, 48.1699731354169, "Kuwait", "CENTCOM"),
    Location("Al Udeid AB", 25.1235678538811, 51.3374629203215, "Qatar", "CENTCOM"),
    Location("MacDill AFB, FL", 27.8510433301987, -82.5090662423147, "USA", "NORTHCOM"),
    Location("Ramstein AB", 49.4401704826424, 7.59720948275646, "Germany", "EUCOM"),
    Location("Clay Kaserne", 50.0407041208674, 8.32711774313159, "Germany", "EUCOM"),
    Location("Panzer Kaserne", 48.6858355365503, 9.04351944045798, "Germany", "EUCOM"),
    Location("Patch Barracks", 48.7359556828308, 9.08381048452004, "Germany", "EUCOM"),
    Location("Kelley Barracks", 48.7219919385823, 9.18093129807744, "Germany", "EUCOM"),
    Location("Yokota AB", 35.7376122917397, 139.343845833246, "Japan", "INDOPACOM"),
    Location("Camp Zama", 35.4897327860585, 139.395765984187, "Japan", "INDOPACOM"),
    Location("CP Tango", 37.5168786865521, 126.983267811205, "South Korea", "INDOPACOM"),
    Location("Camp Humphreys", 36.9663892737021, 127.009713317196, "South Korea", "INDOPACOM"),
    Location("Osan AB", 37.0831716293535, 127.034182452515, "South Korea", "INDOPACOM"),
    Location("Busan", 35.1641114151272, 129.055238532993, "South Korea", "INDOPACOM"),
    Location("Camp Smith, HI", 21.3854942009106, -157.907935527315, "USA", "INDOPACOM"),
    Location("CMSFS, CO", 38.859055, -104.813499, "USA", "NORTHCOM"),
    Location("Peterson SFB, CO", 38.0, -104.0, "USA", "NORTHCOM"),
    Location("Omaha AFB, NE", 41.1183, -95.9052, "USA", "NORTHCOM"),
    Location("RRMC, PA", 36.233402, -91.251801, "USA", "NORTHCOM"),
    Location("Schriever SFB, CO", 29.74215, -90.81037, "USA", "NORTHCOM"),
)


def unique_aors(locations: Iterable[Location] = DEFAULT_LOCATIONS) -> list[str]:
    return sorted({loc.aor for loc in locations})


def unique_countries(locations: Iterable[Location] = DEFAULT_LOCATIONS) -> list[str]:
    return sorted({loc.country for loc in locations})


def filter_locations(
    locations: Iterable[Location] = DEFAULT_LOCATIONS,
    aor: str = "",
    country: str = "",
) -> list[Location]:
    """Sites matching both filters, sorted by name. An empty filter matches everything."""
    matches = [
        loc
        for loc in locations
        if (not aor or loc.aor == aor) and (not country or loc.country == country)
    ]
    return sorted(matches, key=lambda loc: loc.name)


def countries_in_aor(locations: Iterable[Location], aor: str) -> list[str]:
    locations = list(locations)
    if not aor:
        return unique_countries(locations)
    return sorted({loc.country for loc in locations if loc.aor == aor})


def aors_in_country(locations: Iterable[Location], country: str) -> list[str]:
    locations = list(locations)
    if not country:
        return unique_aors(locations)
    return sorted({loc.aor for loc in locations if loc.country == country})
