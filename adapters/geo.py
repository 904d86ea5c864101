"""
Static IP geolocation table.

A fixed lookup used in place of a real geo-IP database: a few exact
addresses, then whole segments matched by prefix.
"""

from core.domain.models import Country, Location

LOCALHOST = "127.0.0.1"
MOSCOW_IP = "172.0.32.11"
NEW_YORK_IP = "96.44.183.149"

# Exact matches win over segment prefixes
_EXACT: dict[str, Location] = {
    LOCALHOST: Location(),
    MOSCOW_IP: Location(city="Moscow", country=Country.RUSSIA, street="Lenina", building=15),
    NEW_YORK_IP: Location(city="New York", country=Country.USA, street=" 10th Avenue", building=32),
}

_SEGMENTS: tuple[tuple[str, Location], ...] = (
    ("172.", Location(city="Moscow", country=Country.RUSSIA)),
    ("96.", Location(city="New York", country=Country.USA)),
)


class StaticGeoService:
    """GeoService backed by the hardcoded table above."""

    def by_ip(self, ip: str) -> Location | None:
        if ip in _EXACT:
            return _EXACT[ip]
        for prefix, location in _SEGMENTS:
            if ip.startswith(prefix):
                return location
        return None
