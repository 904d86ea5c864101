"""
Greeting localization by client IP.

The sender reads the client IP from request headers, resolves it to a location
through a GeoService and turns the location's country into a greeting through a
LocalizationService. Anything it can't resolve falls back to the default
country's greeting; absence is never an error.
"""

from collections.abc import Mapping
from typing import Protocol

import structlog

from core.config import LocaleConfig
from core.domain.models import Country, Location

IP_ADDRESS_HEADER = "x-real-ip"

_ABSENT_IP_VALUES = frozenset({"", "null"})


class GeoService(Protocol):
    """Resolves an IP address to a location, or None when the address is unknown."""

    def by_ip(self, ip: str) -> Location | None: ...


class LocalizationService(Protocol):
    """Maps a country to the greeting shown to its users."""

    def locale(self, country: Country) -> str: ...


class MessageSender:
    """Picks the greeting for a request based on its client IP."""

    def __init__(
        self,
        geo_service: GeoService,
        localization_service: LocalizationService,
        config: LocaleConfig | None = None,
    ) -> None:
        self.geo_service = geo_service
        self.localization_service = localization_service
        self.config = config or LocaleConfig(ip_header=IP_ADDRESS_HEADER)
        self.logger = structlog.get_logger(__name__, component="message_sender")

    def send(self, headers: Mapping[str, str | None]) -> str:
        ip_address = headers.get(self.config.ip_header)
        if ip_address is None or ip_address in _ABSENT_IP_VALUES:
            return self._fallback(reason="ip_missing")

        location = self.geo_service.by_ip(ip_address)
        if location is None or location.country is None:
            return self._fallback(reason="location_unresolved", ip=ip_address)

        message = self.localization_service.locale(location.country)
        self.logger.info(
            "message_sent", ip=ip_address, country=location.country.value, text=message
        )
        return message

    def _fallback(self, reason: str, ip: str | None = None) -> str:
        country = self.config.default_country
        self.logger.info("message_fallback_used", reason=reason, ip=ip, country=country.value)
        return self.localization_service.locale(country)
