"""Static greeting table."""

from core.domain.models import Country

DEFAULT_GREETING = "Welcome"

GREETINGS: dict[Country, str] = {
    Country.RUSSIA: "Добро пожаловать",
}


class StaticLocalizationService:
    """LocalizationService: Russian greeting for Russia, English for everyone else."""

    def locale(self, country: Country) -> str:
        return GREETINGS.get(country, DEFAULT_GREETING)
