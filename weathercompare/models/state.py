"""Immutable state snapshot owned by the comparison controller."""

from dataclasses import dataclass

from weathercompare.models.common import TemperatureUnit
from weathercompare.models.weather import TrackedCity


@dataclass(frozen=True)
class ComparisonState:
    cities: tuple[TrackedCity, ...] = ()
    input_text: str = ""
    suggestions: tuple[str, ...] = ()
    show_suggestions: bool = False
    loading: bool = False
    error: str = ""
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

    def has_city(self, name: str) -> bool:
        """Case-insensitive membership check used for duplicate suppression."""
        key = name.lower()
        return any(c.name.lower() == key for c in self.cities)

    @property
    def visible_suggestions(self) -> tuple[str, ...]:
        if self.show_suggestions:
            return self.suggestions
        return ()
