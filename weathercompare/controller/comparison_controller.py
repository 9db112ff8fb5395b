"""Weather comparison controller: owns tracked cities and autocomplete state."""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from functools import partial

from weathercompare.config.schema import AppConfig
from weathercompare.controller.units import format_temperature, toggled
from weathercompare.ingest.openweather_client import OpenWeatherClient
from weathercompare.ingest.weather_fetcher import WeatherFetcher
from weathercompare.models.common import TemperatureUnit
from weathercompare.models.errors import GENERIC_FAILURE, WeatherLookupError
from weathercompare.models.state import ComparisonState
from weathercompare.search.city_database import search_cities

logger = logging.getLogger(__name__)

CitySearch = Callable[[str], list[str]]


class WeatherComparisonController:
    """Runs every state transition of the comparison view.

    State is a frozen ComparisonState swapped as a whole under a lock. At
    most one add_city call is in flight; others arriving while loading are
    ignored.
    """

    def __init__(
        self,
        fetcher: WeatherFetcher,
        search: CitySearch = search_cities,
        unit: TemperatureUnit = TemperatureUnit.CELSIUS,
    ):
        self.fetcher = fetcher
        self.search = search
        self._state = ComparisonState(unit=unit)
        self._lock = threading.Lock()

    @property
    def state(self) -> ComparisonState:
        return self._state

    def _update(self, **changes) -> ComparisonState:
        with self._lock:
            self._state = replace(self._state, **changes)
            return self._state

    # --- Autocomplete ---

    def update_input(self, text: str) -> ComparisonState:
        suggestions = tuple(self.search(text))
        return self._update(
            input_text=text, suggestions=suggestions, show_suggestions=True
        )

    def select_suggestion(self, city: str) -> ComparisonState:
        return self._update(input_text=city, suggestions=(), show_suggestions=False)

    def hide_suggestions(self) -> ComparisonState:
        return self._update(show_suggestions=False)

    # --- Cities ---

    def add_city(self, name: str | None = None) -> ComparisonState:
        """Fetch weather for ``name`` (default: the input text) and track it.

        Blank names, case-insensitive duplicates and calls made while another
        add is loading leave the state untouched and issue no request.
        """
        with self._lock:
            state = self._state
            city = (state.input_text if name is None else name).strip()
            if not city or state.loading or state.has_city(city):
                return state
            self._state = replace(state, loading=True, error="")

        try:
            tracked = self.fetcher.fetch(city)
        except WeatherLookupError as e:
            logger.warning("Could not add %s: %s", city, e.message)
            self._update(error=e.message)
        except Exception:
            logger.exception("Unexpected failure adding %s", city)
            self._update(error=GENERIC_FAILURE)
        else:
            with self._lock:
                self._state = replace(
                    self._state,
                    cities=self._state.cities + (tracked,),
                    input_text="",
                    suggestions=(),
                    show_suggestions=False,
                )
        finally:
            self._update(loading=False)
        return self._state

    def remove_city(self, name: str) -> ComparisonState:
        with self._lock:
            remaining = tuple(c for c in self._state.cities if c.name != name)
            if len(remaining) != len(self._state.cities):
                self._state = replace(self._state, cities=remaining)
            return self._state

    # --- Units ---

    def toggle_unit(self) -> ComparisonState:
        with self._lock:
            self._state = replace(self._state, unit=toggled(self._state.unit))
            return self._state

    def format_temperature(self, celsius: float) -> str:
        return format_temperature(celsius, self._state.unit)


def build_controller(config: AppConfig) -> WeatherComparisonController:
    """Wire client, fetcher and search from an AppConfig."""
    client = OpenWeatherClient.from_config(config.api)
    return WeatherComparisonController(
        fetcher=WeatherFetcher(client),
        search=partial(search_cities, limit=config.search.max_suggestions),
        unit=config.display.default_unit,
    )
