"""Weather fetcher: current conditions then forecast, merged into one city."""

import logging
from datetime import datetime, tzinfo

from weathercompare.ingest.forecast_normalizer import normalize_forecast
from weathercompare.ingest.openweather_client import (
    OpenWeatherClient,
    OpenWeatherClientError,
)
from weathercompare.models.common import js_round
from weathercompare.models.errors import CityNotFoundError, ForecastUnavailableError
from weathercompare.models.weather import CurrentConditions, ForecastDay, TrackedCity

logger = logging.getLogger(__name__)

MS_TO_KMH = 3.6


class WeatherFetcher:
    def __init__(self, client: OpenWeatherClient, tz: tzinfo | None = None):
        self.client = client
        self.tz = tz

    def fetch(self, city: str, now: datetime | None = None) -> TrackedCity:
        """Fetch and merge weather for a city.

        The two requests run strictly in order; the forecast is only requested
        once current conditions succeeded. Nothing partial is returned.
        """
        current = self._fetch_current(city)
        forecast = self._fetch_forecast(city, now)
        logger.info(
            "Fetched %s: %d°C, %d forecast days", city, current.temp, len(forecast)
        )
        return TrackedCity.from_parts(city, current, forecast)

    def _fetch_current(self, city: str) -> CurrentConditions:
        try:
            raw = self.client.get_current_weather(city)
        except OpenWeatherClientError as e:
            if e.status_code is None:
                raise
            raise CityNotFoundError() from e
        return parse_current(raw)

    def _fetch_forecast(self, city: str, now: datetime | None) -> list[ForecastDay]:
        try:
            raw = self.client.get_forecast(city)
        except OpenWeatherClientError as e:
            if e.status_code is None:
                raise
            raise ForecastUnavailableError() from e
        return normalize_forecast(raw.get("list", []), now=now, tz=self.tz)


def parse_current(raw: dict) -> CurrentConditions:
    """Extract current conditions; wind arrives in m/s and is stored in km/h."""
    main = raw["main"]
    return CurrentConditions(
        temp=js_round(main["temp"]),
        humidity=main["humidity"],
        wind_speed=js_round(raw["wind"]["speed"] * MS_TO_KMH),
        condition=raw["weather"][0]["main"],
    )
