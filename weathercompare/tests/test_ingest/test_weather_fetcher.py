"""Tests for the two-step weather fetcher."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from weathercompare.ingest.openweather_client import (
    OpenWeatherClient,
    OpenWeatherClientError,
)
from weathercompare.ingest.weather_fetcher import WeatherFetcher, parse_current
from weathercompare.models.errors import CityNotFoundError, ForecastUnavailableError


class TestParseCurrent:
    def test_fields(self, current_payload: dict):
        current = parse_current(current_payload)
        assert current.temp == 21
        assert current.humidity == 64
        assert current.condition == "Clouds"

    def test_wind_converted_to_kmh(self, current_payload: dict):
        # 5 m/s * 3.6 = 18 km/h
        assert parse_current(current_payload).wind_speed == 18

    def test_wind_rounded(self, current_payload: dict):
        current_payload["wind"]["speed"] = 3.1  # 11.16 km/h
        assert parse_current(current_payload).wind_speed == 11


class TestWeatherFetcher:
    @respx.mock
    def test_fetch_merges_both_payloads(
        self, owm_client: OpenWeatherClient, base_url: str,
        current_payload: dict, forecast_payload: dict, fixed_now: datetime,
    ):
        respx.get(f"{base_url}/weather").mock(
            return_value=httpx.Response(200, json=current_payload)
        )
        respx.get(f"{base_url}/forecast").mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )
        city = WeatherFetcher(owm_client, tz=UTC).fetch("London", now=fixed_now)
        assert city.name == "London"
        assert city.temp == 21
        assert city.wind_speed == 18
        assert len(city.forecast) == 5
        assert city.forecast[0].date == "Wed, Feb 11"

    @respx.mock
    def test_requests_are_sequential(
        self, owm_client: OpenWeatherClient, base_url: str,
        current_payload: dict, forecast_payload: dict, fixed_now: datetime,
    ):
        respx.get(f"{base_url}/weather").mock(
            return_value=httpx.Response(200, json=current_payload)
        )
        respx.get(f"{base_url}/forecast").mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )
        WeatherFetcher(owm_client, tz=UTC).fetch("London", now=fixed_now)
        paths = [call.request.url.path for call in respx.calls]
        assert paths == ["/data/2.5/weather", "/data/2.5/forecast"]

    @respx.mock
    def test_current_failure_is_city_not_found(self, owm_client: OpenWeatherClient, base_url: str):
        respx.get(f"{base_url}/weather").mock(return_value=httpx.Response(404))
        forecast_route = respx.get(f"{base_url}/forecast")

        with pytest.raises(CityNotFoundError) as exc_info:
            WeatherFetcher(owm_client).fetch("Atlantis")
        assert exc_info.value.message == "City not found"
        assert not forecast_route.called

    @respx.mock
    def test_forecast_failure_is_forecast_unavailable(
        self, owm_client: OpenWeatherClient, base_url: str, current_payload: dict
    ):
        respx.get(f"{base_url}/weather").mock(
            return_value=httpx.Response(200, json=current_payload)
        )
        respx.get(f"{base_url}/forecast").mock(return_value=httpx.Response(500))

        with pytest.raises(ForecastUnavailableError) as exc_info:
            WeatherFetcher(owm_client).fetch("London")
        assert exc_info.value.message == "Forecast data not available"

    def test_transport_error_propagates(self):
        client = MagicMock(spec=OpenWeatherClient)
        client.get_current_weather.side_effect = OpenWeatherClientError("Request failed")

        with pytest.raises(OpenWeatherClientError):
            WeatherFetcher(client).fetch("London")
        client.get_forecast.assert_not_called()

    def test_missing_forecast_list(self, current_payload: dict, fixed_now: datetime):
        client = MagicMock(spec=OpenWeatherClient)
        client.get_current_weather.return_value = current_payload
        client.get_forecast.return_value = {"cod": "200"}

        city = WeatherFetcher(client, tz=UTC).fetch("London", now=fixed_now)
        assert city.forecast == ()
