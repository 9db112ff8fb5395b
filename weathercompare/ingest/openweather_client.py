"""OpenWeatherMap REST client for current conditions and 5-day forecasts."""

import logging

import httpx

from weathercompare.config.defaults import (
    API_KEY_ENV_VAR,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from weathercompare.config.schema import ApiConfig

logger = logging.getLogger(__name__)


class OpenWeatherClientError(Exception):
    """Raised when OpenWeatherMap returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    """Thin wrapper around the OpenWeatherMap 2.5 API.

    Every request carries the city query, the API key and ``units=metric``.
    No retries: a failed request is reported to the caller as-is.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        if not api_key:
            logger.warning("%s not set; weather requests will fail", API_KEY_ENV_VAR)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, config: ApiConfig) -> "OpenWeatherClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    def get_current_weather(self, city: str) -> dict:
        """Fetch current conditions for a city name."""
        return self._get("/weather", city)

    def get_forecast(self, city: str) -> dict:
        """Fetch the 3-hourly, multi-day forecast for a city name."""
        return self._get("/forecast", city)

    def _get(self, endpoint: str, city: str) -> dict:
        if not self.api_key:
            raise OpenWeatherClientError(f"{API_KEY_ENV_VAR} not set")
        url = f"{self.base_url}{endpoint}"
        params = {"q": city, "appid": self.api_key, "units": "metric"}
        headers = {"User-Agent": self.user_agent}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed: %s q=%r -> %s", endpoint, city, e)
            raise OpenWeatherClientError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.warning(
                "OpenWeather %d: %s q=%r -> %s",
                resp.status_code, endpoint, city, resp.text[:200],
            )
            raise OpenWeatherClientError(
                f"HTTP {resp.status_code} for {endpoint}", resp.status_code
            )
        return resp.json()
