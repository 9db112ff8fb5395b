"""Domain errors surfaced to the comparison view's error line."""

CITY_NOT_FOUND = "City not found"
FORECAST_UNAVAILABLE = "Forecast data not available"
GENERIC_FAILURE = "Failed to fetch weather data"


class WeatherLookupError(Exception):
    """Base class for failures that carry a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CityNotFoundError(WeatherLookupError):
    def __init__(self, message: str = CITY_NOT_FOUND):
        super().__init__(message)


class ForecastUnavailableError(WeatherLookupError):
    def __init__(self, message: str = FORECAST_UNAVAILABLE):
        super().__init__(message)
