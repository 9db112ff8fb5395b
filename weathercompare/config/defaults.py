"""Default values for the OpenWeatherMap client and the dashboard."""

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_USER_AGENT = "weathercompare/0.1.0"
DEFAULT_TIMEOUT = 10.0
API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"

DEFAULT_MAX_SUGGESTIONS = 8

DEFAULT_DASHBOARD_HOST = "127.0.0.1"
DEFAULT_DASHBOARD_PORT = 8777
