"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from weathercompare.config.schema import AppConfig, ApiConfig
from weathercompare.ingest.openweather_client import OpenWeatherClient
from weathercompare.models.weather import ForecastDay, TrackedCity

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-owm.example.com/data/2.5"

# 2026-02-10 12:00 UTC, the first entry of the forecast fixture.
FIXED_NOW = datetime(2026, 2, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def current_payload() -> dict:
    with open(FIXTURE_DIR / "openweather_current_london.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "openweather_forecast_london.json") as f:
        return json.load(f)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def test_config() -> AppConfig:
    return AppConfig(api=ApiConfig(api_key="test-key", base_url=TEST_BASE_URL))


@pytest.fixture
def owm_client() -> OpenWeatherClient:
    return OpenWeatherClient(api_key="test-key", base_url=TEST_BASE_URL)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout": 5.0},
        "search": {"max_suggestions": 3},
        "display": {"default_unit": "F"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


def _make_city(name: str = "London", temp: int = 21) -> TrackedCity:
    return TrackedCity(
        name=name,
        temp=temp,
        humidity=64,
        wind_speed=18,
        condition="Clouds",
        forecast=(
            ForecastDay(date="Wed, Feb 11", temp=7, condition="Clouds"),
            ForecastDay(date="Thu, Feb 12", temp=11, condition="Clear"),
        ),
    )


@pytest.fixture
def make_city():
    """Factory for TrackedCity values with fixed weather."""
    return _make_city


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL
