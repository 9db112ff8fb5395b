"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field

from weathercompare.config.defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_DASHBOARD_HOST,
    DEFAULT_DASHBOARD_PORT,
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from weathercompare.models.common import TemperatureUnit


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    units: Literal["metric"] = "metric"
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_suggestions: int = Field(default=DEFAULT_MAX_SUGGESTIONS, ge=1)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_unit: TemperatureUnit = TemperatureUnit.CELSIUS


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = DEFAULT_DASHBOARD_HOST
    port: int = Field(default=DEFAULT_DASHBOARD_PORT, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    search: SearchConfig = SearchConfig()
    display: DisplayConfig = DisplayConfig()
    dashboard: DashboardConfig = DashboardConfig()
