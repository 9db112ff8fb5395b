"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from weathercompare.config.schema import (
    ApiConfig,
    AppConfig,
    DashboardConfig,
    DisplayConfig,
    SearchConfig,
)
from weathercompare.models.common import TemperatureUnit


class TestSchema:
    def test_defaults(self):
        config = AppConfig()
        assert config.api.units == "metric"
        assert config.search.max_suggestions == 8
        assert config.display.default_unit == TemperatureUnit.CELSIUS

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            AppConfig(unknown={"x": 1})

    def test_units_fixed_to_metric(self):
        with pytest.raises(ValidationError):
            ApiConfig(units="imperial")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ApiConfig(timeout=0)

    def test_max_suggestions_at_least_one(self):
        with pytest.raises(ValidationError):
            SearchConfig(max_suggestions=0)

    def test_unit_parsed_from_letter(self):
        assert DisplayConfig(default_unit="F").default_unit == TemperatureUnit.FAHRENHEIT

    def test_port_range(self):
        with pytest.raises(ValidationError):
            DashboardConfig(port=70000)
