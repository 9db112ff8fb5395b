"""Output formatters for the comparison state."""

import json

from weathercompare.controller.units import format_temperature
from weathercompare.models.state import ComparisonState
from weathercompare.models.weather import TrackedCity


def city_to_dict(city: TrackedCity, state: ComparisonState) -> dict:
    return {
        "name": city.name,
        "temp": city.temp,
        "temp_display": format_temperature(city.temp, state.unit),
        "humidity": city.humidity,
        "wind_speed": city.wind_speed,
        "condition": city.condition,
        "forecast": [
            {
                "date": day.date,
                "temp": day.temp,
                "temp_display": format_temperature(day.temp, state.unit),
                "condition": day.condition,
            }
            for day in city.forecast
        ],
    }


def state_to_dict(state: ComparisonState) -> dict:
    """JSON-ready view of the state; temperatures also pre-formatted."""
    return {
        "unit": state.unit.value,
        "input_text": state.input_text,
        "suggestions": list(state.suggestions),
        "show_suggestions": state.show_suggestions,
        "loading": state.loading,
        "error": state.error,
        "cities": [city_to_dict(c, state) for c in state.cities],
    }


def format_comparison_json(state: ComparisonState) -> str:
    return json.dumps(state_to_dict(state), indent=2, ensure_ascii=False)


def format_comparison_text(state: ComparisonState) -> str:
    """Plain text cards, one block per tracked city."""
    blocks = []
    for city in state.cities:
        lines = [
            f"=== {city.name} ===",
            f"Temperature: {format_temperature(city.temp, state.unit)}",
            f"Condition: {city.condition}",
            f"Humidity: {city.humidity}%",
            f"Wind: {city.wind_speed} km/h",
        ]
        if city.forecast:
            lines.append("5-Day Forecast:")
            for day in city.forecast:
                lines.append(
                    f"  {day.date}: {format_temperature(day.temp, state.unit)} "
                    f"{day.condition}"
                )
        blocks.append("\n".join(lines))
    if state.error:
        blocks.append(f"Error: {state.error}")
    return "\n\n".join(blocks)
