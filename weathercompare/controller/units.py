"""Display-time temperature formatting. Stored values are always Celsius."""

from weathercompare.models.common import TemperatureUnit, js_round


def celsius_to_fahrenheit(celsius: float) -> int:
    return js_round(celsius * 9 / 5 + 32)


def format_temperature(celsius: float, unit: TemperatureUnit) -> str:
    """Format a stored Celsius value in the requested unit, e.g. "21°C"."""
    if unit == TemperatureUnit.FAHRENHEIT:
        value = celsius_to_fahrenheit(celsius)
    else:
        value = celsius
    return f"{value}°{unit.value}"


def toggled(unit: TemperatureUnit) -> TemperatureUnit:
    if unit == TemperatureUnit.CELSIUS:
        return TemperatureUnit.FAHRENHEIT
    return TemperatureUnit.CELSIUS
