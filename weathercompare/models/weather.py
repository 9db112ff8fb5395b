"""Weather comparison data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastDay:
    date: str  # display label, e.g. "Mon, Oct 19"
    temp: int  # °C
    condition: str


@dataclass(frozen=True)
class CurrentConditions:
    temp: int  # °C
    humidity: int  # %
    wind_speed: int  # km/h
    condition: str


@dataclass(frozen=True)
class TrackedCity:
    name: str
    temp: int  # °C
    humidity: int
    wind_speed: int  # km/h
    condition: str
    forecast: tuple[ForecastDay, ...] = ()

    @classmethod
    def from_parts(
        cls, name: str, current: CurrentConditions, forecast: list[ForecastDay]
    ) -> "TrackedCity":
        return cls(
            name=name,
            temp=current.temp,
            humidity=current.humidity,
            wind_speed=current.wind_speed,
            condition=current.condition,
            forecast=tuple(forecast),
        )
