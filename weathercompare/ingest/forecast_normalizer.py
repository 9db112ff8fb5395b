"""Collapse 3-hourly forecast entries into at most five daily summaries."""

from datetime import UTC, datetime, tzinfo

from weathercompare.models.common import js_round
from weathercompare.models.weather import ForecastDay

MAX_FORECAST_DAYS = 5


def normalize_forecast(
    entries: list[dict],
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> list[ForecastDay]:
    """Pick the first entry per calendar date, skipping today, capped at five.

    Dates are keyed in UTC while "today" is compared by local day-of-month
    only (not month or year). ``tz`` selects the local zone (system local
    when None).
    """
    if now is None:
        now = datetime.now(tz) if tz is not None else datetime.now().astimezone()
    today_day = now.astimezone(tz).day if now.tzinfo is not None else now.day

    days: list[ForecastDay] = []
    seen_dates: set[str] = set()

    for item in entries:
        moment = datetime.fromtimestamp(item["dt"], UTC)
        date_key = moment.date().isoformat()
        local = moment.astimezone(tz)

        if date_key in seen_dates or local.day == today_day:
            continue

        seen_dates.add(date_key)
        days.append(
            ForecastDay(
                date=format_day_label(local),
                temp=js_round(item["main"]["temp"]),
                condition=item["weather"][0]["main"],
            )
        )
        if len(days) == MAX_FORECAST_DAYS:
            break

    return days


def format_day_label(moment: datetime) -> str:
    """Short en-US label like "Mon, Oct 19"."""
    return f"{_WEEKDAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} {moment.day}"


# Fixed English names so labels do not depend on the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
