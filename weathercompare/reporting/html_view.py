"""Server-side HTML rendering of the comparison component."""

from html import escape

from weathercompare.controller.pointer_region import SEARCH_REGION_ID
from weathercompare.controller.units import format_temperature
from weathercompare.models.common import TemperatureUnit
from weathercompare.models.state import ComparisonState
from weathercompare.models.weather import ForecastDay, TrackedCity

BUTTON_GRADIENT = (
    "bg-gradient-to-r from-blue-400 to-blue-300 text-blue-950 rounded-lg "
    "hover:from-blue-500 hover:to-blue-400 transition-colors font-semibold"
)


def render_page(state: ComparisonState) -> str:
    return _PAGE.format(
        body=render_component(state),
        script=_SCRIPT,
    )


def render_component(state: ComparisonState) -> str:
    unit_label = "°C" if state.unit == TemperatureUnit.CELSIUS else "°F"
    disabled = " disabled" if state.loading else ""
    submit_label = "Loading..." if state.loading else "Add City"
    error = (
        f'<p id="error" class="text-red-400 mt-2">{escape(state.error)}</p>'
        if state.error
        else ""
    )
    cards = "\n".join(render_city_card(c, state.unit) for c in state.cities)

    return f"""<div class="max-w-6xl mx-auto p-5 relative">
  <button id="unit-toggle" class="absolute top-2 left-2 px-4 py-2 {BUTTON_GRADIENT} text-sm">{unit_label}</button>
  <div class="text-center mb-8">
    <h1 class="text-3xl font-bold mb-6 text-blue-100">Weather</h1>
    <div class="relative" id="{SEARCH_REGION_ID}">
      <form id="add-city" class="flex justify-center gap-2">
        <div class="relative w-64">
          <input id="city-input" type="text" value="{escape(state.input_text)}" placeholder="Enter city name" autocomplete="off"
            class="w-full px-4 py-2 border bg-blue-100 rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500"{disabled}>
          {render_suggestions(state.visible_suggestions)}
        </div>
        <button id="add-city-submit" type="submit" class="px-4 py-2 {BUTTON_GRADIENT} disabled:opacity-50 disabled:cursor-not-allowed"{disabled}>{submit_label}</button>
      </form>
    </div>
    {error}
  </div>
  <div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-4">
{cards}
  </div>
</div>"""


def render_suggestions(suggestions: tuple[str, ...]) -> str:
    hidden = "" if suggestions else " hidden"
    items = "".join(
        f'<div class="suggestion px-4 py-2 cursor-pointer hover:bg-blue-50 text-left" '
        f'data-city="{escape(name)}">{escape(name)}</div>'
        for name in suggestions
    )
    return (
        f'<div id="suggestions" class="absolute z-10 w-full mt-1 bg-white border '
        f'rounded-lg shadow-lg{hidden}">{items}</div>'
    )


def render_city_card(city: TrackedCity, unit: TemperatureUnit) -> str:
    name = escape(city.name)
    rows = "".join(
        '<div class="flex justify-between items-center border-b pb-2">'
        f'<span class="text-gray-600">{label}:</span><span>{value}</span></div>'
        for label, value in (
            ("Temperature", format_temperature(city.temp, unit)),
            ("Condition", escape(city.condition)),
            ("Humidity", f"{city.humidity}%"),
            ("Wind", f"{city.wind_speed} km/h"),
        )
    )
    forecast = ""
    if city.forecast:
        cells = "".join(render_forecast_cell(day, unit) for day in city.forecast)
        forecast = (
            '<div class="mt-4"><h3 class="font-medium text-gray-700 mb-3">5-Day Forecast</h3>'
            '<div class="overflow-x-auto"><div class="grid grid-cols-5 gap-2 text-sm min-w-full">'
            f"{cells}</div></div></div>"
        )
    return (
        f'    <div class="city-card bg-white rounded-lg shadow-md p-6 relative" data-city="{name}">'
        '<button class="remove absolute top-3 right-3 text-gray-400 hover:text-red-500 text-xl" '
        f'data-city="{name}">×</button>'
        f'<h2 class="text-xl font-semibold mb-4">{name}</h2>'
        '<div class="space-y-3"><div class="bg-blue-50 p-4 rounded-lg mb-4">'
        f'<h3 class="font-medium text-gray-700 mb-2">Current Weather</h3>{rows}</div>'
        f"{forecast}</div></div>"
    )


def render_forecast_cell(day: ForecastDay, unit: TemperatureUnit) -> str:
    return (
        '<div class="text-center p-3 bg-gradient-to-b from-blue-50 to-blue-100 rounded-lg">'
        f'<div class="font-medium text-blue-800">{escape(day.date)}</div>'
        f'<div class="text-lg font-bold text-blue-900">{format_temperature(day.temp, unit)}</div>'
        f'<div class="text-blue-700">{escape(day.condition)}</div></div>'
    )


_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Weather</title>
<script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-blue-950 min-h-screen">
{body}
<script>
{script}
</script>
</body>
</html>"""

# Every pointer-down is forwarded with the target's ancestor ids; the
# server decides whether it fell inside the search region. Suggestions are
# picked on pointerdown so the pressed element is still in the DOM.
_SCRIPT = """
const post = (url, body) => fetch(url, {
  method: "POST", headers: {"Content-Type": "application/json"},
  body: JSON.stringify(body || {}),
}).then(r => r.json());
const input = document.getElementById("city-input");
const submit = document.getElementById("add-city-submit");
const box = document.getElementById("suggestions");
const showSuggestions = (state) => {
  const names = state.show_suggestions ? state.suggestions : [];
  box.innerHTML = "";
  names.forEach(name => {
    const el = document.createElement("div");
    el.className = "suggestion px-4 py-2 cursor-pointer hover:bg-blue-50 text-left";
    el.dataset.city = name;
    el.textContent = name;
    box.appendChild(el);
  });
  box.classList.toggle("hidden", names.length === 0);
};
input.addEventListener("input", () => post("/api/input", {text: input.value}).then(s => {
  // stale responses for an older prefix are dropped
  if (s.input_text === input.value) showSuggestions(s);
}));
box.addEventListener("pointerdown", (e) => {
  const city = e.target.dataset.city;
  if (!city) return;
  e.stopPropagation();
  post("/api/suggestions/select", {city}).then(s => { input.value = s.input_text; showSuggestions(s); });
});
document.addEventListener("pointerdown", (e) => {
  const path = e.composedPath().map(n => n.id).filter(Boolean);
  post("/api/pointer-down", {path}).then(s => { if (!s.show_suggestions) showSuggestions(s); });
});
document.getElementById("add-city").addEventListener("submit", (e) => {
  e.preventDefault();
  const name = input.value;
  input.disabled = true;
  submit.disabled = true;
  submit.textContent = "Loading...";
  post("/api/cities", {name}).then(() => location.reload());
});
document.getElementById("unit-toggle").addEventListener("click", () => post("/api/unit/toggle").then(() => location.reload()));
document.querySelectorAll("button.remove").forEach(b => b.addEventListener("click", () =>
  fetch("/api/cities/" + encodeURIComponent(b.dataset.city), {method: "DELETE"}).then(() => location.reload())));
"""
