"""Weather comparison dashboard: FastAPI app rendering the component + actions.

Usage:
    python -m weathercompare serve --config weathercompare.yaml
    uvicorn weathercompare.dashboard:create_app --factory
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from weathercompare.config.loader import load_config
from weathercompare.config.schema import AppConfig
from weathercompare.controller.comparison_controller import (
    WeatherComparisonController,
    build_controller,
)
from weathercompare.controller.pointer_region import (
    PointerEvent,
    PointerEvents,
    dismiss_outside,
)
from weathercompare.reporting.formatters import state_to_dict
from weathercompare.reporting.html_view import render_page

logger = logging.getLogger(__name__)


class InputUpdate(BaseModel):
    text: str


class SuggestionSelect(BaseModel):
    city: str


class PointerDown(BaseModel):
    path: list[str] = []


class AddCity(BaseModel):
    name: str | None = None


def create_app(
    config: AppConfig | None = None,
    controller: WeatherComparisonController | None = None,
) -> FastAPI:
    """Build the dashboard around one controller.

    The click-outside listener is attached for the lifetime of the app and
    released on shutdown.
    """
    if controller is None:
        controller = build_controller(config or load_config())
    events = PointerEvents()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        with dismiss_outside(controller, events):
            logger.info("Dashboard ready")
            yield

    app = FastAPI(title="Weather Comparison", version="0.1.0", lifespan=lifespan)
    app.state.controller = controller
    app.state.pointer_events = events

    @app.get("/", response_class=HTMLResponse)
    def serve_dashboard():
        return HTMLResponse(render_page(controller.state))

    @app.get("/api/state")
    def get_state():
        return state_to_dict(controller.state)

    @app.get("/api/suggest")
    def suggest(q: str = ""):
        return {"query": q, "suggestions": list(controller.search(q))}

    @app.post("/api/input")
    def update_input(update: InputUpdate):
        return state_to_dict(controller.update_input(update.text))

    @app.post("/api/suggestions/select")
    def select_suggestion(select: SuggestionSelect):
        return state_to_dict(controller.select_suggestion(select.city))

    @app.post("/api/pointer-down")
    def pointer_down(event: PointerDown):
        events.dispatch(PointerEvent(path=tuple(event.path)))
        return state_to_dict(controller.state)

    @app.post("/api/cities")
    def add_city(body: AddCity):
        return state_to_dict(controller.add_city(body.name))

    @app.delete("/api/cities/{name}")
    def remove_city(name: str):
        return state_to_dict(controller.remove_city(name))

    @app.post("/api/unit/toggle")
    def toggle_unit():
        return state_to_dict(controller.toggle_unit())

    return app
