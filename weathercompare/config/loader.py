"""YAML config loader with environment fallback for the API key."""

import os
from pathlib import Path
from typing import Any

import yaml

from weathercompare.config.defaults import API_KEY_ENV_VAR
from weathercompare.config.schema import AppConfig


def load_config(
    path: str | Path | None = None, environ: dict[str, str] | None = None
) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or a file that does not exist yields the defaults. If the
    YAML leaves ``api.api_key`` empty it is taken from OPENWEATHER_API_KEY.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if environ is None:
        environ = dict(os.environ)

    api = dict(raw.get("api") or {})
    if not api.get("api_key"):
        api["api_key"] = environ.get(API_KEY_ENV_VAR, "")
    raw["api"] = api

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.timeout'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: AppConfig) -> AppConfig:
    """Copy of the config with the API key masked."""
    masked = "***" if config.api.api_key else ""
    return config.model_copy(
        update={"api": config.api.model_copy(update={"api_key": masked})}
    )


def redacted_dump(config: AppConfig) -> str:
    """JSON dump of the config with the API key masked."""
    return redacted(config).model_dump_json(indent=2)
