"""Settings that a driver instance starts from."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Config:
    """Driver parameters given by the user or the request."""

    driver_name: str = ""
    plugin_type: str = ""
    version: str = ""
    endpoint: str = ""
    nodename: str = ""


def default() -> Config:
    """Return a fresh, empty configuration."""
    return Config()