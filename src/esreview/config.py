"""
esreview Config — Connection Settings
=====================================

Settings resolve in three layers (later wins):

    1. Dataclass defaults (``http://localhost:9200``, index ``my-review-1``)
    2. Environment variables ``ESREVIEW_HOSTS`` (comma-separated) and
       ``ESREVIEW_INDEX``
    3. Explicit keyword overrides (the CLI passes its flags here)
"""

import os
from dataclasses import dataclass, field
from typing import List


DEFAULT_HOSTS = ["http://localhost:9200"]
DEFAULT_INDEX = "my-review-1"


@dataclass
class Settings:
    """Endpoint and index used by every operation."""

    hosts: List[str] = field(default_factory=lambda: list(DEFAULT_HOSTS))
    index: str = DEFAULT_INDEX
    verify: bool = False


def split_hosts(value: str) -> List[str]:
    """Split a comma-separated host list, dropping blanks."""
    return [h.strip() for h in value.split(",") if h.strip()]


def load_settings(**overrides) -> Settings:
    """
    Build Settings from defaults, environment and overrides.

    Overrides whose value is None are ignored so unset CLI flags fall
    through to the lower layers.

    Raises:
        TypeError: On an unknown override key
    """
    settings = Settings()

    hosts = os.getenv("ESREVIEW_HOSTS")
    if hosts:
        settings.hosts = split_hosts(hosts)

    index = os.getenv("ESREVIEW_INDEX")
    if index:
        settings.index = index

    for key, value in overrides.items():
        if not hasattr(settings, key):
            raise TypeError(f"Unknown setting: {key!r}")
        if value is not None:
            setattr(settings, key, value)

    return settings
