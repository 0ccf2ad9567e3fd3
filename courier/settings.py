"""Runtime configuration for the courier engine.

Settings are a pydantic model that fills any field not passed explicitly
from ``COURIER_*`` environment variables. Empty environment values are
ignored so an exported-but-blank variable never overrides a default.
"""

from __future__ import annotations

import os
import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


ENV_ROUND_TRIP_MARKER = "COURIER_ROUND_TRIP_MARKER"
ENV_FORWARD_MARKER = "COURIER_FORWARD_MARKER"
ENV_DEBUG = "COURIER_DEBUG"
ENV_LOG_FILE = "COURIER_LOG_FILE"

_ENV_FIELDS = {
    "round_trip_marker": ENV_ROUND_TRIP_MARKER,
    "forward_marker": ENV_FORWARD_MARKER,
    "debug": ENV_DEBUG,
    "log_file": ENV_LOG_FILE,
}


class CourierSettings(BaseModel):
    """Engine configuration.

    Attributes:
        round_trip_marker: Trailing character that marks a round-trip name.
        forward_marker: Pass directive meaning "forward unchanged".
        debug: Log every bubble step to a file.
        log_file: Log file used when debug is on; timestamped when unset.
    """

    model_config = ConfigDict(frozen=True)

    round_trip_marker: str = "!"
    forward_marker: str = "."
    debug: bool = False
    log_file: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _load_from_env(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        for field_name, env_var in _ENV_FIELDS.items():
            if field_name in merged:
                continue
            value = os.environ.get(env_var)
            if value:
                merged[field_name] = value
        return merged

    @field_validator("round_trip_marker", "forward_marker")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("markers must be exactly one character")
        return value

    @model_validator(mode="after")
    def _distinct_markers(self) -> CourierSettings:
        if self.round_trip_marker == self.forward_marker:
            raise ValueError("round_trip_marker and forward_marker must differ")
        return self


_SETTINGS: CourierSettings | None = None
_SETTINGS_LOCK = threading.Lock()


def get_settings() -> CourierSettings:
    """Return the process-wide settings, loading them on first use."""
    global _SETTINGS
    with _SETTINGS_LOCK:
        if _SETTINGS is None:
            _SETTINGS = CourierSettings()
    return _SETTINGS


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _SETTINGS
    with _SETTINGS_LOCK:
        _SETTINGS = None
