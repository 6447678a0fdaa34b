"""Configuration and paths for window state persistence."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from attrs import define, field, fields
from platformdirs import user_data_dir

APP_NAME = "winstate"
DEFAULT_FILE = "window-state.json"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
EVENT_HANDLING_DELAY = 0.1


def default_state_dir() -> Path:
    """Return the directory holding state files.

    WINSTATE_DIR overrides the platform user-data directory.
    """
    override = os.environ.get("WINSTATE_DIR")
    if override:
        return Path(override)
    return Path(user_data_dir(APP_NAME))


def _positive_or(default: int) -> Callable[[object], int]:
    def convert(value: object) -> int:
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            return default
        return value

    return convert


@define(frozen=True)
class StateConfig:
    """Options recognised when creating a window state session."""

    file: str = DEFAULT_FILE
    path: Path = field(factory=default_state_dir, converter=Path)
    maximize: bool = True
    full_screen: bool = True
    default_width: int = field(
        default=DEFAULT_WIDTH, converter=_positive_or(DEFAULT_WIDTH)
    )
    default_height: int = field(
        default=DEFAULT_HEIGHT, converter=_positive_or(DEFAULT_HEIGHT)
    )
    delay: float = EVENT_HANDLING_DELAY

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> StateConfig:
        """Build a config from host options such as ``fullScreen``.

        Both the camelCase option names and the attribute names are accepted.
        """
        known = {a.name for a in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_NAMES.get(key, key)
            if name not in known:
                raise TypeError(f"Unknown window state option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


_OPTION_NAMES = {
    "fullScreen": "full_screen",
    "defaultWidth": "default_width",
    "defaultHeight": "default_height",
}


def get_storage_path(config: StateConfig) -> Path:
    """Return path to the state JSON for given config."""
    return config.path / config.file
