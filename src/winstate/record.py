"""The persisted window placement record and its JSON form."""

from __future__ import annotations

import math
from typing import Any

import cattrs
from attrs import define
from cattrs.gen import make_dict_structure_fn, make_dict_unstructure_fn, override

from winstate.geometry import Rect


@define
class WindowPlacementRecord:
    """Last known placement of the managed window."""

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    is_maximized: bool = False
    is_full_screen: bool = False
    display_bounds: Rect | None = None

    def has_bounds(self) -> bool:
        """True if x, y, width and height form a placeable rectangle."""
        return (
            _is_int(self.x)
            and _is_int(self.y)
            and _is_int(self.width)
            and _is_int(self.height)
            and self.width > 0  # type: ignore[operator]
            and self.height > 0  # type: ignore[operator]
        )

    def is_usable(self) -> bool:
        return self.has_bounds() or self.is_maximized or self.is_full_screen

    def bounds(self) -> Rect | None:
        if not self.has_bounds():
            return None
        return Rect(self.x, self.y, self.width, self.height)  # type: ignore[arg-type]

    def set_bounds(self, bounds: Rect) -> None:
        self.x = bounds.x
        self.y = bounds.y
        self.width = bounds.width
        self.height = bounds.height

    def clear_bounds(self) -> None:
        self.x = self.y = self.width = self.height = None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _json_int(value: object) -> int | None:
    """Accept JSON integers, including integral floats such as 100.0."""
    if _is_int(value):
        return value  # type: ignore[return-value]
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def _json_rect(value: object) -> dict[str, int] | None:
    if not isinstance(value, dict):
        return None
    rect = {k: _json_int(value.get(k)) for k in ("x", "y", "width", "height")}
    if any(v is None for v in rect.values()):
        return None
    return rect  # type: ignore[return-value]


def _sanitize(data: dict[str, Any]) -> dict[str, Any]:
    """Drop malformed values so that only well-typed fields get structured."""
    clean: dict[str, Any] = {}
    for key in ("x", "y", "width", "height"):
        value = _json_int(data.get(key))
        if value is not None:
            clean[key] = value
    clean["isMaximized"] = data.get("isMaximized") is True
    clean["isFullScreen"] = data.get("isFullScreen") is True
    display_bounds = _json_rect(data.get("displayBounds"))
    if display_bounds is not None:
        clean["displayBounds"] = display_bounds
    return clean


_converter = cattrs.Converter()
_converter.register_structure_hook(
    WindowPlacementRecord,
    make_dict_structure_fn(
        WindowPlacementRecord,
        _converter,
        is_maximized=override(rename="isMaximized"),
        is_full_screen=override(rename="isFullScreen"),
        display_bounds=override(rename="displayBounds"),
    ),
)
_converter.register_unstructure_hook(
    WindowPlacementRecord,
    make_dict_unstructure_fn(
        WindowPlacementRecord,
        _converter,
        x=override(omit_if_default=True),
        y=override(omit_if_default=True),
        width=override(omit_if_default=True),
        height=override(omit_if_default=True),
        is_maximized=override(rename="isMaximized"),
        is_full_screen=override(rename="isFullScreen"),
        display_bounds=override(rename="displayBounds", omit_if_default=True),
    ),
)


def record_from_json(data: object) -> WindowPlacementRecord | None:
    """Build a record from decoded JSON, or None if it is not an object.

    Unknown keys are ignored and malformed values are treated as absent.
    """
    if not isinstance(data, dict):
        return None
    return _converter.structure(_sanitize(data), WindowPlacementRecord)


def record_to_json(record: WindowPlacementRecord) -> dict[str, Any]:
    """Unstructure a record, omitting absent position, size and display."""
    return _converter.unstructure(record)  # type: ignore[no-any-return]
