"""Interfaces the host toolkit provides for the managed window and displays."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from winstate.geometry import Rect

RESIZE = "resize"
MOVE = "move"
CLOSE = "close"
CLOSED = "closed"

Handler = Callable[[], None]


class ManagedWindow(Protocol):
    """A live top-level window.

    ``close`` fires before the window is torn down, ``closed`` once it is gone.
    """

    def get_bounds(self) -> Rect: ...

    def is_maximized(self) -> bool: ...

    def is_minimized(self) -> bool: ...

    def is_full_screen(self) -> bool: ...

    def maximize(self) -> None: ...

    def set_full_screen(self, flag: bool) -> None: ...

    def set_position(self, x: int, y: int) -> None: ...

    def on(self, event: str, handler: Handler) -> None: ...

    def remove_listener(self, event: str, handler: Handler) -> None: ...


class DisplayQuery(Protocol):
    """Maps a rectangle to the bounds of the display that best matches it."""

    def get_display_matching(self, rect: Rect) -> Rect: ...
