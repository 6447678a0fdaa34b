"""Host-facing entry point: one session per managed window."""

from __future__ import annotations

from typing import Any

from winstate.config import StateConfig
from winstate.scheduling import Scheduler
from winstate.state import StateStore
from winstate.tracker import WindowTracker
from winstate.window import DisplayQuery, ManagedWindow


class WindowStateSession:
    """Remembers and restores the placement of a single window.

    Typical use::

        session = WindowStateSession(displays=displays, defaultWidth=1000)
        window = create_window(session.x, session.y, session.width, session.height)
        session.manage(window)

    Options are those of :class:`StateConfig`, in either spelling
    (``fullScreen`` or ``full_screen``). Passing ``config`` and options
    together is an error.
    """

    def __init__(
        self,
        config: StateConfig | None = None,
        *,
        displays: DisplayQuery,
        scheduler: Scheduler | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = StateConfig.from_options(options)
        elif options:
            raise TypeError("Pass either a StateConfig or options, not both")
        self.config = config
        self.store = StateStore(config, displays)
        self.tracker = WindowTracker(self.store, displays, scheduler)

    @property
    def x(self) -> int | None:
        return self.store.x

    @property
    def y(self) -> int | None:
        return self.store.y

    @property
    def width(self) -> int | None:
        return self.store.width

    @property
    def height(self) -> int | None:
        return self.store.height

    @property
    def is_maximized(self) -> bool:
        return self.store.is_maximized

    @property
    def is_full_screen(self) -> bool:
        return self.store.is_full_screen

    def manage(self, window: ManagedWindow) -> None:
        self.tracker.manage(window)

    def unmanage(self) -> None:
        self.tracker.unmanage()

    def save_state(self, window: ManagedWindow | None = None) -> bool:
        return self.tracker.save_state(window)
