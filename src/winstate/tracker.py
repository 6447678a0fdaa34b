"""Keep a store's placement record in sync with a live window."""

from __future__ import annotations

import logging
from functools import partial

from winstate.scheduling import Scheduler, ThreadingScheduler, TimerHandle
from winstate.state import StateStore
from winstate.window import (
    CLOSE,
    CLOSED,
    MOVE,
    RESIZE,
    DisplayQuery,
    Handler,
    ManagedWindow,
)

logger = logging.getLogger(__name__)


def is_normal(window: ManagedWindow) -> bool:
    """True if the window is neither maximized, minimized nor full-screen."""
    return (
        not window.is_maximized()
        and not window.is_minimized()
        and not window.is_full_screen()
    )


class WindowTracker:
    """Applies stored placement to a window and records its changes.

    Move and resize bursts are debounced: each event reschedules a single
    capture ``delay`` seconds later. The record is captured synchronously on
    ``close`` and written to disk once the window reports ``closed``.

    Handlers and timer callbacks are expected to run on one dispatch thread;
    hosts with an event loop should pass a scheduler bound to that loop, such
    as :class:`~winstate.scheduling.AsyncioScheduler`.
    """

    def __init__(
        self,
        store: StateStore,
        displays: DisplayQuery,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.store = store
        self.displays = displays
        self.scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self.delay = store.config.delay
        self._window: ManagedWindow | None = None
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._subscriptions: list[tuple[str, Handler]] = []

    @property
    def window(self) -> ManagedWindow | None:
        return self._window

    def manage(self, window: ManagedWindow) -> None:
        """Restore the stored mode and position on window and start tracking it."""
        if self._window is not None:
            self.unmanage()

        config = self.store.config
        if config.maximize and self.store.is_maximized:
            window.maximize()
        if config.full_screen and self.store.is_full_screen:
            window.set_full_screen(True)

        # Some toolkits reset the position when a window is shown or maximized
        if self.store.x is not None and self.store.y is not None:
            window.set_position(self.store.x, self.store.y)

        self._subscriptions = [
            (RESIZE, self.state_change_handler),
            (MOVE, self.state_change_handler),
            (CLOSE, self._close_handler),
            (CLOSED, self._closed_handler),
        ]
        for event, handler in self._subscriptions:
            window.on(event, handler)
        self._window = window
        logger.info("manage: tracking %r", window)

    def unmanage(self) -> None:
        """Stop tracking the current window, if any."""
        window = self._window
        if window is None:
            return
        for event, handler in self._subscriptions:
            window.remove_listener(event, handler)
        self._subscriptions = []
        self._cancel_timer()
        self._window = None
        logger.info("unmanage: released %r", window)

    def state_change_handler(self) -> None:
        """Handles both resize and move."""
        self._cancel_timer()
        self._timer = self.scheduler.call_later(
            self.delay, partial(self._timer_fired, self._generation)
        )

    def _timer_fired(self, generation: int) -> None:
        if generation != self._generation:
            # Superseded by a newer event or by unmanage
            return
        self._timer = None
        self.update_state()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _close_handler(self) -> None:
        self.update_state()

    def _closed_handler(self) -> None:
        self.unmanage()
        self.store.save()

    def update_state(self, window: ManagedWindow | None = None) -> bool:
        """Copy the window's geometry and mode into the record.

        Bounds are only taken in the normal state, since maximized, minimized
        and full-screen windows report bounds that are not worth restoring.
        Returns False if there was no window or it could not be queried.
        """
        window = window if window is not None else self._window
        if window is None:
            return False

        record = self.store.record
        try:
            bounds = window.get_bounds()
            normal = is_normal(window)
            maximized = window.is_maximized()
            full_screen = window.is_full_screen()
            display_bounds = self.displays.get_display_matching(bounds)
        except Exception as e:
            # The window may already be destroyed
            logger.debug("update_state: skipping capture of %r: %s", window, e)
            return False

        if normal:
            record.set_bounds(bounds)
        record.is_maximized = maximized
        record.is_full_screen = full_screen
        record.display_bounds = display_bounds
        logger.debug("update_state: %s", record)
        return True

    def save_state(self, window: ManagedWindow | None = None) -> bool:
        """Persist the record, capturing from window first when one is given."""
        if window is not None:
            self.update_state(window)
        return self.store.save()
