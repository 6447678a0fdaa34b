from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from pathlib import Path

import pytest

from winstate.config import StateConfig
from winstate.geometry import Rect, StaticDisplays

PRIMARY = Rect(0, 0, 1920, 1080)
SECONDARY = Rect(1920, 0, 1280, 1024)


class FakeTimer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose timers only fire when the test says so."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]

    def run_pending(self) -> int:
        due = self.pending
        self.timers = []
        for timer in due:
            timer.callback()
        return len(due)


class FakeWindow:
    """In-memory window that records calls and lets tests fire events."""

    def __init__(self, bounds: Rect = Rect(100, 100, 800, 600)) -> None:
        self.bounds = bounds
        self.maximized = False
        self.minimized = False
        self.full_screen = False
        self.destroyed = False
        self.bounds_queries = 0
        self.calls: list[tuple[object, ...]] = []
        self.listeners: dict[str, list[Callable[[], None]]] = defaultdict(list)

    def _check(self) -> None:
        if self.destroyed:
            raise RuntimeError("Object has been destroyed")

    def get_bounds(self) -> Rect:
        self._check()
        self.bounds_queries += 1
        return self.bounds

    def is_maximized(self) -> bool:
        self._check()
        return self.maximized

    def is_minimized(self) -> bool:
        self._check()
        return self.minimized

    def is_full_screen(self) -> bool:
        self._check()
        return self.full_screen

    def maximize(self) -> None:
        self.calls.append(("maximize",))
        self.maximized = True

    def set_full_screen(self, flag: bool) -> None:
        self.calls.append(("set_full_screen", flag))
        self.full_screen = flag

    def set_position(self, x: int, y: int) -> None:
        self.calls.append(("set_position", x, y))
        self.bounds = Rect(x, y, self.bounds.width, self.bounds.height)

    def on(self, event: str, handler: Callable[[], None]) -> None:
        self.listeners[event].append(handler)

    def remove_listener(self, event: str, handler: Callable[[], None]) -> None:
        self.listeners[event].remove(handler)

    def emit(self, event: str) -> None:
        for handler in list(self.listeners[event]):
            handler()

    def listener_count(self) -> int:
        return sum(len(h) for h in self.listeners.values())


@pytest.fixture
def displays() -> StaticDisplays:
    return StaticDisplays([PRIMARY, SECONDARY])


@pytest.fixture
def config(tmp_path: Path) -> StateConfig:
    """Config storing state in a temporary directory."""
    return StateConfig(path=tmp_path / "state")


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()


@pytest.fixture
def make_window() -> type[FakeWindow]:
    return FakeWindow
