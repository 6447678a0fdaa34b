"""Load, validate and persist the placement record of one window."""

from __future__ import annotations

import logging
from pathlib import Path

from winstate import storage
from winstate.config import StateConfig, get_storage_path
from winstate.geometry import Rect, repair_bounds
from winstate.record import WindowPlacementRecord
from winstate.storage import StorageError
from winstate.window import DisplayQuery

logger = logging.getLogger(__name__)


class StateStore:
    """The placement record of a window session.

    The stored record is loaded and checked against the current display
    layout on construction. Missing or unusable state falls back to the
    configured default size. Without a display query, stored bounds are
    validated but not fitted to a display.
    """

    def __init__(self, config: StateConfig, displays: DisplayQuery | None) -> None:
        self.config = config
        self.displays = displays
        self.path: Path = get_storage_path(config)
        self._record = self._load()
        self.validate()
        self._apply_defaults()

    def _load(self) -> WindowPlacementRecord:
        try:
            record = storage.read_record(self.path)
        except StorageError as e:
            logger.debug("load: no usable state at %s: %s", self.path, e)
            return WindowPlacementRecord()
        logger.debug("load: read %s from %s", record, self.path)
        return record

    def validate(self) -> None:
        """Discard unusable state and fit stored bounds onto a current display."""
        record = self._record
        if not record.is_usable():
            logger.info("validate: discarding unusable state %s", record)
            self._record = WindowPlacementRecord()
            return

        bounds = record.bounds()
        if bounds is None:
            # Mode-only state; position and size go together
            record.clear_bounds()
            return

        if record.display_bounds is None or self.displays is None:
            return

        # Check that the display the window was last on is still available
        try:
            screen = self.displays.get_display_matching(bounds)
        except Exception:
            logger.exception("validate: display query failed for %s", bounds)
            return

        repaired = repair_bounds(bounds, screen)
        if repaired != bounds:
            logger.info(
                "validate: moved %s to %s to fit display %s", bounds, repaired, screen
            )
        record.set_bounds(repaired)

    def _apply_defaults(self) -> None:
        if self._record.width is None:
            self._record.width = self.config.default_width
        if self._record.height is None:
            self._record.height = self.config.default_height

    def save(self) -> bool:
        """Write the current record to disk; failures are logged, not raised."""
        try:
            storage.ensure_directory(self.path)
            storage.write_record(self.path, self._record)
        except StorageError as e:
            logger.warning("save: %s", e)
            return False
        logger.debug("save: wrote %s to %s", self._record, self.path)
        return True

    @property
    def record(self) -> WindowPlacementRecord:
        return self._record

    @property
    def x(self) -> int | None:
        return self._record.x

    @property
    def y(self) -> int | None:
        return self._record.y

    @property
    def width(self) -> int | None:
        return self._record.width

    @property
    def height(self) -> int | None:
        return self._record.height

    @property
    def is_maximized(self) -> bool:
        return self._record.is_maximized

    @property
    def is_full_screen(self) -> bool:
        return self._record.is_full_screen

    @property
    def display_bounds(self) -> Rect | None:
        return self._record.display_bounds
