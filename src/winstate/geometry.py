"""Rectangles, display matching and bounds repair."""

from __future__ import annotations

from attrs import define, evolve


@define(frozen=True)
class Rect:
    """An axis-aligned rectangle in global display coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def overlap_area(self, other: Rect) -> int:
        """Area shared by both rectangles, 0 if they are disjoint."""
        w = min(self.right, other.right) - max(self.x, other.x)
        h = min(self.bottom, other.bottom) - max(self.y, other.y)
        if w <= 0 or h <= 0:
            return 0
        return w * h


def repair_bounds(bounds: Rect, screen: Rect) -> Rect:
    """Fit saved window bounds onto a display.

    A coordinate outside the screen's span is reset to the screen edge, and
    oversized dimensions are clamped to the screen size. When a coordinate
    had to be reset and the window is smaller than the screen along that
    axis, the window is centred along it instead of being left against the
    edge.

    Bounds already contained in the screen come back unchanged.
    """
    x, y, width, height = bounds.x, bounds.y, bounds.width, bounds.height

    x_reset = not screen.x <= x <= screen.right
    y_reset = not screen.y <= y <= screen.bottom
    if x_reset:
        x = screen.x
    if y_reset:
        y = screen.y

    width = min(width, screen.width)
    height = min(height, screen.height)

    if x_reset and width < screen.width:
        x = screen.x + (screen.width - width) // 2
    if y_reset and height < screen.height:
        y = screen.y + (screen.height - height) // 2

    return evolve(bounds, x=x, y=y, width=width, height=height)


class StaticDisplays:
    """Display query over a fixed list of display bounds.

    The display sharing the largest area with the rect wins, ties going to
    the earlier display. A rect touching no display is matched to the display
    whose centre is nearest to its own.
    """

    def __init__(self, displays: list[Rect]) -> None:
        if not displays:
            raise ValueError("At least one display is required")
        self._displays = list(displays)

    @property
    def displays(self) -> list[Rect]:
        return list(self._displays)

    def get_display_matching(self, rect: Rect) -> Rect:
        best = max(self._displays, key=rect.overlap_area)
        if rect.overlap_area(best) > 0:
            return best

        cx, cy = rect.center()

        def distance(display: Rect) -> float:
            dx, dy = display.center()
            return (dx - cx) ** 2 + (dy - cy) ** 2

        return min(self._displays, key=distance)
