"""Window arrangements for a workspace and the functions that compute them."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

ResizeAction = tuple[Any, Optional["Region"]]
LayoutFunc = Callable[[Sequence[Any], Any, "Region", int, float], list[ResizeAction]]


class Change(enum.Enum):
    """Direction of an adjustment."""

    MORE = "more"
    LESS = "less"


@dataclass(frozen=True)
class Region:
    """An axis aligned rectangle on screen."""

    x: int
    y: int
    w: int
    h: int

    def values(self) -> tuple[int, int, int, int]:
        """Return ``(x, y, w, h)``."""
        return (self.x, self.y, self.w, self.h)

    def as_rows(self, n: int) -> list[Region]:
        """Split into ``n`` rows of equal height."""
        if n <= 1:
            return [self]
        height = self.h // n
        return [Region(self.x, self.y + i * height, self.w, height) for i in range(n)]

    def as_columns(self, n: int) -> list[Region]:
        """Split into ``n`` columns of equal width."""
        if n <= 1:
            return [self]
        width = self.w // n
        return [Region(self.x + i * width, self.y, width, self.h) for i in range(n)]

    def split_at_width(self, new_width: int) -> tuple[Region, Region]:
        """Split into a left region of ``new_width`` and a right region of the rest."""
        if new_width > self.w:
            raise ValueError("new width must be no larger than the current width")
        return (
            Region(self.x, self.y, new_width, self.h),
            Region(self.x + new_width, self.y, self.w - new_width, self.h),
        )

    def split_at_height(self, new_height: int) -> tuple[Region, Region]:
        """Split into a top region of ``new_height`` and a bottom region of the rest."""
        if new_height > self.h:
            raise ValueError("new height must be no larger than the current height")
        return (
            Region(self.x, self.y, self.w, new_height),
            Region(self.x, self.y + new_height, self.w, self.h - new_height),
        )


@dataclass(frozen=True)
class LayoutConf:
    """When and how a layout should be applied."""

    floating: bool = False
    gapless: bool = False
    follow_focus: bool = False
    allow_wrapping: bool = True


def _pair(regions: Iterable[Region], clients: Iterable[Any]) -> list[ResizeAction]:
    return [(client.id, region) for region, client in zip(regions, clients)]


def floating(clients, focused, region, max_main, ratio) -> list[ResizeAction]:
    """A layout that assigns no regions, so every client stays where it is."""
    return _pair((), clients)


@dataclass
class Layout:
    """A layout function together with its own ``max_main`` and ``ratio`` state."""

    symbol: str
    conf: LayoutConf
    func: Optional[LayoutFunc] = field(compare=False, repr=False)
    max_main: int
    ratio: float

    @classmethod
    def floating(cls, symbol: str) -> Layout:
        """A floating layout that does not manage window positions."""
        return cls(symbol, LayoutConf(floating=True), floating, 1, 1.0)

    def arrange(self, clients, focused, region: Region) -> list[ResizeAction]:
        """Apply the layout function with the current ``max_main`` and ``ratio``."""
        if self.func is None:
            raise RuntimeError("missing layout function")
        return self.func(clients, focused, region, self.max_main, self.ratio)

    def update_max_main(self, change: Change) -> None:
        """Add or remove one client from the main area, never going below zero."""
        if change is Change.MORE:
            self.max_main += 1
        elif self.max_main > 0:
            self.max_main -= 1

    def update_main_ratio(self, change: Change, step: float) -> None:
        """Grow or shrink the main area by ``step``, clamped to ``[0.0, 1.0]``."""
        if change is Change.MORE:
            self.ratio += step
        else:
            self.ratio -= step
        self.ratio = min(max(self.ratio, 0.0), 1.0)


def client_breakdown(clients: Sequence[Any], n_main: int) -> tuple[int, int]:
    """Number of clients in the main area and in the secondary area."""
    n = len(clients)
    if n <= n_main:
        return (n, 0)
    return (n_main, n - n_main)


def side_stack(clients, focused, region: Region, max_main: int, ratio: float) -> list[ResizeAction]:
    """Main area on the left, remaining clients stacked in a column on the right."""
    n = len(clients)
    if n <= max_main or max_main == 0:
        return _pair(region.as_rows(n), clients)

    split = max(int(region.w * ratio), 0)
    main, stack = region.split_at_width(split)
    regions = [*main.as_rows(max_main), *stack.as_rows(max(n - max_main, 0))]
    return _pair(regions, clients)


def bottom_stack(clients, focused, region: Region, max_main: int, ratio: float) -> list[ResizeAction]:
    """Main area at the top, remaining clients in a single row underneath."""
    n = len(clients)
    if n <= max_main or max_main == 0:
        return _pair(region.as_columns(n), clients)

    split = max(int(region.h * ratio), 0)
    main, stack = region.split_at_height(split)
    regions = [*main.as_columns(max_main), *stack.as_columns(max(n - max_main, 0))]
    return _pair(regions, clients)


def monocle(clients, focused, region: Region, max_main: int, ratio: float) -> list[ResizeAction]:
    """Give the focused client the whole region and hide every other client."""
    if focused is None:
        return []
    full = Region(*region.values())
    return [(c.id, full if c.id == focused else None) for c in clients]