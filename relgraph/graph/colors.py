"""Stable per-build color assignment for lookup columns."""

from __future__ import annotations

from typing import Sequence

PALETTE: tuple[str, ...] = (
    "#d35400",
    "#008000",
    "#3455DB",
    "#9400d3",
    "#939393",
    "#b8806b",
    "#D35400",
    "#008b8b",
    "#B50000",
    "#1460aa",
    "#8b008b",
    "#696969",
    "#634806",
    "#870c25",
)


class ColorAllocator:
    """Hand out palette colors by lookup-column name, cycling when exhausted.

    The mapping is append-only: once a name has a color it keeps it for the
    lifetime of the allocator.  Create one allocator per build.
    """

    def __init__(self, palette: Sequence[str] = PALETTE) -> None:
        if not palette:
            raise ValueError("ColorAllocator needs at least one color")
        self._palette = tuple(palette)
        self._assigned: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._assigned)

    def __contains__(self, name: object) -> bool:
        return name in self._assigned

    @property
    def assigned(self) -> dict[str, str]:
        """Copy of the name -> color mapping, in assignment order."""
        return dict(self._assigned)

    def color_for(self, name: str) -> str:
        color = self._assigned.get(name)
        if color is None:
            color = self._palette[len(self._assigned) % len(self._palette)]
            self._assigned[name] = color
        return color
