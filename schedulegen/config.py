"""Layout and map viewport constants.

Every function in :mod:`schedulegen.layout` and :mod:`schedulegen.viewport`
accepts an optional config object; callers that pass nothing get the
defaults below, which match the full-size timetable view.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    # Vertical pixels shared by all hours of the day.
    pixel_budget: float = 1056
    day_start_hour: int = 8
    min_day_end_hour: int = 17
    # Offset of session boxes below the column top (day header).
    session_offset: float = 64
    # Gridlines sit lower than session content.
    marker_offset: float = 112
    column_padding: float = 128

    @property
    def column_height(self) -> float:
        return self.pixel_budget + self.column_padding


@dataclass(frozen=True)
class ViewportConfig:
    container_height: float = 320
    min_width: float = 320
    max_width: float = 640
    # Padding around the marker bounding box, in percent of the map.
    padding: float = 10
    # Reference map edge length in px.
    map_size: float = 1000

    def __post_init__(self) -> None:
        # A single marker needs a non-empty box to get a finite scale.
        if self.padding <= 0:
            raise ValueError(f"padding must be positive, got {self.padding!r}")
        if self.container_height <= 0 or self.map_size <= 0:
            raise ValueError("container_height and map_size must be positive")


DEFAULT_LAYOUT = LayoutConfig()
DEFAULT_VIEWPORT = ViewportConfig()


__all__ = ["LayoutConfig", "ViewportConfig", "DEFAULT_LAYOUT", "DEFAULT_VIEWPORT"]
