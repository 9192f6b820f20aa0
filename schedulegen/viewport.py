"""
Map viewport fitting.

Given the building markers of a timetable, pick the part of the reference
campus map to show and the zoom, so every marker is visible inside a
container of fixed height and bounded width.

Coordinates:
- markers and crop origins are percentages of the map (0-100)
- the map image is `map_size` px square, so 1 percent = map_size / 100 px
- `scale` multiplies map px into container px
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from schedulegen.buildings import resolve_markers
from schedulegen.config import DEFAULT_VIEWPORT, ViewportConfig
from schedulegen.model import BuildingMarker, Course, PlacedMarker, Viewport


def _recenter(low: float, high: float, visible: float) -> float:
    """
    Origin of a window of size `visible` centred on [low, high],
    kept inside [0, 100 - visible].
    """
    origin = (low + high) / 2 - visible / 2
    return min(max(origin, 0.0), max(100.0 - visible, 0.0))


def fit_viewport(markers: Sequence[BuildingMarker], config: Optional[ViewportConfig] = None) -> Viewport:
    """
    Compute crop origin, scale and container width for a non-empty marker list.

    The padded bounding box fills the container height. If that makes the
    container wider than `max_width`, the width is fixed at `max_width` and
    the scale follows from the horizontal extent; more map becomes visible
    vertically, so the crop is re-centred on that axis. If it is narrower
    than `min_width`, the width is fixed at `min_width` with the same scale
    and the crop is re-centred horizontally. Horizontal is resolved before
    vertical; each axis is clamped to the map on its own.
    """
    if not markers:
        raise ValueError("Cannot fit a viewport around zero markers")
    cfg = config if config is not None else DEFAULT_VIEWPORT

    tops = [m.top for m in markers]
    lefts = [m.left for m in markers]

    # A single marker has a zero-size box; the padding keeps the scale finite.
    top = max(0.0, min(tops) - cfg.padding)
    bottom = min(100.0, max(tops) + cfg.padding)
    left = max(0.0, min(lefts) - cfg.padding)
    right = min(100.0, max(lefts) + cfg.padding)

    px_per_percent = cfg.map_size / 100
    vertical_px = (bottom - top) * px_per_percent
    horizontal_px = (right - left) * px_per_percent

    scale = cfg.container_height / vertical_px
    width = horizontal_px * scale

    cropped_left = left
    cropped_top = top

    if width > cfg.max_width:
        scale = cfg.max_width / horizontal_px
        width = cfg.max_width
        visible_vertical = cfg.container_height / (scale * px_per_percent)
        cropped_top = _recenter(top, bottom, visible_vertical)
    elif width < cfg.min_width:
        width = cfg.min_width
        visible_horizontal = width / (scale * px_per_percent)
        cropped_left = _recenter(left, right, visible_horizontal)

    return Viewport(
        cropped_top=cropped_top,
        cropped_left=cropped_left,
        scale=scale,
        container_width=width,
        container_height=cfg.container_height,
    )


def viewport_for(courses: Iterable[Course], config: Optional[ViewportConfig] = None) -> Optional[Viewport]:
    """
    Viewport for the buildings used by `courses`, or None if no room resolves.
    """
    markers = resolve_markers(courses)
    if not markers:
        return None
    return fit_viewport(markers, config)


def place_markers(
    markers: Iterable[BuildingMarker],
    viewport: Viewport,
    config: Optional[ViewportConfig] = None,
) -> List[PlacedMarker]:
    """
    Pixel position of each marker inside the viewport container.
    """
    cfg = config if config is not None else DEFAULT_VIEWPORT
    px_per_percent = cfg.map_size / 100

    placed: List[PlacedMarker] = []
    for m in markers:
        x = (m.left - viewport.cropped_left) * px_per_percent * viewport.scale
        y = (m.top - viewport.cropped_top) * px_per_percent * viewport.scale
        placed.append(PlacedMarker(marker=m, x=x, y=y))
    return placed
