"""
Vertical timetable layout.

The visible day always starts at 8:00 and ends at 17:00 or later, when a
session ends later. All vertical placement is linear in hours since 8:00:

    position = base_height * (hours - 8) + offset

with `base_height` = pixel budget / visible hours.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from schedulegen.colors import palette_for
from schedulegen.config import DEFAULT_LAYOUT, LayoutConfig
from schedulegen.days import partition_sessions
from schedulegen.model import (
    Course,
    Layout,
    MarkerData,
    Session,
    SessionBox,
    SessionPosition,
    SessionTextHeight,
)
from schedulegen.timeutil import hour_label, time_to_hours, to_12_hour_format
from schedulegen.validate import valid_sessions


def day_span_hours(courses: Iterable[Course], config: Optional[LayoutConfig] = None) -> int:
    """
    Number of hours shown, from 8:00 to the latest session end rounded up.

    Never less than 9 (8:00-17:00). Invalid sessions are ignored.
    """
    return _span_of(valid_sessions(courses), config if config is not None else DEFAULT_LAYOUT)


def _span_of(sessions: Iterable[Session], cfg: LayoutConfig) -> int:
    latest_hour = cfg.min_day_end_hour
    for session in sessions:
        end_hour, _, end_minute = session.end_time.partition(":")
        rounded = int(end_hour) + (1 if int(end_minute) > 0 else 0)
        latest_hour = max(latest_hour, rounded)
    return latest_hour - cfg.day_start_hour


def base_height(hours: int, config: Optional[LayoutConfig] = None) -> float:
    """Pixels per hour."""
    cfg = config if config is not None else DEFAULT_LAYOUT
    return cfg.pixel_budget / hours


def session_position(
    session: Session, base_height: float, config: Optional[LayoutConfig] = None
) -> SessionPosition:
    cfg = config if config is not None else DEFAULT_LAYOUT
    start = time_to_hours(session.start_time)
    end = time_to_hours(session.end_time)
    return SessionPosition(
        position=base_height * (start - cfg.day_start_hour) + cfg.session_offset,
        height=base_height * (end - start),
    )


def hour_markers(hours: int, base_height: float, config: Optional[LayoutConfig] = None) -> List[MarkerData]:
    """
    One gridline per full hour, 8:00 through 8:00 + hours (inclusive).
    """
    cfg = config if config is not None else DEFAULT_LAYOUT
    markers: List[MarkerData] = []
    for hour in range(cfg.day_start_hour, cfg.day_start_hour + hours + 1):
        position = base_height * (hour - cfg.day_start_hour) + cfg.marker_offset
        markers.append(MarkerData(text=hour_label(hour), position=position))
    return markers


def session_text_height(base_height: float) -> SessionTextHeight:
    """
    Line heights for the room, name and time labels of a session box.

    They scale with one hour's height, capped so long days do not blow up the text.
    """
    min_height = base_height * 5 / 6 - 16
    return SessionTextHeight(
        room_height=min(min_height * 0.32, 20),
        name_height=min(min_height * 0.44, 28),
        time_height=min(min_height * 0.24, 16),
    )


def session_box(session: Session, base_height: float, config: Optional[LayoutConfig] = None) -> SessionBox:
    pos = session_position(session, base_height, config)
    return SessionBox(
        session=session,
        position=pos.position,
        height=pos.height,
        palette=palette_for(session),
        text_heights=session_text_height(base_height),
        room_label=session.room,
        name_label=f"{session.type}: {session.name}",
        time_label=f"{to_12_hour_format(session.start_time)} - {to_12_hour_format(session.end_time)}",
    )


def compute_layout(courses: Iterable[Course], config: Optional[LayoutConfig] = None) -> Layout:
    """
    Lay out a full week from scratch.

    Invalid sessions are dropped before partitioning, so they neither show
    up in a column nor open a weekend column or stretch the day.
    """
    cfg = config if config is not None else DEFAULT_LAYOUT

    renderable = list(valid_sessions(courses))

    hours = _span_of(renderable, cfg)
    height = base_height(hours, cfg)
    columns = partition_sessions(renderable)

    boxes: Dict[str, List[SessionBox]] = {
        day: [session_box(s, height, cfg) for s in sessions] for day, sessions in columns.items()
    }

    return Layout(
        columns=columns,
        day_span_hours=hours,
        base_height=height,
        hour_markers=hour_markers(hours, height, cfg),
        text_heights=session_text_height(height),
        boxes=boxes,
        column_height=cfg.column_height,
    )
