"""
Central data model definitions used across the project.

This module defines the canonical structure of Course and Session objects so that:
- all modules share the same field names
- the layout, colour and map modules only ever derive new values from them
- course editing never mutates an existing object (every helper returns a copy)
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional


DAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
SESSION_TYPES = ["lec", "tut", "lab"]
TERMS = ["winter", "spring", "fall"]


@dataclass
class Session:
    """
    One scheduled weekly occurrence of a course.

    `name` is a denormalized copy of the owning course's name, so a session
    can be rendered without looking up its course.
    """

    day: str
    start_time: str
    end_time: str
    room: str
    type: str
    name: str


@dataclass
class Course:
    """
    Represents one user-entered course with its weekly sessions.
    """

    id: str
    name: str
    sessions: List[Session] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Derived value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HSLColor:
    h: float
    s: float
    l: float


@dataclass(frozen=True)
class ColorPalette:
    background: str
    primary_text: str
    secondary_text: str


@dataclass(frozen=True)
class BuildingMarker:
    """
    A static point on the reference campus map.

    `top` and `left` are percentages (0-100) of the map image.
    """

    code: str
    color: str
    top: float
    left: float


@dataclass(frozen=True)
class PlacedMarker:
    """A building marker with its pixel position inside a viewport."""

    marker: BuildingMarker
    x: float
    y: float


@dataclass(frozen=True)
class Viewport:
    cropped_top: float
    cropped_left: float
    scale: float
    container_width: float
    container_height: float


@dataclass(frozen=True)
class MarkerData:
    """One hour gridline: label text and its vertical pixel offset."""

    text: str
    position: float


@dataclass(frozen=True)
class SessionPosition:
    position: float
    height: float


@dataclass(frozen=True)
class SessionTextHeight:
    room_height: float
    name_height: float
    time_height: float


@dataclass(frozen=True)
class SessionBox:
    """
    Everything a presentation layer needs to draw one session.
    """

    session: Session
    position: float
    height: float
    palette: ColorPalette
    text_heights: SessionTextHeight
    room_label: str
    name_label: str
    time_label: str

    @property
    def room_font_size(self) -> float:
        return self.text_heights.room_height / 1.2

    @property
    def name_font_size(self) -> float:
        return self.text_heights.name_height / 1.2

    @property
    def time_font_size(self) -> float:
        return self.text_heights.time_height / 1.2


@dataclass(frozen=True)
class Layout:
    """Result of laying out a full week."""

    columns: Dict[str, List[Session]]
    day_span_hours: int
    base_height: float
    hour_markers: List[MarkerData]
    text_heights: SessionTextHeight
    boxes: Dict[str, List[SessionBox]]
    column_height: float


# ---------------------------------------------------------------------------
# Course editing
# ---------------------------------------------------------------------------


def new_course(name: str = "", course_id: Optional[str] = None) -> Course:
    """
    Create an empty course with a fresh opaque id.
    """
    cid = course_id if course_id is not None else uuid.uuid4().hex
    return Course(id=cid, name=name.lower(), sessions=[])


def rename_course(course: Course, name: str) -> Course:
    """
    Return a copy of `course` with the new (lowercased) name.

    The name is cascaded onto every session.
    """
    new_name = name.lower()
    sessions = [replace(s, name=new_name) for s in course.sessions]
    return replace(course, name=new_name, sessions=sessions)


def add_session(course: Course) -> Course:
    """
    Append a blank Monday lecture. It stays invalid until times and room are set.
    """
    blank = Session(day="mon", start_time="", end_time="", room="", type="lec", name=course.name)
    return replace(course, sessions=[*course.sessions, blank])


def update_session(course: Course, index: int, field_name: str, value: str) -> Course:
    """
    Return a copy of `course` with one session field replaced (lowercased).
    """
    if field_name not in Session.__dataclass_fields__:
        raise ValueError(f"Unknown session field: {field_name!r}")
    sessions = list(course.sessions)
    sessions[index] = replace(sessions[index], **{field_name: value.lower()})
    return replace(course, sessions=sessions)


def remove_session(course: Course, index: int) -> Course:
    sessions = [s for i, s in enumerate(course.sessions) if i != index]
    return replace(course, sessions=sessions)
