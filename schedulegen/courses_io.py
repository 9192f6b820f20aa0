"""
Read-only loading of course input for the CLI.

Expected JSON schema (a list of courses):

    [
      {"id": "...", "name": "cs 240",
       "sessions": [{"day": "mon", "startTime": "09:00", "endTime": "10:20",
                     "room": "dc 1302", "type": "lec"}]}
    ]

Both camelCase ("startTime") and snake_case ("start_time") keys are accepted.
This module is deliberately defensive: a missing or broken file yields an
empty course list instead of crashing the CLI.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional

from schedulegen.model import DAYS, SESSION_TYPES, Course, Session, new_course

logger = logging.getLogger(__name__)


def _safe_str(x: Any) -> str:
    return "" if x is None else str(x)


def _field(data: dict[str, Any], *keys: str) -> str:
    for key in keys:
        if key in data:
            return _safe_str(data[key]).strip()
    return ""


def session_from_dict(data: dict[str, Any], course_name: str) -> Optional[Session]:
    """
    Build a Session, or return None if its day or type is unknown.

    Empty times/room are kept: such sessions are filtered later as invalid.
    """
    day = _field(data, "day").lower()
    kind = _field(data, "type").lower() or "lec"
    if day not in DAYS:
        logger.warning("Dropping session with unknown day %r in %r", day, course_name)
        return None
    if kind not in SESSION_TYPES:
        logger.warning("Dropping session with unknown type %r in %r", kind, course_name)
        return None
    return Session(
        day=day,
        start_time=_field(data, "startTime", "start_time"),
        end_time=_field(data, "endTime", "end_time"),
        room=_field(data, "room").lower(),
        type=kind,
        name=course_name,
    )


def course_from_dict(data: dict[str, Any]) -> Course:
    """
    Build a Course; every session takes the course's (lowercased) name.
    """
    name = _field(data, "name").lower()
    cid = _field(data, "id")
    course = new_course(name, course_id=cid or None)

    raw_sessions = data.get("sessions", [])
    sessions: List[Session] = []
    if isinstance(raw_sessions, list):
        for raw in raw_sessions:
            if not isinstance(raw, dict):
                continue
            session = session_from_dict(raw, name)
            if session is not None:
                sessions.append(session)
    return replace(course, sessions=sessions)


def load_courses(path: str | Path) -> List[Course]:
    """
    Load courses from a JSON file.

    Returns an empty list if the file does not exist or is invalid.
    """
    course_path = Path(path)
    if not course_path.exists():
        logger.warning("Course file not found: %s", course_path)
        return []

    try:
        data = json.loads(course_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", course_path, exc)
        return []

    if not isinstance(data, list):
        return []
    return [course_from_dict(c) for c in data if isinstance(c, dict)]
