"""
Session validation.

A session is renderable only if:
    day is one of mon..sun
    name and room are non-empty
    start and end parse as 'HH:MM'
    start < end (same day)

Invalid sessions are never an error: they stay in the course data
but are left out of every layout.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from schedulegen.model import DAYS, Course, Session
from schedulegen.timeutil import time_to_minutes

logger = logging.getLogger(__name__)


def is_valid_session(session: Session) -> bool:
    if session.day not in DAYS:
        return False
    if not session.name or not session.room:
        return False
    if not session.start_time or not session.end_time:
        return False
    try:
        start = time_to_minutes(session.start_time)
        end = time_to_minutes(session.end_time)
    except ValueError:
        return False
    return start < end


def valid_sessions(courses: Iterable[Course]) -> Iterator[Session]:
    """
    Yield the renderable sessions of all courses, in course/session order.
    """
    for course in courses:
        for session in course.sessions:
            if is_valid_session(session):
                yield session
            else:
                logger.debug("Skipping invalid session of %r: %r", course.name, session)
