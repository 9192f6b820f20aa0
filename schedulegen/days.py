"""
Group sessions into weekday columns.

Weekend columns depend only on the data:
- no Saturday and no Sunday sessions -> five-day week
- Sunday sessions only               -> Saturday column dropped
- any Saturday session               -> full seven-day week
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from schedulegen.model import DAYS, Session

logger = logging.getLogger(__name__)


def partition_sessions(sessions: Iterable[Session]) -> Dict[str, List[Session]]:
    """
    Bucket sessions by day (mon..sun order), keeping input order inside each day.
    """
    columns: Dict[str, List[Session]] = {day: [] for day in DAYS}

    for session in sessions:
        bucket = columns.get(session.day)
        if bucket is None:
            logger.debug("Ignoring session with unknown day %r", session.day)
            continue
        bucket.append(session)

    if not columns["sat"] and not columns["sun"]:
        del columns["sat"]
        del columns["sun"]
    elif not columns["sat"]:
        del columns["sat"]

    return columns
