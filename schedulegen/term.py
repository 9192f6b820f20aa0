"""
Academic term lookup.

The term is picked from the calendar month alone:
    Mar-Jun -> spring
    Jul-Oct -> fall
    otherwise winter
"""

from __future__ import annotations

from datetime import date
from typing import Optional


def current_term(today: Optional[date] = None) -> str:
    d = today if today is not None else date.today()
    if 3 <= d.month <= 6:
        return "spring"
    if 7 <= d.month <= 10:
        return "fall"
    return "winter"


def default_title(today: Optional[date] = None) -> str:
    """
    Placeholder schedule title, e.g. 'fall 2026'.
    """
    d = today if today is not None else date.today()
    return f"{current_term(d)} {d.year}"


def term_map_image(term: str) -> str:
    """
    File name of the reference campus map drawn for a term.
    """
    return f"{term}_map.png"
