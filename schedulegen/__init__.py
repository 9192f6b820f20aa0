"""
schedulegen: weekly timetable layout, course colours and campus map viewport.

The public entry points are plain functions over Course lists; nothing here
keeps state between calls.
"""

from schedulegen.colors import palette_for
from schedulegen.layout import compute_layout
from schedulegen.term import current_term
from schedulegen.viewport import viewport_for

__all__ = ["compute_layout", "palette_for", "viewport_for", "current_term"]
