"""
Deterministic course colours.

The hue comes from a hash of the course name, the lightness from the
session type. No colour table is stored: the same name, type and term
always give the same palette.
"""

from __future__ import annotations

import colorsys
import re
from typing import Dict, Optional

from schedulegen.model import ColorPalette, HSLColor, Session
from schedulegen.term import current_term


TERM_BACKGROUNDS: Dict[str, HSLColor] = {
    "winter": HSLColor(h=200, s=68, l=86),
    "spring": HSLColor(h=124, s=70, l=85),
    "fall": HSLColor(h=27, s=88, l=81),
}

LIGHTNESS_BY_TYPE = {"lec": 80, "lab": 70}
DEFAULT_LIGHTNESS = 90
SATURATION = 70

_HSL_RE = re.compile(r"hsl\(\s*(-?[\d.]+),\s*(-?[\d.]+)%,\s*(-?[\d.]+)%\s*\)")


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def string_hash(text: str) -> int:
    """
    Rolling multiply-by-31 hash over UTF-16 code units.

    Only the shift wraps to 32 bits; the running value is not truncated,
    so long names can leave the int32 range.
    """
    h = 0
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = unit + (_to_int32(_to_int32(h) << 5) - h)
    return h


def hue_distance(hue1: float, hue2: float) -> float:
    """Circular distance between two hues: hue_distance(10, 350) == 20."""
    diff = abs(hue1 - hue2)
    return min(diff, 360 - diff)


def is_too_similar(color1: HSLColor, color2: HSLColor) -> bool:
    return abs(color1.l - color2.l) < 10 and hue_distance(color1.h, color2.h) < 45


def _hsl(h: float, s: float, l: float) -> str:
    return f"hsl({h}, {s}%, {l}%)"


def generate_palette(course_name: str, session_type: str, term: Optional[str] = None) -> ColorPalette:
    """
    Background / primary text / secondary text for one course + session type.

    If the colour is too close to the term background the hue is rotated
    by 90 degrees, once.
    """
    season = term if term is not None else current_term()

    hue = abs(string_hash(course_name)) % 360
    lightness = LIGHTNESS_BY_TYPE.get(session_type, DEFAULT_LIGHTNESS)

    if is_too_similar(TERM_BACKGROUNDS[season], HSLColor(h=hue, s=SATURATION, l=lightness)):
        hue = (hue + 90) % 360

    return ColorPalette(
        background=_hsl(hue, SATURATION, lightness),
        primary_text=_hsl(hue, SATURATION, lightness - 40),
        secondary_text=_hsl(hue, SATURATION, lightness - 24),
    )


def palette_for(session: Session, term: Optional[str] = None) -> ColorPalette:
    return generate_palette(session.name, session.type, term=term)


def hsl_to_hex(color: str) -> str:
    """
    'hsl(0, 100%, 50%)' -> '#ff0000', for consumers without HSL support.

    Saturation and lightness are clamped to 0-100 first.
    """
    match = _HSL_RE.fullmatch(color.strip())
    if not match:
        raise ValueError(f"Invalid HSL color: {color!r}")
    h, s, l = (float(x) for x in match.groups())
    s = min(max(s, 0.0), 100.0)
    l = min(max(l, 0.0), 100.0)
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))
