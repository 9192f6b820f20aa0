"""
Static campus building registry and room -> building resolution.

Coordinates are percentages of the reference campus map (top, left in 0-100).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from schedulegen.model import BuildingMarker, Course


BUILDINGS: Mapping[str, BuildingMarker] = MappingProxyType({
    "AL": BuildingMarker(code="AL", color="#CC3333", top=67, left=66),
    "B1": BuildingMarker(code="B1", color="#CC7A33", top=47, left=57),
    "B2": BuildingMarker(code="B2", color="#CCC033", top=46, left=51),
    "BMH": BuildingMarker(code="BMH", color="#91CC33", top=13, left=40),
    "C2": BuildingMarker(code="C2", color="#4BCC33", top=33, left=57),
    "CGR": BuildingMarker(code="CGR", color="#33CC62", top=95, left=42),
    "CPH": BuildingMarker(code="CPH", color="#33CCA9", top=45, left=86),
    "DC": BuildingMarker(code="DC", color="#33A9CC", top=26, left=64),
    "DWE": BuildingMarker(code="DWE", color="#3362CC", top=54, left=84),
    "E2": BuildingMarker(code="E2", color="#4B33CC", top=45, left=78),
    "E3": BuildingMarker(code="E3", color="#9133CC", top=37, left=74),
    "E5": BuildingMarker(code="E5", color="#CC33C0", top=23, left=80),
    "E6": BuildingMarker(code="E6", color="#CC337A", top=22, left=91),
    "E7": BuildingMarker(code="E7", color="#DB7070", top=21, left=84),
    "ECH": BuildingMarker(code="ECH", color="#DBA270", top=14, left=92),
    "EIT": BuildingMarker(code="EIT", color="#DBD370", top=38, left=64),
    "ESC": BuildingMarker(code="ESC", color="#B2DB70", top=40, left=59),
    "EV1": BuildingMarker(code="EV1", color="#81DB70", top=73, left=61),
    "EV2": BuildingMarker(code="EV2", color="#70DB91", top=78, left=55),
    "EV3": BuildingMarker(code="EV3", color="#70DBC3", top=74, left=54),
    "EXP": BuildingMarker(code="EXP", color="#70C3DB", top=16, left=31),
    "HH": BuildingMarker(code="HH", color="#7091DB", top=79, left=69),
    "LHI": BuildingMarker(code="LHI", color="#8170DB", top=20, left=33),
    "LIB": BuildingMarker(code="LIB", color="#B270DB", top=58, left=63),
    "M3": BuildingMarker(code="M3", color="#DB70D3", top=20, left=48),
    "MC": BuildingMarker(code="MC", color="#DB70A2", top=32, left=50),
    "ML": BuildingMarker(code="ML", color="#EBADAD", top=66, left=58),
    "NH": BuildingMarker(code="NH", color="#EBCAAD", top=59, left=53),
    "PAC": BuildingMarker(code="PAC", color="#EBE6AD", top=30, left=32),
    "PAS": BuildingMarker(code="PAS", color="#D3EBAD", top=86, left=62),
    "PHY": BuildingMarker(code="PHY", color="#B7EBAD", top=45, left=68),
    "QNC": BuildingMarker(code="QNC", color="#ADEBC0", top=42, left=48),
    "RCH": BuildingMarker(code="RCH", color="#ADEBDC", top=52, left=74),
    "REN": BuildingMarker(code="REN", color="#ADDCEB", top=65, left=22),
    "SCH": BuildingMarker(code="SCH", color="#ADC0EB", top=64, left=78),
    "SLC": BuildingMarker(code="SLC", color="#B7ADEB", top=37, left=39),
    "STC": BuildingMarker(code="STC", color="#D3ADEB", top=48, left=54),
    "STJ": BuildingMarker(code="STJ", color="#EBADE6", top=61, left=34),
    "UTD": BuildingMarker(code="UTD", color="#EBADCA", top=80, left=31),
})


def building_code(room: str) -> str:
    """
    First whitespace-delimited token of a room, uppercased ('dc 1302' -> 'DC').
    """
    parts = room.split()
    return parts[0].upper() if parts else ""


def lookup_building(room: str) -> Optional[BuildingMarker]:
    return BUILDINGS.get(building_code(room))


def resolve_markers(courses: Iterable[Course]) -> List[BuildingMarker]:
    """
    Collect the known buildings used by any session.

    Order is first occurrence across courses/sessions; each building appears once.
    Rooms that do not start with a known code are ignored.
    """
    seen: set[str] = set()
    markers: List[BuildingMarker] = []
    for course in courses:
        for session in course.sessions:
            marker = lookup_building(session.room)
            if marker is None or marker.code in seen:
                continue
            seen.add(marker.code)
            markers.append(marker)
    return markers
