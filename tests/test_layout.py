"""
Unit tests for the vertical timetable layout.

The day runs from 8:00 to max(17:00, latest end rounded up);
the pixel budget (1056px) is shared evenly by those hours.
"""

import unittest

from schedulegen.config import LayoutConfig
from schedulegen.layout import (
    base_height,
    compute_layout,
    day_span_hours,
    hour_markers,
    session_position,
    session_text_height,
)
from tests.helpers import make_course, make_session


class TestDaySpan(unittest.TestCase):
    def test_minimum_span_without_sessions(self) -> None:
        self.assertEqual(day_span_hours([]), 9)

    def test_late_session_rounds_up(self) -> None:
        course = make_course("cs 240", make_session(start="17:00", end="18:15"))
        self.assertEqual(day_span_hours([course]), 11)

    def test_on_the_hour_end_not_rounded(self) -> None:
        course = make_course("cs 240", make_session(start="17:00", end="19:00"))
        self.assertEqual(day_span_hours([course]), 11)

    def test_early_sessions_keep_minimum(self) -> None:
        course = make_course("cs 240", make_session(start="09:00", end="10:20"))
        self.assertEqual(day_span_hours([course]), 9)

    def test_invalid_session_does_not_stretch_day(self) -> None:
        course = make_course("cs 240", make_session(start="20:00", end="21:30", room=""))
        self.assertEqual(day_span_hours([course]), 9)

    def test_unknown_day_does_not_stretch_day(self) -> None:
        course = make_course("cs 240", make_session(day="funday", start="20:00", end="21:30"))
        self.assertEqual(day_span_hours([course]), 9)


class TestPositions(unittest.TestCase):
    def test_base_height(self) -> None:
        self.assertAlmostEqual(base_height(9), 1056 / 9)
        self.assertAlmostEqual(base_height(11), 96)

    def test_session_position(self) -> None:
        pos = session_position(make_session(start="09:30", end="11:00"), 100)
        self.assertAlmostEqual(pos.position, 100 * 1.5 + 64)
        self.assertAlmostEqual(pos.height, 150)

    def test_custom_config_offsets(self) -> None:
        cfg = LayoutConfig(session_offset=0, day_start_hour=9)
        pos = session_position(make_session(start="09:00", end="10:00"), 50, cfg)
        self.assertAlmostEqual(pos.position, 0)
        self.assertAlmostEqual(pos.height, 50)

    def test_hour_markers(self) -> None:
        markers = hour_markers(9, 100)
        self.assertEqual(len(markers), 10)
        self.assertEqual(markers[0].text, "8a")
        self.assertAlmostEqual(markers[0].position, 112)
        self.assertEqual(markers[4].text, "12p")
        self.assertAlmostEqual(markers[4].position, 512)
        self.assertEqual(markers[-1].text, "5p")
        self.assertAlmostEqual(markers[-1].position, 1012)


class TestTextHeights(unittest.TestCase):
    def test_capped_on_tall_hours(self) -> None:
        th = session_text_height(120)
        self.assertAlmostEqual(th.room_height, 20)
        self.assertAlmostEqual(th.name_height, 28)
        self.assertAlmostEqual(th.time_height, 16)

    def test_proportional_on_short_hours(self) -> None:
        # min height = 60 * 5/6 - 16 = 34
        th = session_text_height(60)
        self.assertAlmostEqual(th.room_height, 34 * 0.32)
        self.assertAlmostEqual(th.name_height, 34 * 0.44)
        self.assertAlmostEqual(th.time_height, 34 * 0.24)


class TestComputeLayout(unittest.TestCase):
    def test_two_sessions_same_course(self) -> None:
        first = make_session(start="09:00", end="10:20", room="dc 1302")
        second = make_session(start="10:30", end="11:50", room="mc 4020")
        layout = compute_layout([make_course("cs 240", first, second)])

        self.assertEqual(layout.day_span_hours, 9)
        self.assertAlmostEqual(layout.base_height, 1056 / 9)
        self.assertEqual(layout.columns["mon"], [first, second])
        self.assertEqual(len(layout.hour_markers), 10)
        self.assertEqual(layout.column_height, 1184)

        a, b = layout.boxes["mon"]
        self.assertLess(a.position, b.position)
        self.assertLessEqual(a.position + a.height, b.position)
        self.assertEqual(a.name_label, "lec: cs 240")
        self.assertEqual(a.time_label, "9:00 - 10:20")
        self.assertEqual(b.time_label, "10:30 - 11:50")
        self.assertAlmostEqual(a.name_font_size, a.text_heights.name_height / 1.2)

    def test_invalid_sessions_never_laid_out(self) -> None:
        good = make_session()
        backwards = make_session(day="sat", start="12:00", end="11:00")
        no_name = make_session(name="")
        layout = compute_layout([make_course("cs 240", good, backwards, no_name)])

        self.assertNotIn("sat", layout.columns)
        all_sessions = [s for col in layout.columns.values() for s in col]
        self.assertEqual(all_sessions, [good])
        self.assertEqual(sum(len(b) for b in layout.boxes.values()), 1)

    def test_invalid_session_logged_once(self) -> None:
        course = make_course("cs 240", make_session(), make_session(room=""))
        with self.assertLogs("schedulegen.validate", level="DEBUG") as cm:
            compute_layout([course])
        self.assertEqual(len(cm.records), 1)

    def test_lone_surrogate_in_name_does_not_crash(self) -> None:
        layout = compute_layout([make_course("cs \ud800 240", make_session(name="cs \ud800 240"))])
        self.assertEqual(len(layout.boxes["mon"]), 1)


if __name__ == "__main__":
    unittest.main()
