"""
Unit tests for weekday partitioning.

Weekend rule:
- no sat and no sun sessions -> both keys dropped
- no sat sessions            -> sat dropped, sun kept
- sat sessions               -> both kept
"""

import unittest

from schedulegen.days import partition_sessions
from tests.helpers import make_session


class TestPartition(unittest.TestCase):
    def test_weekdays_only(self) -> None:
        cols = partition_sessions([make_session(day="tue")])
        self.assertEqual(list(cols), ["mon", "tue", "wed", "thu", "fri"])
        self.assertEqual(len(cols["tue"]), 1)

    def test_empty_input_gives_five_empty_days(self) -> None:
        cols = partition_sessions([])
        self.assertEqual(list(cols), ["mon", "tue", "wed", "thu", "fri"])
        self.assertTrue(all(not v for v in cols.values()))

    def test_sunday_only_drops_saturday(self) -> None:
        cols = partition_sessions([make_session(day="sun")])
        self.assertNotIn("sat", cols)
        self.assertIn("sun", cols)

    def test_saturday_keeps_both(self) -> None:
        cols = partition_sessions([make_session(day="sat")])
        self.assertIn("sat", cols)
        self.assertIn("sun", cols)
        self.assertEqual(cols["sun"], [])

    def test_input_order_preserved(self) -> None:
        a = make_session(start="11:00", end="12:00")
        b = make_session(start="09:00", end="10:00")
        cols = partition_sessions([a, b])
        self.assertEqual(cols["mon"], [a, b])

    def test_unknown_day_ignored(self) -> None:
        cols = partition_sessions([make_session(day="funday")])
        self.assertTrue(all(not v for v in cols.values()))


if __name__ == "__main__":
    unittest.main()
