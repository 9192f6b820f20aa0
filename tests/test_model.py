"""
Unit tests for the course editing helpers.

Every helper returns a new Course; the original is left untouched.
"""

import unittest

from schedulegen.model import add_session, new_course, remove_session, rename_course, update_session
from schedulegen.validate import is_valid_session
from tests.helpers import make_course, make_session


class TestCourseEditing(unittest.TestCase):
    def test_new_course_ids_are_unique(self) -> None:
        a = new_course()
        b = new_course()
        self.assertNotEqual(a.id, b.id)
        self.assertEqual(a.sessions, [])
        self.assertEqual(new_course("X", course_id="fixed").id, "fixed")

    def test_rename_cascades_lowercased_name(self) -> None:
        course = make_course("cs 240", make_session(), make_session(day="wed"))
        renamed = rename_course(course, "CS 241")
        self.assertEqual(renamed.name, "cs 241")
        self.assertEqual([s.name for s in renamed.sessions], ["cs 241", "cs 241"])
        # original untouched
        self.assertEqual(course.name, "cs 240")
        self.assertEqual(course.sessions[0].name, "cs 240")

    def test_add_session_is_blank_and_invalid(self) -> None:
        course = add_session(make_course("cs 240"))
        self.assertEqual(len(course.sessions), 1)
        blank = course.sessions[0]
        self.assertEqual((blank.day, blank.type, blank.name), ("mon", "lec", "cs 240"))
        self.assertFalse(is_valid_session(blank))

    def test_update_session_lowercases(self) -> None:
        course = make_course("cs 240", make_session(room="dc 1302"))
        updated = update_session(course, 0, "room", "MC 4020")
        self.assertEqual(updated.sessions[0].room, "mc 4020")
        self.assertEqual(course.sessions[0].room, "dc 1302")

    def test_update_unknown_field_raises(self) -> None:
        with self.assertRaises(ValueError):
            update_session(make_course("cs 240", make_session()), 0, "colour", "red")

    def test_remove_session(self) -> None:
        a = make_session(day="mon")
        b = make_session(day="tue")
        course = remove_session(make_course("cs 240", a, b), 0)
        self.assertEqual(course.sessions, [b])


if __name__ == "__main__":
    unittest.main()
