import unittest

from gradepoint.core.errors import InvalidInputError, LayoutError, PeriodNotFoundError
from gradepoint.core.models import LEVELS, SEMESTERS, nested_period_id
from gradepoint.core.roster import add_course, add_semester, build_roster, remove_course


class AddCourseTests(unittest.TestCase):
    def setUp(self):
        self.roster = build_roster("flat")

    def test_add_course_parses_text_credits(self):
        roster = add_course(self.roster, "1", "Mathematics 101", "3", "a")
        course = roster.find_period("1").courses[0]
        self.assertEqual(course.name, "Mathematics 101")
        self.assertEqual(course.credits, 3.0)
        self.assertEqual(course.grade, "A")

    def test_input_roster_untouched(self):
        add_course(self.roster, "1", "Math", 3, "A")
        self.assertEqual(self.roster.find_period("1").courses, ())

    def test_ids_are_unique(self):
        roster = self.roster
        for i in range(5):
            roster = add_course(roster, "1", f"Course {i}", 2, "B")
        ids = [c.id for c in roster.all_courses()]
        self.assertEqual(len(set(ids)), 5)

    def test_ids_not_reused_after_removal(self):
        roster = add_course(self.roster, "1", "Math", 3, "A")
        first_id = roster.all_courses()[0].id
        roster = remove_course(roster, "1", first_id)
        roster = add_course(roster, "1", "Physics", 3, "B")
        self.assertNotEqual(roster.all_courses()[0].id, first_id)

    def test_invalid_fields(self):
        cases = [
            (("", "3", "A"), "name"),
            (("   ", "3", "A"), "name"),
            (("Math", "", "A"), "credits"),
            (("Math", "abc", "A"), "credits"),
            (("Math", "0", "A"), "credits"),
            (("Math", -2, "A"), "credits"),
            (("Math", "inf", "A"), "credits"),
            (("Math", "3", "Z"), "grade"),
            (("Math", "3", None), "grade"),
        ]
        for args, field in cases:
            with self.subTest(args=args):
                with self.assertRaises(InvalidInputError) as ctx:
                    add_course(self.roster, "1", *args)
                self.assertEqual(ctx.exception.field, field)

    def test_first_failing_field_reported(self):
        with self.assertRaises(InvalidInputError) as ctx:
            add_course(self.roster, "1", "", "", "")
        self.assertEqual(ctx.exception.field, "name")

    def test_credits_upper_bound(self):
        roster = add_course(self.roster, "1", "Project", "1000", "A")
        self.assertEqual(roster.all_courses()[0].credits, 1000.0)
        for credits in ("1000.5", "1e308"):
            with self.subTest(credits=credits):
                with self.assertRaises(InvalidInputError) as ctx:
                    add_course(self.roster, "1", "Huge", credits, "A")
                self.assertEqual(ctx.exception.field, "credits")

    def test_boolean_credits_rejected(self):
        for credits in (True, False):
            with self.subTest(credits=credits):
                with self.assertRaises(InvalidInputError) as ctx:
                    add_course(self.roster, "1", "X", credits, "A")
                self.assertEqual(ctx.exception.field, "credits")

    def test_unknown_period(self):
        with self.assertRaises(PeriodNotFoundError):
            add_course(self.roster, "9", "Math", 3, "A")


class RemoveCourseTests(unittest.TestCase):
    def setUp(self):
        self.roster = add_course(build_roster("flat"), "1", "Math", 3, "A")

    def test_remove(self):
        course_id = self.roster.all_courses()[0].id
        roster = remove_course(self.roster, "1", course_id)
        self.assertEqual(roster.all_courses(), [])

    def test_remove_unknown_id_is_noop(self):
        self.assertIs(remove_course(self.roster, "1", 999), self.roster)
        self.assertIs(remove_course(self.roster, "missing", 1), self.roster)


class LayoutTests(unittest.TestCase):
    def test_flat_add_semester(self):
        roster = add_semester(add_semester(build_roster("flat")))
        self.assertEqual([p.name for p in roster], ["Semester 1", "Semester 2", "Semester 3"])
        self.assertEqual([p.id for p in roster], ["1", "2", "3"])

    def test_nested_layout(self):
        roster = build_roster("nested")
        self.assertEqual(len(roster.periods), len(LEVELS) * len(SEMESTERS))
        self.assertEqual(roster.levels(), list(LEVELS))
        period = roster.find_period(nested_period_id("300 Level", "Second Semester"))
        self.assertEqual(period.name, "300 Level - Second Semester")
        self.assertEqual(period.level, "300 Level")

    def test_nested_rejects_add_semester(self):
        with self.assertRaises(LayoutError):
            add_semester(build_roster("nested"))

    def test_unknown_layout(self):
        with self.assertRaises(LayoutError):
            build_roster("grid")


if __name__ == "__main__":
    unittest.main()
