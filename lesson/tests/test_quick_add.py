import unittest
from lesson.logic.quick_add.batch_builder import QuickAddValidationError, build_subjects


class TestQuickAdd(unittest.TestCase):

    def test_shared_assignment(self):
        subjects = build_subjects(["Mathematics", "Science"], {"monday", "wednesday"}, "09:00")
        self.assertEqual([s.name for s in subjects], ["Mathematics", "Science"])
        for s in subjects:
            self.assertEqual(s.times["monday"], "09:00")
            self.assertEqual(s.times["wednesday"], "09:00")
            self.assertEqual(s.times["tuesday"], "")
            self.assertEqual(s.times["thursday"], "")
            self.assertEqual(s.times["friday"], "")
            self.assertEqual(s.days_per_week, 2)
            self.assertEqual(s.selected_days, ["monday", "wednesday"])
        self.assertNotEqual(subjects[0].id, subjects[1].id)

    def test_custom_range(self):
        subject = build_subjects(["Health"], ["friday"], {"start": "13:00", "end": "13:30"})[0]
        self.assertEqual(subject.start_time, "13:00")
        self.assertEqual(subject.end_time, "13:30")
        tuple_subject = build_subjects(["Health"], ["friday"], ("9:05", "9:50"))[0]
        self.assertEqual(tuple_subject.times["friday"], "09:05")
        self.assertEqual(tuple_subject.end_time, "09:50")

    def test_names_trimmed_and_deduplicated(self):
        subjects = build_subjects([" Art ", "Art", "", "Music"], ["monday"], "10:00")
        self.assertEqual([s.name for s in subjects], ["Art", "Music"])

    def test_missing_days_and_subjects_reported_separately(self):
        with self.assertRaises(QuickAddValidationError) as ctx:
            build_subjects([], [], "09:00")
        self.assertIn("days", ctx.exception.errors)
        self.assertIn("subjects", ctx.exception.errors)
        self.assertGreaterEqual(len(ctx.exception.errors), 2)

    def test_all_errors_collected(self):
        with self.assertRaises(QuickAddValidationError) as ctx:
            build_subjects([], [], None)
        self.assertEqual(set(ctx.exception.errors), {"time", "days", "subjects"})

    def test_custom_end_not_after_start(self):
        with self.assertRaises(QuickAddValidationError) as ctx:
            build_subjects(["Art"], ["monday"], {"start": "10:00", "end": "10:00"})
        self.assertEqual(set(ctx.exception.errors), {"endTime"})

    def test_unknown_day(self):
        with self.assertRaises(QuickAddValidationError) as ctx:
            build_subjects(["Art"], ["sunday"], "10:00")
        self.assertIn("days", ctx.exception.errors)


if __name__ == '__main__':
    unittest.main()
