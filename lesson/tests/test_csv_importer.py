import unittest
from lesson.logic.importing.csv_importer import CsvImportError, import_csv, preview_csv

SHEET = """Time,Monday,Tuesday,Wednesday,Thursday,Friday
8:30 - 8:50 AM,Bible & Pray,Bible & Pray,Bible & Pray,Bible & Pray,Bible & Pray
8:50 - 9:20 AM,Mathematics,English,mathematics,English,Science
1:00 - 1:10 PM,,,,,Music and Arts
,Orphan,,,,
9:20 - 9:25 AM,,,,,
"""


def _structure(subjects):
    out = []
    for s in subjects:
        d = s.to_dict()
        d.pop("id")
        out.append(d)
    return out


class TestCsvImporter(unittest.TestCase):

    def test_rows_merge_by_case_insensitive_name(self):
        subjects = import_csv(SHEET)
        names = [s.name for s in subjects]
        # first-seen order, first spelling kept
        self.assertEqual(names, ["Bible & Pray", "Mathematics", "English", "Science", "Music and Arts"])
        math = subjects[1]
        self.assertEqual(math.selected_days, ["monday", "wednesday"])
        self.assertEqual(math.days_per_week, 2)
        self.assertEqual(math.times["monday"], "08:50")
        self.assertEqual(math.times["tuesday"], "")

    def test_rows_without_time_or_days_are_dropped(self):
        names = {s.name for s in import_csv(SHEET)}
        self.assertNotIn("Orphan", names)

    def test_pm_times_converted(self):
        music = import_csv(SHEET)[-1]
        self.assertEqual(music.times["friday"], "13:00")
        self.assertEqual(music.selected_days, ["friday"])

    def test_headers_mapped_by_name_not_position(self):
        text = "friday, TIME ,monday,duration\nArt,1:00 - 1:30,Art,30\n"
        subjects = import_csv(text)
        self.assertEqual(len(subjects), 1)
        self.assertEqual(subjects[0].selected_days, ["monday", "friday"])
        self.assertEqual(subjects[0].times["monday"], "1:00")

    def test_quoted_cells(self):
        text = 'time,monday\n9:00 - 9:30 AM,"Reading, Writing"\n'
        self.assertEqual(import_csv(text)[0].name, "Reading, Writing")

    def test_bad_time_keeps_subject_with_empty_start_and_warns(self):
        preview = preview_csv("time,monday\nafter lunch,Nature Study\n")
        self.assertEqual(len(preview.subjects), 1)
        self.assertEqual(preview.subjects[0].times["monday"], "")
        self.assertEqual(preview.subjects[0].selected_days, ["monday"])
        self.assertEqual(len(preview.warnings), 1)
        self.assertIn("Line 2", preview.warnings[0])

    def test_warning_line_counts_physical_lines(self):
        text = 'time,monday\n9:00 - 9:30 AM,"Reading\nand Writing"\nafter lunch,Art\n'
        preview = preview_csv(text)
        self.assertEqual(preview.subjects[0].name, "Reading\nand Writing")
        self.assertEqual(preview.warnings, ["Line 4: could not parse time 'after lunch'"])

    def test_warning_line_counts_leading_blank_lines(self):
        preview = preview_csv("\ntime,monday\nsoon,Art\n")
        self.assertIn("Line 3", preview.warnings[0])

    def test_independent_passes_are_structurally_equal(self):
        first = import_csv(SHEET)
        second = import_csv(SHEET)
        self.assertEqual(_structure(first), _structure(second))
        self.assertNotEqual([s.id for s in first], [s.id for s in second])

    def test_structural_failures(self):
        for text in ("", "   \n  ", "name,monday\nArt,Art\n", "time,notes\n9:00 - 9:10,x\n"):
            with self.subTest(text=text):
                with self.assertRaises(CsvImportError):
                    import_csv(text)

    def test_header_only_gives_empty_preview(self):
        self.assertEqual(import_csv("time,monday,tuesday"), [])


if __name__ == '__main__':
    unittest.main()
