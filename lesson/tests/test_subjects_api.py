import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch
from fastapi.testclient import TestClient
from lesson.api.api_run import app
from lesson.api.routes import subjects as subjects_routes

SHEET = "time,monday,tuesday\n8:30 - 8:50 AM,Bible & Pray,Bible & Pray\n9:00 - 9:40 AM,Mathematics,\n"


class TestSubjectsAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        patcher = patch.object(subjects_routes, "SUBJECTS_FILE", Path(self.tmp.name) / "subjects.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.tmp.cleanup)

    def _create(self, **overrides):
        body = {
            "name": "Mathematics",
            "startTime": "09:00",
            "endTime": "09:45",
            "times": {"monday": "09:00", "wednesday": "09:00"},
            "resources": {"bookLink": "https://example.com/math", "googleDocLink": ""},
            "frequency": {"daysPerWeek": 2, "selectedDays": ["monday", "wednesday"]},
        }
        body.update(overrides)
        return self.client.post("/api/subjects", json=body)

    def test_create_and_list(self):
        resp = self._create()
        self.assertEqual(resp.status_code, 201, resp.text)
        created = resp.json()
        self.assertTrue(created["id"])
        self.assertEqual(created["frequency"], {"daysPerWeek": 2, "selectedDays": ["monday", "wednesday"]})
        listed = self.client.get("/api/subjects").json()
        self.assertEqual([s["id"] for s in listed], [created["id"]])

    def test_create_rejects_bad_input(self):
        self.assertEqual(self._create(name="  ").status_code, 422)
        self.assertEqual(self._create(endTime="08:00").status_code, 422)
        bad_days = {"daysPerWeek": 1, "selectedDays": ["sunday"]}
        self.assertEqual(self._create(frequency=bad_days).status_code, 422)

    def test_create_requires_days(self):
        resp = self.client.post("/api/subjects", json={"name": "Art"})
        self.assertEqual(resp.status_code, 422)
        self.assertIn("days", resp.json()["detail"]["errors"])
        self.assertEqual(self.client.get("/api/subjects").json(), [])

    def test_create_requires_time_for_each_selected_day(self):
        resp = self.client.post("/api/subjects", json={
            "name": "Art", "frequency": {"daysPerWeek": 1, "selectedDays": ["monday"]},
        })
        self.assertEqual(resp.status_code, 422)
        self.assertIn("times", resp.json()["detail"]["errors"])

    def test_times_without_frequency_select_their_days(self):
        resp = self.client.post("/api/subjects", json={"name": "Art", "times": {"monday": "09:00"}})
        self.assertEqual(resp.status_code, 201, resp.text)
        created = resp.json()
        self.assertEqual(created["times"]["monday"], "09:00")
        self.assertEqual(created["frequency"], {"daysPerWeek": 1, "selectedDays": ["monday"]})

    def test_resource_links_must_be_http(self):
        for link in ("javascript:alert(1)", "data:text/html,hi", "ftp://example.com/book"):
            with self.subTest(link=link):
                resp = self._create(resources={"bookLink": link, "googleDocLink": ""})
                self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.client.get("/api/subjects").json(), [])
        ok = self._create(resources={"bookLink": " HTTPS://example.com/book ", "googleDocLink": ""})
        self.assertEqual(ok.status_code, 201, ok.text)
        self.assertEqual(ok.json()["resources"]["bookLink"], "HTTPS://example.com/book")

    def test_duplicate_id_is_rejected(self):
        created = self._create().json()
        self.assertEqual(self._create(id=created["id"]).status_code, 400)

    def test_update_and_delete(self):
        created = self._create().json()
        body = dict(created, name="Mental Math")
        resp = self.client.put(f"/api/subjects/{created['id']}", json=body)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["name"], "Mental Math")
        self.assertEqual(self.client.put("/api/subjects/missing", json=dict(body, id="missing")).status_code, 404)

        self.assertEqual(self.client.delete(f"/api/subjects/{created['id']}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/subjects/{created['id']}").status_code, 404)
        self.assertEqual(self.client.get("/api/subjects").json(), [])

    def test_import_preview_then_commit(self):
        preview = self.client.post("/api/subjects/import/preview", json={"csv": SHEET})
        self.assertEqual(preview.status_code, 200, preview.text)
        data = preview.json()
        self.assertEqual(data["count"], 2)
        self.assertEqual(data["warnings"], [])
        # preview stores nothing
        self.assertEqual(self.client.get("/api/subjects").json(), [])

        commit = self.client.post("/api/subjects/import", json={"subjects": data["subjects"]})
        self.assertEqual(commit.status_code, 201, commit.text)
        names = [s["name"] for s in self.client.get("/api/subjects").json()]
        self.assertEqual(names, ["Bible & Pray", "Mathematics"])

    def test_import_preview_structural_failure(self):
        resp = self.client.post("/api/subjects/import/preview", json={"csv": "subject,notes\nx,y"})
        self.assertEqual(resp.status_code, 400)

    def test_quick_add(self):
        resp = self.client.post("/api/subjects/quick-add", json={
            "subjects": ["Health", "Music and Arts"], "days": ["monday", "wednesday"], "time": "13:00",
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()["count"], 2)
        stored = self.client.get("/api/subjects").json()
        self.assertEqual(stored[0]["times"]["wednesday"], "13:00")
        self.assertEqual(stored[0]["times"]["friday"], "")

    def test_quick_add_custom_range(self):
        resp = self.client.post("/api/subjects/quick-add", json={
            "subjects": ["Health"], "days": ["friday"], "time": {"start": "13:00", "end": "13:30"},
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()["subjects"][0]["endTime"], "13:30")

    def test_quick_add_field_errors(self):
        resp = self.client.post("/api/subjects/quick-add", json={"subjects": [], "days": [], "time": ""})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(set(resp.json()["errors"]), {"time", "days", "subjects"})

    def test_quick_add_options(self):
        data = self.client.get("/api/quick-add/options").json()
        self.assertIn("Mathematics", data["subjects"])
        self.assertIn({"value": "13:00", "label": "1:00 PM"}, data["times"])


if __name__ == '__main__':
    unittest.main()
