"""
Tests for the spreadsheet import (service + POST /sync/import).
"""
import pytest

from tracker.core.errors import EmptyImportError, MalformedDateError
from tracker.services.field_resolution import FuzzyFieldResolver
from tracker.services.sync import (
    import_sheet,
    normalize_category,
    read_activity_row,
    read_intern_row,
)

fuzzy = FuzzyFieldResolver()


class TestRowReaders:
    def test_intern_row_with_loose_columns(self):
        fields = read_intern_row({"Student Name": " Ravi ", "Intern ID #": "int-3001"}, fuzzy)
        assert fields == {"intern_id": "INT-3001", "name": "Ravi", "email": None}

    def test_intern_row_without_id_is_none(self):
        assert read_intern_row({"Student Name": "No Id"}, fuzzy) is None

    def test_intern_row_falls_back_to_name_key(self):
        fields = read_intern_row({"name": "Plain", "ID": "x-1"}, fuzzy)
        assert fields["name"] == "Plain"

    def test_empty_student_name_falls_through_to_full_name(self):
        fields = read_intern_row({"Student Name": "", "Full Name": "X", "ID": "x-2"}, fuzzy)
        assert fields["name"] == "X"

    def test_blank_names_fall_through_to_name_key(self):
        fields = read_intern_row(
            {"Student Name": "  ", "Full Name": None, "name": "Plain", "ID": "x-3"}, fuzzy
        )
        assert fields["name"] == "Plain"

    def test_activity_row(self):
        record = read_activity_row({
            "Intern ID": "int-3002",
            "Date": "2026-03-01",
            "Hours Logged": "3.5",
            "Category": "research",
            "Work Description": "lit review",
            "Proof Link": "https://example.com",
        }, fuzzy)
        assert record.subject_id == "INT-3002"
        assert record.hours == 3.5
        assert record.category == "Research"
        assert record.description == "lit review"
        assert record.proof_link == "https://example.com"

    def test_missing_hours_is_zero(self):
        record = read_activity_row({"Intern ID": "A", "Date": "2026-03-01"}, fuzzy)
        assert record.hours == 0.0

    def test_bad_date_raises(self):
        with pytest.raises(MalformedDateError):
            read_activity_row({"Intern ID": "A", "Date": "03/01/2026"}, fuzzy)

    def test_bad_hours_raise(self):
        with pytest.raises(ValueError):
            read_activity_row({"Intern ID": "A", "Date": "2026-03-01", "Hours": "lots"}, fuzzy)

    @pytest.mark.parametrize("hours", ["-5", "30", "24.5", "nan", "inf", -0.5, [4]])
    def test_out_of_range_hours_raise(self, hours):
        with pytest.raises(ValueError):
            read_activity_row({"Intern ID": "A", "Date": "2026-03-01", "Hours": hours}, fuzzy)

    @pytest.mark.parametrize("hours,expected", [("0", 0.0), ("24", 24.0), (7.25, 7.25)])
    def test_hours_bounds_inclusive(self, hours, expected):
        record = read_activity_row({"Intern ID": "A", "Date": "2026-03-01", "Hours": hours}, fuzzy)
        assert record.hours == expected

    def test_unknown_category_becomes_learning(self):
        assert normalize_category("Napping") == "Learning"
        assert normalize_category(None) == "Learning"


class TestImportService:
    def test_empty_payload_raises(self, db):
        with pytest.raises(EmptyImportError):
            import_sheet(db, [], [])


class TestImportEndpoint:
    def test_import_creates_and_skips(self, client):
        payload = {
            "interns": [
                {"Student Name": "Ravi", "Intern ID #": "int-3101"},
                {"Student Name": "No id"},
            ],
            "activities": [
                {"Intern ID": "INT-3101", "Date": "2026-03-01", "Hours": "3", "Category": "practice", "Description": "x"},
                {"Intern ID": "INT-3101", "Date": "not a date", "Hours": 2},
                {"Intern ID": "GHOST-3101", "Date": "2026-03-01", "Hours": 2},
                {"Intern ID": "INT-3101", "Date": "2026-03-01", "Hours": 5},
            ],
        }
        r = client.post("/sync/import", json=payload)
        assert r.status_code == 200
        body = r.json()
        assert body["interns_created"] == 1
        assert body["interns_skipped"] == 1
        assert body["activities_created"] == 1
        assert body["activities_skipped"] == 3
        assert len(body["errors"]) == 2

        intern = client.get("/interns/INT-3101").json()
        assert intern["name"] == "Ravi"
        assert intern["email"] == "int-3101@cial.org"

        activities = client.get("/activities?intern_id=INT-3101").json()
        assert len(activities) == 1
        assert activities[0]["category"] == "Practice"
        assert activities[0]["source"] == "sheet"
        assert activities[0]["hours"] == 3.0

    def test_existing_interns_untouched(self, client):
        client.post("/interns", json={"intern_id": "INT-3102", "name": "Original"})
        r = client.post("/sync/import", json={
            "interns": [{"Full Name": "Renamed", "Intern ID": "INT-3102"}],
        })
        assert r.json()["interns_skipped"] == 1
        assert client.get("/interns/INT-3102").json()["name"] == "Original"

    def test_joining_date_applied_to_new_interns(self, client):
        client.post("/sync/import", json={
            "interns": [{"Full Name": "Late Joiner", "Intern ID": "INT-3103"}],
            "joining_date": "2026-01-15",
        })
        assert client.get("/interns/INT-3103").json()["joining_date"] == "2026-01-15"

    def test_exact_mode_ignores_loose_columns(self, client):
        r = client.post("/sync/import?fuzzy=false", json={
            "interns": [{"Student Name": "Exact", "Intern ID #": "INT-3104"}],
        })
        assert r.json()["interns_created"] == 0
        assert client.get("/interns/INT-3104").status_code == 404

    def test_import_feeds_progress(self, client):
        days = ["2026-03-08", "2026-03-09", "2026-03-10"]
        client.post("/sync/import", json={
            "interns": [{"Student Name": "Synced", "Intern ID": "INT-3105"}],
            "activities": [{"Intern ID": "INT-3105", "Date": d, "Hours": 4} for d in days],
        })
        body = client.get("/progress/INT-3105?today=2026-03-10").json()
        assert body["statistics"]["total_active_days"] == 3
        assert body["statistics"]["current_streak"] == 3

    def test_empty_payload_is_422(self, client):
        r = client.post("/sync/import", json={})
        assert r.status_code == 422
        assert r.json()["code"] == "EMPTY_IMPORT"

    def test_out_of_range_hours_skipped_and_batch_continues(self, client):
        r = client.post("/sync/import", json={
            "interns": [{"Student Name": "Bounds", "Intern ID": "INT-3106"}],
            "activities": [
                {"Intern ID": "INT-3106", "Date": "2026-03-01", "Hours": "-5"},
                {"Intern ID": "INT-3106", "Date": "2026-03-02", "Hours": "30"},
                {"Intern ID": "INT-3106", "Date": "2026-03-03", "Hours": "nan"},
                {"Intern ID": "INT-3106", "Date": "2026-03-04", "Hours": "4"},
            ],
        })
        assert r.status_code == 200
        body = r.json()
        assert body["interns_created"] == 1
        assert body["activities_created"] == 1
        assert body["activities_skipped"] == 3
        assert len(body["errors"]) == 3

        activities = client.get("/activities?intern_id=INT-3106").json()
        assert [a["hours"] for a in activities] == [4.0]
        progress = client.get("/progress/INT-3106?today=2026-03-04").json()
        assert progress["statistics"]["average_hours"] == 4.0
