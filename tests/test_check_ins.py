"""Tests for the check-in create and list endpoints."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from models.check_in import CheckIn


# ─────────────────────────────────────────────────────────────────
# POST /api/check-ins
# ─────────────────────────────────────────────────────────────────


class TestCreateCheckIn:
    def test_creates_record_with_server_fields(self, client, valid_check_in):
        response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 201
        body = response.get_json()
        assert isinstance(body["id"], int)
        assert body["created_at"]
        for key, value in valid_check_in.items():
            assert body[key] == value

    def test_created_at_is_marked_utc(self, client, valid_check_in):
        body = client.post("/api/check-ins", json=valid_check_in).get_json()

        assert body["created_at"].endswith("Z")

    def test_optional_fields_default_to_null(self, client):
        response = client.post("/api/check-ins", json={
            "mood": "happy",
            "stress_level": 2,
            "sleep_quality": "excellent",
            "focus_level": "high",
        })

        assert response.status_code == 201
        body = response.get_json()
        assert body["journal_text"] is None
        assert body["analysis_state"] is None
        assert body["analysis_confidence"] is None

    def test_empty_journal_and_explicit_nulls_stored_as_null(self, client):
        response = client.post("/api/check-ins", json={
            "mood": "sad",
            "stress_level": 6,
            "sleep_quality": "poor",
            "focus_level": "low",
            "journal_text": "",
            "analysis_state": None,
            "analysis_confidence": None,
        })

        assert response.status_code == 201
        body = response.get_json()
        assert body["journal_text"] is None
        assert body["analysis_state"] is None

    def test_zero_confidence_is_kept(self, client, valid_check_in):
        valid_check_in["analysis_confidence"] = 0
        response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 201
        assert response.get_json()["analysis_confidence"] == 0

    @pytest.mark.parametrize("missing", ["mood", "stress_level", "sleep_quality", "focus_level"])
    def test_missing_required_field_is_rejected(self, client, db, valid_check_in, missing):
        valid_check_in.pop(missing)
        response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 400
        body = response.get_json()
        assert body["error"]
        assert missing in body["fields"]
        assert db.session.query(CheckIn).count() == 0

    @pytest.mark.parametrize("stress_level", [0, -3, 11, 100])
    def test_out_of_range_stress_is_rejected(self, client, db, valid_check_in, stress_level):
        valid_check_in["stress_level"] = stress_level
        response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 400
        assert response.get_json()["error"] == "Stress level must be between 1 and 10"
        assert db.session.query(CheckIn).count() == 0

    @pytest.mark.parametrize("stress_level", [1, 10])
    def test_stress_bounds_are_inclusive(self, client, valid_check_in, stress_level):
        valid_check_in["stress_level"] = stress_level
        response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 201
        assert response.get_json()["stress_level"] == stress_level

    @pytest.mark.parametrize("stress_level", [4.5, True, "high", [4]])
    def test_non_integer_stress_is_rejected(self, client, valid_check_in, stress_level):
        valid_check_in["stress_level"] = stress_level
        response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 400

    @pytest.mark.parametrize("field,value", [
        ("mood", "ecstatic"),
        ("sleep_quality", "ok"),
        ("focus_level", "extreme"),
        ("analysis_state", "Panic"),
        ("analysis_confidence", 101),
        ("journal_text", 42),
        ("journal_text", ["dear diary"]),
        ("mood", ["happy"]),
        ("mood", ["happy", "sad"]),
        ("sleep_quality", ["good"]),
        ("focus_level", ["high"]),
        ("analysis_state", ["Normal"]),
        ("mood", {"value": "happy"}),
    ])
    def test_values_outside_vocabulary_are_rejected(self, client, valid_check_in, field, value):
        valid_check_in[field] = value
        response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 400
        assert field in response.get_json()["fields"]

    def test_non_object_body_is_rejected(self, client):
        response = client.post("/api/check-ins", json=["mood", "happy"])

        assert response.status_code == 400
        assert response.get_json()["error"] == "Request body must be a JSON object"

    def test_storage_error_is_reported_generically(self, client, db, valid_check_in):
        error = OperationalError("INSERT", {}, Exception("disk I/O error"))
        with patch.object(db.session, "commit", side_effect=error):
            response = client.post("/api/check-ins", json=valid_check_in)

        assert response.status_code == 500
        assert response.get_json() == {"error": "Failed to save check-in"}


# ─────────────────────────────────────────────────────────────────
# GET /api/check-ins
# ─────────────────────────────────────────────────────────────────


class TestListCheckIns:
    def test_empty_history(self, client):
        response = client.get("/api/check-ins")

        assert response.status_code == 200
        assert response.get_json() == []

    def test_newest_first(self, client, make_check_in):
        make_check_in(days=1, mood="sad")
        make_check_in(days=3, mood="joyful")
        make_check_in(days=2, mood="content")

        body = client.get("/api/check-ins").get_json()

        assert [c["mood"] for c in body] == ["joyful", "content", "sad"]
        timestamps = [c["created_at"] for c in body]
        assert timestamps == sorted(timestamps, reverse=True)
        assert len(set(timestamps)) == len(timestamps)

    def test_same_timestamp_ordered_by_id(self, client, make_check_in):
        first = make_check_in(days=0)
        second = make_check_in(days=0)

        body = client.get("/api/check-ins").get_json()

        assert [c["id"] for c in body] == [second.id, first.id]

    def test_created_at_is_iso_utc(self, client, make_check_in):
        make_check_in(days=0)

        body = client.get("/api/check-ins").get_json()

        assert body[0]["created_at"] == "2026-03-01T09:00:00Z"

    def test_round_trip_preserves_submitted_fields(self, client, valid_check_in):
        created = client.post("/api/check-ins", json=valid_check_in).get_json()

        listed = client.get("/api/check-ins").get_json()

        assert listed == [created]
        for key, value in valid_check_in.items():
            assert listed[0][key] == value

    def test_storage_error_is_reported_generically(self, client):
        error = OperationalError("SELECT", {}, Exception("database is locked"))
        with patch.object(CheckIn, "newest_first", side_effect=error):
            response = client.get("/api/check-ins")

        assert response.status_code == 500
        assert response.get_json() == {"error": "Failed to fetch check-ins"}
