"""Shared test fixtures for the check-in API tests."""

import json
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from app import create_app
from config import TestingConfig
from extensions import db as _db
from models.check_in import CheckIn


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def valid_check_in():
    return {
        "mood": "content",
        "stress_level": 4,
        "sleep_quality": "good",
        "focus_level": "medium",
        "journal_text": "Midterms went better than expected.",
        "analysis_state": "Mild Stress",
        "analysis_confidence": 78,
    }


@pytest.fixture
def valid_analysis_request():
    return {
        "mood": "anxious",
        "stressLevel": 8,
        "sleepQuality": "poor",
        "focusLevel": "low",
        "journalText": "Three deadlines this week.",
    }


@pytest.fixture
def analysis_payload():
    return {
        "state": "High Stress",
        "confidence": 86,
        "explanation": "Your stress is high and sleep has been rough lately.",
        "recommendations": [
            "Block a 30-minute walk into tomorrow",
            "Try 4-7-8 breathing before bed",
            "Talk to your campus counseling center",
        ],
    }


def _completion_response(content, status_code=200):
    """Fake requests.Response for a chat-completion reply."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = "" if isinstance(content, (dict, list)) else str(content)
    if isinstance(content, dict):
        content = json.dumps(content)
    response.json.return_value = {"choices": [{"message": {"content": content}}]}
    return response


@pytest.fixture
def completion_response():
    return _completion_response


@pytest.fixture
def make_check_in(db):
    """Insert a check-in with an explicit timestamp, bypassing the API."""
    base = datetime(2026, 3, 1, 9, 0, 0)

    def _make(days=0, **overrides):
        fields = {
            "mood": "neutral",
            "stress_level": 5,
            "sleep_quality": "fair",
            "focus_level": "medium",
        }
        fields.update(overrides)
        check_in = CheckIn(**fields)
        check_in.created_at = base + timedelta(days=days)
        db.session.add(check_in)
        db.session.commit()
        return check_in

    return _make
