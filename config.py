import os
from dotenv import load_dotenv

load_dotenv("secrets.env")


def _optional_float(name):
    value = os.environ.get(name)
    return float(value) if value else None


class Config:
    # Secret key for session management
    SECRET_KEY = os.environ.get("SECRET_KEY") or "wellbeing-secret-key-123"

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(__file__))
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL"
    ) or "sqlite:///" + os.path.join(basedir, "wellbeing.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Chat-completion endpoint used to classify check-ins
    CHAT_COMPLETION_URL = os.environ.get("CHAT_COMPLETION_URL")
    CHAT_COMPLETION_API_KEY = os.environ.get("CHAT_COMPLETION_API_KEY")
    # None waits as long as the transport allows
    CHAT_COMPLETION_TIMEOUT = _optional_float("CHAT_COMPLETION_TIMEOUT")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    CHAT_COMPLETION_URL = "https://llm.test/v1/chat"
    CHAT_COMPLETION_API_KEY = "test-key"
    CHAT_COMPLETION_TIMEOUT = None
