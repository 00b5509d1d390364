import pytest
from loguru import logger

from optional_records.models.course import Course
from optional_records.models.student import Student


@pytest.fixture
def students():
    return [Student("Alice", 20), Student("Bob", 21), Student("Charlie", 22)]


@pytest.fixture
def courses():
    return [Course("Core Java"), Course("Python Basics")]


@pytest.fixture
def log_messages():
    """Collects loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pins the settings the demos read, regardless of the environment or .env."""
    from optional_records.config.settings import settings

    monkeypatch.setattr(settings, "default_query", "Suresh")
    monkeypatch.setattr(settings, "age_threshold", 20)
    monkeypatch.setattr(settings, "placeholder_grade", 85.5)
    monkeypatch.setattr(settings, "default_average", 0.0)
