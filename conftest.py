"""Pytest configuration — project root importable, plus a Flask app fixture."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from thaidoc import create_app  # noqa: E402


@pytest.fixture()
def app():
    app = create_app({"TESTING": True, "THAIDOC_LOG_LEVEL": "DEBUG", "THAIDOC_BAHT_CACHE_SIZE": 32})
    with app.app_context():
        yield app
