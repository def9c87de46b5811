"""Test configuration and fixtures."""
import random
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kanaquiz.config import Settings
from kanaquiz.kana import WordGenerator

@pytest.fixture
def rng():
    """Seeded random source so generated words are repeatable."""
    return random.Random(1234)

@pytest.fixture
def generator(rng):
    """Word generator over the default table with a seeded random source."""
    return WordGenerator(rng=rng)

@pytest.fixture
def clean_env(monkeypatch):
    """Remove KANAQUIZ_* variables so settings fall back to defaults."""
    for name in list(os.environ):
        if name.startswith("KANAQUIZ_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch

@pytest.fixture
def app(generator):
    """Flask app wired to the seeded generator."""
    from kanaquiz.server import create_app
    app = create_app(Settings(), generator)
    app.config["TESTING"] = True
    return app

@pytest.fixture
def client(app):
    return app.test_client()
