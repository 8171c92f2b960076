"""
Shared fixtures: a small dictionary, engines pinned to a known target,
and a Flask test client.
"""

import pytest

from hardwordle import create_app
from hardwordle.config import TestingConfig
from hardwordle.services.game_service import GameOrchestrator
from hardwordle.services.word_store import WordStore

TEST_WORDS = [
    "crane", "apple", "speed", "erase", "geese", "abbey",
    "house", "mouse", "pilot", "trace", "eerie", "llama",
]


@pytest.fixture
def word_store():
    return WordStore(TEST_WORDS)


@pytest.fixture
def pin_target(monkeypatch):
    """Make every get_random_word() on a store return the given word."""
    def _pin(store, target):
        monkeypatch.setattr(store, "get_random_word", lambda length=None: target)
        return store
    return _pin


@pytest.fixture
def orchestrator(word_store, pin_target):
    pin_target(word_store, "crane")
    return GameOrchestrator(word_store)


@pytest.fixture
def app(word_store, pin_target):
    pin_target(word_store, "crane")
    return create_app(TestingConfig, word_store=word_store)


@pytest.fixture
def client(app):
    return app.test_client()
