import os
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Path setup before any project imports to satisfy E402
ROOT = os.path.dirname(__file__)
PARENT = os.path.abspath(os.path.join(ROOT, ".."))
if PARENT not in sys.path:  # pragma: no cover - environment dependent
    sys.path.insert(0, PARENT)

# Credentials from the developer's shell must never reach the tests
_CLEAN_OVERRIDES = {
    "TESTING": True,
    "SECRET_KEY": "test",
    "openai_api_key": None,
    "exercise_api_key": None,
    "nutrition_api_key": None,
    "recipe_api_key": None,
    "rate_limit_backend": "memory",
}


@pytest.fixture
def make_app(tmp_path):
    from nutrifit.app_factory import create_app

    def _make(**overrides):
        cfg = dict(_CLEAN_OVERRIDES)
        cfg["database_url"] = f"sqlite:///{tmp_path / 'cards.db'}"
        cfg.update(overrides)
        return create_app(cfg)

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


def _completion(content):
    # Shape of an OpenAI chat completion as far as the assistant reads it
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def make_completion():
    return _completion


@pytest.fixture
def fake_openai():
    client = MagicMock()
    client.chat.completions.create.return_value = _completion("Berry says hi")
    return client


@pytest.fixture
def use_assistant(app):
    """Swap the app's assistant for one wrapping the given client handle."""
    from nutrifit.assistant import EXTENSION_KEY, Assistant

    def _use(client_state):
        assistant = Assistant(client_state)
        app.extensions[EXTENSION_KEY] = assistant
        return assistant

    return _use
