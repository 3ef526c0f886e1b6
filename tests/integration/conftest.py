"""
Integration test fixtures for FocusFlow.

Provides a FastAPI TestClient over an isolated AppState whose clock and
upstream generators are controlled by the test.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from focusflow.api.main import create_app
from focusflow.state import AppState
from tests.conftest import FakeImageGenerator, FakeTextGenerator


@pytest.fixture
def test_client(app_state):
    """Client for an app whose upstreams are all down."""
    with TestClient(create_app(state=app_state)) as client:
        yield client


@pytest.fixture
def working_generators():
    return FakeTextGenerator(), FakeImageGenerator()


@pytest.fixture
def ai_client(test_config, clock, working_generators):
    """Client for an app whose upstreams answer; tests set the text response."""
    text_generator, image_generator = working_generators
    state = AppState.create(
        config=test_config,
        text_generator=text_generator,
        image_generator=image_generator,
        clock=clock,
    )
    with TestClient(create_app(state=state)) as client:
        yield client


@pytest.fixture
def crashing_client(test_config, clock):
    """Client for an app whose upstreams raise unexpected errors."""
    state = AppState.create(
        config=test_config,
        text_generator=FakeTextGenerator(error=RuntimeError("boom")),
        image_generator=FakeImageGenerator(error=httpx.InvalidURL("bad endpoint")),
        clock=clock,
    )
    with TestClient(create_app(state=state)) as client:
        yield client
