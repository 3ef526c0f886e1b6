"""Shared test fixtures for FocusFlow tests.

This module provides common fixtures used across all test modules:
- A controllable clock for day-rollover tests
- Fake text/image generators (no network)
- Fresh ledger, store, and AppState per test

Usage:
    def test_something(app_state, clock):
        clock.advance(days=1)
        ...
"""

import copy
from datetime import date, timedelta

import pytest

from focusflow.ai.image_generator import GeneratedImage, ImageGenerator
from focusflow.ai.text_generator import TextGenerator
from focusflow.config import DEFAULT_CONFIG
from focusflow.errors import UpstreamUnavailable
from focusflow.progress.ledger import Ledger
from focusflow.state import AppState
from focusflow.tasks.store import TaskStore


# ─────────────────────────────────────────────────────────────────────────────
# Fakes
# ─────────────────────────────────────────────────────────────────────────────


class FakeClock:
    """Callable returning a settable 'today'."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1) -> date:
        self.today = self.today + timedelta(days=days)
        return self.today


class FakeTextGenerator(TextGenerator):
    """Returns a canned response, or fails like an unreachable upstream.

    Pass error to raise something other than UpstreamUnavailable.
    """

    name = "fake-text"

    def __init__(self, response: str = "", fail: bool = False, error: Exception | None = None):
        self.response = response
        self.fail = fail
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt, system=None, max_tokens=None):
        self.calls.append({"prompt": prompt, "system": system})
        if self.error is not None:
            raise self.error
        if self.fail:
            raise UpstreamUnavailable("upstream is down")
        return self.response


class FakeImageGenerator(ImageGenerator):
    """Returns fixed PNG bytes, or fails like an unreachable upstream."""

    name = "fake-image"

    def __init__(self, fail: bool = False, error: Exception | None = None):
        self.fail = fail
        self.error = error
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.fail:
            raise UpstreamUnavailable("image service is down")
        return GeneratedImage(data=b"\x89PNG\r\n\x1a\nfake", mime_type="image/png")


# ─────────────────────────────────────────────────────────────────────────────
# Core Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def today() -> date:
    """Fixed 'today' for deterministic tests."""
    return date(2026, 3, 10)


@pytest.fixture
def clock(today: date) -> FakeClock:
    return FakeClock(today)


@pytest.fixture
def ledger(today: date) -> Ledger:
    """Fresh ledger whose last active date is today."""
    return Ledger(last_active_date=today)


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def test_config() -> dict:
    """Default config with no image endpoint."""
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest.fixture
def failing_text_generator() -> FakeTextGenerator:
    return FakeTextGenerator(fail=True)


@pytest.fixture
def failing_image_generator() -> FakeImageGenerator:
    return FakeImageGenerator(fail=True)


@pytest.fixture
def app_state(test_config, clock, failing_text_generator, failing_image_generator) -> AppState:
    """AppState whose upstreams are all down, so every fallback path is used."""
    return AppState.create(
        config=test_config,
        text_generator=failing_text_generator,
        image_generator=failing_image_generator,
        clock=clock,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Task Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def sample_steps() -> list:
    """Three caller-supplied steps."""
    return [
        {"text": "Open the laptop", "mins": 2},
        {"text": "Write the intro", "mins": 10},
        {"text": "Send it", "mins": 1},
    ]
