"""FocusFlow Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - tasks/: Templates, task store, AI breakdown
  - progress/: Ledger day rollover, rewards
  - adhd/: Energy advisor, brief formatter
  - ai/: Text/image generators, coach, summary
- integration/: API tests through FastAPI's TestClient

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/progress/

    # With coverage
    pytest --cov=focusflow --cov-report=term-missing
"""
