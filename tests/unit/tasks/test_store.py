"""Tests for focusflow/tasks/store.py

The task store is the active task list:
- Sequential ids that are never reused
- Step advance with +5 XP, idempotent at the last step
- Completion with rewards and today's wins
- Idempotent delete
"""

from datetime import datetime, timezone

import pytest

from focusflow.errors import NotFoundError, ValidationError
from focusflow.tasks.models import Step
from focusflow.tasks.store import coerce_steps


# ─────────────────────────────────────────────────────────────────────────────
# Create Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestCreate:
    """Tests for task creation."""

    def test_creates_basic_task(self, store):
        task = store.create("Do laundry")

        assert task.id == 1
        assert task.name == "Do laundry"
        assert task.steps == []
        assert task.current_step == 0
        assert task.completed is False

    def test_creates_task_with_steps(self, store, sample_steps):
        task = store.create("Send report", steps=sample_steps)

        assert task.steps == [Step("Open the laptop", 2), Step("Write the intro", 10), Step("Send it", 1)]

    @pytest.mark.parametrize("name", [None, "", "   ", 42])
    def test_rejects_missing_name(self, store, name):
        with pytest.raises(ValidationError, match="Task name required"):
            store.create(name)

    def test_ids_strictly_increase(self, store):
        ids = [store.create(f"task {i}").id for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_ids_never_reused_after_delete(self, store):
        first = store.create("first")
        second = store.create("second")
        store.delete(second.id)
        store.delete(first.id)

        third = store.create("third")
        assert third.id == 3

    def test_to_dict_uses_wire_names(self, store):
        data = store.create("Do laundry").to_dict()

        assert set(data) == {"id", "name", "steps", "currentStep", "createdAt", "completed"}
        assert data["createdAt"].endswith("Z")


class TestCoerceSteps:
    """Tests for caller-supplied step validation."""

    def test_none_is_empty(self):
        assert coerce_steps(None) == []

    def test_accepts_step_instances(self):
        assert coerce_steps([Step("a", 1)]) == [Step("a", 1)]

    @pytest.mark.parametrize(
        "raw",
        [
            "not a list",
            [{"text": "", "mins": 3}],
            [{"text": "ok", "mins": 0}],
            [{"text": "ok", "mins": -2}],
            [{"text": "ok", "mins": "5"}],
            [{"text": "ok", "mins": True}],
            [{"mins": 3}],
            ["just a string"],
        ],
    )
    def test_rejects_malformed_steps(self, raw):
        with pytest.raises(ValidationError):
            coerce_steps(raw)


# ─────────────────────────────────────────────────────────────────────────────
# List Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestList:
    def test_empty(self, store):
        listing = store.list()

        assert listing.tasks == []
        assert listing.current is None
        assert listing.count == 0

    def test_current_is_first_in_insertion_order(self, store):
        first = store.create("first")
        store.create("second")

        listing = store.list()
        assert listing.current is first
        assert [t.name for t in listing.tasks] == ["first", "second"]
        assert listing.count == 2


# ─────────────────────────────────────────────────────────────────────────────
# Advance Step Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestAdvanceStep:
    def test_advances_and_awards_xp(self, store, ledger, sample_steps):
        task = store.create("Send report", steps=sample_steps)

        task, xp = store.advance_step(task.id, ledger)

        assert task.current_step == 1
        assert xp == 5
        assert ledger.total_xp == 5

    def test_last_step_is_noop(self, store, ledger, sample_steps):
        task = store.create("Send report", steps=sample_steps)
        store.advance_step(task.id, ledger)
        store.advance_step(task.id, ledger)

        task, xp = store.advance_step(task.id, ledger)

        assert task.current_step == 2
        assert xp == 0
        assert ledger.total_xp == 10

    def test_task_without_steps_never_advances(self, store, ledger):
        task = store.create("No steps")

        task, xp = store.advance_step(task.id, ledger)

        assert task.current_step == 0
        assert xp == 0
        assert ledger.total_xp == 0

    def test_unknown_id(self, store, ledger):
        with pytest.raises(NotFoundError):
            store.advance_step(99, ledger)


# ─────────────────────────────────────────────────────────────────────────────
# Complete Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestComplete:
    def test_first_completion_rewards(self, store, ledger, sample_steps):
        task = store.create("Send report", steps=sample_steps)

        done, rewards = store.complete(task.id, ledger)

        assert done.completed is True
        assert rewards.xp_earned == 25
        assert rewards.total_xp == 25
        assert rewards.completed_today == 1
        assert rewards.message == "You did it! First task done! 🎉"
        assert rewards.confetti is True

    def test_removes_task_from_list(self, store, ledger):
        task = store.create("Do laundry")
        store.complete(task.id, ledger)

        assert store.list().count == 0
        with pytest.raises(NotFoundError):
            store.get(task.id)

    @pytest.mark.parametrize("step_count", [0, 1, 6, 10])
    def test_xp_is_ten_plus_five_per_step(self, store, ledger, step_count):
        steps = [{"text": f"step {i}", "mins": 1} for i in range(step_count)]
        task = store.create("Task", steps=steps)

        _, rewards = store.complete(task.id, ledger)

        assert rewards.xp_earned == 10 + 5 * step_count

    def test_records_snapshot_in_todays_wins(self, store, ledger):
        now = datetime(2026, 3, 10, 15, 30, tzinfo=timezone.utc)
        task = store.create("Do laundry")

        store.complete(task.id, ledger, now=now)

        record = ledger.completed_today[0]
        assert record.name == "Do laundry"
        assert record.xp_earned == 10
        assert record.task is not task
        assert record.to_win() == {"name": "Do laundry", "xp": 10, "completedAt": "2026-03-10T15:30:00.000Z"}

    def test_messages_escalate(self, store, ledger):
        messages = []
        for i in range(6):
            task = store.create(f"task {i}")
            messages.append(store.complete(task.id, ledger)[1].message)

        assert messages[1] == "Two down! You're on a roll! 🔥"
        assert messages[4] == "FIVE TASKS! Legend status! 👑"
        assert messages[5] == "6 tasks done! You're a machine! 🤖"

    def test_unknown_id(self, store, ledger):
        with pytest.raises(NotFoundError):
            store.complete(7, ledger)

        assert ledger.total_xp == 0


# ─────────────────────────────────────────────────────────────────────────────
# Delete Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestDelete:
    def test_deletes_task(self, store):
        task = store.create("Do laundry")

        assert store.delete(task.id) is True
        assert store.list().count == 0

    def test_missing_is_not_an_error(self, store):
        assert store.delete(123) is False
