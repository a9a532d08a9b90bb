"""Tests for the generic in-memory repository."""
import threading
from datetime import datetime, timedelta, timezone

import pytest

from taskboard.domain.common.errors import NotFoundError
from taskboard.persistence.repositories.memory.task_repository import TaskRepository
from taskboard.persistence.repositories.memory.user_repository import UserRepository


class StepClock:
    """Returns a fixed start time, advancing by `step` on every call."""

    def __init__(self, step=timedelta(seconds=1)):
        self.now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


def _task_data(**overrides):
    data = {
        "title": "Write spec",
        "priority": "high",
        "assignee_id": "dev-1",
        "created_by": "tester",
        "updated_by": "tester",
    }
    data.update(overrides)
    return data


@pytest.fixture
def repo():
    return TaskRepository(clock=StepClock())


# ------------------------------------------------------------------
# create / find_by_id
# ------------------------------------------------------------------
def test_create_assigns_identity_and_version(repo):
    task = repo.create(_task_data())
    assert task.id
    assert task.version == 1
    assert task.created_at == task.updated_at
    assert task.status == "pending"
    assert len(repo) == 1


def test_create_assigns_distinct_ids(repo):
    ids = {repo.create(_task_data(title=f"t{i}")).id for i in range(20)}
    assert len(ids) == 20


def test_find_by_id_round_trip(repo):
    created = repo.create(_task_data(tags=["a", "b"]))
    assert repo.find_by_id(created.id) == created


def test_find_by_id_missing_returns_none(repo):
    assert repo.find_by_id("nope") is None


def test_reads_are_copies(repo):
    created = repo.create(_task_data(tags=["a"]))
    fetched = repo.find_by_id(created.id)
    fetched.title = "tampered"
    fetched.tags.append("b")
    fetched.version = 99
    stored = repo.find_by_id(created.id)
    assert stored.title == "Write spec"
    assert stored.tags == ["a"]
    assert stored.version == 1


def test_create_rejects_identity_fields(repo):
    with pytest.raises(ValueError):
        repo.create(_task_data(version=5))


def test_create_rejects_unknown_fields(repo):
    with pytest.raises(ValueError):
        repo.create(_task_data(colour="red"))


# ------------------------------------------------------------------
# find_all
# ------------------------------------------------------------------
def test_find_all_preserves_insertion_order(repo):
    titles = ["one", "two", "three"]
    for t in titles:
        repo.create(_task_data(title=t))
    assert [t.title for t in repo.find_all()] == titles
    assert [t.title for t in repo.find_all({})] == titles


def test_find_all_filter_matches_external_filter(repo):
    repo.create(_task_data(title="a", priority="high"))
    repo.create(_task_data(title="b", priority="low"))
    repo.create(_task_data(title="c", priority="high", assignee_id="dev-2"))

    filtered = repo.find_all({"priority": "high"})
    expected = [t for t in repo.find_all() if t.priority == "high"]
    assert filtered == expected
    assert [t.title for t in filtered] == ["a", "c"]

    both = repo.find_all({"priority": "high", "assignee_id": "dev-2"})
    assert [t.title for t in both] == ["c"]


def test_find_all_skips_none_criteria(repo):
    repo.create(_task_data(title="a"))
    repo.create(_task_data(title="b", priority="low"))
    assert len(repo.find_all({"priority": None})) == 2


def test_find_all_unknown_field_raises(repo):
    with pytest.raises(ValueError):
        repo.find_all({"colour": "red"})


def test_find_by_status_and_assignee(repo):
    a = repo.create(_task_data(title="a"))
    repo.create(_task_data(title="b", assignee_id="dev-2"))
    repo.update(a.id, {"status": "approved"})
    assert [t.title for t in repo.find_by_status("approved")] == ["a"]
    assert [t.title for t in repo.find_by_assignee("dev-2")] == ["b"]


# ------------------------------------------------------------------
# update
# ------------------------------------------------------------------
def test_update_bumps_version_and_timestamp(repo):
    created = repo.create(_task_data())
    updated = repo.update(created.id, {"status": "approved"})
    assert updated.version == created.version + 1
    assert updated.updated_at > created.updated_at
    assert updated.created_at == created.created_at
    assert updated.id == created.id
    assert updated.status == "approved"
    assert updated.title == created.title


def test_update_merges_only_given_fields(repo):
    created = repo.create(_task_data(description="keep me", due_date=datetime(2025, 9, 1)))
    updated = repo.update(created.id, {"title": "renamed"})
    assert updated.description == "keep me"
    assert updated.due_date == datetime(2025, 9, 1)


def test_update_explicit_none_clears_field(repo):
    created = repo.create(_task_data(due_date=datetime(2025, 9, 1)))
    updated = repo.update(created.id, {"due_date": None})
    assert updated.due_date is None


def test_update_unknown_id_raises_and_leaves_repo_unchanged(repo):
    created = repo.create(_task_data())
    for _ in range(2):
        with pytest.raises(NotFoundError) as exc:
            repo.update("missing", {"status": "approved"})
        assert exc.value.status_code == 404
    assert len(repo) == 1
    assert repo.find_by_id(created.id) == created


def test_update_rejects_identity_fields(repo):
    created = repo.create(_task_data())
    with pytest.raises(ValueError):
        repo.update(created.id, {"id": "other"})
    assert repo.find_by_id(created.id).version == 1


def test_updated_at_never_moves_backwards():
    clock = StepClock(step=timedelta(seconds=-1))
    repo = TaskRepository(clock=clock)
    created = repo.create(_task_data())
    updated = repo.update(created.id, {"title": "again"})
    assert updated.updated_at >= created.updated_at
    assert updated.version == 2


# ------------------------------------------------------------------
# delete
# ------------------------------------------------------------------
def test_delete_is_idempotent(repo):
    keep = repo.create(_task_data(title="keep"))
    gone = repo.create(_task_data(title="gone"))
    assert repo.delete(gone.id) is True
    assert len(repo) == 1
    assert repo.delete(gone.id) is False
    assert len(repo) == 1
    assert repo.find_by_id(gone.id) is None
    assert repo.find_by_id(keep.id) is not None


# ------------------------------------------------------------------
# UserRepository
# ------------------------------------------------------------------
def _user_data(**overrides):
    data = {
        "email": "dev@company.com",
        "first_name": "Jo",
        "last_name": "Developer",
        "created_by": "system",
        "updated_by": "system",
    }
    data.update(overrides)
    return data


def test_find_by_email_is_case_insensitive():
    repo = UserRepository()
    user = repo.create(_user_data())
    assert repo.find_by_email("DEV@Company.com").id == user.id
    assert repo.find_by_email("other@company.com") is None


def test_find_by_role_active_only():
    repo = UserRepository()
    a = repo.create(_user_data(email="a@x.io", role="manager"))
    repo.create(_user_data(email="b@x.io", role="manager"))
    repo.update(a.id, {"is_active": False})
    assert [u.email for u in repo.find_by_role("manager")] == ["b@x.io"]
    assert len(repo.find_by_role("manager", active_only=False)) == 2


# ------------------------------------------------------------------
# Concurrency
# ------------------------------------------------------------------
def test_concurrent_updates_never_lose_a_version():
    repo = TaskRepository()
    task = repo.create(_task_data())

    def worker():
        for _ in range(50):
            repo.update(task.id, {"description": "x"})

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert repo.find_by_id(task.id).version == 1 + 4 * 50
