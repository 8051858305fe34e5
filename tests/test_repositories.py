"""Repository tests."""

from datetime import timedelta

import pytest

from todo_api.repositories import StoreTodoRepository, build_repository
from todo_api.settings import Settings
from todo_api.stores import InMemoryStore, JsonFileStore


@pytest.fixture
def repository() -> StoreTodoRepository:
    return StoreTodoRepository(InMemoryStore())


def test_fresh_repository_is_seeded(repository) -> None:
    todos = repository.find_all()
    assert len(todos) == 5
    assert [t["text"] for t in todos] == [f"Personal Work No. {i}" for i in range(1, 6)]
    assert [i for i, t in enumerate(todos) if t["completed"]] == [0, 3]


def test_non_empty_store_is_not_seeded() -> None:
    store = InMemoryStore()
    store.set("x", {"id": "x"})
    StoreTodoRepository(store)
    assert store.count() == 1


def test_create(repository) -> None:
    todo = repository.create({"text": "New test todo"})
    assert todo["id"]
    assert todo["text"] == "New test todo"
    assert todo["completed"] is False
    assert todo["created_at"] == todo["updated_at"]
    assert repository.find_by_id(todo["id"]) == todo
    assert len(repository.find_all()) == 6


def test_create_assigns_unique_ids(repository) -> None:
    ids = {repository.create({"text": f"t{i}"})["id"] for i in range(20)}
    assert len(ids) == 20


def test_update_changes_only_given_fields(repository) -> None:
    todo = repository.create({"text": "Original"})
    updated = repository.update(todo["id"], {"text": "Updated"})
    assert updated is not None
    assert updated["text"] == "Updated"
    assert updated["completed"] is False
    assert updated["id"] == todo["id"]
    assert updated["created_at"] == todo["created_at"]
    assert updated["updated_at"] >= todo["updated_at"]
    assert repository.find_by_id(todo["id"]) == updated

    toggled = repository.update(todo["id"], {"completed": True})
    assert toggled["completed"] is True
    assert toggled["text"] == "Updated"


def test_update_ignores_identity_fields(repository) -> None:
    todo = repository.create({"text": "Keep"})
    updated = repository.update(
        todo["id"],
        {"id": "other", "created_at": todo["created_at"] - timedelta(days=1)},  # type: ignore[typeddict-unknown-key]
    )
    assert updated["id"] == todo["id"]
    assert updated["created_at"] == todo["created_at"]


def test_update_missing_returns_none(repository) -> None:
    assert repository.update("unknown-id", {"text": "x"}) is None
    assert len(repository.find_all()) == 5


def test_delete(repository) -> None:
    todo = repository.create({"text": "Gone"})
    assert repository.delete(todo["id"]) is True
    assert repository.find_by_id(todo["id"]) is None
    assert repository.delete(todo["id"]) is False


def test_find_all_is_idempotent(repository) -> None:
    assert repository.find_all() == repository.find_all()


def test_build_repository_selects_backend(tmp_path) -> None:
    memory = build_repository(Settings(persistence_backend="memory"))
    assert isinstance(memory._store, InMemoryStore)
    assert not isinstance(memory._store, JsonFileStore)

    path = tmp_path / "todos.json"
    json_repo = build_repository(Settings(persistence_backend="json", data_file_path=str(path)))
    assert isinstance(json_repo._store, JsonFileStore)
    assert path.exists()


def test_json_backed_repository_reloads_seed_and_updates(tmp_path) -> None:
    path = str(tmp_path / "todos.json")
    first = StoreTodoRepository(JsonFileStore(path))
    target = first.find_all()[1]
    first.update(target["id"], {"completed": True})

    second = StoreTodoRepository(JsonFileStore(path))
    assert len(second.find_all()) == 5
    assert second.find_by_id(target["id"])["completed"] is True
