"""Store tests."""

import json
import logging
from datetime import datetime, timezone

import pytest

from todo_api.stores import InMemoryStore, JsonFileStore


@pytest.fixture(params=["memory", "json"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemoryStore()
    return JsonFileStore(str(tmp_path / "store.json"))


def test_store_contract(store) -> None:
    """Both backends honour the same key-value contract."""
    assert store.count() == 0
    assert store.get("a") is None
    assert store.has("a") is False

    store.set("a", {"n": 1})
    store.set("b", {"n": 2})
    assert store.count() == 2
    assert store.has("a") is True
    assert store.get("a") == {"n": 1}
    assert store.get_all() == [{"n": 1}, {"n": 2}]

    store.set("a", {"n": 3})
    assert store.count() == 2
    assert store.get("a") == {"n": 3}

    assert store.delete("a") is True
    assert store.delete("a") is False
    assert store.has("a") is False

    store.clear()
    assert store.count() == 0
    assert store.get_all() == []


def test_store_hands_out_copies(store) -> None:
    """Mutating a returned or stored value does not change the store."""
    value = {"n": 1}
    store.set("a", value)
    value["n"] = 99
    fetched = store.get("a")
    fetched["n"] = 42
    store.get_all()[0]["n"] = 7
    assert store.get("a") == {"n": 1}


def test_json_store_round_trip_rehydrates_datetimes(tmp_path) -> None:
    path = tmp_path / "todos.json"
    stamp = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    first = JsonFileStore(str(path))
    first.set("t1", {"id": "t1", "text": "Write", "created_at": stamp, "updated_at": stamp})

    second = JsonFileStore(str(path))
    loaded = second.get("t1")
    assert loaded == {"id": "t1", "text": "Write", "created_at": stamp, "updated_at": stamp}
    assert isinstance(loaded["created_at"], datetime)


def test_json_store_file_layout(tmp_path) -> None:
    """The file is a JSON array of [key, value] pairs with camelCase ISO-8601 timestamps."""
    path = tmp_path / "nested" / "todos.json"
    stamp = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    store = JsonFileStore(str(path))
    store.set("t1", {"created_at": stamp})

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk == [["t1", {"createdAt": "2024-01-15T10:00:00+00:00"}]]

    store.clear()
    assert json.loads(path.read_text(encoding="utf-8")) == []



def test_json_store_reads_camel_case_file_with_z_suffix(tmp_path) -> None:
    path = tmp_path / "todos.json"
    entry = {
        "id": "t1",
        "text": "Write",
        "completed": False,
        "createdAt": "2024-01-15T10:00:00.000Z",
        "updatedAt": "2024-01-16T08:30:00Z",
    }
    path.write_text(json.dumps([["t1", entry]]), encoding="utf-8")

    loaded = JsonFileStore(str(path)).get("t1")
    assert loaded == {
        "id": "t1",
        "text": "Write",
        "completed": False,
        "created_at": datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 1, 16, 8, 30, tzinfo=timezone.utc),
    }


def test_json_store_reads_naive_timestamps_as_utc(tmp_path) -> None:
    path = tmp_path / "todos.json"
    path.write_text(json.dumps([["t1", {"createdAt": "2024-01-15T10:00:00"}]]), encoding="utf-8")

    created = JsonFileStore(str(path)).get("t1")["created_at"]
    assert created.tzinfo is not None
    assert created == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    # comparable with aware "now"
    assert created < datetime.now(timezone.utc)

def test_json_store_missing_file_starts_empty(tmp_path) -> None:
    store = JsonFileStore(str(tmp_path / "absent.json"))
    assert store.count() == 0


def test_json_store_corrupt_file_starts_empty(tmp_path, caplog) -> None:
    path = tmp_path / "todos.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="todo_api.stores"):
        store = JsonFileStore(str(path))
    assert store.count() == 0
    assert "Error loading data from file" in caplog.text


def test_json_store_save_failure_is_logged_not_raised(tmp_path, caplog) -> None:
    """A directory in place of the file makes every save fail."""
    path = tmp_path / "todos.json"
    path.mkdir()
    store = JsonFileStore(str(path))
    with caplog.at_level(logging.ERROR, logger="todo_api.stores"):
        store.set("a", {"n": 1})
    assert store.get("a") == {"n": 1}
    assert "Error saving data to file" in caplog.text


def test_json_store_rejects_entries_that_are_not_pairs(tmp_path, caplog) -> None:
    path = tmp_path / "todos.json"
    path.write_text(json.dumps([["t1", {"n": 1}], {"a": 1, "b": 2}]), encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="todo_api.stores"):
        store = JsonFileStore(str(path))
    assert store.count() == 0
    assert "is not a [key, value] pair" in caplog.text
