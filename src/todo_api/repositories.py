from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from .models import TodoChanges, TodoDraft, TodoEntity, create_todo, utc_now
from .settings import Settings
from .stores import DataStore, InMemoryStore, JsonFileStore

logger = logging.getLogger(__name__)

SEED_TEXTS = [
    "Personal Work No. 1",
    "Personal Work No. 2",
    "Personal Work No. 3",
    "Personal Work No. 4",
    "Personal Work No. 5",
]
SEED_COMPLETED_INDICES = {0, 3}


# PUBLIC_INTERFACE
class TodoRepository(ABC):
    """Abstract repository contract for todo storage."""

    @abstractmethod
    def find_all(self) -> List[TodoEntity]:
        """Return all stored TodoEntities."""

    @abstractmethod
    def find_by_id(self, todo_id: str) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def create(self, draft: TodoDraft) -> TodoEntity:
        """Create, store and return a new TodoEntity."""

    @abstractmethod
    def update(self, todo_id: str, changes: TodoChanges) -> Optional[TodoEntity]:
        """Merge the provided fields into an existing TodoEntity. Return it, or None if not found."""

    @abstractmethod
    def delete(self, todo_id: str) -> bool:
        """Delete a TodoEntity by id. Return True if deleted, False if not found."""


class StoreTodoRepository(TodoRepository):
    """
    Todo repository backed by any DataStore.

    An empty store is seeded with five demonstration todos on construction.
    """

    def __init__(self, store: DataStore[TodoEntity]) -> None:
        self._store = store
        if self._store.count() == 0:
            self._seed()

    def _now(self) -> datetime:
        return utc_now()

    def _seed(self) -> None:
        for index, text in enumerate(SEED_TEXTS):
            todo = create_todo({"text": text})
            if index in SEED_COMPLETED_INDICES:
                todo["completed"] = True
            self._store.set(todo["id"], todo)
        logger.info("Seeded %d demonstration todos", len(SEED_TEXTS))

    def find_all(self) -> List[TodoEntity]:
        return self._store.get_all()

    def find_by_id(self, todo_id: str) -> Optional[TodoEntity]:
        return self._store.get(todo_id)

    def create(self, draft: TodoDraft) -> TodoEntity:
        todo = create_todo(draft)
        self._store.set(todo["id"], todo)
        return todo

    def update(self, todo_id: str, changes: TodoChanges) -> Optional[TodoEntity]:
        existing = self._store.get(todo_id)
        if existing is None:
            return None

        # Update only provided fields; id and created_at are never touched
        updated: TodoEntity = existing.copy()
        if "text" in changes:
            updated["text"] = changes["text"]
        if "completed" in changes:
            updated["completed"] = changes["completed"]
        updated["updated_at"] = max(self._now(), existing["updated_at"])

        self._store.set(todo_id, updated)
        return updated

    def delete(self, todo_id: str) -> bool:
        return self._store.delete(todo_id)


# PUBLIC_INTERFACE
def build_repository(settings: Settings) -> TodoRepository:
    """
    Return the repository for the configured persistence backend.
    - memory: InMemoryStore
    - json: JsonFileStore at settings.data_file_path
    """
    store: DataStore[TodoEntity]
    if settings.persistence_backend == "json":
        store = JsonFileStore(settings.data_file_path)
    else:
        store = InMemoryStore()
    logger.info("Using %s persistence backend", settings.persistence_backend)
    return StoreTodoRepository(store)
