"""Effectful side of the client: issues requests, then dispatches actions."""

import logging
from datetime import date
from typing import Callable, Optional, Tuple

from todo_app.client.api import Todo, TodoApiClient
from todo_app.client import state as st

logger = logging.getLogger(__name__)


class DuplicateTitleError(ValueError):
    """A task with the same title (trimmed, case-insensitive) is already held."""


class NotEditingError(RuntimeError):
    pass


class TodoStore:
    def __init__(self, api: TodoApiClient, initial: Optional[st.TodoState] = None):
        self.api = api
        self.state = initial or st.TodoState()

    def dispatch(self, action) -> st.TodoState:
        self.state = st.reduce(self.state, action)
        return self.state

    def visible(self) -> Tuple[Todo, ...]:
        return st.visible_todos(self.state)

    # --- opérations réseau ---

    def load(self) -> Tuple[Todo, ...]:
        tasks = self.api.list_todos()
        self.dispatch(st.TodosLoaded(tuple(tasks)))
        return self.state.tasks

    def add(self, title: str, priority: str = "low", deadline: Optional[date] = None) -> Optional[Todo]:
        if title.strip() == "":
            return None
        if priority not in st.PRIORITIES:
            raise ValueError(f"Unknown priority: {priority}")
        if st.has_duplicate_title(self.state, title):
            logger.info("Duplicate title rejected locally: %r", title)
            raise DuplicateTitleError(f"Task already exists: {title.strip()}")

        created = self.api.create_todo(title, priority, deadline)
        self.dispatch(st.TodoAdded(created))
        return created

    def save(self) -> Optional[Todo]:
        """Send the draft of the task being edited and patch the local list."""
        editing = self.state.editing
        if not isinstance(editing, st.Editing):
            raise NotEditingError("No task is being edited")

        updated = self.api.update_todo(editing.task_id, editing.title, editing.priority, editing.deadline)
        if updated is None:
            logger.warning("Task %s no longer exists on the server", editing.task_id)
        self.dispatch(st.TodoReplaced(editing.task_id, updated))
        return updated

    def delete(self, task_id: int) -> None:
        self.api.delete_todo(task_id)
        self.dispatch(st.TodoRemoved(task_id))

    def clear_all(self, confirm: Callable[[], bool]) -> bool:
        if not confirm():
            return False
        self.api.clear_todos()
        self.dispatch(st.TodosCleared())
        return True

    # --- état local uniquement ---

    def toggle_complete(self, task_id: int) -> None:
        # jamais envoyé au serveur, perdu au prochain load()
        self.dispatch(st.CompletionToggled(task_id))

    def start_edit(self, task_id: int) -> None:
        self.dispatch(st.EditStarted(task_id))

    def change_draft(self, **changes) -> None:
        self.dispatch(st.DraftChanged(**changes))

    def cancel_edit(self) -> None:
        self.dispatch(st.EditCancelled())

    def set_filter(self, value: str) -> None:
        self.dispatch(st.FilterChanged(value))

    def set_search(self, text: str) -> None:
        self.dispatch(st.SearchChanged(text))
