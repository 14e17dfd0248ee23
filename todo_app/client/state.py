"""
Client-side todo state.

The whole UI state is one immutable ``TodoState`` value. It only changes
through ``reduce(state, action)``, which never performs I/O; requests are made
by ``TodoStore`` and their results are fed back in as actions.
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Tuple, Union

from todo_app.client.api import Todo

FILTER_ALL = "all"
FILTER_COMPLETED = "completed"
FILTER_UNCOMPLETED = "uncompleted"
FILTERS = (FILTER_ALL, FILTER_COMPLETED, FILTER_UNCOMPLETED)

PRIORITIES = ("low", "medium", "high")


# Mode édition

@dataclass(frozen=True)
class NotEditing:
    pass


@dataclass(frozen=True)
class Editing:
    task_id: int
    title: str
    priority: Optional[str]
    deadline: Optional[date]


EditMode = Union[NotEditing, Editing]
NOT_EDITING = NotEditing()


@dataclass(frozen=True)
class TodoState:
    tasks: Tuple[Todo, ...] = ()
    filter: str = FILTER_ALL
    search: str = ""
    editing: EditMode = NOT_EDITING


# Actions

@dataclass(frozen=True)
class TodosLoaded:
    tasks: Tuple[Todo, ...]


@dataclass(frozen=True)
class TodoAdded:
    task: Todo


@dataclass(frozen=True)
class TodoReplaced:
    task_id: int
    task: Optional[Todo]


@dataclass(frozen=True)
class TodoRemoved:
    task_id: int


@dataclass(frozen=True)
class TodosCleared:
    pass


@dataclass(frozen=True)
class CompletionToggled:
    task_id: int


@dataclass(frozen=True)
class EditStarted:
    task_id: int


_UNSET = object()


@dataclass(frozen=True)
class DraftChanged:
    title: object = _UNSET
    priority: object = _UNSET
    deadline: object = _UNSET


@dataclass(frozen=True)
class EditCancelled:
    pass


@dataclass(frozen=True)
class FilterChanged:
    filter: str


@dataclass(frozen=True)
class SearchChanged:
    search: str


def _find(tasks, task_id: int) -> Optional[Todo]:
    return next((t for t in tasks if t.id == task_id), None)


def _editing_id(state: TodoState) -> Optional[int]:
    return state.editing.task_id if isinstance(state.editing, Editing) else None


def reduce(state: TodoState, action) -> TodoState:
    if isinstance(action, TodosLoaded):
        tasks = tuple(action.tasks)
        editing = state.editing
        if _editing_id(state) is not None and _find(tasks, _editing_id(state)) is None:
            editing = NOT_EDITING
        return replace(state, tasks=tasks, editing=editing)

    if isinstance(action, TodoAdded):
        return replace(state, tasks=(action.task,) + state.tasks)

    if isinstance(action, TodoReplaced):
        if action.task is None:
            # l'id n'existe plus côté serveur
            tasks = tuple(t for t in state.tasks if t.id != action.task_id)
        else:
            tasks = tuple(action.task if t.id == action.task_id else t for t in state.tasks)
        return replace(state, tasks=tasks, editing=NOT_EDITING)

    if isinstance(action, TodoRemoved):
        editing = NOT_EDITING if _editing_id(state) == action.task_id else state.editing
        return replace(
            state,
            tasks=tuple(t for t in state.tasks if t.id != action.task_id),
            editing=editing,
        )

    if isinstance(action, TodosCleared):
        return replace(state, tasks=(), editing=NOT_EDITING)

    if isinstance(action, CompletionToggled):
        return replace(state, tasks=tuple(
            t.model_copy(update={"completed": not t.completed}) if t.id == action.task_id else t
            for t in state.tasks
        ))

    if isinstance(action, EditStarted):
        task = _find(state.tasks, action.task_id)
        if task is None or task.completed:
            return state
        return replace(state, editing=Editing(task.id, task.title, task.priority, task.deadline))

    if isinstance(action, DraftChanged):
        if not isinstance(state.editing, Editing):
            return state
        changes = {
            name: getattr(action, name)
            for name in ("title", "priority", "deadline")
            if getattr(action, name) is not _UNSET
        }
        return replace(state, editing=replace(state.editing, **changes))

    if isinstance(action, EditCancelled):
        return replace(state, editing=NOT_EDITING)

    if isinstance(action, FilterChanged):
        if action.filter not in FILTERS:
            raise ValueError(f"Unknown filter: {action.filter}")
        return replace(state, filter=action.filter)

    if isinstance(action, SearchChanged):
        return replace(state, search=action.search)

    raise TypeError(f"Unknown action: {action!r}")


# Sélecteurs

def visible_todos(state: TodoState) -> Tuple[Todo, ...]:
    tasks = state.tasks
    if state.filter == FILTER_COMPLETED:
        tasks = tuple(t for t in tasks if t.completed)
    elif state.filter == FILTER_UNCOMPLETED:
        tasks = tuple(t for t in tasks if not t.completed)

    needle = state.search.strip().lower()
    if needle:
        tasks = tuple(t for t in tasks if needle in t.title.lower())
    return tasks


def _normalize_title(title: str) -> str:
    return title.strip().lower()


def has_duplicate_title(state: TodoState, title: str) -> bool:
    wanted = _normalize_title(title)
    return any(_normalize_title(t.title) == wanted for t in state.tasks)
