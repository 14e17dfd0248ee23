from datetime import date

import pytest

from todo_app.client.api import Todo
from todo_app.client import state as st


def make(id, title, completed=False, priority="low", deadline=None):
    return Todo(id=id, title=title, priority=priority, deadline=deadline, completed=completed)


@pytest.fixture
def loaded():
    tasks = (make(3, "Buy milk"), make(2, "Walk dog", completed=True), make(1, "Write report"))
    return st.reduce(st.TodoState(), st.TodosLoaded(tasks))


def test_loaded_replaces_list(loaded):
    state = st.reduce(loaded, st.TodosLoaded((make(9, "Seule"),)))
    assert [t.id for t in state.tasks] == [9]

def test_added_is_prepended(loaded):
    state = st.reduce(loaded, st.TodoAdded(make(4, "Nouvelle")))
    assert [t.id for t in state.tasks] == [4, 3, 2, 1]

def test_removed_by_id(loaded):
    state = st.reduce(loaded, st.TodoRemoved(2))
    assert [t.id for t in state.tasks] == [3, 1]

def test_cleared(loaded):
    assert st.reduce(loaded, st.TodosCleared()).tasks == ()

def test_toggle_is_local_and_does_not_mutate_previous_state(loaded):
    state = st.reduce(loaded, st.CompletionToggled(3))
    assert state.tasks[0].completed == True
    assert loaded.tasks[0].completed == False

def test_unknown_action():
    with pytest.raises(TypeError):
        st.reduce(st.TodoState(), object())


# ---------- édition ----------

def test_edit_draft_copied_from_task(loaded):
    state = st.reduce(loaded, st.EditStarted(1))
    assert state.editing == st.Editing(1, "Write report", "low", None)

def test_edit_refused_for_completed_or_unknown_task(loaded):
    assert st.reduce(loaded, st.EditStarted(2)).editing == st.NOT_EDITING
    assert st.reduce(loaded, st.EditStarted(99)).editing == st.NOT_EDITING

def test_draft_changes_only_given_fields(loaded):
    state = st.reduce(loaded, st.EditStarted(3))
    state = st.reduce(state, st.DraftChanged(title="Buy oat milk"))
    state = st.reduce(state, st.DraftChanged(deadline=date(2025, 2, 1)))
    assert state.editing == st.Editing(3, "Buy oat milk", "low", date(2025, 2, 1))

def test_draft_change_ignored_when_not_editing(loaded):
    assert st.reduce(loaded, st.DraftChanged(title="x")) == loaded

def test_edit_tracks_id_across_refresh(loaded):
    """Un rechargement qui décale la liste ne change pas la tâche éditée"""
    state = st.reduce(loaded, st.EditStarted(1))
    state = st.reduce(state, st.TodosLoaded((make(5, "Autre"),) + loaded.tasks))
    assert state.editing.task_id == 1

def test_edit_dropped_when_task_vanishes(loaded):
    state = st.reduce(loaded, st.EditStarted(1))
    state = st.reduce(state, st.TodosLoaded((make(3, "Buy milk"),)))
    assert state.editing == st.NOT_EDITING

def test_replaced_patches_by_id_and_ends_edit(loaded):
    state = st.reduce(loaded, st.EditStarted(1))
    state = st.reduce(state, st.TodoReplaced(1, make(1, "Rapport final", priority="high")))
    assert state.tasks[2].title == "Rapport final"
    assert state.editing == st.NOT_EDITING

def test_replaced_with_none_drops_entry(loaded):
    state = st.reduce(loaded, st.TodoReplaced(1, None))
    assert [t.id for t in state.tasks] == [3, 2]

def test_removing_edited_task_ends_edit(loaded):
    state = st.reduce(loaded, st.EditStarted(1))
    assert st.reduce(state, st.TodoRemoved(3)).editing.task_id == 1
    assert st.reduce(state, st.TodoRemoved(1)).editing == st.NOT_EDITING


# ---------- filtre / recherche ----------

def test_filters(loaded):
    completed = st.reduce(loaded, st.FilterChanged("completed"))
    uncompleted = st.reduce(loaded, st.FilterChanged("uncompleted"))
    assert [t.id for t in st.visible_todos(completed)] == [2]
    assert [t.id for t in st.visible_todos(uncompleted)] == [3, 1]
    assert len(st.visible_todos(loaded)) == 3

def test_unknown_filter(loaded):
    with pytest.raises(ValueError):
        st.reduce(loaded, st.FilterChanged("archived"))

def test_search_is_case_insensitive_substring(loaded):
    state = st.reduce(loaded, st.SearchChanged("MILK"))
    assert [t.title for t in st.visible_todos(state)] == ["Buy milk"]

def test_search_combined_with_filter(loaded):
    state = st.reduce(loaded, st.SearchChanged("w"))
    state = st.reduce(state, st.FilterChanged("uncompleted"))
    assert [t.id for t in st.visible_todos(state)] == [1]


# ---------- doublons ----------

@pytest.mark.parametrize("title", ["Buy milk", "  buy MILK ", "WRITE REPORT"])
def test_duplicate_title_detected(loaded, title):
    assert st.has_duplicate_title(loaded, title)

def test_distinct_title_not_duplicate(loaded):
    assert not st.has_duplicate_title(loaded, "Buy milk today")
