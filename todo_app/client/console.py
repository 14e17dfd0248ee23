"""Interactive console front-end for the todo list.

Renders the visible list after each command. Nothing is kept locally between
runs: the list is fetched once at start and on ``reload``.
"""
from datetime import date
from typing import Callable, Optional

import requests

from todo_app.client.api import TodoApiClient, TodoApiError
from todo_app.client.state import Editing, FILTERS, PRIORITIES
from todo_app.client.store import DuplicateTitleError, NotEditingError, TodoStore
from todo_app.core.config import settings
from todo_app.core.logging_setup import setup_logging


def _parse_deadline(raw: str) -> Optional[date]:
    if raw.lower() in {"", "none", "-"}:
        return None
    return date.fromisoformat(raw)


def _parse_id(raw: str) -> Optional[int]:
    return int(raw) if raw.isdigit() else None


class Console:
    def __init__(self, store: TodoStore, input_fn: Callable[[str], str] = input):
        self.store = store
        self.input = input_fn

    def run(self) -> None:
        try:
            self.store.load()
        except (TodoApiError, requests.RequestException) as e:
            print(f"Cannot load tasks: {e}")
        try:
            while True:
                self.render()
                line = self.input("\n> ").strip()
                if not line:
                    continue
                if line.lower() in {"quit", "exit"}:
                    break
                self.handle(line)
        except (KeyboardInterrupt, EOFError):
            pass
        print("Goodbye.")

    def render(self) -> None:
        editing = self.store.state.editing
        print(f"\nTO DO APP  [filter: {self.store.state.filter}"
              f"{', search: ' + repr(self.store.state.search) if self.store.state.search else ''}]")
        tasks = self.store.visible()
        if not tasks:
            print("  (no tasks)")
        for task in tasks:
            box = "[x]" if task.completed else "[ ]"
            if isinstance(editing, Editing) and editing.task_id == task.id:
                deadline = editing.deadline.isoformat() if editing.deadline else "-"
                print(f"  {box} {task.id:>4}  * {editing.title}  ({editing.priority}, {deadline})  <editing>")
            else:
                deadline = task.deadline.isoformat() if task.deadline else "-"
                print(f"  {box} {task.id:>4}  {task.title}  ({task.priority}, {deadline})")

    # -------------------- command dispatch --------------------
    def handle(self, line: str) -> None:
        tokens = line.split()
        cmd, args = tokens[0].lower(), tokens[1:]
        handler = getattr(self, f"_cmd_{cmd}", None)
        if handler is None:
            print("Unknown command. Type 'help' for instructions.")
            return
        try:
            handler(args)
        except DuplicateTitleError as e:
            print(f"Alert: {e}")
        except (NotEditingError, ValueError) as e:
            print(str(e))
        except TodoApiError as e:
            print(f"Server error: {e.message}")
        except requests.RequestException as e:
            print(f"Network error: {e}")

    def _cmd_help(self, args) -> None:
        print("Commands:")
        print("  add <title...> [--priority low|medium|high] [--deadline YYYY-MM-DD]")
        print("  edit <id>            Start editing a task")
        print("  title <text...>      Change the title being edited")
        print("  priority <p>         Change the priority being edited")
        print("  deadline <date|none> Change the deadline being edited")
        print("  save / cancel        Finish editing")
        print("  toggle <id>          Mark done/undone (local only)")
        print("  delete <id>          Delete a task")
        print("  clear                Delete every task (asks first)")
        print(f"  filter <{'|'.join(FILTERS)}>")
        print("  search <text...>     Filter by title (empty to reset)")
        print("  list                 Show the list")
        print("  reload               Fetch the list again")
        print("  quit")

    def _cmd_add(self, args) -> None:
        words, priority, deadline = [], "low", None
        it = iter(args)
        for token in it:
            if token == "--priority":
                priority = next(it, "").lower()
            elif token == "--deadline":
                deadline = _parse_deadline(next(it, ""))
            else:
                words.append(token)
        title = " ".join(words)
        if not title.strip():
            print("Title required.")
            return
        self.store.add(title, priority, deadline)

    def _cmd_edit(self, args) -> None:
        task_id = _parse_id(args[0]) if len(args) == 1 else None
        if task_id is None:
            print("Usage: edit <id>")
            return
        self.store.start_edit(task_id)
        editing = self.store.state.editing
        if not isinstance(editing, Editing) or editing.task_id != task_id:
            print("Cannot edit this task.")

    def _cmd_title(self, args) -> None:
        self.store.change_draft(title=" ".join(args))

    def _cmd_priority(self, args) -> None:
        if len(args) != 1 or args[0].lower() not in PRIORITIES:
            print(f"Usage: priority <{'|'.join(PRIORITIES)}>")
            return
        self.store.change_draft(priority=args[0].lower())

    def _cmd_deadline(self, args) -> None:
        self.store.change_draft(deadline=_parse_deadline(args[0] if args else ""))

    def _cmd_save(self, args) -> None:
        self.store.save()

    def _cmd_cancel(self, args) -> None:
        self.store.cancel_edit()

    def _cmd_toggle(self, args) -> None:
        task_id = _parse_id(args[0]) if len(args) == 1 else None
        if task_id is None:
            print("Usage: toggle <id>")
            return
        self.store.toggle_complete(task_id)

    def _cmd_delete(self, args) -> None:
        task_id = _parse_id(args[0]) if len(args) == 1 else None
        if task_id is None:
            print("Usage: delete <id>")
            return
        self.store.delete(task_id)

    def _cmd_clear(self, args) -> None:
        confirmed = self.store.clear_all(
            lambda: self.input("Delete ALL tasks? [y/N] ").strip().lower() in {"y", "yes"}
        )
        if not confirmed:
            print("Cancelled.")

    def _cmd_filter(self, args) -> None:
        if len(args) != 1:
            print(f"Usage: filter <{'|'.join(FILTERS)}>")
            return
        self.store.set_filter(args[0].lower())

    def _cmd_search(self, args) -> None:
        self.store.set_search(" ".join(args))

    def _cmd_list(self, args) -> None:
        pass  # la liste est réaffichée à chaque tour

    def _cmd_reload(self, args) -> None:
        self.store.load()


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    Console(TodoStore(TodoApiClient(settings.API_BASE_URL))).run()


if __name__ == "__main__":
    main()
