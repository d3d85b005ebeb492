# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.state import AppState
from ..tasks.task_models import FILTER_ALL, FILTER_SELECTORS, Category
from ..tasks.task_view import completed_count, count_by_category, remaining_count, total_count
from .render import format_task_line, render_tasks

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

CLEAR_VALUE = "-"

OPTION_KEYS: dict[str, str] = {
    "cat": "category",
    "category": "category",
    "due": "due_date",
    "date": "due_date",
    "at": "due_time",
    "time": "due_time",
}


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Plain text adds a task (or replaces the text of the task being edited).")
        return "\n".join(lines)


registry = CommandRegistry()


@dataclass(slots=True)
class ParsedArgs:
    """Free text plus key:value options pulled out of a command line."""

    text: str = ""
    options: dict[str, str] = field(default_factory=dict)


def parse_args(args: list[str]) -> ParsedArgs:
    words: list[str] = []
    options: dict[str, str] = {}
    for token in args:
        key, sep, value = token.partition(":")
        # "key:" with nothing after it is an ordinary word.
        field_name = OPTION_KEYS.get(key.lower()) if sep and value else None
        if field_name:
            options[field_name] = value
        else:
            words.append(token)
    return ParsedArgs(text=" ".join(words), options=options)


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    raw = args[0].lstrip("#")
    try:
        return int(raw)
    except ValueError:
        return None


def _render(state: AppState) -> str:
    return render_tasks(
        state.task_store.tasks,
        state.active_filter,
        state.clock(),
        color=bool(getattr(state.settings, "console_color", False)),
        editing_id=state.edit.task_id,
    )


def _line(state: AppState, task) -> str:
    return format_task_line(
        task,
        state.clock(),
        color=bool(getattr(state.settings, "console_color", False)),
    )


def add_task(state: AppState, text: str, options: dict[str, str] | None = None) -> str:
    """Shared by /add and plain-text input."""
    options = options or {}

    category: str | None = None
    raw_category = options.get("category")
    if raw_category:
        match = Category.lookup(raw_category)
        if match is None:
            choices = ", ".join(c.value for c in Category)
            return f"Unknown category: {raw_category}. Choose one of: {choices}."
        category = match.value

    task = state.task_store.add(
        text,
        category,
        options.get("due_date", ""),
        options.get("due_time", ""),
    )
    if task is None:
        return "Nothing added: task text is empty."
    return f"Added: {_line(state, task)}"


def update_task(state: AppState, text: str | None, options: dict[str, str] | None = None) -> str:
    """Apply the edit session (with overrides) to the store. Shared by /update and plain text."""
    session = state.edit
    if session.task_id is None:
        return "Not editing anything. Use /edit <id> first."
    options = options or {}

    if text:
        session.text = text
    for name in ("due_date", "due_time"):
        if name in options:
            value = options[name]
            setattr(session, name, "" if value == CLEAR_VALUE else value)

    task_id = session.task_id
    if state.task_store.get(task_id) is None:
        session.clear()
        return f"No task #{task_id}."

    task = state.task_store.update(task_id, session.text, session.due_date, session.due_time)
    if task is None:
        return "Task text cannot be empty. Type new text, or /cancel."

    session.clear()
    return f"Updated: {_line(state, task)}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return _render(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter           -> show current filter
    /filter <name>    -> All | Personal | Work | Shopping | Health | Finance | Other
    """
    if not args:
        return f"Current filter: {state.active_filter}. Choices: {', '.join(FILTER_SELECTORS)}."

    raw = args[0]
    if raw.lower() == FILTER_ALL.lower():
        state.active_filter = FILTER_ALL
    else:
        match = Category.lookup(raw)
        if match is None:
            return f"Unknown filter: {raw}. Choices: {', '.join(FILTER_SELECTORS)}."
        state.active_filter = match.value
    return _render(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add [cat:<Category>] [due:YYYY-MM-DD] [at:HH:MM] <text>"""
    parsed = parse_args(args)
    return add_task(state, parsed.text, parsed.options)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    task = state.task_store.toggle(task_id)
    if task is None:
        return f"No task #{task_id}."
    return f"Task #{task.id} marked {'done' if task.completed else 'not done'}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id>"
    task = state.task_store.get(task_id)
    if task is None:
        return f"No task #{task_id}."

    state.edit.start(task)
    return (
        f"Editing: {_line(state, task)}\n"
        "Type the new text, or /update [due:YYYY-MM-DD|-] [at:HH:MM|-] [text]. /cancel to stop."
    )


def cmd_update(state: AppState, args: list[str]) -> str:
    parsed = parse_args(args)
    return update_task(state, parsed.text or None, parsed.options)


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if not state.edit.active:
        return "Not editing anything."
    state.edit.clear()
    return "Edit cancelled."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    removed = state.task_store.delete(task_id)
    if state.edit.task_id == task_id:
        state.edit.clear()
    return f"Deleted task #{task_id}." if removed else f"No task #{task_id}."


def cmd_stats(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.tasks
    lines = [
        "Stats:",
        f"  Remaining: {remaining_count(tasks)}",
        f"  Completed: {completed_count(tasks)}",
        f"  Total: {total_count(tasks)}",
    ]
    for category in Category:
        lines.append(f"  {category.value}: {count_by_category(tasks, category.value)}")
    return "\n".join(lines)


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    backend = getattr(settings, "storage_backend", "?")
    path = getattr(settings, "json_path" if backend == "json" else "db_path", "?")
    return (
        "Status:\n"
        f"  App: {getattr(settings, 'app_name', 'taskpad')}\n"
        f"  Storage: {backend} ({path})\n"
        f"  Tasks: {total_count(state.task_store.tasks)}\n"
        f"  Filter: {state.active_filter}\n"
        f"  Editing: {'#' + str(state.edit.task_id) if state.edit.active else 'none'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks for the current filter.", aliases=["ls"])
registry.register("filter", cmd_filter, help_text="Filter by category: /filter Work | /filter All.")
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add [cat:Work] [due:2025-12-01] [at:09:00] <text>.",
)
registry.register("toggle", cmd_toggle, help_text="Mark a task done/not done: /toggle <id>.", aliases=["done"])
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <id>.")
registry.register(
    "update",
    cmd_update,
    help_text="Save the edit: /update [due:YYYY-MM-DD|-] [at:HH:MM|-] [text].",
)
registry.register("cancel", cmd_cancel, help_text="Stop editing without saving.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("stats", cmd_stats, help_text="Show remaining/completed/per-category counts.")
registry.register("status", cmd_status, help_text="Show app/storage settings.")
