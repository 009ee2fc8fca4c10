# src/task_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Priority
from .view import render_task_list, sorting_label

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

_LEVELS_HINT = "high | medium | low (or h/m/l)"


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
        lines.append("  (any other text adds a task with the selected priority)")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_index(state: AppState, raw: str | None) -> tuple[int | None, str | None]:
    """1-based user number -> list index. Returns (index, None) or (None, error)."""
    total = len(state.task_store)
    if raw is None:
        return None, "Task number required."
    raw = raw.rstrip(".")
    if not raw.isdigit():
        return None, f"Invalid task number: {raw}"
    n = int(raw)
    if n < 1 or n > total:
        if total == 0:
            return None, "There are no tasks."
        return None, f"No task #{n} (1..{total})."
    return n - 1, None


def add_task(state: AppState, text: str) -> str:
    """Shared by /add and plain-text input."""
    priority = state.selected_priority
    if not state.task_store.add(text, priority):
        return "Task name required."
    return f'Added "{text.strip()}" ({priority.label}).'


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    return add_task(state, " ".join(args))


def cmd_done(state: AppState, args: list[str]) -> str:
    idx, err = _parse_index(state, args[0] if args else None)
    if idx is None:
        return err or "Usage: /done <n>"
    state.task_store.set_completed(idx, True)
    return f'Completed "{state.task_store.tasks[idx].name}".'


def cmd_undo(state: AppState, args: list[str]) -> str:
    idx, err = _parse_index(state, args[0] if args else None)
    if idx is None:
        return err or "Usage: /undo <n>"
    state.task_store.set_completed(idx, False)
    return f'Marked "{state.task_store.tasks[idx].name}" incomplete.'


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm <n>  -> ask for confirmation
    /yes     -> delete
    /no      -> keep
    """
    idx, err = _parse_index(state, args[0] if args else None)
    if idx is None:
        return err or "Usage: /rm <n>"
    task = state.task_store.tasks[idx]
    state.pending_delete = (idx, task)
    return f'Delete task "{task.name}"? Type /yes to delete or /no to cancel.'


def cmd_yes(state: AppState, args: list[str]) -> str:
    pending = state.pending_delete
    state.pending_delete = None
    if pending is None:
        return "Nothing to confirm."

    idx, task = pending
    tasks = state.task_store.tasks
    if idx >= len(tasks) or tasks[idx] is not task:
        return "The list changed since /rm; run /rm again."

    removed = state.task_store.delete(idx)
    return f'Deleted "{removed.name}".'


def cmd_no(state: AppState, args: list[str]) -> str:
    if state.pending_delete is None:
        return "Nothing to cancel."
    state.pending_delete = None
    return "Delete cancelled."


def cmd_prio(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return f"Usage: /prio <n> <level>; level: {_LEVELS_HINT}"
    idx, err = _parse_index(state, args[0])
    if idx is None:
        return err or "Invalid task number."
    priority = Priority.parse(args[1])
    if priority is None:
        return f"Unknown priority: {args[1]}. Use {_LEVELS_HINT}."

    task = state.task_store.tasks[idx]
    state.task_store.set_priority(idx, priority)
    return f'"{task.name}" is now {priority.label}.'


def cmd_select(state: AppState, args: list[str]) -> str:
    """
    /select          -> show the priority used for new tasks
    /select <level>  -> change it
    """
    if not args:
        return f"New tasks get priority {state.selected_priority.label}."
    priority = Priority.parse(args[0])
    if priority is None:
        return f"Unknown priority: {args[0]}. Use {_LEVELS_HINT}."
    state.selected_priority = priority
    return f"New tasks get priority {priority.label}."


def cmd_sort(state: AppState, args: list[str]) -> str:
    descending = state.task_store.toggle_sort_order()
    return f"Sorting: {sorting_label(descending)}"


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme        -> toggle
    /theme dark   -> dark
    /theme light  -> light
    """
    if not args:
        mode = state.theme.toggle()
    else:
        arg = args[0].lower()
        if arg in ("dark", "on", "1", "true"):
            mode = state.theme.set_dark(True)
        elif arg in ("light", "off", "0", "false"):
            mode = state.theme.set_dark(False)
        else:
            return "Usage: /theme [dark|light]"

    logger.debug("Theme changed to %s", mode.value)
    return f"Theme: {mode.value}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <name>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Mark task complete: /done <n>.", aliases=["x"])
registry.register("undo", cmd_undo, help_text="Mark task incomplete: /undo <n>.")
registry.register("rm", cmd_rm, help_text="Delete a task (asks to confirm): /rm <n>.", aliases=["del"])
registry.register("yes", cmd_yes, help_text="Confirm a pending delete.", aliases=["y"])
registry.register("no", cmd_no, help_text="Cancel a pending delete.", aliases=["n"])
registry.register("prio", cmd_prio, help_text="Change priority: /prio <n> <level>.", aliases=["p"])
registry.register("select", cmd_select, help_text="Priority for new tasks: /select <level>.")
registry.register("sort", cmd_sort, help_text="Toggle High → Low / Low → High.")
registry.register("theme", cmd_theme, help_text="Light/dark theme: /theme [dark|light].")
