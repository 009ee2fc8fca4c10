# src/task_manager/cli/view.py

"""Plain-text rendering of the task list (what the console shows after each input)."""

from __future__ import annotations

from ..core.state import AppState
from ..tasks.task_models import Task

EMPTY_TEXT = "No tasks yet — add one!"


def sorting_label(descending: bool) -> str:
    return "High → Low" if descending else "Low → High"


def render_task(index: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    status = "Completed" if task.completed else "Incomplete"
    return f"{index}. [{mark}] {task.name}  ({task.priority.label}) - {status}"


def render_task_list(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "Task Manager"))
    store = state.task_store

    lines = [
        f"== {app_name} ({state.theme.mode.value} theme) ==",
        f"Priority: {state.selected_priority.label}    "
        f"Sorting: {sorting_label(store.sort_descending)}",
        "",
    ]

    tasks = store.tasks
    if not tasks:
        lines.append(EMPTY_TEXT)
    else:
        # 1-based numbering; commands translate back to list indexes.
        lines.extend(render_task(i, t) for i, t in enumerate(tasks, start=1))

    return "\n".join(lines)
