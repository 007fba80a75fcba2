# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from omnitask.color import CLOSED_TASK_COLOR, REMINDER_COLOR, status_markup
from omnitask.model.task import ACTIONABLE_STATUSES, Task
from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.time import datetime_to_display_local_datetime_str
from omnitask.view.views.header import header


def reminder_marker(task: Task) -> str:
    return f"[{REMINDER_COLOR}]🔔[/{REMINDER_COLOR}]" if task["reminder"] else ""


def task_row_markup(task: Task, value: str) -> str:
    if task["status"] not in ACTIONABLE_STATUSES:
        return f"[{CLOSED_TASK_COLOR}]{value}[/{CLOSED_TASK_COLOR}]"
    return value


def tasks_table(tasks: list[Task], title: Optional[str] = None) -> Table:
    table = Table(box=box.SIMPLE, title=title)
    table.add_column("id")
    table.add_column("status")
    table.add_column("date")
    table.add_column("reminder")
    table.add_column("title")
    table.add_column("remarks")

    for task in tasks:
        table.add_row(
            str(ID_MAP_REPO.associate_id("tasks", task["id"] or "")),
            status_markup(task["status"]),
            task_row_markup(task, task["date"]),
            reminder_marker(task),
            task_row_markup(task, task["title"]),
            task_row_markup(task, task["remarks"]),
        )
    return table


def tasks_view(
    view_name: str,
    tasks: list[Task],
    unread_count: int = 0,
    empty_message: str = "No tasks found.",
) -> None:
    header(view_name, unread_count)

    console = Console()
    if len(tasks) == 0:
        console.print(f"  [bright_black]{empty_message}[/bright_black]")
        return
    console.print(tasks_table(tasks))


def single_task_view(task: Task) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("tasks", task["id"] or ""))
    )
    task_table.add_row("title", task["title"])
    task_table.add_row("description", task["description"])
    task_table.add_row("date", task["date"])
    task_table.add_row("status", status_markup(task["status"]))
    task_table.add_row("remarks", task["remarks"])
    task_table.add_row("reminder", "yes" if task["reminder"] else "no")
    task_table.add_row(
        "created", datetime_to_display_local_datetime_str(task["created"])
    )

    console = Console()
    console.print(task_table)
