# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console

from omnitask.model.entity_id import EntityId
from omnitask.model.task import TaskStatus
from omnitask.query.filter import task_board_filter
from omnitask.query.sort import sort_items
from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.repository.task import TASK_REPO
from omnitask.template.task import get_task_template
from omnitask.terminal.custom_typer import AliasedTyperGroup
from omnitask.terminal.parse import parse_date, parse_id_list
from omnitask.terminal.validate import (
    get_listed_entities,
    get_listed_entity,
    validate_status,
    validate_status_filter,
)
from omnitask.view.views.task import single_task_view, tasks_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
STATUS_HELP = "valid inputs: PENDING, ON-GOING, DONE, CANCELED"


@app.command("add, a")
def add(
    title: str,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-dt", parser=parse_date, help=DATE_HELP),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", callback=validate_status, help=STATUS_HELP),
    ] = None,
    remarks: Annotated[Optional[str], typer.Option("--remarks", "-r")] = None,
    reminder: Annotated[
        bool,
        typer.Option(
            "--reminder/--no-reminder",
            help="Notify when the task is due today",
        ),
    ] = False,
) -> None:
    task = get_task_template()
    task["title"] = title
    if description is not None:
        task["description"] = description
    if date is not None:
        task["date"] = date
    if status is not None:
        task["status"] = TaskStatus(status)
    if remarks is not None:
        task["remarks"] = remarks
    task["reminder"] = reminder

    id = TASK_REPO.save_new_task(task)
    single_task_view(TASK_REPO.get_task(id))


@app.command("modify, m")
def modify(
    id: int,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-dt", parser=parse_date, help=DATE_HELP),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", callback=validate_status, help=STATUS_HELP),
    ] = None,
    remarks: Annotated[Optional[str], typer.Option("--remarks", "-r")] = None,
    reminder: Annotated[
        Optional[bool],
        typer.Option("--reminder/--no-reminder"),
    ] = None,
) -> None:
    real_id = cast(EntityId, get_listed_entity("tasks", id, TASK_REPO.get_task)["id"])
    TASK_REPO.modify_task(
        real_id,
        title=title,
        description=description,
        date=date,
        status=TaskStatus(status) if status is not None else None,
        remarks=remarks,
        reminder=reminder,
    )
    single_task_view(TASK_REPO.get_task(real_id))


@app.command("status, st")
def set_status(
    id: str,
    new_status: Annotated[
        str, typer.Argument(callback=validate_status, help=STATUS_HELP)
    ],
    remarks: Annotated[Optional[str], typer.Option("--remarks", "-r")] = None,
) -> None:
    """Move one or more tasks (e.g. 1,3-5) to a new status."""
    tasks = get_listed_entities("tasks", parse_id_list(id), TASK_REPO.get_task)
    real_ids = [cast(EntityId, task["id"]) for task in tasks]
    for real_id in real_ids:
        TASK_REPO.modify_task(real_id, status=TaskStatus(new_status), remarks=remarks)

    updated = [TASK_REPO.get_task(real_id) for real_id in real_ids]
    tasks_view("updated tasks", updated, NOTIFICATION_REPO.unread_count())


@app.command("delete, d")
def delete(id: str) -> None:
    tasks = get_listed_entities("tasks", parse_id_list(id), TASK_REPO.get_task)
    for task in tasks:
        TASK_REPO.delete_task(cast(EntityId, task["id"]))

    console = Console()
    for task in tasks:
        console.print(f"Deleted task [bold]{task['title']}[/bold]")


@app.command("list, ls")
def list_tasks(
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-q", help="Matches title or description"),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-s",
            callback=validate_status_filter,
            help="ALL or one of PENDING, ON-GOING, DONE, CANCELED",
        ),
    ] = None,
) -> None:
    ID_MAP_REPO.clear_ids("tasks")

    predicate = task_board_filter(
        search, TaskStatus(status) if status is not None else None
    )
    tasks = predicate.filter(TASK_REPO.get_all_tasks())  # type: ignore[arg-type]
    tasks = sort_items(tasks, ["date", "title"])

    tasks_view(
        "task board",
        tasks,  # type: ignore[arg-type]
        NOTIFICATION_REPO.unread_count(),
        empty_message="No tasks match the current filter.",
    )


@app.command("show, s")
def show(id: int) -> None:
    single_task_view(get_listed_entity("tasks", id, TASK_REPO.get_task))
