# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.repository.task import TASK_REPO
from omnitask.service.calendar import (
    task_counts_by_month,
    tasks_by_date_in_month,
    tasks_on_date,
)
from omnitask.terminal.custom_typer import AliasedTyperGroup
from omnitask.terminal.parse import parse_date
from omnitask.time import date_from_str
from omnitask.view.views.calendar import calendar_month_view, calendar_year_view
from omnitask.view.views.task import tasks_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _date_or_today(date: Optional[str]) -> pendulum.Date:
    if date is None:
        return pendulum.today("local").date()
    return date_from_str(date)


@app.command("day, d")
def day(
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-dt", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    ID_MAP_REPO.clear_ids("tasks")
    selected = _date_or_today(date)
    tasks_view(
        f"calendar: {selected.format('dddd, MMMM D, YYYY')}",
        tasks_on_date(TASK_REPO.get_all_tasks(), selected),
        NOTIFICATION_REPO.unread_count(),
        empty_message="No tasks for this day.",
    )


@app.command("month, m")
def month(
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date", "-dt", parser=parse_date, help=f"Any day of the month; {DATE_HELP}"
        ),
    ] = None,
    cell_width: Annotated[
        int, typer.Option("--cell-width", "-cw", min=6, help="Width of a day cell")
    ] = 14,
) -> None:
    month_date = _date_or_today(date)
    calendar_month_view(
        month_date,
        tasks_by_date_in_month(TASK_REPO.get_all_tasks(), month_date),
        NOTIFICATION_REPO.unread_count(),
        cell_width,
    )


@app.command("year, y")
def year(
    year: Annotated[Optional[int], typer.Argument(min=1)] = None,
) -> None:
    selected_year = year if year is not None else pendulum.today("local").year
    calendar_year_view(
        selected_year,
        task_counts_by_month(TASK_REPO.get_all_tasks(), selected_year),
        NOTIFICATION_REPO.unread_count(),
    )
