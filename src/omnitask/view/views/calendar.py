# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from omnitask.color import STATUS_COLORS
from omnitask.model.task import Task
from omnitask.time import weekday_sunday_first
from omnitask.view.views.header import header

DAYS_OF_WEEK = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MAX_TASKS_PER_CELL = 3


def _render_day_cell(
    date: pendulum.Date, day_tasks: list[Task], today: pendulum.Date
) -> Text:
    cell_content = Text()
    if date == today:
        cell_content.append(f"{date.day:2d}\n", style="bold black on bright_cyan")
    else:
        cell_content.append(f"{date.day:2d}\n", style="bold")

    for task in day_tasks[:MAX_TASKS_PER_CELL]:
        color = STATUS_COLORS.get(task["status"], "white")
        cell_content.append(f"{task['title']}\n", style=color)
    if len(day_tasks) > MAX_TASKS_PER_CELL:
        cell_content.append(
            f"+{len(day_tasks) - MAX_TASKS_PER_CELL} more\n", style="bright_black"
        )
    return cell_content


def calendar_month_view(
    month_date: pendulum.Date,
    tasks_by_date: dict[str, list[Task]],
    unread_count: int = 0,
    cell_width: int = 16,
) -> None:
    """
    Display a month grid, weeks starting on Sunday, with the tasks of each day.

    Args:
        month_date: Any date in the month to display
        tasks_by_date: Tasks keyed by 'YYYY-MM-DD' for every day of the month
        unread_count: Unread notifications, shown in the header
        cell_width: Width of each day cell in characters
    """
    header("calendar", unread_count)

    console = Console()
    month_start = month_date.start_of("month")
    console.print(f"\n[bold]{month_start.format('MMMM YYYY')}[/bold]\n")

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in DAYS_OF_WEEK:
        table.add_column(day_name, style="bold", width=cell_width)

    today = pendulum.now("local").date()
    week_cells: list[Text] = [
        Text() for _ in range(weekday_sunday_first(month_start))
    ]
    for offset in range(month_start.days_in_month):
        date = month_start.add(days=offset)
        day_tasks = tasks_by_date.get(date.format("YYYY-MM-DD"), [])
        week_cells.append(_render_day_cell(date, day_tasks, today))
        if len(week_cells) == 7:
            table.add_row(*week_cells)
            week_cells = []
    if len(week_cells) > 0:
        week_cells += [Text() for _ in range(7 - len(week_cells))]
        table.add_row(*week_cells)

    console.print(table)


def calendar_year_view(year: int, counts: dict[int, int], unread_count: int = 0) -> None:
    header("calendar", unread_count)

    table = Table(box=box.SIMPLE, title=str(year), title_justify="left")
    table.add_column("month")
    table.add_column("tasks", justify="right")
    for month, count in counts.items():
        month_name = pendulum.date(year, month, 1).format("MMMM")
        count_markup = f"[bold]{count}[/bold]" if count > 0 else "[bright_black]0[/bright_black]"
        table.add_row(month_name, count_markup)

    console = Console()
    console.print(table)
