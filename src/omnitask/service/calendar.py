# SPDX-License-Identifier: MIT

from copy import deepcopy

import pendulum

from omnitask.model.task import Task
from omnitask.time import date_from_str_optional, date_to_str


def tasks_on_date(tasks: list[Task], date: pendulum.Date) -> list[Task]:
    date_str = date_to_str(date)
    return [deepcopy(task) for task in tasks if task["date"] == date_str]


def tasks_by_date_in_month(
    tasks: list[Task], month_date: pendulum.Date
) -> dict[str, list[Task]]:
    """Map every 'YYYY-MM-DD' of the month to the tasks dated on it (empty lists included)."""
    month_start = month_date.start_of("month")
    by_date: dict[str, list[Task]] = {
        date_to_str(month_start.add(days=offset)): []
        for offset in range(month_start.days_in_month)
    }
    for task in tasks:
        if task["date"] in by_date:
            by_date[task["date"]].append(deepcopy(task))
    return by_date


def task_counts_by_month(tasks: list[Task], year: int) -> dict[int, int]:
    """Number of tasks in each month (1-12) of year."""
    counts = {month: 0 for month in range(1, 13)}
    for task in tasks:
        task_date = date_from_str_optional(task["date"])
        if task_date is not None and task_date.year == year:
            counts[task_date.month] += 1
    return counts
