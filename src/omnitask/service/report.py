# SPDX-License-Identifier: MIT

"""
Period reports over tasks.

Every function here is pure: the result depends only on the tasks, the
period and the reference date passed in.
"""

from copy import deepcopy

import pendulum

from omnitask.model.report import Report, ReportPeriod, ReportRange
from omnitask.model.task import Task
from omnitask.time import date_from_str, date_from_str_optional, weekday_sunday_first

TUESDAY = 2
SATURDAY = 6
SUNDAY = 0
WEEKEND = (SATURDAY, SUNDAY)

WEEK_LABEL_SUFFIX = "(Tue-Mon, Excluding Weekends)"


def week_start(reference_date: pendulum.Date) -> pendulum.Date:
    """The most recent Tuesday on or before reference_date."""
    days_since_tuesday = (weekday_sunday_first(reference_date) + 7 - TUESDAY) % 7
    return reference_date.subtract(days=days_since_tuesday)


def compute_range(period: ReportPeriod, reference_date: pendulum.Date) -> ReportRange:
    match period:
        case ReportPeriod.DAY:
            return {
                "start": reference_date,
                "end": reference_date,
                "label": reference_date.format("dddd, MMMM D, YYYY"),
            }
        case ReportPeriod.WEEK:
            start = week_start(reference_date)
            end = start.add(days=6)
            return {
                "start": start,
                "end": end,
                "label": f"{start.format('MMMM D')} - {end.format('MMMM D, YYYY')} {WEEK_LABEL_SUFFIX}",
            }
        case ReportPeriod.MONTH:
            return {
                "start": reference_date.start_of("month"),
                "end": reference_date.end_of("month"),
                "label": reference_date.format("MMMM YYYY"),
            }
        case ReportPeriod.YEAR:
            return {
                "start": reference_date.start_of("year"),
                "end": reference_date.end_of("year"),
                "label": str(reference_date.year),
            }
    raise ValueError(f"Unknown report period: {period}")


def task_in_period(
    task: Task, period: ReportPeriod, reference_date: pendulum.Date
) -> bool:
    task_date = date_from_str_optional(task["date"])
    if task_date is None:
        return False

    match period:
        case ReportPeriod.DAY:
            return task["date"] == reference_date.format("YYYY-MM-DD")
        case ReportPeriod.WEEK:
            start = week_start(reference_date)
            end = start.add(days=6)
            return (
                start <= task_date <= end
                and weekday_sunday_first(task_date) not in WEEKEND
            )
        case ReportPeriod.MONTH:
            return (
                task_date.year == reference_date.year
                and task_date.month == reference_date.month
            )
        case ReportPeriod.YEAR:
            return task_date.year == reference_date.year
    return False


def filter_tasks(
    tasks: list[Task], period: ReportPeriod, reference_date: pendulum.Date
) -> list[Task]:
    return [
        deepcopy(task) for task in tasks if task_in_period(task, period, reference_date)
    ]


def generate_report(
    tasks: list[Task], period: ReportPeriod, reference_date_str: str
) -> Report:
    """
    Build the report for one period.

    Raises:
        ValueError: if reference_date_str is not a YYYY-MM-DD date
    """
    reference_date = date_from_str(reference_date_str)
    return {
        "period": period,
        "reference_date": reference_date_str,
        "range": compute_range(period, reference_date),
        "tasks": filter_tasks(tasks, period, reference_date),
    }
