# SPDX-License-Identifier: MIT

import pendulum

from omnitask.service.calendar import (
    task_counts_by_month,
    tasks_by_date_in_month,
    tasks_on_date,
)

from .fakes import make_task

TASKS = [
    make_task("a", "2024-02-01"),
    make_task("b", "2024-02-29"),
    make_task("c", "2024-02-29"),
    make_task("d", "2024-03-01"),
    make_task("e", "2023-02-10"),
    make_task("f", "garbage"),
]


def test_tasks_on_date() -> None:
    found = tasks_on_date(TASKS, pendulum.date(2024, 2, 29))

    assert [task["title"] for task in found] == ["b", "c"]


def test_month_has_every_day() -> None:
    by_date = tasks_by_date_in_month(TASKS, pendulum.date(2024, 2, 15))

    assert len(by_date) == 29
    assert by_date["2024-02-10"] == []
    assert [task["title"] for task in by_date["2024-02-29"]] == ["b", "c"]
    assert "2024-03-01" not in by_date


def test_year_counts() -> None:
    counts = task_counts_by_month(TASKS, 2024)

    assert list(counts) == list(range(1, 13))
    assert counts[2] == 3
    assert counts[3] == 1
    assert sum(counts.values()) == 4
