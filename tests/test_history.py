# SPDX-License-Identifier: MIT

import pendulum

from omnitask.service.history import build_task_history

from .fakes import make_task


def test_tasks_are_bucketed_around_today(now: pendulum.DateTime) -> None:
    tasks = [
        make_task("last month", "2024-05-12"),
        make_task("tomorrow", "2024-06-13"),
        make_task("today", "2024-06-12"),
        make_task("yesterday", "2024-06-11"),
        make_task("next year", "2025-01-01"),
        make_task("broken", "someday"),
    ]

    history = build_task_history(tasks, now)

    assert history["today"] == "2024-06-12"
    assert [t["title"] for t in history["past"]] == ["yesterday", "last month"]
    assert [t["title"] for t in history["present"]] == ["today"]
    assert [t["title"] for t in history["future"]] == ["tomorrow", "next year"]


def test_today_follows_the_local_timezone() -> None:
    late_evening_utc = pendulum.datetime(2024, 6, 12, 23, 30, tz="UTC")
    tasks = [make_task("due", "2024-06-13")]

    with pendulum.test_local_timezone(pendulum.timezone("Asia/Tokyo")):
        history = build_task_history(tasks, late_evening_utc)

    assert history["today"] == "2024-06-13"
    assert [t["title"] for t in history["present"]] == ["due"]
