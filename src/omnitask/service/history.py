# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum

from omnitask.model.history import TaskHistory
from omnitask.model.task import Task
from omnitask.query.sort import sort_items
from omnitask.time import date_from_str_optional, today_local_date_str


def build_task_history(
    tasks: list[Task], now: Optional[pendulum.DateTime] = None
) -> TaskHistory:
    """
    Bucket tasks relative to today.

    Past tasks are newest first and future tasks soonest first. Tasks with a
    malformed date are left out of every bucket.
    """
    today = today_local_date_str(now)
    dated_tasks = [
        deepcopy(task) for task in tasks if date_from_str_optional(task["date"])
    ]

    past = [task for task in dated_tasks if task["date"] < today]
    present = [task for task in dated_tasks if task["date"] == today]
    future = [task for task in dated_tasks if task["date"] > today]

    return {
        "today": today,
        "past": sort_items(past, ["desc date"]),  # type: ignore[arg-type]
        "present": present,
        "future": sort_items(future, ["date"]),  # type: ignore[arg-type]
    }
