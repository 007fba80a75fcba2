# SPDX-License-Identifier: MIT

from typing import TypedDict

from omnitask.model.task import Task


class TaskHistory(TypedDict):
    today: str
    past: list[Task]
    present: list[Task]
    future: list[Task]
