# SPDX-License-Identifier: MIT

from omnitask.model.entity_type import EntityType
from omnitask.model.task import Task, TaskStatus
from omnitask.time import now_utc, today_local_date_str


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.TASK,
        "title": "",
        "description": "",
        "date": today_local_date_str(now),
        "status": TaskStatus.PENDING,
        "remarks": "",
        "reminder": False,
        "created": now,
    }
