# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from omnitask.model.entity_id import EntityId


class TaskStatus(StrEnum):
    PENDING = "PENDING"
    ON_GOING = "ON-GOING"
    DONE = "DONE"
    CANCELED = "CANCELED"

    @classmethod
    def from_str(cls, raw: Optional[str]) -> "TaskStatus":
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING


ACTIONABLE_STATUSES = (TaskStatus.PENDING, TaskStatus.ON_GOING)


class Task(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    description: str
    # ISO calendar date, YYYY-MM-DD
    date: str
    status: TaskStatus
    remarks: str
    reminder: bool
    created: pendulum.DateTime
