# SPDX-License-Identifier: MIT

from dataclasses import dataclass, field
from typing import Optional

import pendulum

from omnitask.model.entity_id import generate_entity_id
from omnitask.model.task import Task, TaskStatus
from omnitask.notify.native import NotificationPermission
from omnitask.template.task import get_task_template


@dataclass(slots=True)
class ShownNotification:
    title: str
    body: str
    tag: str


@dataclass
class FakeNotifier:
    """
    Native notification channel that records every show() call.
    """

    grant: bool = True
    permission_requests: int = 0
    shown: list[ShownNotification] = field(default_factory=list)
    _permission: NotificationPermission = NotificationPermission.UNSET

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    def request_permission(self) -> NotificationPermission:
        self.permission_requests += 1
        self._permission = (
            NotificationPermission.GRANTED if self.grant else NotificationPermission.DENIED
        )
        return self._permission

    def show(self, title: str, body: str, tag: str) -> None:
        self.shown.append(ShownNotification(title=title, body=body, tag=tag))


def make_task(
    title: str,
    date: str,
    status: TaskStatus = TaskStatus.PENDING,
    reminder: bool = False,
    description: str = "",
    created: Optional[pendulum.DateTime] = None,
) -> Task:
    task = get_task_template()
    task["id"] = generate_entity_id()
    task["title"] = title
    task["date"] = date
    task["status"] = status
    task["reminder"] = reminder
    task["description"] = description
    if created is not None:
        task["created"] = created
    return task
