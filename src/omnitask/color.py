# SPDX-License-Identifier: MIT

from omnitask.model.task import TaskStatus

STATUS_COLORS = {
    TaskStatus.PENDING: "yellow",
    TaskStatus.ON_GOING: "blue",
    TaskStatus.DONE: "green",
    TaskStatus.CANCELED: "red",
}

# Color for tasks that can no longer change (done or canceled)
CLOSED_TASK_COLOR = "bright_black"

UNREAD_NOTIFICATION_COLOR = "bold sandy_brown"
REMINDER_COLOR = "gold1"


def status_markup(status: TaskStatus) -> str:
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{status}[/{color}]"
