# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from omnitask.color import UNREAD_NOTIFICATION_COLOR
from omnitask.model.notification import AppNotification
from omnitask.time import datetime_to_display_local_datetime_str
from omnitask.view.views.header import header


def notifications_view(notifications: list[AppNotification], unread_count: int) -> None:
    header("notifications", unread_count)

    console = Console()
    if len(notifications) == 0:
        console.print("  [bright_black]No notifications.[/bright_black]")
        return

    notifications_table = Table(box=box.SIMPLE)
    notifications_table.add_column("")
    notifications_table.add_column("time")
    notifications_table.add_column("title")
    notifications_table.add_column("message")

    for notification in notifications:
        marker = ""
        title = notification["title"]
        if not notification["read"]:
            marker = f"[{UNREAD_NOTIFICATION_COLOR}]●[/{UNREAD_NOTIFICATION_COLOR}]"
            title = f"[{UNREAD_NOTIFICATION_COLOR}]{title}[/{UNREAD_NOTIFICATION_COLOR}]"
        notifications_table.add_row(
            marker,
            datetime_to_display_local_datetime_str(notification["created"]),
            title,
            notification["message"],
        )
    console.print(notifications_table)
