# SPDX-License-Identifier: MIT

import typer
from rich.console import Console

from omnitask.notify.native import NativeNotifier
from omnitask.repository.configuration import CONFIGURATION_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.repository.task import TASK_REPO
from omnitask.service.reminder import check_reminders
from omnitask.terminal.custom_typer import AliasedTyperGroup
from omnitask.view.views.notification import notifications_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_notifications() -> None:
    """Show the notification log, then mark every entry read."""
    notifications_view(
        NOTIFICATION_REPO.get_all_notifications(), NOTIFICATION_REPO.unread_count()
    )
    NOTIFICATION_REPO.mark_all_read()


@app.command("read, r")
def read() -> None:
    """Mark every entry read without listing."""
    NOTIFICATION_REPO.mark_all_read()
    typer.echo("All notifications marked as read")


@app.command("count, cn")
def count() -> None:
    typer.echo(str(NOTIFICATION_REPO.unread_count()))


@app.command("check, ch")
def check() -> None:
    """Run a single reminder check now."""
    notifier = NativeNotifier(
        enabled=CONFIGURATION_REPO.get_config()["native_notifications"]
    )
    notifier.request_permission()
    result = check_reminders(TASK_REPO, NOTIFICATION_REPO, notifier)

    console = Console()
    if len(result["due_tasks"]) == 0:
        console.print("  [bright_black]No reminders due today.[/bright_black]")
        return
    console.print(
        f"  {len(result['due_tasks'])} task(s) due today, "
        f"{len(result['new_notifications'])} new notification(s)"
    )
