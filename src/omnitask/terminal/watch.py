# SPDX-License-Identifier: MIT

import time
from typing import Annotated, Optional

import typer
from rich.console import Console

from omnitask.notify.native import NativeNotifier
from omnitask.repository.configuration import CONFIGURATION_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.repository.task import TASK_REPO
from omnitask.service.reminder import ReminderCheck, ReminderScheduler
from omnitask.terminal.validate import validate_positive_seconds
from omnitask.time import datetime_to_display_local_datetime_str


def print_check(console: Console, result: ReminderCheck) -> None:
    for notification in result["new_notifications"]:
        console.print(
            f"[bright_black]{datetime_to_display_local_datetime_str(notification['created'])}[/bright_black] "
            f"[bold]{notification['title']}[/bold] {notification['message']}"
        )


def watch(
    interval: Annotated[
        Optional[float],
        typer.Option(
            "--interval",
            "-i",
            callback=validate_positive_seconds,
            help="Seconds between checks (defaults to reminder_interval_seconds)",
        ),
    ] = None,
    native: Annotated[
        Optional[bool],
        typer.Option(
            "--native/--no-native",
            help="Override the native_notifications setting",
        ),
    ] = None,
) -> None:
    """Check for due reminders until interrupted with Ctrl+C."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    scheduler = ReminderScheduler(
        TASK_REPO,
        NOTIFICATION_REPO,
        NativeNotifier(
            enabled=native if native is not None else config["native_notifications"]
        ),
        initial_delay_seconds=config["reminder_initial_delay_seconds"],
        interval_seconds=(
            interval if interval is not None else config["reminder_interval_seconds"]
        ),
        reload_before_check=True,
        on_check=lambda result: print_check(console, result),
    )

    console.print(
        f"Watching for reminders every {scheduler.interval_seconds:g}s. "
        "Press Ctrl+C to stop."
    )
    scheduler.start()
    try:
        while scheduler.is_running:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        scheduler.stop()
