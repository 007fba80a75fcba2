# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from omnitask.terminal import (
    calendar,
    configuration,
    meeting,
    note,
    notification,
    task,
)
from omnitask.terminal.custom_typer import OrderedTyperGroup
from omnitask.terminal.history import history
from omnitask.terminal.report import report
from omnitask.terminal.watch import watch
from omnitask.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="OmniTask - Tasks, meetings, notes and daily reminders in the CLI",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t")
app.add_typer(calendar.app, name="calendar, ca")
app.add_typer(meeting.app, name="meeting, m")
app.add_typer(note.app, name="note, n")
app.add_typer(notification.app, name="notification, no")
app.add_typer(configuration.app, name="config, c")
app.command(name="history, h")(history)
app.command(name="report, r")(report)
app.command(name="watch, w")(watch)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    OmniTask - Tasks, meetings, notes and daily reminders in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
