# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console

from omnitask.model.entity_id import EntityId
from omnitask.model.meeting import Meeting
from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.repository.meeting import MEETING_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.template.meeting import get_meeting_template
from omnitask.terminal.custom_typer import AliasedTyperGroup
from omnitask.terminal.parse import parse_date, parse_id_list, parse_time
from omnitask.terminal.validate import get_listed_entities
from omnitask.time import meeting_start_local, now_utc
from omnitask.view.views.meeting import meetings_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    title: str,
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-dt",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    time: Annotated[
        Optional[str],
        typer.Option("--time", "-tm", parser=parse_time, help="HH:mm, e.g. 9:30"),
    ] = None,
    platform: Annotated[
        Optional[str],
        typer.Option("--platform", "-p", help="e.g. Zoom, Google Meet, Room 4"),
    ] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
) -> None:
    meeting = get_meeting_template()
    meeting["title"] = title
    if date is not None:
        meeting["date"] = date
    if time is not None:
        meeting["time"] = time
    if platform is not None:
        meeting["platform"] = platform
    if description is not None:
        meeting["description"] = description

    MEETING_REPO.save_new_meeting(meeting)
    list_meetings()


@app.command("delete, d")
def delete(id: str) -> None:
    ids: list[int] = parse_id_list(id)

    meetings = get_listed_entities("meetings", ids, MEETING_REPO.get_meeting)
    for meeting in meetings:
        MEETING_REPO.delete_meeting(cast(EntityId, meeting["id"]))

    console = Console()
    for meeting in meetings:
        console.print(f"Deleted meeting [bold]{meeting['title']}[/bold]")


def split_meetings(
    meetings: list[Meeting],
) -> tuple[list[Meeting], list[Meeting]]:
    """Split into (upcoming, past); past is most recent first."""
    now = now_utc()
    upcoming: list[Meeting] = []
    past: list[Meeting] = []
    for meeting in meetings:
        start = meeting_start_local(meeting["date"], meeting["time"])
        if start is not None and start >= now:
            upcoming.append(meeting)
        else:
            past.append(meeting)
    past.reverse()
    return upcoming, past


@app.command("list, ls")
def list_meetings() -> None:
    ID_MAP_REPO.clear_ids("meetings")
    upcoming, past = split_meetings(MEETING_REPO.get_all_meetings())
    meetings_view(upcoming, past, NOTIFICATION_REPO.unread_count())
