# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from omnitask.model.meeting import Meeting
from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.view.views.header import header


def meetings_table(meetings: list[Meeting], title: str, dim: bool = False) -> Table:
    table = Table(box=box.SIMPLE, title=title, title_justify="left")
    table.add_column("id")
    table.add_column("date")
    table.add_column("time")
    table.add_column("title")
    table.add_column("platform")
    table.add_column("description")

    for meeting in meetings:
        row = [
            str(ID_MAP_REPO.associate_id("meetings", meeting["id"] or "")),
            meeting["date"],
            meeting["time"],
            meeting["title"],
            meeting["platform"],
            meeting["description"],
        ]
        if dim:
            row = [f"[bright_black]{value}[/bright_black]" for value in row]
        table.add_row(*row)
    return table


def meetings_view(
    upcoming: list[Meeting], past: list[Meeting], unread_count: int = 0
) -> None:
    header("meetings", unread_count)

    console = Console()
    console.print(meetings_table(upcoming, f"Upcoming ({len(upcoming)})"))
    console.print(meetings_table(past, f"Past ({len(past)})", dim=True))
