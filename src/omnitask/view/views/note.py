# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from omnitask.model.note import Note
from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.time import datetime_to_display_local_datetime_str
from omnitask.view.views.header import header


def notes_view(notes: list[Note], unread_count: int = 0) -> None:
    header("notes", unread_count)

    console = Console()
    if len(notes) == 0:
        console.print("  [bright_black]No notes yet.[/bright_black]")
        return

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("id")
    notes_table.add_column("title")
    notes_table.add_column("updated")
    notes_table.add_column("content", overflow="ellipsis", no_wrap=True, max_width=60)

    for note in notes:
        first_line = note["content"].splitlines()[0] if note["content"] else ""
        notes_table.add_row(
            str(ID_MAP_REPO.associate_id("notes", note["id"] or "")),
            note["title"],
            datetime_to_display_local_datetime_str(note["updated"]),
            first_line,
        )
    console.print(notes_table)


def single_note_view(note: Note) -> None:
    header("note")

    console = Console()
    console.print(
        Panel(
            Markdown(note["content"] or ""),
            title=f"[yellow]{note['title']}[/yellow]",
            subtitle=f"Last edited: {datetime_to_display_local_datetime_str(note['updated'])}",
            box=box.ROUNDED,
        )
    )
