# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console

from omnitask.model.entity_id import EntityId
from omnitask.query.sort import sort_items
from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.repository.note import NOTE_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.template.note import get_note_template
from omnitask.terminal.custom_typer import AliasedTyperGroup
from omnitask.terminal.parse import open_editor_for_text, parse_id_list
from omnitask.terminal.validate import get_listed_entities, get_listed_entity
from omnitask.time import now_utc
from omnitask.view.views.note import notes_view, single_note_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    title: str,
    content: Annotated[
        Optional[str],
        typer.Option(
            "--content", "-c", help="Note text; opens $EDITOR when omitted"
        ),
    ] = None,
) -> None:
    text = content if content is not None else open_editor_for_text()
    if text is None:
        typer.echo("Note creation cancelled (no text provided)")
        return

    note = get_note_template()
    note["title"] = title
    note["content"] = text
    note["updated"] = now_utc()

    id = NOTE_REPO.save_new_note(note)
    single_note_view(NOTE_REPO.get_note(id))


@app.command("modify, m")
def modify(
    id: int,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    content: Annotated[Optional[str], typer.Option("--content", "-c")] = None,
    edit: Annotated[
        bool, typer.Option("--edit", "-e", help="Edit the note text in $EDITOR")
    ] = False,
) -> None:
    note = get_listed_entity("notes", id, NOTE_REPO.get_note)
    real_id = cast(EntityId, note["id"])

    if edit:
        content = open_editor_for_text(note["content"])

    NOTE_REPO.modify_note(real_id, title=title, content=content)
    single_note_view(NOTE_REPO.get_note(real_id))


@app.command("delete, d")
def delete(id: str) -> None:
    ids: list[int] = parse_id_list(id)

    notes = get_listed_entities("notes", ids, NOTE_REPO.get_note)
    for note in notes:
        NOTE_REPO.delete_note(cast(EntityId, note["id"]))

    console = Console()
    for note in notes:
        console.print(f"Deleted note [bold]{note['title']}[/bold]")


@app.command("list, ls")
def list_notes() -> None:
    ID_MAP_REPO.clear_ids("notes")
    notes = sort_items(NOTE_REPO.get_all_notes(), ["desc updated"])  # type: ignore[arg-type]
    notes_view(notes, NOTIFICATION_REPO.unread_count())  # type: ignore[arg-type]


@app.command("show, s")
def show(id: int) -> None:
    single_note_view(get_listed_entity("notes", id, NOTE_REPO.get_note))
