# SPDX-License-Identifier: MIT

import os
import re
import subprocess
import tempfile
from typing import Optional

import pendulum
import typer

from omnitask.time import date_from_str, date_to_str

# Keyword -> offset in days from today
DATE_KEYWORDS = {
    "today": 0,
    "t": 0,
    "yesterday": -1,
    "y": -1,
    "tomorrow": 1,
    "o": 1,
}
TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
ID_RANGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$")


def parse_date(date_param: Optional[str | int]) -> Optional[str]:
    """
    Parse a date option into a 'YYYY-MM-DD' string.

    Accepts YYYY-MM-DD, today, yesterday, tomorrow (or t, y, o) and day
    offsets like 1, -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip().lower()
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_to_str(date_from_str(date))
        except ValueError as e:
            raise typer.BadParameter(str(e))

    if re.match(r"^-?\d+$", date):
        offset = int(date)
    elif date in DATE_KEYWORDS:
        offset = DATE_KEYWORDS[date]
    else:
        raise typer.BadParameter(f"Unrecognised date '{date_param}'")
    return date_to_str(pendulum.today("local").date().add(days=offset))


def parse_time(time_str: Optional[str]) -> Optional[str]:
    """Normalise (H)H:mm to HH:mm."""
    if time_str is None:
        return None

    time_match = TIME_PATTERN.match(time_str.strip())
    if time_match is None:
        raise typer.BadParameter(f"Expected a time like 9:00 or 17:30, got '{time_str}'")

    hour, minute = int(time_match.group(1)), int(time_match.group(2))
    if hour > 23 or minute > 59:
        raise typer.BadParameter(f"'{time_str}' is not a time of day")
    return f"{hour:02d}:{minute:02d}"


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse listed ids such as "4", "1,2,7" or "1,3-5,8" into sorted unique ints.

    Raises:
        typer.BadParameter: on anything that is not an id or an ascending range
    """
    ids: set[int] = set()
    for part in (piece.strip() for piece in id_param.split(",")):
        if part == "":
            continue
        if part.isdigit():
            ids.add(int(part))
            continue

        range_match = ID_RANGE_PATTERN.match(part)
        if range_match is None:
            raise typer.BadParameter(f"'{part}' is neither an id nor a range like 3-5")
        first, last = int(range_match.group(1)), int(range_match.group(2))
        if first > last:
            raise typer.BadParameter(f"Range '{part}' must run from low to high")
        ids.update(range(first, last + 1))

    if not ids:
        raise typer.BadParameter("No ids given")
    return sorted(ids)


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Edit text in $EDITOR (nano when unset).

    Returns the text without trailing newlines, or None when it was left blank.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".md") as note_file:
        note_file.write(initial_text or "")
        note_file.flush()
        subprocess.run([editor, note_file.name], check=True)

        with open(note_file.name, encoding="utf-8") as edited:
            text = edited.read()

    return text.rstrip("\n") if text.strip() else None
