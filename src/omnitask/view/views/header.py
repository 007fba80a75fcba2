# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from omnitask.view.state import get_show_header


def header(sub_header: Optional[str] = None, unread_count: int = 0) -> None:
    """Print the application header.

    Args:
        sub_header: Optional sub-header text to display
        unread_count: Number of unread notifications to flag next to the title
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    bell = ""
    if unread_count > 0:
        bell = f" [bold sandy_brown]({unread_count} unread)[/bold sandy_brown]"

    print(Padding(f"[dark_orange]omnitask[/dark_orange]{bell}", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
