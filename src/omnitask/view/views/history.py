# SPDX-License-Identifier: MIT

from rich.columns import Columns
from rich.console import Console

from omnitask.model.history import TaskHistory
from omnitask.view.views.header import header
from omnitask.view.views.task import tasks_table


def history_view(history: TaskHistory, unread_count: int = 0) -> None:
    header("history", unread_count)

    console = Console()
    console.print(
        Columns(
            [
                tasks_table(history["past"], f"Old / Past ({len(history['past'])})"),
                tasks_table(
                    history["present"], f"Present / Today ({len(history['present'])})"
                ),
                tasks_table(history["future"], f"Future ({len(history['future'])})"),
            ],
            expand=True,
        )
    )
