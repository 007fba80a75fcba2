# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from omnitask.model.report import ReportPeriod
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.repository.task import TASK_REPO
from omnitask.service.export import ExportFormat, export_report
from omnitask.service.report import generate_report
from omnitask.terminal.parse import parse_date
from omnitask.time import today_local_date_str
from omnitask.view.views.report import report_view


def report(
    period: Annotated[
        ReportPeriod,
        typer.Argument(case_sensitive=False, help="DAY, WEEK, MONTH or YEAR"),
    ] = ReportPeriod.WEEK,
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-dt",
            parser=parse_date,
            help="Reference date; valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    export: Annotated[
        Optional[ExportFormat],
        typer.Option("--export", "-x", case_sensitive=False, help="csv or doc"),
    ] = None,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            file_okay=False,
            help="Directory the exported file is written to",
        ),
    ] = Path("."),
) -> None:
    """Tasks for a day, a Tuesday-to-Monday work week, a month or a year."""
    reference_date = date if date is not None else today_local_date_str()
    try:
        generated = generate_report(TASK_REPO.get_all_tasks(), period, reference_date)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--date")

    report_view(generated, NOTIFICATION_REPO.unread_count())

    if export is not None:
        output.mkdir(parents=True, exist_ok=True)
        path = export_report(generated, export, output)
        Console().print(f"\n  Exported to [bold]{path}[/bold]")
