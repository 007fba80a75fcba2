# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from omnitask.color import REMINDER_COLOR, status_markup
from omnitask.model.report import Report, ReportPeriod
from omnitask.time import today_local_date_str
from omnitask.view.views.header import header


def report_view(report: Report, unread_count: int = 0) -> None:
    header(f"report: {str(report['period']).lower()}", unread_count)

    console = Console()
    console.print()
    console.print("  [bold]OmniTask Report[/bold]")
    console.print(f"  Period: [bold]{report['range']['label']}[/bold]")
    console.print(f"  Generated: {today_local_date_str()}")

    if report["period"] == ReportPeriod.WEEK:
        console.print(
            "  [bright_black]Weekly reports cover Tuesday through Monday based on "
            f"the selected date ({report['reference_date']}). Tasks on weekends "
            "(Saturday & Sunday) are excluded.[/bright_black]"
        )

    if len(report["tasks"]) == 0:
        console.print("\n  [bright_black]No tasks found for this period.[/bright_black]")
        return

    report_table = Table(box=box.SIMPLE)
    report_table.add_column("task")
    report_table.add_column("date")
    report_table.add_column("status")
    report_table.add_column("description / remarks")

    for task in report["tasks"]:
        title = task["title"]
        if task["reminder"]:
            title += f"\n[{REMINDER_COLOR}]Reminder Set[/{REMINDER_COLOR}]"
        details = task["description"]
        if task["remarks"]:
            details += f"\n[italic medium_purple]Note: {task['remarks']}[/italic medium_purple]"
        report_table.add_row(title, task["date"], status_markup(task["status"]), details)

    console.print(report_table)
