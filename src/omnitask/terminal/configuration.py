# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from omnitask import configuration
from omnitask.configuration import Configuration
from omnitask.repository.configuration import CONFIGURATION_REPO
from omnitask.terminal.custom_typer import AliasedTyperGroup
from omnitask.terminal.validate import validate_positive_seconds

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")
    return log_level.upper()


def enabled_markup(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", enabled_markup(config["show_header"]))
    table.add_row(
        "native_notifications", enabled_markup(config["native_notifications"])
    )
    table.add_row(
        "reminder_initial_delay_seconds", str(config["reminder_initial_delay_seconds"])
    )
    table.add_row("reminder_interval_seconds", str(config["reminder_interval_seconds"]))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] else "None (platform default)",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(configuration_table(CONFIGURATION_REPO.get_config()))
    console.print()
    console.print(f"Data directory: {configuration.DATA_PATH}")
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the omnitask header above views",
        ),
    ] = None,
    native_notifications: Annotated[
        Optional[bool],
        typer.Option(
            "--native-notifications/--no-native-notifications",
            help="Enable/disable desktop notifications for due reminders",
        ),
    ] = None,
    reminder_initial_delay_seconds: Annotated[
        Optional[float],
        typer.Option(
            "--reminder-initial-delay",
            callback=validate_positive_seconds,
            help="Seconds before the first reminder check of `watch`",
        ),
    ] = None,
    reminder_interval_seconds: Annotated[
        Optional[float],
        typer.Option(
            "--reminder-interval",
            callback=validate_positive_seconds,
            help="Seconds between reminder checks of `watch`",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="Console log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        native_notifications=native_notifications,
        reminder_initial_delay_seconds=reminder_initial_delay_seconds,
        reminder_interval_seconds=reminder_interval_seconds,
        log_level=log_level,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        configuration_table(
            CONFIGURATION_REPO.get_config(), title="Updated Configuration"
        )
    )
