# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

ALIAS_SEPARATOR = re.compile(r"\s*,\s*")


def command_aliases(registered_name: str) -> list[str]:
    """'task, t' -> ['task', 't']"""
    return ALIAS_SEPARATOR.split(registered_name.strip())


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered as "name, alias" and can be invoked
    by any of those names.
    """

    def resolve_registered_name(self, name: str) -> str:
        for registered_name in self.commands:
            if name in command_aliases(registered_name):
                return registered_name
        return name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_registered_name(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""
        # Skip a second registration under one of the aliases
        existing = self.resolve_registered_name(name)
        if existing != name and existing in self.commands:
            return
        super().add_command(cmd, name)


class OrderedTyperGroup(AliasedTyperGroup):
    """Top-level group listing commands in dashboard order instead of alphabetically."""

    DASHBOARD_ORDER = [
        "task, t",
        "calendar, ca",
        "meeting, m",
        "history, h",
        "note, n",
        "report, r",
        "notification, no",
        "watch, w",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.DASHBOARD_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
