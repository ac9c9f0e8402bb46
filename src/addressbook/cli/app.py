"""Typer CLI for the address book."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.table import Table

from addressbook.commands import CommandError, CommandKind, CommandResult
from addressbook.container import build_logic
from addressbook.domain import Person
from addressbook.logic import LogicManager
from addressbook.parser import ParseError

from .deps import get_container

app = typer.Typer(help="Address book command-line interface")
console = Console()

_TABLE_COMMANDS = {CommandKind.LIST.value, CommandKind.FIND.value, CommandKind.SORT.value}


def _render_persons(persons: Sequence[Person], *, title: str = "Address Book") -> None:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Address")
    table.add_column("Tags")
    table.add_column("Remark")
    for position, person in enumerate(persons, start=1):
        table.add_row(
            str(position),
            person.name,
            person.phone,
            person.email,
            person.address,
            ", ".join(person.sorted_tags()),
            person.remark,
        )
    console.print(table)


async def _execute(logic: LogicManager, command_text: str) -> CommandResult | None:
    try:
        return await logic.execute(command_text)
    except (ParseError, CommandError) as exc:
        typer.echo(str(exc))
        return None


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    container = get_container()
    settings = container.settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Log level:\t" + settings.log_level)


@app.command("run")
def run(
    words: list[str] = typer.Argument(..., help="Command line, e.g. remark 1 r/Likes tea"),
) -> None:
    """Execute a single address book command."""

    container = get_container()
    command_text = " ".join(words)

    async def _run() -> CommandResult | None:
        logic = await build_logic(container)
        return await _execute(logic, command_text)

    result = asyncio.run(_run())
    if result is None:
        raise typer.Exit(code=1)
    typer.echo(result.feedback)


@app.command("shell")
def shell() -> None:
    """Read commands interactively until ``exit``."""

    container = get_container()

    async def _loop() -> None:
        logic = await build_logic(container)
        _render_persons(logic.filtered_persons())
        while True:
            try:
                line = typer.prompt("addressbook", default="", show_default=False)
            except typer.Abort:
                return
            if not line.strip():
                continue
            result = await _execute(logic, line)
            if result is None:
                continue
            typer.echo(result.feedback)
            if result.exit:
                return
            if line.split()[0] in _TABLE_COMMANDS:
                _render_persons(logic.filtered_persons())

    asyncio.run(_loop())


@app.command("table")
def table() -> None:
    """Render every stored person."""

    container = get_container()

    async def _load() -> Sequence[Person]:
        logic = await build_logic(container)
        return logic.filtered_persons()

    _render_persons(asyncio.run(_load()))
