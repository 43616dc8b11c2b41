"""Mashov CLI - Main commands."""
import asyncio
import json
import logging
from typing import Any, Callable, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from mashovpy import MashovClient, LoginRequest, MashovException, Resource, setup_logging

app = typer.Typer(
    name="mashov",
    help="Mashov student portal CLI",
    add_completion=False
)
console = Console()


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


class Account:
    """Credentials collected from the top-level options."""

    def __init__(self, username: str, password: Optional[str], semel: int, year: int):
        self.username = username
        self.password = password
        self.semel = semel
        self.year = year

    def to_login(self) -> LoginRequest:
        password = self.password
        if not password:
            password = typer.prompt("Password", hide_input=True)
        return LoginRequest(
            username=self.username,
            password=password,
            semel=self.semel,
            year=self.year
        )


@app.callback()
def main_options(
    ctx: typer.Context,
    username: str = typer.Option(..., "--username", "-u", envvar="MASHOV_USERNAME", help="Mashov username"),
    password: str = typer.Option(None, "--password", "-p", envvar="MASHOV_PASSWORD", help="Mashov password"),
    semel: int = typer.Option(..., "--semel", "-s", envvar="MASHOV_SEMEL", help="School institution code"),
    year: int = typer.Option(..., "--year", "-y", envvar="MASHOV_YEAR", help="School year"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Log in to Mashov and read student data."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        setup_logging(logging.DEBUG)
    ctx.obj = Account(username, password, semel, year)


def _fetch(ctx: typer.Context, resource: Resource) -> List[Any]:
    """Log in and fetch one resource, exiting with code 1 on failure."""
    login = ctx.obj.to_login()

    async def do_fetch():
        async with MashovClient(login) as mashov:
            return await mashov.fetch_resource(resource)

    try:
        return run_async(do_fetch())
    except MashovException as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _print_table(title: str, columns: List[str], rows: List[Any], row: Callable[[dict], List[Any]]):
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for item in rows:
        table.add_row(*[("" if value is None else str(value)) for value in row(item)])
    console.print(table)


@app.command()
def grades(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
):
    """Show grades."""
    items = _fetch(ctx, Resource.GRADES)
    if as_json:
        console.print_json(json.dumps(items))
        return

    _print_table(
        "Grades",
        ["Date", "Subject", "Event", "Type", "Grade", "Teacher"],
        items,
        lambda g: [
            (g.get("eventDate") or "")[:10],
            g.get("subjectName"),
            g.get("gradingEvent"),
            g.get("gradeType"),
            g.get("textualGrade") or g.get("grade"),
            g.get("teacherName"),
        ]
    )


@app.command()
def groups(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
):
    """Show study groups."""
    items = _fetch(ctx, Resource.GROUPS)
    if as_json:
        console.print_json(json.dumps(items))
        return

    _print_table(
        "Groups",
        ["ID", "Group", "Subject", "Level", "Teachers"],
        items,
        lambda g: [
            g.get("groupId"),
            g.get("groupName"),
            g.get("subjectName"),
            g.get("groupLevel"),
            ", ".join(t.get("teacherName", "") for t in g.get("groupTeachers") or []),
        ]
    )


@app.command()
def behavior(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
):
    """Show attendance and behavior events."""
    items = _fetch(ctx, Resource.BEHAVIOR)
    if as_json:
        console.print_json(json.dumps(items))
        return

    _print_table(
        "Behavior",
        ["Date", "Lesson", "Subject", "Event", "Justification", "Reporter"],
        items,
        lambda e: [
            (e.get("lessonDate") or "")[:10],
            e.get("lesson"),
            e.get("subject"),
            e.get("achvaName"),
            e.get("justification"),
            e.get("reporter"),
        ]
    )


@app.command()
def session(ctx: typer.Context):
    """Log in and print the decoded session."""
    login = ctx.obj.to_login()

    async def do_login():
        async with MashovClient(login) as mashov:
            return mashov.get_session()

    try:
        info = run_async(do_login())
    except MashovException as e:
        console.print(f"[red]Login failed: {e}[/red]")
        raise typer.Exit(1)

    console.print_json(json.dumps(info))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
