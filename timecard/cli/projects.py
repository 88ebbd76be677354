"""Project reference table commands for timecard CLI.

Handles adding, listing and deleting projects.
"""

import click
from rich.markup import escape
from rich.table import Table

from timecard.cli.common import console, get_data_store, print_error
from timecard.errors import TimecardError


@click.group()
def project() -> None:
    """Manage the project reference table.

    \b
    Examples:
      timecard project add "Site survey" 20-008
      timecard project list
      timecard project delete 20-008
    """
    pass


@project.command("add")
@click.argument("name")
@click.argument("code")
@click.pass_context
def add_project(ctx: click.Context, name: str, code: str) -> None:
    """Add a project with NAME and CODE (e.g. 19-165)."""
    from pydantic import ValidationError

    from timecard.models import Project

    store = get_data_store(ctx)

    try:
        new_project = Project(name=name.strip(), code=code.strip())
    except ValidationError:
        print_error("Project name and code must not be empty.")
        raise SystemExit(1)

    try:
        store.add_project(new_project)
    except TimecardError as e:
        print_error(str(e))
        raise SystemExit(1)

    console.print("[green]Project added.[/green]")


@project.command("list")
@click.pass_context
def list_projects(ctx: click.Context) -> None:
    """List all projects."""
    store = get_data_store(ctx)
    projects = store.get_projects()

    if not projects:
        console.print("[dim]No projects yet. Use 'timecard project add NAME CODE'.[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Project Name")
    table.add_column("Project Code")

    for p in projects:
        table.add_row(escape(p.name), escape(p.code))

    console.print(table)


@project.command("delete")
@click.argument("code")
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_context
def delete_project(ctx: click.Context, code: str, yes: bool) -> None:
    """Delete the project with CODE. Its entries are kept."""
    store = get_data_store(ctx)

    if store.get_project(code) is None:
        print_error(f"Project '{code}' not found.")
        raise SystemExit(1)

    if not yes:
        click.confirm(f"Are you sure you want to delete project {code}?", abort=True)

    store.delete_project(code)
    console.print("Project deleted.")
