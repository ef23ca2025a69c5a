"""vsselect CLI - Choose the MSBuild target used for compile_commands.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from vsselect.config import ScanError, Selection, SelectorConfig, Step
from vsselect.msbuild.locator import find_build_files
from vsselect.msbuild.project import parse_project
from vsselect.status import relative_path, statusline, summary
from vsselect.wizard import Halted, InvalidChoice, answer, begin, next_prompt

console = Console()

_SCAN_ERRORS = {
    ScanError.DIRECTORY_NOT_FOUND: "Directory not found or not readable",
    ScanError.NO_PROJECTS: "No project files found",
}


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option("--verbose", is_flag=True, help="Show debug output")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """vsselect - Select a Visual Studio build target from a source tree."""
    _configure_logging(verbose, quiet)
    ctx.obj = {"verbose": verbose, "quiet": quiet}


def _config(ctx: click.Context, **kwargs) -> SelectorConfig:
    return SelectorConfig(verbose=ctx.obj["verbose"], quiet=ctx.obj["quiet"], **kwargs)


@cli.command("scan")
@click.argument("path", default=".", type=click.Path())
@click.option("--exclude", multiple=True, help="Directory names to skip")
@click.pass_context
def scan_cmd(ctx: click.Context, path: str, exclude: tuple[str, ...]) -> None:
    """List solution and project files under PATH."""
    config = _config(ctx, root=path, exclude_patterns=list(exclude))
    located = find_build_files(config)
    if located.error == ScanError.DIRECTORY_NOT_FOUND:
        console.print(f"[red]{_SCAN_ERRORS[located.error]}:[/red] {located.root}")
        ctx.exit(1)

    table = Table(title=f"VS files: {Path(located.root).name}", show_edge=False)
    table.add_column("Kind", style="bold")
    table.add_column("Path")
    for sln in located.solutions:
        table.add_row("solution", relative_path(sln, located.root))
    for proj in located.projects:
        table.add_row("project", relative_path(proj, located.root))
    console.print(table)

    if not located.ok:
        console.print(f"[red]{_SCAN_ERRORS[located.error]}[/red]")
        ctx.exit(1)


@cli.command("inspect")
@click.argument("project", type=click.Path())
@click.pass_context
def inspect_cmd(ctx: click.Context, project: str) -> None:
    """Show the platforms and configurations declared by PROJECT."""
    parsed = parse_project(project)
    if not parsed.ok:
        console.print(f"[red]Cannot read project:[/red] {parsed.error}")
        ctx.exit(1)

    table = Table(title=Path(project).name, show_edge=False)
    table.add_column("Axis", style="bold")
    table.add_column("Values")
    table.add_row("Platforms", ", ".join(parsed.platforms) or "-")
    table.add_row("Configurations", ", ".join(parsed.configurations) or "-")
    console.print(table)


@cli.command("select")
@click.argument("path", default=".", type=click.Path())
@click.option("--solution", default=None, help="Solution file, relative to PATH or absolute")
@click.option("--project", default=None, help="Project file, relative to PATH or absolute")
@click.option("--platform", default=None, help="Platform name, e.g. x64")
@click.option("--configuration", default=None, help="Configuration name, e.g. Debug")
@click.option("--exclude", multiple=True, help="Directory names to skip")
@click.option("-o", "--output", "output_path", default=".vsselect.json", help="Selection file path")
@click.pass_context
def select_cmd(
    ctx: click.Context,
    path: str,
    solution: str | None,
    project: str | None,
    platform: str | None,
    configuration: str | None,
    exclude: tuple[str, ...],
    output_path: str,
) -> None:
    """Resolve a selection under PATH and save it to the selection file."""
    config = _config(ctx, root=path, exclude_patterns=list(exclude), output_path=output_path)
    session = begin(config)
    if isinstance(session, Halted):
        console.print(f"[red]{_SCAN_ERRORS[session.reason]}[/red] in {Path(path).resolve()}")
        ctx.exit(1)

    answers = {
        Step.SOLUTION: solution,
        Step.PROJECT: project,
        Step.PLATFORM: platform,
        Step.CONFIGURATION: configuration,
    }

    prompt = next_prompt(session)
    while prompt is not None:
        choice = answers[prompt.step]
        if choice is None:
            raise click.UsageError(
                f"--{prompt.step.value} is required; choose from: {', '.join(prompt.labels)}"
            )
        try:
            session = answer(session, prompt.step, choice)
        except InvalidChoice as e:
            raise click.UsageError(str(e))
        prompt = next_prompt(session)

    _write_selection(session, config.output_path)
    if not config.quiet:
        console.print(summary(session))
        console.print(f"[green]Selection written to:[/green] {config.output_path}")

    if config.verbose:
        detail = Table(title="Resolved Selection", show_edge=False)
        detail.add_column("Field", style="bold")
        detail.add_column("Value")
        for key, value in session.payload().items():
            detail.add_row(key, value or "-")
        console.print(detail)


def _write_selection(selection: Selection, output_path: str) -> None:
    data = {"root": selection.root, **selection.payload()}
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(data, indent=2))


def _read_selection(selection_file: str) -> Selection | None:
    path = Path(selection_file)
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Cannot read selection file {selection_file}: {e}")
    if not isinstance(data, dict):
        raise click.ClickException(f"Selection file {selection_file} does not hold a JSON object")
    return Selection(
        root=data.get("root", str(path.parent.resolve())),
        solution=data.get("solution"),
        project=data.get("project"),
        platform=data.get("platform"),
        configuration=data.get("configuration"),
    )


@cli.command("status")
@click.option("-f", "--file", "selection_file", default=".vsselect.json", help="Selection file path")
def status_cmd(selection_file: str) -> None:
    """Print the status line for the saved selection."""
    selection = _read_selection(selection_file)
    click.echo(statusline(selection) if selection else "")


@cli.command("clear")
@click.option("-f", "--file", "selection_file", default=".vsselect.json", help="Selection file path")
@click.pass_context
def clear_cmd(ctx: click.Context, selection_file: str) -> None:
    """Forget the saved selection."""
    path = Path(selection_file)
    if path.is_file():
        path.unlink()
    if not ctx.obj["quiet"]:
        console.print("VS selection cleared.")


if __name__ == "__main__":
    cli()
