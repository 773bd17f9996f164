"""CLI entrypoint for the Gantt planner."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Gantt chart planner with dependency cycle checks")
config_app = typer.Typer(help="Configuration commands")

FILE_OPTION_HELP = "YAML schedule file; the demo schedule is used when omitted"


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Build the runtime shared by every command."""
    try:
        ctx.obj = commands.build_runtime(config_path=config, verbose=verbose)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


@app.command("interactive")
def interactive_cmd(ctx: typer.Context) -> None:
    """Interactive create / edit / test session."""
    commands.interactive(ctx.obj)


@app.command("chart")
def chart_cmd(
    ctx: typer.Context,
    file: Path | None = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """Render the Gantt chart."""
    commands.chart(ctx.obj, file=file)


@app.command("cycles")
def cycles_cmd(
    ctx: typer.Context,
    file: Path | None = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """Check the schedule for circular dependencies."""
    commands.cycles(ctx.obj, file=file)


@app.command("critical-path")
def critical_path_cmd(
    ctx: typer.Context,
    start: int = typer.Argument(..., min=1, help="1-based starting task number"),
    file: Path | None = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """Print the longest dependency chain from a task."""
    commands.critical_path(ctx.obj, start=start, file=file)


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(ctx.obj)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
