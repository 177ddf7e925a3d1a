"""Command-line interface for cronspeak."""

import json
import logging
from typing import Annotated, NoReturn, Optional

import typer

from cronspeak.api import describe_lines, parse
from cronspeak.config import ServiceConfig, configure_logging
from cronspeak.scheduling.errors import CronParseError
from cronspeak.scheduling.fields import At, CronField, Every, Pattern, Range
from cronspeak.scheduling.presets import REBOOT_DESCRIPTION, is_reboot

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cronspeak",
    help="Describe cron schedules in plain English",
    add_completion=False,
    no_args_is_help=True,
)


def _fail(error: CronParseError) -> NoReturn:
    typer.echo(typer.style(f"Error: {error}", fg="red"), err=True)
    raise typer.Exit(1)


@app.command(name="describe")
def describe_cmd(
    expression: Annotated[str, typer.Argument(help="Cron expression or shorthand, e.g. '@daily'")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (text, json)"),
    ] = "text",
) -> None:
    """Describe when a cron expression fires."""
    if format not in ("text", "json"):
        typer.echo(f"Error: Unknown format: {format}", err=True)
        raise typer.Exit(2)

    try:
        lines = describe_lines(expression)
    except CronParseError as e:
        if format == "json":
            typer.echo(json.dumps({
                "expression": expression,
                "valid": False,
                "error": str(e),
                "kind": e.kind.value,
            }, indent=2))
            raise typer.Exit(1)
        _fail(e)

    if format == "json":
        typer.echo(json.dumps({
            "expression": expression,
            "valid": True,
            "description": lines,
        }, indent=2))
    else:
        for line in lines:
            typer.echo(line)


@app.command(name="check")
def check_cmd(
    expression: Annotated[str, typer.Argument(help="Cron expression or shorthand")],
) -> None:
    """Check that a cron expression is valid."""
    if is_reboot(expression):
        typer.echo("valid")
        return
    try:
        parse(expression)
    except CronParseError as e:
        _fail(e)
    typer.echo("valid")


def _pattern_label(field: CronField, pattern: Pattern) -> tuple[str, str]:
    s = field.semantics
    if isinstance(pattern, At):
        return "at", s.display(pattern.value)
    if isinstance(pattern, Every):
        return "every", str(pattern.step)
    if isinstance(pattern, Range):
        text = f"{s.display(pattern.start)}-{s.display(pattern.end)}"
        if pattern.step != 1:
            text += f"/{pattern.step}"
        return "range", text
    return type(pattern).__name__, repr(pattern)


@app.command(name="fields")
def fields_cmd(
    expression: Annotated[str, typer.Argument(help="Cron expression or shorthand")],
) -> None:
    """Show the patterns parsed for each field."""
    from rich.console import Console
    from rich.table import Table

    console = Console()

    if is_reboot(expression):
        console.print(REBOOT_DESCRIPTION)
        return

    try:
        schedule = parse(expression)
    except CronParseError as e:
        _fail(e)

    table = Table(title=f"Fields of {schedule.expression!r}")
    table.add_column("Field", style="cyan")
    table.add_column("Pattern")
    table.add_column("Value", style="green")
    table.add_column("Restricted", justify="center")

    for field in schedule.fields:
        restricted = "[yellow]yes[/yellow]" if field.is_defined else "[dim]no[/dim]"
        for i, pattern in enumerate(field.patterns):
            kind, value = _pattern_label(field, pattern)
            table.add_row(
                field.semantics.noun if i == 0 else "",
                kind,
                value,
                restricted if i == 0 else "",
            )

    console.print(table)


@app.command(name="serve")
def serve_cmd(
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Address to listen on"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Port to listen on"),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", "-t", help="Seconds to wait for a request"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Logging level (debug, info, warning, error)"),
    ] = None,
) -> None:
    """Run the TCP translation service."""
    from cronspeak.server import serve

    try:
        config = ServiceConfig.from_env().with_overrides(
            host=host,
            port=port,
            read_timeout=timeout,
            log_level=log_level.upper() if log_level else None,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    configure_logging(config.log_level)
    try:
        serve(config)
    except OSError as e:
        logger.error("Cannot listen on %s:%d: %s", config.host, config.port, e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
