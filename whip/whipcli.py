#!/usr/bin/env python3
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from . import __version__
from .commands.config_command import handle_config
from .commands.generate_command import handle_generate
from .commands.stats_command import handle_stats
from .schedule_api.exceptions import WhipError
from .utils.config import default_config_path, load_config, load_env_vars, resolve_option
from .utils.dates import month_before, parse_cli_date
from .utils.logger import configure_logging, get_logger

log = get_logger(__name__)


@dataclass
class CliState:
    config_path: Path
    config: Dict[str, Any] = field(default_factory=dict)
    input: Optional[str] = None

    def option(self, cli_value: Optional[Any], key: str, default: Any = None) -> Any:
        return resolve_option(cli_value, self.config, key, default)


def fail(error: Exception):
    print(f"Error: {error}", file=sys.stderr)
    raise typer.Exit(code=1)


def version_callback(value: bool):
    if value:
        print(f"whip {__version__}")
        raise typer.Exit()


# Create app instance
app = typer.Typer(
    name="whip",
    help="Whip - Generate recurring daily TODO lists from a schedule and track them.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Config yaml file (default: $WHIP_CONFIG or ~/.whip_config)."),
    input_path: Optional[str] = typer.Option(None, "--input", "-i", help="Input schedule file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose log output."),
    version: bool = typer.Option(False, "--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
):
    """Whip - Generate recurring daily TODO lists from a schedule and track them."""
    load_env_vars()
    configure_logging(verbose=verbose)
    path = Path(config_path).expanduser() if config_path else default_config_path()
    try:
        config = load_config(path)
    except WhipError as e:
        fail(e)
    ctx.obj = CliState(config_path=path, config=config)
    ctx.obj.input = ctx.obj.option(input_path, "input")
    log.debug(f"Using config {path}: {config}")

    if ctx.invoked_subcommand is None:
        run_generate(ctx.obj)


@app.command("generate")
def generate(
    ctx: typer.Context,
    date_str: Optional[str] = typer.Option(None, "--date", "-d", help="Override date (default is today); YYYY-MM-DD or natural language."),
    path_format: Optional[str] = typer.Option(None, "--format", "-f", help="strftime path format of the daily log file, e.g. ~/logs/%Y/%Y-%m-%d.md."),
    yesterday: Optional[bool] = typer.Option(None, "--yesterday/--no-yesterday", help="Look back at yesterday's file to carry over anything overdue. Default: on."),
    force: Optional[bool] = typer.Option(None, "--force/--no-force", help="Force (re)generation of an existing file. Default: off."),
    open_file: Optional[bool] = typer.Option(None, "--open/--no-open", help="Open the generated file in the default editor. Default: on."),
):
    """Generate a daily TODO list (the default when no command is given)."""
    run_generate(ctx.obj, date_str, path_format, yesterday, force, open_file)


def run_generate(
    state: CliState,
    date_str: Optional[str] = None,
    path_format: Optional[str] = None,
    yesterday: Optional[bool] = None,
    force: Optional[bool] = None,
    open_file: Optional[bool] = None,
):
    try:
        on = parse_cli_date(date_str)
        handle_generate(
            schedule_path=state.input,
            path_format=state.option(path_format, "format"),
            on=on,
            yesterday=state.option(yesterday, "yesterday", True),
            force=state.option(force, "force", False),
            open_file=state.option(open_file, "open", True),
        )
    except WhipError as e:
        fail(e)


@app.command("stats")
def stats(
    ctx: typer.Context,
    from_str: Optional[str] = typer.Option(None, "--from", "-f", help="Stat start date (default = a month before --to)."),
    to_str: Optional[str] = typer.Option(None, "--to", "-t", help="Stat end date, exclusive (default = today)."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output CSV file. Default: stats.csv."),
    path_format: Optional[str] = typer.Option(None, "--format", help="strftime path format of the daily log files."),
    open_file: Optional[bool] = typer.Option(None, "--open/--no-open", help="Open the generated stats in the default viewer. Default: on."),
):
    """Generate stats from past TODOs."""
    state: CliState = ctx.obj
    try:
        end = parse_cli_date(to_str)
        start = parse_cli_date(from_str, default=month_before(end))
        handle_stats(
            schedule_path=state.input,
            path_format=state.option(path_format, "format"),
            start=start,
            end=end,
            output=state.option(output, "output", "stats.csv"),
            open_file=state.option(open_file, "open", True),
        )
    except WhipError as e:
        fail(e)


@app.command("config")
def config(
    ctx: typer.Context,
    key: Optional[str] = typer.Argument(None, help="Config key to get or set."),
    value: Optional[str] = typer.Argument(None, help='New value ("yes"/"no" become booleans, "undefined" removes the key).'),
):
    """Get or set config parameters."""
    state: CliState = ctx.obj
    try:
        state.config = handle_config(state.config, state.config_path, key, value)
    except WhipError as e:
        fail(e)


# Short aliases
app.command("g", hidden=True)(generate)
app.command("s", hidden=True)(stats)
app.command("stat", hidden=True)(stats)
app.command("c", hidden=True)(config)


if __name__ == "__main__":
    app()
