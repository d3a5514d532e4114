"""Command-line entry point used by the Alfred workflow."""

from __future__ import annotations

import json
import logging
import shlex
import sys
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from opendir.config import OpendirConfig
from opendir.errors import InputError, InternalError, ToolError
from opendir.invoker import build_command, invoke
from opendir.output import OutputMode, parse_output_mode, render
from opendir.pipeline import search as run_search
from opendir.providers import DirectoryProvider

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Fuzzy-find directories and open them with a configured program.",
)


@dataclass
class CliState:
    config_path: Path | None = None
    output: str | None = None
    verbose: bool = False


def _configure_logging(verbose: bool) -> None:
    # stdout carries the Script Filter payload, logs go to stderr.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _parse_mode(value: str) -> OutputMode:
    try:
        return parse_output_mode(value)
    except click.BadParameter as exc:
        raise InputError(
            message=exc.format_message(),
            code="E1004",
            details={"output": value, "choices": [mode.value for mode in OutputMode]},
        ) from exc


def _emit_error(error: ToolError, mode: OutputMode) -> None:
    if mode is OutputMode.TEXT:
        console = Console(stderr=True)
        console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")
        if error.suggestion:
            console.print(f"[bold blue]Suggestion:[/bold blue] {escape(error.suggestion.fix)}")
    else:
        click.echo(json.dumps({"error": error.to_dict()}, sort_keys=True, default=str), err=True)
    raise SystemExit(error.exit_code)


class OpendirCommand(TyperCommand):
    """Resolves configuration and maps errors to exit codes.

    Nothing is written to stdout once an error occurs.
    """

    def invoke(self, ctx: click.Context) -> Any:
        state = ctx.find_object(CliState) or CliState()
        mode = OutputMode.ALFRED
        try:
            try:
                if state.output is not None:
                    mode = _parse_mode(state.output)
                config = OpendirConfig(state.config_path)
                if state.output is None:
                    mode = _parse_mode(str(config.get("output")))
                ctx.meta["opendir_config"] = config
                ctx.meta["opendir_output"] = mode
                return super().invoke(ctx)
            except ToolError:
                raise
            except (click.ClickException, click.exceptions.Exit, click.Abort):
                raise
            except Exception as exc:
                details = {}
                if state.verbose:
                    details["traceback"] = traceback.format_exc()
                raise InternalError(message=f"Internal error: {exc}", details=details) from exc
        except ToolError as exc:
            logger.debug("command failed with %s", exc.code)
            _emit_error(exc, mode)


def _config(ctx: click.Context) -> OpendirConfig:
    return ctx.meta["opendir_config"]


def _output_mode(ctx: click.Context) -> OutputMode:
    return ctx.meta["opendir_output"]


@app.callback()
def _main_callback(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug information to stderr")] = False,
    output: Annotated[str | None, typer.Option("--output", "-o", help="Output mode: alfred|text")] = None,
    config: Annotated[Path | None, typer.Option("--config", help="TOML configuration file")] = None,
) -> None:
    """Fuzzy-find directories and open them with a configured program."""
    _configure_logging(verbose)
    ctx.obj = CliState(config_path=config, output=output, verbose=verbose)


@app.command(cls=OpendirCommand)
def search(
    ctx: typer.Context,
    pattern: Annotated[str, typer.Option("--pattern", "-p", help="Part of a directory name")],
    root: Annotated[list[str] | None, typer.Option("--root", help="Directory to list, overrides DIRECTORY_PATH")] = None,
    binary: Annotated[str | None, typer.Option(help="Program shown in the subtitle, overrides BINARY_TO_EXECUTE")] = None,
) -> None:
    """List the directories matching PATTERN, best match first."""
    config = _config(ctx)
    config.override(directory_path=root or None, binary_to_execute=binary)

    roots = config.roots()
    action_label = config.binary()
    entries = DirectoryProvider(roots).get_entries()
    records = run_search(entries, pattern.strip(), action_label, roots=roots)
    click.echo(render(records, _output_mode(ctx)))


@app.command("open", cls=OpendirCommand)
def open_directory(
    ctx: typer.Context,
    path: Annotated[str, typer.Option("--path", help="Directory chosen from the search results")],
    binary: Annotated[str | None, typer.Option(help="Program to run, overrides BINARY_TO_EXECUTE")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print the command instead of running it")] = False,
) -> None:
    """Run the configured program with PATH as its argument."""
    config = _config(ctx)
    config.override(binary_to_execute=binary)

    program = config.binary()
    if dry_run:
        click.echo(shlex.join(build_command(program, path)))
        return
    invoke(program, path)


def main() -> None:
    app(prog_name="opendir")


if __name__ == "__main__":
    main()
