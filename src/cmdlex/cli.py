"""Diagnostic command line for the lexer."""

from __future__ import annotations

import json
from importlib.metadata import PackageNotFoundError, version

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdlex.config import LexerConfig
from cmdlex.debug_log import format_log_buffer, setup_debug_logging, teardown_debug_logging
from cmdlex.lexer import Lexer
from cmdlex.lexing.arg import remove_argument
from cmdlex.lexing.driver import TooManyArgumentsError
from cmdlex.lexing.trace import StateLog, to_literal_format
from cmdlex.native import NativeSplitterUnavailableError


def _installed_version() -> str:
    try:
        return version("cmdlex")
    except PackageNotFoundError:
        return "dev"


def _make_lexer(max_arguments: int | None) -> Lexer:
    try:
        if max_arguments is None:
            return Lexer(LexerConfig.from_env())
        return Lexer(LexerConfig(max_argument_count=max_arguments))
    except ValidationError as error:
        raise click.BadParameter(str(error), param_hint="--max-arguments") from None


def _show_result(executable_name: str, arguments: list[str]) -> None:
    click.echo(f'exe: "{to_literal_format(executable_name)}"')
    for index, argument in enumerate(arguments, start=1):
        click.echo(f'{index:>3}: "{to_literal_format(argument)}"')


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option(
    "--max-arguments",
    type=int,
    default=None,
    help="Argument limit (defaults to $CMDLEX_MAX_ARGUMENTS or 250)",
)
@click.option("--debug", is_flag=True, help="Print captured debug logs to stderr on exit")
@click.pass_context
def cli(ctx: click.Context, version: bool, max_arguments: int | None, debug: bool) -> None:
    """Split and build Windows command lines the Visual C++ runtime way."""
    if version:
        click.echo(f"cmdlex {_installed_version()}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    if debug:
        setup_debug_logging()

        def _dump_logs() -> None:
            for line in format_log_buffer():
                click.echo(line, err=True)
            teardown_debug_logging()

        ctx.call_on_close(_dump_logs)

    ctx.obj = _make_lexer(max_arguments)


@cli.command()
@click.argument("command_line")
@click.option("--native", is_flag=True, help="Use CommandLineToArgvW instead")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_obj
def split(lexer: Lexer, command_line: str, native: bool, as_json: bool) -> None:
    """Split COMMAND_LINE into an executable name and arguments.

    \b
    Examples:
        cmdlex split 'program.exe "hello\\"there"'
        cmdlex split --json 'foo bar bear'
    """
    try:
        if native:
            result = lexer.native_parse_exe_and_args(command_line)
        else:
            result = lexer.parse_exe_and_args(command_line)
    except (TooManyArgumentsError, NativeSplitterUnavailableError, OSError) as error:
        raise click.ClickException(str(error)) from error

    if as_json:
        click.echo(json.dumps(result.to_dict()))
        return
    _show_result(result.executable_name, list(result.arguments))


@cli.command()
@click.argument("arguments", nargs=-1)
@click.option("--exe", "executable_name", default=None, help="Executable name to lead with")
@click.pass_obj
def join(lexer: Lexer, arguments: tuple[str, ...], executable_name: str | None) -> None:
    """Quote ARGUMENTS into a single command line."""
    if executable_name is None:
        click.echo(lexer.args_to_command_line(arguments))
    else:
        click.echo(lexer.build_command_line(executable_name, arguments))


@cli.command()
@click.argument("text")
@click.option("--histogram", is_flag=True, help="Append per-state counts")
def trace(text: str, histogram: bool) -> None:
    """Show every automaton step taken to extract one argument from TEXT."""
    log = StateLog()
    argument, remainder = remove_argument(text, log)
    click.echo(log.format(with_histogram=histogram), nl=False)
    click.echo(f'argument:  "{to_literal_format(argument)}"')
    click.echo(f'remainder: "{to_literal_format(remainder)}"')


@cli.command()
@click.argument("command_line")
@click.pass_obj
def compare(lexer: Lexer, command_line: str) -> None:
    """Compare the runtime and native splitters on COMMAND_LINE."""
    console = Console()
    try:
        runtime = lexer.parse_exe_and_args(command_line)
    except TooManyArgumentsError as error:
        raise click.ClickException(str(error)) from error

    try:
        native = lexer.native_parse_exe_and_args(command_line)
    except NativeSplitterUnavailableError as error:
        console.print(f"[yellow]{escape(str(error))}[/]", highlight=False)
        native = None
    except OSError as error:
        raise click.ClickException(str(error)) from error

    table = Table(title=escape(to_literal_format(command_line)))
    table.add_column("#", justify="right")
    table.add_column("Visual C++ runtime")
    if native is not None:
        table.add_column("CommandLineToArgvW")

    runtime_tokens = [runtime.executable_name, *runtime.arguments]
    native_tokens = [] if native is None else [native.executable_name, *native.arguments]
    for index in range(max(len(runtime_tokens), len(native_tokens))):
        label = "exe" if index == 0 else str(index)
        row = [label, _cell(runtime_tokens, index)]
        if native is not None:
            row.append(_cell(native_tokens, index))
        table.add_row(*row)
    console.print(table)

    if native is not None:
        if native == runtime:
            console.print("[green]Splitters agree[/]")
        else:
            console.print("[red]Splitters differ[/]")


def _cell(tokens: list[str], index: int) -> str:
    if index >= len(tokens):
        return ""
    return escape(f'"{to_literal_format(tokens[index])}"')
