"""Console entry point for capturing and replaying serialised log records.

Purpose
-------
Expose the conversion layer on the command line: encode a record built from
CLI arguments, or replay newline-delimited encoded records onto a Rich console.

Contents
--------
* :func:`cli` - Click group with ``info``, ``codecs``, ``capture`` and
  ``replay`` commands.
* :func:`main` - test-friendly runner returning an exit code.

System Role
-----------
Presentation layer only. All conversion goes through the façade in
:mod:`serializable_log_record.serializable_log_record`.
"""

from __future__ import annotations

import base64
import logging
import os
from typing import BinaryIO, Sequence

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __init__conf__
from . import config
from .adapters.codecs import available_codecs, get_codec, is_binary
from .adapters.console import RichConsoleSink
from .adapters.stdlib import LogRecordBuilder
from .application.ports.codec import RecordCodecPort
from .domain.levels import LogLevel
from .serializable_log_record import emit, from_log_record, summary_info

_LEVEL_CHOICES = [level.severity for level in LogLevel]


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[handler])


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load environment variables from a nearby .env (default: ${config.DOTENV_ENV_VAR}).",
)
@click.option("--codec", default=None, help=f"Codec name (default: ${config.CODEC_ENV_VAR} or '{config.DEFAULT_CODEC}').")
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr.")
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None, codec: str | None, verbose: bool) -> None:
    """Capture log records into a serialisable form and replay them."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    _configure_logging(verbose)
    if config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(config.DOTENV_ENV_VAR)):
        config.enable_dotenv()

    ctx.obj = {"codec": codec or config.default_codec()}
    if ctx.invoked_subcommand is None:
        # ``summary_info`` already returns a string ending with a newline.
        click.echo(summary_info(), nl=False)


@cli.command()
def info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command()
def codecs() -> None:
    """List the codecs available in this environment."""

    for name in available_codecs():
        click.echo(name)


@cli.command()
@click.argument("template")
@click.argument("arguments", nargs=-1)
@click.option("--level", type=click.Choice(_LEVEL_CHOICES, case_sensitive=False), default="info", show_default=True)
@click.option("--target", default="cli", show_default=True, help="Logger name recorded as the target.")
@click.option("--module", "module_path", default=None, help="Originating module.")
@click.option("--file", "file", default=None, help="Originating source file.")
@click.option("--line", type=click.IntRange(min=0), default=None, help="Originating source line.")
@click.pass_context
def capture(
    ctx: click.Context,
    template: str,
    arguments: tuple[str, ...],
    level: str,
    target: str,
    module_path: str | None,
    file: str | None,
    line: int | None,
) -> None:
    """Capture a record rendered from TEMPLATE % ARGUMENTS and print it encoded.

    Binary codecs are written as one base64 line so the output stays
    newline-delimited.
    """

    codec = _codec_from(ctx)
    live = (
        LogRecordBuilder()
        .level(LogLevel.from_name(level))
        .target(target)
        .args(template, *arguments)
        .module_path(module_path)
        .file(file)
        .line(line)
        .build()
    )
    try:
        record = from_log_record(live)
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(f"cannot render {template!r} with {list(arguments)!r}: {exc}", param_hint="TEMPLATE") from exc
    click.echo(_frame(codec, codec.encode(record)))


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--no-color", is_flag=True, help="Disable styled output.")
@click.pass_context
def replay(ctx: click.Context, source: BinaryIO, no_color: bool) -> None:
    """Re-hydrate newline-delimited encoded records from SOURCE and print them.

    Binary codecs are read one base64 line per record, as written by
    ``capture``.
    """

    codec = _codec_from(ctx)
    sink = RichConsoleSink(no_color=no_color)
    for number, raw in enumerate(source, start=1):
        payload = raw.strip()
        if not payload:
            continue
        try:
            record = codec.decode(_unframe(codec, payload))
        except (KeyError, TypeError, ValueError) as exc:
            raise click.ClickException(f"line {number}: cannot decode record: {exc!r}") from exc
        emit(record, sink)


def _frame(codec: RecordCodecPort, data: bytes) -> bytes:
    return base64.b64encode(data) if is_binary(codec) else data


def _unframe(codec: RecordCodecPort, line: bytes) -> bytes:
    return base64.b64decode(line, validate=True) if is_binary(codec) else line


def _codec_from(ctx: click.Context) -> RecordCodecPort:
    name = ctx.obj["codec"] if ctx.obj else config.default_codec()
    try:
        return get_codec(name)
    except (ValueError, RuntimeError) as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Process exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
