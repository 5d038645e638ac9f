"""
Main CLI application.

Entry point for runecsv command.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

import runecsv
from runecsv.cli.config import (
    ConfigError,
    FileConfig,
    load_config,
    resolve_dialect,
    resolve_max_bytes,
)
from runecsv.cli.context import CliContext, ExitCode, get_exit_code
from runecsv.cli.output import OutputFormat, get_output_adapter
from runecsv.core.parser import (
    DialectError,
    InputTooLargeError,
    ParseResult,
    get_error_description,
    read_file,
)

logger = logging.getLogger(__name__)

# Create main app
app = typer.Typer(
    name="runecsv",
    help="Streaming CSV reader",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"runecsv {runecsv.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Streaming CSV reader."""
    pass


# =============================================================================
# Shared options
# =============================================================================

FileArg = Annotated[Path, typer.Argument(help="CSV file to read", exists=True, dir_okay=False)]
DelimiterOpt = Annotated[
    str | None, typer.Option("--delimiter", "-d", help="Field delimiter (default: ,)")
]
QuoteOpt = Annotated[str | None, typer.Option("--quote", help='Quote character (default: ")')]
CommentOpt = Annotated[
    str | None,
    typer.Option("--comment", "-c", help="Comment character (default: none)"),
]
EncodingOpt = Annotated[
    str | None,
    typer.Option("--encoding", "-e", help="Input encoding (default: detect)"),
]
FormatOpt = Annotated[str, typer.Option("--format", "-f", help="Output format: terminal, json")]
OutputOpt = Annotated[Path | None, typer.Option("--out", "-o", help="Write output to file")]
ConfigOpt = Annotated[
    Path | None, typer.Option("--config", help="YAML config file with dialect settings")
]
MaxBytesOpt = Annotated[
    int | None,
    typer.Option(
        "--max-bytes",
        help="Maximum input size in bytes (0 = unlimited). Defaults to RUNECSV_MAX_BYTES or 100MiB.",
    ),
]
ColorOpt = Annotated[bool, typer.Option("--color/--no-color", help="Enable/disable colored output")]
QuietOpt = Annotated[bool, typer.Option("--quiet", "-q", help="Suppress non-error output")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")]


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _read(
    ctx: CliContext,
    file: Path,
    config_file: Path | None,
    delimiter: str | None,
    quote: str | None,
    comment: str | None,
) -> ParseResult:
    """Resolve configuration and read the whole file, mapping failures to exit codes."""
    try:
        config = load_config(config_file) if config_file else None
        dialect = resolve_dialect(config, delimiter=delimiter, quote=quote, comment=comment)
        max_bytes = resolve_max_bytes(ctx.max_bytes, config)
    except (ConfigError, DialectError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    encoding = ctx.encoding or _config_encoding(config)

    try:
        return read_file(file, dialect, encoding=encoding, max_bytes=max_bytes)
    except LookupError:
        typer.echo(f"Unknown encoding: {encoding}", err=True)
        raise typer.Exit(ExitCode.USAGE) from None
    except UnicodeDecodeError as e:
        typer.echo(f"[CSV-ENC-001] {get_error_description('CSV-ENC-001')}: {e}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None
    except InputTooLargeError as e:
        typer.echo(f"[{e.code}] {e}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None
    except (OSError, UnicodeError) as e:
        typer.echo(f"Error reading file: {e}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None


def _config_encoding(config: FileConfig | None) -> str | None:
    return config.encoding if config else None


def _use_color(ctx: CliContext) -> bool:
    # Never write ANSI codes into an output file
    return ctx.color and ctx.output_file is None


def _emit(ctx: CliContext, rendered: str) -> None:
    if ctx.output_file:
        ctx.output_file.write_text(rendered + "\n", encoding="utf-8")
        if not ctx.quiet:
            typer.echo(f"Output written to {ctx.output_file}")
    else:
        typer.echo(rendered)


def _output_format(format: str) -> OutputFormat:
    try:
        return OutputFormat(format)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


# =============================================================================
# Parse Command
# =============================================================================


@app.command()
def parse(
    file: FileArg,
    delimiter: DelimiterOpt = None,
    quote: QuoteOpt = None,
    comment: CommentOpt = None,
    encoding: EncodingOpt = None,
    format: FormatOpt = "terminal",
    output: OutputOpt = None,
    config: ConfigOpt = None,
    max_bytes: MaxBytesOpt = None,
    color: ColorOpt = True,
    quiet: QuietOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Print the records of a CSV file."""
    _configure_logging(verbose)
    ctx = CliContext(
        format=format,
        output_file=output,
        color=color,
        quiet=quiet,
        verbose=verbose,
        encoding=encoding,
        max_bytes=max_bytes,
    )
    output_format = _output_format(ctx.format)

    result = _read(ctx, file, config, delimiter, quote, comment)
    logger.debug("Read %d record(s) from %s", result.record_count, file)

    adapter = get_output_adapter(output_format, color=_use_color(ctx))
    _emit(ctx, adapter.render_records(result))

    raise typer.Exit(get_exit_code(result.error is not None))


# =============================================================================
# Validate Command
# =============================================================================


@app.command()
def validate(
    file: FileArg,
    delimiter: DelimiterOpt = None,
    quote: QuoteOpt = None,
    comment: CommentOpt = None,
    encoding: EncodingOpt = None,
    format: FormatOpt = "terminal",
    output: OutputOpt = None,
    config: ConfigOpt = None,
    max_bytes: MaxBytesOpt = None,
    color: ColorOpt = True,
    quiet: QuietOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Check that a CSV file reads cleanly to the end."""
    _configure_logging(verbose)
    ctx = CliContext(
        format=format,
        output_file=output,
        color=color,
        quiet=quiet,
        verbose=verbose,
        encoding=encoding,
        max_bytes=max_bytes,
    )
    output_format = _output_format(ctx.format)

    result = _read(ctx, file, config, delimiter, quote, comment)

    if not (ctx.quiet and result.ok):
        adapter = get_output_adapter(output_format, color=_use_color(ctx))
        _emit(ctx, adapter.render_summary(result))

    raise typer.Exit(get_exit_code(result.error is not None))


if __name__ == "__main__":
    app()
