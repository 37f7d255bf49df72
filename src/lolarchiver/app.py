"""Typer application and CLI entry point for lolarchiver.

This module wires together the root Typer application and its
sub-commands (``credits``, ``youtube``, ``twitter``, ``twitch``, ``kick``,
``reverse``, ``database``, ``config``, ``version``, ``help``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler, runs the Typer app in
non-standalone mode so that every failure maps to exit code ``1``, and
writes a crash log under the data directory for unexpected exceptions.

See Also:
    :mod:`lolarchiver.commands.common`: Shared request and error plumbing.
    :mod:`lolarchiver.output`: Output manager initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from lolarchiver import __version__
from lolarchiver.commands.config import config_app
from lolarchiver.commands.credits import credits_command
from lolarchiver.commands.database import database_command
from lolarchiver.commands.kick import kick_app
from lolarchiver.commands.reverse import reverse_app
from lolarchiver.commands.twitch import twitch_app
from lolarchiver.commands.twitter import twitter_command
from lolarchiver.commands.youtube import youtube_app
from lolarchiver.exit_codes import EXIT_CANCELLED, EXIT_GENERIC_FAILURE, EXIT_SUCCESS

PROG_NAME = "lolarchiver"

app = typer.Typer(
    name=PROG_NAME,
    help="LoLArchiver CLI - A command-line interface for the LoLArchiver API.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("credits")(credits_command)
app.add_typer(youtube_app, name="youtube", help="YouTube comment lookups.")
app.command("twitter")(twitter_command)
app.add_typer(twitch_app, name="twitch", help="Twitch chat and account lookups.")
app.add_typer(kick_app, name="kick", help="Kick chat and account lookups.")
app.add_typer(reverse_app, name="reverse", help="Reverse lookups (phone/email).")
app.command("database")(database_command)
app.add_typer(config_app, name="config", help="API key configuration.")


def _version_text() -> str:
    return f"LoLArchiver CLI v{__version__}"


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(_version_text())
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="API key for this invocation (overrides LOLARCHIVER_API_KEY and the stored key).",
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~lolarchiver.output.OutputManager` from the
    CLI flags and stores the ``--api-key`` override in ``ctx.obj``. Values
    already present in ``ctx.obj`` (such as an injected ``transport`` in
    tests) are kept.
    """
    from lolarchiver.output import OutputManager, set_output

    set_output(OutputManager(no_color=no_color, quiet=quiet, verbose=verbose))

    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key


@app.command("version")
def version_command() -> None:
    """Show version information."""
    typer.echo(_version_text())


@app.command("help")
def help_command(ctx: typer.Context) -> None:
    """Show this help message."""
    parent = ctx.parent if ctx.parent is not None else ctx
    # Rich help is printed directly and get_help() then returns "".
    help_text = parent.get_help()
    if help_text:
        typer.echo(help_text)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_CANCELLED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from lolarchiver.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def _is_cli_error(exc: BaseException) -> bool:
    """Whether *exc* is a parse or usage error raised by the Typer/Click layer.

    These carry an integer ``exit_code`` and a ``show()`` method that
    prints the message and usage hint.
    """
    return callable(getattr(exc, "show", None)) and isinstance(
        getattr(exc, "exit_code", None), int
    )


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point invoked by the ``lolarchiver`` console script.

    Without arguments the usage text is printed and the process exits
    with ``1``. Usage errors from the argument parser (unknown command,
    bad option value) also exit with ``1``. Unhandled
    :class:`~lolarchiver.exceptions.LolArchiverError` instances exit with
    the error's ``exit_code``; any other exception produces a crash log
    and a generic failure exit.

    Raises:
        SystemExit: Always.
    """
    from lolarchiver.exceptions import LolArchiverError
    from lolarchiver.output import error

    args = list(sys.argv[1:] if argv is None else argv)
    _setup_signal_handlers()
    try:
        if not args:
            app(args=["help"], prog_name=PROG_NAME, standalone_mode=False)
            sys.exit(EXIT_GENERIC_FAILURE)
        result = app(args=args, prog_name=PROG_NAME, standalone_mode=False)
        sys.exit(result if isinstance(result, int) else EXIT_SUCCESS)
    except SystemExit:
        raise
    except (typer.Abort, KeyboardInterrupt):
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_CANCELLED)
    except LolArchiverError as exc:
        error(str(exc))
        sys.exit(exc.exit_code)
    except Exception as exc:
        if _is_cli_error(exc):
            exc.show()  # type: ignore[attr-defined]
            sys.exit(EXIT_GENERIC_FAILURE)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
