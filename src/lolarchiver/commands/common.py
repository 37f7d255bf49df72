"""Shared plumbing for the API sub-commands.

Every API command follows the same sequence: validate its options, resolve
:class:`~lolarchiver.models.Settings`, build a request from
:mod:`lolarchiver.catalog`, execute it with
:class:`~lolarchiver.client.LolArchiverClient`, and render the response
either verbatim (:func:`run_raw`) or through the status interpreter
(:func:`run_guided`).

Commands wrap their body in :func:`command_errors` so that a
:class:`~lolarchiver.exceptions.LolArchiverError` is reported on stderr and
turned into the matching exit code. Usage errors also list the command's
options so the user sees the flags and their defaults.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, NoReturn, Optional

import typer

from lolarchiver.client import LolArchiverClient
from lolarchiver.client.response import format_raw_response
from lolarchiver.config import resolve_settings
from lolarchiver.exceptions import ConfigError, LolArchiverError, UsageError
from lolarchiver.interpreter import Guide, interpret
from lolarchiver.models import APIRequest, APIResponse, Settings
from lolarchiver.output import error, get_output, info, print_lines

MISSING_KEY_MESSAGE = "API key not set. Use 'lolarchiver config set-api-key' to set it"


@contextmanager
def command_errors(ctx: typer.Context) -> Iterator[None]:
    """Report :class:`LolArchiverError` on stderr and exit with its code."""
    try:
        yield
    except LolArchiverError as exc:
        error(str(exc))
        if isinstance(exc, UsageError):
            for line in flag_defaults(ctx):
                info(line)
        raise typer.Exit(code=exc.exit_code) from None


def flag_defaults(ctx: typer.Context) -> list[str]:
    """One line per option of the current command: flags, help, and default."""
    lines = ["Options:"]
    for param in ctx.command.params:
        if getattr(param, "param_type_name", "") != "option" or getattr(param, "hidden", False):
            continue
        line = f"  {', '.join(param.opts)}"
        if param.help:
            line += f"  {param.help}"
        if param.default is not None and param.default is not False and param.default != "":
            line += f" (default {param.default})"
        lines.append(line)
    return lines


def usage_error(message: str) -> NoReturn:
    raise UsageError(message)


def require(value: Any, option: str) -> None:
    """Raise :class:`UsageError` when a required option was not supplied."""
    if value is None or value == "":
        usage_error(f"{option} is required")


def _obj(ctx: typer.Context) -> dict[str, Any]:
    return ctx.obj if isinstance(ctx.obj, dict) else {}


def get_settings(ctx: typer.Context, require_key: bool = True) -> Settings:
    """Resolve settings for this invocation.

    Args:
        ctx: Typer context; ``ctx.obj["api_key"]`` holds the ``--api-key``
            override, if any.
        require_key: Raise :class:`ConfigError` when no credential is
            configured. Guided commands pass ``False`` so the request still
            goes out and the server's 401 is explained to the user.
    """
    settings = resolve_settings(cli_api_key=_obj(ctx).get("api_key"))
    if require_key and not settings.has_credential:
        raise ConfigError(MISSING_KEY_MESSAGE)
    return settings


def execute(ctx: typer.Context, settings: Settings, request: APIRequest) -> APIResponse:
    """Run *request* once against the API described by *settings*."""
    with LolArchiverClient(
        settings,
        transport=_obj(ctx).get("transport"),
        show_progress=get_output().show_progress,
    ) as client:
        return client.execute(request)


def run_raw(
    ctx: typer.Context,
    request: APIRequest,
    empty_message: Optional[str] = None,
) -> None:
    """Execute *request* and print the body as received, whatever the status."""
    settings = get_settings(ctx)
    response = execute(ctx, settings, request)
    format_raw_response(response, empty_message=empty_message)


def run_guided(ctx: typer.Context, request: APIRequest, guide: Guide) -> None:
    """Execute *request* and print the interpreter's message for its status."""
    settings = get_settings(ctx, require_key=False)
    response = execute(ctx, settings, request)
    message = interpret(
        guide,
        response.status_code,
        response.body,
        has_credential=settings.has_credential,
    )
    get_output().debug(f"HTTP {response.status_code}")
    print_lines(message.lines)
