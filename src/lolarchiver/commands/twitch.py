"""Twitch commands -- ``lolarchiver twitch messages|timeouts|history|followage|followers``.

All Twitch endpoints take their parameters as request headers.
"""

from __future__ import annotations

from typing import Optional

import typer

from lolarchiver import catalog
from lolarchiver.commands.common import command_errors, require, run_raw, usage_error

twitch_app = typer.Typer(no_args_is_help=True)

_USERNAME_HELP = "Twitch username."


@twitch_app.command("messages")
def twitch_messages(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
    server: str = typer.Option(
        catalog.DEFAULT_TWITCH_SERVER,
        "--server",
        help="Archive server: superserver2 or main.",
    ),
    offset: int = typer.Option(0, "--offset", min=0, help="Pagination offset."),
) -> None:
    """List a Twitch user's archived chat messages."""
    with command_errors(ctx):
        require(username, "--username")
        if server not in catalog.TWITCH_SERVERS:
            usage_error(
                f"--server must be one of: {', '.join(catalog.TWITCH_SERVERS)}"
            )
        run_raw(ctx, catalog.twitch_user_messages(username, server=server, offset=offset))


@twitch_app.command("timeouts")
def twitch_timeouts(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
    offset: int = typer.Option(0, "--offset", min=0, help="Pagination offset."),
) -> None:
    """List chat bans and timeouts a Twitch user received."""
    with command_errors(ctx):
        require(username, "--username")
        run_raw(ctx, catalog.twitch_user_timeouts(username, offset=offset))


@twitch_app.command("history")
def twitch_history(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
    mode: Optional[str] = typer.Option(
        None, "--mode", help="Lookup mode: username, utype, or btype."
    ),
) -> None:
    """Show a Twitch account's history."""
    with command_errors(ctx):
        require(username, "--username")
        if mode and mode not in catalog.TWITCH_HISTORY_MODES:
            usage_error(
                f"--mode must be one of: {', '.join(catalog.TWITCH_HISTORY_MODES)}"
            )
        run_raw(ctx, catalog.twitch_user_history(username, mode=mode))


@twitch_app.command("followage")
def twitch_followage(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
) -> None:
    """List the channels a Twitch user follows."""
    with command_errors(ctx):
        require(username, "--username")
        run_raw(ctx, catalog.twitch_followage(username))


@twitch_app.command("followers")
def twitch_followers(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
) -> None:
    """List a Twitch user's followers."""
    with command_errors(ctx):
        require(username, "--username")
        run_raw(ctx, catalog.twitch_followers(username))
