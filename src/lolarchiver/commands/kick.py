"""Kick commands -- ``lolarchiver kick messages|timeouts|mods|subscribers``."""

from __future__ import annotations

from typing import Optional

import typer

from lolarchiver import catalog
from lolarchiver.commands.common import command_errors, require, run_raw

kick_app = typer.Typer(no_args_is_help=True)

_USERNAME_HELP = "Kick username."


@kick_app.command("messages")
def kick_messages(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
    offset: int = typer.Option(0, "--offset", min=0, help="Pagination offset."),
) -> None:
    """List a Kick user's archived chat messages."""
    with command_errors(ctx):
        require(username, "--username")
        run_raw(ctx, catalog.kick_user_messages(username, offset=offset))


@kick_app.command("timeouts")
def kick_timeouts(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
) -> None:
    """List chat bans and timeouts a Kick user received."""
    with command_errors(ctx):
        require(username, "--username")
        run_raw(ctx, catalog.kick_user_timeouts(username))


@kick_app.command("mods")
def kick_mods(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
) -> None:
    """List the Kick channels where a user is a moderator."""
    with command_errors(ctx):
        require(username, "--username")
        run_raw(ctx, catalog.kick_user_mod_channels(username))


@kick_app.command("subscribers")
def kick_subscribers(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", help=_USERNAME_HELP),
) -> None:
    """List a Kick user's subscribers."""
    with command_errors(ctx):
        require(username, "--username")
        run_raw(ctx, catalog.kick_user_subscribers(username))
