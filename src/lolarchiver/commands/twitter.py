"""Twitter command -- ``lolarchiver twitter --handle NAME | --id ID``."""

from __future__ import annotations

from typing import Optional

import typer

from lolarchiver import catalog
from lolarchiver.commands.common import command_errors, run_raw, usage_error


def twitter_command(
    ctx: typer.Context,
    handle: Optional[str] = typer.Option(None, "--handle", help="Twitter handle."),
    user_id: int = typer.Option(0, "--id", min=0, help="Twitter user ID."),
    by_old: bool = typer.Option(
        False, "--by-old", help="Search by old usernames."
    ),
) -> None:
    """Look up a Twitter/X account's username history.

    Either ``--handle`` or ``--id`` must be given. An empty answer prints
    ``No data found``.

    Example::

        lolarchiver twitter --handle jack
        lolarchiver twitter --handle oldname --by-old
    """
    with command_errors(ctx):
        if not handle and not user_id:
            usage_error("Either --handle or --id must be provided")
        run_raw(
            ctx,
            catalog.twitter_history_lookup(handle=handle, user_id=user_id, by_old=by_old),
            empty_message="No data found",
        )
