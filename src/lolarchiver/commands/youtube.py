"""YouTube commands -- ``lolarchiver youtube comments|replies``.

Both endpoints take their parameters as a JSON body rather than headers.
"""

from __future__ import annotations

from typing import Optional

import typer

from lolarchiver import catalog
from lolarchiver.commands.common import command_errors, require, run_raw, usage_error

youtube_app = typer.Typer(no_args_is_help=True)


@youtube_app.command("comments")
def youtube_comments(
    ctx: typer.Context,
    user_id: Optional[str] = typer.Option(None, "--user-id", help="YouTube user ID."),
    handle: Optional[str] = typer.Option(None, "--handle", help="YouTube handle."),
    channel_id: Optional[str] = typer.Option(
        None, "--channel-id", help="YouTube channel ID."
    ),
    offset: int = typer.Option(0, "--offset", min=0, help="Pagination offset."),
) -> None:
    """List every comment a YouTube user has posted.

    At least one of ``--user-id``, ``--handle``, or ``--channel-id`` is
    required; all given identifiers are sent.

    Example::

        lolarchiver youtube comments --handle @someone --offset 100
    """
    with command_errors(ctx):
        if not (user_id or handle or channel_id):
            usage_error(
                "At least one of --user-id, --handle, or --channel-id must be provided"
            )
        run_raw(
            ctx,
            catalog.youtube_user_comments(
                user_id=user_id, handle=handle, channel_id=channel_id, offset=offset
            ),
        )


@youtube_app.command("replies")
def youtube_replies(
    ctx: typer.Context,
    comment_id: Optional[str] = typer.Option(
        None, "--comment-id", help="YouTube comment ID."
    ),
) -> None:
    """List the replies to a YouTube comment."""
    with command_errors(ctx):
        require(comment_id, "--comment-id")
        run_raw(ctx, catalog.youtube_comment_replies(comment_id))
