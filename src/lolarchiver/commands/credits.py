"""Credits command -- ``lolarchiver credits``."""

from __future__ import annotations

import typer

from lolarchiver import catalog
from lolarchiver.commands.common import command_errors, run_raw


def credits_command(ctx: typer.Context) -> None:
    """Show the API credits left on your key.

    Sends an empty ``POST /credits_left`` and prints the server's answer
    unchanged.
    """
    with command_errors(ctx):
        run_raw(ctx, catalog.credits_left())
