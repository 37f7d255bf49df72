"""Database command -- ``lolarchiver database QUERY [--exact]``.

A guided endpoint: the response status is explained through
:mod:`lolarchiver.interpreter` instead of printing the body verbatim.
"""

from __future__ import annotations

from typing import Optional

import typer

from lolarchiver import catalog
from lolarchiver.commands.common import command_errors, require, run_guided
from lolarchiver.interpreter import DATABASE_GUIDE


def database_command(
    ctx: typer.Context,
    search: Optional[str] = typer.Argument(
        None, help="Search query (alternative to --query)."
    ),
    query: Optional[str] = typer.Option(None, "--query", help="Search query."),
    exact: bool = typer.Option(False, "--exact", help="Exact match only."),
) -> None:
    """Search the leak database.

    Example::

        lolarchiver database --query "jane doe" --exact
        lolarchiver database jane@example.com
    """
    with command_errors(ctx):
        query = query or search
        require(query, "--query")
        run_guided(ctx, catalog.database_lookup(query, exact=exact), DATABASE_GUIDE)
