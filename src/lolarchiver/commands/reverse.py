"""Reverse lookup commands -- ``lolarchiver reverse phone|email``.

The phone lookup is a guided endpoint: its status code is explained via
:mod:`lolarchiver.interpreter`. The email lookup prints the body verbatim.
"""

from __future__ import annotations

from typing import Optional

import typer

from lolarchiver import catalog
from lolarchiver.commands.common import command_errors, require, run_guided, run_raw
from lolarchiver.interpreter import PHONE_GUIDE

reverse_app = typer.Typer(no_args_is_help=True)


@reverse_app.command("phone")
def reverse_phone(
    ctx: typer.Context,
    number: Optional[str] = typer.Argument(
        None, help="Phone number (alternative to --phone)."
    ),
    phone: Optional[str] = typer.Option(None, "--phone", help="Phone number."),
    insecure: bool = typer.Option(
        False, "--insecure", help="Relax server-side input validation."
    ),
) -> None:
    """Look up who a phone number belongs to.

    Runs even without a configured API key so that the server's answer can
    tell you how to set one.

    Example::

        lolarchiver reverse phone 5551234
        lolarchiver reverse phone --phone +15551234 --insecure
    """
    with command_errors(ctx):
        phone = phone or number
        require(phone, "--phone")
        run_guided(ctx, catalog.reverse_phone_lookup(phone, insecure_mode=insecure), PHONE_GUIDE)


@reverse_app.command("email")
def reverse_email(
    ctx: typer.Context,
    email: Optional[str] = typer.Option(None, "--email", help="Email address."),
    insecure: bool = typer.Option(
        False, "--insecure", help="Relax server-side input validation."
    ),
) -> None:
    """Look up accounts linked to an email address."""
    with command_errors(ctx):
        require(email, "--email")
        run_raw(ctx, catalog.reverse_email_lookup(email, insecure_mode=insecure))
