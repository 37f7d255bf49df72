"""Config commands -- manage the stored API key.

Provides the ``lolarchiver config`` sub-command group. The key lives in
``config.json`` under the per-user config directory (see
:mod:`lolarchiver.config`) with owner-only permissions.
"""

from __future__ import annotations

from typing import Optional

import typer

from lolarchiver.commands.common import command_errors, usage_error
from lolarchiver.output import info, print_data, success

config_app = typer.Typer(no_args_is_help=True)


@config_app.command("set-api-key")
def config_set_api_key(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Argument(None, help="Your LoLArchiver API key."),
) -> None:
    """Store the API key used by every other command.

    Example::

        lolarchiver config set-api-key YOUR_API_KEY
    """
    from lolarchiver.config import CredentialStore

    with command_errors(ctx):
        if not api_key or not api_key.strip():
            usage_error("API key is required")
        store = CredentialStore()
        store.save(api_key.strip())
        success("API key set successfully")


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show where the key is stored and a masked copy of it."""
    from lolarchiver.config import CredentialStore, mask_api_key

    with command_errors(ctx):
        store = CredentialStore()
        api_key = store.load()
        info(f"Config file: {store.path}")
        print_data(f"api_key: {mask_api_key(api_key) if api_key else 'not set'}")


@config_app.command("clear")
def config_clear(ctx: typer.Context) -> None:
    """Remove the stored API key."""
    from lolarchiver.config import CredentialStore

    with command_errors(ctx):
        if CredentialStore().clear():
            success("API key cleared")
        else:
            info("No API key was set.")


@config_app.command("path")
def config_path() -> None:
    """Print the path of the config file."""
    from lolarchiver.config import get_config_path

    print_data(str(get_config_path()))
