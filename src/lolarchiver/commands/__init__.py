"""Built-in CLI sub-commands for lolarchiver.

* :mod:`~lolarchiver.commands.credits` -- remaining API credits.
* :mod:`~lolarchiver.commands.youtube` -- comment history and replies.
* :mod:`~lolarchiver.commands.twitter` -- username history.
* :mod:`~lolarchiver.commands.twitch` -- chat, bans, history, follows.
* :mod:`~lolarchiver.commands.kick` -- chat, bans, moderation, subscribers.
* :mod:`~lolarchiver.commands.reverse` -- phone and email reverse lookups.
* :mod:`~lolarchiver.commands.database` -- database search.
* :mod:`~lolarchiver.commands.config` -- API key storage.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``twitch``) or a plain callback function
registered directly on the root app (for single commands like
``credits``). Shared request plumbing lives in
:mod:`~lolarchiver.commands.common`.
"""
