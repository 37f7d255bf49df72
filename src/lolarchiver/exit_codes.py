"""Numeric process exit codes.

``0`` when a command ran, even if the remote API rejected the query
(that is reported on stdout). ``1`` for any usage, configuration, or
transport failure. ``130`` when cancelled with Ctrl-C.

Example::

    $ lolarchiver youtube comments
    $ echo $?
    1   # EXIT_GENERIC_FAILURE -- no identifier was given
"""

EXIT_SUCCESS = 0
"""The command completed and its output was printed."""

EXIT_GENERIC_FAILURE = 1
"""Usage, configuration, or transport error."""

EXIT_CANCELLED = 130
"""The user interrupted the command with Ctrl-C."""
