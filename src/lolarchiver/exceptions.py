"""Exception hierarchy for lolarchiver.

All exceptions inherit from :class:`LolArchiverError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`lolarchiver.exit_codes`. Commands report these errors on stderr and
exit; :func:`lolarchiver.app.main` catches anything that escapes a command.

Subclass hierarchy::

    LolArchiverError (exit 1)
    +-- ConfigError     (exit 1)
    +-- UsageError      (exit 1)
    +-- TransportError  (exit 1)

Statuses returned by the remote API are not exceptions: they are rendered
by :mod:`lolarchiver.interpreter` or printed verbatim.
"""

from __future__ import annotations

from typing import Optional

from lolarchiver.exit_codes import EXIT_GENERIC_FAILURE


class LolArchiverError(Exception):
    """Base exception for all lolarchiver errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(LolArchiverError):
    """Raised when the credential store cannot be read or written, or a key is required but unset."""


class UsageError(LolArchiverError):
    """Raised when a required option is missing or none of a set of alternatives was given."""


class TransportError(LolArchiverError):
    """Raised when a request cannot be built, sent, or its body read.

    The underlying exception is chained as ``__cause__`` and also exposed as
    :attr:`cause`.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
