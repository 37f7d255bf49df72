"""Raw response rendering for endpoints without guided messages.

Most endpoints print the response body exactly as the server sent it,
whatever the status code. The HTTP status line goes to stderr, and only in
``--verbose`` mode, so that stdout carries nothing but the body.

See Also:
    :mod:`lolarchiver.interpreter` -- guided rendering for phone and
    database lookups.
"""

from __future__ import annotations

from typing import Optional

from lolarchiver.models import APIResponse
from lolarchiver.output import get_output


def format_raw_response(
    response: APIResponse,
    empty_message: Optional[str] = None,
) -> None:
    """Print *response*'s body verbatim to stdout.

    Args:
        response: The response to display.
        empty_message: Printed instead of the body when the body is empty.
            When ``None`` an empty body prints an empty line.
    """
    output = get_output()
    output.debug(f"HTTP {response.status_code}")

    if response.is_empty and empty_message is not None:
        output.print_data(empty_message)
        return
    output.print_data(response.text)
