"""Status interpreter for the guided lookup endpoints.

The phone and database lookups do not print the raw body. Their numeric
status code is turned into a user-facing message instead, following a
fixed table. :func:`interpret` is a pure function of the status code, the
body, and whether a credential is configured.

=====  ==============================================================
Code   Message
=====  ==============================================================
200    "No data found ..." for an empty body or ``[]``; otherwise the
       body pretty-printed as JSON (raw text if it is not JSON)
401    set-your-key instruction without a credential; otherwise
       unavailable-or-rate-limited
402    unavailable-or-rate-limited
403    plan-does-not-support-or-rate-limited
404    no results found
405    input too long (phone only)
406    input format incorrect (phone only)
415    results hidden by owner (phone only)
416    credits exhausted
500    internal server error
other  unexpected status, followed by the raw body if non-empty
=====  ==============================================================

Codes 405, 406, and 415 fall through to "unexpected" for the database
lookup.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

from pydantic import BaseModel, ConfigDict, Field

WEB_URL = "https://lolarchiver.com"
SET_KEY_COMMAND = "lolarchiver config set-api-key YOUR_API_KEY"


class Guide(BaseModel):
    """Wording for one family of guided endpoints.

    Attributes:
        feature: Name used in sentences about the feature
            (``"Phone lookup"``).
        subject: What the user searched for (``"phone number"``).
        input_checks: Whether the endpoint reports input problems with
            405/406 and hidden results with 415.
    """

    model_config = ConfigDict(frozen=True)

    feature: str
    subject: str
    input_checks: bool = False


PHONE_GUIDE = Guide(feature="Phone lookup", subject="phone number", input_checks=True)
DATABASE_GUIDE = Guide(feature="Database lookup", subject="query")


class DisplayMessage(BaseModel):
    """Lines to print on stdout for one interpreted response."""

    model_config = ConfigDict(frozen=True)

    lines: list[str] = Field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def interpret(
    guide: Guide,
    status_code: int,
    body: bytes = b"",
    has_credential: bool = True,
) -> DisplayMessage:
    """Map a guided endpoint's response to the message shown to the user."""
    if status_code == 200:
        return _success(guide, body)

    feature = guide.feature
    lowered = feature[0].lower() + feature[1:]
    unavailable = [
        f"Error: {feature} is only available through the web interface "
        "or you exceeded rate limit for today/this month.",
        f"Please visit {WEB_URL} to use this feature.",
    ]

    if status_code == 401:
        if not has_credential:
            return _error(
                "Error: Unauthorized - Please set your API key using:",
                f"  {SET_KEY_COMMAND}",
            )
        return _error(*unavailable)
    if status_code == 402:
        return _error(*unavailable)
    if status_code == 403:
        return _error(
            f"Error: Your current plan does not support {lowered} "
            "or you exceeded rate limit for today/this month.",
            f"Please upgrade your plan or use the web interface at {WEB_URL}",
        )
    if status_code == 404:
        return _error(f"Error: No results found for this {guide.subject}")
    if guide.input_checks:
        if status_code == 405:
            return _error(f"Error: {guide.subject.capitalize()} is too long")
        if status_code == 406:
            return _error(f"Error: {guide.subject.capitalize()} format is incorrect")
        if status_code == 415:
            return _error("Error: Owner requested these results to be hidden")
    if status_code == 416:
        return _error("Error: You have exhausted all credits. Credits refresh in 24 hours")
    if status_code == 500:
        return _error("Error: Internal server error")

    lines = [f"Error: Unexpected response (Status {status_code})"]
    if body:
        lines.append(_decode(body))
    return DisplayMessage(lines=lines, is_error=True)


def pretty_json(body: bytes) -> str:
    """Indent *body* by two spaces if it is JSON, else return it decoded as-is.

    Only a pure re-indent is done. A body that re-serialising would alter
    (``NaN``/``Infinity``, duplicate keys, numbers such as ``1e5`` or
    ``1.50``) is returned unchanged.
    """
    try:
        parsed = json.loads(
            body,
            parse_constant=_reject_constant,
            parse_float=_exact_float,
            parse_int=_exact_int,
            object_pairs_hook=_unique_keys,
        )
    except ValueError:
        return _decode(body)
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant {name}")


def _exact_float(text: str) -> float:
    value = float(text)
    if repr(value) != text:
        raise ValueError(f"float {text} would be reformatted")
    return value


def _exact_int(text: str) -> int:
    value = int(text)
    if str(value) != text:
        raise ValueError(f"integer {text} would be reformatted")
    return value


def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result = dict(pairs)
    if len(result) != len(pairs):
        raise ValueError("duplicate object key")
    return result


def _success(guide: Guide, body: bytes) -> DisplayMessage:
    if body.strip() in (b"", b"[]"):
        return DisplayMessage(lines=[f"No data found for this {guide.subject}"])
    return DisplayMessage(lines=[pretty_json(body)])


def _error(*lines: str) -> DisplayMessage:
    return DisplayMessage(lines=list(lines), is_error=True)


def _decode(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")
