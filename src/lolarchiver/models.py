"""Canonical Pydantic models shared across lolarchiver modules.

**Catalog models** -- static descriptions of the remote endpoints:
    :class:`HTTPMethod`, :class:`ParamPlacement`, and :class:`Operation`.

**Wire models** -- values built and consumed per invocation:
    :class:`APIRequest` and :class:`APIResponse`.

**Configuration models** -- what the client is constructed with and what is
persisted on disk: :class:`Settings` and :class:`StoredConfig`.
"""

from __future__ import annotations

import enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.lolarchiver.com"
"""Production endpoint of the LoLArchiver API."""

BodyValue = Union[str, int, bool]


# --- Catalog ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods used by the catalog. The remote API only accepts ``POST``."""

    POST = "POST"


class ParamPlacement(str, enum.Enum):
    """Where an operation carries its caller-supplied parameters."""

    NONE = "none"
    HEADERS = "headers"
    BODY = "body"


class Operation(BaseModel):
    """A statically defined endpoint of the remote API.

    Operations never change at runtime; the request builders in
    :mod:`lolarchiver.catalog` pair one of these with the caller's
    parameters to produce an :class:`APIRequest`.

    ``placement``, ``params`` and ``summary`` describe the endpoint for
    readers and tests only. The builders spell out their own headers and
    body fields and do not consult them.

    Example::

        Operation(
            name="reverse_phone_lookup",
            path="/reverse_phone_lookup",
            placement=ParamPlacement.HEADERS,
            params=("phone", "insecuremode"),
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Stable identifier, e.g. 'twitch_followers'")
    path: str = Field(description="Path appended to the base URL")
    method: HTTPMethod = HTTPMethod.POST
    placement: ParamPlacement = ParamPlacement.NONE
    params: tuple[str, ...] = Field(
        default=(), description="Wire names of the parameters the endpoint accepts"
    )
    summary: str = ""


# --- Wire values ---


class APIRequest(BaseModel):
    """One request, built per call and discarded once the call returns.

    ``headers`` holds only the operation's own headers; the client adds
    ``Content-Type`` and the credential header itself. ``body`` is sent as
    JSON only when it is non-empty.
    """

    model_config = ConfigDict(frozen=True)

    operation: Operation
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, BodyValue] = Field(default_factory=dict)

    @property
    def method(self) -> str:
        return self.operation.method.value

    @property
    def path(self) -> str:
        return self.operation.path


class APIResponse(BaseModel):
    """Status code and the unparsed response body."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: bytes = b""

    @property
    def text(self) -> str:
        """The body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    @property
    def is_empty(self) -> bool:
        return len(self.body) == 0


# --- Configuration ---


class Settings(BaseModel):
    """Everything :class:`~lolarchiver.client.LolArchiverClient` is constructed with.

    ``api_key`` may be empty: the server, not the client, rejects it.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


class StoredConfig(BaseModel):
    """Shape of the per-user ``config.json`` file.

    Unknown keys are kept when the file is rewritten.
    """

    model_config = ConfigDict(extra="allow")

    api_key: str = ""
