"""Blocking HTTP client for the LoLArchiver API.

:class:`LolArchiverClient` wraps :class:`httpx.Client` and issues exactly
one request per :meth:`~LolArchiverClient.execute` call:

- **URL** -- the configured base URL concatenated with the operation path.
- **Headers** -- ``Content-Type: application/json`` and the ``apikey``
  credential header, then the request's own headers, which replace any
  default with the same (case-insensitive) name.
- **Body** -- the request's body mapping serialised to JSON, only when it
  is non-empty.
- **Indicator** -- an :class:`~lolarchiver.client.indicator.ElapsedIndicator`
  runs on stderr for the duration of the call and is erased before
  ``execute`` returns or raises.

Status codes are never mapped to exceptions here; every response is
returned as an :class:`~lolarchiver.models.APIResponse`. No timeout is set
and nothing is retried: a call blocks until the transport completes or
fails, and any failure surfaces as :class:`~lolarchiver.exceptions.TransportError`.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Optional

import httpx

from lolarchiver.client.indicator import ElapsedIndicator
from lolarchiver.exceptions import TransportError
from lolarchiver.models import APIRequest, APIResponse, Settings
from lolarchiver.output import get_output

logger = logging.getLogger(__name__)

AUTH_HEADER = "apikey"
"""Name of the header carrying the API key."""

CONTENT_TYPE = "application/json"


class LolArchiverClient:
    """Synchronous client bound to one :class:`~lolarchiver.models.Settings`.

    Must be used as a context manager so that the underlying transport is
    opened and closed.

    Args:
        settings: Credential and base URL. An empty credential is sent as
            an empty ``apikey`` header.
        transport: Optional :class:`httpx.BaseTransport`, e.g. an
            :class:`httpx.MockTransport` in tests.
        show_progress: Draw the elapsed indicator on stderr.

    Example::

        with LolArchiverClient(settings) as client:
            response = client.execute(catalog.credits_left())
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
        show_progress: bool = False,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._show_progress = show_progress
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> LolArchiverClient:
        self._client = httpx.Client(timeout=None, transport=self._transport)
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def build_url(self, request: APIRequest) -> str:
        return f"{self._settings.base_url}{request.path}"

    def build_headers(self, request: APIRequest) -> httpx.Headers:
        """Default headers overlaid with the request's own headers."""
        headers = httpx.Headers(
            {"Content-Type": CONTENT_TYPE, AUTH_HEADER: self._settings.api_key}
        )
        for name, value in request.headers.items():
            headers[name] = value
        return headers

    def execute(self, request: APIRequest) -> APIResponse:
        """Send *request* and return its status code and raw body.

        Raises:
            TransportError: If the body cannot be serialised, the request
                cannot be built or sent, or the response body cannot be read.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        output = get_output()
        url = self.build_url(request)
        output.debug(f"{request.method} {url}")
        output.debug(f"Headers: {', '.join(sorted(request.headers)) or '(none)'}")

        started = time.monotonic()
        with ElapsedIndicator(enabled=self._show_progress):
            response = self._send(request, url)

        output.debug(
            f"HTTP {response.status_code} ({len(response.body)} bytes) "
            f"in {time.monotonic() - started:.2f}s"
        )
        return response

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _send(self, request: APIRequest, url: str) -> APIResponse:
        assert self._client is not None

        content: Optional[bytes] = None
        if request.body:
            try:
                content = json.dumps(request.body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                logger.debug("failed to marshal request body: %r", exc)
                raise TransportError(f"failed to marshal request body: {exc}", cause=exc) from exc

        try:
            http_request = self._client.build_request(
                request.method,
                url,
                headers=self.build_headers(request),
                content=content,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError) as exc:
            logger.debug("failed to create request: %r", exc)
            raise TransportError(f"failed to create request: {exc}", cause=exc) from exc

        try:
            http_response = self._client.send(http_request, stream=True)
        except httpx.HTTPError as exc:
            logger.debug("failed to perform request: %r", exc)
            raise TransportError(f"failed to perform request: {exc}", cause=exc) from exc

        try:
            body = http_response.read()
        except httpx.HTTPError as exc:
            logger.debug("failed to read response body: %r", exc)
            raise TransportError(f"failed to read response body: {exc}", cause=exc) from exc
        finally:
            http_response.close()

        return APIResponse(status_code=http_response.status_code, body=body)

