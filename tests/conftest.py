"""Shared test fixtures for lolarchiver.

Provides isolated config directories, output-state resets, a Typer CLI
runner, and a recording :class:`httpx.MockTransport` that stands in for
the remote API. These fixtures are discovered by pytest automatically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import httpx
import pytest

from lolarchiver.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches a reference to sys.stderr at creation time.
    When CliRunner or capsys swap the streams, a cached manager would write
    to a closed file. ``NO_COLOR`` keeps Rich from wrapping or styling
    diagnostics so tests can match them as plain text.
    """
    monkeypatch.setenv("NO_COLOR", "1")
    yield
    reset_output()


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every per-user directory at tmp_path and clear LOLARCHIVER_* vars.

    Returns:
        The tmp_path root directory.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr("lolarchiver.config._is_xdg_platform", lambda: True)
    for var in ["LOLARCHIVER_API_KEY", "LOLARCHIVER_BASE_URL"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Fake remote API
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """MockTransport that answers every request with one canned response.

    Attributes:
        requests: Every :class:`httpx.Request` received, in order.
    """

    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b"",
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self._custom = handler
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self._custom is not None:
            return self._custom(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for :class:`RecordingTransport` instances."""
    return RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    """A transport answering ``200`` with ``{"ok": true}``."""
    return RecordingTransport(200, b'{"ok": true}')


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
