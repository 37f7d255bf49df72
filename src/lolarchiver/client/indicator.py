"""Elapsed-time indicator drawn on stderr while a request is outstanding.

:class:`ElapsedIndicator` runs a daemon thread that repaints
``Processing (Ns)...`` every ``interval`` seconds. :meth:`ElapsedIndicator.stop`
signals the thread through a :class:`threading.Event`, joins it, and only
then erases the line, so nothing the caller prints afterwards can be
overwritten by a late repaint.
"""

from __future__ import annotations

import sys
import threading
import time
from typing import Callable, Optional, TextIO

DEFAULT_INTERVAL = 0.1


class ElapsedIndicator:
    """Cosmetic progress line for a single blocking call.

    Use as a context manager around the call; the line is erased when the
    block exits, whether it returned or raised.

    Args:
        stream: Where to draw. Defaults to ``sys.stderr`` at start time.
        interval: Seconds between repaints.
        enabled: When ``False`` the indicator is a no-op.
        clock: Monotonic clock, injectable for tests.

    Example::

        with ElapsedIndicator():
            response = transport.send(request)
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        interval: float = DEFAULT_INTERVAL,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._stream = stream
        self._interval = interval
        self._enabled = enabled
        self._clock = clock
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._width = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def __enter__(self) -> ElapsedIndicator:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    def start(self) -> None:
        if not self._enabled or self._thread is not None:
            return
        if self._stream is None:
            self._stream = sys.stderr
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="elapsed-indicator", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop repainting, wait for the thread, then erase the line."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None
        if self._width:
            self._write("\r" + " " * self._width + "\r")
            self._width = 0

    def _run(self) -> None:
        started = self._clock()
        while True:
            elapsed = round(self._clock() - started)
            line = f"Processing ({elapsed}s)..."
            self._width = max(self._width, len(line))
            self._write("\r" + line)
            if self._stop_event.wait(self._interval):
                return

    def _write(self, text: str) -> None:
        assert self._stream is not None
        self._stream.write(text)
        self._stream.flush()
