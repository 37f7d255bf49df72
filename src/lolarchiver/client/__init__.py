"""HTTP client module for lolarchiver.

Classes:
    :class:`LolArchiverClient` -- blocking client backed by :class:`httpx.Client`.
    :class:`ElapsedIndicator` -- stderr progress line drawn during a call.

Example::

    from lolarchiver.client import LolArchiverClient

    with LolArchiverClient(settings) as client:
        resp = client.execute(request)
"""

from lolarchiver.client.indicator import ElapsedIndicator
from lolarchiver.client.sync_client import AUTH_HEADER, LolArchiverClient

__all__ = ["AUTH_HEADER", "ElapsedIndicator", "LolArchiverClient"]
