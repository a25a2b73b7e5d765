"""Retrieval of Unicode Character Database files from unicode.org."""
from __future__ import annotations

# std imports
import os
import urllib.parse

# 3rd party
import requests

DEFAULT_BASE_URL = os.environ.get('UNICODE_BASE_URL', 'https://www.unicode.org/Public/UNIDATA/')
CONNECT_TIMEOUT = int(os.environ.get('CONNECT_TIMEOUT', '10'))


class UnicodeDataClient:
    """
    Fetch text resources relative to a fixed base URL.

    The :class:`requests.Session` may be given, so that a transport adapter
    returning canned documents can be mounted in its place.  No retries are
    configured: any transport error or non-success status is raised to the
    caller as the matching :mod:`requests` exception.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL,
                 session: requests.Session | None = None,
                 timeout: float = CONNECT_TIMEOUT):
        if not base_url.endswith('/'):
            # urljoin() would otherwise replace the last path segment
            base_url += '/'
        self.base_url = base_url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        """Return absolute url of ``path``, relative to :attr:`base_url`."""
        return urllib.parse.urljoin(self.base_url, path)

    def fetch(self, path: str) -> str:
        """Retrieve ``path`` and return its body, decoded as UTF-8."""
        url = self.url_for(path)
        print(f'fetching {url}: ', end='', flush=True)
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        # unicode.org serves text/plain without a charset
        resp.encoding = 'utf-8'
        print('ok')
        return resp.text
