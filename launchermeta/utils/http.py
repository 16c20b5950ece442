"""Blocking HTTP client utilities."""

import requests
from typing import Optional, Dict


class HTTPClient:
    """Blocking counterpart of ``AsyncHTTPClient``."""

    def __init__(self, headers: Optional[Dict[str, str]] = None, timeout: Optional[float] = None):
        self.default_headers = headers or {}
        self.timeout = timeout
        self.session: Optional[requests.Session] = None

    def __enter__(self):
        self.session = requests.Session()
        self.session.headers.update(self.default_headers)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.session.close()

    def get_bytes(self, url: str, headers: Optional[Dict[str, str]] = None) -> bytes:
        """GET request returning the raw body of a successful response."""
        resp = self.session.get(url, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.content
