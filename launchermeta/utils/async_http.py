"""Async HTTP client utilities."""

import aiohttp
from typing import Optional, Dict


class AsyncHTTPClient:
    """Async HTTP client owning one session for the duration of a ``with`` block."""

    def __init__(self, headers: Optional[Dict[str, str]] = None, timeout: Optional[float] = None):
        self.default_headers = headers or {}
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        kwargs = {"headers": self.default_headers}
        if self.timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)
        self.session = aiohttp.ClientSession(**kwargs)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.session.close()

    async def get_bytes(self, url: str, headers: Optional[Dict[str, str]] = None) -> bytes:
        """GET request returning the raw body of a successful response."""
        req_headers = {**self.session.headers, **(headers or {})}
        async with self.session.get(url, headers=req_headers) as resp:
            resp.raise_for_status()
            return await resp.read()
