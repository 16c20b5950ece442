"""Common utilities."""

from .async_http import AsyncHTTPClient
from .http import HTTPClient
from .logger import setup_logging

__all__ = ["AsyncHTTPClient", "HTTPClient", "setup_logging"]
