"""Uniform error value for I/O, JSON and HTTP transport failures."""

import asyncio
import json
from enum import Enum
from typing import Optional, Tuple, Type

import aiohttp
import requests


class ErrorType(str, Enum):
    """Failure domain a raw exception originates from."""

    UNKNOWN = "Unknown"
    IO = "Io"
    JSON = "Json"
    TRANSPORT = "Transport"


# Checked in order; subclasses come before their bases.
_IO_KINDS: Tuple[Tuple[Type[OSError], str], ...] = (
    (FileNotFoundError, "entity not found"),
    (PermissionError, "permission denied"),
    (ConnectionRefusedError, "connection refused"),
    (ConnectionResetError, "connection reset"),
    (ConnectionAbortedError, "connection aborted"),
    (BrokenPipeError, "broken pipe"),
    (FileExistsError, "entity already exists"),
    (BlockingIOError, "operation would block"),
    (TimeoutError, "timed out"),
    (InterruptedError, "operation interrupted"),
    (IsADirectoryError, "is a directory"),
    (NotADirectoryError, "not a directory"),
)

# First match wins, so an exception that fits several categories gets the
# earliest one (an invalid redirect URL is a Builder error, not a Redirect).
_TRANSPORT_KINDS: Tuple[Tuple[str, Tuple[Type[BaseException], ...]], ...] = (
    ("Body", (
        requests.exceptions.ChunkedEncodingError,
        aiohttp.ClientPayloadError,
    )),
    ("Builder", (
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidSchema,
        requests.exceptions.InvalidURL,
        requests.exceptions.InvalidHeader,
        requests.exceptions.URLRequired,
        aiohttp.InvalidURL,
        aiohttp.NonHttpUrlClientError,
    )),
    ("Connect", (
        requests.exceptions.ConnectionError,
        aiohttp.ClientConnectorError,
        # a ServerTimeoutError subclass; connect wins over timeout
        aiohttp.ConnectionTimeoutError,
        aiohttp.ClientConnectionResetError,
    )),
    ("Decode", (
        requests.exceptions.ContentDecodingError,
        aiohttp.ContentTypeError,
    )),
    ("Redirect", (
        requests.exceptions.TooManyRedirects,
        aiohttp.TooManyRedirects,
        aiohttp.RedirectClientError,
    )),
    ("Request", (
        requests.exceptions.RetryError,
        aiohttp.ClientOSError,
        aiohttp.ServerDisconnectedError,
    )),
    ("Status", (
        requests.exceptions.HTTPError,
        aiohttp.ClientResponseError,
    )),
    ("Timeout", (
        requests.exceptions.Timeout,
        aiohttp.ServerTimeoutError,
        asyncio.TimeoutError,
    )),
)


def io_kind(exc: OSError) -> str:
    """Categorical name of an OS failure."""
    for exc_type, kind in _IO_KINDS:
        if isinstance(exc, exc_type):
            return kind
    return "other error"


def json_kind(exc: BaseException) -> str:
    """One of ``Syntax``, ``Eof``, ``Io`` or ``Data``."""
    if isinstance(exc, json.JSONDecodeError):
        if exc.msg.startswith("Unterminated string") or not exc.doc[exc.pos:].strip():
            return "Eof"
        return "Syntax"
    if isinstance(exc, (UnicodeDecodeError, RecursionError)):
        return "Syntax"
    if isinstance(exc, OSError):
        return "Io"
    return "Data"


def transport_kind(exc: BaseException) -> str:
    """Transport category of an HTTP client failure, ``Unknown`` if none fits."""
    for kind, exc_types in _TRANSPORT_KINDS:
        if isinstance(exc, exc_types):
            return kind
    return "Unknown"


class Error(Exception):
    """A classified failure.

    ``kind`` is a short discriminator for the failure category and
    ``message`` is the upstream error's own rendering. Both are fixed at
    construction. The canonical display form is ``[<kind>]: <message>``.
    """

    def __init__(self, kind: str, message: str, error_type: ErrorType = ErrorType.UNKNOWN):
        super().__init__(kind, message)
        self._kind = kind
        self._message = message
        self._error_type = error_type

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def error_type(self) -> ErrorType:
        return self._error_type

    def __str__(self) -> str:
        return f"[{self._kind}]: {self._message}"

    def __repr__(self) -> str:
        return f"Error(kind={self._kind!r}, message={self._message!r})"

    @classmethod
    def new(cls, error_type: ErrorType, cause: Optional[BaseException] = None) -> "Error":
        """Classify ``cause`` as a failure of the ``error_type`` domain."""
        if error_type is ErrorType.IO and isinstance(cause, OSError):
            return cls.from_io(cause)
        if error_type is ErrorType.JSON and cause is not None:
            return cls.from_json(cause)
        if error_type is ErrorType.TRANSPORT and cause is not None:
            return cls.from_transport(cause)
        return cls.unknown()

    @classmethod
    def unknown(cls) -> "Error":
        return cls("Unknown", "Unknown", ErrorType.UNKNOWN)

    @classmethod
    def from_io(cls, exc: OSError) -> "Error":
        return cls(io_kind(exc), str(exc), ErrorType.IO)

    @classmethod
    def from_json(cls, exc: BaseException) -> "Error":
        return cls(json_kind(exc), str(exc), ErrorType.JSON)

    @classmethod
    def from_transport(cls, exc: BaseException) -> "Error":
        return cls(transport_kind(exc), str(exc), ErrorType.TRANSPORT)
