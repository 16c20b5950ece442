"""Tests for error classification."""

import asyncio
import json

import aiohttp
import pytest
import requests
from pydantic import BaseModel, ValidationError

from launchermeta.handlers import Error, ErrorType


def _json_failure(text):
    try:
        json.loads(text)
    except json.JSONDecodeError as exc:
        return exc
    raise AssertionError(f"{text!r} decoded")


def test_unknown():
    error = Error.new(ErrorType.UNKNOWN)
    assert str(error) == "[Unknown]: Unknown"


def test_domain_without_cause_is_unknown():
    assert str(Error.new(ErrorType.JSON)) == "[Unknown]: Unknown"


def test_io_other():
    error = Error.new(ErrorType.IO, OSError("test"))
    assert str(error) == "[other error]: test"
    assert error.error_type is ErrorType.IO


@pytest.mark.parametrize("exc, kind", [
    (FileNotFoundError(2, "No such file or directory"), "entity not found"),
    (PermissionError(13, "Permission denied"), "permission denied"),
    (IsADirectoryError(21, "Is a directory"), "is a directory"),
    (BrokenPipeError(32, "Broken pipe"), "broken pipe"),
    (ConnectionRefusedError(111, "Connection refused"), "connection refused"),
])
def test_io_kinds(exc, kind):
    error = Error.from_io(exc)
    assert error.kind == kind
    assert error.message == str(exc)


def test_json_custom_is_data():
    error = Error.new(ErrorType.JSON, ValueError("test"))
    assert str(error) == "[Data]: test"


def test_json_syntax():
    error = Error.from_json(_json_failure('{"id": nope}'))
    assert error.kind == "Syntax"
    assert "line 1 column" in error.message


def test_json_trailing_garbage_is_syntax():
    assert Error.from_json(_json_failure("{} x")).kind == "Syntax"


@pytest.mark.parametrize("text", ["", '{"id": "1.21"', '{"id": "1.2', "[1, 2,   "])
def test_json_eof(text):
    assert Error.from_json(_json_failure(text)).kind == "Eof"


def test_json_invalid_utf8_is_syntax():
    with pytest.raises(UnicodeDecodeError) as info:
        json.loads(b'{"id": "\xff\xfe\xfa"}')
    assert Error.from_json(info.value).kind == "Syntax"


def test_json_io():
    assert Error.from_json(OSError("stream closed")).kind == "Io"


def test_json_schema_mismatch_is_data():
    class Point(BaseModel):
        x: int

    with pytest.raises(ValidationError) as info:
        Point.model_validate({"x": "not a number"})
    assert Error.from_json(info.value).kind == "Data"


def test_transport_builder_sync():
    with pytest.raises(requests.RequestException) as info:
        requests.get("test")
    error = Error.new(ErrorType.TRANSPORT, info.value)
    assert error.kind == "Builder"
    assert str(error) == f"[Builder]: {info.value}"


@pytest.mark.asyncio
async def test_transport_builder_async():
    async with aiohttp.ClientSession() as session:
        with pytest.raises(aiohttp.ClientError) as info:
            await session.get("test")
    assert Error.from_transport(info.value).kind == "Builder"


@pytest.mark.parametrize("exc, kind", [
    (requests.exceptions.ChunkedEncodingError("truncated"), "Body"),
    (requests.exceptions.InvalidURL("bad"), "Builder"),
    (requests.exceptions.ConnectionError("refused"), "Connect"),
    # also a Timeout, but Connect comes first
    (requests.exceptions.ConnectTimeout("slow"), "Connect"),
    (requests.exceptions.ContentDecodingError("gzip"), "Decode"),
    (requests.exceptions.TooManyRedirects("loop"), "Redirect"),
    (requests.exceptions.RetryError("retries"), "Request"),
    (requests.exceptions.HTTPError("404 Client Error"), "Status"),
    (requests.exceptions.ReadTimeout("slow"), "Timeout"),
    (requests.exceptions.RequestException("odd"), "Unknown"),
    (aiohttp.ClientPayloadError("truncated"), "Body"),
    (aiohttp.InvalidURL("test"), "Builder"),
    (aiohttp.ServerDisconnectedError(), "Request"),
    (aiohttp.ServerTimeoutError("slow"), "Timeout"),
    (aiohttp.ConnectionTimeoutError("slow"), "Connect"),
    (aiohttp.ClientConnectionResetError("reset by peer"), "Connect"),
    (asyncio.TimeoutError(), "Timeout"),
    (aiohttp.ClientError("odd"), "Unknown"),
])
def test_transport_kinds(exc, kind):
    error = Error.from_transport(exc)
    assert error.kind == kind
    assert error.message == str(exc)
    assert error.error_type is ErrorType.TRANSPORT


def test_transport_is_deterministic():
    exc = requests.exceptions.HTTPError("500 Server Error")
    assert str(Error.from_transport(exc)) == str(Error.from_transport(exc))


def test_fields_are_read_only():
    error = Error.from_io(OSError("test"))
    with pytest.raises(AttributeError):
        error.kind = "other"
    with pytest.raises(AttributeError):
        error.message = "other"


def test_error_is_raisable():
    with pytest.raises(Error) as info:
        raise Error.from_json(ValueError("bad shape"))
    assert info.value.kind == "Data"
    assert repr(info.value) == "Error(kind='Data', message='bad shape')"


def test_json_recursion_limit_is_syntax():
    assert Error.from_json(RecursionError("maximum recursion depth exceeded")).kind == "Syntax"


@pytest.mark.parametrize("sync_exc, async_exc", [
    (requests.exceptions.ConnectTimeout("slow"), aiohttp.ConnectionTimeoutError("slow")),
    (requests.exceptions.ConnectionError("reset"), aiohttp.ClientConnectionResetError("reset")),
    (requests.exceptions.ReadTimeout("slow"), aiohttp.ServerTimeoutError("slow")),
    (requests.exceptions.MissingSchema("test"), aiohttp.InvalidURL("test")),
])
def test_same_fault_same_kind_in_both_clients(sync_exc, async_exc):
    assert Error.from_transport(sync_exc).kind == Error.from_transport(async_exc).kind
