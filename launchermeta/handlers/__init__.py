"""Error handling."""

from .error import Error, ErrorType

__all__ = ["Error", "ErrorType"]
