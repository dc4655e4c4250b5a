"""Typed errors raised by the Graph client.

Every failure propagates to the caller; nothing is retried or recovered here.
"""

from __future__ import annotations

import json
from typing import Any, Optional


class GraphError(RuntimeError):
    """Base class for all errors raised by graph_users."""


class ConfigError(GraphError):
    """Raised when required client settings (token, host) are missing."""


class SerializationError(GraphError):
    """Raised when a request body cannot be encoded as JSON.

    Always raised before any network I/O happens.
    """


class TransportError(GraphError):
    """Raised when the HTTP session fails (connection error, timeout)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class DeserializationError(GraphError):
    """Raised when a successful response body does not match the expected shape."""


class HttpError(GraphError):
    """Non-2xx response from Graph.

    ``error`` is the raw response text (or ``"empty response"``), ``payload``
    the parsed JSON body when there is one.
    """

    def __init__(self, status: int, error: str, payload: Any = None) -> None:
        super().__init__(f"HTTP Error. Code: {status}, message: {error}")
        self.status = status
        self.error = error
        self.payload = payload

    @classmethod
    def from_body(cls, status: int, content: bytes) -> "HttpError":
        if not content:
            return cls(status, "empty response")
        text = content.decode("utf-8", errors="replace")
        try:
            payload = json.loads(text)
        except ValueError:
            payload = None
        return cls(status, text, payload)

    def _error_field(self, name: str) -> Optional[str]:
        if isinstance(self.payload, dict) and isinstance(self.payload.get("error"), dict):
            value = self.payload["error"].get(name)
            return str(value) if value is not None else None
        return None

    @property
    def code(self) -> Optional[str]:
        """Graph error code, e.g. ``ErrorItemNotFound``."""
        return self._error_field("code")

    @property
    def message(self) -> Optional[str]:
        return self._error_field("message")


class AuthenticationError(GraphError):
    """Raised when a bearer token cannot be acquired."""
