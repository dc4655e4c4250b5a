"""JSON encoding of request bodies and decoding of response bodies."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, TypeVar

from .errors import DeserializationError, SerializationError

JSON_CONTENT_TYPE = "application/json"

T = TypeVar("T")
Parser = Callable[[Any], T]


def _to_json_value(body: Any) -> Any:
    to_dict = getattr(body, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return body


def encode_body(body: Any) -> bytes:
    """Serialize a record or mapping to UTF-8 JSON bytes."""
    try:
        return json.dumps(_to_json_value(body), ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize request body: {exc}") from exc


def decode_json(content: bytes) -> Any:
    try:
        return json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise DeserializationError(f"Invalid JSON in response: {exc}") from exc


def decode_body(content: bytes, parser: Optional[Parser]) -> Any:
    """Decode a successful response body with ``parser``.

    ``parser`` is ``None`` for operations without a result, ``int`` for
    ``$count`` endpoints (plain-text body), or a callable applied to the
    parsed JSON.
    """
    if parser is None or not content:
        return None
    if parser is int:
        text = content.decode("utf-8", errors="replace").strip().lstrip("\ufeff")
        try:
            return int(text)
        except ValueError as exc:
            raise DeserializationError(f"Expected an integer count, got {text[:80]!r}") from exc
    data = decode_json(content)
    try:
        return parser(data)
    except DeserializationError:
        raise
    except (TypeError, KeyError, ValueError, AttributeError) as exc:
        raise DeserializationError(f"Unexpected response shape: {exc}") from exc


@dataclass(frozen=True)
class Message:
    """Request body bytes and their content type."""

    body: Optional[bytes] = None
    content_type: Optional[str] = None

    @classmethod
    def json(cls, body: Any) -> "Message":
        return cls(body=encode_body(body), content_type=JSON_CONTENT_TYPE)

    @classmethod
    def empty(cls) -> "Message":
        return cls()


def as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DeserializationError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data
