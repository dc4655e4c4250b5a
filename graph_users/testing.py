"""Offline fakes for exercising GraphClient without network access."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qsl, urlsplit


@dataclass
class FakeResponse:
    status_code: int = 200
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


def json_response(data: Any, status_code: int = 200) -> FakeResponse:
    return FakeResponse(status_code, json.dumps(data).encode("utf-8"), {"Content-Type": "application/json"})


def text_response(text: str, status_code: int = 200) -> FakeResponse:
    return FakeResponse(status_code, text.encode("utf-8"), {"Content-Type": "text/plain"})


def no_content() -> FakeResponse:
    return FakeResponse(204)


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str]
    data: Optional[bytes]
    timeout: Any

    @property
    def path(self) -> str:
        """Raw (still percent-encoded) URL path."""
        return urlsplit(self.url).path

    @property
    def query(self) -> str:
        return urlsplit(self.url).query

    @property
    def params(self) -> Dict[str, str]:
        return dict(parse_qsl(self.query, keep_blank_values=True))

    def json(self) -> Any:
        return json.loads(self.data.decode("utf-8")) if self.data is not None else None


class FakeSession:
    """Stand-in for ``requests.Session``.

    Queued items are returned in order; an exception instance is raised
    instead of returned. With an empty queue every request gets a 204.
    """

    def __init__(self, *responses: Union[FakeResponse, BaseException]) -> None:
        self.responses: List[Union[FakeResponse, BaseException]] = list(responses)
        self.requests: List[RecordedRequest] = []

    def queue(self, *responses: Union[FakeResponse, BaseException]) -> "FakeSession":
        self.responses.extend(responses)
        return self

    def request(self, method, url, headers=None, data=None, timeout=None, **kwargs):
        self.requests.append(RecordedRequest(method, url, dict(headers or {}), data, timeout))
        if not self.responses:
            return no_content()
        nxt = self.responses.pop(0)
        if isinstance(nxt, BaseException):
            raise nxt
        return nxt

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


def make_client(*responses: Union[FakeResponse, BaseException], token: str = "test-token"):
    """Return ``(client, session)`` wired to a FakeSession."""
    from .client import GraphClient

    session = FakeSession(*responses)
    return GraphClient(token, session=session), session
