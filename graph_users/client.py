"""Shared Microsoft Graph transport.

One ``GraphClient`` holds the base URL, bearer credentials and the
``requests`` session. Request builders (``graph_users.resources``) assemble
URLs and bodies and hand them to the four verb methods here.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import requests

from .errors import ConfigError, DeserializationError, HttpError, TransportError
from .models import GraphCollection
from .paths import build_path
from .query import QueryOptions
from .resources.users import UserRequests
from .serialization import JSON_CONTENT_TYPE, Message, Parser, decode_body

LOG = logging.getLogger(__name__)

GRAPH = "https://graph.microsoft.com/v1.0"

# Default timeout for HTTP requests (connect, read) in seconds
DEFAULT_TIMEOUT = (10, 30)

Timeout = Union[float, Tuple[float, float]]
TokenProvider = Callable[[], str]


class GraphClient:
    """Entry point for the user-scoped Graph API.

    Either a static bearer ``token`` or a ``token_provider`` callable (for
    example ``graph_users.auth.MsalTokenProvider``) is required.

    Usage:
        client = GraphClient(token="...")
        cal = client.user("user-123").calendar.get(select=["name"])
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        host: str = GRAPH,
        session: Optional[requests.Session] = None,
        timeout: Timeout = DEFAULT_TIMEOUT,
        token_provider: Optional[TokenProvider] = None,
    ) -> None:
        if not token and token_provider is None:
            raise ConfigError("GraphClient needs a token or a token_provider")
        self.host = host.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self._token = token
        self._token_provider = token_provider
        self._host_override: Optional[str] = None

    # -------------------- Construction --------------------
    @classmethod
    def from_settings(cls, settings, session: Optional[requests.Session] = None) -> "GraphClient":
        """Build a client from resolved ``GraphSettings``."""
        if settings.token:
            return cls(settings.token, host=settings.host, session=session, timeout=settings.timeout)
        if settings.client_id:
            from .auth import MsalTokenProvider

            provider = MsalTokenProvider(
                client_id=settings.client_id,
                tenant=settings.tenant,
                token_path=settings.token_cache,
            )
            return cls(host=settings.host, session=session, timeout=settings.timeout, token_provider=provider)
        raise ConfigError(
            "No Graph credentials configured; set MICROSOFT_GRAPH_API_API_KEY "
            "or a client_id in the [graph] section of credentials.ini"
        )

    @classmethod
    def from_env(cls, profile: Optional[str] = None) -> "GraphClient":
        """Build a client from environment variables and credentials.ini."""
        from .config import resolve_settings

        return cls.from_settings(resolve_settings(profile=profile))

    # -------------------- Host --------------------
    def with_host_override(self, host: str) -> "GraphClient":
        """Send every request to ``host`` instead of the configured base URL."""
        self._host_override = host.rstrip("/")
        return self

    def remove_host_override(self) -> "GraphClient":
        self._host_override = None
        return self

    @property
    def host_override(self) -> Optional[str]:
        return self._host_override

    def url(self, path: str, query: Optional[QueryOptions] = None) -> str:
        base = self._host_override or self.host
        qs = query.encode() if query is not None else ""
        return f"{base}{path}?{qs}" if qs else f"{base}{path}"

    # -------------------- Navigation --------------------
    def user(self, user_id: str) -> UserRequests:
        """Requests scoped to ``/users/{user_id}``."""
        return UserRequests(self, build_path("/users/{}", user_id))

    def me(self) -> UserRequests:
        """Requests scoped to the signed-in user (``/me``)."""
        return UserRequests(self, "/me")

    # -------------------- Transport --------------------
    def _access_token(self) -> str:
        if self._token_provider is not None:
            return self._token_provider()
        return self._token or ""

    def _headers(self, message: Message, extra: Optional[Mapping[str, str]]) -> Dict[str, str]:
        headers = {
            "Accept": JSON_CONTENT_TYPE,
            "Authorization": f"Bearer {self._access_token()}",
        }
        if message.body is not None:
            headers["Content-Type"] = message.content_type or JSON_CONTENT_TYPE
        for name, value in (extra or {}).items():
            if value:
                headers[name] = value
        return headers

    def request_raw(
        self,
        method: str,
        url: str,
        message: Optional[Message] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        message = message or Message.empty()
        method = method.upper()
        LOG.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                headers=self._headers(message, headers),
                data=message.body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}", exc) from exc
        LOG.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    def request(
        self,
        method: str,
        url: str,
        message: Optional[Message] = None,
        result: Optional[Parser] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        resp = self.request_raw(method, url, message, headers)
        content = resp.content or b""
        if 200 <= resp.status_code < 300:
            if resp.status_code == 204:
                return None
            return decode_body(content, result)
        raise HttpError.from_body(resp.status_code, content)

    def get(self, url: str, result: Optional[Parser] = None, headers: Optional[Mapping[str, str]] = None) -> Any:
        return self.request("GET", url, None, result, headers)

    def post(
        self,
        url: str,
        message: Optional[Message] = None,
        result: Optional[Parser] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return self.request("POST", url, message, result, headers)

    def patch(
        self,
        url: str,
        message: Optional[Message] = None,
        result: Optional[Parser] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return self.request("PATCH", url, message, result, headers)

    def delete(self, url: str, headers: Optional[Mapping[str, str]] = None) -> None:
        self.request("DELETE", url, None, None, headers)

    # -------------------- Paging --------------------
    def follow(self, link: str, result: Optional[Parser] = None) -> Any:
        """GET an absolute ``@odata.nextLink`` or ``@odata.deltaLink``."""
        return self.get(link, result)

    def get_all_pages(self, url: str, item_parser: Optional[Callable[[Any], Any]] = None) -> List[Any]:
        """Fetch every page of a collection, following ``@odata.nextLink``."""
        parse = GraphCollection.parser(item_parser)
        out: List[Any] = []
        seen = set()
        next_url: Optional[str] = url
        while next_url:
            if next_url in seen:
                raise DeserializationError(f"@odata.nextLink repeats an already fetched page: {next_url}")
            seen.add(next_url)
            page = self.get(next_url, parse)
            if page is None:
                break
            out.extend(page.value)
            next_url = page.next_link
        return out
