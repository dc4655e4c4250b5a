"""MSAL bearer-token provider for GraphClient.

Device-code sign-in with a serializable token cache on disk, plus silent
refresh from the cached account before the access token expires.
"""

from __future__ import annotations

import os
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from .errors import AuthenticationError

# Lazy optional dep: msal is only needed when signing in interactively
msal = None  # type: ignore

DEFAULT_SCOPES = ["https://graph.microsoft.com/.default"]

# Refresh this many seconds before the token's stated expiry
EXPIRY_SKEW = 60


def _msal():  # type: ignore
    global msal
    if msal is None:  # pragma: no cover - optional import
        import msal as _msal_mod  # type: ignore
        msal = _msal_mod
    return msal


class MsalTokenProvider:
    """Callable returning a valid Graph access token.

    Usage:
        provider = MsalTokenProvider(client_id="...", tenant="common", token_path="~/.cache/graph.json")
        client = GraphClient(token_provider=provider)
    """

    def __init__(
        self,
        client_id: str,
        tenant: str = "common",
        token_path: Optional[str] = None,
        scopes: Optional[List[str]] = None,
        prompt: Callable[[str], Any] = print,
    ) -> None:
        self.client_id = client_id
        self.tenant = tenant
        self.token_path = os.path.expanduser(token_path) if token_path else None
        self.scopes = list(scopes or DEFAULT_SCOPES)
        self.prompt = prompt
        self._token: Optional[Dict[str, Any]] = None
        self._cache = None
        self._app = None
        self._lock = threading.Lock()

    @property
    def authority(self) -> str:
        return f"https://login.microsoftonline.com/{self.tenant}"

    def __call__(self) -> str:
        # One refresh at a time; other callers wait and reuse the new token
        with self._lock:
            if self._token is None or self._expired():
                if not self._acquire_silent():
                    self.authenticate()
            return self._token["access_token"]  # type: ignore[index]

    def _expired(self) -> bool:
        return (self._token or {}).get("expires_at", 0) - EXPIRY_SKEW <= time.time()

    def _ensure_app(self) -> None:
        if self._app is not None:
            return
        cache = _msal().SerializableTokenCache()
        if self.token_path and os.path.exists(self.token_path):
            with open(self.token_path, "r", encoding="utf-8") as fh:
                cache.deserialize(fh.read())
        self._cache = cache
        self._app = _msal().PublicClientApplication(self.client_id, authority=self.authority, token_cache=cache)

    def _store(self, result: Dict[str, Any]) -> None:
        self._token = {
            "access_token": result["access_token"],
            "expires_at": time.time() + int(result.get("expires_in", 3600)),
        }
        if self.token_path and self._cache is not None:
            os.makedirs(os.path.dirname(self.token_path) or ".", exist_ok=True)
            with open(self.token_path, "w", encoding="utf-8") as fh:
                fh.write(self._cache.serialize())

    def _acquire_silent(self) -> bool:
        self._ensure_app()
        accounts = self._app.get_accounts()
        if not accounts:
            return False
        result = self._app.acquire_token_silent(self.scopes, account=accounts[0])
        if result and "access_token" in result:
            self._store(result)
            return True
        return False

    def authenticate(self) -> None:
        """Run the device-code flow; ``prompt`` receives the sign-in instructions."""
        self._ensure_app()
        flow = self._app.initiate_device_flow(scopes=self.scopes)
        if "user_code" not in flow:
            raise AuthenticationError("Failed to start device flow for Microsoft Graph")
        self.prompt(f"To sign in, visit {flow['verification_uri']} and enter code: {flow['user_code']}")
        result = self._app.acquire_token_by_device_flow(flow)
        if "access_token" not in result:
            raise AuthenticationError(f"Device flow failed: {result.get('error_description') or result}")
        self._store(result)
