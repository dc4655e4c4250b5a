"""Client settings resolution.

Resolution order for every setting: explicit argument > environment >
INI profile (``[graph.<profile>]`` then ``[graph]``) > default.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from .client import DEFAULT_TIMEOUT, GRAPH

ENV_TOKEN = "MICROSOFT_GRAPH_API_API_KEY"  # noqa: S105 - variable name, not a secret
ENV_HOST = "MICROSOFT_GRAPH_API_HOST"
ENV_CLIENT_ID = "MICROSOFT_GRAPH_API_CLIENT_ID"
ENV_TENANT = "MICROSOFT_GRAPH_API_TENANT"
ENV_TOKEN_CACHE = "MICROSOFT_GRAPH_API_TOKEN_CACHE"
ENV_CREDENTIALS = "GRAPH_USERS_CREDENTIALS"

_SECTION = "graph"
DEFAULT_TENANT = "common"


@dataclass
class GraphSettings:
    token: Optional[str] = None
    host: str = GRAPH
    client_id: Optional[str] = None
    tenant: str = DEFAULT_TENANT
    token_cache: Optional[str] = None
    timeout: Union[float, Tuple[float, float]] = DEFAULT_TIMEOUT


def _config_roots() -> List[str]:
    """Return ordered list of config root directories."""
    roots: List[str] = []
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        roots.append(os.path.expanduser(xdg))
    roots.append(os.path.expanduser("~/.config"))
    return roots


def credential_ini_paths() -> List[str]:
    """Return ordered list of credentials.ini paths to search."""
    paths: List[str] = []
    env_creds = os.environ.get(ENV_CREDENTIALS)
    if env_creds:
        paths.append(os.path.expanduser(env_creds))
    for root in _config_roots():
        paths.append(os.path.join(root, "credentials.ini"))
    # Dedupe while preserving order
    seen: set = set()
    unique: List[str] = []
    for p in paths:
        if p not in seen:
            seen.add(p)
            unique.append(p)
    return unique


def _read_ini(paths: Optional[List[str]] = None) -> Dict[str, Dict[str, str]]:
    """Merge sections across INI files; earlier files win."""
    merged: Dict[str, Dict[str, str]] = {}
    for p in paths if paths is not None else credential_ini_paths():
        if not os.path.exists(p):
            continue
        cp = configparser.ConfigParser()
        cp.read(p, encoding="utf-8")
        for section in cp.sections():
            sec = merged.setdefault(section, {})
            for k, v in cp.items(section):
                sec.setdefault(k, v)
    return merged


def _profile_values(profile: Optional[str], paths: Optional[List[str]] = None) -> Dict[str, str]:
    ini = _read_ini(paths)
    values = dict(ini.get(_SECTION, {}))
    if profile:
        values.update(ini.get(f"{_SECTION}.{profile}", {}))
    return values


def resolve_settings(
    profile: Optional[str] = None,
    *,
    token: Optional[str] = None,
    host: Optional[str] = None,
    client_id: Optional[str] = None,
    tenant: Optional[str] = None,
    token_cache: Optional[str] = None,
    ini_paths: Optional[List[str]] = None,
) -> GraphSettings:
    """Fold arguments over environment and INI defaults."""
    ini = _profile_values(profile, ini_paths)
    resolved_cache = token_cache or os.environ.get(ENV_TOKEN_CACHE) or ini.get("token_cache")
    return GraphSettings(
        token=token or os.environ.get(ENV_TOKEN) or ini.get("token") or None,
        host=host or os.environ.get(ENV_HOST) or ini.get("host") or GRAPH,
        client_id=client_id or os.environ.get(ENV_CLIENT_ID) or ini.get("client_id") or None,
        tenant=tenant or os.environ.get(ENV_TENANT) or ini.get("tenant") or DEFAULT_TENANT,
        token_cache=os.path.expanduser(resolved_cache) if resolved_cache else None,
    )
