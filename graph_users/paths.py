"""URL path building for Graph resources."""

from __future__ import annotations

from urllib.parse import quote


def encode_path(value: object) -> str:
    """Percent-encode one path segment.

    Every reserved character is escaped so the value reaches Graph as a
    single opaque segment: ``"abc/def"`` becomes ``"abc%2Fdef"``.
    """
    return quote(str(value), safe="")


def build_path(template: str, *ids: object) -> str:
    """Substitute encoded ids into the ``{}`` placeholders of ``template``."""
    expected = template.count("{}")
    if expected != len(ids):
        raise ValueError(f"path template {template!r} takes {expected} ids, got {len(ids)}")
    return template.format(*(encode_path(i) for i in ids))


def join_path(base: str, *segments: str) -> str:
    """Append already-encoded segments to ``base``."""
    return "/".join([base.rstrip("/"), *segments])


def odata_literal(value: str) -> str:
    """Quote and encode a string argument of an OData function segment.

    ``"o'brien"`` becomes ``'o%27%27brien'``: single quotes are doubled,
    then the value is percent-encoded between literal quotes.
    """
    return "'" + encode_path(str(value).replace("'", "''")) + "'"
