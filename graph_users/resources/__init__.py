"""Request builders for user-scoped Graph resources.

Each builder holds the shared ``GraphClient`` and the already-encoded path of
one resource; navigating (``.events``, ``.by_id(...)``) returns a new builder
for the child path. Verb methods come from the capability mixins in
``base``.
"""

from .base import RequestBuilder
from .users import UserRequests

__all__ = ["RequestBuilder", "UserRequests"]
