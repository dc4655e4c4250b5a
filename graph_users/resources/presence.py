"""User presence."""

from __future__ import annotations

from typing import Any, Dict

from ..models import Presence
from .base import DeleteMixin, GetMixin, UpdateMixin


class PresenceRequests(GetMixin, UpdateMixin, DeleteMixin):
    model = Presence

    def set_presence(self, session_id: str, availability: str, activity: str, expiration_duration: str = "") -> None:
        """Set the presence of an application session, e.g. ``Busy``/``InACall``.

        ``expiration_duration`` is an ISO 8601 duration such as ``PT1H``.
        """
        body: Dict[str, Any] = {"sessionId": session_id, "availability": availability, "activity": activity}
        if expiration_duration:
            body["expirationDuration"] = expiration_duration
        self._action("setPresence", body)

    def clear_presence(self, session_id: str) -> None:
        self._action("clearPresence", {"sessionId": session_id})
