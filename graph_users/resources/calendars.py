"""Calendars, calendar groups and calendar permissions."""

from __future__ import annotations

from typing import Any, Dict, List

from ..models import Calendar, CalendarGroup, CalendarPermission, GraphCollection
from ..paths import odata_literal
from ..serialization import Message
from .base import (
    CountMixin,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ItemsMixin,
    ListMixin,
    UpdateMixin,
)
from .events import CalendarViewCollection, EventCollection, ExtendedPropertiesMixin


class CalendarPermissionItem(GetMixin, UpdateMixin, DeleteMixin):
    model = CalendarPermission


class CalendarPermissionCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = CalendarPermission
    item_class = CalendarPermissionItem


class CalendarNavigationMixin(GetMixin, UpdateMixin, ExtendedPropertiesMixin):
    """Operations shared by the default calendar and addressable calendars."""

    model = Calendar

    @property
    def calendar_permissions(self) -> CalendarPermissionCollection:
        return self._nav(CalendarPermissionCollection, "calendarPermissions")

    @property
    def calendar_view(self) -> CalendarViewCollection:
        return self._nav(CalendarViewCollection, "calendarView")

    @property
    def events(self) -> EventCollection:
        return self._nav(EventCollection, "events")

    def allowed_calendar_sharing_roles(self, user: str) -> List[str]:
        """Roles ``user`` may be granted on this calendar, e.g. ``["read", "write"]``."""
        segment = f"allowedCalendarSharingRoles(User={odata_literal(user)})"
        page = self.client.get(self._url(None, segment), GraphCollection.parser())
        return list(page.value) if page is not None else []

    def get_schedule(
        self,
        schedules: List[str],
        start: Dict[str, str],
        end: Dict[str, str],
        availability_view_interval: int = 0,
    ) -> List[Dict[str, Any]]:
        """Free/busy information for ``schedules`` (users, lists or resources).

        ``start``/``end`` are Graph ``dateTimeTimeZone`` dicts.
        """
        body: Dict[str, Any] = {"schedules": list(schedules), "startTime": start, "endTime": end}
        if availability_view_interval:
            body["availabilityViewInterval"] = int(availability_view_interval)
        page = self.client.post(self._url(None, "getSchedule"), Message.json(body), GraphCollection.parser())
        return list(page.value) if page is not None else []


class UserCalendar(CalendarNavigationMixin):
    """The user's primary calendar (``/calendar``); it cannot be deleted."""


class CalendarItem(CalendarNavigationMixin, DeleteMixin):
    pass


class CalendarCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = Calendar
    item_class = CalendarItem


class CalendarGroupItem(GetMixin, UpdateMixin, DeleteMixin):
    model = CalendarGroup

    @property
    def calendars(self) -> CalendarCollection:
        return self._nav(CalendarCollection, "calendars")


class CalendarGroupCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = CalendarGroup
    item_class = CalendarGroupItem
