"""Events, calendar views, instances and their navigation properties."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import (
    Attachment,
    Calendar,
    Event,
    Extension,
    GraphCollection,
    MultiValueLegacyExtendedProperty,
    SingleValueLegacyExtendedProperty,
)
from ..query import ListOption, QueryOptions
from .base import (
    CountMixin,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ItemsMixin,
    ListMixin,
    RequestBuilder,
    UpdateMixin,
)


def _time_range(start_date_time: str, end_date_time: str) -> Dict[str, Optional[str]]:
    return {"startDateTime": start_date_time, "endDateTime": end_date_time}


def _ranged_query(start_date_time: str, end_date_time: str, options: Dict[str, Any]) -> QueryOptions:
    """QueryOptions for a time-ranged call; caller ``params`` are merged with the range."""
    params = dict(options.pop("params", None) or {})
    params.update((k, v) for k, v in _time_range(start_date_time, end_date_time).items() if v)
    return QueryOptions(params=params, **options)


def _recipients(addresses: List[str]) -> List[Dict[str, Any]]:
    return [{"emailAddress": {"address": a}} for a in addresses]


# -------------------- Attachments --------------------

class AttachmentItem(GetMixin, DeleteMixin):
    model = Attachment


class AttachmentCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = Attachment
    item_class = AttachmentItem


# -------------------- Extensions --------------------

class ExtensionItem(GetMixin, UpdateMixin, DeleteMixin):
    model = Extension


class ExtensionCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = Extension
    item_class = ExtensionItem


# -------------------- Extended properties --------------------

class MultiValueExtendedPropertyItem(GetMixin, UpdateMixin, DeleteMixin):
    model = MultiValueLegacyExtendedProperty


class MultiValueExtendedPropertyCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = MultiValueLegacyExtendedProperty
    item_class = MultiValueExtendedPropertyItem


class SingleValueExtendedPropertyItem(GetMixin, UpdateMixin, DeleteMixin):
    model = SingleValueLegacyExtendedProperty


class SingleValueExtendedPropertyCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = SingleValueLegacyExtendedProperty
    item_class = SingleValueExtendedPropertyItem


class ExtendedPropertiesMixin(RequestBuilder):
    """Navigation shared by events and calendars."""

    @property
    def multi_value_extended_properties(self) -> MultiValueExtendedPropertyCollection:
        return self._nav(MultiValueExtendedPropertyCollection, "multiValueExtendedProperties")

    @property
    def single_value_extended_properties(self) -> SingleValueExtendedPropertyCollection:
        return self._nav(SingleValueExtendedPropertyCollection, "singleValueExtendedProperties")


class EventCalendar(GetMixin):
    """The calendar that contains an event (read-only)."""

    model = Calendar


# -------------------- Event collections --------------------

class DeltaMixin(RequestBuilder):
    def delta(self, *, start_date_time: str = "", end_date_time: str = "", **options: Any) -> GraphCollection:
        """Incremental changes (``delta()``); follow ``next_link``/``delta_link`` with ``client.follow``."""
        query = _ranged_query(start_date_time, end_date_time, options)
        return self.client.get(self._url(query, "delta()"), GraphCollection.parser(Event.from_dict))


class RangedListMixin(ListMixin):
    """Collections that expand recurring events inside a time range."""

    def list(
        self,
        start_date_time: str = "",
        end_date_time: str = "",
        *,
        top: int = 0,
        skip: int = 0,
        filter: str = "",
        count: bool = False,
        orderby: ListOption = (),
        select: ListOption = (),
        expand: ListOption = (),
        search: str = "",
    ) -> GraphCollection:
        return self._list(
            QueryOptions(
                top=top,
                skip=skip,
                filter=filter,
                count=count,
                orderby=orderby,
                select=select,
                expand=expand,
                search=search,
                params=_time_range(start_date_time, end_date_time),
            )
        )

    def list_all(self, start_date_time: str = "", end_date_time: str = "", **options: Any) -> List[Any]:
        return self._list_all(_ranged_query(start_date_time, end_date_time, options))


# -------------------- Event items --------------------

class EventNavigationMixin(ExtendedPropertiesMixin):
    """Reads, navigation properties and actions common to every event path."""

    model = Event

    def get(
        self,
        *,
        start_date_time: str = "",
        end_date_time: str = "",
        select: ListOption = (),
        expand: ListOption = (),
    ) -> Event:
        query = QueryOptions(select=select, expand=expand, params=_time_range(start_date_time, end_date_time))
        return self.client.get(self._url(query), Event.from_dict)

    @property
    def attachments(self) -> AttachmentCollection:
        return self._nav(AttachmentCollection, "attachments")

    @property
    def calendar(self) -> EventCalendar:
        return self._nav(EventCalendar, "calendar")

    @property
    def extensions(self) -> ExtensionCollection:
        return self._nav(ExtensionCollection, "extensions")

    # -------------------- Actions --------------------
    def accept(self, comment: str = "", send_response: bool = True) -> None:
        self._action("accept", {"comment": comment, "sendResponse": send_response})

    def decline(self, comment: str = "", send_response: bool = True) -> None:
        self._action("decline", {"comment": comment, "sendResponse": send_response})

    def tentatively_accept(self, comment: str = "", send_response: bool = True) -> None:
        self._action("tentativelyAccept", {"comment": comment, "sendResponse": send_response})

    def cancel(self, comment: str = "") -> None:
        """Cancel a meeting as its organizer and notify attendees."""
        self._action("cancel", {"comment": comment})

    def forward(self, to_recipients: List[str], comment: str = "") -> None:
        self._action("forward", {"toRecipients": _recipients(to_recipients), "comment": comment})

    def dismiss_reminder(self) -> None:
        self._action("dismissReminder")

    def snooze_reminder(self, date_time: str, time_zone: str = "UTC") -> None:
        self._action("snoozeReminder", {"newReminderTime": {"dateTime": date_time, "timeZone": time_zone}})


class InstanceItem(EventNavigationMixin):
    """One occurrence of a recurring event."""


class InstanceCollection(RangedListMixin, CountMixin, ItemsMixin, DeltaMixin):
    model = Event
    item_class = InstanceItem


class InstancesMixin(RequestBuilder):
    @property
    def instances(self) -> InstanceCollection:
        return self._nav(InstanceCollection, "instances")


class CalendarViewItem(EventNavigationMixin, InstancesMixin):
    pass


class CalendarViewCollection(RangedListMixin, CountMixin, ItemsMixin, DeltaMixin):
    model = Event
    item_class = CalendarViewItem


class EventItem(EventNavigationMixin, InstancesMixin, UpdateMixin, DeleteMixin):
    pass


class EventCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin, DeltaMixin):
    model = Event
    item_class = EventItem
