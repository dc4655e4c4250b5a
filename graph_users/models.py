"""Typed records for the Graph resources exposed by this package.

Attributes use snake_case and map to Graph's camelCase wire names. Keys the
record does not declare are kept in ``additional_data`` so decoding and
re-encoding a payload is lossless. Nested complex values (``start``,
``attendees``, ``assignments``...) stay plain JSON dicts and lists.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from .errors import DeserializationError
from .serialization import as_mapping

R = TypeVar("R", bound="GraphRecord")
T = TypeVar("T")

_EXTRA = "additional_data"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def _wire_name(f: dataclasses.Field) -> str:
    return f.metadata.get("json") or _camel(f.name)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# Default of every record field; distinguishes "never set" from an explicit None
UNSET: Any = _Unset()


@dataclass
class GraphRecord:
    """Base for Graph entity records.

    Fields left at their default read as ``None`` and are omitted from
    ``to_dict``. A field explicitly given ``None`` (in the constructor, by
    assignment, or as a JSON ``null`` in ``from_dict``) is encoded as
    ``null``, so a PATCH body can clear a property.
    """

    id: Optional[str] = UNSET
    odata_type: Optional[str] = field(default=UNSET, metadata={"json": "@odata.type"})
    odata_etag: Optional[str] = field(default=UNSET, metadata={"json": "@odata.etag"})
    additional_data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        explicit = set()
        for f in dataclasses.fields(self):
            if f.name == _EXTRA:
                continue
            if getattr(self, f.name) is UNSET:
                object.__setattr__(self, f.name, None)
            else:
                explicit.add(f.name)
        object.__setattr__(self, "_explicit", explicit)

    def __setattr__(self, name: str, value: Any) -> None:
        explicit = self.__dict__.get("_explicit")
        if explicit is not None and name != _EXTRA:
            explicit.add(name)
        object.__setattr__(self, name, value)

    @property
    def explicit_fields(self) -> frozenset:
        """Names of the fields that were set rather than left at their default."""
        return frozenset(self.__dict__.get("_explicit", ()))

    @classmethod
    def from_dict(cls: Type[R], data: Any) -> R:
        payload = as_mapping(data, cls.__name__)
        kwargs: Dict[str, Any] = {}
        known = set()
        for f in dataclasses.fields(cls):
            if f.name == _EXTRA:
                continue
            key = _wire_name(f)
            known.add(key)
            if key in payload:
                kwargs[f.name] = payload[key]
        kwargs[_EXTRA] = {k: v for k, v in payload.items() if k not in known}
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        explicit = self.explicit_fields
        for f in dataclasses.fields(self):
            if f.name == _EXTRA:
                continue
            value = getattr(self, f.name)
            if value is not None or f.name in explicit:
                out[_wire_name(f)] = value
        out.update(self.additional_data)
        return out


@dataclass
class GraphCollection(Generic[T]):
    """One page of a Graph collection response."""

    value: List[T] = field(default_factory=list)
    next_link: Optional[str] = None
    delta_link: Optional[str] = None
    count: Optional[int] = None
    context: Optional[str] = None

    @classmethod
    def parser(cls, item_parser: Optional[Callable[[Any], T]] = None) -> Callable[[Any], "GraphCollection[T]"]:
        """Return a parser for collection pages whose items use ``item_parser``."""

        def parse(data: Any) -> "GraphCollection[T]":
            payload = as_mapping(data, "collection")
            items = payload.get("value", [])
            if not isinstance(items, list):
                raise DeserializationError("Collection 'value' is not a JSON array")
            if item_parser is not None:
                items = [item_parser(item) for item in items]
            return cls(
                value=items,
                next_link=payload.get("@odata.nextLink"),
                delta_link=payload.get("@odata.deltaLink"),
                count=payload.get("@odata.count"),
                context=payload.get("@odata.context"),
            )

        return parse


# -------------------- Calendars --------------------

@dataclass
class Calendar(GraphRecord):
    name: Optional[str] = UNSET
    color: Optional[str] = UNSET
    hex_color: Optional[str] = UNSET
    change_key: Optional[str] = UNSET
    is_default_calendar: Optional[bool] = UNSET
    is_removable: Optional[bool] = UNSET
    is_tallying_responses: Optional[bool] = UNSET
    can_edit: Optional[bool] = UNSET
    can_share: Optional[bool] = UNSET
    can_view_private_items: Optional[bool] = UNSET
    owner: Optional[Dict[str, Any]] = UNSET
    allowed_online_meeting_providers: Optional[List[str]] = UNSET
    default_online_meeting_provider: Optional[str] = UNSET


@dataclass
class CalendarGroup(GraphRecord):
    name: Optional[str] = UNSET
    class_id: Optional[str] = UNSET
    change_key: Optional[str] = UNSET


@dataclass
class CalendarPermission(GraphRecord):
    email_address: Optional[Dict[str, Any]] = UNSET
    role: Optional[str] = UNSET
    allowed_roles: Optional[List[str]] = UNSET
    is_inside_organization: Optional[bool] = UNSET
    is_removable: Optional[bool] = UNSET


# -------------------- Events --------------------

@dataclass
class Event(GraphRecord):
    subject: Optional[str] = UNSET
    body: Optional[Dict[str, Any]] = UNSET
    body_preview: Optional[str] = UNSET
    start: Optional[Dict[str, Any]] = UNSET
    end: Optional[Dict[str, Any]] = UNSET
    original_start: Optional[str] = UNSET
    original_start_time_zone: Optional[str] = UNSET
    original_end_time_zone: Optional[str] = UNSET
    location: Optional[Dict[str, Any]] = UNSET
    locations: Optional[List[Dict[str, Any]]] = UNSET
    attendees: Optional[List[Dict[str, Any]]] = UNSET
    organizer: Optional[Dict[str, Any]] = UNSET
    categories: Optional[List[str]] = UNSET
    recurrence: Optional[Dict[str, Any]] = UNSET
    response_status: Optional[Dict[str, Any]] = UNSET
    is_all_day: Optional[bool] = UNSET
    is_cancelled: Optional[bool] = UNSET
    is_draft: Optional[bool] = UNSET
    is_organizer: Optional[bool] = UNSET
    is_online_meeting: Optional[bool] = UNSET
    is_reminder_on: Optional[bool] = UNSET
    reminder_minutes_before_start: Optional[int] = UNSET
    online_meeting: Optional[Dict[str, Any]] = UNSET
    online_meeting_provider: Optional[str] = UNSET
    online_meeting_url: Optional[str] = UNSET
    allow_new_time_proposals: Optional[bool] = UNSET
    hide_attendees: Optional[bool] = UNSET
    response_requested: Optional[bool] = UNSET
    has_attachments: Optional[bool] = UNSET
    importance: Optional[str] = UNSET
    sensitivity: Optional[str] = UNSET
    show_as: Optional[str] = UNSET
    type: Optional[str] = UNSET
    series_master_id: Optional[str] = UNSET
    transaction_id: Optional[str] = UNSET
    i_cal_u_id: Optional[str] = UNSET
    web_link: Optional[str] = UNSET
    change_key: Optional[str] = UNSET
    created_date_time: Optional[str] = UNSET
    last_modified_date_time: Optional[str] = UNSET


@dataclass
class Attachment(GraphRecord):
    name: Optional[str] = UNSET
    content_type: Optional[str] = UNSET
    content_bytes: Optional[str] = UNSET
    size: Optional[int] = UNSET
    is_inline: Optional[bool] = UNSET
    last_modified_date_time: Optional[str] = UNSET


@dataclass
class Extension(GraphRecord):
    extension_name: Optional[str] = UNSET


@dataclass
class MultiValueLegacyExtendedProperty(GraphRecord):
    value: Optional[List[str]] = UNSET


@dataclass
class SingleValueLegacyExtendedProperty(GraphRecord):
    value: Optional[str] = UNSET


# -------------------- Presence --------------------

@dataclass
class Presence(GraphRecord):
    availability: Optional[str] = UNSET
    activity: Optional[str] = UNSET
    status_message: Optional[Dict[str, Any]] = UNSET
    out_of_office_settings: Optional[Dict[str, Any]] = UNSET


# -------------------- Planner --------------------

@dataclass
class PlannerUser(GraphRecord):
    pass


@dataclass
class PlannerPlan(GraphRecord):
    title: Optional[str] = UNSET
    owner: Optional[str] = UNSET
    container: Optional[Dict[str, Any]] = UNSET
    created_by: Optional[Dict[str, Any]] = UNSET
    created_date_time: Optional[str] = UNSET


@dataclass
class PlannerPlanDetails(GraphRecord):
    category_descriptions: Optional[Dict[str, Any]] = UNSET
    shared_with: Optional[Dict[str, Any]] = UNSET


@dataclass
class PlannerBucket(GraphRecord):
    name: Optional[str] = UNSET
    plan_id: Optional[str] = UNSET
    order_hint: Optional[str] = UNSET


@dataclass
class PlannerTask(GraphRecord):
    title: Optional[str] = UNSET
    plan_id: Optional[str] = UNSET
    bucket_id: Optional[str] = UNSET
    percent_complete: Optional[int] = UNSET
    priority: Optional[int] = UNSET
    start_date_time: Optional[str] = UNSET
    due_date_time: Optional[str] = UNSET
    completed_date_time: Optional[str] = UNSET
    completed_by: Optional[Dict[str, Any]] = UNSET
    created_by: Optional[Dict[str, Any]] = UNSET
    created_date_time: Optional[str] = UNSET
    assignments: Optional[Dict[str, Any]] = UNSET
    applied_categories: Optional[Dict[str, Any]] = UNSET
    order_hint: Optional[str] = UNSET
    assignee_priority: Optional[str] = UNSET
    conversation_thread_id: Optional[str] = UNSET
    has_description: Optional[bool] = UNSET
    preview_type: Optional[str] = UNSET
    reference_count: Optional[int] = UNSET
    checklist_item_count: Optional[int] = UNSET
    active_checklist_item_count: Optional[int] = UNSET


@dataclass
class PlannerTaskDetails(GraphRecord):
    description: Optional[str] = UNSET
    preview_type: Optional[str] = UNSET
    references: Optional[Dict[str, Any]] = UNSET
    checklist: Optional[Dict[str, Any]] = UNSET


@dataclass
class PlannerAssignedToTaskBoardFormat(GraphRecord):
    order_hints_by_assignee: Optional[Dict[str, str]] = UNSET
    unassigned_order_hint: Optional[str] = UNSET


@dataclass
class PlannerBucketTaskBoardFormat(GraphRecord):
    order_hint: Optional[str] = UNSET


@dataclass
class PlannerProgressTaskBoardFormat(GraphRecord):
    order_hint: Optional[str] = UNSET


# -------------------- Inference classification --------------------

@dataclass
class InferenceClassification(GraphRecord):
    pass


@dataclass
class InferenceClassificationOverride(GraphRecord):
    classify_as: Optional[str] = UNSET
    sender_email_address: Optional[Dict[str, Any]] = UNSET
