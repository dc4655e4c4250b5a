"""Client for the user-scoped Microsoft Graph API.

Calendars, calendar groups, events and calendar views, presence, planner and
inference classification under ``/users/{id}``.

Usage:
    from graph_users import GraphClient

    client = GraphClient(token="...")
    calendar = client.user("user-123").calendar.get()
    page = client.user("user-123").calendar_view.list("2024-01-01T00:00:00", "2024-01-31T23:59:59", top=50)
"""

from .client import DEFAULT_TIMEOUT, GRAPH, GraphClient
from .errors import (
    AuthenticationError,
    ConfigError,
    DeserializationError,
    GraphError,
    HttpError,
    SerializationError,
    TransportError,
)
from .models import (
    Attachment,
    Calendar,
    CalendarGroup,
    CalendarPermission,
    Event,
    Extension,
    GraphCollection,
    GraphRecord,
    InferenceClassification,
    InferenceClassificationOverride,
    MultiValueLegacyExtendedProperty,
    PlannerAssignedToTaskBoardFormat,
    PlannerBucket,
    PlannerBucketTaskBoardFormat,
    PlannerPlan,
    PlannerPlanDetails,
    PlannerProgressTaskBoardFormat,
    PlannerTask,
    PlannerTaskDetails,
    PlannerUser,
    Presence,
    SingleValueLegacyExtendedProperty,
)
from .paths import build_path, encode_path
from .query import QueryOptions
from .serialization import Message, encode_body

__all__ = [
    "GraphClient",
    "GRAPH",
    "DEFAULT_TIMEOUT",
    "QueryOptions",
    "Message",
    "build_path",
    "encode_path",
    "encode_body",
    # Errors
    "GraphError",
    "AuthenticationError",
    "ConfigError",
    "DeserializationError",
    "HttpError",
    "SerializationError",
    "TransportError",
    # Records
    "GraphRecord",
    "GraphCollection",
    "Attachment",
    "Calendar",
    "CalendarGroup",
    "CalendarPermission",
    "Event",
    "Extension",
    "InferenceClassification",
    "InferenceClassificationOverride",
    "MultiValueLegacyExtendedProperty",
    "SingleValueLegacyExtendedProperty",
    "PlannerAssignedToTaskBoardFormat",
    "PlannerBucket",
    "PlannerBucketTaskBoardFormat",
    "PlannerPlan",
    "PlannerPlanDetails",
    "PlannerProgressTaskBoardFormat",
    "PlannerTask",
    "PlannerTaskDetails",
    "PlannerUser",
    "Presence",
]
