"""Root builder for ``/users/{id}`` (or ``/me``)."""

from __future__ import annotations

from typing import Any, Dict, List

from ..models import GraphCollection
from ..paths import odata_literal
from ..query import QueryOptions
from .base import RequestBuilder
from .calendars import CalendarCollection, CalendarGroupCollection, UserCalendar
from .events import CalendarViewCollection, EventCollection
from .inference_classification import InferenceClassificationRequests
from .planner import PlannerUserRequests
from .presence import PresenceRequests


class UserRequests(RequestBuilder):
    @property
    def calendar(self) -> UserCalendar:
        return self._nav(UserCalendar, "calendar")

    @property
    def calendars(self) -> CalendarCollection:
        return self._nav(CalendarCollection, "calendars")

    @property
    def calendar_groups(self) -> CalendarGroupCollection:
        return self._nav(CalendarGroupCollection, "calendarGroups")

    @property
    def calendar_view(self) -> CalendarViewCollection:
        return self._nav(CalendarViewCollection, "calendarView")

    @property
    def events(self) -> EventCollection:
        return self._nav(EventCollection, "events")

    @property
    def planner(self) -> PlannerUserRequests:
        return self._nav(PlannerUserRequests, "planner")

    @property
    def presence(self) -> PresenceRequests:
        return self._nav(PresenceRequests, "presence")

    @property
    def inference_classification(self) -> InferenceClassificationRequests:
        return self._nav(InferenceClassificationRequests, "inferenceClassification")

    def reminder_view(
        self,
        start_date_time: str,
        end_date_time: str,
        *,
        top: int = 0,
        skip: int = 0,
        filter: str = "",
        count: bool = False,
        search: str = "",
    ) -> List[Dict[str, Any]]:
        """Reminders due between the two times, as Graph ``reminder`` dicts."""
        segment = (
            f"reminderView(StartDateTime={odata_literal(start_date_time)},"
            f"EndDateTime={odata_literal(end_date_time)})"
        )
        query = QueryOptions(top=top, skip=skip, filter=filter, count=count, search=search)
        page = self.client.get(self._url(query, segment), GraphCollection.parser())
        return list(page.value) if page is not None else []
