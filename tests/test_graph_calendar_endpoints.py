"""Tests for calendar, calendar group and calendar permission request builders."""

from __future__ import annotations

import unittest

from graph_users.client import GRAPH
from graph_users.models import Calendar, CalendarGroup, CalendarPermission, GraphCollection
from graph_users.testing import json_response, make_client, no_content, text_response


class TestUserCalendar(unittest.TestCase):
    def test_get_default_calendar(self):
        client, session = make_client(json_response({"id": "cal-1", "name": "Calendar"}))
        cal = client.user("user-123").calendar.get(select=[])
        self.assertIsInstance(cal, Calendar)
        self.assertEqual(cal.name, "Calendar")
        req = session.last
        self.assertEqual(req.method, "GET")
        self.assertEqual(req.url, f"{GRAPH}/users/user-123/calendar")
        self.assertIsNone(req.data)

    def test_get_with_select(self):
        client, session = make_client(json_response({"id": "cal-1"}))
        client.me().calendar.get(select=["name", "owner"])
        self.assertEqual(session.last.url, f"{GRAPH}/me/calendar?$select=name+owner")

    def test_update_default_calendar(self):
        client, session = make_client(json_response({"id": "cal-1", "color": "lightBlue"}))
        cal = client.user("u").calendar.update({"color": "lightBlue"})
        self.assertEqual(cal.color, "lightBlue")
        self.assertEqual(session.last.method, "PATCH")
        self.assertEqual(session.last.json(), {"color": "lightBlue"})

    def test_default_calendar_has_no_delete(self):
        client, _ = make_client()
        self.assertFalse(hasattr(client.user("u").calendar, "delete"))

    def test_update_accepts_record(self):
        client, session = make_client(no_content())
        self.assertIsNone(client.user("u").calendar.update(Calendar(name="Renamed")))
        self.assertEqual(session.last.json(), {"name": "Renamed"})

    def test_user_id_is_encoded(self):
        client, session = make_client(json_response({"id": "c"}))
        client.user("abc/def").calendar.get()
        self.assertEqual(session.last.path, "/v1.0/users/abc%2Fdef/calendar")

    def test_user_principal_name(self):
        client, session = make_client(json_response({"id": "c"}))
        client.user("adele@contoso.com").calendar.get()
        self.assertEqual(session.last.path, "/v1.0/users/adele%40contoso.com/calendar")


class TestCalendars(unittest.TestCase):
    def test_list_with_options(self):
        body = {"value": [{"id": "a", "name": "Work"}], "@odata.count": 1}
        client, session = make_client(json_response(body))
        page = client.user("u").calendars.list(top=5, count=True, filter="name eq 'Work'")
        self.assertIsInstance(page, GraphCollection)
        self.assertEqual(page.count, 1)
        self.assertEqual(page.value[0].name, "Work")
        self.assertEqual(session.last.params, {"$count": "true", "$filter": "name eq 'Work'", "$top": "5"})

    def test_create(self):
        client, session = make_client(json_response({"id": "new", "name": "Travel"}, status_code=201))
        cal = client.user("u").calendars.create({"name": "Travel"})
        self.assertEqual(cal.id, "new")
        self.assertEqual(session.last.method, "POST")
        self.assertEqual(session.last.url, f"{GRAPH}/users/u/calendars")
        self.assertEqual(session.last.headers["Content-Type"], "application/json")

    def test_item_get_update_delete(self):
        client, session = make_client(json_response({"id": "c1"}), json_response({"id": "c1"}), no_content())
        item = client.user("u").calendars.by_id("c1")
        item.get()
        item.update({"name": "x"})
        item.delete()
        self.assertEqual([r.method for r in session.requests], ["GET", "PATCH", "DELETE"])
        self.assertTrue(all(r.url == f"{GRAPH}/users/u/calendars/c1" for r in session.requests))

    def test_count(self):
        client, session = make_client(text_response("3"))
        self.assertEqual(client.user("u").calendars.count(), 3)
        self.assertEqual(session.last.url, f"{GRAPH}/users/u/calendars/$count")

    def test_events_under_calendar(self):
        client, session = make_client(json_response({"value": []}))
        client.user("u").calendars.by_id("c1").events.list()
        self.assertEqual(session.last.url, f"{GRAPH}/users/u/calendars/c1/events")

    def test_calendar_view_requires_range(self):
        client, session = make_client(json_response({"value": [{"id": "e1", "subject": "Standup"}]}))
        page = client.user("u").calendars.by_id("c1").calendar_view.list(
            "2024-01-01T00:00:00", "2024-01-08T00:00:00", top=10
        )
        self.assertEqual(page.value[0].subject, "Standup")
        self.assertEqual(session.last.path, "/v1.0/users/u/calendars/c1/calendarView")
        self.assertEqual(
            session.last.params,
            {"startDateTime": "2024-01-01T00:00:00", "endDateTime": "2024-01-08T00:00:00", "$top": "10"},
        )

    def test_extended_properties(self):
        client, session = make_client(json_response({"value": []}), json_response({"id": "p"}))
        cal = client.user("u").calendars.by_id("c1")
        cal.single_value_extended_properties.list()
        cal.multi_value_extended_properties.by_id("p").get()
        self.assertEqual(session.requests[0].path, "/v1.0/users/u/calendars/c1/singleValueExtendedProperties")
        self.assertEqual(session.requests[1].path, "/v1.0/users/u/calendars/c1/multiValueExtendedProperties/p")


class TestReminderView(unittest.TestCase):
    def test_path_and_result(self):
        reminder = {"eventId": "e1", "eventSubject": "Standup", "reminderFireTime": {"dateTime": "2024-01-01T08:45:00"}}
        client, session = make_client(json_response({"value": [reminder]}))
        result = client.user("u").reminder_view("2024-01-01T00:00:00", "2024-01-02T00:00:00")
        self.assertEqual(result, [reminder])
        self.assertEqual(session.last.method, "GET")
        self.assertEqual(
            session.last.path,
            "/v1.0/users/u/reminderView(StartDateTime='2024-01-01T00%3A00%3A00',"
            "EndDateTime='2024-01-02T00%3A00%3A00')",
        )
        self.assertEqual(session.last.query, "")

    def test_query_options(self):
        client, session = make_client(json_response({"value": []}))
        self.assertEqual(client.me().reminder_view("a", "b", top=3, count=True), [])
        self.assertEqual(session.last.params, {"$count": "true", "$top": "3"})


class TestCalendarGroups(unittest.TestCase):
    def test_list_groups(self):
        client, session = make_client(json_response({"value": [{"id": "g1", "name": "My Calendars"}]}))
        page = client.user("u").calendar_groups.list()
        self.assertIsInstance(page.value[0], CalendarGroup)
        self.assertEqual(session.last.url, f"{GRAPH}/users/u/calendarGroups")

    def test_nested_calendar_permissions(self):
        client, session = make_client(json_response({"id": "perm", "role": "read"}))
        perm = (
            client.user("u")
            .calendar_groups.by_id("g1")
            .calendars.by_id("c1")
            .calendar_permissions.by_id("perm")
            .get()
        )
        self.assertIsInstance(perm, CalendarPermission)
        self.assertEqual(perm.role, "read")
        self.assertEqual(session.last.path, "/v1.0/users/u/calendarGroups/g1/calendars/c1/calendarPermissions/perm")

    def test_delete_group(self):
        client, session = make_client(no_content())
        client.user("u").calendar_groups.by_id("g1").delete()
        self.assertEqual(session.last.method, "DELETE")
        self.assertEqual(session.last.path, "/v1.0/users/u/calendarGroups/g1")


class TestCalendarPermissions(unittest.TestCase):
    def test_create_permission(self):
        body = {"emailAddress": {"address": "a@b.com"}, "role": "write"}
        client, session = make_client(json_response(dict(body, id="p1"), status_code=201))
        perm = client.user("u").calendar.calendar_permissions.create(body)
        self.assertEqual(perm.email_address, {"address": "a@b.com"})
        self.assertEqual(session.last.path, "/v1.0/users/u/calendar/calendarPermissions")
        self.assertEqual(session.last.json(), body)

    def test_update_permission_role(self):
        client, session = make_client(json_response({"id": "p1", "role": "read"}))
        client.user("u").calendar.calendar_permissions.by_id("p1").update({"role": "read"})
        self.assertEqual(session.last.method, "PATCH")
        self.assertEqual(session.last.path, "/v1.0/users/u/calendar/calendarPermissions/p1")


class TestCalendarFunctions(unittest.TestCase):
    def test_allowed_calendar_sharing_roles(self):
        client, session = make_client(json_response({"value": ["read", "write"]}))
        roles = client.user("u").calendar.allowed_calendar_sharing_roles("adele@contoso.com")
        self.assertEqual(roles, ["read", "write"])
        self.assertEqual(
            session.last.path,
            "/v1.0/users/u/calendar/allowedCalendarSharingRoles(User='adele%40contoso.com')",
        )

    def test_get_schedule(self):
        payload = {"value": [{"scheduleId": "a@b.com", "availabilityView": "0020"}]}
        client, session = make_client(json_response(payload))
        start = {"dateTime": "2024-01-01T09:00:00", "timeZone": "UTC"}
        end = {"dateTime": "2024-01-01T11:00:00", "timeZone": "UTC"}
        result = client.me().calendar.get_schedule(["a@b.com"], start, end, availability_view_interval=30)
        self.assertEqual(result[0]["availabilityView"], "0020")
        self.assertEqual(session.last.method, "POST")
        self.assertEqual(session.last.url, f"{GRAPH}/me/calendar/getSchedule")
        self.assertEqual(
            session.last.json(),
            {"schedules": ["a@b.com"], "startTime": start, "endTime": end, "availabilityViewInterval": 30},
        )


if __name__ == "__main__":
    unittest.main()
