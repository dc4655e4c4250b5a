"""Tests for planner request builders."""

from __future__ import annotations

import unittest

from graph_users.errors import HttpError
from graph_users.models import PlannerPlan, PlannerTask, PlannerTaskDetails, PlannerUser
from graph_users.testing import json_response, make_client, no_content, text_response

ETAG = 'W/"JzEtVGFzayAgQEBAQEBAQEBAQEBAQEBAWCc="'


class TestPlannerUser(unittest.TestCase):
    def test_get_planner(self):
        client, session = make_client(json_response({"id": "u", "@odata.etag": ETAG}))
        planner = client.user("u").planner.get()
        self.assertIsInstance(planner, PlannerUser)
        self.assertEqual(planner.odata_etag, ETAG)
        self.assertEqual(session.last.path, "/v1.0/users/u/planner")

    def test_assigned_tasks(self):
        client, session = make_client(json_response({"value": [{"id": "t1", "title": "Draft", "percentComplete": 50}]}))
        page = client.user("u").planner.tasks.list()
        task = page.value[0]
        self.assertIsInstance(task, PlannerTask)
        self.assertEqual(task.percent_complete, 50)
        self.assertEqual(session.last.path, "/v1.0/users/u/planner/tasks")

    def test_plans(self):
        client, session = make_client(json_response({"value": [{"id": "p1", "title": "Launch"}]}))
        page = client.user("u").planner.plans.list(top=1)
        self.assertIsInstance(page.value[0], PlannerPlan)
        self.assertEqual(session.last.url, "https://graph.microsoft.com/v1.0/users/u/planner/plans?$top=1")


class TestPlannerNesting(unittest.TestCase):
    def test_bucket_task_board_format_path(self):
        client, session = make_client(json_response({"id": "t1", "orderHint": "8585"}))
        fmt = (
            client.user("u")
            .planner.plans.by_id("p1")
            .buckets.by_id("b1")
            .tasks.by_id("t1")
            .bucket_task_board_format.get()
        )
        self.assertEqual(fmt.order_hint, "8585")
        self.assertEqual(
            session.last.path,
            "/v1.0/users/u/planner/plans/p1/buckets/b1/tasks/t1/bucketTaskBoardFormat",
        )

    def test_task_details(self):
        client, session = make_client(json_response({"id": "t1", "description": "Write it", "checklist": {}}))
        details = client.user("u").planner.tasks.by_id("t1").details.get()
        self.assertIsInstance(details, PlannerTaskDetails)
        self.assertEqual(details.description, "Write it")
        self.assertEqual(session.last.path, "/v1.0/users/u/planner/tasks/t1/details")

    def test_board_formats(self):
        client, session = make_client(json_response({"id": "t1"}), json_response({"id": "t1"}))
        task = client.user("u").planner.tasks.by_id("t1")
        task.assigned_to_task_board_format.get()
        task.progress_task_board_format.get()
        self.assertEqual(session.requests[0].path, "/v1.0/users/u/planner/tasks/t1/assignedToTaskBoardFormat")
        self.assertEqual(session.requests[1].path, "/v1.0/users/u/planner/tasks/t1/progressTaskBoardFormat")

    def test_plan_details_and_plan_tasks(self):
        client, session = make_client(json_response({"id": "p1"}), text_response("4"))
        plan = client.user("u").planner.plans.by_id("p1")
        plan.details.get()
        self.assertEqual(plan.tasks.count(), 4)
        self.assertEqual(session.requests[0].path, "/v1.0/users/u/planner/plans/p1/details")
        self.assertEqual(session.requests[1].path, "/v1.0/users/u/planner/plans/p1/tasks/$count")


class TestPlannerConcurrency(unittest.TestCase):
    def test_update_sends_if_match(self):
        client, session = make_client(no_content())
        result = client.user("u").planner.tasks.by_id("t1").update({"percentComplete": 100}, if_match=ETAG)
        self.assertIsNone(result)
        self.assertEqual(session.last.method, "PATCH")
        self.assertEqual(session.last.headers["If-Match"], ETAG)
        self.assertEqual(session.last.json(), {"percentComplete": 100})

    def test_delete_sends_if_match(self):
        client, session = make_client(no_content())
        client.user("u").planner.plans.by_id("p1").buckets.by_id("b1").delete(if_match=ETAG)
        self.assertEqual(session.last.method, "DELETE")
        self.assertEqual(session.last.headers["If-Match"], ETAG)
        self.assertEqual(session.last.path, "/v1.0/users/u/planner/plans/p1/buckets/b1")

    def test_no_if_match_by_default(self):
        client, session = make_client(no_content())
        client.user("u").planner.tasks.by_id("t1").details.update({"description": "x"})
        self.assertNotIn("If-Match", session.last.headers)

    def test_precondition_failed(self):
        payload = {"error": {"code": "", "message": "The If-Match header must be specified for this kind of request."}}
        client, _ = make_client(json_response(payload, status_code=412))
        with self.assertRaises(HttpError) as ctx:
            client.user("u").planner.tasks.by_id("t1").delete()
        self.assertEqual(ctx.exception.status, 412)
        self.assertIn("If-Match", ctx.exception.message)


if __name__ == "__main__":
    unittest.main()
