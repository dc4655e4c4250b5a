"""Planner: the user's planner, plans, buckets, tasks and their detail records.

Graph requires the resource's ``@odata.etag`` as ``if_match`` when updating
or deleting planner objects.
"""

from __future__ import annotations

from ..models import (
    PlannerAssignedToTaskBoardFormat,
    PlannerBucket,
    PlannerBucketTaskBoardFormat,
    PlannerPlan,
    PlannerPlanDetails,
    PlannerProgressTaskBoardFormat,
    PlannerTask,
    PlannerTaskDetails,
    PlannerUser,
)
from .base import (
    CountMixin,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ItemsMixin,
    ListMixin,
    UpdateMixin,
)


class _PlannerSingleton(GetMixin, UpdateMixin, DeleteMixin):
    pass


class PlannerTaskDetailsRequests(_PlannerSingleton):
    model = PlannerTaskDetails


class AssignedToTaskBoardFormatRequests(_PlannerSingleton):
    model = PlannerAssignedToTaskBoardFormat


class BucketTaskBoardFormatRequests(_PlannerSingleton):
    model = PlannerBucketTaskBoardFormat


class ProgressTaskBoardFormatRequests(_PlannerSingleton):
    model = PlannerProgressTaskBoardFormat


class PlannerPlanDetailsRequests(_PlannerSingleton):
    model = PlannerPlanDetails


# -------------------- Tasks --------------------

class PlannerTaskItem(GetMixin, UpdateMixin, DeleteMixin):
    model = PlannerTask

    @property
    def details(self) -> PlannerTaskDetailsRequests:
        return self._nav(PlannerTaskDetailsRequests, "details")

    @property
    def assigned_to_task_board_format(self) -> AssignedToTaskBoardFormatRequests:
        return self._nav(AssignedToTaskBoardFormatRequests, "assignedToTaskBoardFormat")

    @property
    def bucket_task_board_format(self) -> BucketTaskBoardFormatRequests:
        return self._nav(BucketTaskBoardFormatRequests, "bucketTaskBoardFormat")

    @property
    def progress_task_board_format(self) -> ProgressTaskBoardFormatRequests:
        return self._nav(ProgressTaskBoardFormatRequests, "progressTaskBoardFormat")


class PlannerTaskCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = PlannerTask
    item_class = PlannerTaskItem


# -------------------- Buckets --------------------

class PlannerBucketItem(GetMixin, UpdateMixin, DeleteMixin):
    model = PlannerBucket

    @property
    def tasks(self) -> PlannerTaskCollection:
        return self._nav(PlannerTaskCollection, "tasks")


class PlannerBucketCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = PlannerBucket
    item_class = PlannerBucketItem


# -------------------- Plans --------------------

class PlannerPlanItem(GetMixin, UpdateMixin, DeleteMixin):
    model = PlannerPlan

    @property
    def details(self) -> PlannerPlanDetailsRequests:
        return self._nav(PlannerPlanDetailsRequests, "details")

    @property
    def buckets(self) -> PlannerBucketCollection:
        return self._nav(PlannerBucketCollection, "buckets")

    @property
    def tasks(self) -> PlannerTaskCollection:
        return self._nav(PlannerTaskCollection, "tasks")


class PlannerPlanCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = PlannerPlan
    item_class = PlannerPlanItem


class PlannerUserRequests(GetMixin, UpdateMixin, DeleteMixin):
    """``/users/{id}/planner``: entry point to the user's plans and assigned tasks."""

    model = PlannerUser

    @property
    def plans(self) -> PlannerPlanCollection:
        return self._nav(PlannerPlanCollection, "plans")

    @property
    def tasks(self) -> PlannerTaskCollection:
        return self._nav(PlannerTaskCollection, "tasks")
