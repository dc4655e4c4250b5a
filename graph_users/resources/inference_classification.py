"""Focused Inbox classification and per-sender overrides."""

from __future__ import annotations

from ..models import InferenceClassification, InferenceClassificationOverride
from .base import (
    CountMixin,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ItemsMixin,
    ListMixin,
    UpdateMixin,
)


class OverrideItem(GetMixin, UpdateMixin, DeleteMixin):
    model = InferenceClassificationOverride


class OverrideCollection(ListMixin, CreateMixin, CountMixin, ItemsMixin):
    model = InferenceClassificationOverride
    item_class = OverrideItem


class InferenceClassificationRequests(GetMixin, UpdateMixin):
    model = InferenceClassification

    @property
    def overrides(self) -> OverrideCollection:
        return self._nav(OverrideCollection, "overrides")
