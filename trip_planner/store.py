"""Saved travel plan persistence."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
import threading
from typing import Any, Dict, List, Optional, Protocol
from uuid import uuid4

from .models import SavedPlan


PATCHABLE_FIELDS = frozenset(
    {"plan_data", "destination", "start_date", "end_date", "budget", "trip_type"}
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PlanStore(Protocol):
    def save(self, plan: SavedPlan) -> SavedPlan:
        ...

    def list_by_user(self, user_id: str) -> List[SavedPlan]:
        ...

    def get_by_id(self, plan_id: str, user_id: Optional[str] = None) -> Optional[SavedPlan]:
        ...

    def update_by_id(
        self, plan_id: str, patch: Dict[str, Any], user_id: Optional[str] = None
    ) -> Optional[SavedPlan]:
        ...

    def delete_by_id(self, plan_id: str, user_id: Optional[str] = None) -> Optional[SavedPlan]:
        ...


def new_saved_plan(
    user_id: str,
    destination: str,
    start_date: str,
    end_date: str,
    budget: Any,
    trip_type: str,
    plan_data: Dict[str, Any],
) -> SavedPlan:
    created = _now()
    return SavedPlan(
        id=uuid4().hex,
        user_id=user_id,
        destination=destination,
        start_date=start_date,
        end_date=end_date,
        budget=budget,
        trip_type=trip_type,
        plan_data=plan_data,
        created_at=created,
        updated_at=created,
    )


class InMemoryPlanStore:
    """Process-local plan store; contents are lost on restart."""

    def __init__(self) -> None:
        self._plans: List[SavedPlan] = []
        self._lock = threading.Lock()

    def save(self, plan: SavedPlan) -> SavedPlan:
        with self._lock:
            self._plans.append(plan)
        return plan

    def list_by_user(self, user_id: str) -> List[SavedPlan]:
        with self._lock:
            plans = [p for p in self._plans if p.user_id == user_id]
        return sorted(reversed(plans), key=lambda p: p.created_at, reverse=True)

    def _find(self, plan_id: str, user_id: Optional[str]) -> Optional[int]:
        for index, plan in enumerate(self._plans):
            if plan.id == plan_id and (user_id is None or plan.user_id == user_id):
                return index
        return None

    def get_by_id(self, plan_id: str, user_id: Optional[str] = None) -> Optional[SavedPlan]:
        with self._lock:
            index = self._find(plan_id, user_id)
            return None if index is None else self._plans[index]

    def update_by_id(
        self, plan_id: str, patch: Dict[str, Any], user_id: Optional[str] = None
    ) -> Optional[SavedPlan]:
        unknown = set(patch) - PATCHABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
        with self._lock:
            index = self._find(plan_id, user_id)
            if index is None:
                return None
            updated = replace(self._plans[index], **patch, updated_at=_now())
            self._plans[index] = updated
            return updated

    def delete_by_id(self, plan_id: str, user_id: Optional[str] = None) -> Optional[SavedPlan]:
        with self._lock:
            index = self._find(plan_id, user_id)
            if index is None:
                return None
            return self._plans.pop(index)
