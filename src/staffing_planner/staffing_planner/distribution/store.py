from __future__ import annotations

from threading import Lock
from typing import Dict, Optional

from .model import DistributionPlan


class PlanStore:
    """Last calculated plan per signed-in admin.

    Plans are transient: they live until replaced or the process restarts.
    Saving to the database is a separate, explicit step.
    """

    def __init__(self) -> None:
        self._plans: Dict[int, DistributionPlan] = {}
        self._lock = Lock()

    def get(self, owner_id: int) -> Optional[DistributionPlan]:
        with self._lock:
            return self._plans.get(int(owner_id))

    def put(self, owner_id: int, plan: DistributionPlan) -> None:
        with self._lock:
            self._plans[int(owner_id)] = plan

    def clear(self, owner_id: int) -> None:
        with self._lock:
            self._plans.pop(int(owner_id), None)
