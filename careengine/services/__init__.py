"""Application services built on the pure engine."""

from careengine.services.care_plan_apply_service import CarePlanApplyService, CarePlanStore

__all__ = ["CarePlanApplyService", "CarePlanStore"]
