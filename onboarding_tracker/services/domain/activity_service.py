"""
Activity Domain Service

Read side of the global activity log.
"""

from typing import List

from onboarding_tracker.models import Activity, ActivityType
from onboarding_tracker.services.base import BaseService, ServiceResult, ValidationError, service_method


class ActivityService(BaseService):
    """Service for browsing the activity log."""

    def __init__(self, storage, clock=None):
        super().__init__(storage, "ActivityService", clock)

    @service_method
    def list_activities(self, activity_type: str = "all", search: str = None) -> ServiceResult[List[Activity]]:
        """Newest-first entries, optionally narrowed by type and by text in description or user."""
        if activity_type != "all":
            try:
                activity_type = ActivityType(activity_type)
            except ValueError:
                return ServiceResult.error_result(
                    ValidationError(f"Unknown activity type: {activity_type}", "type", activity_type)
                )

        needle = (search or "").lower()
        entries = [
            entry for entry in self.storage.get_activity_log()
            if (activity_type == "all" or entry.type == activity_type)
            and (needle in entry.description.lower() or needle in entry.user.lower())
        ]
        return ServiceResult.success_result(entries, metadata={"count": len(entries)})
