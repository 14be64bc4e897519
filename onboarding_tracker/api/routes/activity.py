"""
Activity log API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from onboarding_tracker.api.deps import unwrap
from onboarding_tracker.core.dependencies import get_activity_service
from onboarding_tracker.models import Activity
from onboarding_tracker.services.domain import ActivityService

router = APIRouter()


@router.get("/", response_model=List[Activity])
async def list_activity(
    activity_type: str = Query("all", alias="type", description="Activity type or all"),
    search: Optional[str] = Query(None, description="Text in description or user name"),
    activities: ActivityService = Depends(get_activity_service)
):
    """Retrieve the activity log, newest first (at most the last 100 entries)."""
    return unwrap(activities.list_activities(activity_type=activity_type, search=search))
