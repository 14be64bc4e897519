"""
Dashboard and report API endpoints.

All figures are recomputed from the stored task sets on every request.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from onboarding_tracker.api.deps import get_current_user, unwrap
from onboarding_tracker.core.dependencies import get_report_service
from onboarding_tracker.models import UserSession
from onboarding_tracker.schemas import DashboardResponse
from onboarding_tracker.services.domain import ReportService

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    user: Optional[UserSession] = Depends(get_current_user),
    reports: ReportService = Depends(get_report_service)
):
    """
    Onboarding counters.

    Returns employees in onboarding, completed and in-progress counts,
    pending tasks per department, delayed tasks, the completion rate and
    employees per department.
    """
    return unwrap(reports.dashboard(viewer=user))


@router.get("/departments")
async def department_report(reports: ReportService = Depends(get_report_service)) -> List[Dict[str, Any]]:
    """Task totals grouped by the employees' department."""
    return unwrap(reports.department_report())


@router.get("/department-tasks")
async def department_tasks(reports: ReportService = Depends(get_report_service)) -> List[Dict[str, Any]]:
    """Completed and pending tasks per HR/IT/Admin bucket."""
    return unwrap(reports.department_tasks())


@router.get("/completion")
async def completion(reports: ReportService = Depends(get_report_service)) -> Dict[str, int]:
    """Number of tasks per status."""
    return unwrap(reports.completion_breakdown())


@router.get("/timeline")
async def timeline(reports: ReportService = Depends(get_report_service)) -> List[Dict[str, Any]]:
    """Joinings per month with average completion."""
    return unwrap(reports.timeline())


@router.get("/notifications")
async def notifications(reports: ReportService = Depends(get_report_service)) -> List[Dict[str, Any]]:
    """Pending-task and upcoming-joining notices."""
    return unwrap(reports.notifications())
