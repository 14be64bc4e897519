"""
Domain Services

This module contains business logic services for each onboarding concern.

Available Domain Services:
=========================

1. **EmployeeService** - Employee creation, listing and lookup
2. **TaskService** - Task status changes, comments and task listing
3. **SessionService** - Demo login/logout
4. **ActivityService** - Activity log browsing
5. **ReportService** - Dashboard and report aggregates

Each service receives an OnboardingStorage instance and returns
ServiceResult objects instead of raising.
"""

from .employee_service import EmployeeService
from .task_service import TaskService
from .session_service import SessionService
from .activity_service import ActivityService
from .report_service import ReportService

__all__ = [
    'EmployeeService',
    'TaskService',
    'SessionService',
    'ActivityService',
    'ReportService'
]
