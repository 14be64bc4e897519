"""
Pydantic schemas package.

This module imports all Pydantic schemas for API request/response validation
and provides a centralized place to access all schema definitions.
"""

from onboarding_tracker.schemas.onboarding import (
    LoginRequest, LogoutResponse,
    EmployeeCreate, EmployeeSummary, EmployeeDetailResponse, ProgressResponse,
    TaskStatusUpdate, CommentCreate, TaskRow, TaskListResponse,
    DashboardResponse, ThemeUpdate, ThemeResponse
)

# Export all schemas
__all__ = [
    # Session schemas
    "LoginRequest", "LogoutResponse",

    # Employee schemas
    "EmployeeCreate", "EmployeeSummary", "EmployeeDetailResponse", "ProgressResponse",

    # Task schemas
    "TaskStatusUpdate", "CommentCreate", "TaskRow", "TaskListResponse",

    # Report and preference schemas
    "DashboardResponse", "ThemeUpdate", "ThemeResponse"
]
