"""
Pydantic schemas for the onboarding API.

This module defines request/response schemas for FastAPI endpoints that
handle sessions, employees, tasks, the activity log and reports. Stored
entities are returned as-is using their camelCase aliases.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field

from onboarding_tracker.models import (
    Department,
    Employee,
    OnboardingTaskSet,
    Task,
    TaskStatus,
    Theme,
)


# Request schemas
class LoginRequest(BaseModel):
    """Demo login; the password is required but never checked."""
    email: EmailStr
    password: str
    role: Department


class EmployeeCreate(BaseModel):
    """Schema for creating a new employee."""
    name: str
    email: EmailStr
    department: str
    job_role: str = Field(alias="jobRole")
    joining_date: date = Field(alias="joiningDate")

    class Config:
        populate_by_name = True


class TaskStatusUpdate(BaseModel):
    """Schema for moving a task to another status."""
    status: TaskStatus


class CommentCreate(BaseModel):
    """Schema for adding a comment to a task."""
    text: str


class ThemeUpdate(BaseModel):
    theme: Theme


# Response schemas
class ProgressResponse(BaseModel):
    """Completion percentages of one employee."""
    hr: int
    it: int
    admin: int
    overall: int
    completed: int
    total: int


class EmployeeSummary(BaseModel):
    """Employee list row."""
    employee: Employee
    progress: ProgressResponse


class EmployeeDetailResponse(BaseModel):
    """Employee with their onboarding tasks."""
    employee: Employee
    tasks: Optional[OnboardingTaskSet] = None
    progress: ProgressResponse
    delayed_tasks: List[str] = []


class TaskRow(BaseModel):
    """A task together with the employee it belongs to."""
    employee_id: str
    employee_name: str
    department: Department
    task: Task
    overdue: bool


class TaskListResponse(BaseModel):
    tasks: List[TaskRow]
    counts: Dict[str, int]


class DashboardResponse(BaseModel):
    """Dashboard counters."""
    stats: Dict[str, int]
    department_distribution: List[Dict[str, object]]
    my_pending_tasks: Optional[int] = None


class ThemeResponse(BaseModel):
    theme: Theme


class LogoutResponse(BaseModel):
    logged_out: bool
    user: Optional[str] = None
