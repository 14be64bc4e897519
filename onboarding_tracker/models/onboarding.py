"""
Onboarding domain models.

This module defines the entities persisted in the key-value store:
employees, their per-department onboarding task sets, task comments,
the activity log and the logged-in session. Field aliases keep the stored
JSON in camelCase.
"""

from datetime import date, datetime
import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Department(str, enum.Enum):
    """Task buckets, which double as the user roles."""
    HR = "hr"
    IT = "it"
    ADMIN = "admin"


DEPARTMENTS = [Department.HR, Department.IT, Department.ADMIN]


class TaskStatus(str, enum.Enum):
    """Enumeration for onboarding task status values."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ActivityType(str, enum.Enum):
    """Enumeration for activity log entry types."""
    LOGIN = "login"
    LOGOUT = "logout"
    EMPLOYEE_CREATED = "employee_created"
    TASK_UPDATED = "task_updated"
    COMMENT_ADDED = "comment_added"


class Theme(str, enum.Enum):
    """UI colour scheme preference."""
    LIGHT = "light"
    DARK = "dark"


class StoredModel(BaseModel):
    """Base for models written to the store under their camelCase aliases."""

    class Config:
        populate_by_name = True

    def to_store(self) -> Dict[str, Any]:
        """JSON-ready dict using the stored field names."""
        return self.model_dump(mode="json", by_alias=True)


class Comment(StoredModel):
    """A note attached to a task. Comments are never edited or removed."""
    id: int
    user: str
    role: Optional[Department] = None
    text: str
    timestamp: datetime


class Task(StoredModel):
    """
    One onboarding task inside a department bucket.

    completed_at is set exactly when status is completed.
    """
    id: str
    title: str
    description: str
    status: TaskStatus = TaskStatus.NOT_STARTED
    due_date: datetime = Field(alias="dueDate")
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")
    comments: List[Comment] = Field(default_factory=list)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def is_delayed(self, now: datetime) -> bool:
        """An unfinished task whose due date has passed."""
        return not self.is_completed and self.due_date < now

    def apply_status(self, status: TaskStatus, now: datetime) -> None:
        self.status = status
        self.completed_at = now if status == TaskStatus.COMPLETED else None


class DepartmentTasks(StoredModel):
    """Ordered task list of one department."""
    tasks: List[Task] = Field(default_factory=list)


class OnboardingTaskSet(StoredModel):
    """The three department buckets belonging to one employee."""
    hr: DepartmentTasks = Field(default_factory=DepartmentTasks)
    it: DepartmentTasks = Field(default_factory=DepartmentTasks)
    admin: DepartmentTasks = Field(default_factory=DepartmentTasks)

    def bucket(self, department: Department) -> List[Task]:
        return getattr(self, Department(department).value).tasks

    def find_task(self, department: Department, task_id: str) -> Optional[Task]:
        for task in self.bucket(department):
            if task.id == task_id:
                return task
        return None

    def all_tasks(self) -> List[Task]:
        return [task for department in DEPARTMENTS for task in self.bucket(department)]


class Employee(StoredModel):
    """A new hire being onboarded."""
    id: str
    name: str
    email: str
    department: str
    job_role: str = Field(alias="jobRole")
    joining_date: date = Field(alias="joiningDate")
    created_at: datetime = Field(alias="createdAt")
    status: str = "active"


class Activity(StoredModel):
    """Entry of the global activity log."""
    id: int
    type: ActivityType
    user: str
    description: str
    employee_id: Optional[str] = Field(default=None, alias="employeeId")
    employee_name: Optional[str] = Field(default=None, alias="employeeName")
    timestamp: datetime


class UserSession(StoredModel):
    """The currently logged-in user."""
    id: str
    email: str
    role: Department
    name: str
    login_at: datetime = Field(alias="loginAt")
