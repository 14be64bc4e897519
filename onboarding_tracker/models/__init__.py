"""
Domain models package.

This module re-exports the onboarding entities and enums stored in the
key-value store.
"""

from onboarding_tracker.models.onboarding import (
    Activity,
    ActivityType,
    Comment,
    Department,
    DEPARTMENTS,
    DepartmentTasks,
    Employee,
    OnboardingTaskSet,
    Task,
    TaskStatus,
    Theme,
    UserSession,
)

# Export all models for easy importing
__all__ = [
    # Entities
    "Employee",
    "OnboardingTaskSet",
    "DepartmentTasks",
    "Task",
    "Comment",
    "Activity",
    "UserSession",

    # Enums
    "Department",
    "DEPARTMENTS",
    "TaskStatus",
    "ActivityType",
    "Theme",
]
