"""
Role gate for onboarding task mutations.

HR may change tasks of every department; IT and Admin users only their own.
Reading is open to every logged-in role.
"""

from typing import List, Optional

from onboarding_tracker.models import DEPARTMENTS, Department, UserSession


def can_edit_department(user: Optional[UserSession], department) -> bool:
    """Whether user may change the status of tasks in department."""
    if user is None:
        return False
    if user.role == Department.HR:
        return True
    return user.role.value == str(getattr(department, "value", department))


def editable_departments(user: Optional[UserSession]) -> List[Department]:
    return [department for department in DEPARTMENTS if can_edit_department(user, department)]


def can_create_employees(user: Optional[UserSession]) -> bool:
    """Only HR opens new onboarding records."""
    return user is not None and user.role == Department.HR
