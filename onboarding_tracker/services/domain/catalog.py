"""
Onboarding task catalog.

Every new employee receives the same template tasks per department.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

from onboarding_tracker.models import (
    DEPARTMENTS,
    Department,
    DepartmentTasks,
    OnboardingTaskSet,
    Task,
    TaskStatus,
)
from onboarding_tracker.utils.datetime_utils import start_of_day_utc

TASK_CATALOG: Dict[Department, List[Dict[str, str]]] = {
    Department.HR: [
        {"id": "hr-1", "title": "Employment Contract", "description": "Review and sign employment contract"},
        {"id": "hr-2", "title": "Company Policies", "description": "Read and acknowledge company policies"},
        {"id": "hr-3", "title": "Tax Documents", "description": "Submit W-4 and state tax forms"},
        {"id": "hr-4", "title": "Benefits Enrollment", "description": "Complete health insurance and benefits selection"},
    ],
    Department.IT: [
        {"id": "it-1", "title": "Email Account Setup", "description": "Create company email account"},
        {"id": "it-2", "title": "Laptop Assignment", "description": "Assign and configure laptop"},
        {"id": "it-3", "title": "Software Access", "description": "Grant access to required software and tools"},
        {"id": "it-4", "title": "VPN & Security Setup", "description": "Configure VPN and security credentials"},
    ],
    Department.ADMIN: [
        {"id": "admin-1", "title": "ID Card Creation", "description": "Create employee ID card"},
        {"id": "admin-2", "title": "Desk Assignment", "description": "Assign desk and seating arrangement"},
        {"id": "admin-3", "title": "Office Supplies", "description": "Provide office supplies and equipment"},
    ],
}


def build_task_set(
    joining_date: date,
    statuses: Optional[Dict[Department, List[TaskStatus]]] = None,
    completed_at: Optional[datetime] = None,
) -> OnboardingTaskSet:
    """
    Instantiate the catalog for one employee.

    Every task is due at the start of the joining date. statuses optionally
    presets the status of each task by position; completed tasks then get
    completed_at as their completion time.
    """
    due_date = start_of_day_utc(joining_date)
    buckets = {}

    for department in DEPARTMENTS:
        preset = (statuses or {}).get(department, [])
        tasks = []
        for index, template in enumerate(TASK_CATALOG[department]):
            task = Task(due_date=due_date, **template)
            if index < len(preset):
                task.apply_status(preset[index], completed_at)
            tasks.append(task)
        buckets[department.value] = DepartmentTasks(tasks=tasks)

    return OnboardingTaskSet(**buckets)
