"""
Demo Data Seeder

Populates an empty store with five sample employees whose onboarding is
at different stages, so the dashboards have something to show on first
start. Seeding is skipped as soon as any employee exists.
"""

from datetime import date
from typing import Dict, List

from onboarding_tracker.models import Department, Employee, TaskStatus
from onboarding_tracker.services.base import BaseService, ServiceResult, service_method
from onboarding_tracker.services.domain.catalog import TASK_CATALOG, build_task_set
from onboarding_tracker.utils.datetime_utils import start_of_day_utc

DEMO_EMPLOYEES = [
    {
        "id": "EMP001",
        "name": "Sarah Johnson",
        "email": "sarah.johnson@company.com",
        "department": "Engineering",
        "job_role": "Senior Software Engineer",
        "joining_date": date(2024, 1, 15),
        "created_at": date(2024, 1, 10),
    },
    {
        "id": "EMP002",
        "name": "Michael Chen",
        "email": "michael.chen@company.com",
        "department": "Marketing",
        "job_role": "Marketing Manager",
        "joining_date": date(2024, 1, 20),
        "created_at": date(2024, 1, 12),
    },
    {
        "id": "EMP003",
        "name": "Emily Rodriguez",
        "email": "emily.rodriguez@company.com",
        "department": "Sales",
        "job_role": "Sales Executive",
        "joining_date": date(2024, 1, 25),
        "created_at": date(2024, 1, 18),
    },
    {
        "id": "EMP004",
        "name": "David Park",
        "email": "david.park@company.com",
        "department": "Engineering",
        "job_role": "DevOps Engineer",
        "joining_date": date(2024, 2, 1),
        "created_at": date(2024, 1, 22),
    },
    {
        "id": "EMP005",
        "name": "Jessica Williams",
        "email": "jessica.williams@company.com",
        "department": "HR",
        "job_role": "HR Specialist",
        "joining_date": date(2024, 2, 5),
        "created_at": date(2024, 1, 28),
    },
]

# Target completion percentage per department, one entry per demo employee
DEMO_PROGRESS = {
    Department.HR: [100, 80, 60, 40, 20],
    Department.IT: [100, 60, 30, 0, 0],
    Department.ADMIN: [100, 40, 0, 0, 0],
}

# Percentage at which the n-th task of a bucket counts as completed
STAGE_THRESHOLDS = {
    Department.HR: [25, 50, 75, 100],
    Department.IT: [25, 50, 75, 100],
    Department.ADMIN: [33, 66, 100],
}


def staged_statuses(department: Department, progress: int) -> List[TaskStatus]:
    """
    Task statuses for a bucket that is progress percent done.

    A task is completed once progress reaches its threshold and in progress
    once progress reaches the previous task's threshold.
    """
    thresholds = STAGE_THRESHOLDS[department]
    statuses = []
    for index, threshold in enumerate(thresholds):
        if progress >= threshold:
            statuses.append(TaskStatus.COMPLETED)
        elif index > 0 and progress >= thresholds[index - 1]:
            statuses.append(TaskStatus.IN_PROGRESS)
        else:
            statuses.append(TaskStatus.NOT_STARTED)
    return statuses[:len(TASK_CATALOG[department])]


class DemoDataSeeder(BaseService):
    """Service that writes the sample dataset into an empty store."""

    def __init__(self, storage, clock=None):
        super().__init__(storage, "DemoDataSeeder", clock)

    @service_method
    def seed(self) -> ServiceResult[Dict[str, int]]:
        """Write the demo employees and task sets unless employees already exist."""
        existing = self.storage.get_employees()
        if existing:
            self.logger.info(f"Store already holds {len(existing)} employees, skipping demo data")
            return ServiceResult.success_result({"employees": len(existing)}, metadata={"seeded": False})

        now = self.now()
        employees = []
        tasks = {}
        for index, template in enumerate(DEMO_EMPLOYEES):
            employee = Employee(
                id=template["id"],
                name=template["name"],
                email=template["email"],
                department=template["department"],
                job_role=template["job_role"],
                joining_date=template["joining_date"],
                created_at=start_of_day_utc(template["created_at"]),
            )
            statuses = {
                department: staged_statuses(department, targets[index])
                for department, targets in DEMO_PROGRESS.items()
            }
            employees.append(employee)
            tasks[employee.id] = build_task_set(employee.joining_date, statuses, completed_at=now)

        self.storage.save_onboarding(employees, tasks)
        self.logger.info(f"Seeded {len(employees)} demo employees")
        return ServiceResult.success_result({"employees": len(employees)}, metadata={"seeded": True})

    @service_method
    def reset(self) -> ServiceResult[Dict[str, int]]:
        """Clear the namespace and seed again."""
        self.storage.clear_all()
        return self.seed()
