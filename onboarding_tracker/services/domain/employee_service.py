"""
Employee Domain Service

This service handles employee creation together with the onboarding task
set that belongs to every employee, plus employee listing and lookup.
"""

import logging
import re
from datetime import date
from typing import Any, Dict, List, Optional

from onboarding_tracker.models import ActivityType, Employee, UserSession
from onboarding_tracker.services.base import (
    AuthorizationError,
    BaseService,
    NotFoundError,
    ServiceResult,
    ValidationError,
    service_method,
)
from onboarding_tracker.services.domain.catalog import build_task_set
from onboarding_tracker.services.domain.permissions import can_create_employees
from onboarding_tracker.services.domain.progress import calculate_progress, delayed_tasks

logger = logging.getLogger(__name__)

EMPLOYEE_ID_PATTERN = re.compile(r"^EMP(\d+)$")

REQUIRED_FIELDS = ["name", "email", "department", "job_role", "joining_date"]

SORT_FIELDS = ["name", "department", "joiningDate", "progress"]


def next_employee_id(employees: List[Employee]) -> str:
    """
    EMP followed by the zero-padded employee count plus one.

    If an existing id already carries a higher sequence number, continue
    after that one instead so ids stay unique.
    """
    sequence = len(employees)
    for employee in employees:
        match = EMPLOYEE_ID_PATTERN.match(employee.id)
        if match:
            sequence = max(sequence, int(match.group(1)))
    return f"EMP{sequence + 1:03d}"


class EmployeeService(BaseService):
    """Service for employee management."""

    def __init__(self, storage, clock=None):
        super().__init__(storage, "EmployeeService", clock)

    @service_method
    def create_employee(
        self,
        name: str,
        email: str,
        department: str,
        job_role: str,
        joining_date,
        actor: Optional[UserSession] = None,
    ) -> ServiceResult[Employee]:
        """Create an employee and instantiate their onboarding tasks."""

        values = {
            "name": name,
            "email": email,
            "department": department,
            "job_role": job_role,
            "joining_date": joining_date,
        }
        missing = [field for field in REQUIRED_FIELDS if not self._has_value(values[field])]
        if missing:
            return ServiceResult.error_result(
                ValidationError("Please fill in all fields", field=missing[0])
            )

        if isinstance(joining_date, str):
            try:
                joining_date = date.fromisoformat(joining_date.strip())
            except ValueError:
                return ServiceResult.error_result(
                    ValidationError("Joining date must be an ISO date", "joining_date", joining_date)
                )

        actor = actor or self.storage.get_user()
        if actor is not None and not can_create_employees(actor):
            return ServiceResult.error_result(
                AuthorizationError(f"Role {actor.role.value} cannot create employees", required_permission="hr")
            )

        employees = self.storage.get_employees()
        tasks = self.storage.get_tasks()

        employee = Employee(
            id=next_employee_id(employees),
            name=name.strip(),
            email=email.strip(),
            department=department.strip(),
            job_role=job_role.strip(),
            joining_date=joining_date,
            created_at=self.now(),
        )

        employees.append(employee)
        tasks[employee.id] = build_task_set(joining_date)
        self.storage.save_onboarding_with_activity(
            employees,
            tasks,
            ActivityType.EMPLOYEE_CREATED,
            user=actor.name if actor else "HR",
            description=f"New employee {employee.name} added to onboarding",
            employee_id=employee.id,
        )

        self.logger.info(f"Created employee {employee.id} ({employee.name})")
        return ServiceResult.success_result(employee)

    @service_method
    def get_employee_details(self, employee_id: str) -> ServiceResult[Dict[str, Any]]:
        """Employee with task set, progress and overdue tasks."""
        employee = self.storage.get_employee(employee_id)
        if employee is None:
            return ServiceResult.error_result(NotFoundError("Employee", employee_id))

        task_set = self.storage.get_task_set(employee_id)
        return ServiceResult.success_result({
            "employee": employee,
            "tasks": task_set,
            "progress": calculate_progress(task_set),
            "delayed_tasks": delayed_tasks(task_set, self.now()) if task_set else [],
        })

    @service_method
    def list_employees(
        self,
        search: str = None,
        department: str = None,
        sort_by: str = "name",
    ) -> ServiceResult[List[Dict[str, Any]]]:
        """
        Employees with their progress, filtered and sorted.

        search matches name, email, id or department case-insensitively.
        sort_by is one of name, department, joiningDate (newest first) or
        progress (highest first).
        """
        if sort_by not in SORT_FIELDS:
            return ServiceResult.error_result(
                ValidationError(f"Unsupported sort field: {sort_by}", "sort_by", sort_by)
            )

        tasks = self.storage.get_tasks()
        rows = []
        for employee in self.storage.get_employees():
            if department and department != "all" and employee.department != department:
                continue
            if search and not self._matches(employee, search):
                continue
            rows.append({
                "employee": employee,
                "progress": calculate_progress(tasks.get(employee.id)),
            })

        if sort_by == "name":
            rows.sort(key=lambda row: row["employee"].name.lower())
        elif sort_by == "department":
            rows.sort(key=lambda row: row["employee"].department.lower())
        elif sort_by == "joiningDate":
            rows.sort(key=lambda row: row["employee"].joining_date, reverse=True)
        else:
            rows.sort(key=lambda row: row["progress"].overall, reverse=True)

        return ServiceResult.success_result(rows, metadata={"count": len(rows)})

    @staticmethod
    def _matches(employee: Employee, search: str) -> bool:
        needle = search.lower()
        return any(
            needle in value.lower()
            for value in (employee.name, employee.email, employee.id, employee.department)
        )

    @staticmethod
    def _has_value(value) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True
