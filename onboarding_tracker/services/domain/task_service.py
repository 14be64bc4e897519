"""
Task Domain Service

This service handles onboarding task mutations (status changes and
comments) and the cross-employee task listing.
"""

import logging
from typing import Any, Dict, List, Optional

from onboarding_tracker.models import (
    DEPARTMENTS,
    ActivityType,
    Comment,
    Department,
    OnboardingTaskSet,
    Task,
    TaskStatus,
    UserSession,
)
from onboarding_tracker.services.base import (
    AuthorizationError,
    BaseService,
    NotFoundError,
    ServiceResult,
    ValidationError,
    service_method,
)
from onboarding_tracker.services.domain.permissions import can_edit_department
from onboarding_tracker.utils.datetime_utils import next_sequential_id

logger = logging.getLogger(__name__)


def _parse_department(department) -> Optional[Department]:
    try:
        return Department(department)
    except ValueError:
        return None


class TaskService(BaseService):
    """Service for onboarding task updates and listings."""

    def __init__(self, storage, clock=None):
        super().__init__(storage, "TaskService", clock)

    @service_method
    def set_task_status(
        self,
        employee_id: str,
        department,
        task_id: str,
        new_status,
        actor: Optional[UserSession] = None,
    ) -> ServiceResult[Task]:
        """
        Move a task to new_status.

        The task is addressed by (employee_id, department, task_id); any part
        that does not resolve leaves the store untouched. completed_at
        follows the status. The acting user defaults to the stored session
        and must pass the role gate for the department.
        """
        try:
            status = TaskStatus(new_status)
        except ValueError:
            return ServiceResult.error_result(
                ValidationError(f"Unknown task status: {new_status}", "status", new_status)
            )

        dept = _parse_department(department)
        if dept is None:
            return ServiceResult.error_result(NotFoundError("Department", str(department)))

        actor = actor or self.storage.get_user()
        if actor is not None and not can_edit_department(actor, dept):
            return ServiceResult.error_result(
                AuthorizationError(
                    f"Role {actor.role.value} cannot update {dept.value} tasks",
                    required_permission=dept.value,
                )
            )

        tasks = self.storage.get_tasks()
        task_set = tasks.get(employee_id)
        if task_set is None:
            return ServiceResult.error_result(NotFoundError("Task set", employee_id))

        task = task_set.find_task(dept, task_id)
        if task is None:
            return ServiceResult.error_result(NotFoundError("Task", f"{employee_id}/{dept.value}/{task_id}"))

        task.apply_status(status, self.now())

        employee = self.storage.get_employee(employee_id)
        self.storage.save_tasks_with_activity(
            tasks,
            ActivityType.TASK_UPDATED,
            user=actor.name if actor else "System",
            description=f"Updated {task.title} to {status.value}",
            employee_id=employee_id,
            employee_name=employee.name if employee else None,
        )

        self.logger.info(f"{employee_id}/{dept.value}/{task_id} -> {status.value}")
        return ServiceResult.success_result(task)

    @service_method
    def add_comment(
        self,
        employee_id: str,
        department,
        task_id: str,
        text: str,
        actor: Optional[UserSession] = None,
    ) -> ServiceResult[Comment]:
        """Append a comment to a task. Blank text is ignored."""
        if not text or not text.strip():
            return ServiceResult.error_result(ValidationError("Comment text is empty", "text", text))

        dept = _parse_department(department)
        if dept is None:
            return ServiceResult.error_result(NotFoundError("Department", str(department)))

        tasks = self.storage.get_tasks()
        task_set = tasks.get(employee_id)
        task = task_set.find_task(dept, task_id) if task_set else None
        if task is None:
            return ServiceResult.error_result(NotFoundError("Task", f"{employee_id}/{dept.value}/{task_id}"))

        actor = actor or self.storage.get_user()
        now = self.now()
        last_id = max((comment.id for comment in task.comments), default=None)
        comment = Comment(
            id=next_sequential_id(now, last_id),
            user=actor.name if actor else "System",
            role=actor.role if actor else None,
            text=text,
            timestamp=now,
        )
        task.comments.append(comment)

        employee = self.storage.get_employee(employee_id)
        self.storage.save_tasks_with_activity(
            tasks,
            ActivityType.COMMENT_ADDED,
            user=comment.user,
            description=f"Added comment to {task.title}",
            employee_id=employee_id,
            employee_name=employee.name if employee else None,
        )

        return ServiceResult.success_result(comment)

    @service_method
    def list_tasks(self, department: str = "all", status: str = "all") -> ServiceResult[Dict[str, Any]]:
        """
        Flattened task list across all employees.

        Each row carries the employee id and name, the department bucket and
        an overdue flag; counts hold the per-status totals of the rows.
        """
        if department == "all":
            departments = DEPARTMENTS
        else:
            dept = _parse_department(department)
            if dept is None:
                return ServiceResult.error_result(
                    ValidationError(f"Unknown department: {department}", "department", department)
                )
            departments = [dept]

        if status != "all":
            try:
                TaskStatus(status)
            except ValueError:
                return ServiceResult.error_result(
                    ValidationError(f"Unknown task status: {status}", "status", status)
                )

        now = self.now()
        tasks = self.storage.get_tasks()
        rows: List[Dict[str, Any]] = []
        for employee in self.storage.get_employees():
            task_set: Optional[OnboardingTaskSet] = tasks.get(employee.id)
            if task_set is None:
                continue
            for dept in departments:
                for task in task_set.bucket(dept):
                    if status != "all" and task.status.value != status:
                        continue
                    rows.append({
                        "employee_id": employee.id,
                        "employee_name": employee.name,
                        "department": dept,
                        "task": task,
                        "overdue": task.is_delayed(now),
                    })

        counts = {"total": len(rows)}
        for task_status in TaskStatus:
            counts[task_status.value] = sum(1 for row in rows if row["task"].status == task_status)

        return ServiceResult.success_result({"tasks": rows, "counts": counts})
