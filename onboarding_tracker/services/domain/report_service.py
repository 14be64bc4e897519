"""
Report Domain Service

Dashboard and report aggregates over all employees. Every figure is
derived from the stored employees and task sets at call time.
"""

import math
from typing import Any, Dict, List, Optional

from onboarding_tracker.models import DEPARTMENTS, Department, UserSession
from onboarding_tracker.services.base import BaseService, ServiceResult, service_method
from onboarding_tracker.services.domain.progress import (
    calculate_progress,
    summarize_fleet,
    status_counts,
)
from onboarding_tracker.utils.datetime_utils import start_of_day_utc

NOTIFICATION_LIMIT = 10
UPCOMING_WINDOW_DAYS = 7
SECONDS_PER_DAY = 24 * 60 * 60


class ReportService(BaseService):
    """Service for dashboard statistics and onboarding reports."""

    def __init__(self, storage, clock=None):
        super().__init__(storage, "ReportService", clock)

    @service_method
    def dashboard(self, viewer: Optional[UserSession] = None) -> ServiceResult[Dict[str, Any]]:
        """
        Fleet counters plus the number of employees per organisational department.

        For an IT or Admin viewer, my_pending_tasks holds the pending count
        of their own department.
        """
        employees = self.storage.get_employees()
        stats = summarize_fleet(employees, self.storage.get_tasks(), self.now())

        distribution: Dict[str, int] = {}
        for employee in employees:
            distribution[employee.department] = distribution.get(employee.department, 0) + 1

        dashboard = {
            "stats": stats,
            "department_distribution": [
                {"name": name, "value": count} for name, count in distribution.items()
            ],
        }
        if viewer is not None and viewer.role != Department.HR:
            dashboard["my_pending_tasks"] = stats[f"{viewer.role.value}_pending"]

        return ServiceResult.success_result(dashboard)

    @service_method
    def department_report(self) -> ServiceResult[List[Dict[str, Any]]]:
        """Task totals grouped by the employees' organisational department."""
        tasks = self.storage.get_tasks()
        report: Dict[str, Dict[str, Any]] = {}

        for employee in self.storage.get_employees():
            row = report.setdefault(
                employee.department,
                {"name": employee.department, "total": 0, "completed": 0, "pending": 0},
            )
            progress = calculate_progress(tasks.get(employee.id))
            row["total"] += progress.total
            row["completed"] += progress.completed
            row["pending"] += progress.total - progress.completed

        return ServiceResult.success_result(list(report.values()))

    @service_method
    def completion_breakdown(self) -> ServiceResult[Dict[str, int]]:
        """Number of tasks per status across every employee."""
        tasks = self.storage.get_tasks()
        task_sets = [tasks[employee.id] for employee in self.storage.get_employees() if employee.id in tasks]
        return ServiceResult.success_result(status_counts(task_sets))

    @service_method
    def department_tasks(self) -> ServiceResult[List[Dict[str, Any]]]:
        """Completed versus pending tasks per task bucket (hr, it, admin)."""
        tasks = self.storage.get_tasks()
        totals = {department: [0, 0] for department in DEPARTMENTS}

        for employee in self.storage.get_employees():
            task_set = tasks.get(employee.id)
            if task_set is None:
                continue
            for department in DEPARTMENTS:
                bucket = task_set.bucket(department)
                totals[department][0] += len(bucket)
                totals[department][1] += sum(1 for task in bucket if task.is_completed)

        rows = [
            {
                "department": department.value,
                "total": total,
                "completed": completed,
                "pending": total - completed,
            }
            for department, (total, completed) in totals.items()
        ]
        return ServiceResult.success_result(rows)

    @service_method
    def timeline(self) -> ServiceResult[List[Dict[str, Any]]]:
        """Joinings per month with the average overall completion of those employees."""
        tasks = self.storage.get_tasks()
        months: Dict[str, Dict[str, int]] = {}

        for employee in self.storage.get_employees():
            label = employee.joining_date.strftime("%b")
            month = months.setdefault(label, {"employees": 0, "completion_sum": 0})
            month["employees"] += 1
            month["completion_sum"] += calculate_progress(tasks.get(employee.id)).overall

        timeline = []
        for label, month in months.items():
            count = month["employees"]
            timeline.append({
                "month": label,
                "employees": count,
                "avg_completion": (2 * month["completion_sum"] + count) // (2 * count),
            })
        return ServiceResult.success_result(timeline)

    @service_method
    def notifications(self) -> ServiceResult[List[Dict[str, Any]]]:
        """
        Pending-task and upcoming-joining notices, first ten only.

        A pending notice is raised per employee and department with unfinished
        tasks; an upcoming notice when the joining date is one to seven days
        ahead.
        """
        now = self.now()
        tasks = self.storage.get_tasks()
        notices: List[Dict[str, Any]] = []

        for employee in self.storage.get_employees():
            joining = start_of_day_utc(employee.joining_date)
            task_set = tasks.get(employee.id)
            if task_set is not None:
                for department in DEPARTMENTS:
                    pending = [task for task in task_set.bucket(department) if not task.is_completed]
                    if pending:
                        notices.append({
                            "id": f"{employee.id}-{department.value}",
                            "type": "pending",
                            "employee": employee.name,
                            "department": department.value.upper(),
                            "count": len(pending),
                            "timestamp": joining,
                        })

            days_until_joining = math.ceil((joining - now).total_seconds() / SECONDS_PER_DAY)
            if 0 < days_until_joining <= UPCOMING_WINDOW_DAYS:
                notices.append({
                    "id": f"joining-{employee.id}",
                    "type": "upcoming",
                    "employee": employee.name,
                    "days": days_until_joining,
                    "timestamp": joining,
                })

        return ServiceResult.success_result(notices[:NOTIFICATION_LIMIT])
