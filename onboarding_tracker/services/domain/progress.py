"""
Progress aggregation.

Pure functions that roll task status up into per-department and overall
completion percentages, and into fleet-wide dashboard figures. Nothing
here is cached or persisted; every figure is recomputed from task sets.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional

from onboarding_tracker.models import DEPARTMENTS, Employee, OnboardingTaskSet


def percentage(completed: int, total: int) -> int:
    """100 * completed / total rounded half up, 0 for an empty scope."""
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


@dataclass
class EmployeeProgress:
    """Completion figures for one employee's task set."""
    hr: int = 0
    it: int = 0
    admin: int = 0
    overall: int = 0
    completed: int = 0
    total: int = 0

    @property
    def is_complete(self) -> bool:
        return self.completed == self.total

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def calculate_progress(task_set: Optional[OnboardingTaskSet]) -> EmployeeProgress:
    """Per-department and overall percentages of one task set."""
    progress = EmployeeProgress()
    if task_set is None:
        return progress

    for department in DEPARTMENTS:
        tasks = task_set.bucket(department)
        done = sum(1 for task in tasks if task.is_completed)
        setattr(progress, department.value, percentage(done, len(tasks)))
        progress.completed += done
        progress.total += len(tasks)

    progress.overall = percentage(progress.completed, progress.total)
    return progress


def summarize_fleet(
    employees: Iterable[Employee],
    tasks: Mapping[str, OnboardingTaskSet],
    now: datetime,
) -> Dict[str, int]:
    """
    Dashboard counters across all employees.

    Only employees that have a task set take part. An employee counts as
    completed when every one of their tasks is completed; each unfinished
    task adds to its department's pending count and, once past due, to
    the delayed count.
    """
    stats = {
        "total_onboarding": 0,
        "completed": 0,
        "in_progress": 0,
        "hr_pending": 0,
        "it_pending": 0,
        "admin_pending": 0,
        "delayed": 0,
    }

    for employee in employees:
        task_set = tasks.get(employee.id)
        if task_set is None:
            continue
        stats["total_onboarding"] += 1

        for department in DEPARTMENTS:
            for task in task_set.bucket(department):
                if task.is_completed:
                    continue
                stats[f"{department.value}_pending"] += 1
                if task.is_delayed(now):
                    stats["delayed"] += 1

        if calculate_progress(task_set).is_complete:
            stats["completed"] += 1
        else:
            stats["in_progress"] += 1

    stats["completion_rate"] = percentage(stats["completed"], stats["total_onboarding"])
    return stats


def status_counts(task_sets: Iterable[OnboardingTaskSet]) -> Dict[str, int]:
    """Number of tasks in each status across the given task sets."""
    counts = {"completed": 0, "in_progress": 0, "not_started": 0}
    for task_set in task_sets:
        for task in task_set.all_tasks():
            counts[task.status.value] += 1
    return counts


def delayed_tasks(task_set: OnboardingTaskSet, now: datetime) -> List[str]:
    """Ids of the overdue tasks of one task set."""
    return [task.id for task in task_set.all_tasks() if task.is_delayed(now)]
