"""
Tests for the demo data seeder
"""
import pytest

from onboarding_tracker.models import Department, TaskStatus
from onboarding_tracker.services.domain.progress import calculate_progress
from onboarding_tracker.services.workflows import DemoDataSeeder
from onboarding_tracker.services.workflows.demo_seeder import staged_statuses

C, P, N = TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS, TaskStatus.NOT_STARTED


@pytest.mark.parametrize("department,progress,expected", [
    (Department.HR, 100, [C, C, C, C]),
    (Department.HR, 80, [C, C, C, P]),
    (Department.HR, 20, [N, N, N, N]),
    (Department.IT, 60, [C, C, P, N]),
    (Department.IT, 30, [C, P, N, N]),
    (Department.ADMIN, 40, [C, P, N]),
    (Department.ADMIN, 0, [N, N, N]),
])
def test_staged_statuses(department, progress, expected):
    assert staged_statuses(department, progress) == expected


def test_seeds_empty_store(seeded_storage):
    employees = seeded_storage.get_employees()
    assert [employee.id for employee in employees] == ["EMP001", "EMP002", "EMP003", "EMP004", "EMP005"]
    assert employees[0].name == "Sarah Johnson"
    assert employees[4].job_role == "HR Specialist"


def test_seeded_progress(seeded_storage):
    tasks = seeded_storage.get_tasks()
    overall = {employee_id: calculate_progress(task_set).overall for employee_id, task_set in tasks.items()}
    assert overall == {"EMP001": 100, "EMP002": 55, "EMP003": 27, "EMP004": 9, "EMP005": 0}

    michael = calculate_progress(tasks["EMP002"])
    assert (michael.hr, michael.it, michael.admin) == (75, 50, 33)


def test_seeded_tasks_keep_completed_at_invariant(seeded_storage):
    for task_set in seeded_storage.get_tasks().values():
        for task in task_set.all_tasks():
            assert (task.completed_at is not None) == (task.status == TaskStatus.COMPLETED)


def test_seed_is_idempotent(seeded_storage, store):
    before = store.get("onboarding_tasks")
    result = DemoDataSeeder(seeded_storage).seed()

    assert result.success
    assert result.metadata["seeded"] is False
    assert store.get("onboarding_tasks") == before


def test_seed_skips_store_with_user_data(storage, dana):
    result = DemoDataSeeder(storage).seed()

    assert result.metadata["seeded"] is False
    assert [employee.id for employee in storage.get_employees()] == [dana.id]


def test_reset_restores_demo_data(seeded_storage, task_service):
    task_service.set_task_status("EMP005", "hr", "hr-1", "completed")
    result = DemoDataSeeder(seeded_storage).reset()

    assert result.metadata["seeded"] is True
    assert calculate_progress(seeded_storage.get_task_set("EMP005")).overall == 0
    assert seeded_storage.get_activity_log() == []
