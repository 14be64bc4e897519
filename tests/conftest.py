"""
Pytest configuration and fixtures
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from onboarding_tracker.core.dependencies import get_store
from onboarding_tracker.core.storage import OnboardingStorage
from onboarding_tracker.main import app
from onboarding_tracker.mocks import MemoryStore
from onboarding_tracker.models import Department, UserSession
from onboarding_tracker.services.domain import (
    ActivityService,
    EmployeeService,
    ReportService,
    SessionService,
    TaskService,
)
from onboarding_tracker.services.workflows import DemoDataSeeder

# Fixed "now": after every demo joining date, so unfinished demo tasks are overdue
NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def store():
    """Fresh in-memory store for each test"""
    return MemoryStore()


@pytest.fixture
def storage(store, clock):
    return OnboardingStorage(store, clock=clock)


@pytest.fixture
def employee_service(storage):
    return EmployeeService(storage)


@pytest.fixture
def task_service(storage):
    return TaskService(storage)


@pytest.fixture
def session_service(storage):
    return SessionService(storage)


@pytest.fixture
def activity_service(storage):
    return ActivityService(storage)


@pytest.fixture
def report_service(storage):
    return ReportService(storage)


@pytest.fixture
def seeded_storage(storage):
    """Storage holding the five demo employees"""
    result = DemoDataSeeder(storage).seed()
    assert result.success
    return storage


def make_user(role: Department, name: str = None) -> UserSession:
    return UserSession(
        id=f"user-{role.value}",
        email=f"{role.value}.user@company.com",
        role=role,
        name=name or f"{role.value.upper()} User",
        login_at=NOW,
    )


@pytest.fixture
def hr_user():
    return make_user(Department.HR)


@pytest.fixture
def it_user():
    return make_user(Department.IT)


@pytest.fixture
def admin_user():
    return make_user(Department.ADMIN)


@pytest.fixture
def dana(employee_service):
    """Employee created through the service on an empty store"""
    result = employee_service.create_employee(
        "Dana Lee", "dana.lee@company.com", "Engineering", "Software Engineer", "2024-03-01"
    )
    assert result.success
    return result.data


@pytest.fixture(scope="function")
def client(store):
    """Test client fixture with store override"""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
