"""
Tests for login/logout and the activity log queries
"""
import pytest

from onboarding_tracker.models import ActivityType, Department
from onboarding_tracker.services.base import ValidationError
from onboarding_tracker.services.domain.session_service import display_name_from_email

from .conftest import NOW


@pytest.mark.parametrize("email,expected", [
    ("sarah.johnson@company.com", "Sarah Johnson"),
    ("hr_admin@company.com", "Hr Admin"),
    ("it-support+team@company.com", "It Support Team"),
    ("mike@company.com", "Mike"),
    ("mcDonald.o@company.com", "McDonald O"),
])
def test_display_name_from_email(email, expected):
    assert display_name_from_email(email) == expected


class TestSessionService:

    def test_login_stores_session(self, session_service, storage):
        result = session_service.login("sarah.johnson@company.com", "secret", "it")

        assert result.success
        user = storage.get_user()
        assert user.name == "Sarah Johnson"
        assert user.role == Department.IT
        assert user.login_at == NOW
        assert user.id.startswith("user-")
        assert session_service.current_user() == user

    def test_login_records_activity(self, session_service, storage):
        session_service.login("sarah.johnson@company.com", "secret", Department.ADMIN)

        entry = storage.get_activity_log()[0]
        assert entry.type == ActivityType.LOGIN
        assert entry.user == "Sarah Johnson"
        assert entry.description == "Sarah Johnson logged in as admin"

    @pytest.mark.parametrize("email,password,role", [
        ("", "secret", "hr"),
        ("a@company.com", "", "hr"),
        ("a@company.com", "secret", ""),
        ("   ", "secret", "hr"),
    ])
    def test_login_requires_all_fields(self, session_service, store, email, password, role):
        result = session_service.login(email, password, role)

        assert isinstance(result.error, ValidationError)
        assert result.error.message == "Please fill in all fields"
        assert store.keys() == []

    def test_login_rejects_unknown_role(self, session_service, storage):
        result = session_service.login("a@company.com", "secret", "finance")
        assert isinstance(result.error, ValidationError)
        assert storage.get_user() is None

    def test_logout(self, session_service, storage):
        session_service.login("sarah.johnson@company.com", "secret", "hr")
        result = session_service.logout()

        assert result.data.name == "Sarah Johnson"
        assert storage.get_user() is None
        entry = storage.get_activity_log()[0]
        assert entry.type == ActivityType.LOGOUT
        assert entry.description == "Sarah Johnson logged out"

    def test_logout_without_session(self, session_service, storage):
        result = session_service.logout()

        assert result.success
        assert result.data is None
        assert storage.get_activity_log() == []

    def test_relogin_replaces_session(self, session_service, storage):
        session_service.login("first.user@company.com", "x", "hr")
        session_service.login("second.user@company.com", "x", "it")
        assert storage.get_user().name == "Second User"


class TestActivityService:

    @pytest.fixture(autouse=True)
    def history(self, session_service, task_service, dana):
        session_service.login("ivan.tech@company.com", "x", "it")
        task_service.set_task_status(dana.id, "it", "it-1", "completed")
        task_service.add_comment(dana.id, "it", "it-1", "Mailbox ready")
        session_service.logout()

    def test_lists_newest_first(self, activity_service):
        entries = activity_service.list_activities().data
        assert [entry.type for entry in entries] == [
            ActivityType.LOGOUT,
            ActivityType.COMMENT_ADDED,
            ActivityType.TASK_UPDATED,
            ActivityType.LOGIN,
            ActivityType.EMPLOYEE_CREATED,
        ]

    def test_filters_by_type(self, activity_service):
        entries = activity_service.list_activities(activity_type="task_updated").data
        assert len(entries) == 1
        assert entries[0].user == "Ivan Tech"

    def test_search_matches_description_and_user(self, activity_service):
        assert len(activity_service.list_activities(search="mailbox").data) == 0
        assert len(activity_service.list_activities(search="email account").data) == 2
        assert len(activity_service.list_activities(search="ivan").data) == 4

    def test_rejects_unknown_type(self, activity_service):
        result = activity_service.list_activities(activity_type="deleted")
        assert isinstance(result.error, ValidationError)
