"""
Session Domain Service

Demo-mode login: any non-empty email, password and role is accepted and
stored as the single current session. Passwords are never checked.
"""

import re
import uuid
from typing import Optional

from onboarding_tracker.models import ActivityType, Department, UserSession
from onboarding_tracker.services.base import BaseService, ServiceResult, ValidationError, service_method

NAME_SEPARATORS = re.compile(r"[._\-+]+")


def display_name_from_email(email: str) -> str:
    """'sarah.johnson@company.com' -> 'Sarah Johnson'."""
    local_part = email.split("@", 1)[0]
    words = [word for word in NAME_SEPARATORS.split(local_part) if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


class SessionService(BaseService):
    """Service for the login/logout lifecycle."""

    def __init__(self, storage, clock=None):
        super().__init__(storage, "SessionService", clock)

    @service_method
    def login(self, email: str, password: str, role) -> ServiceResult[UserSession]:
        """Start a session for email with the given role."""
        for field, value in (("email", email), ("password", password), ("role", role)):
            if not value or not str(getattr(value, "value", value)).strip():
                return ServiceResult.error_result(ValidationError("Please fill in all fields", field))

        try:
            role = Department(role)
        except ValueError:
            return ServiceResult.error_result(ValidationError(f"Unknown role: {role}", "role", role))

        email = email.strip()
        user = UserSession(
            id=f"user-{uuid.uuid4().hex[:12]}",
            email=email,
            role=role,
            name=display_name_from_email(email),
            login_at=self.now(),
        )
        self.storage.save_user(user)
        self.storage.add_activity(
            ActivityType.LOGIN,
            user=user.name,
            description=f"{user.name} logged in as {role.value}",
        )

        self.logger.info(f"{user.name} logged in as {role.value}")
        return ServiceResult.success_result(user)

    @service_method
    def logout(self) -> ServiceResult[Optional[UserSession]]:
        """End the current session, if any."""
        user = self.storage.get_user()
        if user is not None:
            self.storage.add_activity(
                ActivityType.LOGOUT,
                user=user.name,
                description=f"{user.name} logged out",
            )
        self.storage.clear_user()
        return ServiceResult.success_result(user)

    def current_user(self) -> Optional[UserSession]:
        return self.storage.get_user()
