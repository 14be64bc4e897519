"""
Session API endpoints.

Demo-mode login and logout. Any non-empty credentials are accepted; the
chosen role decides which departments' tasks the user may change.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from onboarding_tracker.api.deps import get_current_user, require_user, unwrap
from onboarding_tracker.core.dependencies import get_session_service
from onboarding_tracker.models import UserSession
from onboarding_tracker.schemas import LoginRequest, LogoutResponse
from onboarding_tracker.services.domain import SessionService
from onboarding_tracker.services.domain.permissions import can_create_employees, editable_departments

router = APIRouter()


@router.post("/login", response_model=UserSession)
async def login(
    credentials: LoginRequest,
    sessions: SessionService = Depends(get_session_service)
):
    """
    Log in as HR, IT or Admin.

    - **email**: used to derive the display name
    - **password**: required, not verified
    - **role**: hr, it or admin
    """
    return unwrap(sessions.login(credentials.email, credentials.password, credentials.role))


@router.post("/logout", response_model=LogoutResponse)
async def logout(sessions: SessionService = Depends(get_session_service)):
    """End the current session. Logging out without a session is allowed."""
    user = unwrap(sessions.logout())
    return {"logged_out": True, "user": user.name if user else None}


@router.get("/me", response_model=UserSession)
async def me(user: UserSession = Depends(require_user)):
    """Return the logged-in user."""
    return user


@router.get("/permissions")
async def permissions(user: Optional[UserSession] = Depends(get_current_user)):
    """Departments the current user may update, empty when logged out."""
    return {
        "editable_departments": [department.value for department in editable_departments(user)],
        "can_create_employees": can_create_employees(user),
    }
