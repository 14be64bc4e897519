"""
Shared helpers for API route handlers.

Resolves the logged-in user from the stored session and turns service
results into HTTP responses.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status

from onboarding_tracker.core.dependencies import get_storage
from onboarding_tracker.core.storage import OnboardingStorage
from onboarding_tracker.models import UserSession
from onboarding_tracker.services.base import (
    AuthorizationError,
    NotFoundError,
    ServiceResult,
    ValidationError,
)


def get_current_user(storage: OnboardingStorage = Depends(get_storage)) -> Optional[UserSession]:
    """The stored session, or None when nobody is logged in."""
    return storage.get_user()


def require_user(user: Optional[UserSession] = Depends(get_current_user)) -> UserSession:
    """Reject the request unless a session exists."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required"
        )
    return user


def unwrap(result: ServiceResult):
    """Return the result data or raise the matching HTTP error."""
    if result.success:
        return result.data

    error = result.error
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, AuthorizationError):
        status_code = status.HTTP_403_FORBIDDEN
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    raise HTTPException(
        status_code=status_code,
        detail={"error": error.error_code, "message": error.message, **error.details}
    )
