"""
User interface preference endpoints.
"""

from fastapi import APIRouter, Depends

from onboarding_tracker.core.dependencies import get_storage
from onboarding_tracker.core.storage import OnboardingStorage
from onboarding_tracker.schemas import ThemeResponse, ThemeUpdate

router = APIRouter()


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(storage: OnboardingStorage = Depends(get_storage)):
    """Stored colour scheme, light unless changed."""
    return {"theme": storage.get_theme()}


@router.put("/theme", response_model=ThemeResponse)
async def set_theme(update: ThemeUpdate, storage: OnboardingStorage = Depends(get_storage)):
    """Persist the colour scheme."""
    storage.save_theme(update.theme)
    return {"theme": update.theme}
