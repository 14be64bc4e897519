"""
FastAPI dependency injection functions.

This module builds the configured key-value store once per process and
provides dependency functions handing storage and services to route
handlers.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from onboarding_tracker.config.settings import settings
from onboarding_tracker.core.redis import RedisStore
from onboarding_tracker.core.store import KeyValueStore
from onboarding_tracker.core.storage import OnboardingStorage
from onboarding_tracker.mocks import MemoryStore
from onboarding_tracker.services.domain import (
    ActivityService,
    EmployeeService,
    ReportService,
    SessionService,
    TaskService,
)

logger = logging.getLogger(__name__)

_store: Optional[KeyValueStore] = None


def create_store(backend: str = None) -> KeyValueStore:
    """Instantiate the store selected by settings.store_backend."""
    backend = (backend or settings.store_backend).lower()
    if backend == "redis":
        return RedisStore(settings.redis_url)
    if backend == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown store backend: {backend}")


def get_store() -> KeyValueStore:
    """
    FastAPI dependency for the process-wide key-value store.

    Returns:
        KeyValueStore: store chosen by configuration
    """
    global _store
    if _store is None:
        _store = create_store()
        logger.info(f"Using {settings.store_backend} store")
    return _store


def resolve_store(app: FastAPI) -> KeyValueStore:
    """
    Store for code running outside a request, such as the lifespan hook.

    Honours app.dependency_overrides so startup work lands in the same store
    that request handlers receive.
    """
    factory = app.dependency_overrides.get(get_store, get_store)
    return factory()


def get_storage(store: KeyValueStore = Depends(get_store)) -> OnboardingStorage:
    """
    FastAPI dependency for namespaced onboarding storage.

    Returns:
        OnboardingStorage: typed accessors over the store
    """
    return OnboardingStorage(
        store,
        namespace=settings.storage_namespace,
        activity_log_limit=settings.activity_log_limit,
    )


def get_employee_service(storage: OnboardingStorage = Depends(get_storage)) -> EmployeeService:
    return EmployeeService(storage)


def get_task_service(storage: OnboardingStorage = Depends(get_storage)) -> TaskService:
    return TaskService(storage)


def get_session_service(storage: OnboardingStorage = Depends(get_storage)) -> SessionService:
    return SessionService(storage)


def get_activity_service(storage: OnboardingStorage = Depends(get_storage)) -> ActivityService:
    return ActivityService(storage)


def get_report_service(storage: OnboardingStorage = Depends(get_storage)) -> ReportService:
    return ReportService(storage)
