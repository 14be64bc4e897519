"""
Base Service Classes and Utilities

This module provides the foundation for all service layer implementations including
base classes, error handling, result types, and common service patterns.
"""

import logging
from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from datetime import datetime
from abc import ABC
from dataclasses import dataclass
from functools import wraps

from onboarding_tracker.core.storage import OnboardingStorage
from onboarding_tracker.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, error_code: str = None, details: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "SERVICE_ERROR"
        self.details = details or {}
        self.timestamp = utc_now()


class ValidationError(ServiceError):
    """Validation error in service layer."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value})
        self.field = field
        self.value = value


class NotFoundError(ServiceError):
    """Resource not found error."""

    def __init__(self, resource_type: str, identifier: str):
        message = f"{resource_type} not found: {identifier}"
        super().__init__(message, "NOT_FOUND", {"resource_type": resource_type, "identifier": identifier})


class AuthorizationError(ServiceError):
    """Authorization error."""

    def __init__(self, message: str, required_permission: str = None):
        super().__init__(message, "AUTHORIZATION_ERROR", {"required_permission": required_permission})


# Rejections that leave the store untouched and are expected during normal use
NO_OP_ERRORS = (ValidationError, NotFoundError)


@dataclass
class ServiceResult(Generic[T]):
    """Standard result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: Optional[ServiceError] = None
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}

    @classmethod
    def success_result(cls, data: T, metadata: Dict[str, Any] = None) -> 'ServiceResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata or {})

    @classmethod
    def error_result(cls, error: ServiceError, metadata: Dict[str, Any] = None) -> 'ServiceResult[T]':
        """Create an error result."""
        return cls(success=False, error=error, metadata=metadata or {})


def service_method(func: Callable) -> Callable:
    """Decorator for service methods with automatic error handling and logging."""

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        method_name = f"{self.__class__.__name__}.{func.__name__}"
        logger.debug(f"[{method_name}] Starting operation")

        try:
            result = func(self, *args, **kwargs)

            if isinstance(result, ServiceResult):
                if result.success:
                    logger.debug(f"[{method_name}] Operation completed successfully")
                elif isinstance(result.error, NO_OP_ERRORS):
                    logger.info(f"[{method_name}] No-op: {result.error.message}")
                else:
                    logger.error(f"[{method_name}] Operation failed: {result.error.message}")
            else:
                logger.debug(f"[{method_name}] Operation completed")

            return result

        except ServiceError as e:
            logger.error(f"[{method_name}] Service error: {e.message}")
            return ServiceResult.error_result(e)
        except Exception as e:
            logger.exception(f"[{method_name}] Unexpected error: {e}")
            error = ServiceError(f"Internal error in {method_name}: {str(e)}", "INTERNAL_ERROR")
            return ServiceResult.error_result(error)

    return wrapper


class BaseService(ABC):
    """Abstract base class for all services."""

    def __init__(self, storage: OnboardingStorage, name: str = None, clock: Callable[[], datetime] = None):
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"services.{self.name}")
        self.storage = storage
        self.clock = clock or storage.clock

    def now(self) -> datetime:
        return self.clock()
