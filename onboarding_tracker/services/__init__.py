"""
Service Layer

This module provides the business logic layer between the HTTP API and the
key-value store.

Architecture:
============

1. **Base Services** (base.py):
   - Error types and the ServiceResult wrapper
   - The service_method decorator for logging and error capture

2. **Domain Services** (domain/):
   - Employee creation and lookup
   - Task status updates and comments
   - Login/logout sessions
   - Activity log and reports
   - Pure progress aggregation (progress.py) and the role gate (permissions.py)

3. **Workflow Services** (workflows/):
   - Demo data seeding at process start

Usage Example:
=============

```python
from onboarding_tracker.core.storage import OnboardingStorage
from onboarding_tracker.mocks import MemoryStore
from onboarding_tracker.services.domain import EmployeeService, TaskService

storage = OnboardingStorage(MemoryStore())
employees = EmployeeService(storage)
tasks = TaskService(storage)

created = employees.create_employee(
    "Dana Lee", "dana.lee@company.com", "Engineering", "Engineer", "2024-03-01"
)
tasks.set_task_status(created.data.id, "hr", "hr-1", "completed")
```
"""

from .base import BaseService, ServiceError, ServiceResult
from .domain import *
from .workflows import *

__all__ = [
    'BaseService',
    'ServiceError',
    'ServiceResult'
]
