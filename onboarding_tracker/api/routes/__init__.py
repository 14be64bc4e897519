"""
API routes package.

This package contains all FastAPI route modules organized by domain.
Each module provides REST endpoints for specific business functionality.
"""

# Import all route modules for easy access
from onboarding_tracker.api.routes import auth, employees, tasks, activity, reports, preferences

__all__ = [
    "auth",
    "employees",
    "tasks",
    "activity",
    "reports",
    "preferences"
]
