"""
Task API endpoints.

This module provides REST API endpoints for listing onboarding tasks
across employees, changing a task's status and commenting on tasks.
"""

from fastapi import APIRouter, Depends, Query, status

from onboarding_tracker.api.deps import require_user, unwrap
from onboarding_tracker.core.dependencies import get_task_service
from onboarding_tracker.models import Comment, Task, UserSession
from onboarding_tracker.schemas import CommentCreate, TaskListResponse, TaskStatusUpdate
from onboarding_tracker.services.domain import TaskService

router = APIRouter()


@router.get("/", response_model=TaskListResponse)
async def list_tasks(
    department: str = Query("all", description="hr, it, admin or all"),
    status_filter: str = Query("all", alias="status", description="Task status or all"),
    tasks: TaskService = Depends(get_task_service)
):
    """
    Retrieve tasks of all employees.

    - **department**: restrict to one department bucket
    - **status**: restrict to one status
    """
    return unwrap(tasks.list_tasks(department=department, status=status_filter))


@router.put("/{employee_id}/{department}/{task_id}/status", response_model=Task)
async def update_task_status(
    employee_id: str,
    department: str,
    task_id: str,
    update: TaskStatusUpdate,
    user: UserSession = Depends(require_user),
    tasks: TaskService = Depends(get_task_service)
):
    """
    Change the status of one task.

    HR may update every department; IT and Admin only their own.
    """
    return unwrap(tasks.set_task_status(employee_id, department, task_id, update.status, actor=user))


@router.post(
    "/{employee_id}/{department}/{task_id}/comments",
    response_model=Comment,
    status_code=status.HTTP_201_CREATED
)
async def add_comment(
    employee_id: str,
    department: str,
    task_id: str,
    comment: CommentCreate,
    user: UserSession = Depends(require_user),
    tasks: TaskService = Depends(get_task_service)
):
    """Append a comment to a task. Any logged-in role may comment."""
    return unwrap(tasks.add_comment(employee_id, department, task_id, comment.text, actor=user))
