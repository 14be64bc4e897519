"""
Employee API endpoints.

This module provides REST API endpoints for creating employees, listing
them with their onboarding progress and fetching one employee's tasks.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from onboarding_tracker.api.deps import require_user, unwrap
from onboarding_tracker.core.dependencies import get_employee_service
from onboarding_tracker.models import Employee, UserSession
from onboarding_tracker.schemas import EmployeeCreate, EmployeeDetailResponse, EmployeeSummary
from onboarding_tracker.services.domain import EmployeeService

router = APIRouter()


@router.get("/", response_model=List[EmployeeSummary])
async def list_employees(
    search: Optional[str] = Query(None, description="Match name, email, id or department"),
    department: Optional[str] = Query(None, description="Filter by organisational department"),
    sort_by: str = Query("name", description="name, department, joiningDate or progress"),
    employees: EmployeeService = Depends(get_employee_service)
):
    """
    Retrieve employees with their onboarding progress.

    - **search**: case-insensitive text match
    - **department**: exact department, or "all"
    - **sort_by**: ordering of the result
    """
    rows = unwrap(employees.list_employees(search=search, department=department, sort_by=sort_by))
    return [
        {"employee": row["employee"], "progress": row["progress"].to_dict()}
        for row in rows
    ]


@router.post("/", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_data: EmployeeCreate,
    user: UserSession = Depends(require_user),
    employees: EmployeeService = Depends(get_employee_service)
):
    """
    Create an employee and their onboarding task set.

    Every department's template tasks are created as not started and due
    on the joining date. Only HR users may create employees.
    """
    return unwrap(employees.create_employee(
        name=employee_data.name,
        email=employee_data.email,
        department=employee_data.department,
        job_role=employee_data.job_role,
        joining_date=employee_data.joining_date,
        actor=user,
    ))


@router.get("/{employee_id}", response_model=EmployeeDetailResponse)
async def get_employee(
    employee_id: str,
    employees: EmployeeService = Depends(get_employee_service)
):
    """Retrieve one employee with tasks, progress and overdue task ids."""
    details = unwrap(employees.get_employee_details(employee_id))
    details["progress"] = details["progress"].to_dict()
    return details
