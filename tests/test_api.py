"""
Tests for the HTTP API
"""
import inspect

from fastapi import status
from fastapi.routing import APIRoute

from onboarding_tracker.main import app

API = "/api/v1"


def login(client, email="hr.admin@company.com", role="hr"):
    """Helper to start a session"""
    response = client.post(
        f"{API}/auth/login",
        json={"email": email, "password": "demo", "role": role}
    )
    assert response.status_code == status.HTTP_200_OK
    return response.json()


def create_employee(client, **overrides):
    payload = {
        "name": "Dana Lee",
        "email": "dana.lee@company.com",
        "department": "Engineering",
        "jobRole": "Software Engineer",
        "joiningDate": "2024-03-01",
    }
    payload.update(overrides)
    return client.post(f"{API}/employees/", json=payload)


def test_health_endpoint(client):
    """Test health endpoint returns correct response"""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_login_and_me(client):
    user = login(client)
    assert user["name"] == "Hr Admin"
    assert user["role"] == "hr"
    assert "loginAt" in user

    response = client.get(f"{API}/auth/me")
    assert response.json()["email"] == "hr.admin@company.com"


def test_login_rejects_unknown_role(client):
    response = client.post(
        f"{API}/auth/login",
        json={"email": "a@company.com", "password": "demo", "role": "finance"}
    )
    assert response.status_code == 422


def test_me_requires_login(client):
    response = client.get(f"{API}/auth/me")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_logout(client):
    login(client)
    response = client.post(f"{API}/auth/logout")

    assert response.json() == {"logged_out": True, "user": "Hr Admin"}
    assert client.get(f"{API}/auth/me").status_code == status.HTTP_401_UNAUTHORIZED


def test_permissions(client):
    assert client.get(f"{API}/auth/permissions").json() == {
        "editable_departments": [],
        "can_create_employees": False,
    }
    login(client, email="ivan.tech@company.com", role="it")
    assert client.get(f"{API}/auth/permissions").json() == {
        "editable_departments": ["it"],
        "can_create_employees": False,
    }


def test_create_employee_requires_login(client):
    response = create_employee(client)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_create_employee_as_hr(client):
    login(client)
    response = create_employee(client)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"] == "EMP001"
    assert data["jobRole"] == "Software Engineer"
    assert data["joiningDate"] == "2024-03-01"

    response = client.get(f"{API}/employees/EMP001")
    assert response.status_code == status.HTTP_200_OK
    detail = response.json()
    assert len(detail["tasks"]["hr"]["tasks"]) == 4
    assert len(detail["tasks"]["admin"]["tasks"]) == 3
    assert detail["tasks"]["it"]["tasks"][0]["status"] == "not_started"
    assert detail["progress"]["overall"] == 0


def test_create_employee_forbidden_for_it(client):
    login(client, email="ivan.tech@company.com", role="it")
    response = create_employee(client)

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"]["error"] == "AUTHORIZATION_ERROR"


def test_create_employee_blank_name(client):
    login(client)
    response = create_employee(client, name="  ")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"]["message"] == "Please fill in all fields"


def test_unknown_employee(client):
    response = client.get(f"{API}/employees/EMP404")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_list_employees(client):
    login(client)
    create_employee(client)
    create_employee(client, name="Ann Baker", email="ann.baker@company.com", department="Sales")

    rows = client.get(f"{API}/employees/").json()
    assert [row["employee"]["name"] for row in rows] == ["Ann Baker", "Dana Lee"]

    rows = client.get(f"{API}/employees/", params={"department": "Sales"}).json()
    assert [row["employee"]["id"] for row in rows] == ["EMP002"]

    response = client.get(f"{API}/employees/", params={"sort_by": "salary"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_task_status_flow(client):
    login(client)
    create_employee(client)
    login(client, email="ivan.tech@company.com", role="it")

    response = client.put(f"{API}/tasks/EMP001/hr/hr-1/status", json={"status": "completed"})
    assert response.status_code == status.HTTP_403_FORBIDDEN

    response = client.put(f"{API}/tasks/EMP001/it/it-1/status", json={"status": "completed"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["completedAt"] is not None

    response = client.put(f"{API}/tasks/EMP001/it/it-9/status", json={"status": "completed"})
    assert response.status_code == status.HTTP_404_NOT_FOUND

    progress = client.get(f"{API}/employees/EMP001").json()["progress"]
    assert progress["it"] == 25
    assert progress["overall"] == 9


def test_task_status_rejects_unknown_status(client):
    login(client)
    create_employee(client)
    response = client.put(f"{API}/tasks/EMP001/hr/hr-1/status", json={"status": "done"})
    assert response.status_code == 422


def test_comments(client):
    login(client)
    create_employee(client)
    login(client, email="ada.admin@company.com", role="admin")

    response = client.post(f"{API}/tasks/EMP001/hr/hr-1/comments", json={"text": "   "})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post(f"{API}/tasks/EMP001/hr/hr-1/comments", json={"text": "Contract printed"})
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["user"] == "Ada Admin"
    assert response.json()["role"] == "admin"

    comments = client.get(f"{API}/employees/EMP001").json()["tasks"]["hr"]["tasks"][0]["comments"]
    assert [comment["text"] for comment in comments] == ["Contract printed"]


def test_task_listing(client):
    login(client)
    create_employee(client)

    data = client.get(f"{API}/tasks/", params={"department": "admin"}).json()
    assert data["counts"]["total"] == 3
    assert data["tasks"][0]["employee_name"] == "Dana Lee"

    response = client.get(f"{API}/tasks/", params={"status": "blocked"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_activity_log(client):
    login(client)
    create_employee(client)

    entries = client.get(f"{API}/activity/").json()
    assert [entry["type"] for entry in entries] == ["employee_created", "login"]
    assert entries[0]["employeeId"] == "EMP001"

    entries = client.get(f"{API}/activity/", params={"type": "login"}).json()
    assert len(entries) == 1


def test_reports(client):
    login(client)
    create_employee(client)

    dashboard = client.get(f"{API}/reports/dashboard").json()
    assert dashboard["stats"]["total_onboarding"] == 1
    assert dashboard["stats"]["hr_pending"] == 4
    assert dashboard["my_pending_tasks"] is None

    assert client.get(f"{API}/reports/completion").json() == {
        "completed": 0, "in_progress": 0, "not_started": 11
    }
    assert client.get(f"{API}/reports/timeline").json() == [
        {"month": "Mar", "employees": 1, "avg_completion": 0}
    ]
    assert len(client.get(f"{API}/reports/department-tasks").json()) == 3
    assert client.get(f"{API}/reports/departments").json()[0]["name"] == "Engineering"

    login(client, email="ivan.tech@company.com", role="it")
    assert client.get(f"{API}/reports/dashboard").json()["my_pending_tasks"] == 4


def test_theme_preference(client):
    assert client.get(f"{API}/preferences/theme").json() == {"theme": "light"}

    response = client.put(f"{API}/preferences/theme", json={"theme": "dark"})
    assert response.json() == {"theme": "dark"}
    assert client.get(f"{API}/preferences/theme").json() == {"theme": "dark"}


def test_startup_seeds_the_injected_store(client, store):
    """Startup seeding and /health use the same store as request handlers"""
    with client:
        assert {"onboarding_employees", "onboarding_tasks"} <= set(store.keys())
        health = client.get("/health").json()
        assert health["store_metrics"]["keys_stored"] == len(store.keys())
        assert client.get(f"{API}/employees/EMP001").json()["employee"]["name"] == "Sarah Johnson"


def test_handlers_run_on_the_event_loop():
    """Store access stays serialised on the event loop, never in the threadpool"""
    routes = [route for route in app.routes if isinstance(route, APIRoute)]

    assert routes
    for route in routes:
        assert inspect.iscoroutinefunction(route.endpoint), route.path
