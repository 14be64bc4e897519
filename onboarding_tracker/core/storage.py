"""
Namespaced accessors over the key-value store.

OnboardingStorage knows the persisted layout (employees, tasks, user,
activity_log, theme) and converts between stored JSON and domain models.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from onboarding_tracker.core.store import KeyValueStore
from onboarding_tracker.models import (
    Activity,
    ActivityType,
    Employee,
    OnboardingTaskSet,
    Theme,
    UserSession,
)
from onboarding_tracker.utils.datetime_utils import next_sequential_id, utc_now

logger = logging.getLogger(__name__)

EMPLOYEES = "employees"
TASKS = "tasks"
USER = "user"
ACTIVITY_LOG = "activity_log"
THEME = "theme"

STORAGE_KEYS = [EMPLOYEES, TASKS, USER, ACTIVITY_LOG, THEME]


class OnboardingStorage:
    """Typed view of the onboarding data kept in a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        namespace: str = "onboarding",
        activity_log_limit: int = 100,
        clock: Callable = utc_now,
    ):
        self.store = store
        self.namespace = namespace
        self.activity_log_limit = activity_log_limit
        self.clock = clock

    def key(self, name: str) -> str:
        return f"{self.namespace}_{name}"

    # Employees

    def get_employees(self) -> List[Employee]:
        data = self.store.get(self.key(EMPLOYEES)) or []
        return [Employee.model_validate(item) for item in data]

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        for employee in self.get_employees():
            if employee.id == employee_id:
                return employee
        return None

    # Task sets

    def get_tasks(self) -> Dict[str, OnboardingTaskSet]:
        data = self.store.get(self.key(TASKS)) or {}
        return {employee_id: OnboardingTaskSet.model_validate(item) for employee_id, item in data.items()}

    def get_task_set(self, employee_id: str) -> Optional[OnboardingTaskSet]:
        return self.get_tasks().get(employee_id)

    def save_onboarding(self, employees: List[Employee], tasks: Dict[str, OnboardingTaskSet]) -> None:
        """Write the employee list and the task-set map in one store call."""
        self.store.set_many({
            self.key(EMPLOYEES): [employee.to_store() for employee in employees],
            self.key(TASKS): self._encode_tasks(tasks),
        })

    @staticmethod
    def _encode_tasks(tasks: Dict[str, OnboardingTaskSet]) -> Dict[str, dict]:
        return {employee_id: task_set.to_store() for employee_id, task_set in tasks.items()}

    # Session

    def get_user(self) -> Optional[UserSession]:
        data = self.store.get(self.key(USER))
        return UserSession.model_validate(data) if data else None

    def save_user(self, user: UserSession) -> None:
        self.store.set(self.key(USER), user.to_store())

    def clear_user(self) -> None:
        self.store.delete(self.key(USER))

    # Activity log

    def get_activity_log(self) -> List[Activity]:
        data = self.store.get(self.key(ACTIVITY_LOG)) or []
        return [Activity.model_validate(item) for item in data]

    def add_activity(
        self,
        activity_type: ActivityType,
        user: str,
        description: str,
        employee_id: Optional[str] = None,
        employee_name: Optional[str] = None,
    ) -> Activity:
        """Prepend an entry to the activity log, evicting the oldest beyond the limit."""
        activity, log = self._prepend_activity(activity_type, user, description, employee_id, employee_name)
        self.store.set(self.key(ACTIVITY_LOG), log)
        logger.debug(f"Activity recorded: {activity.type.value} by {user}")
        return activity

    def save_tasks_with_activity(
        self,
        tasks: Dict[str, OnboardingTaskSet],
        activity_type: ActivityType,
        user: str,
        description: str,
        employee_id: Optional[str] = None,
        employee_name: Optional[str] = None,
    ) -> Activity:
        """Write the task-set map and the log entry describing the change in one store call."""
        return self._set_many_with_activity(
            {self.key(TASKS): self._encode_tasks(tasks)},
            activity_type, user, description, employee_id, employee_name,
        )

    def save_onboarding_with_activity(
        self,
        employees: List[Employee],
        tasks: Dict[str, OnboardingTaskSet],
        activity_type: ActivityType,
        user: str,
        description: str,
        employee_id: Optional[str] = None,
        employee_name: Optional[str] = None,
    ) -> Activity:
        """Like save_onboarding, with the log entry written in the same store call."""
        return self._set_many_with_activity(
            {
                self.key(EMPLOYEES): [employee.to_store() for employee in employees],
                self.key(TASKS): self._encode_tasks(tasks),
            },
            activity_type, user, description, employee_id, employee_name,
        )

    def _set_many_with_activity(
        self,
        values: Dict[str, object],
        activity_type: ActivityType,
        user: str,
        description: str,
        employee_id: Optional[str],
        employee_name: Optional[str],
    ) -> Activity:
        activity, log = self._prepend_activity(activity_type, user, description, employee_id, employee_name)
        values[self.key(ACTIVITY_LOG)] = log
        self.store.set_many(values)
        logger.debug(f"Saved {sorted(values)} with activity {activity.type.value} by {user}")
        return activity

    def _prepend_activity(
        self,
        activity_type: ActivityType,
        user: str,
        description: str,
        employee_id: Optional[str],
        employee_name: Optional[str],
    ) -> Tuple[Activity, List[dict]]:
        """New entry plus the encoded log it heads, capped at activity_log_limit."""
        log = self.get_activity_log()
        now = self.clock()
        last_id = max((entry.id for entry in log), default=None)

        activity = Activity(
            id=next_sequential_id(now, last_id),
            type=activity_type,
            user=user,
            description=description,
            employee_id=employee_id,
            employee_name=employee_name,
            timestamp=now,
        )
        log.insert(0, activity)

        return activity, [entry.to_store() for entry in log[:self.activity_log_limit]]

    # Preferences

    def get_theme(self) -> Theme:
        value = self.store.get(self.key(THEME))
        try:
            return Theme(value) if value else Theme.LIGHT
        except ValueError:
            logger.warning(f"Ignoring unknown stored theme {value!r}")
            return Theme.LIGHT

    def save_theme(self, theme: Theme) -> None:
        self.store.set(self.key(THEME), Theme(theme).value)

    def clear_all(self) -> None:
        """Remove every key of this namespace."""
        for name in STORAGE_KEYS:
            self.store.delete(self.key(name))
        logger.info(f"Cleared storage namespace {self.namespace}")
