# SPDX-License-Identifier: MIT

"""
Reminder scheduler.

A small polling loop that:
- picks the tasks due today that have a reminder and are still actionable,
- logs one in-app notification per task per day,
- fires a single native notification per check summarising the due tasks.

The native notification is fired on every check that finds due tasks, even
when all of them were already logged earlier in the day; the host platform
collapses repeats through the notification tag.
"""

import logging
import threading
from typing import Callable, Optional, TypedDict

import pendulum

from omnitask.model.notification import AppNotification
from omnitask.model.task import ACTIONABLE_STATUSES, Task
from omnitask.notify.native import NativeNotificationChannel, NotificationPermission
from omnitask.repository.notification import NotificationRepository
from omnitask.repository.task import TaskRepository
from omnitask.template.notification import get_notification_template
from omnitask.time import Clock, now_utc, today_local_date_str

logger = logging.getLogger(__name__)

NATIVE_TITLE = "OmniTask Reminder"
NATIVE_TAG = "omnitask-daily-reminder"

DEFAULT_INITIAL_DELAY_SECONDS = 3.0
DEFAULT_INTERVAL_SECONDS = 60.0 * 60.0


class ReminderCheck(TypedDict):
    today: str
    due_tasks: list[Task]
    new_notifications: list[AppNotification]
    # Body of the native notification, None when none was fired
    native_body: Optional[str]


def reminder_title(task: Task) -> str:
    return f"Reminder: {task['title']}"


def reminder_message(task: Task) -> str:
    return f"This task is due today. Status: {task['status']}"


def native_reminder_body(due_tasks: list[Task]) -> str:
    if len(due_tasks) == 1:
        return f"{reminder_title(due_tasks[0])}. Check your dashboard."
    return f"You have {len(due_tasks)} tasks due today! Check your dashboard."


def is_due_for_reminder(task: Task, today: str) -> bool:
    return (
        task["date"] == today
        and task["reminder"]
        and task["status"] in ACTIONABLE_STATUSES
    )


def select_due_tasks(tasks: list[Task], today: str) -> list[Task]:
    return [task for task in tasks if is_due_for_reminder(task, today)]


def check_reminders(
    task_repository: TaskRepository,
    notification_repository: NotificationRepository,
    notifier: Optional[NativeNotificationChannel] = None,
    now: Optional[pendulum.DateTime] = None,
) -> ReminderCheck:
    """Run a single reminder check."""
    if now is None:
        now = now_utc()
    today = today_local_date_str(now)

    due_tasks = select_due_tasks(task_repository.get_all_tasks(), today)
    result: ReminderCheck = {
        "today": today,
        "due_tasks": due_tasks,
        "new_notifications": [],
        "native_body": None,
    }
    if len(due_tasks) == 0:
        return result

    if notifier is not None and notifier.permission == NotificationPermission.GRANTED:
        result["native_body"] = native_reminder_body(due_tasks)
        notifier.show(NATIVE_TITLE, result["native_body"], NATIVE_TAG)

    # The duplicate check and the append must not interleave with another check
    with notification_repository.lock:
        for task in due_tasks:
            title = reminder_title(task)
            if notification_repository.has_notification_on(title, today):
                continue
            result["new_notifications"].append(
                get_notification_template(title, reminder_message(task), now)
            )
        notification_repository.append(result["new_notifications"])

    if len(result["new_notifications"]) > 0:
        logger.info(
            "Logged %d reminder(s) for %s", len(result["new_notifications"]), today
        )
    return result


class ReminderScheduler:
    """
    Runs check_reminders once after a short delay and then on a fixed interval.

    Checks run on one daemon worker thread and are serialised with manual
    calls to tick(). stop() cancels both the pending initial check and the
    interval loop. Nothing is persisted about the next check; a restarted
    scheduler starts again from the initial delay.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        notification_repository: NotificationRepository,
        notifier: Optional[NativeNotificationChannel] = None,
        *,
        initial_delay_seconds: float = DEFAULT_INITIAL_DELAY_SECONDS,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Clock = now_utc,
        reload_before_check: bool = False,
        on_check: Optional[Callable[[ReminderCheck], None]] = None,
    ) -> None:
        self.task_repository = task_repository
        self.notification_repository = notification_repository
        self.notifier = notifier
        self.initial_delay_seconds = max(0.0, float(initial_delay_seconds))
        self.interval_seconds = max(0.01, float(interval_seconds))
        self.clock = clock
        self.reload_before_check = reload_before_check
        self.on_check = on_check

        self._tick_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return

        if (
            self.notifier is not None
            and self.notifier.permission != NotificationPermission.GRANTED
        ):
            permission = self.notifier.request_permission()
            logger.debug("Native notification permission: %s", permission)

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self.__run, name="reminder-scheduler", daemon=True
        )
        self._thread.start()
        logger.info(
            "Reminder scheduler started (first check in %ss, then every %ss)",
            self.initial_delay_seconds,
            self.interval_seconds,
        )

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        logger.info("Reminder scheduler stopped")

    def __run(self) -> None:
        if self._stop_event.wait(self.initial_delay_seconds):
            return
        while True:
            self.tick()
            if self._stop_event.wait(self.interval_seconds):
                return

    def tick(self) -> Optional[ReminderCheck]:
        with self._tick_lock:
            try:
                if self.reload_before_check:
                    self.task_repository.reload()
                    self.notification_repository.reload()
                result = check_reminders(
                    self.task_repository,
                    self.notification_repository,
                    self.notifier,
                    self.clock(),
                )
            except Exception:
                logger.exception("Reminder check failed")
                return None

        if self.on_check is not None:
            try:
                self.on_check(result)
            except Exception:
                logger.exception("Reminder check callback failed")
        return result
