# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, cast

from omnitask import configuration, time
from omnitask.model.notification import AppNotification
from omnitask.repository.collection import CollectionRepository


class NotificationRepository(CollectionRepository[AppNotification]):
    """
    The notification log.

    Entries are kept newest first. The reminder scheduler only appends and
    the notification panel only marks entries read; nothing is ever removed.
    """

    @property
    def data_path(self) -> Path:
        return configuration.DATA_NOTIFICATIONS_PATH

    @property
    def notifications(self) -> list[AppNotification]:
        return self.entities

    def _seed(self) -> list[AppNotification]:
        return []

    def _convert_for_serialization(
        self, notification: AppNotification
    ) -> dict[str, Any]:
        serializable_notification = cast(dict[str, Any], notification)
        serializable_notification["created"] = time.datetime_to_iso_str(
            serializable_notification["created"]
        )
        return serializable_notification

    def _convert_for_deserialization(
        self, notification: dict[str, Any]
    ) -> AppNotification:
        return {
            "id": str(notification["id"]),
            "title": str(notification["title"]),
            "message": str(notification.get("message") or ""),
            "created": time.datetime_from_str(notification["created"]),
            "read": bool(notification.get("read", False)),
        }

    def append(self, batch: list[AppNotification]) -> None:
        """Prepend a batch so the log stays newest first."""
        if len(batch) == 0:
            return
        with self._lock:
            self.notifications[:0] = deepcopy(batch)
            self._commit()

    def mark_all_read(self) -> None:
        with self._lock:
            if all(notification["read"] for notification in self.notifications):
                return
            for notification in self.notifications:
                notification["read"] = True
            self._commit()

    def unread_count(self) -> int:
        with self._lock:
            return len(
                [
                    notification
                    for notification in self.notifications
                    if not notification["read"]
                ]
            )

    def has_notification_on(self, title: str, local_date: str) -> bool:
        """Whether an entry with this title was created on the given local date."""
        with self._lock:
            return any(
                notification["title"] == title
                and time.datetime_to_local_date_str(notification["created"])
                == local_date
                for notification in self.notifications
            )

    def get_all_notifications(self) -> list[AppNotification]:
        with self._lock:
            return deepcopy(self.notifications)


NOTIFICATION_REPO = NotificationRepository()
