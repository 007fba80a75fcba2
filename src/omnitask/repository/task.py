# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from omnitask import configuration, time
from omnitask.model.entity_id import EntityId, generate_entity_id
from omnitask.model.entity_type import EntityType
from omnitask.model.task import Task, TaskStatus
from omnitask.repository.collection import CollectionRepository
from omnitask.template.seed import get_seed_tasks


class TaskRepository(CollectionRepository[Task]):
    @property
    def data_path(self) -> Path:
        return configuration.DATA_TASKS_PATH

    @property
    def tasks(self) -> list[Task]:
        return self.entities

    def _seed(self) -> list[Task]:
        return get_seed_tasks()

    def _convert_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["status"] = str(serializable_task["status"])
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        return serializable_task

    def _convert_for_deserialization(self, task: dict[str, Any]) -> Task:
        if not task.get("id"):
            raise ValueError("task without id")
        created = task.get("created")
        return {
            "id": str(task["id"]),
            "entity_type": EntityType.TASK,
            "title": str(task.get("title") or ""),
            "description": str(task.get("description") or ""),
            # A malformed date is kept as-is; it just never matches any period
            "date": str(task.get("date") or ""),
            "status": TaskStatus.from_str(task.get("status")),
            "remarks": str(task.get("remarks") or ""),
            "reminder": bool(task.get("reminder", False)),
            "created": time.datetime_from_str(created)
            if isinstance(created, str)
            else time.now_utc(),
        }

    def save_new_task(self, task: Task) -> EntityId:
        with self._lock:
            task["id"] = generate_entity_id()
            self.tasks.append(task)
            self._commit()
            return task["id"]

    def modify_task(
        self,
        id: EntityId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        date: Optional[str] = None,
        status: Optional[TaskStatus] = None,
        remarks: Optional[str] = None,
        reminder: Optional[bool] = None,
    ) -> None:
        with self._lock:
            task = self.tasks[self._find_index(id)]
            if title is not None:
                task["title"] = title
            if description is not None:
                task["description"] = description
            if date is not None:
                task["date"] = date
            if status is not None:
                task["status"] = status
            if remarks is not None:
                task["remarks"] = remarks
            if reminder is not None:
                task["reminder"] = reminder
            self._commit()

    def delete_task(self, id: EntityId) -> None:
        with self._lock:
            del self.tasks[self._find_index(id)]
            self._commit()

    def get_all_tasks(self) -> list[Task]:
        with self._lock:
            return deepcopy(self.tasks)

    def get_task(self, id: EntityId) -> Task:
        with self._lock:
            return deepcopy(self.tasks[self._find_index(id)])


TASK_REPO = TaskRepository()
