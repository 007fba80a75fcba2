# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, cast

from omnitask import configuration, time
from omnitask.model.entity_id import EntityId, generate_entity_id
from omnitask.model.entity_type import EntityType
from omnitask.model.meeting import Meeting
from omnitask.repository.collection import CollectionRepository
from omnitask.template.seed import get_seed_meetings


def meeting_sort_key(meeting: Meeting) -> tuple[int, float]:
    start = time.meeting_start_local(meeting["date"], meeting["time"])
    # Unparseable meetings sort last
    if start is None:
        return (1, 0.0)
    return (0, start.timestamp())


class MeetingRepository(CollectionRepository[Meeting]):
    @property
    def data_path(self) -> Path:
        return configuration.DATA_MEETINGS_PATH

    @property
    def meetings(self) -> list[Meeting]:
        return self.entities

    def _seed(self) -> list[Meeting]:
        return get_seed_meetings()

    def _convert_for_serialization(self, meeting: Meeting) -> dict[str, Any]:
        return cast(dict[str, Any], meeting)

    def _convert_for_deserialization(self, meeting: dict[str, Any]) -> Meeting:
        if not meeting.get("id"):
            raise ValueError("meeting without id")
        return {
            "id": str(meeting["id"]),
            "entity_type": EntityType.MEETING,
            "title": str(meeting.get("title") or ""),
            "date": str(meeting.get("date") or ""),
            "time": str(meeting.get("time") or ""),
            "description": str(meeting.get("description") or ""),
            "platform": str(meeting.get("platform") or ""),
        }

    def save_new_meeting(self, meeting: Meeting) -> EntityId:
        with self._lock:
            meeting["id"] = generate_entity_id()
            self.meetings.append(meeting)
            # Kept in chronological order
            self.meetings.sort(key=meeting_sort_key)
            self._commit()
            return meeting["id"]

    def delete_meeting(self, id: EntityId) -> None:
        with self._lock:
            del self.meetings[self._find_index(id)]
            self._commit()

    def get_all_meetings(self) -> list[Meeting]:
        with self._lock:
            return deepcopy(self.meetings)

    def get_meeting(self, id: EntityId) -> Meeting:
        with self._lock:
            return deepcopy(self.meetings[self._find_index(id)])


MEETING_REPO = MeetingRepository()
