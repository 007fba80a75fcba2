# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from omnitask import configuration, time
from omnitask.model.entity_id import EntityId, generate_entity_id
from omnitask.model.entity_type import EntityType
from omnitask.model.note import Note
from omnitask.repository.collection import CollectionRepository
from omnitask.template.seed import get_seed_notes


class NoteRepository(CollectionRepository[Note]):
    @property
    def data_path(self) -> Path:
        return configuration.DATA_NOTES_PATH

    @property
    def notes(self) -> list[Note]:
        return self.entities

    def _seed(self) -> list[Note]:
        return get_seed_notes()

    def _convert_for_serialization(self, note: Note) -> dict[str, Any]:
        serializable_note = cast(dict[str, Any], note)
        serializable_note["updated"] = time.datetime_to_iso_str(
            serializable_note["updated"]
        )
        return serializable_note

    def _convert_for_deserialization(self, note: dict[str, Any]) -> Note:
        if not note.get("id"):
            raise ValueError("note without id")
        updated = note.get("updated")
        return {
            "id": str(note["id"]),
            "entity_type": EntityType.NOTE,
            "title": str(note.get("title") or ""),
            "content": str(note.get("content") or ""),
            "updated": time.datetime_from_str(updated)
            if isinstance(updated, str)
            else time.now_utc(),
        }

    def save_new_note(self, note: Note) -> EntityId:
        with self._lock:
            note["id"] = generate_entity_id()
            self.notes.append(note)
            self._commit()
            return note["id"]

    def modify_note(
        self,
        id: EntityId,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> None:
        with self._lock:
            note = self.notes[self._find_index(id)]
            # Set updated timestamp to current moment
            note["updated"] = time.now_utc()
            if title is not None:
                note["title"] = title
            if content is not None:
                note["content"] = content
            self._commit()

    def delete_note(self, id: EntityId) -> None:
        with self._lock:
            del self.notes[self._find_index(id)]
            self._commit()

    def get_all_notes(self) -> list[Note]:
        with self._lock:
            return deepcopy(self.notes)

    def get_note(self, id: EntityId) -> Note:
        with self._lock:
            return deepcopy(self.notes[self._find_index(id)])


NOTE_REPO = NoteRepository()
