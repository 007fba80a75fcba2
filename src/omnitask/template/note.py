# SPDX-License-Identifier: MIT

from omnitask.model.entity_type import EntityType
from omnitask.model.note import Note
from omnitask.time import now_utc


def get_note_template() -> Note:
    return {
        "id": None,
        "entity_type": EntityType.NOTE,
        "title": "",
        "content": "",
        "updated": now_utc(),
    }
