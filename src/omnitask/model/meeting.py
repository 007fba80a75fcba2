# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from omnitask.model.entity_id import EntityId


class Meeting(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    # YYYY-MM-DD
    date: str
    # HH:mm
    time: str
    description: str
    platform: str
