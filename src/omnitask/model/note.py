# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from omnitask.model.entity_id import EntityId


class Note(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    content: str
    updated: pendulum.DateTime
