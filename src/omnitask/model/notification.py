# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from omnitask.model.entity_id import EntityId


class AppNotification(TypedDict):
    id: Optional[EntityId]
    title: str
    message: str
    created: pendulum.DateTime
    read: bool
