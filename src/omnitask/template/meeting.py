# SPDX-License-Identifier: MIT

from omnitask.model.entity_type import EntityType
from omnitask.model.meeting import Meeting
from omnitask.time import today_local_date_str


def get_meeting_template() -> Meeting:
    return {
        "id": None,
        "entity_type": EntityType.MEETING,
        "title": "",
        "date": today_local_date_str(),
        "time": "09:00",
        "description": "",
        "platform": "",
    }
