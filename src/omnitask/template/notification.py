# SPDX-License-Identifier: MIT

import pendulum

from omnitask.model.entity_id import generate_entity_id
from omnitask.model.notification import AppNotification


def get_notification_template(
    title: str, message: str, created: pendulum.DateTime
) -> AppNotification:
    return {
        "id": generate_entity_id(),
        "title": title,
        "message": message,
        "created": created,
        "read": False,
    }
