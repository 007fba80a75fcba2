# SPDX-License-Identifier: MIT


class EntityType:
    TASK = "task"
    NOTE = "note"
    MEETING = "meeting"
