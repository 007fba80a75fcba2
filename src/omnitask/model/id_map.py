# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from omnitask.model.entity_id import EntityId

EntityCollection = Literal[
    "tasks",
    "notes",
    "meetings",
]


type IdMapDict = dict[EntityCollection, IdMapMapping]


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    The synthetic ids are the short integers shown in listings; the real ids
    are the uuids stored with each entity.

    real_task_id = id_map["tasks"]["synthetic_to_real"][7]
    """

    tasks: "IdMapMapping"
    notes: "IdMapMapping"
    meetings: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
