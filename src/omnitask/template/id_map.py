# SPDX-License-Identifier: MIT

from omnitask.model.id_map import IdMap


def get_id_map_template() -> IdMap:
    return {
        "tasks": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "notes": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "meetings": {"synthetic_to_real": {}, "real_to_synthetic": {}},
    }
