# SPDX-License-Identifier: MIT

from copy import deepcopy
from operator import itemgetter
from typing import Any


def sort_items(
    items: list[dict[str, Any]], sort_instructions: list[str]
) -> list[dict[str, Any]]:
    """
    Sort copies of items by several keys, e.g. ["date", "title"] or ["desc updated"].

    Later keys break ties of earlier ones. Items missing a key, or holding
    None for it, go last for that key.
    """
    sorted_items = deepcopy(items)

    # Least significant key first; list.sort is stable
    for instruction in reversed(sort_instructions):
        direction, _, column = instruction.rpartition(" ")
        present = [item for item in sorted_items if item.get(column) is not None]
        missing = [item for item in sorted_items if item.get(column) is None]
        present.sort(key=itemgetter(column), reverse=direction == "desc")
        sorted_items = present + missing

    return sorted_items
