# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import typer

from omnitask.model.entity_id import EntityId
from omnitask.model.task import TaskStatus
from omnitask.repository.id_map import ID_MAP_REPO


def validate_status(status: Optional[str]) -> Optional[str]:
    if status is None:
        return None
    normalized = status.upper().replace("_", "-")
    if normalized not in [str(value) for value in TaskStatus]:
        raise typer.BadParameter(
            f"Status must be one of {', '.join(str(value) for value in TaskStatus)}"
        )
    return normalized


def validate_positive_seconds(seconds: Optional[float]) -> Optional[float]:
    if seconds is None:
        return None
    if seconds <= 0:
        raise typer.BadParameter("Must be a positive number of seconds")
    return seconds


def get_real_id(collection: str, synthetic_id: int) -> EntityId:
    """Resolve a listed id, failing with a usage error when it was never listed."""
    try:
        return ID_MAP_REPO.get_real_id(collection, synthetic_id)
    except KeyError:
        raise typer.BadParameter(
            f"Unknown {collection.rstrip('s')} id {synthetic_id}; list {collection} first"
        )


def validate_status_filter(status: Optional[str]) -> Optional[str]:
    """Like validate_status, but ALL (the default) means no status filter."""
    if status is None or status.upper() == "ALL":
        return None
    return validate_status(status)


def get_listed_entity[T](
    collection: str, synthetic_id: int, fetch: Callable[[EntityId], T]
) -> T:
    """Fetch a listed entity, failing with a usage error when it no longer exists."""
    real_id = get_real_id(collection, synthetic_id)
    try:
        return fetch(real_id)
    except ValueError:
        raise typer.BadParameter(
            f"{collection.rstrip('s').capitalize()} {synthetic_id} no longer exists; "
            f"list {collection} again"
        )


def get_listed_entities[T](
    collection: str, synthetic_ids: list[int], fetch: Callable[[EntityId], T]
) -> list[T]:
    """Fetch every listed entity before anything is changed, so a bad id changes nothing."""
    return [
        get_listed_entity(collection, synthetic_id, fetch)
        for synthetic_id in synthetic_ids
    ]
