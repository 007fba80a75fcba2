# SPDX-License-Identifier: MIT

import logging
import threading
from abc import ABC, abstractmethod
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

logger = logging.getLogger(__name__)

type Listener[T] = Callable[[list[T]], None]


class CollectionRepository[T](ABC):
    """
    A list of entities persisted as a single YAML document.

    The collection is loaded on first access. Every mutation writes the whole
    collection back and then notifies subscribers with a copy of the new
    state. Reads and writes fall back gracefully: an unreadable or malformed
    file is treated as absent and replaced by the seed collection, and a
    failed write is logged and dropped.
    """

    def __init__(self) -> None:
        self._entities: Optional[list[T]] = None
        self._listeners: list[Listener[T]] = []
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Held across a read-then-write that must not interleave with other writers."""
        return self._lock

    @property
    @abstractmethod
    def data_path(self) -> Path: ...

    @abstractmethod
    def _seed(self) -> list[T]: ...

    @abstractmethod
    def _convert_for_serialization(self, entity: T) -> dict[str, Any]: ...

    @abstractmethod
    def _convert_for_deserialization(self, raw: dict[str, Any]) -> T: ...

    @property
    def entities(self) -> list[T]:
        with self._lock:
            if self._entities is None:
                self.__load_data()
            if self._entities is None:
                raise ValueError()
            return self._entities

    def __load_data(self) -> None:
        entities = self.__read_entities()
        if entities is None:
            logger.info("Seeding %s with default entries", self.data_path.name)
            self._entities = self._seed()
            self.__save_data()
        else:
            self._entities = entities

    def __read_entities(self) -> Optional[list[T]]:
        if not self.data_path.is_file():
            return None
        try:
            raw = load(self.data_path.read_text(), Loader=Loader)
            if not isinstance(raw, list):
                raise ValueError(f"expected a list, got {type(raw).__name__}")
            entities: list[T] = []
            for raw_entity in raw:
                if not isinstance(raw_entity, dict):
                    raise ValueError(f"expected a mapping, got {raw_entity!r}")
                entities.append(self._convert_for_deserialization(raw_entity))
            return entities
        except (OSError, YAMLError, ValueError, TypeError, KeyError) as e:
            logger.warning("Ignoring unreadable %s: %s", self.data_path, e)
            return None

    def __save_data(self) -> None:
        if self._entities is None:
            return
        serializable = [
            self._convert_for_serialization(deepcopy(entity))
            for entity in self._entities
        ]
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            self.data_path.write_text(dump(serializable, Dumper=Dumper))
        except (OSError, YAMLError) as e:
            logger.warning("Could not save %s: %s", self.data_path, e)

    def _commit(self) -> None:
        """Persist the collection and notify subscribers. Call with the lock held."""
        self.__save_data()
        snapshot = deepcopy(self.entities)
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Collection listener failed for %s", self.data_path)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register a listener called after each change; returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def reload(self) -> None:
        """Drop the in-memory collection so the next access re-reads the file."""
        with self._lock:
            self._entities = None

    def _find_index(self, id: str) -> int:
        for index, entity in enumerate(self.entities):
            if entity["id"] == id:  # type: ignore[index]
                return index
        raise ValueError(f"No entry with id {id} in {self.data_path.name}")
