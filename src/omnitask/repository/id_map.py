# SPDX-License-Identifier: MIT

from typing import Optional, TypeIs, cast, get_args

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from omnitask import configuration
from omnitask.model.entity_id import EntityId
from omnitask.model.id_map import EntityCollection, IdMap, IdMapDict
from omnitask.template.id_map import get_id_map_template

ENTITY_COLLECTIONS = get_args(EntityCollection)


class IdMapRepository:
    def __init__(self) -> None:
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        self._id_map = get_id_map_template()
        if not configuration.DATA_ID_MAP_PATH.is_file():
            return
        try:
            loaded = load(configuration.DATA_ID_MAP_PATH.read_text(), Loader=Loader)
        except YAMLError:
            return
        if isinstance(loaded, dict):
            for collection in ENTITY_COLLECTIONS:
                if collection in loaded:
                    self._id_map[collection] = loaded[collection]  # type: ignore[literal-required]

    def __save_data(self, id_map: IdMap) -> None:
        configuration.DATA_ID_MAP_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_ID_MAP_PATH.write_text(dump(id_map, Dumper=Dumper))

    def flush(self) -> bool:
        if self._id_map is not None and self.is_dirty:
            self.__save_data(self._id_map)
            self.is_dirty = False
            return True
        return False

    def clear_ids(self, collection: str) -> None:
        """Forget the synthetic ids of one collection, before it is listed again."""
        self.is_dirty = True
        if self.__narrow_to_collection(collection):
            id_map_dict = cast(IdMapDict, self.id_map)
            id_map_dict[collection] = {"synthetic_to_real": {}, "real_to_synthetic": {}}

    def associate_id(self, collection: str, entity_id: EntityId) -> int:
        """
        Create a new synthetic id to associate with an entity id
        """
        if self.__narrow_to_collection(collection):
            id_map_dict = cast(IdMapDict, self.id_map)
            if entity_id in id_map_dict[collection]["real_to_synthetic"].keys():
                return id_map_dict[collection]["real_to_synthetic"][entity_id]

            self.is_dirty = True
            next_id = len(id_map_dict[collection]["real_to_synthetic"].keys()) + 1
            id_map_dict[collection]["real_to_synthetic"][entity_id] = next_id
            id_map_dict[collection]["synthetic_to_real"][next_id] = entity_id

            return next_id
        raise TypeError(
            f"{IdMapRepository.associate_id.__name__}: expected EntityCollection literals"
        )

    def get_real_id(self, collection: str, synthetic_id: int) -> EntityId:
        """
        Get the entity id associated with a synthetic id

        Raises:
            KeyError: if the synthetic id has not been shown in a listing
        """
        if self.__narrow_to_collection(collection):
            id_map_dict = cast(IdMapDict, self.id_map)
            return id_map_dict[collection]["synthetic_to_real"][synthetic_id]
        raise TypeError(
            f"{IdMapRepository.get_real_id.__name__}: expected EntityCollection literals"
        )

    def __narrow_to_collection(self, collection: str) -> TypeIs[EntityCollection]:
        return collection in ENTITY_COLLECTIONS


ID_MAP_REPO = IdMapRepository()
