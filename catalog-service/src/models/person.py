from enum import Enum
from typing import FrozenSet, List, Tuple

from pydantic import BaseModel, ConfigDict, field_serializer


class RoleKind(str, Enum):
    actor = "actor"
    director = "director"
    writer = "writer"


# имя вложенной коллекции в документе фильма -> роль персоны
ROLE_PATHS = {
    "actors": RoleKind.actor,
    "directors": RoleKind.director,
    "writers": RoleKind.writer,
}


class Person(BaseModel):
    """Персона.

    roles и filmwork_ids не хранятся в индексе persons: они вычисляются
    по вложенным коллекциям документов фильмов.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    roles: FrozenSet[RoleKind] = frozenset()
    filmwork_ids: Tuple[str, ...] = ()

    @field_serializer("roles")
    def serialize_roles(self, roles: FrozenSet[RoleKind]) -> List[str]:
        return [role.value for role in RoleKind if role in roles]


PersonsListResponse = List[Person]
