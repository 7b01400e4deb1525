"""Преобразование хитов ES в сущности каталога.

Отсутствующие необязательные поля получают нулевое значение типа.
Документ без _source или с полем не того типа - DecodeError.
"""
from typing import Any, Dict, Iterable, Mapping, Set, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import DecodeError
from models.film import Filmwork, FilmworkSummary, PersonRef
from models.genre import Genre
from models.person import Person, ROLE_PATHS, RoleKind

M = TypeVar("M", bound=BaseModel)


def _source(hit: Mapping[str, Any], kind: str) -> Mapping[str, Any]:
    source = hit.get("_source") if isinstance(hit, Mapping) else None
    if not isinstance(source, Mapping):
        raise DecodeError(kind, "document has no _source object")
    return source


def _entity_id(hit: Mapping[str, Any], source: Mapping[str, Any]) -> Any:
    return source.get("id") or hit.get("_id") or ""


def _build(kind: str, model: Type[M], **data: Any) -> M:
    try:
        return model(**data)
    except PydanticValidationError as exc:
        raise DecodeError(kind, str(exc)) from exc


def _list_field(kind: str, source: Mapping[str, Any], field: str) -> list:
    value = source.get(field)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(kind, f"'{field}' must be a list")
    return value


def _person_refs(kind: str, source: Mapping[str, Any], field: str) -> Tuple[PersonRef, ...]:
    refs = []
    for entry in _list_field(kind, source, field):
        if not isinstance(entry, Mapping):
            raise DecodeError(kind, f"'{field}' entries must be objects")
        refs.append(_build(kind, PersonRef, id=entry.get("id") or "", name=entry.get("name") or ""))
    return tuple(refs)


def _genre_names(kind: str, source: Mapping[str, Any]) -> Tuple[str, ...]:
    names = []
    for entry in _list_field(kind, source, "genres"):
        # встречаются и строки, и объекты {id, name}
        if isinstance(entry, Mapping):
            entry = entry.get("name") or ""
        names.append(entry)
    return tuple(names)


def to_genre(hit: Mapping[str, Any]) -> Genre:
    source = _source(hit, "genre")
    return _build(
        "genre", Genre,
        id=_entity_id(hit, source),
        name=source.get("name") or "",
        description=source.get("description") or "",
    )


def to_filmwork_summary(hit: Mapping[str, Any]) -> FilmworkSummary:
    source = _source(hit, "filmwork")
    return _build(
        "filmwork", FilmworkSummary,
        id=_entity_id(hit, source),
        title=source.get("title") or "",
        rating=source.get("rating") or 0.0,
    )


def to_filmwork(hit: Mapping[str, Any]) -> Filmwork:
    kind = "filmwork"
    source = _source(hit, kind)
    return _build(
        kind, Filmwork,
        id=_entity_id(hit, source),
        title=source.get("title") or "",
        rating=source.get("rating") or 0.0,
        description=source.get("description") or "",
        release_date=source.get("release_date") or "",
        type=source.get("type") or "",
        genres=_genre_names(kind, source),
        actors=_person_refs(kind, source, "actors"),
        writers=_person_refs(kind, source, "writers"),
        directors=_person_refs(kind, source, "directors"),
    )


def to_person_identity(hit: Mapping[str, Any]) -> Tuple[str, str]:
    """id и полное имя из документа индекса persons."""
    source = _source(hit, "person")
    person_id = _entity_id(hit, source)
    name = source.get("full_name") or ""
    if not isinstance(person_id, str) or not isinstance(name, str):
        raise DecodeError("person", "'id' and 'full_name' must be strings")
    return person_id, name


def to_person(identity: Tuple[str, str], roles: Iterable[RoleKind], filmwork_ids: Iterable[str]) -> Person:
    person_id, name = identity
    return _build(
        "person", Person,
        id=person_id,
        name=name,
        roles=frozenset(roles),
        filmwork_ids=tuple(filmwork_ids),
    )


def filmwork_id(hit: Mapping[str, Any]) -> str:
    source = _source(hit, "filmwork")
    fid = _entity_id(hit, source)
    if not isinstance(fid, str):
        raise DecodeError("filmwork", "'id' must be a string")
    return fid


def credited_roles(hit: Mapping[str, Any], person_id: str) -> Set[RoleKind]:
    """Роли, в которых персона указана в документе фильма."""
    source = _source(hit, "filmwork")
    roles: Set[RoleKind] = set()
    for path, role in ROLE_PATHS.items():
        for entry in _list_field("filmwork", source, path):
            if isinstance(entry, Mapping) and entry.get("id") == person_id:
                roles.add(role)
                break
    return roles


def roles_and_filmwork_ids(hits: Iterable[Mapping[str, Any]], person_id: str) -> Tuple[Set[RoleKind], Tuple[str, ...]]:
    """Сводит роли и id фильмов персоны по хитам в порядке выдачи ES."""
    roles: Set[RoleKind] = set()
    seen: Dict[str, None] = {}
    for hit in hits:
        roles |= credited_roles(hit, person_id)
        seen.setdefault(filmwork_id(hit), None)
    return roles, tuple(seen)
