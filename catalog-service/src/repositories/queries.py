"""Построение тел запросов к ES.

Запросы собираются только как структуры данных: пользовательский текст
никогда не подставляется в строку, экранирование не требуется.
Функции тотальны, проверка limit/size/page_number - забота вызывающего.
"""
from typing import Any, Dict, Sequence

from core.policy import FUZZINESS, PERSON_FILMWORKS_LIMIT, PERSON_SEARCH_FIELDS
from models.person import ROLE_PATHS

Query = Dict[str, Any]

FILMWORK_SUMMARY_SOURCE = ["id", "title", "rating"]
FILMWORK_ROLES_SOURCE = ["id", *ROLE_PATHS]


def _match_all(size: int) -> Query:
    return {"query": {"match_all": {}}, "size": size}


def build_get_all(offset: int, size: int) -> Query:
    return {
        "query": {"match_all": {}},
        "from": offset,
        "size": size,
    }


def build_fuzzy_search(text: str, fields: Sequence[str], limit: int) -> Query:
    if not text:
        return _match_all(limit)
    return {
        "query": {
            "multi_match": {
                "query": text,
                "fields": list(fields),
                "type": "best_fields",
                "fuzziness": FUZZINESS,
            }
        },
        "size": limit,
    }


def _nested_person_match(path: str, person_id: str) -> Query:
    return {
        "nested": {
            "path": path,
            "query": {"match": {f"{path}.id": person_id}},
        }
    }


def build_person_filmworks_query(person_id: str, *, with_roles: bool = False) -> Query:
    """Фильмы, где персона есть среди actors, directors или writers (OR).

    Одна и та же структура запроса используется для двух проекций:
    - список фильмов персоны: id/title/rating, сортировка по рейтингу;
    - вычисление ролей: id и три вложенные коллекции, порядок выдачи ES.
    """
    body: Query = {
        "query": {
            "bool": {
                "should": [_nested_person_match(path, person_id) for path in ROLE_PATHS],
            }
        },
        "size": PERSON_FILMWORKS_LIMIT,
    }
    if with_roles:
        body["_source"] = list(FILMWORK_ROLES_SOURCE)
    else:
        body["_source"] = list(FILMWORK_SUMMARY_SOURCE)
        body["sort"] = [{"rating": {"order": "desc"}}]
    return body


def build_person_search(text: str, limit: int) -> Query:
    # operator=and: при запросе из нескольких слов в имени должны быть все слова
    if not text:
        return _match_all(limit)
    return {
        "query": {
            "multi_match": {
                "query": text,
                "fields": list(PERSON_SEARCH_FIELDS),
                "operator": "and",
                "type": "best_fields",
            }
        },
        "size": limit,
        "sort": [{"_score": {"order": "desc"}}],
    }
