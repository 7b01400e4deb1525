"""Общие правила пагинации и поиска.

Разбор page_number/page_size выполняется до любого обращения к ES:
некорректный ввод сразу превращается в ParamValidationError.
"""
from typing import Optional, Tuple

from core.exceptions import ParamValidationError
from models.common import MAX_PAGE_SIZE, PageRequest

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = MAX_PAGE_SIZE

# лимит поисковых эндпойнтов фиксирован, пользователь его не задаёт
SEARCH_LIMIT = 1000
# верхняя граница фильмов персоны: при большем числе работ список усекается
PERSON_FILMWORKS_LIMIT = 1000
# index.max_result_window по умолчанию: from + size дальше этой границы ES отвергает с 400.
# Страницы за окном пусты, последняя страница в окне обрезается по его краю.
MAX_RESULT_WINDOW = 10000

FUZZINESS = "AUTO"
FILMWORK_SEARCH_FIELDS = ("title", "description")
GENRE_SEARCH_FIELDS = ("name", "description")
PERSON_SEARCH_FIELDS = ("full_name", "full_name.raw")

_INVALID_FORMAT = "Неверный формат"


def _parse_int(field: str, raw: str | int | None) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ParamValidationError(field, _INVALID_FORMAT)


def parse_page_number(raw: str | int | None) -> int:
    value = _parse_int("page_number", raw)
    if value is None or value <= 0:
        return DEFAULT_PAGE_NUMBER
    return value


def parse_page_size(raw: str | int | None) -> int:
    value = _parse_int("page_size", raw)
    if value is None:
        return DEFAULT_PAGE_SIZE
    if value <= 0:
        raise ParamValidationError("page_size", _INVALID_FORMAT)
    return min(value, MAX_PAGE_SIZE)


def resolve_page(raw_number: str | int | None, raw_size: str | int | None) -> PageRequest:
    return PageRequest(
        page_number=parse_page_number(raw_number),
        page_size=parse_page_size(raw_size),
    )


def page_window(page: PageRequest) -> Optional[Tuple[int, int]]:
    """from и size страницы в пределах MAX_RESULT_WINDOW; None - страница целиком за окном."""
    if page.offset >= MAX_RESULT_WINDOW:
        return None
    return page.offset, min(page.page_size, MAX_RESULT_WINDOW - page.offset)
