from fastapi import APIRouter, Depends, Query

from api.deps import get_page
from models.common import PageRequest
from models.film import FilmworksListResponse
from models.person import Person, PersonsListResponse
from services.person import PersonService, get_person_service

# Объект router, в котором регистрируем обработчики
router = APIRouter()

@router.get(
        "/search",
        response_model=PersonsListResponse,
        summary="Поиск персоны",
        description="Ищет по полному имени: в имени должны быть все слова запроса."
)
async def search_persons(
    q: str = Query("", description="Строка поиска"),
    person_service: PersonService = Depends(get_person_service),
) -> PersonsListResponse:
    return await person_service.search(q)

@router.get(
        "",
        response_model=PersonsListResponse,
        summary="Список персон с ролями"
)
async def list_persons(
    page: PageRequest = Depends(get_page),
    person_service: PersonService = Depends(get_person_service),
) -> PersonsListResponse:
    return await person_service.get_all(page)

@router.get(
    "/{person_id}",
    response_model=Person,
    summary="Детальная карточка персоны"
)
async def person_details(
    person_id: str,
    person_service: PersonService = Depends(get_person_service),
) -> Person:
    return await person_service.get_by_id(person_id)

@router.get(
    "/{person_id}/filmworks",
    response_model=FilmworksListResponse,
    summary="Фильмы персоны",
    description="Возвращает до 1000 фильмов с id, title и rating по убыванию рейтинга."
)
async def person_filmworks(
    person_id: str,
    person_service: PersonService = Depends(get_person_service)
) -> FilmworksListResponse:
    return await person_service.get_filmworks(person_id)
