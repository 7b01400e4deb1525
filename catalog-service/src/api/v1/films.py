from fastapi import APIRouter, Depends, Query

from api.deps import get_page
from models.common import PageRequest
from models.film import Filmwork, FilmworksListResponse
from services.film import FilmworkService, get_film_service


# Объект router, в котором регистрируем обработчики
router = APIRouter()


@router.get(
    "/search",
    response_model=FilmworksListResponse,
    summary="Поиск кинопроизведений",
    description="Нечёткий полнотекстовый поиск по названию и описанию. Пустой запрос возвращает первые записи индекса.",
    response_description="Название и рейтинг фильма",
)
async def search_filmworks(
    q: str = Query("", description="Строка поиска"),
    film_service: FilmworkService = Depends(get_film_service),
) -> FilmworksListResponse:
    return await film_service.search(q)


@router.get(
    "/{filmwork_id}",
    response_model=Filmwork,
    summary="Детальная информация по фильму.",
)
async def filmwork_details(
    filmwork_id: str,
    film_service: FilmworkService = Depends(get_film_service),
) -> Filmwork:
    return await film_service.get_by_id(filmwork_id)


@router.get(
    "",
    response_model=FilmworksListResponse,
    summary="Список фильмов постранично.",
)
async def list_filmworks(
    page: PageRequest = Depends(get_page),
    film_service: FilmworkService = Depends(get_film_service),
) -> FilmworksListResponse:
    return await film_service.get_all(page)
