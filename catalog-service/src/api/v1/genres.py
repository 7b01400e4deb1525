from fastapi import APIRouter, Depends, Query

from api.deps import get_page
from models.common import PageRequest
from models.genre import Genre, GenresListResponse
from services.genre import GenreService, get_genre_service


router = APIRouter()


@router.get(
        "/search",
        response_model=GenresListResponse,
        summary="Поиск жанров"
)
async def search_genres(
        q: str = Query("", description="Строка поиска"),
        genre_service: GenreService = Depends(get_genre_service),
) -> GenresListResponse:
    return await genre_service.search(q)


@router.get(
        "",
        response_model=GenresListResponse,
        summary="Список жанров"
)
async def list_genres(
        page: PageRequest = Depends(get_page),
        genre_service: GenreService = Depends(get_genre_service),
) -> GenresListResponse:
    return await genre_service.get_all(page)


@router.get(
        "/{genre_id}",
        response_model=Genre,
        summary="Данные по конкретному жанру"
)
async def genre_details(
    genre_id: str,
    genre_service: GenreService = Depends(get_genre_service),
) -> Genre:
    return await genre_service.get_by_id(genre_id)
