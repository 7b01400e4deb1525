from functools import lru_cache
from typing import List

from elasticsearch import AsyncElasticsearch
from fastapi import Depends

from core.exceptions import error_context
from core.policy import SEARCH_LIMIT
from db.elastic import get_elastic
from db.storage import ElasticDataStorage
from models.common import PageRequest
from models.genre import Genre
from repositories.genre import GenreRepository


class GenreService:
    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def get_by_id(self, genre_id: str) -> Genre:
        with error_context("failed to get genre"):
            return await self.repository.get_by_id(genre_id)

    async def get_all(self, page: PageRequest) -> List[Genre]:
        with error_context("failed to get genres"):
            return await self.repository.get_all(page)

    async def search(self, query: str, limit: int = SEARCH_LIMIT) -> List[Genre]:
        with error_context("failed to search genres"):
            return await self.repository.search(query, limit)


@lru_cache()
def get_genre_service(
        elastic: AsyncElasticsearch = Depends(get_elastic),
) -> GenreService:
    return GenreService(GenreRepository(ElasticDataStorage(elastic)))
