from functools import lru_cache
from typing import List

from elasticsearch import AsyncElasticsearch
from fastapi import Depends

from core.exceptions import error_context
from core.policy import SEARCH_LIMIT
from db.elastic import get_elastic
from db.storage import ElasticDataStorage
from models.common import PageRequest
from models.film import Filmwork, FilmworkSummary
from repositories.film import FilmworkRepository


# FilmworkService - шов между транспортом и репозиторием.
# Бизнес-логики тут нет: только контекст к ошибкам.
class FilmworkService:
    def __init__(self, repository: FilmworkRepository):
        self.repository = repository

    async def get_by_id(self, filmwork_id: str) -> Filmwork:
        with error_context("failed to get filmwork"):
            return await self.repository.get_by_id(filmwork_id)

    async def get_all(self, page: PageRequest) -> List[FilmworkSummary]:
        with error_context("failed to get filmworks"):
            return await self.repository.get_all(page)

    async def search(self, query: str, limit: int = SEARCH_LIMIT) -> List[FilmworkSummary]:
        with error_context("failed to search filmworks"):
            return await self.repository.search(query, limit)


@lru_cache()
def get_film_service(
        elastic: AsyncElasticsearch = Depends(get_elastic),
) -> FilmworkService:
    return FilmworkService(FilmworkRepository(ElasticDataStorage(elastic)))
