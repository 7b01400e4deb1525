from functools import lru_cache
from typing import List

from elasticsearch import AsyncElasticsearch
from fastapi import Depends

from core.config import settings
from core.exceptions import error_context
from core.policy import SEARCH_LIMIT
from db.elastic import get_elastic
from db.storage import ElasticDataStorage
from models.common import PageRequest
from models.film import FilmworkSummary
from models.person import Person
from repositories.person import PersonRepository


class PersonService:
    def __init__(self, repository: PersonRepository):
        self.repository = repository

    async def get_by_id(self, person_id: str) -> Person:
        with error_context("failed to get person"):
            return await self.repository.get_by_id(person_id)

    async def get_all(self, page: PageRequest) -> List[Person]:
        with error_context("failed to get persons"):
            return await self.repository.get_all(page)

    async def search(self, query: str, limit: int = SEARCH_LIMIT) -> List[Person]:
        with error_context("failed to search persons"):
            return await self.repository.search(query, limit)

    async def get_filmworks(self, person_id: str) -> List[FilmworkSummary]:
        with error_context("failed to get person filmworks"):
            return await self.repository.filmworks(person_id)


@lru_cache()
def get_person_service(
        elastic: AsyncElasticsearch = Depends(get_elastic),
) -> PersonService:
    repository = PersonRepository(ElasticDataStorage(elastic), max_concurrency=settings.es.max_concurrency)
    return PersonService(repository)
