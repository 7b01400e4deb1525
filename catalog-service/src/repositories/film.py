from typing import List

from core.config import Index
from core.policy import FILMWORK_SEARCH_FIELDS
from models.common import PageRequest
from models.film import Filmwork, FilmworkSummary
from repositories.base import ElasticRepository
from repositories.mappers import to_filmwork, to_filmwork_summary
from repositories.queries import build_fuzzy_search


class FilmworkRepository(ElasticRepository):
    index = Index.movies
    kind = "filmwork"

    async def get_by_id(self, filmwork_id: str) -> Filmwork:
        return to_filmwork(await self._get_hit(filmwork_id))

    async def get_all(self, page: PageRequest) -> List[FilmworkSummary]:
        hits = await self._page_hits(page)
        return [to_filmwork_summary(hit) for hit in hits]

    async def search(self, query: str, limit: int) -> List[FilmworkSummary]:
        # пустой запрос - не пустой результат, а первые limit документов индекса
        hits = await self._search(build_fuzzy_search(query, FILMWORK_SEARCH_FIELDS, limit))
        return [to_filmwork_summary(hit) for hit in hits]
