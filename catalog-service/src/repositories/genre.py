from typing import List

from core.config import Index
from core.policy import GENRE_SEARCH_FIELDS
from models.common import PageRequest
from models.genre import Genre
from repositories.base import ElasticRepository
from repositories.mappers import to_genre
from repositories.queries import build_fuzzy_search


class GenreRepository(ElasticRepository):
    index = Index.genres
    kind = "genre"

    async def get_by_id(self, genre_id: str) -> Genre:
        return to_genre(await self._get_hit(genre_id))

    async def get_all(self, page: PageRequest) -> List[Genre]:
        hits = await self._page_hits(page)
        return [to_genre(hit) for hit in hits]

    async def search(self, query: str, limit: int) -> List[Genre]:
        hits = await self._search(build_fuzzy_search(query, GENRE_SEARCH_FIELDS, limit))
        return [to_genre(hit) for hit in hits]
