import asyncio
import logging
from typing import List, Optional, Set, Tuple

from core.config import Index
from core.exceptions import CatalogError
from db.storage import AbstractDataStorage, Hit
from models.common import PageRequest
from models.film import FilmworkSummary
from models.person import Person, RoleKind
from repositories.base import ElasticRepository
from repositories import mappers
from repositories.queries import build_person_filmworks_query, build_person_search

logger = logging.getLogger(__name__)

PERSON_IDENTITY_FIELDS = ("id", "full_name")
DEFAULT_MAX_CONCURRENCY = 10


class PersonRepository(ElasticRepository):
    """Персоны и их участие в фильмах.

    Индекс persons хранит только id и имя. Роли и список фильмов
    собираются по вложенным коллекциям actors/directors/writers индекса movies.
    """
    index = Index.persons
    kind = "person"

    def __init__(self, storage: AbstractDataStorage, max_concurrency: int = DEFAULT_MAX_CONCURRENCY):
        super().__init__(storage)
        self.max_concurrency = max_concurrency

    async def get_by_id(self, person_id: str) -> Person:
        hit = await self._get_hit(person_id, PERSON_IDENTITY_FIELDS)
        identity = mappers.to_person_identity(hit)
        roles, filmwork_ids = await self.roles_and_filmwork_ids(identity[0])
        return mappers.to_person(identity, roles, filmwork_ids)

    async def get_all(self, page: PageRequest) -> List[Person]:
        hits = await self._page_hits(page)
        return await self._aggregate(hits)

    async def search(self, query: str, limit: int) -> List[Person]:
        hits = await self._search(build_person_search(query, limit))
        return await self._aggregate(hits)

    async def filmworks(self, person_id: str) -> List[FilmworkSummary]:
        """Фильмы персоны по убыванию рейтинга.

        Не больше PERSON_FILMWORKS_LIMIT штук: у персоны с большим числом работ
        список молча усекается, теряются фильмы с низким рейтингом.
        """
        hits = await self._search(build_person_filmworks_query(person_id), Index.movies)
        return [mappers.to_filmwork_summary(hit) for hit in hits]

    async def roles_and_filmwork_ids(self, person_id: str) -> Tuple[Set[RoleKind], Tuple[str, ...]]:
        # отдельный запрос, а не результат filmworks(): нужна другая проекция
        # (вложенные коллекции вместо title/rating) и порядок выдачи ES, а не по рейтингу
        hits = await self._search(build_person_filmworks_query(person_id, with_roles=True), Index.movies)
        return mappers.roles_and_filmwork_ids(hits, person_id)

    async def _aggregate(self, hits: List[Hit]) -> List[Person]:
        """Достраивает роли для каждого хита списка.

        Хит, для которого агрегация не удалась, выбрасывается из выдачи:
        для списков частичный результат лучше полного отказа.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def build(hit: Hit) -> Optional[Person]:
            try:
                identity = mappers.to_person_identity(hit)
                async with semaphore:
                    roles, filmwork_ids = await self.roles_and_filmwork_ids(identity[0])
                return mappers.to_person(identity, roles, filmwork_ids)
            except CatalogError as exc:
                logger.warning("person %s skipped: %s", hit.get("_id"), exc)
                return None

        tasks = [asyncio.ensure_future(build(hit)) for hit in hits]
        try:
            persons = await asyncio.gather(*tasks)
        except BaseException:
            # ни один подзапрос не переживает вызывающего
            for task in tasks:
                task.cancel()
            raise
        return [person for person in persons if person is not None]
