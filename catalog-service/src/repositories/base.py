from typing import Any, ClassVar, Dict, List, Optional, Sequence

from core.config import Index
from core.exceptions import EntityNotFound
from core.policy import page_window
from db.storage import AbstractDataStorage, Hit
from models.common import PageRequest
from repositories.queries import build_get_all


class ElasticRepository:
    index: ClassVar[Index]
    kind: ClassVar[str]

    def __init__(self, storage: AbstractDataStorage):
        self.storage = storage

    async def _get_hit(self, entity_id: str, fields: Optional[Sequence[str]] = None) -> Hit:
        hit = await self.storage.get(self.index, entity_id, fields)
        if hit is None:
            raise EntityNotFound(self.kind, entity_id)
        return hit

    async def _search(self, body: Dict[str, Any], index: Optional[Index] = None) -> List[Hit]:
        return await self.storage.search(index or self.index, body)

    async def _page_hits(self, page: PageRequest) -> List[Hit]:
        # за окном выдачи ES страница пуста, в движок не ходим
        window = page_window(page)
        if window is None:
            return []
        return await self._search(build_get_all(*window))
