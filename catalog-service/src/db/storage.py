import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from elasticsearch import ApiError, AsyncElasticsearch, NotFoundError, TransportError

from core.config import Index
from core.exceptions import EngineError

logger = logging.getLogger(__name__)

Hit = Dict[str, Any]


class AbstractDataStorage(ABC):
    """Непрозрачный клиент поискового движка.

    get возвращает None, если документа нет; любой другой сбой движка
    поднимается как EngineError.
    """

    @abstractmethod
    async def get(self, index: Index, doc_id: str, fields: Optional[Sequence[str]] = None) -> Optional[Hit]:
        ...

    @abstractmethod
    async def search(self, index: Index, body: Dict[str, Any]) -> List[Hit]:
        ...


class ElasticDataStorage(AbstractDataStorage):
    def __init__(self, es: AsyncElasticsearch):
        self._es = es

    async def get(self, index: Index, doc_id: str, fields: Optional[Sequence[str]] = None) -> Optional[Hit]:
        kwargs: Dict[str, Any] = {}
        if fields:
            kwargs["source_includes"] = list(fields)
        try:
            doc = await self._es.get(index=index.value, id=doc_id, **kwargs)
        except NotFoundError:
            logger.debug("document %s/%s not found", index.value, doc_id)
            return None
        except ApiError as exc:
            raise self._engine_error(index, exc.meta.status, exc.body) from exc
        except TransportError as exc:
            raise self._engine_error(index, None, str(exc)) from exc
        # без _source (отключён в маппинге) хит уходит дальше как есть, его отвергнет маппер
        return {"_id": doc.get("_id", doc_id), "_source": doc.get("_source")}

    async def search(self, index: Index, body: Dict[str, Any]) -> List[Hit]:
        try:
            resp = await self._es.search(index=index.value, **self._search_params(body))
        except ApiError as exc:
            raise self._engine_error(index, exc.meta.status, exc.body) from exc
        except TransportError as exc:
            raise self._engine_error(index, None, str(exc)) from exc
        return list(resp["hits"]["hits"])

    @staticmethod
    def _search_params(body: Dict[str, Any]) -> Dict[str, Any]:
        """Тело запроса -> именованные параметры клиента (from -> from_, _source -> source_includes)."""
        params = {key: value for key, value in body.items() if key not in ("from", "_source")}
        if "from" in body:
            params["from_"] = body["from"]
        if "_source" in body:
            params["source_includes"] = list(body["_source"])
        return params

    @staticmethod
    def _engine_error(index: Index, status: int | None, body: Any) -> EngineError:
        logger.error("elasticsearch request to '%s' failed, status=%s", index.value, status)
        return EngineError(status, body)
