"""In-memory замена AsyncElasticsearch для тестов.

Понимает ровно то подмножество DSL, которое строит сервис: match_all,
multi_match (точное совпадение слов, без нечёткости), bool.should,
nested по <path>.id, from/size, sort и _source. Ошибки - настоящие
исключения клиента elasticsearch.
"""
import asyncio
import copy
import re
from typing import Any, Callable, Dict, List, Optional

from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig
from elasticsearch import ApiError, ConnectionError as EsConnectionError, NotFoundError

Predicate = Callable[[str, str, Dict[str, Any]], bool]

# index.max_result_window по умолчанию
MAX_RESULT_WINDOW = 10000


def _meta(status: int) -> ApiResponseMeta:
    return ApiResponseMeta(
        status=status,
        http_version="1.1",
        headers=HttpHeaders(),
        duration=0.0,
        node=NodeConfig("http", "localhost", 9200),
    )


def not_found_error(index: str, doc_id: Optional[str] = None) -> NotFoundError:
    if doc_id is None:
        body = {"error": {"type": "index_not_found_exception", "reason": f"no such index [{index}]"}, "status": 404}
    else:
        body = {"_index": index, "_id": doc_id, "found": False}
    return NotFoundError("not_found", _meta(404), body)


def api_error(status: int = 500, reason: str = "boom") -> ApiError:
    body = {"error": {"type": "search_phase_execution_exception", "reason": reason}, "status": status}
    return ApiError("search_phase_execution_exception", _meta(status), body)


def connection_error() -> EsConnectionError:
    return EsConnectionError("Connection refused")


def _tokens(value: Any) -> List[str]:
    return re.findall(r"\w+", str(value or "").lower())


class FakeElasticsearch:
    def __init__(self, documents: Dict[str, List[Dict[str, Any]]], delay: float = 0.0):
        # порядок вставки = порядок выдачи "движка" при равном score
        self.indices = {
            index: {doc["id"]: copy.deepcopy(doc) for doc in docs}
            for index, docs in documents.items()
        }
        self.delay = delay
        self.calls: List[tuple] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._failures: List[tuple] = []
        # индексы с отключённым _source: get отдаёт только метаданные
        self.source_disabled: set = set()

    def fail_when(self, predicate: Predicate, error: Exception) -> None:
        """predicate(method, index, payload) -> True: вызов падает с error."""
        self._failures.append((predicate, error))

    def searches(self, index: Optional[str] = None) -> List[Dict[str, Any]]:
        return [body for method, idx, body in self.calls if method == "search" and index in (None, idx)]

    async def get(self, index: str, id: str, source_includes: Optional[List[str]] = None, **kwargs):
        payload = {"id": id}
        await self._enter("get", index, payload)
        try:
            docs = self.indices.get(index)
            if docs is None or id not in docs:
                raise not_found_error(index, id)
            doc = {"_index": index, "_id": id, "found": True}
            if index not in self.source_disabled:
                doc["_source"] = self._project(docs[id], source_includes)
            return doc
        finally:
            self.in_flight -= 1

    async def search(self, index: str, query=None, from_=None, size=None, sort=None, source_includes=None, **kwargs):
        # запоминаем в виде тела запроса, как его строит сервис
        body = {"query": query}
        if from_ is not None:
            body["from"] = from_
        if size is not None:
            body["size"] = size
        if sort is not None:
            body["sort"] = sort
        if source_includes is not None:
            body["_source"] = source_includes
        await self._enter("search", index, body)
        try:
            docs = self.indices.get(index)
            if docs is None:
                raise not_found_error(index)
            if body.get("from", 0) + body.get("size", 10) > MAX_RESULT_WINDOW:
                raise api_error(400, "Result window is too large, from + size must be less than or equal to: [10000]")
            query = body["query"] or {"match_all": {}}
            scored = []
            for doc_id, doc in docs.items():
                score = self._score(query, doc)
                if score > 0:
                    scored.append((score, doc_id, doc))
            scored = self._sort(scored, body.get("sort"), query)
            start = body.get("from", 0)
            page = scored[start:start + body.get("size", 10)]
            return {
                "hits": {
                    "total": {"value": len(scored), "relation": "eq"},
                    "hits": [
                        {
                            "_index": index,
                            "_id": doc_id,
                            "_score": score,
                            "_source": self._project(doc, body.get("_source")),
                        }
                        for score, doc_id, doc in page
                    ],
                }
            }
        finally:
            self.in_flight -= 1

    async def close(self) -> None:
        return None

    async def _enter(self, method: str, index: str, payload: Dict[str, Any]) -> None:
        self.calls.append((method, index, copy.deepcopy(payload)))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            for predicate, error in self._failures:
                if predicate(method, index, payload):
                    raise error
        except BaseException:
            self.in_flight -= 1
            raise

    @staticmethod
    def _project(doc: Dict[str, Any], fields: Optional[List[str]]) -> Dict[str, Any]:
        if not fields:
            return copy.deepcopy(doc)
        return {key: copy.deepcopy(value) for key, value in doc.items() if key in fields}

    def _score(self, query: Dict[str, Any], doc: Dict[str, Any]) -> float:
        if "match_all" in query:
            return 1.0
        if "multi_match" in query:
            return self._multi_match(query["multi_match"], doc)
        if "bool" in query:
            return sum(self._score(clause, doc) for clause in query["bool"].get("should", []))
        if "nested" in query:
            path = query["nested"]["path"]
            (field, value), = query["nested"]["query"]["match"].items()
            key = field[len(path) + 1:]
            entries = doc.get(path) or []
            return 1.0 if any(entry.get(key) == value for entry in entries) else 0.0
        if "match" in query:
            (field, value), = query["match"].items()
            return 1.0 if doc.get(field) == value else 0.0
        raise AssertionError(f"unsupported query: {query}")

    @staticmethod
    def _multi_match(params: Dict[str, Any], doc: Dict[str, Any]) -> float:
        terms = _tokens(params["query"])
        words = set()
        for field in params["fields"]:
            words.update(_tokens(doc.get(field.split(".")[0])))
        matched = [term for term in terms if term in words]
        if params.get("operator") == "and" and len(matched) != len(terms):
            return 0.0
        return float(len(matched))

    @staticmethod
    def _sort(scored: list, sort: Optional[list], query: Dict[str, Any]) -> list:
        if not sort:
            if "match_all" in query:
                return scored
            sort = [{"_score": {"order": "desc"}}]
        # list.sort стабилен: применяем ключи от последнего к первому
        for clause in reversed(sort):
            (field, options), = clause.items()
            reverse = options.get("order", "asc") == "desc"
            if field == "_score":
                scored.sort(key=lambda item: item[0], reverse=reverse)
            else:
                scored.sort(key=lambda item: item[2].get(field) or 0, reverse=reverse)
        return scored
