from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator


class CatalogError(Exception):
    """Базовая ошибка каталога.

    context - префикс операции ("failed to get person"), который добавляет
    сервисный слой. Класс ошибки при этом сохраняется, по нему транспорт
    выбирает код ответа.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: str | None = None

    def with_context(self, context: str) -> CatalogError:
        # copy.copy не подходит: он пересоздаёт исключение через cls(*self.args)
        wrapped = self.__class__.__new__(self.__class__)
        wrapped.__dict__.update(self.__dict__)
        wrapped.args = self.args
        wrapped.context = f"{context}: {self.context}" if self.context else context
        return wrapped

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class EntityNotFound(CatalogError):
    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind} with ID '{entity_id}' not found")
        self.kind = kind
        self.entity_id = entity_id


class EngineError(CatalogError):
    """ES отклонил запрос или недоступен. status_code=None - ответа не было вовсе."""

    def __init__(self, status_code: int | None, body: Any = None):
        if status_code is None:
            message = f"Elasticsearch request error: {body}"
        else:
            message = f"Elasticsearch error [{status_code}]: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(CatalogError):
    def __init__(self, kind: str, reason: str):
        super().__init__(f"response parsing error ({kind}): {reason}")
        self.kind = kind
        self.reason = reason


class ParamValidationError(CatalogError):
    def __init__(self, field: str, reason: str):
        super().__init__(f"{reason} {field}")
        self.field = field
        self.reason = reason


@contextmanager
def error_context(context: str) -> Iterator[None]:
    """Перевыбрасывает ошибки каталога с префиксом операции, не меняя их класс."""
    try:
        yield
    except CatalogError as exc:
        raise exc.with_context(context) from exc
