from fastapi import Query

from core.policy import resolve_page
from models.common import PageRequest


# Параметры принимаются строками: разбор и ограничение page_size делает policy,
# некорректный формат превращается в 400, а не в 422 от FastAPI
def get_page(
    page_number: str | None = Query(None, description="Номер страницы, по умолчанию 1"),
    page_size: str | None = Query(None, description="Размер страницы, не больше 100"),
) -> PageRequest:
    return resolve_page(page_number, page_size)
