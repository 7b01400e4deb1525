import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

import uvicorn
from elasticsearch import AsyncElasticsearch
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from api.v1 import films, genres, persons
from core.config import settings
from core.exceptions import CatalogError, DecodeError, EngineError, EntityNotFound, ParamValidationError
from core.logger import LOGGING
from db import elastic
from models.common import ErrorResponse

logger = logging.getLogger(__name__)


# код до yield выполняется при старте, после yield - при завершении
@asynccontextmanager
async def lifespan(_: FastAPI):
    elastic.es = AsyncElasticsearch(**settings.es.client_options())
    logger.info("elasticsearch client created for %s", settings.es.url)
    yield
    await elastic.es.close()
    logger.info("elasticsearch client closed")


app = FastAPI(
    # Конфигурируем название проекта. Оно будет отображаться в документации
    title=settings.pr.name,
    # Адрес документации в красивом интерфейсе
    docs_url='/api/openapi',
    # Адрес документации в формате OpenAPI
    openapi_url='/api/openapi.json',
    # Быстрый JSON-сериализатор, написанный на Rust
    default_response_class=ORJSONResponse,
    description="Информация о фильмах, жанрах и людях, участвовавших в создании произведения",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.http.cors_allow_origins,
    allow_methods=settings.http.cors_allow_methods,
    allow_headers=settings.http.cors_allow_headers,
)

ERROR_STATUSES = {
    EntityNotFound: HTTPStatus.NOT_FOUND,
    ParamValidationError: HTTPStatus.BAD_REQUEST,
    EngineError: HTTPStatus.INTERNAL_SERVER_ERROR,
    DecodeError: HTTPStatus.INTERNAL_SERVER_ERROR,
}

# описание тела ошибки для документации OpenAPI
ERROR_RESPONSES = {
    int(status): {"model": ErrorResponse} for status in set(ERROR_STATUSES.values())
}


# Ошибки каталога -> код ответа по классу ошибки
@app.exception_handler(CatalogError)
async def catalog_exception_handler(request: Request, exc: CatalogError):
    status = ERROR_STATUSES.get(type(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
    return ORJSONResponse(status_code=status, content={"message": str(exc)})


@app.get('/healthz', tags=['health'])
async def healthz() -> dict:
    return {"message": "ok"}


app.include_router(films.router, prefix='/api/v1/filmworks', tags=['filmworks'], responses=ERROR_RESPONSES)
app.include_router(persons.router, prefix='/api/v1/persons', tags=['persons'], responses=ERROR_RESPONSES)
app.include_router(genres.router, prefix='/api/v1/genres', tags=['genres'], responses=ERROR_RESPONSES)


if __name__ == '__main__':
    uvicorn.run(
        'main:app',
        host=settings.http.host,
        port=settings.http.port,
        log_config=LOGGING,
        log_level=logging.DEBUG,
    )
