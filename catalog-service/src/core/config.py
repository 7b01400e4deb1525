import logging
from enum import Enum
from logging import config as logging_config

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.logger import LOGGING


class Index(str, Enum):
    """Имена индексов фиксированы и через окружение не переопределяются."""
    movies = "movies"
    genres = "genres"
    persons = "persons"


class ElasticsearchSettings(BaseSettings):
    """Настройки для подключения к Elasticsearch."""
    host: str = Field('localhost', validation_alias='ELASTIC_HOST')
    port: int = Field(9200, validation_alias='ELASTIC_PORT')
    protocol: str = Field('http', validation_alias='ELASTIC_SCHEMA')
    user: str | None = Field(None, validation_alias='ELASTIC_USER')
    password: str | None = Field(None, validation_alias='ELASTIC_PASSWORD')

    request_timeout: float = Field(10.0, gt=0, validation_alias='ELASTIC_REQUEST_TIMEOUT')
    # сколько подзапросов агрегации персон одновременно уходит в ES
    max_concurrency: int = Field(10, ge=1, validation_alias='ELASTIC_MAX_CONCURRENCY')

    @property
    def url(self) -> str:
        return f'{self.protocol}://{self.host}:{self.port}'

    def client_options(self) -> dict:
        options = {
            'hosts': [self.url],
            'request_timeout': self.request_timeout,
        }
        if self.user:
            options['basic_auth'] = (self.user, self.password or '')
        return options


class ProjectSettings(BaseSettings):
    """Текстовая информация о проекте"""
    name: str = Field('catalog-service', validation_alias='PROJECT_NAME')
    env: str = Field('dev', validation_alias='APP_ENV')


class HttpSettings(BaseSettings):
    """Настройки HTTP-сервера и CORS."""
    host: str = Field('0.0.0.0', validation_alias='HTTP_HOST')
    port: int = Field(8000, validation_alias='HTTP_PORT')

    cors_allow_origins: list[str] = ['*']
    cors_allow_methods: list[str] = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    cors_allow_headers: list[str] = ['Content-Type', 'Authorization']


class AppSettings(BaseSettings):
    """Основной класс с настройками приложения."""
    model_config = SettingsConfigDict(
        env_nested_delimiter='__',
        env_file_encoding='utf-8'
    )

    es: ElasticsearchSettings = Field(default_factory=ElasticsearchSettings)
    pr: ProjectSettings = Field(default_factory=ProjectSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)


try:
    settings = AppSettings()
except Exception as e:
    logging.error(f"Ошибка при загрузке конфигурации: {e}")
    raise

logging_config.dictConfig(LOGGING)

