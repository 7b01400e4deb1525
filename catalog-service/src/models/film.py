
# Используем pydantic для упрощения работы при перегонке данных из json в объекты
from pydantic import BaseModel, ConfigDict
from typing import List, Tuple


class PersonRef(BaseModel):
    """Персона, вложенная в документ фильма (актёр, сценарист или режиссёр)."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""


class FilmworkSummary(BaseModel):
    """Краткая карточка для списков и поиска: только id, название и рейтинг."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    rating: float = 0.0


FilmworksListResponse = List[FilmworkSummary]


class Filmwork(FilmworkSummary):
    """Полная карточка фильма."""
    description: str = ""
    release_date: str = ""
    type: str = ""
    genres: Tuple[str, ...] = ()
    actors: Tuple[PersonRef, ...] = ()
    writers: Tuple[PersonRef, ...] = ()
    directors: Tuple[PersonRef, ...] = ()
