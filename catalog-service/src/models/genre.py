from pydantic import BaseModel, ConfigDict
from typing import List


class Genre(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    description: str = ""


GenresListResponse = List[Genre]
