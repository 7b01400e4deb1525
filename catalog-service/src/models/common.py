from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_PAGE_SIZE = 100


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_number: int = Field(1, ge=1)
    page_size: int = Field(MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


class ErrorResponse(BaseModel):
    message: str
