from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Generic, List, TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for every request and response body: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PaginationMeta(CamelModel):
    total: int
    total_pages: int
    current_page: int
    limit: int


class Page(CamelModel, Generic[T]):
    data: List[T]
    pagination: PaginationMeta


class DataResponse(CamelModel, Generic[T]):
    data: T


class MessageResponse(CamelModel, Generic[T]):
    message: str
    data: T


class DeletedResponse(CamelModel):
    message: str
    deleted_id: int


class ImageOut(CamelModel):
    id: int
    url: str
