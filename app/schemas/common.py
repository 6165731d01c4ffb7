import math
from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Accepts either on input."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    message: str
    data: T | None = None


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class PaginatedResponse(ApiResponse[list[T]], Generic[T]):
    pagination: Pagination


def paginate(items: list, page: int, limit: int) -> tuple[list, Pagination]:
    start = (page - 1) * limit
    pagination = Pagination(
        page=page,
        limit=limit,
        total=len(items),
        total_pages=math.ceil(len(items) / limit) if limit else 0,
    )
    return items[start:start + limit], pagination
