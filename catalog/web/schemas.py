"""
Schemas de reponse propres a la couche HTTP.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from catalog.core.value_objects import Page

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """Page serialisee : contenu et metadonnees de pagination."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool

    @classmethod
    def from_page(cls, page: Page[T]) -> "PageResponse[T]":
        return cls(
            content=list(page.items),
            page=page.page,
            size=page.size,
            total_elements=page.total,
            total_pages=page.total_pages,
            first=page.is_first,
            last=page.is_last,
        )


class ErrorResponse(BaseModel):
    """Corps des reponses d'erreur du domaine."""

    error: str
    message: str
    path: str
