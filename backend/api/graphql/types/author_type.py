from __future__ import annotations
from typing import TYPE_CHECKING, Annotated, Optional

import strawberry

from backend.api.schemas.authors_schema import Author
from backend.api.services.book_service import BookService

if TYPE_CHECKING:
    from backend.api.graphql.types.book_type import BookType


@strawberry.type(name="Author")
class AuthorType:
    id: int
    name: str

    @strawberry.field
    def books(
        self, info: strawberry.types.Info
    ) -> Optional[list[Optional[Annotated["BookType", strawberry.lazy("backend.api.graphql.types.book_type")]]]]:
        from backend.api.graphql.types.book_type import BookType

        service = BookService(info.context.store)
        return [BookType.from_schema(b) for b in service.get_books_by_author(self.id)]

    @classmethod
    def from_schema(cls, author: Author) -> AuthorType:
        return cls(id=author.id, name=author.name)
